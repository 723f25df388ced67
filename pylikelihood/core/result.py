"""
Generic result container for all pylikelihood computations.

Every analysis returns its domain payload wrapped in a Result envelope so
that timing, solver diagnostics and non-fatal warnings travel the same way
for categorical, ANOVA and interval computations.

Design decisions:
    - Generic over parameter payload P
    - info dict for method metadata (solver iterations, degraded flags)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True): a result is never mutated after construction
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for support computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (supports, statistics, intervals)
        info: Structured metadata (analysis type, solver diagnostics)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=OneWaySupportParams(...),
        ...     info={'analysis': 'oneway', 'binomial': True},
        ...     timing={'total_seconds': 0.002},
        ...     method='support_oneway',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
