"""
Tolerance settings for the profile-likelihood interval solver.

The bracket-width tolerance mirrors R's optimize(tol=) argument, which the
published likelihood tables were produced with (default 1e-4). The residual
threshold is the floor on the squared residual a located bound may keep
before it is reported as degraded; steep likelihoods are allowed the
larger (slope * tol)^2.
"""

from dataclasses import dataclass

from pylikelihood.core.exceptions import ValidationError


@dataclass(frozen=True)
class SolverTolerance:
    """Tolerance specification for the bounded minimizer."""
    tol: float = 1e-4
    max_iter: int = 500
    residual_threshold: float = 1e-3

    def __post_init__(self) -> None:
        if not (self.tol > 0):
            raise ValidationError(f"tol must be > 0, got {self.tol}")
        if self.max_iter < 1:
            raise ValidationError(f"max_iter must be >= 1, got {self.max_iter}")
        if not (self.residual_threshold > 0):
            raise ValidationError(
                f"residual_threshold must be > 0, got {self.residual_threshold}"
            )


DEFAULT_SOLVER_TOLERANCE = SolverTolerance()

# Absolute tolerance on sum(expected_p) == 1
PROBABILITY_SUM_ATOL = 1e-8
