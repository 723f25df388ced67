"""
Exception hierarchy for pylikelihood.

All exceptions inherit from PyLikelihoodError so callers can catch any
library-specific error in one place. Validation failures are always fatal;
numerical non-convergence of the interval solver is reported on the result
and only raised as ConvergenceError when the caller asks for strict mode.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the parameter and the actual offending value
    - Never catch and re-raise with less information
"""


class PyLikelihoodError(Exception):
    """Base exception for all pylikelihood errors."""
    pass


class ValidationError(PyLikelihoodError):
    """
    Input validation failed.

    Raised when user-provided counts, probabilities, labels or options
    violate an invariant (negative counts, probabilities not summing to 1,
    too few categories, ...).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a table is not 2D, a vector is not 1D, or paired inputs
    (observed/expected, data/group, contrast/groups) differ in length.
    """
    pass


class NumericalError(PyLikelihoodError):
    """
    A statistic is undefined for otherwise valid data.

    For example, an ANOVA whose groups have zero within-group variance has
    no finite support value.
    """
    pass


class ConvergenceError(PyLikelihoodError):
    """
    The bounded minimizer failed to locate an interval bound.

    Only raised when the caller requests strict mode; by default the
    residual is reported on the interval and the result flagged as degraded.

    Attributes:
        iterations: Number of iterations completed
        final_change: Residual objective value at the returned point
        reason: Why convergence failed ('max_iterations' or 'residual')
        threshold: The residual threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
