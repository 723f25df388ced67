"""
Core infrastructure for pylikelihood.

This module provides shared abstractions and utilities used by all
domain-specific submodules (categorical, anova, power).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Solver tolerances and the bounded minimizer
"""

from pylikelihood.core.result import Result
from pylikelihood.core.exceptions import (
    PyLikelihoodError,
    ValidationError,
    DimensionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLikelihoodError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ConvergenceError",
]
