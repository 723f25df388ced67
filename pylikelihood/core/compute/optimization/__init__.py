"""
Optimization utilities for pylikelihood.

Provides the derivative-free bounded minimizer used to locate the end
points of likelihood and confidence intervals.
"""

from pylikelihood.core.compute.optimization._brent import (
    MinimizeResult,
    minimize_bounded,
)

__all__ = [
    "MinimizeResult",
    "minimize_bounded",
]
