"""
Binomial profile log-likelihood.

The log-likelihood ratio of a success probability x against the MLE p for
`a` successes and `r` failures is

    a*ln(x) + r*ln(1 - x) - (a*ln(p) + r*ln(1 - p))

It is 0 at the MLE and negative elsewhere. The interval solver minimizes
its squared deviation from a target level; the plotting adapter draws it
(or its exponential) directly.

x must lie strictly inside (0, 1).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _max_log_likelihood(a: float, r: float, p: float) -> float:
    return a * np.log(p) + r * np.log1p(-p)


def log_likelihood_ratio(
    x: ArrayLike, a: float, r: float, p: float,
) -> float | NDArray[np.floating[Any]]:
    """Log-likelihood of x relative to the MLE p (vectorised over x)."""
    x = np.asarray(x, dtype=np.float64)
    value = a * np.log(x) + r * np.log1p(-x) - _max_log_likelihood(a, r, p)
    if value.ndim == 0:
        return float(value)
    return value


def likelihood_ratio(
    x: ArrayLike, a: float, r: float, p: float,
) -> float | NDArray[np.floating[Any]]:
    """Likelihood of x relative to the MLE p, in [0, 1]."""
    return np.exp(log_likelihood_ratio(x, a, r, p))


def profile_objective(x: float, a: float, r: float, p: float, goal: float) -> float:
    """
    Squared deviation of the log-likelihood ratio from `goal`.

    Zero exactly where the log-likelihood ratio equals `goal`; one such
    point lies on each side of the MLE when goal < 0.
    """
    dev = a * np.log(x) + r * np.log1p(-x) - _max_log_likelihood(a, r, p) - goal
    return float(dev * dev)
