"""
Likelihood-curve plot for the binomial (two-category) analysis.

Consumes a OneWaySupportSolution and draws, over the plot extent:
    - the likelihood ratio curve (or its log)
    - the MLE (dashed line)
    - the null probability (blue line)
    - the support interval (red line)

Requires matplotlib (``pip install pylikelihood[plot]``).
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pylikelihood.core.exceptions import ValidationError
from pylikelihood.categorical._likelihood import (
    likelihood_ratio,
    log_likelihood_ratio,
)
from pylikelihood.categorical.solution import OneWaySupportSolution


def plot_binomial_likelihood(
    solution: OneWaySupportSolution,
    *,
    log_scale: bool = False,
    n_points: int = 500,
    ax: Any = None,
) -> Any:
    """
    Plot the binomial likelihood curve with MLE, null and support interval.

    Args:
        solution: Result of support_oneway() with two categories
        log_scale: Plot the log likelihood ratio instead of the ratio
        n_points: Number of curve evaluation points
        ax: Existing matplotlib Axes, or None to create a figure

    Returns:
        The matplotlib Axes drawn on

    Raises:
        ValidationError: If the solution has no binomial part
    """
    import matplotlib.pyplot as plt

    b = solution.binomial
    if b is None:
        raise ValidationError(
            "plot_binomial_likelihood needs a two-category analysis"
        )

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    a, r, p = b.successes, b.failures, b.mle
    extent = b.plot_extent
    x = np.linspace(extent.lower, extent.upper, n_points)
    si = b.support_interval

    if log_scale:
        floor = extent.level
        ax.plot(x, log_likelihood_ratio(x, a, r, p), color="black")
        ax.plot([p, p], [floor, 0.0], linestyle="--", color="black")
        ax.plot(
            [b.null_p, b.null_p],
            [floor, max(floor, log_likelihood_ratio(b.null_p, a, r, p))],
            color="blue",
        )
        ax.plot([si.lower, si.upper], [si.goal, si.goal], color="red", linewidth=1)
        ax.set_ylim(floor, 0.0)
        ax.set_ylabel("Log Likelihood")
    else:
        ax.plot(x, likelihood_ratio(x, a, r, p), color="black")
        ax.plot([p, p], [0.0, 1.0], linestyle="--", color="black")
        ax.plot(
            [b.null_p, b.null_p],
            [0.0, likelihood_ratio(b.null_p, a, r, p)],
            color="blue",
        )
        level = float(np.exp(si.goal))
        ax.plot([si.lower, si.upper], [level, level], color="red", linewidth=1)
        ax.set_ylabel("Likelihood")

    ax.set_xlim(extent.lower, extent.upper)
    ax.set_xlabel("Probability")
    return ax
