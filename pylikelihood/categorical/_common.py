"""
Common data types for categorical support analyses.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


INTERVAL_KINDS = ("confidence", "support", "plot")


@dataclass(frozen=True)
class SupportInterval:
    """
    A pair of parameter values bracketing the MLE.

    Attributes:
        lower: Bound located on (0, mle)
        upper: Bound located on (mle, 1)
        kind: 'confidence', 'support' or 'plot'
        level: alpha for a confidence interval, support units for a
            support interval, the log-likelihood floor for a plot extent
        goal: Log-likelihood ratio (relative to the MLE) at both bounds
        lower_objective: Squared residual at the lower bound
        upper_objective: Squared residual at the upper bound
        lower_iterations: Minimizer iterations for the lower bound
        upper_iterations: Minimizer iterations for the upper bound
        converged: Both bounds located within the residual threshold
            before the iteration cap
    """
    lower: float
    upper: float
    kind: str
    level: float
    goal: float
    lower_objective: float
    upper_objective: float
    lower_iterations: int
    upper_iterations: int
    converged: bool

    @property
    def degraded(self) -> bool:
        return not self.converged

    @property
    def objectives(self) -> tuple[float, float]:
        return (self.lower_objective, self.upper_objective)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    def width(self) -> float:
        return self.upper - self.lower


@dataclass(frozen=True)
class BinomialParams:
    """
    Binomial (two-category) details of a one-way analysis.

    Everything the plotting adapter needs: the MLE, the null probability
    and the three interval families.
    """
    successes: float
    failures: float
    mle: float
    null_p: float
    support_interval: SupportInterval
    confidence_interval: SupportInterval
    plot_extent: SupportInterval


@dataclass(frozen=True)
class OneWaySupportParams:
    """
    Parameter payload for one-way categorical support.

    Attributes:
        support: Support for observed vs expected, corrected for df
        uncorrected_support: Support before the (df - 1)/2 correction
        df: Number of categories - 1
        observed: Observed counts
        expected_p: Expected probabilities (uniform when not supplied)
        expected: Expected counts, expected_p * n
        n: Total count
        too_good: Support for the variance of counts differing more than
            expected
        chi_sq: Pearson goodness-of-fit statistic
        p_value: p-value of chi_sq on df degrees of freedom
        lr_statistic: Likelihood ratio statistic G = 2 * uncorrected support
        lr_p_value: p-value of G on df degrees of freedom
        binomial: Binomial details when there are exactly two categories
    """
    support: float
    uncorrected_support: float
    df: int
    observed: NDArray[np.floating[Any]]
    expected_p: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    n: float
    too_good: float
    chi_sq: float
    p_value: float
    lr_statistic: float
    lr_p_value: float
    binomial: BinomialParams | None = None


@dataclass(frozen=True)
class TwoWaySupportParams:
    """
    Parameter payload for two-way contingency table support.

    Supports are natural-log likelihood ratios. Corrected values subtract
    (df - 1)/2 for the interaction and ((levels - 1) - 1)/2 for each main
    effect.
    """
    interaction_support: float
    interaction_support_uncorrected: float
    df: int
    rows_support: float
    rows_support_uncorrected: float
    df_rows: int
    cols_support: float
    cols_support_uncorrected: float
    df_cols: int
    total_support: float
    too_good: float
    observed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    n: float
    chi_sq: float
    p_value: float
    lr_statistic: float
    lr_p_value: float
    trend_support: float | None = None
    trend_chi_sq: float | None = None
    trend_p_value: float | None = None
