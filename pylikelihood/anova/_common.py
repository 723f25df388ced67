"""
Common data types for ANOVA support.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (one term or residuals)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float
    f_value: float | None    # None for Residuals row
    p_value: float | None    # None for Residuals row


@dataclass(frozen=True)
class ContrastSupport:
    """
    Support and classical test for one contrast.

    Attributes:
        coefficients: Contrast coefficients in group order
        estimate: sum(c_i * mean_i)
        sum_sq: Sum of squares explained by the contrast
        f_value: Contrast F on (1, N - k) df
        p_value: p-value of f_value
        support_vs_null: Contrast model vs grand mean, AICc corrected
        support_vs_null_uncorrected: Same, uncorrected
        support_vs_groups: Contrast model vs full groups model, AICc
            corrected; positive values favour the contrast
        support_vs_groups_uncorrected: Same, uncorrected
    """
    coefficients: NDArray[np.floating[Any]]
    estimate: float
    sum_sq: float
    f_value: float
    p_value: float
    support_vs_null: float
    support_vs_null_uncorrected: float
    support_vs_groups: float
    support_vs_groups_uncorrected: float


@dataclass(frozen=True)
class AnovaSupportParams:
    """
    Parameter payload for one-way ANOVA support.

    Supports are natural-log likelihood ratios of normal linear models with
    a common variance, corrected with the Hurvich-Tsai small-sample AIC.
    """
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    levels: tuple[int, ...]
    group_means: dict[int, float]
    group_sizes: dict[int, int]
    grand_mean: float
    total_ss: float
    f_value: float
    p_value: float
    df_between: int
    df_within: int
    support_groups: float
    support_groups_uncorrected: float
    contrast1: ContrastSupport
    contrast2: ContrastSupport | None
    support_contrast1_vs_contrast2: float | None
    default_contrasts: bool
