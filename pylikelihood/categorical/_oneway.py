"""
Support for one-way categorical (multinomial) data.

Follows Cahusac (2020), Evidence-Based Statistics:

    S   = sum(obs * (ln(count1) - ln(expected)))
    Sc  = S - (df - 1)/2
    G   = 2S

where count1 is obs with zeros replaced by 1 (log only; the count itself
is unchanged). With exactly two categories the binomial likelihood and
likelihood-based confidence intervals are added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import stats as sp_stats

from pylikelihood.categorical._common import OneWaySupportParams
from pylikelihood.categorical._intervals import binomial_intervals

if TYPE_CHECKING:
    from pylikelihood.categorical.design import CategoricalDesign


def log_count_floor(counts: np.ndarray) -> np.ndarray:
    """Counts below 1 become 1 so that 0 * ln(0) contributes 0."""
    return np.where(counts < 1, 1.0, counts)


def too_good_support(chi_sq: float, df: int) -> float:
    """
    Support for the variance of counts differing more than expected.

    df/2 * ln(df/chi_sq) - (df - chi_sq)/2  (Edwards 1992, p. 187).
    A perfect fit (chi_sq == 0) gives +inf.
    """
    if chi_sq <= 0:
        return float("inf")
    return df / 2.0 * np.log(df / chi_sq) - (df - chi_sq) / 2.0


def oneway_support(design: CategoricalDesign) -> tuple[OneWaySupportParams, list[str]]:
    """Compute one-way support, chi-squared and G statistics."""
    obs = design.observed
    exp_p = design.expected_p
    warnings_list: list[str] = []

    n = float(np.sum(obs))
    k = len(obs)
    expected = exp_p * n

    uncorrected = float(np.sum(obs * (np.log(log_count_floor(obs)) - np.log(expected))))
    df = k - 1
    corrected = uncorrected - (df - 1) / 2.0

    chi_sq = float(np.sum((obs - expected) ** 2 / expected))
    p_value = float(sp_stats.chi2.sf(chi_sq, df))
    if np.any(expected < 5):
        warnings_list.append("Chi-squared approximation may be incorrect")

    lrt = 2.0 * uncorrected
    lrt_p = float(sp_stats.chi2.sf(lrt, df))

    binomial = None
    if k == 2:
        binomial, interval_warnings = binomial_intervals(
            obs[0], obs[1], exp_p[0], design.options, warn=False,
        )
        warnings_list.extend(interval_warnings)

    return OneWaySupportParams(
        support=corrected,
        uncorrected_support=uncorrected,
        df=df,
        observed=obs.copy(),
        expected_p=exp_p.copy(),
        expected=expected,
        n=n,
        too_good=float(too_good_support(chi_sq, df)),
        chi_sq=chi_sq,
        p_value=p_value,
        lr_statistic=lrt,
        lr_p_value=lrt_p,
        binomial=binomial,
    ), warnings_list
