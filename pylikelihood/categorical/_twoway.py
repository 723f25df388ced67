"""
Support for two-way contingency tables.

Interaction support compares observed counts with the independence model
(expected = row total * column total / N). Main effects compare marginal
totals with equal proportions. The total support for the table is the sum
of the three uncorrected components. For three or more ordered columns a
chi-squared test for trend in proportions (first row as successes) is
added; its support is the trend chi-square divided by 2.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import stats as sp_stats

from pylikelihood.categorical._common import TwoWaySupportParams
from pylikelihood.categorical._oneway import log_count_floor, too_good_support

if TYPE_CHECKING:
    from pylikelihood.categorical.design import CategoricalDesign


def _marginal_support(totals: np.ndarray, grand_total: float) -> float:
    """Support for unequal marginal totals against equal proportions."""
    return float(
        np.sum(totals * np.log(totals))
        - grand_total * np.log(grand_total)
        + grand_total * np.log(len(totals))
    )


def trend_chisq(
    successes: np.ndarray,
    trials: np.ndarray,
    score: np.ndarray | None = None,
) -> tuple[float, float]:
    """
    Chi-squared test for trend in proportions. Matches R prop.trend.test().

    The statistic is the regression sum of squares of the observed
    proportions on the scores, weighted by n / (p * (1 - p)).

    Returns:
        (statistic, p_value) on 1 degree of freedom
    """
    x = np.asarray(successes, dtype=np.float64)
    n = np.asarray(trials, dtype=np.float64)
    if score is None:
        score = np.arange(1, len(x) + 1, dtype=np.float64)
    else:
        score = np.asarray(score, dtype=np.float64)

    p = np.sum(x) / np.sum(n)
    if p <= 0.0 or p >= 1.0:
        # no variation in the pooled proportion
        return 0.0, 1.0

    w = n / p / (1.0 - p)
    freq = x / n
    s_bar = np.sum(w * score) / np.sum(w)
    f_bar = np.sum(w * freq) / np.sum(w)
    sxy = np.sum(w * (score - s_bar) * (freq - f_bar))
    sxx = np.sum(w * (score - s_bar) ** 2)

    chisq = float(sxy ** 2 / sxx)
    return chisq, float(sp_stats.chi2.sf(chisq, 1))


def twoway_support(design: CategoricalDesign) -> tuple[TwoWaySupportParams, list[str]]:
    """Compute interaction, main-effect, total and trend supports."""
    table = design.table
    warnings_list: list[str] = []

    nrow, ncol = table.shape
    row_sums = table.sum(axis=1)
    col_sums = table.sum(axis=0)
    total = float(table.sum())

    expected = np.outer(row_sums, col_sums) / total
    floored = log_count_floor(table)

    # Interaction
    s_int = float(np.sum(table * np.log(floored / expected)))
    df = (nrow - 1) * (ncol - 1)
    s_int_c = s_int - (df - 1) / 2.0

    # Main effects
    df_rows = nrow - 1
    df_cols = ncol - 1
    rows_main = _marginal_support(row_sums, total)
    cols_main = _marginal_support(col_sums, total)
    rows_main_c = rows_main - (df_rows - 1) / 2.0
    cols_main_c = cols_main - (df_cols - 1) / 2.0

    total_support = float(
        np.sum(table * np.log(floored)) - total * np.log(total / table.size)
    )

    # Pearson chi-squared, no continuity correction
    chi_sq = float(np.sum((table - expected) ** 2 / expected))
    p_value = float(sp_stats.chi2.sf(chi_sq, df))
    residuals = (table - expected) / np.sqrt(expected)
    if np.any(expected < 5):
        warnings_list.append("Chi-squared approximation may be incorrect")

    lrt = 2.0 * s_int
    lrt_p = float(sp_stats.chi2.sf(lrt, df))

    trend_support = trend_stat = trend_p = None
    if ncol >= 3:
        trend_stat, trend_p = trend_chisq(table[0], col_sums)
        trend_support = trend_stat / 2.0

    return TwoWaySupportParams(
        interaction_support=s_int_c,
        interaction_support_uncorrected=s_int,
        df=df,
        rows_support=rows_main_c,
        rows_support_uncorrected=rows_main,
        df_rows=df_rows,
        cols_support=cols_main_c,
        cols_support_uncorrected=cols_main,
        df_cols=df_cols,
        total_support=total_support,
        too_good=float(too_good_support(chi_sq, df)),
        observed=table.copy(),
        expected=expected,
        residuals=residuals,
        n=total,
        chi_sq=chi_sq,
        p_value=p_value,
        lr_statistic=lrt,
        lr_p_value=lrt_p,
        trend_support=trend_support,
        trend_chi_sq=trend_stat,
        trend_p_value=trend_p,
    ), warnings_list
