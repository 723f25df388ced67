"""
Sums of squares and support for one-way ANOVA.

For normal models with a common variance estimated by maximum likelihood,
the support for model A over model B is N/2 * ln(RSS_B / RSS_A). The
residual sums of squares needed are

    null (grand mean):        SS_total
    groups (k means):         SS_within
    contrast (mean + slope):  SS_total - SS_contrast

The groups-vs-null support is computed from F via
SS_total / SS_within = 1 + F * (k - 1) / (N - k).

Parameter counts include the variance: null 2, contrast 3, groups k + 1.
The AICc penalty for m parameters in support units is m * N / (N - m - 1).
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pylikelihood.core.exceptions import NumericalError
from pylikelihood.anova._common import AnovaTableRow, ContrastSupport
from pylikelihood.anova._contrasts import contrast_sum_sq


def aicc_penalty(n_params: int, n: int) -> float:
    """Hurvich-Tsai corrected AIC penalty, in log-likelihood units."""
    return n_params * n / (n - n_params - 1)


def support_from_rss(rss_favoured: float, rss_other: float, n: int) -> float:
    """Support for the model with rss_favoured over the one with rss_other."""
    return n / 2.0 * float(np.log(rss_other / rss_favoured))


def group_summaries(
    y: NDArray[np.floating[Any]],
    group: NDArray[np.integer[Any]],
    levels: NDArray[np.integer[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Group means and sizes in level order."""
    means = np.empty(len(levels), dtype=np.float64)
    sizes = np.empty(len(levels), dtype=np.float64)
    for i, level in enumerate(levels):
        values = y[group == level]
        means[i] = np.mean(values)
        sizes[i] = len(values)
    return means, sizes


def oneway_table(
    y: NDArray[np.floating[Any]],
    means: NDArray[np.floating[Any]],
    sizes: NDArray[np.floating[Any]],
) -> tuple[AnovaTableRow, AnovaTableRow, float]:
    """
    Between/within decomposition.

    Returns:
        (groups row, residuals row, total SS)

    Raises:
        NumericalError: If the within-group sum of squares is zero
    """
    n = len(y)
    k = len(means)
    grand_mean = float(np.mean(y))
    ss_total = float(np.sum((y - grand_mean) ** 2))
    ss_between = float(np.sum(sizes * (means - grand_mean) ** 2))
    ss_within = ss_total - ss_between
    if ss_within <= 1e-12 * max(ss_total, 1.0):
        raise NumericalError(
            "within-group sum of squares is zero; support is undefined"
        )

    df_between = k - 1
    df_within = n - k
    ms_between = ss_between / df_between
    ms_within = ss_within / df_within
    f_value = ms_between / ms_within
    p_value = float(sp_stats.f.sf(f_value, df_between, df_within))

    groups_row = AnovaTableRow(
        term='group', df=df_between, sum_sq=ss_between, mean_sq=ms_between,
        f_value=f_value, p_value=p_value,
    )
    residual_row = AnovaTableRow(
        term='Residuals', df=df_within, sum_sq=ss_within, mean_sq=ms_within,
        f_value=None, p_value=None,
    )
    return groups_row, residual_row, ss_total


def groups_support(f_value: float, k: int, n: int) -> tuple[float, float]:
    """
    Support for the groups model over the null, from F.

    Returns:
        (corrected, uncorrected)
    """
    uncorrected = n / 2.0 * float(np.log1p(f_value * (k - 1) / (n - k)))
    corrected = uncorrected - (aicc_penalty(k + 1, n) - aicc_penalty(2, n))
    return corrected, uncorrected


def contrast_support(
    contrast: NDArray[np.floating[Any]],
    means: NDArray[np.floating[Any]],
    sizes: NDArray[np.floating[Any]],
    ss_total: float,
    residual_row: AnovaTableRow,
    n: int,
) -> ContrastSupport:
    """Support and F test for one contrast."""
    k = len(means)
    ss_c = contrast_sum_sq(contrast, means, sizes)
    # ss_c <= ss_between, so rss_c >= ss_within > 0
    rss_c = ss_total - ss_c

    f_value = ss_c / residual_row.mean_sq
    p_value = float(sp_stats.f.sf(f_value, 1, residual_row.df))

    vs_null = support_from_rss(rss_c, ss_total, n)
    vs_null_c = vs_null - (aicc_penalty(3, n) - aicc_penalty(2, n))
    vs_groups = support_from_rss(rss_c, residual_row.sum_sq, n)
    vs_groups_c = vs_groups - (aicc_penalty(3, n) - aicc_penalty(k + 1, n))

    return ContrastSupport(
        coefficients=np.array(contrast, dtype=np.float64),
        estimate=float(np.dot(contrast, means)),
        sum_sq=ss_c,
        f_value=float(f_value),
        p_value=p_value,
        support_vs_null=vs_null_c,
        support_vs_null_uncorrected=vs_null,
        support_vs_groups=vs_groups_c,
        support_vs_groups_uncorrected=vs_groups,
    )
