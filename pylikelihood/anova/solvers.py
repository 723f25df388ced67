"""
ANOVA support dispatch.

Public API:
    support_anova(y, group, contrast1, contrast2) -> AnovaSupportSolution
"""

import time
from typing import Any

import numpy as np

from pylikelihood.core.result import Result
from pylikelihood.anova._common import AnovaSupportParams
from pylikelihood.anova._contrasts import default_contrasts
from pylikelihood.anova._ss import (
    contrast_support,
    group_summaries,
    groups_support,
    oneway_table,
    support_from_rss,
)
from pylikelihood.anova.design import AnovaDesign
from pylikelihood.anova.solution import AnovaSupportSolution


def support_anova(
    y: Any,
    group: Any = None,
    contrast1: Any = None,
    contrast2: Any = None,
) -> AnovaSupportSolution:
    """
    Likelihood support for one-way ANOVA and contrasts.

    Computes the support for the groups model against the null model of a
    single mean, the support for contrast1 against the null and against
    the groups model, and the support for contrast1 against contrast2.
    Supports are corrected with the small-sample AIC (Hurvich and Tsai).

    Args:
        y: Response variable (1D numeric array-like), or a pre-built
            AnovaDesign
        group: Integer group codes (same length as y). Groups are ordered
            by ascending code.
        contrast1: Coefficients, one per group. Default: linear polynomial.
        contrast2: Coefficients, one per group. Default: quadratic
            polynomial when there are 3 or more groups, otherwise none.

    Returns:
        AnovaSupportSolution

    Examples:
        >>> y = [10, 12, 11, 15, 16, 14, 20, 21, 19]
        >>> group = [1, 1, 1, 2, 2, 2, 3, 3, 3]
        >>> result = support_anova(y, group)
        >>> result.support_groups > 0
        True
    """
    if isinstance(y, AnovaDesign):
        design = y
    else:
        design = AnovaDesign.for_oneway(y, group, contrast1, contrast2)

    t0 = time.perf_counter()

    n = design.n
    k = design.n_groups
    means, sizes = group_summaries(design.y, design.group, design.levels)
    groups_row, residual_row, ss_total = oneway_table(design.y, means, sizes)
    s_groups, s_groups_unc = groups_support(groups_row.f_value, k, n)

    c1 = design.contrasts.contrast1
    c2 = design.contrasts.contrast2
    use_defaults = c1 is None and c2 is None
    if use_defaults:
        c1, c2 = default_contrasts(k)
    elif c1 is None:
        c1, _ = default_contrasts(k)

    con1 = contrast_support(c1, means, sizes, ss_total, residual_row, n)
    con2 = None
    s_c1_c2 = None
    if c2 is not None:
        con2 = contrast_support(c2, means, sizes, ss_total, residual_row, n)
        # both contrast models have 3 parameters: no correction
        s_c1_c2 = support_from_rss(
            ss_total - con1.sum_sq, ss_total - con2.sum_sq, n,
        )

    elapsed = time.perf_counter() - t0

    levels = tuple(int(v) for v in design.levels)
    params = AnovaSupportParams(
        table=(groups_row, residual_row),
        n_obs=n,
        levels=levels,
        group_means={lv: float(m) for lv, m in zip(levels, means)},
        group_sizes={lv: int(s) for lv, s in zip(levels, sizes)},
        grand_mean=float(np.mean(design.y)),
        total_ss=ss_total,
        f_value=float(groups_row.f_value),
        p_value=float(groups_row.p_value),
        df_between=groups_row.df,
        df_within=residual_row.df,
        support_groups=s_groups,
        support_groups_uncorrected=s_groups_unc,
        contrast1=con1,
        contrast2=con2,
        support_contrast1_vs_contrast2=s_c1_c2,
        default_contrasts=use_defaults,
    )

    result = Result(
        params=params,
        info={'analysis': 'anova_oneway', 'n_groups': k},
        timing={'total_seconds': elapsed},
        method='support_anova',
    )
    return AnovaSupportSolution(_result=result)
