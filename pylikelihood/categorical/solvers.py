"""
Categorical support dispatch.

Public API:
    support_oneway(observed, expected_p, ...) -> OneWaySupportSolution
    support_twoway(table) -> TwoWaySupportSolution
"""

from __future__ import annotations

import time

from numpy.typing import ArrayLike

from pylikelihood.core.result import Result
from pylikelihood.categorical._intervals import emit_degraded
from pylikelihood.categorical._oneway import oneway_support
from pylikelihood.categorical._twoway import twoway_support
from pylikelihood.categorical.design import CategoricalDesign
from pylikelihood.categorical.solution import (
    OneWaySupportSolution,
    TwoWaySupportSolution,
)


def support_oneway(
    observed: ArrayLike | CategoricalDesign,
    expected_p: ArrayLike | None = None,
    *,
    support_units: float = 2.0,
    alpha: float = 0.05,
    tol: float = 1e-4,
    max_iter: int = 500,
    plot_floor: float = -10.0,
    strict: bool = False,
) -> OneWaySupportSolution:
    """
    Likelihood support for one-way categorical data.

    Computes the support for the observed counts against the expected
    probabilities, the Pearson chi-squared and likelihood ratio (G)
    statistics, and the support for the variance of counts differing more
    than expected. With exactly two categories the binomial MLE, an
    S-unit likelihood interval and a likelihood-based 1 - alpha confidence
    interval are added.

    Parameters
    ----------
    observed : array-like or CategoricalDesign
        Counts per category (at least 2). Can also be a pre-built design.
    expected_p : array-like or None
        Expected probabilities, summing to 1. If None, 1/k each.
    support_units : float
        Likelihood interval given in support units. Default 2.
    alpha : float
        Significance level for the confidence interval. Default 0.05.
    tol : float
        Accuracy of the interval bounds. Default 1e-4.
    max_iter : int
        Minimizer evaluation cap per interval bound. Default 500.
    plot_floor : float
        Log-likelihood down to which the plot extent reaches. Default -10.
    strict : bool
        Raise ConvergenceError if an interval bound cannot be located
        accurately, instead of flagging it.

    Returns
    -------
    OneWaySupportSolution

    Examples
    --------
    >>> sol = support_oneway([6, 4])
    >>> sol.mle
    0.6
    >>> sol = support_oneway([60, 40, 100], [0.25, 0.25, 0.5])
    >>> sol.df
    2
    """
    if isinstance(observed, CategoricalDesign):
        design = observed
    else:
        design = CategoricalDesign.for_oneway(
            observed, expected_p,
            support_units=support_units,
            alpha=alpha,
            tol=tol,
            max_iter=max_iter,
            plot_floor=plot_floor,
            strict=strict,
        )

    t0 = time.perf_counter()
    params, warnings_list = oneway_support(design)
    emit_degraded(warnings_list)
    elapsed = time.perf_counter() - t0

    info = {'analysis': 'oneway', 'binomial': params.binomial is not None}
    if params.binomial is not None:
        b = params.binomial
        info['interval_iterations'] = {
            iv.kind: (iv.lower_iterations, iv.upper_iterations)
            for iv in (b.confidence_interval, b.support_interval, b.plot_extent)
        }
        info['degraded'] = any(
            iv.degraded
            for iv in (b.confidence_interval, b.support_interval, b.plot_extent)
        )

    result = Result(
        params=params,
        info=info,
        timing={'total_seconds': elapsed},
        method='support_oneway',
        warnings=tuple(warnings_list),
    )
    return OneWaySupportSolution(_result=result, _design=design)


def support_twoway(table: ArrayLike | CategoricalDesign) -> TwoWaySupportSolution:
    """
    Likelihood support for a two-way contingency table.

    Computes the supports for the interaction and for both main effects,
    the total support for the table, and, when there are three or more
    (ordered) columns, the support and p-value for a linear trend in the
    first-row proportions across columns.

    Parameters
    ----------
    table : array-like or CategoricalDesign
        r x c matrix of counts with r >= 2, c >= 2 and no zero marginal
        totals.

    Returns
    -------
    TwoWaySupportSolution

    Examples
    --------
    >>> eggs = [[14, 16, 14, 7, 6], [87, 33, 66, 34, 11]]
    >>> sol = support_twoway(eggs)
    >>> sol.df
    4
    """
    if isinstance(table, CategoricalDesign):
        design = table
    else:
        design = CategoricalDesign.for_twoway(table)

    t0 = time.perf_counter()
    params, warnings_list = twoway_support(design)
    elapsed = time.perf_counter() - t0

    result = Result(
        params=params,
        info={'analysis': 'twoway', 'trend': params.trend_support is not None},
        timing={'total_seconds': elapsed},
        method='support_twoway',
        warnings=tuple(warnings_list),
    )
    return TwoWaySupportSolution(_result=result, _design=design)
