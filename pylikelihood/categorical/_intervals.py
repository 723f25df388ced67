"""
Likelihood and likelihood-based confidence intervals for a binomial
probability.

Each bound is found by minimizing the squared profile objective
separately on (0, p) and (p, 1), where p is the MLE. The same routine
produces three interval families by changing only the target level:

    confidence:  goal = -chi2.ppf(1 - alpha, 1) / 2
    support:     goal = -support_units
    plot:        goal = plot_floor

Each family is solved from scratch on every call.

A bound is degraded when the minimizer hit its evaluation cap, or when its
residual is larger than an x-error of `tol` can explain: the allowed
squared residual is (|d/dx LLR| * tol)^2, floored at residual_threshold.
"""

from __future__ import annotations

import warnings

from scipy import stats as sp_stats

from pylikelihood.core.compute.optimization import MinimizeResult, minimize_bounded
from pylikelihood.core.compute.tolerances import (
    DEFAULT_SOLVER_TOLERANCE,
    SolverTolerance,
)
from pylikelihood.core.exceptions import ConvergenceError, ValidationError
from pylikelihood.categorical._common import (
    INTERVAL_KINDS,
    BinomialParams,
    SupportInterval,
)
from pylikelihood.categorical._likelihood import profile_objective
from pylikelihood.categorical.design import IntervalOptions

DEGRADED_MARKER = "bound degraded"


def confidence_goal(alpha: float) -> float:
    """Log-likelihood ratio at the bounds of a 1 - alpha confidence interval."""
    return -float(sp_stats.chi2.ppf(1.0 - alpha, 1)) / 2.0


def allowed_residual(x: float, a: float, r: float, tolerance: SolverTolerance) -> float:
    """Largest squared residual consistent with a bound located to within tol."""
    slope = a / x - r / (1.0 - x)
    return max(tolerance.residual_threshold, (slope * tolerance.tol) ** 2)


def bound_status(
    res: MinimizeResult, a: float, r: float, tolerance: SolverTolerance,
) -> str | None:
    """Reason a located bound is degraded, or None if it is accurate."""
    if not res.converged:
        return "max_iterations"
    if not (res.objective <= allowed_residual(res.minimum, a, r, tolerance)):
        return "residual"
    return None


def emit_degraded(messages: list[str], stacklevel: int = 3) -> None:
    """
    Issue a RuntimeWarning for each degraded-bound message.

    The default stacklevel points at the caller of the public function
    that calls this helper.
    """
    for message in messages:
        if DEGRADED_MARKER in message:
            warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)


def solve_interval(
    a: float,
    r: float,
    goal: float,
    *,
    kind: str = "support",
    level: float | None = None,
    tolerance: SolverTolerance = DEFAULT_SOLVER_TOLERANCE,
    strict: bool = False,
    warn: bool = True,
) -> tuple[SupportInterval, list[str]]:
    """
    Locate the two points where the log-likelihood ratio equals `goal`.

    Args:
        a: Number of successes (> 0)
        r: Number of failures (> 0)
        goal: Target log-likelihood ratio relative to the MLE (< 0)
        kind: Interval family tag
        level: Value recorded on the interval (defaults to goal)
        tolerance: Minimizer settings
        strict: Raise ConvergenceError rather than flagging a degraded bound
        warn: Issue a RuntimeWarning per degraded bound

    Returns:
        (SupportInterval, warnings) where warnings lists degraded bounds

    Raises:
        ValidationError: If a or r is not positive, or goal >= 0
        ConvergenceError: In strict mode, if a bound is degraded
    """
    if kind not in INTERVAL_KINDS:
        raise ValidationError(f"kind must be one of {INTERVAL_KINDS}, got {kind!r}")
    if not (a > 0 and r > 0):
        raise ValidationError(
            f"successes and failures must both be > 0, got a={a}, r={r}"
        )
    if not (goal < 0):
        raise ValidationError(f"goal must be negative, got {goal}")

    p = a / (a + r)
    args = (a, r, p, goal)
    lo = minimize_bounded(
        profile_objective, 0.0, p,
        args=args, tol=tolerance.tol, max_iter=tolerance.max_iter,
    )
    hi = minimize_bounded(
        profile_objective, p, 1.0,
        args=args, tol=tolerance.tol, max_iter=tolerance.max_iter,
    )

    warnings_list: list[str] = []
    converged = True
    for side, res in (("lower", lo), ("upper", hi)):
        reason = bound_status(res, a, r, tolerance)
        if reason is None:
            continue

        converged = False
        allowed = allowed_residual(res.minimum, a, r, tolerance)
        message = (
            f"{kind} interval {side} {DEGRADED_MARKER}: residual "
            f"{res.objective:.3g} after {res.iterations} evaluations "
            f"(allowed {allowed:.3g})"
        )
        if strict:
            raise ConvergenceError(
                message,
                iterations=res.iterations,
                final_change=res.objective,
                reason=reason,
                threshold=allowed,
            )
        warnings_list.append(message)

    if warn:
        emit_degraded(warnings_list)

    interval = SupportInterval(
        lower=lo.minimum,
        upper=hi.minimum,
        kind=kind,
        level=goal if level is None else float(level),
        goal=goal,
        lower_objective=lo.objective,
        upper_objective=hi.objective,
        lower_iterations=lo.iterations,
        upper_iterations=hi.iterations,
        converged=converged,
    )
    return interval, warnings_list


def binomial_intervals(
    a: float,
    r: float,
    null_p: float,
    options: IntervalOptions,
    *,
    warn: bool = True,
) -> tuple[BinomialParams, list[str]]:
    """Compute the support, confidence and plot intervals for a binomial."""
    warnings_list: list[str] = []
    solve_kw = dict(tolerance=options.tolerance, strict=options.strict, warn=False)

    conf_int, w = solve_interval(
        a, r, confidence_goal(options.alpha),
        kind="confidence", level=options.alpha, **solve_kw,
    )
    warnings_list.extend(w)

    sup_int, w = solve_interval(
        a, r, -options.support_units,
        kind="support", level=options.support_units, **solve_kw,
    )
    warnings_list.extend(w)

    plot_ext, w = solve_interval(
        a, r, options.plot_floor,
        kind="plot", level=options.plot_floor, **solve_kw,
    )
    warnings_list.extend(w)

    if warn:
        emit_degraded(warnings_list)

    return BinomialParams(
        successes=float(a),
        failures=float(r),
        mle=a / (a + r),
        null_p=float(null_p),
        support_interval=sup_int,
        confidence_interval=conf_int,
        plot_extent=plot_ext,
    ), warnings_list
