"""
Brent's bounded one-dimensional minimizer.

Thin wrapper over scipy.optimize.minimize_scalar(method='bounded'), whose
stopping rule (sqrt(eps) * |x| + tol / 3) is the same as R's optimize(),
so a bound located here agrees with the published R output to within
`tol`.

The function is never evaluated at the bracket end points, which matters
for log-likelihoods that are undefined at 0 and 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from scipy import optimize

from pylikelihood.core.exceptions import ValidationError


@dataclass(frozen=True)
class MinimizeResult:
    """
    Outcome of a bounded minimization.

    Attributes:
        minimum: Location of the minimum found
        objective: Function value at `minimum`
        iterations: Number of function evaluations
        converged: False if the iteration cap was reached first
    """
    minimum: float
    objective: float
    iterations: int
    converged: bool


def minimize_bounded(
    func: Callable[..., float],
    lower: float,
    upper: float,
    *,
    args: tuple[Any, ...] = (),
    tol: float = 1e-4,
    max_iter: int = 500,
) -> MinimizeResult:
    """
    Minimize a scalar function on the open interval (lower, upper).

    Args:
        func: Objective, called as func(x, *args)
        lower: Left end of the bracket
        upper: Right end of the bracket
        args: Extra positional arguments for func
        tol: Desired accuracy of the minimizer location
        max_iter: Cap on function evaluations

    Returns:
        MinimizeResult

    Raises:
        ValidationError: If the bracket is empty or tol is not positive
    """
    if not (lower < upper):
        raise ValidationError(
            f"bracket: lower ({lower}) must be less than upper ({upper})"
        )
    if not (tol > 0):
        raise ValidationError(f"tol must be > 0, got {tol}")

    res = optimize.minimize_scalar(
        func,
        bounds=(float(lower), float(upper)),
        args=args,
        method="bounded",
        options={"xatol": tol, "maxiter": int(max_iter)},
    )
    return MinimizeResult(
        minimum=float(res.x),
        objective=float(res.fun),
        iterations=int(res.nfev),
        # status 1: evaluation cap reached
        converged=bool(res.status == 0),
    )
