"""
CategoricalDesign: validated inputs for categorical support analyses.

Uses factory classmethods per analysis type. The `analysis` field
identifies which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylikelihood.core.compute.tolerances import (
    DEFAULT_SOLVER_TOLERANCE,
    PROBABILITY_SUM_ATOL,
    SolverTolerance,
)
from pylikelihood.core.exceptions import ValidationError
from pylikelihood.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_nonnegative,
    check_positive,
    check_scalar_finite,
    check_sums_to_one,
)


@dataclass(frozen=True)
class IntervalOptions:
    """
    Settings for the binomial interval computations.

    Attributes:
        support_units: Width of the likelihood interval in support units
            (the interval where the log-likelihood ratio is above
            -support_units). Default 2.
        alpha: Significance level; a 1 - alpha likelihood-based confidence
            interval is computed. Default 0.05.
        plot_floor: Log-likelihood ratio down to which the plot extent
            reaches. Default -10 (likelihood ratio of about 4.5e-5).
        tolerance: Minimizer tolerance, iteration cap and residual threshold.
        strict: Raise ConvergenceError instead of flagging a degraded bound.
    """
    support_units: float = 2.0
    alpha: float = 0.05
    plot_floor: float = -10.0
    tolerance: SolverTolerance = field(default_factory=lambda: DEFAULT_SOLVER_TOLERANCE)
    strict: bool = False

    def __post_init__(self) -> None:
        if not (np.isfinite(self.support_units) and self.support_units > 0):
            raise ValidationError(
                f"support_units must be a positive number, got {self.support_units}"
            )
        if not (0.0 < self.alpha < 1.0):
            raise ValidationError(f"alpha must be in (0, 1), got {self.alpha}")
        if not (np.isfinite(self.plot_floor) and self.plot_floor < 0):
            raise ValidationError(
                f"plot_floor must be a negative number, got {self.plot_floor}"
            )


@dataclass(frozen=True)
class CategoricalDesign:
    """
    Design for categorical support analyses.

    Do not construct directly; use for_oneway() or for_twoway().
    """
    analysis: str

    _observed: NDArray[np.floating[Any]] | None = None
    _expected_p: NDArray[np.floating[Any]] | None = None
    _table: NDArray[np.floating[Any]] | None = None
    _options: IntervalOptions = field(default_factory=IntervalOptions)

    @property
    def observed(self) -> NDArray[np.floating[Any]] | None:
        return self._observed

    @property
    def expected_p(self) -> NDArray[np.floating[Any]] | None:
        return self._expected_p

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def options(self) -> IntervalOptions:
        return self._options

    @property
    def is_binomial(self) -> bool:
        return self._observed is not None and len(self._observed) == 2

    # --- Factory classmethods ---

    @classmethod
    def for_oneway(
        cls,
        observed: ArrayLike,
        expected_p: ArrayLike | None = None,
        *,
        support_units: float = 2.0,
        alpha: float = 0.05,
        tol: float = 1e-4,
        max_iter: int = 500,
        plot_floor: float = -10.0,
        strict: bool = False,
    ) -> CategoricalDesign:
        """
        Validate one-way categorical counts.

        Args:
            observed: Counts per category (at least 2 categories)
            expected_p: Expected probabilities, or None for 1/k each
            support_units: Likelihood interval width (binomial only)
            alpha: Confidence interval level (binomial only)
            tol: Minimizer accuracy (binomial only)
            max_iter: Minimizer evaluation cap per bound (binomial only)
            plot_floor: Log-likelihood floor for the plot extent
            strict: Raise on interval non-convergence

        Raises:
            ValidationError: On any violated invariant
        """
        obs = check_array(observed, "observed")
        check_1d(obs, "observed")
        check_min_samples(obs, 2, "observed")
        check_finite(obs, "observed")
        check_nonnegative(obs, "observed")

        k = len(obs)
        if expected_p is None:
            exp_p = np.full(k, 1.0 / k)
        else:
            exp_p = check_array(expected_p, "expected_p")
            check_1d(exp_p, "expected_p")
            check_finite(exp_p, "expected_p")
            check_consistent_length(obs, exp_p, names=("observed", "expected_p"))
            check_positive(exp_p, "expected_p")
            check_sums_to_one(exp_p, "expected_p", atol=PROBABILITY_SUM_ATOL)

        if k == 2 and np.any(obs == 0):
            raise ValidationError(
                "observed: both categories must have counts > 0, "
                f"got {obs.tolist()}"
            )
        if np.sum(obs) <= 0:
            raise ValidationError("observed: total count must be > 0")

        tolerance = SolverTolerance(
            tol=check_scalar_finite(tol, "tol"),
            max_iter=int(check_scalar_finite(max_iter, "max_iter")),
            residual_threshold=DEFAULT_SOLVER_TOLERANCE.residual_threshold,
        )
        options = IntervalOptions(
            support_units=check_scalar_finite(support_units, "support_units"),
            alpha=check_scalar_finite(alpha, "alpha"),
            plot_floor=check_scalar_finite(plot_floor, "plot_floor"),
            tolerance=tolerance,
            strict=bool(strict),
        )

        return cls(
            analysis="oneway",
            _observed=obs,
            _expected_p=exp_p,
            _options=options,
        )

    @classmethod
    def for_twoway(cls, table: ArrayLike) -> CategoricalDesign:
        """
        Validate a two-way contingency table.

        Args:
            table: r x c matrix of counts, r >= 2 and c >= 2

        Raises:
            ValidationError: Too few rows/columns, non-finite or negative
                counts, or a zero marginal total
        """
        tab = check_array(table, "table")
        check_2d(tab, "table")
        nrow, ncol = tab.shape
        if nrow < 2:
            raise ValidationError(f"table: fewer than 2 rows (got {nrow})")
        if ncol < 2:
            raise ValidationError(f"table: fewer than 2 columns (got {ncol})")
        check_finite(tab, "table")
        check_nonnegative(tab, "table")

        row_sums = tab.sum(axis=1)
        col_sums = tab.sum(axis=0)
        if np.any(row_sums < 1):
            raise ValidationError(
                f"table: marginal totals cannot be 0 (row totals {row_sums.tolist()})"
            )
        if np.any(col_sums < 1):
            raise ValidationError(
                f"table: marginal totals cannot be 0 (column totals {col_sums.tolist()})"
            )

        return cls(analysis="twoway", _table=tab.copy())
