"""
Categorical support solution types.

Each solution wraps a Result[Params], exposes the statistics as
properties and formats a console summary. Formatting never feeds back
into the computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pylikelihood.core.result import Result
from pylikelihood.categorical._common import (
    BinomialParams,
    OneWaySupportParams,
    SupportInterval,
    TwoWaySupportParams,
)

if TYPE_CHECKING:
    from pylikelihood.categorical.design import CategoricalDesign


@dataclass
class OneWaySupportSolution:
    """
    User-facing result of support_oneway().

    With two categories the binomial properties (mle, null_p and the three
    intervals) are populated; otherwise they are None.
    """
    _result: Result[OneWaySupportParams]
    _design: 'CategoricalDesign | None' = None

    @property
    def params(self) -> OneWaySupportParams:
        return self._result.params

    @property
    def support(self) -> float:
        """Support for observed vs expected, corrected for df."""
        return self._result.params.support

    @property
    def uncorrected_support(self) -> float:
        return self._result.params.uncorrected_support

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        return self._result.params.observed

    @property
    def expected_p(self) -> NDArray[np.floating[Any]]:
        return self._result.params.expected_p

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        return self._result.params.expected

    @property
    def n(self) -> float:
        return self._result.params.n

    @property
    def too_good(self) -> float:
        return self._result.params.too_good

    @property
    def chi_sq(self) -> float:
        return self._result.params.chi_sq

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def lr_statistic(self) -> float:
        return self._result.params.lr_statistic

    @property
    def lr_p_value(self) -> float:
        return self._result.params.lr_p_value

    # --- Binomial ---

    @property
    def binomial(self) -> BinomialParams | None:
        return self._result.params.binomial

    @property
    def is_binomial(self) -> bool:
        return self._result.params.binomial is not None

    @property
    def mle(self) -> float | None:
        b = self._result.params.binomial
        return b.mle if b else None

    @property
    def null_p(self) -> float | None:
        b = self._result.params.binomial
        return b.null_p if b else None

    @property
    def support_interval(self) -> SupportInterval | None:
        b = self._result.params.binomial
        return b.support_interval if b else None

    @property
    def confidence_interval(self) -> SupportInterval | None:
        b = self._result.params.binomial
        return b.confidence_interval if b else None

    @property
    def plot_extent(self) -> SupportInterval | None:
        b = self._result.params.binomial
        return b.plot_extent if b else None

    @property
    def converged(self) -> bool:
        """False if any interval bound was flagged as degraded."""
        b = self._result.params.binomial
        if b is None:
            return True
        return all(
            iv.converged
            for iv in (b.support_interval, b.confidence_interval, b.plot_extent)
        )

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Format the analysis as console text."""
        p = self._result.params
        lines = []
        if p.binomial is None:
            lines.append(
                f"Support for difference from expected, corrected for "
                f"{p.df} df = {p.support:.3f}"
            )
        else:
            b = p.binomial
            lines.append(
                f"Binomial support for difference of MLE {b.mle:.5g} "
                f"from {b.null_p:.5g} with {p.df} df = {p.uncorrected_support:.3f}"
            )
        lines.append(
            f" Support for variance differing more than expected = {p.too_good:.3f}"
        )
        if p.binomial is not None:
            si = p.binomial.support_interval
            lines.append(
                f" S-{si.level:g} likelihood interval from "
                f"{si.lower:.5f} to {si.upper:.5f}"
            )
        lines.append("")
        lines.append(
            f"Chi-square({p.df}) = {p.chi_sq:.3f},  p = {_format_pvalue(p.p_value)}"
        )
        lines.append(
            f" Likelihood ratio test G({p.df}) = {p.lr_statistic:.3f}, "
            f"p = {_format_pvalue(p.lr_p_value)}, N = {p.n:g}"
        )
        if p.binomial is not None:
            ci = p.binomial.confidence_interval
            lines.append(
                f" Likelihood-based {100 * (1 - ci.level):g}% confidence interval "
                f"from {ci.lower:.5f} to {ci.upper:.5f}"
            )
            if not self.converged:
                lines.append(
                    " Warning: interval bounds located with degraded precision"
                )
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"OneWaySupportSolution(support={p.support:.4g}, df={p.df}, "
            f"chi_sq={p.chi_sq:.4g}, p_value={p.p_value:.4g})"
        )


@dataclass
class TwoWaySupportSolution:
    """User-facing result of support_twoway()."""
    _result: Result[TwoWaySupportParams]
    _design: 'CategoricalDesign | None' = None

    @property
    def params(self) -> TwoWaySupportParams:
        return self._result.params

    @property
    def interaction_support(self) -> float:
        return self._result.params.interaction_support

    @property
    def interaction_support_uncorrected(self) -> float:
        return self._result.params.interaction_support_uncorrected

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def rows_support(self) -> float:
        return self._result.params.rows_support

    @property
    def rows_support_uncorrected(self) -> float:
        return self._result.params.rows_support_uncorrected

    @property
    def df_rows(self) -> int:
        return self._result.params.df_rows

    @property
    def cols_support(self) -> float:
        return self._result.params.cols_support

    @property
    def cols_support_uncorrected(self) -> float:
        return self._result.params.cols_support_uncorrected

    @property
    def df_cols(self) -> int:
        return self._result.params.df_cols

    @property
    def total_support(self) -> float:
        return self._result.params.total_support

    @property
    def trend_support(self) -> float | None:
        return self._result.params.trend_support

    @property
    def trend_chi_sq(self) -> float | None:
        return self._result.params.trend_chi_sq

    @property
    def trend_p_value(self) -> float | None:
        return self._result.params.trend_p_value

    @property
    def too_good(self) -> float:
        return self._result.params.too_good

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        return self._result.params.observed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        return self._result.params.expected

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """Pearson residuals (O - E) / sqrt(E)."""
        return self._result.params.residuals

    @property
    def n(self) -> float:
        return self._result.params.n

    @property
    def chi_sq(self) -> float:
        return self._result.params.chi_sq

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def lr_statistic(self) -> float:
        return self._result.params.lr_statistic

    @property
    def lr_p_value(self) -> float:
        return self._result.params.lr_p_value

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Format the analysis as console text."""
        p = self._result.params
        lines = [
            f"Support for interaction corrected for {p.df} df = "
            f"{p.interaction_support:.3f}",
            f" Support for rows main effect corrected for {p.df_rows} df = "
            f"{p.rows_support:.3f}",
            f" Support for columns main effect corrected for {p.df_cols} df = "
            f"{p.cols_support:.3f}",
            f" Total support for whole table = {p.total_support:.3f}",
        ]
        if p.trend_support is not None:
            lines.append(
                f" Support for trend across columns = {p.trend_support:.3f}"
            )
        lines.append(
            f" Support for variance differing more than expected = {p.too_good:.3f}"
        )
        lines.append("")
        lines.append(
            f" Chi-squared({p.df}) = {p.chi_sq:.3f},  p = {_format_pvalue(p.p_value)}"
        )
        lines.append(
            f" Likelihood ratio test G({p.df}) = {p.lr_statistic:.3f}, "
            f"p = {p.lr_p_value:.5g}, N = {p.n:g}"
        )
        if p.trend_p_value is not None:
            lines.append("")
            lines.append(
                f" Trend p value from chi-squared = {_format_pvalue(p.trend_p_value)}"
            )
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TwoWaySupportSolution(interaction_support="
            f"{p.interaction_support:.4g}, df={p.df}, chi_sq={p.chi_sq:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R's format.pval(p, 4)."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
