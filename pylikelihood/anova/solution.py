"""
User-facing ANOVA support solution.

Wraps a Result[AnovaSupportParams] and provides convenient accessors and
a formatted summary.
"""

from dataclasses import dataclass
from typing import Any

from pylikelihood.core.result import Result
from pylikelihood.anova._common import (
    AnovaSupportParams,
    AnovaTableRow,
    ContrastSupport,
)


@dataclass
class AnovaSupportSolution:
    """
    User-facing result for one-way ANOVA support.

    Produced by support_anova().
    """
    _result: Result[AnovaSupportParams]

    @property
    def params(self) -> AnovaSupportParams:
        return self._result.params

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (group row and Residuals row)."""
        return self._result.params.table

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def levels(self) -> tuple[int, ...]:
        return self._result.params.levels

    @property
    def group_means(self) -> dict[int, float]:
        return self._result.params.group_means

    @property
    def group_sizes(self) -> dict[int, int]:
        return self._result.params.group_sizes

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def support_groups(self) -> float:
        """Support for the groups model vs the null, AICc corrected."""
        return self._result.params.support_groups

    @property
    def support_groups_uncorrected(self) -> float:
        return self._result.params.support_groups_uncorrected

    @property
    def contrast1(self) -> ContrastSupport:
        return self._result.params.contrast1

    @property
    def contrast2(self) -> ContrastSupport | None:
        return self._result.params.contrast2

    @property
    def support_contrast1_vs_groups(self) -> float:
        return self._result.params.contrast1.support_vs_groups

    @property
    def support_contrast1_vs_contrast2(self) -> float | None:
        return self._result.params.support_contrast1_vs_contrast2

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
        """Generate the support report with the ANOVA table."""
        p = self._result.params
        lines = [
            f"Support for groups model vs null, corrected for "
            f"{p.df_between} df = {p.support_groups:.3f}",
            f" Support for contrast 1 vs groups model = "
            f"{p.contrast1.support_vs_groups:.3f}",
        ]
        if p.support_contrast1_vs_contrast2 is not None:
            lines.append(
                f" Support for contrast 1 vs contrast 2 = "
                f"{p.support_contrast1_vs_contrast2:.3f}"
            )
        lines.append("")
        lines.append(
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} "
            f"{'F value':>10} {'Pr(>F)':>12}"
        )
        lines.append("-" * 80)
        for row in p.table:
            if row.f_value is not None:
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f} {row.f_value:>10.4f} "
                    f"{row.p_value:>12.4e}"
                )
            else:
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f}"
                )
        for name, con in (("contrast 1", p.contrast1), ("contrast 2", p.contrast2)):
            if con is None:
                continue
            lines.append(
                f"{name:<20} {1:>6} {con.sum_sq:>14.4f} {con.sum_sq:>14.4f} "
                f"{con.f_value:>10.4f} {con.p_value:>12.4e}"
            )
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"AnovaSupportSolution(support_groups={p.support_groups:.4g}, "
            f"F={p.f_value:.4g}, p_value={p.p_value:.4g})"
        )
