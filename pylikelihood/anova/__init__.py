"""
Likelihood support for one-way Analysis of Variance.

Public API:
    support_anova(y, group, contrast1, contrast2) -> AnovaSupportSolution
    poly_contrasts(k)                              # orthogonal polynomials
"""

from pylikelihood.anova.solvers import support_anova
from pylikelihood.anova.solution import AnovaSupportSolution
from pylikelihood.anova.design import AnovaDesign, ContrastSpec
from pylikelihood.anova._contrasts import poly_contrasts
from pylikelihood.anova._common import (
    AnovaSupportParams,
    AnovaTableRow,
    ContrastSupport,
)

__all__ = [
    "support_anova",
    "poly_contrasts",
    "AnovaSupportSolution",
    "AnovaDesign",
    "ContrastSpec",
    "AnovaSupportParams",
    "AnovaTableRow",
    "ContrastSupport",
]
