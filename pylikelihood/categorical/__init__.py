"""
Likelihood support for categorical data.

Public API:
    support_oneway(observed, expected_p)   - one-way (multinomial / binomial)
    support_twoway(table)                  - two-way contingency table
    solve_interval(a, r, goal)             - binomial likelihood interval
"""

from pylikelihood.categorical.solvers import support_oneway, support_twoway
from pylikelihood.categorical._intervals import (
    binomial_intervals,
    confidence_goal,
    solve_interval,
)
from pylikelihood.categorical._likelihood import (
    likelihood_ratio,
    log_likelihood_ratio,
    profile_objective,
)
from pylikelihood.categorical._common import (
    BinomialParams,
    OneWaySupportParams,
    SupportInterval,
    TwoWaySupportParams,
)
from pylikelihood.categorical.design import CategoricalDesign, IntervalOptions
from pylikelihood.categorical.solution import (
    OneWaySupportSolution,
    TwoWaySupportSolution,
)

__all__ = [
    "support_oneway",
    "support_twoway",
    "solve_interval",
    "binomial_intervals",
    "confidence_goal",
    "likelihood_ratio",
    "log_likelihood_ratio",
    "profile_objective",
    "BinomialParams",
    "OneWaySupportParams",
    "SupportInterval",
    "TwoWaySupportParams",
    "CategoricalDesign",
    "IntervalOptions",
    "OneWaySupportSolution",
    "TwoWaySupportSolution",
]
