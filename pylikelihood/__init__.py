"""
pylikelihood: evidential (likelihood-based) statistics for Python.

Support values are natural-log likelihood ratios: a support of 2 means
the data are e^2 (about 7.4) times more probable under one hypothesis
than under the other. Classical chi-squared, G and F statistics and
p-values are reported alongside for comparison.

Submodules:
    categorical: One-way and two-way categorical support, binomial intervals
    anova: One-way ANOVA support with contrasts
    power: Sample size for a target support
    plotting: Likelihood-curve plot (requires matplotlib)
"""

__version__ = "0.1.0"

from pylikelihood.categorical import support_oneway, support_twoway
from pylikelihood.anova import support_anova
from pylikelihood.power import t_test_sample_size

__all__ = [
    "__version__",
    "support_oneway",
    "support_twoway",
    "support_anova",
    "t_test_sample_size",
]
