"""
Sample size planning under the evidential framework.

How many observations are needed so that a study is unlikely to produce
weak or misleading evidence? Sizes are chosen so that the probability of
the likelihood ratio falling short of the target support, when the
alternative is true, does not exceed a given level.

Public API:
    t_test_sample_size(misleading_weak_prob, sd, effect_size, support, paired)
"""

from pylikelihood.power._means import t_test_sample_size

__all__ = [
    "t_test_sample_size",
]
