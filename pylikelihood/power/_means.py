"""
Sample size for comparing means.

For a standardized effect d and n observations the log likelihood ratio of
the alternative against the null is normal with mean x^2/2 and standard
deviation x, where x = sqrt(n) * d (paired / one-sample) or
sqrt(n / 2) * d (two independent groups of n each). Evidence is weak or
misleading when the log likelihood ratio is below the target support S:

    P(weak or misleading) = Phi(S / x - x / 2)

Setting this to M and solving the quadratic in x gives

    x = -z + sqrt(z^2 + 2 S),   z = Phi^-1(M)
"""

import math

from scipy import stats as sp_stats

from pylikelihood.core.exceptions import ValidationError
from pylikelihood.core.validation import check_scalar_finite


def t_test_sample_size(
    misleading_weak_prob: float = 0.2,
    sd: float = 1.0,
    effect_size: float = 1.0,
    support: float = 3.0,
    paired: bool = False,
) -> int:
    """
    Minimal sample size for a t-test to reach a target support.

    Args:
        misleading_weak_prob: Acceptable probability of weak or misleading
            evidence when the effect is real, in (0, 1). Default 0.2.
        sd: Standard deviation of the observations (of the differences
            when paired). Default 1.
        effect_size: Difference in means to detect, in the units of sd.
            With sd=1 this is Cohen's d. Sign is ignored. Default 1.
        support: Target support (natural log likelihood ratio). Default 3.
        paired: True for a paired (or one-sample) design, False for two
            independent groups.

    Returns:
        Number of pairs when paired, otherwise number per group.

    Examples:
        >>> t_test_sample_size(0.2, sd=1, effect_size=1, support=3, paired=True)
        12
    """
    mw = check_scalar_finite(misleading_weak_prob, "misleading_weak_prob")
    sd = check_scalar_finite(sd, "sd")
    effect_size = check_scalar_finite(effect_size, "effect_size")
    support = check_scalar_finite(support, "support")

    if not (0.0 < mw < 1.0):
        raise ValidationError(
            f"misleading_weak_prob must be in (0, 1), got {mw}"
        )
    if sd <= 0:
        raise ValidationError(f"sd must be > 0, got {sd}")
    if effect_size == 0:
        raise ValidationError("effect_size must be non-zero")
    if support <= 0:
        raise ValidationError(f"support must be > 0, got {support}")

    d = abs(effect_size) / sd
    z = float(sp_stats.norm.ppf(mw))
    x = -z + math.sqrt(z * z + 2.0 * support)

    n = (x / d) ** 2
    if not paired:
        n *= 2.0
    # guard against 9.000000000000002 rounding up to 10
    return int(math.ceil(round(n, 9)))
