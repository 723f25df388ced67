"""
Tests for support_anova().

Reference values for the three_groups fixture (n = 9, k = 3):
    SS_between = 122, SS_within = 6, SS_total = 128, F(2, 6) = 61
    linear contrast SS = 121.5, quadratic contrast SS = 0.5
    AICc penalties (support units): 2 params 3.0, 3 params 5.4, 4 params 9.0
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from pylikelihood.anova import AnovaDesign, support_anova
from pylikelihood.anova._ss import aicc_penalty, support_from_rss
from pylikelihood.core.exceptions import (
    DimensionError,
    NumericalError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# ANOVA table
# ═══════════════════════════════════════════════════════════════════════


class TestAnovaTable:

    def test_sums_of_squares(self, three_groups):
        result = support_anova(*three_groups)
        groups_row, residual_row = result.table
        assert groups_row.sum_sq == pytest.approx(122.0, rel=1e-12)
        assert residual_row.sum_sq == pytest.approx(6.0, rel=1e-10)
        assert result.params.total_ss == pytest.approx(128.0, rel=1e-12)

    def test_f_statistic(self, three_groups):
        result = support_anova(*three_groups)
        assert result.f_value == pytest.approx(61.0, rel=1e-10)
        assert result.df_between == 2
        assert result.df_within == 6
        assert result.p_value == pytest.approx(sp_stats.f.sf(61.0, 2, 6), rel=1e-8)

    def test_matches_scipy_f_oneway(self, unbalanced_groups):
        y, group = unbalanced_groups
        f, p = sp_stats.f_oneway(*[y[group == g] for g in range(1, 5)])
        result = support_anova(y, group)
        assert result.f_value == pytest.approx(f, rel=1e-10)
        assert result.p_value == pytest.approx(p, rel=1e-8)

    def test_group_summaries(self, three_groups):
        result = support_anova(*three_groups)
        assert result.levels == (1, 2, 3)
        assert result.group_means == {
            1: pytest.approx(11.0), 2: pytest.approx(15.0), 3: pytest.approx(20.0),
        }
        assert result.group_sizes == {1: 3, 2: 3, 3: 3}
        assert result.grand_mean == pytest.approx(138 / 9)
        assert result.n_obs == 9


# ═══════════════════════════════════════════════════════════════════════
# Support for groups
# ═══════════════════════════════════════════════════════════════════════


class TestGroupsSupport:

    def test_aicc_penalty(self):
        assert aicc_penalty(2, 9) == pytest.approx(3.0)
        assert aicc_penalty(3, 9) == pytest.approx(5.4)
        assert aicc_penalty(4, 9) == pytest.approx(9.0)

    def test_uncorrected(self, three_groups):
        result = support_anova(*three_groups)
        assert result.support_groups_uncorrected == pytest.approx(
            4.5 * np.log(128 / 6), rel=1e-10,
        )

    def test_corrected(self, three_groups):
        result = support_anova(*three_groups)
        assert result.support_groups == pytest.approx(
            4.5 * np.log(128 / 6) - 6.0, rel=1e-10,
        )

    def test_agrees_with_rss_form(self, unbalanced_groups):
        """n/2 ln(1 + F(k-1)/(n-k)) equals n/2 ln(SS_total / SS_within)."""
        y, group = unbalanced_groups
        result = support_anova(y, group)
        ss_within = result.table[1].sum_sq
        expected = support_from_rss(ss_within, result.params.total_ss, len(y))
        assert result.support_groups_uncorrected == pytest.approx(expected, rel=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Contrasts
# ═══════════════════════════════════════════════════════════════════════


class TestDefaultContrasts:

    def test_linear_and_quadratic(self, three_groups):
        result = support_anova(*three_groups)
        assert result.params.default_contrasts
        assert result.contrast1.sum_sq == pytest.approx(121.5, rel=1e-10)
        assert result.contrast2.sum_sq == pytest.approx(0.5, rel=1e-8)

    def test_estimate(self, three_groups):
        result = support_anova(*three_groups)
        assert result.contrast1.estimate == pytest.approx(9 / np.sqrt(2), rel=1e-10)

    def test_contrast_f(self, three_groups):
        result = support_anova(*three_groups)
        assert result.contrast1.f_value == pytest.approx(121.5, rel=1e-10)
        assert result.contrast1.p_value == pytest.approx(
            sp_stats.f.sf(121.5, 1, 6), rel=1e-8,
        )

    def test_linear_vs_null(self, three_groups):
        result = support_anova(*three_groups)
        unc = 4.5 * np.log(128 / 6.5)
        assert result.contrast1.support_vs_null_uncorrected == pytest.approx(unc, rel=1e-10)
        assert result.contrast1.support_vs_null == pytest.approx(unc - 2.4, rel=1e-10)

    def test_linear_vs_groups(self, three_groups):
        """Linear model has fewer parameters, so the correction favours it."""
        result = support_anova(*three_groups)
        unc = 4.5 * np.log(6 / 6.5)
        assert result.contrast1.support_vs_groups_uncorrected == pytest.approx(unc, rel=1e-10)
        assert result.support_contrast1_vs_groups == pytest.approx(unc + 3.6, rel=1e-10)

    def test_contrast1_vs_contrast2(self, three_groups):
        result = support_anova(*three_groups)
        assert result.support_contrast1_vs_contrast2 == pytest.approx(
            4.5 * np.log(127.5 / 6.5), rel=1e-10,
        )

    def test_reversed_order_negates(self, three_groups):
        y, group = three_groups
        P = np.array([[-1, 1], [0, -2], [1, 1]], dtype=float)
        forward = support_anova(y, group, P[:, 0], P[:, 1])
        backward = support_anova(y, group, P[:, 1], P[:, 0])
        assert backward.support_contrast1_vs_contrast2 == pytest.approx(
            -forward.support_contrast1_vs_contrast2, rel=1e-12,
        )


class TestCustomContrasts:

    def test_unscaled_linear_matches_default(self, three_groups):
        y, group = three_groups
        default = support_anova(y, group)
        custom = support_anova(y, group, contrast1=[-1, 0, 1], contrast2=[1, -2, 1])
        assert not custom.params.default_contrasts
        assert custom.contrast1.sum_sq == pytest.approx(default.contrast1.sum_sq)
        assert custom.support_contrast1_vs_contrast2 == pytest.approx(
            default.support_contrast1_vs_contrast2,
        )

    def test_non_zero_sum_contrast(self, three_groups):
        """Coefficients 1, 2, 3 describe the same linear model as -1, 0, 1."""
        y, group = three_groups
        result = support_anova(y, group, contrast1=[1, 2, 3])
        assert result.contrast1.sum_sq == pytest.approx(121.5, rel=1e-10)
        assert result.contrast2 is None

    def test_only_contrast2_given(self, three_groups):
        """contrast1 falls back to the linear polynomial."""
        y, group = three_groups
        result = support_anova(y, group, contrast2=[2, -1, -1])
        assert result.contrast1.sum_sq == pytest.approx(121.5, rel=1e-10)
        assert result.contrast2 is not None
        assert not result.params.default_contrasts

    def test_contrast_ss_bounded_by_between(self, unbalanced_groups):
        y, group = unbalanced_groups
        result = support_anova(y, group, contrast1=[5, -1, 2, 0.5])
        assert 0.0 <= result.contrast1.sum_sq <= result.table[0].sum_sq * (1 + 1e-12)

    def test_unbalanced_contrast_rss(self, unbalanced_groups):
        """Contrast RSS equals the residuals of y regressed on [1, c_group]."""
        y, group = unbalanced_groups
        c = np.array([-3.0, -1.0, 1.0, 3.0])
        X = np.column_stack([np.ones(len(y)), c[group - 1]])
        beta, *_ = np.linalg.lstsq(X, y, rcond=None)
        rss = np.sum((y - X @ beta) ** 2)

        result = support_anova(y, group, contrast1=c)
        assert result.params.total_ss - result.contrast1.sum_sq == pytest.approx(
            rss, rel=1e-10,
        )


class TestTwoGroups:

    def test_no_second_contrast(self, two_groups):
        result = support_anova(*two_groups)
        assert result.contrast2 is None
        assert result.support_contrast1_vs_contrast2 is None

    def test_linear_equals_groups_model(self, two_groups):
        result = support_anova(*two_groups)
        assert result.contrast1.support_vs_groups_uncorrected == pytest.approx(
            0.0, abs=1e-10,
        )
        assert result.contrast1.support_vs_null_uncorrected == pytest.approx(
            result.support_groups_uncorrected, rel=1e-10,
        )

    def test_f_matches_t_test(self, two_groups):
        y, group = two_groups
        t, p = sp_stats.ttest_ind(y[group == 1], y[group == 2])
        result = support_anova(y, group)
        assert result.f_value == pytest.approx(t ** 2, rel=1e-10)
        assert result.p_value == pytest.approx(p, rel=1e-8)


# ═══════════════════════════════════════════════════════════════════════
# Group codes and validation
# ═══════════════════════════════════════════════════════════════════════


class TestGroupCodes:

    def test_order_by_ascending_code(self, three_groups):
        y, group = three_groups
        order = np.array([6, 7, 8, 0, 1, 2, 3, 4, 5])
        shuffled = support_anova(y[order], group[order])
        reference = support_anova(y, group)
        assert shuffled.levels == (1, 2, 3)
        assert shuffled.contrast1.sum_sq == pytest.approx(reference.contrast1.sum_sq)

    def test_non_consecutive_codes(self, three_groups):
        y, group = three_groups
        result = support_anova(y, group * 10)
        assert result.levels == (10, 20, 30)
        assert result.f_value == pytest.approx(61.0, rel=1e-10)

    def test_integral_float_codes(self, three_groups):
        y, group = three_groups
        result = support_anova(y, group.astype(float))
        assert result.levels == (1, 2, 3)

    def test_prebuilt_design(self, three_groups):
        design = AnovaDesign.for_oneway(*three_groups)
        assert design.n_groups == 3
        result = support_anova(design)
        assert result.f_value == pytest.approx(61.0, rel=1e-10)


class TestValidation:

    def test_fractional_codes(self, three_groups):
        y, group = three_groups
        with pytest.raises(ValidationError, match="integers"):
            support_anova(y, group + 0.5)

    def test_string_codes(self, three_groups):
        y, _ = three_groups
        with pytest.raises(ValidationError, match="integer codes"):
            support_anova(y, list("aaabbbccc"))

    def test_single_group(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            support_anova([1.0, 2.0, 3.0, 4.0, 5.0], [1, 1, 1, 1, 1])

    def test_too_few_observations(self):
        with pytest.raises(ValidationError, match="more than 5"):
            support_anova([1.0, 2.0, 3.0, 4.0, 5.0], [1, 1, 2, 2, 3])

    def test_length_mismatch(self, three_groups):
        y, group = three_groups
        with pytest.raises(DimensionError):
            support_anova(y, group[:-1])

    def test_missing_response(self, three_groups):
        y, group = three_groups
        y = y.copy()
        y[0] = np.nan
        with pytest.raises(ValidationError, match="NaN"):
            support_anova(y, group)

    def test_contrast_wrong_length(self, three_groups):
        with pytest.raises(DimensionError, match="one coefficient per group"):
            support_anova(*three_groups, contrast1=[-1, 1])

    def test_constant_contrast(self, three_groups):
        with pytest.raises(ValidationError, match="not all be equal"):
            support_anova(*three_groups, contrast1=[1, 1, 1])

    def test_zero_within_variance(self):
        with pytest.raises(NumericalError, match="within-group"):
            support_anova([1, 1, 2, 2, 3, 3], [1, 1, 2, 2, 3, 3])


class TestSummary:

    def test_summary_lines(self, three_groups):
        text = support_anova(*three_groups).summary()
        assert "Support for groups model vs null, corrected for 2 df" in text
        assert "Support for contrast 1 vs contrast 2" in text
        assert "Residuals" in text
        assert "contrast 2" in text

    def test_summary_two_groups(self, two_groups):
        text = support_anova(*two_groups).summary()
        assert "contrast 1 vs contrast 2" not in text

    def test_repr(self, three_groups):
        assert "AnovaSupportSolution" in repr(support_anova(*three_groups))

    def test_info(self, three_groups):
        result = support_anova(*three_groups)
        assert result.info['n_groups'] == 3
        assert result.timing['total_seconds'] >= 0.0
        assert result.warnings == ()
        assert_allclose(
            result.contrast1.coefficients, np.array([-1, 0, 1]) / np.sqrt(2),
            atol=1e-12,
        )
