"""
Tests for the hypothesis-test wrappers.
"""

import math

import numpy as np
import pytest
from scipy import stats

from powercurve.stats.data_generation import ContingencyTable, ContinuousSample, generate_continuous
from powercurve.stats.hypothesis import TestResult, fisher_exact_test, welch_t_test


def _sample(a, b):
    values = np.concatenate([a, b]).astype(float)
    groups = np.array(["A"] * len(a) + ["B"] * len(b))
    return ContinuousSample(values=values, groups=groups)


class TestWelchTTest:
    def test_matches_scipy_unequal_variance(self):
        a = [1.0, 2.0, 3.0, 2.5, 1.5]
        b = [4.0, 6.5, 5.0, 9.0, 7.0, 3.5]
        result = welch_t_test(_sample(a, b))
        ref = stats.ttest_ind(a, b, equal_var=False)

        assert isinstance(result, TestResult)
        assert result.statistic == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)

    def test_differs_from_pooled_test(self):
        a = [0.1, 0.2, 0.15, 0.12]
        b = [1.0, 5.0, -2.0, 8.0, 3.0, 0.5]
        pooled = stats.ttest_ind(a, b, equal_var=True)
        assert welch_t_test(_sample(a, b)).p_value != pytest.approx(pooled.pvalue)

    def test_two_sided_symmetric(self):
        a = [1.0, 2.0, 3.0]
        b = [2.0, 4.0, 5.0]
        forward = welch_t_test(_sample(a, b))
        backward = welch_t_test(_sample(b, a))
        assert forward.p_value == pytest.approx(backward.p_value)
        assert forward.statistic == pytest.approx(-backward.statistic)

    def test_p_value_bounds(self, rng):
        for d in [0.0, 0.5, 3.0]:
            p = welch_t_test(generate_continuous(rng, d)).p_value
            assert 0.0 <= p <= 1.0


class TestFisherExactTest:
    def test_matches_scipy(self):
        counts = np.array([[8, 2], [1, 5]])
        result = fisher_exact_test(ContingencyTable(counts))
        ref = stats.fisher_exact(counts)

        assert result.statistic == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)

    def test_identical_groups_not_significant(self):
        result = fisher_exact_test(ContingencyTable(np.array([[7, 7], [18, 18]])))
        assert result.p_value == pytest.approx(1.0)

    def test_strong_difference_significant(self):
        result = fisher_exact_test(ContingencyTable(np.array([[2, 24], [23, 1]])))
        assert result.p_value < 1e-6

    def test_degenerate_zero_row_passes_through(self):
        """No events in either group: scipy reports p = 1 and an undefined odds ratio."""
        result = fisher_exact_test(ContingencyTable(np.array([[0, 0], [25, 25]])))
        assert result.p_value == pytest.approx(1.0)
        assert math.isnan(result.statistic)
