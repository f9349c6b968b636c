from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy import stats as sp_stats

from pysatl_discrete.families import Bernoulli, Binomial, DiscreteUniform, Poisson
from pysatl_discrete.stats import Histogram, TestResult, chi_squared_test
from pysatl_discrete.stats.goodness_of_fit import expected_bin_probabilities, merge_bins


class TestExpectedBinProbabilities:
    @pytest.mark.parametrize(
        "distribution, size",
        [(Poisson(4.5), 9), (Binomial(0.4, 5), 6), (Binomial(0.4, 5), 3), (DiscreteUniform(-3, 8), 5)],
        ids=repr,
    )
    def test_sums_to_one(self, distribution, size: int) -> None:
        probs = expected_bin_probabilities(distribution, size)
        assert probs.shape == (size,)
        assert probs.sum() == pytest.approx(1.0, abs=1e-12)

    def test_first_bin_absorbs_left_tail(self) -> None:
        probs = expected_bin_probabilities(DiscreteUniform(-3, 8), 5)
        assert probs[0] == pytest.approx(4 / 12)
        np.testing.assert_allclose(probs[1:4], [1 / 12] * 3)
        assert probs[4] == pytest.approx(5 / 12)

    def test_last_bin_absorbs_right_tail(self) -> None:
        distribution = Poisson(4.5)
        probs = expected_bin_probabilities(distribution, 4)
        assert probs[3] == pytest.approx(distribution.right_exclusive_probability(2))

    def test_single_bin(self) -> None:
        assert expected_bin_probabilities(Poisson(1.0), 1).tolist() == [1.0]

    def test_non_positive_size_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            expected_bin_probabilities(Poisson(1.0), 0)


class TestMergeBins:
    def test_no_merge_when_every_bin_is_large(self) -> None:
        observed, expected = merge_bins(np.array([10, 12, 8]), np.array([10.0, 10.0, 10.0]))
        assert observed.tolist() == [10.0, 12.0, 8.0]
        assert expected.tolist() == [10.0, 10.0, 10.0]

    def test_small_bins_are_grouped_left_to_right(self) -> None:
        observed, expected = merge_bins(
            np.array([0, 1, 3, 2, 9, 1]), np.array([0.0, 2.0, 4.0, 3.0, 7.0, 1.0])
        )
        assert expected.tolist() == [6.0, 11.0]
        assert observed.tolist() == [4.0, 12.0]

    def test_trailing_short_group_joins_its_neighbour(self) -> None:
        observed, expected = merge_bins(np.array([6, 5, 1, 1]), np.array([6.0, 5.0, 2.0, 1.0]))
        assert expected.tolist() == [6.0, 8.0]
        assert observed.tolist() == [6.0, 7.0]

    def test_totals_are_kept(self) -> None:
        rng = np.random.default_rng(5)
        observed_in = rng.integers(0, 20, size=40)
        expected_in = rng.random(40) * 6.0
        observed, expected = merge_bins(observed_in, expected_in)
        assert observed.sum() == pytest.approx(observed_in.sum())
        assert expected.sum() == pytest.approx(expected_in.sum())
        assert np.all(expected >= 5.0)

    def test_everything_below_the_floor_forms_one_cell(self) -> None:
        observed, expected = merge_bins(np.array([1, 1]), np.array([1.0, 1.5]))
        assert observed.tolist() == [2.0]
        assert expected.tolist() == [2.5]

    def test_custom_floor(self) -> None:
        _, expected = merge_bins(np.array([1, 1, 1]), np.array([1.0, 1.0, 1.0]), min_expected=1.0)
        assert expected.tolist() == [1.0, 1.0, 1.0]


class TestChiSquaredTest:
    def test_matches_scipy_chisquare(self) -> None:
        distribution = Binomial(0.4, 5)
        histogram = Histogram(6)
        histogram.add_all([0] * 9 + [1] * 26 + [2] * 36 + [3] * 20 + [4] * 7 + [5] * 2)

        result = chi_squared_test(histogram, distribution)

        probs = expected_bin_probabilities(distribution, 6)
        observed, expected = merge_bins(histogram.counts, 100 * probs)
        reference = sp_stats.chisquare(observed, expected)
        assert result.statistic == pytest.approx(float(reference.statistic))
        assert result.right_probability == pytest.approx(float(reference.pvalue))
        assert result.degrees_of_freedom == observed.size - 1

    def test_degenerate_bins_are_merged_away(self) -> None:
        distribution = DiscreteUniform(5, 11)
        histogram = Histogram(12)
        histogram.add_all([5, 6, 7, 8, 9, 10, 11] * 10)
        result = chi_squared_test(histogram, distribution)
        assert np.isfinite(result.statistic)
        assert result.statistic == pytest.approx(0.0, abs=1e-9)
        assert result.right_probability == pytest.approx(1.0)

    def test_gross_mismatch_is_detected(self) -> None:
        histogram = Histogram(10)
        histogram.add_all([9] * 200)
        result = chi_squared_test(histogram, Poisson(2.0))
        assert result.right_probability < 1e-10
        assert result.left_probability == pytest.approx(1.0)

    def test_empty_histogram_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            chi_squared_test(Histogram(5), Poisson(2.0))

    def test_single_cell_is_rejected(self) -> None:
        histogram = Histogram(2)
        histogram.add_all([0, 0, 1])
        with pytest.raises(ValueError, match="two cells"):
            chi_squared_test(histogram, Bernoulli(0.5))


class TestTestResult:
    def test_probabilities_are_complementary(self) -> None:
        result = TestResult(statistic=3.2, reference=sp_stats.chi2(4))
        assert result.left_probability + result.right_probability == pytest.approx(1.0)
        assert result.right_probability == pytest.approx(sp_stats.chi2(4).sf(3.2))
        assert result.degrees_of_freedom == 4

    def test_is_immutable(self) -> None:
        result = TestResult(statistic=1.0, reference=sp_stats.chi2(1))
        with pytest.raises(AttributeError):
            result.statistic = 2.0  # type: ignore[misc]
