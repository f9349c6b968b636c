"""
Goodness-of-Fit Testing
=======================

Pearson's chi-squared test of a binned sample against a discrete
distribution with fixed (not fitted) parameters.

Notes
-----
- Bin ``0`` absorbs the probability of every value below it and the last bin
  absorbs the probability of every value above it, so the expected counts
  always add up to the number of observations.
- Adjacent bins are merged from left to right until each cell expects at
  least ``min_expected`` observations; a trailing cell that falls short is
  merged into its left neighbour. Bins with vanishing expected counts are
  therefore never tested on their own.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy import stats as _sp_stats

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from pysatl_discrete.distributions.distribution import DiscreteDistribution
    from pysatl_discrete.stats.histogram import Histogram

DEFAULT_MIN_EXPECTED = 5.0
"""Smallest expected count of a cell entering the chi-squared statistic."""


@dataclass(frozen=True, slots=True)
class TestResult:
    """
    Result of a statistical test.

    Parameters
    ----------
    statistic : float
        Value of the test statistic.
    reference : Any
        Frozen :mod:`scipy.stats` distribution of the statistic under the
        null hypothesis (``chi2(df)`` for the chi-squared test).
    """

    __test__ = False

    statistic: float
    reference: Any

    @property
    def right_probability(self) -> float:
        """Tail probability ``P(S >= statistic)`` under the null hypothesis."""
        return float(self.reference.sf(self.statistic))

    @property
    def left_probability(self) -> float:
        """Probability ``P(S < statistic)`` under the null hypothesis."""
        return float(self.reference.cdf(self.statistic))

    @property
    def degrees_of_freedom(self) -> int:
        return int(self.reference.args[0])


def expected_bin_probabilities(
    distribution: DiscreteDistribution, size: int
) -> NDArray[np.float64]:
    """
    Probability of each of ``size`` bins under ``distribution``.

    The first bin collects ``P(X <= 0)`` and the last bin ``P(X >= size - 1)``;
    the bins in between get the point masses.
    """
    if size < 1:
        raise ValueError(f"Number of bins must be positive, got {size}.")
    if size == 1:
        return np.ones(1, dtype=np.float64)

    probs = np.empty(size, dtype=np.float64)
    probs[0] = distribution.left_inclusive_probability(0)
    for i in range(1, size - 1):
        probs[i] = distribution.probability_mass(i)
    probs[-1] = distribution.right_exclusive_probability(size - 2)
    return probs


def merge_bins(
    observed: NDArray[np.int64],
    expected: NDArray[np.float64],
    min_expected: float = DEFAULT_MIN_EXPECTED,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Merge adjacent bins so that every cell expects at least ``min_expected``.

    Returns
    -------
    tuple[NDArray, NDArray]
        Observed and expected counts of the merged cells; both keep the totals
        of the input.
    """
    cells_obs: list[float] = []
    cells_exp: list[float] = []
    acc_obs = 0.0
    acc_exp = 0.0
    for obs, exp in zip(observed, expected, strict=True):
        acc_obs += float(obs)
        acc_exp += float(exp)
        if acc_exp >= min_expected:
            cells_obs.append(acc_obs)
            cells_exp.append(acc_exp)
            acc_obs = acc_exp = 0.0

    if acc_obs > 0.0 or acc_exp > 0.0:
        if cells_exp:
            cells_obs[-1] += acc_obs
            cells_exp[-1] += acc_exp
        else:
            cells_obs.append(acc_obs)
            cells_exp.append(acc_exp)

    return np.asarray(cells_obs, dtype=np.float64), np.asarray(cells_exp, dtype=np.float64)


def chi_squared_test(
    histogram: Histogram,
    distribution: DiscreteDistribution,
    *,
    min_expected: float = DEFAULT_MIN_EXPECTED,
) -> TestResult:
    """
    Pearson's chi-squared goodness-of-fit test.

    Parameters
    ----------
    histogram : Histogram
        Observed bin counts.
    distribution : DiscreteDistribution
        Hypothesised distribution; its parameters are taken as fixed.
    min_expected : float, default 5.0
        Smallest expected count of a cell after merging.

    Returns
    -------
    TestResult
        Statistic ``sum (O - E)^2 / E`` over the merged cells with a
        ``chi2(cells - 1)`` reference distribution.

    Raises
    ------
    ValueError
        If the histogram is empty or fewer than two cells remain after merging.
    """
    total = histogram.total
    if total == 0:
        raise ValueError("Chi-squared test requires a non-empty histogram.")

    expected = total * expected_bin_probabilities(distribution, histogram.size)
    observed, expected = merge_bins(histogram.counts, expected, min_expected)
    if observed.size < 2:
        raise ValueError(
            "Chi-squared test requires at least two cells with non-negligible expected count."
        )

    statistic = float(np.sum((observed - expected) ** 2 / expected))
    return TestResult(statistic=statistic, reference=_sp_stats.chi2(observed.size - 1))


__all__ = [
    "DEFAULT_MIN_EXPECTED",
    "TestResult",
    "expected_bin_probabilities",
    "merge_bins",
    "chi_squared_test",
]
