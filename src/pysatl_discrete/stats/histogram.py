"""
Histogram
=========

Mutable accumulator of integer observations over the bins ``0 .. size - 1``.

Notes
-----
A histogram is owned by a single writer; concurrent ``add`` calls must be
synchronised by the caller.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
from typing import TYPE_CHECKING

import numpy as np

from pysatl_discrete.errors import IndexOutOfRangeError
from pysatl_discrete.stats.goodness_of_fit import DEFAULT_MIN_EXPECTED, chi_squared_test

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import NDArray

    from pysatl_discrete.distributions.distribution import DiscreteDistribution
    from pysatl_discrete.stats.goodness_of_fit import TestResult


class Histogram:
    """
    Bin counts of integer observations.

    Parameters
    ----------
    size : int
        Number of bins; bins are indexed ``0 .. size - 1``.

    Raises
    ------
    ValueError
        If ``size`` is not positive.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Histogram size must be positive, got {size}.")
        self._counts: NDArray[np.int64] = np.zeros(int(size), dtype=np.int64)
        self._total = 0

    @property
    def size(self) -> int:
        return int(self._counts.size)

    @property
    def total(self) -> int:
        """Number of observations added so far."""
        return self._total

    @property
    def counts(self) -> NDArray[np.int64]:
        """Copy of the bin counts."""
        return self._counts.copy()

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, k: int) -> int:
        return int(self._counts[self._check_index(k)])

    def _check_index(self, k: int) -> int:
        if isinstance(k, bool) or not isinstance(k, Integral):
            raise TypeError(f"Bin index must be an integer, got {k!r}.")
        if not 0 <= k < self._counts.size:
            raise IndexOutOfRangeError(
                f"Bin index {k} is outside of the histogram range [0, {self._counts.size})."
            )
        return int(k)

    def add(self, k: int) -> None:
        """
        Increment the count of bin ``k``.

        Raises
        ------
        IndexOutOfRangeError
            If ``k`` is outside ``[0, size)``.
        """
        self._counts[self._check_index(k)] += 1
        self._total += 1

    def add_all(self, values: Iterable[int]) -> None:
        """Add every value of ``values``; stops at the first invalid one."""
        for k in values:
            self.add(k)

    def chi_squared_test(
        self, distribution: DiscreteDistribution, *, min_expected: float = DEFAULT_MIN_EXPECTED
    ) -> TestResult:
        """
        Test the binned observations against ``distribution``.

        See :func:`pysatl_discrete.stats.goodness_of_fit.chi_squared_test`.
        """
        return chi_squared_test(self, distribution, min_expected=min_expected)

    def __repr__(self) -> str:
        return f"Histogram(size={self.size}, total={self.total})"


__all__ = [
    "Histogram",
]
