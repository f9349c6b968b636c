from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_discrete.errors import IndexOutOfRangeError
from pysatl_discrete.families import Binomial
from pysatl_discrete.stats import Histogram, TestResult


class TestHistogram:
    def test_starts_empty(self) -> None:
        histogram = Histogram(4)
        assert histogram.size == 4
        assert len(histogram) == 4
        assert histogram.total == 0
        assert histogram.counts.tolist() == [0, 0, 0, 0]

    @pytest.mark.parametrize("size", [0, -3])
    def test_non_positive_size_is_rejected(self, size: int) -> None:
        with pytest.raises(ValueError):
            Histogram(size)

    def test_add(self) -> None:
        histogram = Histogram(3)
        for k in (0, 2, 2, 1, 2):
            histogram.add(k)
        assert histogram.counts.tolist() == [1, 1, 3]
        assert histogram[2] == 3
        assert histogram.total == 5

    def test_add_numpy_integer(self) -> None:
        histogram = Histogram(3)
        histogram.add(np.int64(1))
        assert histogram[1] == 1

    @pytest.mark.parametrize("k", [-1, 3, 100])
    def test_out_of_range_is_rejected(self, k: int) -> None:
        histogram = Histogram(3)
        with pytest.raises(IndexOutOfRangeError):
            histogram.add(k)
        assert histogram.total == 0

    def test_out_of_range_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            Histogram(3)[3]

    @pytest.mark.parametrize("k", [1.0, "1", True])
    def test_non_integer_is_rejected(self, k: object) -> None:
        with pytest.raises(TypeError):
            Histogram(3).add(k)  # type: ignore[arg-type]

    def test_add_all(self) -> None:
        histogram = Histogram(5)
        histogram.add_all([4, 4, 0, 3])
        assert histogram.counts.tolist() == [1, 0, 0, 1, 2]

    def test_add_all_stops_at_first_invalid_value(self) -> None:
        histogram = Histogram(2)
        with pytest.raises(IndexOutOfRangeError):
            histogram.add_all([0, 1, 5, 0])
        assert histogram.total == 2

    def test_counts_is_a_copy(self) -> None:
        histogram = Histogram(2)
        histogram.counts[0] = 10
        assert histogram[0] == 0

    def test_chi_squared_test_delegates(self) -> None:
        histogram = Histogram(6)
        histogram.add_all([0] * 17 + [1] * 40 + [2] * 31 + [3] * 10 + [4] * 2)
        result = histogram.chi_squared_test(Binomial(0.4, 5))
        assert isinstance(result, TestResult)
        assert result.statistic >= 0.0

    def test_repr(self) -> None:
        histogram = Histogram(3)
        histogram.add(1)
        assert repr(histogram) == "Histogram(size=3, total=1)"
