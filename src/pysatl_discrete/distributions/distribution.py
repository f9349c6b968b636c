"""
Discrete Distribution Contract
==============================

This module defines :class:`DiscreteDistribution`, the abstract interface
shared by every discrete distribution of the core, together with generic
default implementations layered on top of two primitives:

- :attr:`DiscreteDistribution.support` - the integer range carrying mass;
- :meth:`DiscreteDistribution.probability_mass` - ``P(X = k)``.

Everything else (cumulative probabilities, quantiles, moments, sampling) has a
numerical default from :mod:`pysatl_discrete.distributions.fitters`. Concrete
families override the defaults with closed forms where available.

Notes
-----
- Distributions are immutable; every query is a pure function of the
  parameters and its argument.
- Random sources are passed explicitly to the sampling methods.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from math import isnan, log, sqrt
from typing import TYPE_CHECKING

import numpy as np

from pysatl_discrete.distributions.fitters import (
    expectation_from_pmf,
    inverse_transform_draw,
    pmf_partial_sums,
    quantile_from_cdf,
    quantile_seed,
)
from pysatl_discrete.distributions.sampling import ArraySample
from pysatl_discrete.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_discrete.distributions.sampling import UniformRandomSource
    from pysatl_discrete.distributions.support import DiscreteInterval
    from pysatl_discrete.types import ExpectationFunc


def check_probability(p: float) -> float:
    """
    Validate a quantile argument.

    Raises
    ------
    InvalidArgumentError
        If ``p`` is not in ``(0, 1]``.
    """
    p = float(p)
    if isnan(p) or not 0.0 < p <= 1.0:
        raise InvalidArgumentError(f"Probability must be in (0, 1], got {p!r}.")
    return p


class DiscreteDistribution(ABC):
    """
    Abstract univariate discrete distribution on the integers.

    Subclasses must provide :attr:`support` and :meth:`probability_mass`;
    the remaining methods are generic and may be overridden.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def support(self) -> DiscreteInterval:
        """Integer range outside of which the probability mass is zero."""

    @abstractmethod
    def probability_mass(self, k: int) -> float:
        """
        Probability mass ``P(X = k)``.

        Must return exactly ``0.0`` for ``k`` outside :attr:`support`.
        """

    # --- cumulative probabilities ------------------------------------------

    def left_inclusive_probability(self, k: int) -> float:
        """Cumulative probability ``P(X <= k)``."""
        return pmf_partial_sums(self, k)[0]

    def left_exclusive_probability(self, k: int) -> float:
        """Cumulative probability ``P(X < k)``."""
        lo = self.support.min_k
        if lo is not None and k <= lo:
            return 0.0
        return self.left_inclusive_probability(k - 1)

    def right_exclusive_probability(self, k: int) -> float:
        """Tail probability ``P(X > k)``."""
        return pmf_partial_sums(self, k)[1]

    def inverse_left_probability(self, p: float) -> int:
        """
        Quantile function.

        Parameters
        ----------
        p : float
            Probability in ``(0, 1]``.

        Returns
        -------
        int
            The unique ``K`` with
            ``left_exclusive_probability(K) < p <= left_inclusive_probability(K)``.

        Raises
        ------
        InvalidArgumentError
            If ``p`` is outside ``(0, 1]``.
        """
        p = check_probability(p)
        return quantile_from_cdf(
            self.left_inclusive_probability, p, self.support, quantile_seed(self, p)
        )

    # --- moments --------------------------------------------------------------

    def expectation_value(self, f: ExpectationFunc) -> float:
        """
        Expectation ``E[f(X)] = sum_k f(k) P(X = k)`` over the support.

        Parameters
        ----------
        f : Callable[[int], float]
            Function of the variate.

        Returns
        -------
        float
            The expectation value; on unbounded supports the series is
            truncated once the remainder is negligible.
        """
        return expectation_from_pmf(self, f)

    def raw_moment(self, n: int) -> float:
        """Raw moment ``E[X^n]``."""
        if n < 0:
            raise ValueError(f"Moment order must be non-negative, got {n}.")
        if n == 0:
            return 1.0
        return self.expectation_value(lambda k: float(k) ** n)

    def central_moment(self, n: int) -> float:
        """Central moment ``E[(X - mean)^n]``."""
        if n < 0:
            raise ValueError(f"Moment order must be non-negative, got {n}.")
        if n == 0:
            return 1.0
        if n == 1:
            return 0.0
        mu = self.mean
        return self.expectation_value(lambda k: (k - mu) ** n)

    @property
    def mean(self) -> float:
        return self.raw_moment(1)

    @property
    def variance(self) -> float:
        return self.central_moment(2)

    @property
    def standard_deviation(self) -> float:
        return sqrt(self.variance)

    @property
    def skewness(self) -> float:
        var = self.variance
        if var <= 0.0:
            return float("nan")
        return self.central_moment(3) / var**1.5

    @property
    def excess_kurtosis(self) -> float:
        var = self.variance
        if var <= 0.0:
            return float("nan")
        return self.central_moment(4) / var**2 - 3.0

    @property
    def median(self) -> int:
        return self.inverse_left_probability(0.5)

    # --- sampling -------------------------------------------------------------

    def get_random_value(self, source: UniformRandomSource) -> int:
        """
        Draw one variate.

        Parameters
        ----------
        source : UniformRandomSource
            Caller-owned source of uniform variates on ``[0, 1)``.

        Returns
        -------
        int
            A variate obtained by inverse transform sampling.
        """
        return inverse_transform_draw(self, source)

    def sample(self, n: int, source: UniformRandomSource) -> ArraySample:
        """
        Draw ``n`` independent variates.

        Returns
        -------
        ArraySample
            A 1D integer sample of shape ``(n,)``.
        """
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}.")
        values = np.fromiter(
            (self.get_random_value(source) for _ in range(n)), dtype=np.int64, count=n
        )
        return ArraySample(values)

    def log_likelihood(self, values: ArraySample | Iterable[int]) -> float:
        """
        Log-likelihood ``sum_i log P(X = x_i)`` of observed values.

        Returns ``-inf`` if any value carries no probability mass.
        """
        total = 0.0
        for k in values:
            pk = self.probability_mass(int(k))
            if pk <= 0.0:
                return float("-inf")
            total += log(pk)
        return total


__all__ = [
    "DiscreteDistribution",
    "check_probability",
]
