"""
Hypergeometric distribution family implementation.

Number of successes in ``draws`` draws without replacement from a population
of size ``population`` containing ``successes`` success states.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import sqrt
from typing import TYPE_CHECKING, ClassVar, cast

import numpy as np
from scipy import special as _sp_special

from pysatl_discrete.distributions.distribution import DiscreteDistribution
from pysatl_discrete.distributions.support import DiscreteInterval
from pysatl_discrete.families.builtins.discrete._common import clip_probability
from pysatl_discrete.families.parametrizations import Parametrization, constraint, is_integer
from pysatl_discrete.types import FamilyName

if TYPE_CHECKING:
    from pysatl_discrete.types import IntegerArray


@dataclass(frozen=True, slots=True)
class Hypergeometric(Parametrization, DiscreteDistribution):
    """
    Hypergeometric distribution.

    Probability mass function:
        P(X = k) = C(K, k) C(N - K, n - k) / C(N, n)

    with ``N = population``, ``K = successes`` and ``n = draws``. The binomial
    coefficients are combined in log space so large populations do not
    overflow. Cumulative probabilities sum the shorter tail of the support and
    take the complement for the other side.

    Parameters
    ----------
    population : int
        Population size, ``population >= 0``.
    successes : int
        Number of success states, ``0 <= successes <= population``.
    draws : int
        Number of draws, ``0 <= draws <= population``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.HYPERGEOMETRIC

    population: int
    successes: int
    draws: int

    @constraint("population", description="population is an integer >= 0")
    def check_population(self) -> bool:
        return is_integer(self.population) and self.population >= 0

    @constraint("successes", description="successes is an integer, 0 <= successes <= population")
    def check_successes(self) -> bool:
        return is_integer(self.successes) and 0 <= self.successes <= self.population

    @constraint("draws", description="draws is an integer, 0 <= draws <= population")
    def check_draws(self) -> bool:
        return is_integer(self.draws) and 0 <= self.draws <= self.population

    @property
    def support(self) -> DiscreteInterval:
        failures = self.population - self.successes
        return DiscreteInterval(
            max(0, int(self.draws) - int(failures)), min(int(self.draws), int(self.successes))
        )

    def _log_pmf(self, k: IntegerArray) -> np.ndarray:
        gammaln = _sp_special.gammaln
        big_n, big_k, n = float(self.population), float(self.successes), float(self.draws)
        kf = k.astype(np.float64)
        return (
            gammaln(big_k + 1.0)
            - gammaln(kf + 1.0)
            - gammaln(big_k - kf + 1.0)
            + gammaln(big_n - big_k + 1.0)
            - gammaln(n - kf + 1.0)
            - gammaln(big_n - big_k - n + kf + 1.0)
            - gammaln(big_n + 1.0)
            + gammaln(n + 1.0)
            + gammaln(big_n - n + 1.0)
        )

    def _mass_between(self, first: int, last: int) -> float:
        points = np.arange(first, last + 1, dtype=np.int64)
        return float(np.exp(self._log_pmf(points)).sum())

    def probability_mass(self, k: int) -> float:
        if k not in self.support:
            return 0.0
        return clip_probability(self._mass_between(k, k))

    def _split(self, k: int) -> tuple[float, float]:
        support = self.support
        lo, hi = cast(int, support.min_k), cast(int, support.max_k)
        if k < lo:
            return 0.0, 1.0
        if k >= hi:
            return 1.0, 0.0
        if k - lo < hi - k:
            left = clip_probability(self._mass_between(lo, k))
            return left, 1.0 - left
        right = clip_probability(self._mass_between(k + 1, hi))
        return 1.0 - right, right

    def left_inclusive_probability(self, k: int) -> float:
        return self._split(k)[0]

    def right_exclusive_probability(self, k: int) -> float:
        return self._split(k)[1]

    @property
    def mean(self) -> float:
        if self.population == 0:
            return 0.0
        return self.draws * self.successes / self.population

    @property
    def variance(self) -> float:
        big_n, big_k, n = self.population, self.successes, self.draws
        if big_n <= 1:
            return 0.0
        return n * (big_k / big_n) * ((big_n - big_k) / big_n) * ((big_n - n) / (big_n - 1.0))

    @property
    def skewness(self) -> float:
        big_n, big_k, n = self.population, self.successes, self.draws
        if self.variance == 0.0 or big_n <= 2:
            return float("nan")
        return (
            (big_n - 2.0 * big_k)
            * sqrt(big_n - 1.0)
            * (big_n - 2.0 * n)
            / (sqrt(n * big_k * (big_n - big_k) * (big_n - n)) * (big_n - 2.0))
        )
