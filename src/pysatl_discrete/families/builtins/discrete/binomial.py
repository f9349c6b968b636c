"""
Binomial distribution family implementation.

Number of successes in ``n`` independent Bernoulli trials.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import exp, sqrt
from typing import ClassVar

from scipy import special as _sp_special

from pysatl_discrete.distributions.distribution import DiscreteDistribution
from pysatl_discrete.distributions.support import DiscreteInterval
from pysatl_discrete.families.builtins.discrete._common import (
    clip_probability,
    is_probability,
    log_binomial_coefficient,
)
from pysatl_discrete.families.parametrizations import Parametrization, constraint, is_integer
from pysatl_discrete.types import FamilyName


@dataclass(frozen=True, slots=True)
class Binomial(Parametrization, DiscreteDistribution):
    """
    Binomial distribution.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1 - p)^(n - k),  k = 0, ..., n

    Cumulative probabilities are evaluated through the regularized incomplete
    beta function:
        P(X <= k) = I_{1-p}(n - k, k + 1)

    Parameters
    ----------
    p : float
        Success probability of a single trial, ``0 <= p <= 1``.
    n : int
        Number of trials, ``n >= 0``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.BINOMIAL

    p: float
    n: int

    @constraint("p", description="0 <= p <= 1")
    def check_p(self) -> bool:
        return is_probability(self.p)

    @constraint("n", description="n is an integer >= 0")
    def check_n(self) -> bool:
        return is_integer(self.n) and self.n >= 0

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(0, int(self.n))

    def probability_mass(self, k: int) -> float:
        if k < 0 or k > self.n:
            return 0.0
        # xlogy/xlog1py treat 0 * log(0) as 0, covering p = 0 and p = 1
        log_pmf = (
            log_binomial_coefficient(self.n, k)
            + _sp_special.xlogy(k, self.p)
            + _sp_special.xlog1py(self.n - k, -self.p)
        )
        return clip_probability(exp(log_pmf))

    def left_inclusive_probability(self, k: int) -> float:
        if k < 0:
            return 0.0
        if k >= self.n:
            return 1.0
        return clip_probability(_sp_special.betainc(self.n - k, k + 1, 1.0 - self.p))

    def right_exclusive_probability(self, k: int) -> float:
        if k < 0:
            return 1.0
        if k >= self.n:
            return 0.0
        return clip_probability(_sp_special.betainc(k + 1, self.n - k, self.p))

    @property
    def mean(self) -> float:
        return self.n * self.p

    @property
    def variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)

    @property
    def skewness(self) -> float:
        var = self.variance
        if var == 0.0:
            return float("nan")
        return (1.0 - 2.0 * self.p) / sqrt(var)

    @property
    def excess_kurtosis(self) -> float:
        var = self.variance
        if var == 0.0:
            return float("nan")
        return (1.0 - 6.0 * self.p * (1.0 - self.p)) / var
