"""
Geometric distribution family implementation.

Number of failures before the first success in independent Bernoulli trials.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import ceil, exp, expm1, isfinite, log1p, sqrt
from typing import ClassVar

from scipy import special as _sp_special

from pysatl_discrete.distributions.distribution import DiscreteDistribution, check_probability
from pysatl_discrete.distributions.fitters import quantile_from_cdf
from pysatl_discrete.distributions.support import DiscreteInterval
from pysatl_discrete.families.builtins.discrete._common import clip_probability, is_probability
from pysatl_discrete.families.parametrizations import Parametrization, constraint
from pysatl_discrete.types import FamilyName


@dataclass(frozen=True, slots=True)
class Geometric(Parametrization, DiscreteDistribution):
    """
    Geometric distribution (failures before the first success).

    Probability mass function:
        P(X = k) = (1 - p)^k p,  k = 0, 1, ...

    Cumulative probability:
        P(X <= k) = 1 - (1 - p)^(k + 1)

    Parameters
    ----------
    p : float
        Success probability of a single trial, ``0 < p <= 1``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.GEOMETRIC

    p: float

    @constraint("p", description="0 < p <= 1")
    def check_p(self) -> bool:
        return is_probability(self.p) and self.p > 0

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        if k < 0:
            return 0.0
        return clip_probability(self.p * exp(_sp_special.xlog1py(k, -self.p)))

    def left_inclusive_probability(self, k: int) -> float:
        if k < 0:
            return 0.0
        return clip_probability(-expm1(_sp_special.xlog1py(k + 1, -self.p)))

    def right_exclusive_probability(self, k: int) -> float:
        if k < 0:
            return 1.0
        return clip_probability(exp(_sp_special.xlog1py(k + 1, -self.p)))

    def inverse_left_probability(self, p: float) -> int:
        p = check_probability(p)
        if self.p == 1.0:
            return 0
        if p == 1.0:
            # the closed form diverges; find where the floating-point cdf saturates
            return quantile_from_cdf(self.left_inclusive_probability, p, self.support, 0)

        estimate = log1p(-p) / log1p(-self.p)
        k = self.support.clip(ceil(estimate) - 1) if isfinite(estimate) else 0
        while k > 0 and self.left_exclusive_probability(k) >= p:
            k -= 1
        while self.left_inclusive_probability(k) < p:
            k += 1
        return k

    @property
    def mean(self) -> float:
        return (1.0 - self.p) / self.p

    @property
    def variance(self) -> float:
        return (1.0 - self.p) / self.p**2

    @property
    def skewness(self) -> float:
        if self.p == 1.0:
            return float("nan")
        return (2.0 - self.p) / sqrt(1.0 - self.p)

    @property
    def excess_kurtosis(self) -> float:
        if self.p == 1.0:
            return float("nan")
        return 6.0 + self.p**2 / (1.0 - self.p)
