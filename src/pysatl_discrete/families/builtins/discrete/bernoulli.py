"""
Bernoulli distribution family implementation.

A single trial that succeeds with probability ``p``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import sqrt
from typing import ClassVar

from pysatl_discrete.distributions.distribution import DiscreteDistribution, check_probability
from pysatl_discrete.distributions.support import DiscreteInterval
from pysatl_discrete.families.builtins.discrete._common import is_probability
from pysatl_discrete.families.parametrizations import Parametrization, constraint
from pysatl_discrete.types import FamilyName


@dataclass(frozen=True, slots=True)
class Bernoulli(Parametrization, DiscreteDistribution):
    """
    Bernoulli distribution.

    Probability mass function:
        P(X = 1) = p,  P(X = 0) = 1 - p

    Parameters
    ----------
    p : float
        Success probability, ``0 <= p <= 1``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.BERNOULLI

    p: float

    @constraint("p", description="0 <= p <= 1")
    def check_p(self) -> bool:
        return is_probability(self.p)

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(0, 1)

    def probability_mass(self, k: int) -> float:
        if k == 0:
            return 1.0 - self.p
        if k == 1:
            return float(self.p)
        return 0.0

    def left_inclusive_probability(self, k: int) -> float:
        if k < 0:
            return 0.0
        if k < 1:
            return 1.0 - self.p
        return 1.0

    def right_exclusive_probability(self, k: int) -> float:
        if k < 0:
            return 1.0
        if k < 1:
            return float(self.p)
        return 0.0

    def inverse_left_probability(self, p: float) -> int:
        p = check_probability(p)
        return 0 if p <= 1.0 - self.p else 1

    @property
    def mean(self) -> float:
        return float(self.p)

    @property
    def variance(self) -> float:
        return self.p * (1.0 - self.p)

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
        return (1.0 - 6.0 * var) / var
