"""
Discrete uniform distribution family implementation.

Equal probability on every integer of ``[a, b]``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import ceil, floor
from typing import TYPE_CHECKING, ClassVar

from pysatl_discrete.distributions.distribution import DiscreteDistribution, check_probability
from pysatl_discrete.distributions.support import DiscreteInterval
from pysatl_discrete.families.parametrizations import Parametrization, constraint, is_integer
from pysatl_discrete.types import FamilyName

if TYPE_CHECKING:
    from pysatl_discrete.distributions.sampling import UniformRandomSource


@dataclass(frozen=True, slots=True)
class DiscreteUniform(Parametrization, DiscreteDistribution):
    """
    Discrete uniform distribution.

    Probability mass function:
        P(X = k) = 1 / (b - a + 1),  k = a, ..., b

    Parameters
    ----------
    a : int
        Left endpoint (inclusive).
    b : int
        Right endpoint (inclusive), ``a <= b``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.DISCRETE_UNIFORM

    a: int
    b: int

    @constraint("a", description="a is an integer")
    def check_a(self) -> bool:
        return is_integer(self.a)

    @constraint("b", description="b is an integer >= a")
    def check_b(self) -> bool:
        return is_integer(self.b) and self.b >= self.a

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(int(self.a), int(self.b))

    @property
    def _count(self) -> int:
        return int(self.b) - int(self.a) + 1

    def probability_mass(self, k: int) -> float:
        if k < self.a or k > self.b:
            return 0.0
        return 1.0 / self._count

    def left_inclusive_probability(self, k: int) -> float:
        if k < self.a:
            return 0.0
        if k >= self.b:
            return 1.0
        return (k - self.a + 1) / self._count

    def right_exclusive_probability(self, k: int) -> float:
        if k < self.a:
            return 1.0
        if k >= self.b:
            return 0.0
        return (self.b - k) / self._count

    def inverse_left_probability(self, p: float) -> int:
        p = check_probability(p)
        k = int(self.a) + ceil(p * self._count) - 1
        k = self.support.clip(k)
        # p * count may round across an integer; step to the exact bracket
        while k > self.a and self.left_exclusive_probability(k) >= p:
            k -= 1
        while self.left_inclusive_probability(k) < p:
            k += 1
        return k

    def get_random_value(self, source: UniformRandomSource) -> int:
        offset = floor(float(source.random()) * self._count)
        return int(self.a) + min(offset, self._count - 1)

    @property
    def mean(self) -> float:
        return (self.a + self.b) / 2.0

    @property
    def variance(self) -> float:
        return (self._count**2 - 1) / 12.0

    @property
    def skewness(self) -> float:
        return 0.0

    @property
    def excess_kurtosis(self) -> float:
        n2 = self._count**2
        if n2 == 1:
            return float("nan")
        return -6.0 * (n2 + 1) / (5.0 * (n2 - 1))
