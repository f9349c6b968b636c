from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from dataclasses import dataclass

from pysatl_discrete.distributions import DiscreteDistribution, DiscreteInterval
from pysatl_discrete.families import Poisson


class TriangularTestDistribution(DiscreteDistribution):
    """
    Minimal distribution on ``[1, 3]`` with masses ``1/6, 2/6, 3/6``.

    Only the two abstract primitives are implemented, so every other
    characteristic comes from the generic defaults.
    """

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval.from_endpoints(1, 3)

    def probability_mass(self, k: int) -> float:
        match k:
            case 1:
                return 1.0 / 6.0
            case 2:
                return 2.0 / 6.0
            case 3:
                return 3.0 / 6.0
            case _:
                return 0.0


@dataclass(frozen=True)
class HalvingTestDistribution(DiscreteDistribution):
    """
    Geometric-like distribution ``P(X = k) = 2^-(k + 1)`` on ``[0, +inf)``
    without any closed-form overrides.
    """

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        if k < 0:
            return 0.0
        return 0.5 ** (k + 1)


@dataclass(frozen=True)
class MirroredHalvingTestDistribution(DiscreteDistribution):
    """``P(X = k) = 2^(k - 1)`` on ``(-inf, 0]``, the mirror image of the halving one."""

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(max_k=0)

    def probability_mass(self, k: int) -> float:
        if k > 0:
            return 0.0
        return 0.5 ** (1 - k)


@dataclass(frozen=True)
class TwoSidedTestDistribution(DiscreteDistribution):
    """Symmetric mass ``P(X = k) = 2^-|k| / 3`` on all integers."""

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval()

    def probability_mass(self, k: int) -> float:
        return 0.5 ** abs(k) / 3.0


@dataclass(frozen=True)
class SparseHalvingTestDistribution(DiscreteDistribution):
    """Mass ``2^-(j + 1)`` at ``k = 3j`` on ``[0, +inf)`` and none in between."""

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        if k < 0 or k % 3 != 0:
            return 0.0
        return 0.5 ** (k // 3 + 1)


@dataclass(frozen=True)
class TwoModeTestDistribution(DiscreteDistribution):
    """
    Mixture ``0.6 * 2^-(k + 1)`` on ``[0, +inf)`` and ``0.4 * 2^-(k - 99)``
    on ``[100, +inf)``; the first mode is negligible long before the second.
    """

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        if k < 0:
            return 0.0
        mass = 0.6 * 0.5 ** (k + 1)
        if k >= 100:
            mass += 0.4 * 0.5 ** (k - 99)
        return mass


@dataclass(frozen=True)
class PoissonMixtureTestDistribution(DiscreteDistribution):
    """``0.6 * Poisson(5) + 0.4 * Poisson(100)`` with a closed-form right tail."""

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        return 0.6 * Poisson(5.0).probability_mass(k) + 0.4 * Poisson(100.0).probability_mass(k)

    def right_exclusive_probability(self, k: int) -> float:
        tail_low = Poisson(5.0).right_exclusive_probability(k)
        tail_high = Poisson(100.0).right_exclusive_probability(k)
        return 0.6 * tail_low + 0.4 * tail_high


class SequenceSource:
    """Uniform source replaying a fixed sequence of values cyclically."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self._position = 0

    def random(self) -> float:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value
