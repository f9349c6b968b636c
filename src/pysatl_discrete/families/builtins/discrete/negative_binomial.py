"""
Negative binomial distribution family implementation.

Number of failures before the ``r``-th success in independent Bernoulli
trials; ``r`` may be any positive real (Pólya distribution).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import exp, log, sqrt
from typing import ClassVar

from scipy import special as _sp_special

from pysatl_discrete.distributions.distribution import DiscreteDistribution
from pysatl_discrete.distributions.support import DiscreteInterval
from pysatl_discrete.families.builtins.discrete._common import (
    clip_probability,
    is_probability,
    is_real,
)
from pysatl_discrete.families.parametrizations import Parametrization, constraint
from pysatl_discrete.types import FamilyName


@dataclass(frozen=True, slots=True)
class NegativeBinomial(Parametrization, DiscreteDistribution):
    """
    Negative binomial distribution.

    Probability mass function:
        P(X = k) = Γ(k + r) / (k! Γ(r)) p^r (1 - p)^k,  k = 0, 1, ...

    Cumulative probabilities are evaluated through the regularized incomplete
    beta function:
        P(X <= k) = I_p(r, k + 1)

    For integer ``r`` at most ``k`` failures precede the ``r``-th success
    exactly when ``r + k`` trials contain at least ``r`` successes, hence
    ``P(X <= k) = P(Binomial(p, r + k) >= r)``.

    Parameters
    ----------
    r : float
        Number of successes, ``r > 0``.
    p : float
        Success probability of a single trial, ``0 < p <= 1``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.NEGATIVE_BINOMIAL

    r: float
    p: float

    @constraint("r", description="r > 0")
    def check_r(self) -> bool:
        return is_real(self.r) and self.r > 0

    @constraint("p", description="0 < p <= 1")
    def check_p(self) -> bool:
        return is_probability(self.p) and self.p > 0

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        if k < 0:
            return 0.0
        log_pmf = (
            _sp_special.gammaln(k + self.r)
            - _sp_special.gammaln(k + 1.0)
            - _sp_special.gammaln(self.r)
            + self.r * log(self.p)
            + _sp_special.xlog1py(k, -self.p)
        )
        return clip_probability(exp(log_pmf))

    def left_inclusive_probability(self, k: int) -> float:
        if k < 0:
            return 0.0
        return clip_probability(_sp_special.betainc(self.r, k + 1.0, self.p))

    def right_exclusive_probability(self, k: int) -> float:
        if k < 0:
            return 1.0
        return clip_probability(_sp_special.betainc(k + 1.0, self.r, 1.0 - self.p))

    @property
    def mean(self) -> float:
        return self.r * (1.0 - self.p) / self.p

    @property
    def variance(self) -> float:
        return self.r * (1.0 - self.p) / self.p**2

    @property
    def skewness(self) -> float:
        if self.p == 1.0:
            return float("nan")
        return (2.0 - self.p) / sqrt(self.r * (1.0 - self.p))

    @property
    def excess_kurtosis(self) -> float:
        if self.p == 1.0:
            return float("nan")
        return 6.0 / self.r + self.p**2 / (self.r * (1.0 - self.p))
