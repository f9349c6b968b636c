"""
Poisson distribution family implementation.

Number of events in a fixed interval of a Poisson process with rate λ.
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
from pysatl_discrete.families.builtins.discrete._common import clip_probability, is_real
from pysatl_discrete.families.parametrizations import Parametrization, constraint
from pysatl_discrete.types import FamilyName


@dataclass(frozen=True, slots=True)
class Poisson(Parametrization, DiscreteDistribution):
    """
    Poisson distribution.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / k!,  k = 0, 1, ...

    Cumulative probabilities are evaluated through the regularized incomplete
    gamma functions:
        P(X <= k) = Q(k + 1, λ),  P(X > k) = P(k + 1, λ)

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ), ``λ > 0``.
    """

    family_name: ClassVar[FamilyName] = FamilyName.POISSON

    lambda_: float

    @constraint("lambda_", description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        return is_real(self.lambda_) and self.lambda_ > 0

    @property
    def support(self) -> DiscreteInterval:
        return DiscreteInterval(min_k=0)

    def probability_mass(self, k: int) -> float:
        if k < 0:
            return 0.0
        log_pmf = _sp_special.xlogy(k, self.lambda_) - self.lambda_ - _sp_special.gammaln(k + 1.0)
        return clip_probability(exp(log_pmf))

    def left_inclusive_probability(self, k: int) -> float:
        if k < 0:
            return 0.0
        return clip_probability(_sp_special.gammaincc(k + 1.0, self.lambda_))

    def right_exclusive_probability(self, k: int) -> float:
        if k < 0:
            return 1.0
        return clip_probability(_sp_special.gammainc(k + 1.0, self.lambda_))

    @property
    def mean(self) -> float:
        return float(self.lambda_)

    @property
    def variance(self) -> float:
        return float(self.lambda_)

    @property
    def skewness(self) -> float:
        return 1.0 / sqrt(self.lambda_)

    @property
    def excess_kurtosis(self) -> float:
        return 1.0 / self.lambda_
