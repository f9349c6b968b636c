"""
Discrete families module for working with statistical distribution families.

This package provides the built-in discrete families, parameter validation
and a global registry for constructing families by name.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    Bernoulli,
    Binomial,
    DiscreteUniform,
    Geometric,
    Hypergeometric,
    NegativeBinomial,
    Poisson,
)
from .configuration import configure_families_register, reset_families_register
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
)
from .registry import DiscreteFamilyRegister

__all__ = [
    "DiscreteFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "configure_families_register",
    "reset_families_register",
    "Bernoulli",
    "Binomial",
    "Poisson",
    "DiscreteUniform",
    "Geometric",
    "NegativeBinomial",
    "Hypergeometric",
]
