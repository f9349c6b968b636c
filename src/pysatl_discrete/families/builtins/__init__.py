"""
Built-in distribution families for PySATL.

This package contains implementations of standard discrete distribution
families that are available by default in PySATL.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_discrete.families.builtins.discrete import (
    Bernoulli,
    Binomial,
    DiscreteUniform,
    Geometric,
    Hypergeometric,
    NegativeBinomial,
    Poisson,
)

BUILTIN_FAMILIES = (
    Bernoulli,
    Binomial,
    Poisson,
    DiscreteUniform,
    Geometric,
    NegativeBinomial,
    Hypergeometric,
)
"""Families registered by :func:`configure_families_register`."""

__all__ = [
    "BUILTIN_FAMILIES",
    "Bernoulli",
    "Binomial",
    "Poisson",
    "DiscreteUniform",
    "Geometric",
    "NegativeBinomial",
    "Hypergeometric",
]
