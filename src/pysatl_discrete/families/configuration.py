"""
Distribution Families Configuration
====================================

This module registers the built-in discrete families of the PySATL library:

- :class:`Bernoulli`, :class:`Binomial`, :class:`Poisson`,
- :class:`DiscreteUniform`, :class:`Geometric`,
- :class:`NegativeBinomial`, :class:`Hypergeometric`.

Notes
-----
- All families are registered in the global DiscreteFamilyRegister.
- Closed forms are provided where available, with fallbacks to the generic
  numerical algorithms of the distribution contract.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_discrete.families.builtins import BUILTIN_FAMILIES
from pysatl_discrete.families.registry import DiscreteFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> DiscreteFamilyRegister:
    """
    Register all built-in discrete families in the global registry.

    Returns
    -------
    DiscreteFamilyRegister
        The global registry of discrete families.
    """
    for family in BUILTIN_FAMILIES:
        if not DiscreteFamilyRegister.contains(family.family_name):
            DiscreteFamilyRegister.register(family)
    return DiscreteFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    DiscreteFamilyRegister._reset()
