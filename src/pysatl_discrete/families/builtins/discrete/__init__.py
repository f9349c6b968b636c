"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_discrete.families.builtins.discrete.bernoulli import Bernoulli
from pysatl_discrete.families.builtins.discrete.binomial import Binomial
from pysatl_discrete.families.builtins.discrete.geometric import Geometric
from pysatl_discrete.families.builtins.discrete.hypergeometric import Hypergeometric
from pysatl_discrete.families.builtins.discrete.negative_binomial import NegativeBinomial
from pysatl_discrete.families.builtins.discrete.poisson import Poisson
from pysatl_discrete.families.builtins.discrete.uniform import DiscreteUniform

__all__ = [
    "Bernoulli",
    "Binomial",
    "Poisson",
    "DiscreteUniform",
    "Geometric",
    "NegativeBinomial",
    "Hypergeometric",
]
