"""
Core Type Definitions
=====================

Fundamental types and aliases used throughout the PySATL discrete core.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

NumPyInteger = np.integer[Any]
"""Type alias for NumPy integer types."""

Integer = NumPyInteger | int
"""Type alias for all integer types accepted as support points."""

IntegerArray = NDArray[np.int64]
"""Type alias for arrays of support points."""

type ExpectationFunc = Callable[[int], float]
"""Type alias for functions integrated against a probability mass function."""


class FamilyName(StrEnum):
    """
    Enumeration of the built-in discrete families.

    The values are used as keys of the family registry.
    """

    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    POISSON = "Poisson"
    DISCRETE_UNIFORM = "DiscreteUniform"
    GEOMETRIC = "Geometric"
    NEGATIVE_BINOMIAL = "NegativeBinomial"
    HYPERGEOMETRIC = "Hypergeometric"


__all__ = [
    "NumPyInteger",
    "Integer",
    "IntegerArray",
    "ExpectationFunc",
    "FamilyName",
]
