"""
Distributions subpackage

Interfaces and default implementations for discrete probability distributions
used by PySATL:

- discrete distribution contract (:mod:`.distribution`);
- generic numerical algorithms (:mod:`.fitters`);
- uniform random source protocol and array-backed samples (:mod:`.sampling`);
- integer range supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import DiscreteDistribution, check_probability
from .sampling import ArraySample, UniformRandomSource
from .support import DiscreteInterval

__all__ = [
    # distribution
    "DiscreteDistribution",
    "check_probability",
    # sampling
    "ArraySample",
    "UniformRandomSource",
    # support
    "DiscreteInterval",
]
