"""
Statistics subpackage

Sample binning and goodness-of-fit testing used to validate samplers:

- bin-count accumulator (:mod:`.histogram`);
- chi-squared test and test results (:mod:`.goodness_of_fit`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .goodness_of_fit import TestResult, chi_squared_test
from .histogram import Histogram

__all__ = [
    "Histogram",
    "TestResult",
    "chi_squared_test",
]
