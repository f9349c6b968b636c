"""
PySATL Discrete tests
=====================

Unit tests for the discrete distribution contract, the built-in families and
the goodness-of-fit tooling.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
