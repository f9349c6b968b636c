"""
Error Taxonomy
==============

Exceptions raised by the discrete core. Each one derives from the built-in
exception a caller would naturally catch, so ``except ValueError`` keeps
working for every construction and argument error.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """
    A distribution was constructed with a parameter outside its domain.

    Parameters
    ----------
    parameter : str
        Name of the offending parameter.
    description : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, parameter: str, description: str) -> None:
        self.parameter = parameter
        self.description = description
        super().__init__(f'Parameter "{parameter}": constraint "{description}" does not hold')


class InvalidRangeError(ValueError):
    """An interval was constructed with its left endpoint above its right one."""


class InvalidArgumentError(ValueError):
    """A probability argument lies outside the admissible range."""


class IndexOutOfRangeError(IndexError):
    """A histogram bin index lies outside the configured bins."""


__all__ = [
    "InvalidParameterError",
    "InvalidRangeError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
]
