"""
Sampling Interfaces
===================

This module defines the uniform random source protocol consumed by the
samplers and the array-backed container returned by
:meth:`DiscreteDistribution.sample`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_discrete.types import IntegerArray


@runtime_checkable
class UniformRandomSource(Protocol):
    """
    Protocol for sources of i.i.d. uniform variates on ``[0, 1)``.

    Both :class:`numpy.random.Generator` and :class:`random.Random` satisfy it.
    The source is owned by the caller and passed to every sampling call, so
    identical source states yield identical samples.
    """

    def random(self) -> float: ...


class ArraySample:
    """
    Array-backed container of discrete variates.

    Parameters
    ----------
    data : numpy.ndarray
        1D integer array of shape ``(n,)``.

    Raises
    ------
    ValueError
        If data is not 1D.
    """

    data: IntegerArray

    def __init__(self, data: IntegerArray) -> None:
        if data.ndim != 1:
            raise ValueError("ArraySample expects 1D array of shape (n,).")
        self.data = data.astype(np.int64, copy=False)

    def __len__(self) -> int:
        """Return the number of variates (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[int]:
        """Iterate over the variates as Python integers."""
        for value in self.data:
            yield int(value)

    @property
    def array(self) -> IntegerArray:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n,)."""
        return (int(self.data.shape[0]),)


__all__ = [
    "UniformRandomSource",
    "ArraySample",
]
