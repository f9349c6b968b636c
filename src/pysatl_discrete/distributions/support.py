"""
Distribution Supports
=====================

Closed integer intervals used as supports of discrete distributions.

Either end may be unbounded, so the same type describes finite ranges such
as ``[0, n]``, rays such as ``[0, +inf)`` and the whole integer lattice.

Notes
-----
- Membership checks accept scalars and NumPy arrays.
- Enumeration is lazy and only available when the left end is bounded.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast, overload

import numpy as np
from numpy.typing import NDArray

from pysatl_discrete.errors import InvalidRangeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_discrete.types import Integer, IntegerArray


@dataclass(frozen=True, slots=True)
class DiscreteInterval:
    """
    Inclusive integer range ``[min_k, max_k]`` used as a distribution support.

    Parameters
    ----------
    min_k : int or None, default None
        Left endpoint; ``None`` means the range is unbounded to the left.
    max_k : int or None, default None
        Right endpoint; ``None`` means the range is unbounded to the right.

    Raises
    ------
    InvalidRangeError
        If both endpoints are bounded and ``min_k > max_k``.

    Notes
    -----
    Unbounded ends are tagged with ``None`` instead of an integer sentinel, so
    no arithmetic is ever performed on a missing endpoint.
    """

    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        for name in ("min_k", "max_k"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int | np.integer):
                raise TypeError(f"{name} must be an integer or None, got {value!r}.")
            object.__setattr__(self, name, int(value))
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            raise InvalidRangeError(
                f"Left endpoint {self.min_k} exceeds right endpoint {self.max_k}."
            )

    @classmethod
    def from_endpoints(cls, low: int | None, high: int | None) -> DiscreteInterval:
        """Build the interval ``[low, high]``; ``None`` marks an unbounded end."""
        return cls(min_k=low, max_k=high)

    @property
    def left_endpoint(self) -> int | None:
        return self.min_k

    @property
    def right_endpoint(self) -> int | None:
        return self.max_k

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    @property
    def size(self) -> int | None:
        """Number of points in the range, ``None`` if it is unbounded."""
        if self.min_k is None or self.max_k is None:
            return None
        return self.max_k - self.min_k + 1

    @overload
    def contains(self, x: Integer | float) -> bool: ...
    @overload
    def contains(self, x: IntegerArray) -> NDArray[np.bool_]: ...

    def contains(self, x: Integer | float | IntegerArray) -> bool | NDArray[np.bool_]:
        """
        Check whether point(s) are integers inside the range.

        Parameters
        ----------
        x : int or array of int
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for integral points within the endpoints.
        """
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (xf == np.floor(xf))
        if self.min_k is not None:
            mask &= xf >= self.min_k
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(NDArray[np.bool_], mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(int, x)))

    def clip(self, k: int) -> int:
        """Move ``k`` onto the nearest point of the range."""
        if self.min_k is not None and k < self.min_k:
            return self.min_k
        if self.max_k is not None and k > self.max_k:
            return self.max_k
        return k

    def iter_points(self) -> Iterator[int]:
        """
        Iterate over the points of the range from left to right.

        Raises
        ------
        RuntimeError
            If the range is unbounded to the left.
        """
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded DiscreteInterval. "
                "Provide min_k to enable enumeration."
            )
        first = self.min_k
        last = self.max_k

        def _gen() -> Iterator[int]:
            current = first
            while last is None or current <= last:
                yield current
                current += 1

        return _gen()

    def __str__(self) -> str:
        left = "-inf" if self.min_k is None else str(self.min_k)
        right = "+inf" if self.max_k is None else str(self.max_k)
        return f"[{left}, {right}]"

    __iter__ = iter_points


__all__ = [
    "DiscreteInterval",
]
