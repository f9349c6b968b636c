"""
Shared helpers for the built-in discrete families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite
from numbers import Real

from scipy import special as _sp_special


def is_real(value: object) -> bool:
    """Check that a parameter is a finite real number (``bool`` excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool) and isfinite(float(value))


def is_probability(value: object) -> bool:
    """Check that a parameter is a real number in ``[0, 1]``."""
    return is_real(value) and 0.0 <= float(value) <= 1.0  # type: ignore[arg-type]


def log_binomial_coefficient(n: float, k: float) -> float:
    """Logarithm of ``C(n, k)`` for ``0 <= k <= n``."""
    return float(
        _sp_special.gammaln(n + 1.0) - _sp_special.gammaln(k + 1.0) - _sp_special.gammaln(n - k + 1.0)
    )


def clip_probability(value: float) -> float:
    """Clamp a computed probability into ``[0, 1]``."""
    return min(max(float(value), 0.0), 1.0)
