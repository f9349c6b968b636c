"""
Generic Numerical Algorithms
============================

Default algorithms that turn a probability mass function into the rest of the
distribution contract:

- partial sums of the ``pmf`` for cumulative probabilities,
- truncated series for expectation values on unbounded supports,
- bracket expansion plus integer bisection for quantiles,
- inverse transform sampling.

Notes
-----
All helpers are scalar. They are used by :class:`DiscreteDistribution` when a
concrete distribution does not provide a closed form.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from math import floor, isfinite
from typing import TYPE_CHECKING

import numpy as np
from scipy import special as _sp_special

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_discrete.distributions.distribution import DiscreteDistribution
    from pysatl_discrete.distributions.sampling import UniformRandomSource
    from pysatl_discrete.distributions.support import DiscreteInterval
    from pysatl_discrete.types import ExpectationFunc

SMALL_SUPPORT_SIZE = 64
"""Bounded supports with at most this many points are scanned from the left."""

_TINY_PROBABILITY = float(np.nextafter(0.0, 1.0))
_LARGEST_PROBABILITY_BELOW_ONE = float(np.nextafter(1.0, 0.0))


def pmf_partial_sums(distribution: DiscreteDistribution, k: int) -> tuple[float, float]:
    """
    Split the probability mass at ``k`` into ``(P(X <= k), P(X > k))``.

    Parameters
    ----------
    distribution : DiscreteDistribution
        Distribution providing ``support`` and ``probability_mass``.
    k : int
        Split point.

    Returns
    -------
    tuple[float, float]
        Left-inclusive and right-exclusive probabilities. One side is summed
        explicitly, the other is its complement, so the pair adds up to one.

    Raises
    ------
    RuntimeError
        If ``k`` lies inside a support that is unbounded on both sides.

    Notes
    -----
    * Points left of the support give ``(0, 1)`` and points at or right of a
      finite right endpoint give ``(1, 0)`` exactly.
    * For a bounded support the shorter side is summed.
    * A left-bounded support is summed from the left endpoint; a right-bounded
      one from the right endpoint.
    """
    support = distribution.support
    lo, hi = support.min_k, support.max_k

    if lo is not None and k < lo:
        return 0.0, 1.0
    if hi is not None and k >= hi:
        return 1.0, 0.0

    pmf = distribution.probability_mass

    if lo is not None and (hi is None or k - lo < hi - k):
        left = float(sum(pmf(i) for i in range(lo, k + 1)))
        left = min(left, 1.0)
        return left, 1.0 - left

    if hi is not None:
        right = float(sum(pmf(i) for i in range(k + 1, hi + 1)))
        right = min(right, 1.0)
        return 1.0 - right, right

    raise RuntimeError(
        "pmf->cdf for a two-sided infinite support is not supported by the "
        "generic summation. Provide an analytical cumulative probability."
    )


def expectation_from_pmf(
    distribution: DiscreteDistribution,
    f: ExpectationFunc,
    *,
    tol: float = 1e-14,
    max_terms: int = 10_000_000,
) -> float:
    """
    Compute ``sum_k f(k) * pmf(k)`` over the support.

    Parameters
    ----------
    distribution : DiscreteDistribution
        Distribution providing ``support`` and ``probability_mass``.
    f : Callable[[int], float]
        Function to average.
    tol : float, default 1e-14
        Truncation tolerance for right-unbounded supports.
    max_terms : int, default 10_000_000
        Hard cap on the number of summed terms.

    Returns
    -------
    float
        The expectation value.

    Raises
    ------
    RuntimeError
        If the support is unbounded on the left.

    Notes
    -----
    Bounded supports are summed completely. On a right-unbounded support the
    pmf adds up to one, so after summing up to ``k`` the remaining mass is
    exactly ``1 - sum``; it is also bounded by the distribution's own
    ``P(X > k)``, queried whenever the number of summed terms reaches a power
    of two. The series is cut only once this tail bound is at most ``tol``
    and the last nonzero term is negligible against the running sum. Gaps in
    the lattice or local decay of the pmf never stop the summation on their
    own.
    """
    support = distribution.support
    if not support.is_left_bounded:
        raise RuntimeError(
            "Expectation values on a left-unbounded support are not supported by "
            "the generic summation. Provide an analytical moment."
        )

    pmf = distribution.probability_mass
    acc = 0.0
    mass = 0.0
    mass_error = 0.0
    tail = 1.0
    last_term = 0.0
    checkpoint = 1

    for n_terms, k in enumerate(support.iter_points()):
        if n_terms >= max_terms:
            warnings.warn(
                f"Expectation series truncated after {max_terms} terms; "
                f"summed probability mass is {mass!r}.",
                RuntimeWarning,
                stacklevel=3,
            )
            break

        pk = float(pmf(k))
        term = float(f(k)) * pk if pk > 0.0 else 0.0
        acc += term
        # Neumaier summation
        total = mass + pk
        if abs(mass) >= pk:
            mass_error += (mass - total) + pk
        else:
            mass_error += (pk - total) + mass
        mass = total
        if pk > 0.0:
            last_term = term

        if support.is_right_bounded:
            continue

        tail = min(tail, 1.0 - (mass + mass_error))
        if n_terms + 1 == checkpoint:
            tail = min(tail, float(distribution.right_exclusive_probability(k)))
            checkpoint *= 2
        if tail <= tol and abs(last_term) <= tol * abs(acc):
            break

    return acc


def quantile_seed(distribution: DiscreteDistribution, p: float) -> int:
    """
    Starting point for the generic quantile search.

    Small bounded supports start at their left endpoint. Otherwise the normal
    approximation ``mean + sd * z(p)`` is used, clipped into the support.
    """
    support = distribution.support
    size = support.size
    if size is not None and size <= SMALL_SUPPORT_SIZE:
        return support.clip(support.min_k if support.min_k is not None else 0)

    try:
        mean = float(distribution.mean)
        sd = float(distribution.standard_deviation)
    except RuntimeError:
        mean, sd = float("nan"), float("nan")

    z = float(_sp_special.ndtri(min(p, _LARGEST_PROBABILITY_BELOW_ONE)))
    estimate = mean + sd * z
    if not isfinite(estimate):
        fallback = support.min_k if support.min_k is not None else support.max_k
        return support.clip(fallback if fallback is not None else 0)
    return support.clip(int(floor(estimate + 0.5)))


def quantile_from_cdf(
    cdf: Callable[[int], float],
    p: float,
    support: DiscreteInterval,
    seed: int,
    *,
    max_expand: int = 128,
) -> int:
    """
    Find the smallest support point ``K`` with ``cdf(K) >= p``.

    Parameters
    ----------
    cdf : Callable[[int], float]
        Left-inclusive cumulative probability; ``0`` left of the support and
        ``1`` at a finite right endpoint.
    p : float
        Target probability in ``(0, 1]``.
    support : DiscreteInterval
        Support of the distribution.
    seed : int
        Initial guess.
    max_expand : int, default 128
        Maximum number of doubling steps while searching for a bracket.

    Returns
    -------
    int
        ``K`` such that ``cdf(K - 1) < p <= cdf(K)``.

    Notes
    -----
    A bracket ``cdf(lo) < p <= cdf(hi)`` is grown from ``seed`` with doubling
    steps and then narrowed by integer bisection until ``hi == lo + 1``. The
    invariant is kept at every step, so the result satisfies the inversion law
    even if the floating-point ``cdf`` is not perfectly monotone. For ``p = 1``
    on an unbounded support the search relies on ``cdf`` reaching ``1.0`` at
    a finite point.
    """
    k = support.clip(seed)
    step = 1

    if cdf(k) >= p:
        hi = k
        for _ in range(max_expand):
            if support.min_k is not None and hi - step < support.min_k:
                lo = support.min_k - 1
                break
            lo = hi - step
            if cdf(lo) < p:
                break
            hi = lo
            step *= 2
        else:
            warnings.warn(
                f"Quantile bracket for p={p!r} was not found within {max_expand} expansions.",
                RuntimeWarning,
                stacklevel=3,
            )
            return hi
    else:
        lo = k
        for _ in range(max_expand):
            if support.max_k is not None and lo + step >= support.max_k:
                hi = support.max_k
                break
            hi = lo + step
            if cdf(hi) >= p:
                break
            lo = hi
            step *= 2
        else:
            warnings.warn(
                f"Quantile bracket for p={p!r} was not found within {max_expand} expansions.",
                RuntimeWarning,
                stacklevel=3,
            )
            return lo + step

    while hi - lo > 1:
        mid = (lo + hi) // 2
        if cdf(mid) >= p:
            hi = mid
        else:
            lo = mid
    return hi


def inverse_transform_draw(
    distribution: DiscreteDistribution, source: UniformRandomSource
) -> int:
    """
    Draw one variate by inverting the cumulative probability at a uniform draw.

    A draw of exactly ``0`` is treated as the smallest positive probability,
    which maps onto the leftmost point carrying mass.
    """
    u = float(source.random())
    if u <= 0.0:
        u = _TINY_PROBABILITY
    return distribution.inverse_left_probability(u)


__all__ = [
    "SMALL_SUPPORT_SIZE",
    "pmf_partial_sums",
    "expectation_from_pmf",
    "quantile_seed",
    "quantile_from_cdf",
    "inverse_transform_draw",
]
