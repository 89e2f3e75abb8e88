"""
Metrics and comparison utilities for normal packing accuracy.

This module provides the approximate-equality checks used to validate
pack/unpack round trips, along with aggregate error statistics and a
NaN scan over packed words.
"""

import math
from typing import Iterable, Sequence

import numpy as np

from normpack.core.codec import pack, unpack


# Tight enough to catch packing regressions, loose enough for 15/16-bit
# quantization error.
EPSILON = 0.005


def float_eq(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Returns True if a and b differ by strictly less than epsilon."""
    return abs(a - b) < epsilon


def vector_eq(
    a: Sequence[float],
    b: Sequence[float],
    epsilon: float = EPSILON
) -> bool:
    """
    Compares two 3-component vectors componentwise with float_eq.

    Args:
        a: First vector
        b: Second vector
        epsilon: Per-component tolerance

    Returns:
        True only if all three components are within epsilon
    """
    return (
        float_eq(a[0], b[0], epsilon)
        and float_eq(a[1], b[1], epsilon)
        and float_eq(a[2], b[2], epsilon)
    )


def roundtrip_error(v: Sequence[float]) -> float:
    """
    Computes the largest absolute component error of unpack(pack(v)).

    Args:
        v: Unit vector

    Returns:
        Maximum of |v_i - u_i| over the three components (NaN if the
        decode produced NaN)
    """
    u = unpack(pack(v))
    return max(abs(float(v[i]) - u[i]) for i in range(3))


def evaluate_roundtrip(
    vectors: Iterable[Sequence[float]],
    epsilon: float = EPSILON
) -> dict:
    """
    Computes round-trip accuracy statistics over a collection of vectors.

    Args:
        vectors: Unit vectors to push through pack/unpack
        epsilon: Per-component tolerance used to count failures

    Returns:
        Dictionary containing:
        - count: Number of vectors evaluated
        - failures: Vectors whose round trip is not within epsilon
        - max_error: Largest component error seen
        - mean_error: Mean of the per-vector maximum component error
        - nan_count: Decodes containing a NaN component
    """
    count = 0
    failures = 0
    nan_count = 0
    errors = []

    for v in vectors:
        count += 1
        u = unpack(pack(v))
        if any(math.isnan(c) for c in u):
            nan_count += 1
            failures += 1
            continue
        if not vector_eq(v, u, epsilon):
            failures += 1
        errors.append(max(abs(float(v[i]) - u[i]) for i in range(3)))

    return {
        'count': count,
        'failures': failures,
        'max_error': max(errors) if errors else 0.0,
        'mean_error': float(np.mean(errors)) if errors else 0.0,
        'nan_count': nan_count
    }


def count_nan_decodes(words: Iterable[int]) -> int:
    """Returns how many of the given packed words decode to a NaN component."""
    return sum(
        1 for word in words
        if any(math.isnan(c) for c in unpack(word))
    )
