"""
Sources of test normals and packed words for codec verification.

Provides the fixed set of axis and diagonal normals that exercise every
sign combination of the packed fields, seeded uniform random normals for
fuzzing, and random packed words for scanning the decoder.
"""

from typing import List, Optional, Sequence

import numpy as np

from normpack.core.codec import UnitVector3, WORD_MASK


# Draws shorter than this are rejected before normalizing.
MIN_SAMPLE_NORM = 1e-6

EXTREME_WORDS = (
    0x00000000,
    0xFFFFFFFF,
    0xFFFFFFFE,
    0x0000FFFF,
    0xFFFF0000,
)

_AXES = [
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (-1.0, 0.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, -1.0),
]

_DIAGONALS = [
    (1.0, 1.0, 0.0),
    (1.0, 0.0, 1.0),
    (0.0, 1.0, 1.0),
    (-1.0, -1.0, 0.0),
    (-1.0, 0.0, -1.0),
    (0.0, -1.0, -1.0),
    (1.0, -1.0, 0.0),
    (-1.0, 1.0, 0.0),
    (1.0, 0.0, -1.0),
    (-1.0, 0.0, 1.0),
    (0.0, 1.0, -1.0),
    (0.0, -1.0, 1.0),
]


def normalize(v: Sequence[float]) -> UnitVector3:
    """
    Scales a 3-component vector to unit length in single precision.

    Args:
        v: Vector with three finite components

    Returns:
        UnitVector3 pointing in the same direction as v

    Raises:
        ValueError: If v does not have three components or has zero length
    """
    arr = np.asarray(v, dtype=np.float32).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {np.shape(v)}")

    norm = np.linalg.norm(arr)
    if norm == 0:
        raise ValueError("Cannot normalize a zero-length vector")

    unit = arr / np.float32(norm)
    return UnitVector3(float(unit[0]), float(unit[1]), float(unit[2]))


def known_normals() -> List[UnitVector3]:
    """Returns the six axis normals followed by the twelve normalized two-axis diagonals."""
    return [UnitVector3(*axis) for axis in _AXES] + [normalize(d) for d in _DIAGONALS]


def random_normals(count: int, seed: Optional[int] = None) -> List[UnitVector3]:
    """
    Samples random unit normals.

    Each component is drawn uniformly from [-1, 1] in float32 and the result
    is normalized. Draws too close to the origin to normalize reliably are
    discarded and redrawn.

    Args:
        count: Number of normals to return
        seed: Seed for numpy's default_rng (None for fresh entropy)

    Returns:
        List of count UnitVector3

    Raises:
        ValueError: If count is negative

    Example:
        >>> normals = random_normals(100, seed=1234)
        >>> len(normals)
        100
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = np.random.default_rng(seed)
    normals = []

    while len(normals) < count:
        draw = rng.uniform(-1.0, 1.0, size=3).astype(np.float32)
        if np.linalg.norm(draw) < MIN_SAMPLE_NORM:
            continue
        normals.append(normalize(draw))

    return normals


def random_packed_words(count: int, seed: Optional[int] = None) -> List[int]:
    """
    Samples packed words for scanning the decoder.

    The extreme words (all zeros, all ones, saturated x or y field) are
    always included first, followed by count uniform uint32 values.

    Args:
        count: Number of random words to add after the extreme words
        seed: Seed for numpy's default_rng (None for fresh entropy)

    Returns:
        List of Python ints in [0, 2**32)

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = np.random.default_rng(seed)
    words = rng.integers(0, WORD_MASK, size=count, dtype=np.uint32, endpoint=True)

    return list(EXTREME_WORDS) + [int(w) for w in words]
