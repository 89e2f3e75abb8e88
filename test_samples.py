#!/usr/bin/env python3
"""Tests for test-normal and packed-word sources."""

import math

import pytest

from normpack.core.codec import UnitVector3, WORD_MASK
from normpack.io.samples import (
    EXTREME_WORDS,
    known_normals,
    normalize,
    random_normals,
    random_packed_words,
)


def _length(v):
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def test_normalize():
    n = normalize((3.0, 0.0, 4.0))

    assert isinstance(n, UnitVector3)
    assert math.isclose(n.x, 0.6, abs_tol=1e-6)
    assert n.y == 0.0
    assert math.isclose(n.z, 0.8, abs_tol=1e-6)


def test_normalize_rejects_zero_and_bad_shape():
    with pytest.raises(ValueError):
        normalize((0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        normalize((1.0, 2.0))


def test_known_normals():
    normals = known_normals()

    assert len(normals) == 18
    assert normals[0] == (1.0, 0.0, 0.0)
    assert normals[5] == (0.0, 0.0, -1.0)
    assert math.isclose(normals[6].x, math.sqrt(0.5), abs_tol=1e-6)
    assert math.isclose(normals[6].y, math.sqrt(0.5), abs_tol=1e-6)
    for n in normals:
        assert abs(_length(n) - 1.0) < 1e-6


def test_random_normals_are_unit_and_seeded():
    first = random_normals(50, seed=7)
    second = random_normals(50, seed=7)

    assert len(first) == 50
    assert first == second
    assert first != random_normals(50, seed=8)
    for n in first:
        assert abs(_length(n) - 1.0) < 1e-6
        assert all(-1.0 <= c <= 1.0 for c in n)


def test_random_normals_count():
    assert random_normals(0, seed=1) == []
    with pytest.raises(ValueError):
        random_normals(-1)


def test_random_packed_words():
    words = random_packed_words(10, seed=3)

    assert len(words) == 10 + len(EXTREME_WORDS)
    assert words[:len(EXTREME_WORDS)] == list(EXTREME_WORDS)
    assert all(type(w) is int and 0 <= w <= WORD_MASK for w in words)
    assert words == random_packed_words(10, seed=3)

    with pytest.raises(ValueError):
        random_packed_words(-5)
