"""Test normal and packed word sources."""

from .samples import (
    normalize,
    known_normals,
    random_normals,
    random_packed_words
)

__all__ = [
    "normalize",
    "known_normals",
    "random_normals",
    "random_packed_words"
]
