"""Utilities for round-trip comparison and accuracy metrics."""

from .metrics import (
    EPSILON,
    float_eq,
    vector_eq,
    roundtrip_error,
    evaluate_roundtrip,
    count_nan_decodes
)

__all__ = [
    "EPSILON",
    "float_eq",
    "vector_eq",
    "roundtrip_error",
    "evaluate_roundtrip",
    "count_nan_decodes"
]
