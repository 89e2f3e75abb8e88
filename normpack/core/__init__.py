"""Core 32-bit normal packing codec and its scalar mapping primitives."""

from .codec import UnitVector3, pack, unpack
from .mapping import (
    float_to_u15,
    float_to_u16,
    round_half_away,
    to_signed11,
    to_unsigned01,
)

__all__ = [
    "UnitVector3",
    "pack",
    "unpack",
    "to_unsigned01",
    "to_signed11",
    "float_to_u15",
    "float_to_u16",
    "round_half_away",
]
