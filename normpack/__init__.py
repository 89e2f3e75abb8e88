"""
normpack: 32-bit Unit Normal Codec

Packs a 3D unit normal vector into a single 32-bit word (16-bit x, 15-bit y,
sign of z) and unpacks it back to an approximate unit vector.
"""

from normpack.core import (
    UnitVector3,
    pack,
    unpack,
    to_unsigned01,
    to_signed11,
    float_to_u15,
    float_to_u16,
)
from normpack.utils import float_eq, vector_eq

__version__ = "0.1.0"

__all__ = [
    "UnitVector3",
    "pack",
    "unpack",
    "to_unsigned01",
    "to_signed11",
    "float_to_u15",
    "float_to_u16",
    "float_eq",
    "vector_eq",
]
