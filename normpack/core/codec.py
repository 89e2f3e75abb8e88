"""
Packing of unit normal vectors into a single 32-bit word.

A unit vector only has two degrees of freedom, so the codec stores x and y
explicitly and keeps only the sign of z; the magnitude of z is recovered
from x^2 + y^2 + z^2 = 1 when unpacking. x gets 16 bits and y 15 bits, the
remaining bit holds the sign of z:

    bits 31..16   x, mapped to [0, 1] and quantized to 16 bits
    bits 15..1    y, mapped to [0, 1] and quantized to 15 bits
    bit  0        1 if z < 0, else 0

The word has no version field and no byte order of its own; it is meant to
be stored as a plain uint32.
"""

import numbers
from typing import NamedTuple, Sequence, Union

import numpy as np

from normpack.core.mapping import (
    U15_MAX,
    U16_MAX,
    float_to_u15,
    float_to_u16,
    to_signed11,
    to_unsigned01,
)


X_BITS = 16
Y_BITS = 15

X_SHIFT = 16
Y_SHIFT = 1

X_MASK = (1 << X_BITS) - 1
Y_MASK = (1 << Y_BITS) - 1
SIGN_MASK = 0x1
WORD_MASK = 0xFFFFFFFF

_ZERO = np.float32(0.0)
_ONE = np.float32(1.0)
_X_SCALE = np.float32(U16_MAX)
_Y_SCALE = np.float32(U15_MAX)


class UnitVector3(NamedTuple):
    """Three single-precision components of a (nominally) unit-length vector."""

    x: float
    y: float
    z: float


VectorLike = Union[UnitVector3, Sequence[float], np.ndarray]


def _components(v: VectorLike):
    try:
        x, y, z = (np.float32(c) for c in np.asarray(v, dtype=np.float32).reshape(-1))
    except ValueError:
        raise ValueError(
            f"Expected a 3-component vector, got {v!r}"
        ) from None
    return x, y, z


def pack(v: VectorLike) -> int:
    """
    Packs a unit normal vector into a 32-bit word.

    The vector is expected to have unit length; this is not checked. Only
    the sign of z is stored, so a non-unit input will not round-trip.

    Args:
        v: UnitVector3, tuple/list of 3 floats, or numpy array of shape (3,)

    Returns:
        Packed word as a Python int in [0, 2**32)

    Raises:
        ValueError: If v does not have exactly 3 components, or x or y is
            not finite

    Example:
        >>> hex(pack((0.0, 0.0, -1.0)))
        '0x80008001'
    """
    x, y, z = _components(v)

    ux = float_to_u16(to_unsigned01(x))
    uy = float_to_u15(to_unsigned01(y))
    sign = 1 if z < _ZERO else 0

    word = ((ux & X_MASK) << X_SHIFT) | ((uy & Y_MASK) << Y_SHIFT) | sign
    return word


def unpack(word) -> UnitVector3:
    """
    Unpacks a 32-bit word into an approximate unit normal vector.

    z is reconstructed as sqrt(1 - (x^2 + y^2)) with the sign taken from
    bit 0. Quantization can push x^2 + y^2 slightly above 1; the radicand
    is clamped at zero so every possible word decodes to finite components.

    Args:
        word: Packed value, a Python or numpy integer in [0, 2**32)

    Returns:
        UnitVector3 with float32-precision components

    Raises:
        TypeError: If word is not an integer
        ValueError: If word is outside the uint32 range
    """
    if isinstance(word, bool) or not isinstance(word, numbers.Integral):
        raise TypeError(f"Packed normal must be an integer, got {type(word).__name__}")
    word = int(word)
    if word < 0 or word > WORD_MASK:
        raise ValueError(f"Packed normal must fit in 32 bits, got {word}")

    ux = word >> X_SHIFT
    uy = (word & 0xFFFF) >> Y_SHIFT
    sign = word & SIGN_MASK

    fx = to_signed11(np.float32(ux) / _X_SCALE)
    fy = to_signed11(np.float32(uy) / _Y_SCALE)

    radicand = _ONE - (fx * fx + fy * fy)
    mag_z = np.sqrt(max(radicand, _ZERO))
    fz = -mag_z if sign == 1 else mag_z

    return UnitVector3(float(fx), float(fy), float(fz))
