"""
Scalar mapping primitives used by the normal codec.

Converts between the signed [-1, 1] and unsigned [0, 1] float ranges, and
quantizes unsigned-normalized floats to fixed-width unsigned integers. All
arithmetic is performed in single precision (numpy.float32) so that codes
are identical to those produced by a float-based GPU or C implementation.

Rounding policy: round to nearest, ties away from zero. The quantizers then
saturate to their bit width, so no input can produce a code wider than the
field it is stored in.
"""

import numpy as np


_ZERO = np.float32(0.0)
_HALF = np.float32(0.5)
_ONE = np.float32(1.0)
_TWO = np.float32(2.0)

U15_MAX = (1 << 15) - 1  # 32767
U16_MAX = (1 << 16) - 1  # 65535

_U15_SCALE = np.float32(U15_MAX)
_U16_SCALE = np.float32(U16_MAX)


def to_unsigned01(x) -> np.float32:
    """
    Maps a value from the signed range [-1, 1] to the unsigned range [0, 1].

    No clamping is applied: inputs outside [-1, 1] map outside [0, 1].

    Example:
        >>> float(to_unsigned01(-1.0)), float(to_unsigned01(0.5))
        (0.0, 0.75)
    """
    return (np.float32(x) + _ONE) * _HALF


def to_signed11(x) -> np.float32:
    """Maps a value from the unsigned range [0, 1] to the signed range [-1, 1]."""
    return np.float32(x) * _TWO - _ONE


def round_half_away(x) -> int:
    """
    Rounds a float32 value to the nearest integer, ties away from zero.

    The fractional part is compared exactly against 0.5 instead of computing
    floor(x + 0.5), which rounds 0.49999997 up in single precision.

    Args:
        x: Finite value (converted to float32)

    Returns:
        Rounded value as a Python int

    Raises:
        ValueError: If x is NaN or infinite
    """
    value = np.float32(x)
    if not np.isfinite(value):
        raise ValueError(f"Cannot round non-finite value: {x}")

    magnitude = np.abs(value)
    whole = np.floor(magnitude)
    if magnitude - whole >= _HALF:
        whole = whole + _ONE

    return int(np.copysign(whole, value))


def _quantize(x, scale: np.float32, max_code: int) -> int:
    value = np.float32(x)
    if not np.isfinite(value):
        raise ValueError(f"Cannot quantize non-finite value: {x}")

    # Saturating before scaling is equivalent to saturating the code, and
    # keeps huge inputs from overflowing the float32 product.
    value = min(max(value, _ZERO), _ONE)
    return min(round_half_away(value * scale), max_code)


def float_to_u15(x) -> int:
    """
    Quantizes an unsigned-normalized float in [0, 1] to a 15-bit code.

    Args:
        x: Value in [0, 1]; values outside saturate to 0 or 32767

    Returns:
        Integer code in [0, 32767]

    Raises:
        ValueError: If x is NaN or infinite
    """
    return _quantize(x, _U15_SCALE, U15_MAX)


def float_to_u16(x) -> int:
    """
    Quantizes an unsigned-normalized float in [0, 1] to a 16-bit code.

    Args:
        x: Value in [0, 1]; values outside saturate to 0 or 65535

    Returns:
        Integer code in [0, 65535]

    Raises:
        ValueError: If x is NaN or infinite
    """
    return _quantize(x, _U16_SCALE, U16_MAX)
