#!/usr/bin/env python3
"""
Tests for the scalar mapping primitives.

Checks the endpoint contracts of the range mappers and quantizers, the
round-half-away-from-zero policy, and saturation of out-of-range inputs.
"""

import numpy as np
import pytest

from normpack.core.mapping import (
    U15_MAX,
    U16_MAX,
    float_to_u15,
    float_to_u16,
    round_half_away,
    to_signed11,
    to_unsigned01,
)


def test_to_unsigned01_endpoints():
    assert to_unsigned01(-1.0) == 0.0
    assert to_unsigned01(0.0) == 0.5
    assert to_unsigned01(1.0) == 1.0


def test_to_signed11_endpoints():
    assert to_signed11(0.0) == -1.0
    assert to_signed11(0.5) == 0.0
    assert to_signed11(1.0) == 1.0


def test_mappers_do_not_clamp():
    """Out-of-domain inputs map out of range instead of being clamped."""
    assert to_unsigned01(3.0) == 2.0
    assert to_signed11(-0.5) == -2.0


def test_mappers_use_single_precision():
    assert isinstance(to_unsigned01(0.25), np.float32)
    assert isinstance(to_signed11(0.25), np.float32)


def test_quantizer_endpoints():
    assert float_to_u15(0.0) == 0
    assert float_to_u15(1.0) == 32767
    assert float_to_u16(0.0) == 0
    assert float_to_u16(1.0) == 65535
    assert U15_MAX == 32767
    assert U16_MAX == 65535


def test_quantizers_return_python_ints():
    assert type(float_to_u15(0.3)) is int
    assert type(float_to_u16(0.3)) is int


def test_round_half_away_from_zero():
    assert round_half_away(0.5) == 1
    assert round_half_away(1.5) == 2
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.5) == -1
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.4) == 2
    assert round_half_away(-2.6) == -3
    assert round_half_away(-0.0) == 0


def test_round_just_below_half():
    """The largest float32 below 0.5 must round down."""
    below_half = np.nextafter(np.float32(0.5), np.float32(0.0))
    assert round_half_away(below_half) == 0


def test_quantizer_midpoints_round_up():
    # 0.5 * 65535 = 32767.5 and 0.5 * 32767 = 16383.5, both exact ties
    assert float_to_u16(0.5) == 32768
    assert float_to_u15(0.5) == 16384


def test_quantizers_saturate():
    """Inputs outside [0, 1] never produce codes wider than the field."""
    assert float_to_u16(1.5) == U16_MAX
    assert float_to_u16(1e30) == U16_MAX
    assert float_to_u16(-0.25) == 0
    assert float_to_u15(1.0001) == U15_MAX
    assert float_to_u15(-1e30) == 0


@pytest.mark.parametrize("bad", [float('nan'), float('inf'), float('-inf')])
def test_quantizers_reject_non_finite(bad):
    with pytest.raises(ValueError):
        float_to_u15(bad)
    with pytest.raises(ValueError):
        float_to_u16(bad)
    with pytest.raises(ValueError):
        round_half_away(bad)


def test_quantizers_are_monotonic():
    values = np.linspace(0.0, 1.0, 1001, dtype=np.float32)
    codes15 = [float_to_u15(v) for v in values]
    codes16 = [float_to_u16(v) for v in values]

    assert codes15 == sorted(codes15)
    assert codes16 == sorted(codes16)


def test_codes_never_exceed_field_width():
    just_below_one = np.nextafter(np.float32(1.0), np.float32(0.0))
    just_above_one = np.nextafter(np.float32(1.0), np.float32(2.0))

    assert float_to_u15(just_below_one) == U15_MAX
    assert float_to_u16(just_below_one) == U16_MAX
    assert float_to_u15(just_above_one) == U15_MAX
    assert float_to_u16(just_above_one) == U16_MAX
