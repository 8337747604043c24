import numpy as np
import pytest

from chromapixel import UnsupportedFormat, UnsupportedNumericForm, parse_rgb_format
from chromapixel.conversions.unpack import make_rgb_unpacker, unpack_rgb_color


def test_operable_format():
    raw = np.array([0xFFFF, 0, 0x8000, 0xFFFF], dtype="<u2").tobytes()
    r, g, b, a = unpack_rgb_color(raw, parse_rgb_format("rgba_16_16_16_16"))
    assert (r, g, a) == (1.0, 0.0, 1.0)
    assert b == pytest.approx(0x8000 / 0xFFFF)


def test_physical_order_is_reordered():
    assert unpack_rgb_color(bytes([0, 51, 255]), parse_rgb_format("bgr")) == (1.0, pytest.approx(0.2), 0.0, 0.0)


def test_luminance_fills_rgb():
    assert unpack_rgb_color(bytes([255, 0]), parse_rgb_format("la")) == (1.0, 1.0, 1.0, 0.0)


def test_packed_unorm():
    r, g, b, a = unpack_rgb_color(b"\x1f\x80", parse_rgb_format("rgb_5_6_5"))
    assert (r, g, a) == (1.0, 0.0, 0.0)
    assert b == pytest.approx(16 / 31)


def test_packed_signed_fields_are_sign_extended():
    # r = 0b1001 (-7), g = 0b1111 (-1)
    r, g, _, _ = unpack_rgb_color(b"\xf9", parse_rgb_format("rg_s4_s4"))
    assert r == -1.0
    assert g == pytest.approx(-1 / 7)


def test_packed_float_field():
    raw = np.array([0.5], dtype="<f2").tobytes() + b"\xff"
    r, g, _, _ = unpack_rgb_color(raw, parse_rgb_format("rg_f16_8"))
    assert (r, g) == (0.5, 1.0)


def test_unsupported():
    with pytest.raises(UnsupportedFormat):
        make_rgb_unpacker(parse_rgb_format("rgbm"))
    with pytest.raises(UnsupportedFormat):
        make_rgb_unpacker(parse_rgb_format("rgb_4_4_4"))
    with pytest.raises(UnsupportedNumericForm):
        make_rgb_unpacker(parse_rgb_format("rgb_f11_f11_f10"))
