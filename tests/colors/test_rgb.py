import numpy as np
import pytest

from chromapixel import (
    BGRA8,
    L8,
    LA8,
    RGB8,
    RGB16,
    RGBA8,
    RGBAF32,
    ComponentKind,
    UnsupportedFormat,
    rgb_type,
)
from chromapixel.colors.rgb import format_string_of, is_rgb


def test_construction_in_stored_units():
    color = RGBA8(255, 128, 64, 32)
    assert color.value == (255, 128, 64, 32)
    assert all(isinstance(v, np.uint8) for v in color.value)
    assert (color.r, color.g, color.b, color.a) == (255, 128, 64, 32)


def test_construction_from_tuple():
    assert RGB8((1, 2, 3)) == RGB8(1, 2, 3)
    assert RGB8([1, 2, 3]) == RGB8(1, 2, 3)


def test_construction_clamps():
    assert RGB8(300, -5, 12.5).value == (255, 0, 13)


def test_missing_alpha_is_zero():
    assert RGBA8(1, 2, 3).a == 0


def test_physical_order():
    color = BGRA8(255, 128, 10, 80)
    assert color.value == (10, 128, 255, 80)
    assert color.tristimulus == (255, 128, 10)
    assert color.tristimulus_with_alpha == (255, 128, 10, 80)


def test_absent_channels_read_as_zero():
    color = RGB8(1, 2, 3)
    assert color.a == 0
    assert color.component("l") == 0
    assert not color.has_alpha
    assert RGBA8(1, 2, 3, 4).has_alpha


def test_luminance_derived_from_rgb():
    assert L8(255, 32, 64).l == 82
    assert L8(RGB8(0xFF, 0x20, 0x40)).l == 82


def test_luminance_construction():
    grey = LA8(100, 200)
    assert grey.value == (100, 200)
    assert grey.tristimulus_with_alpha == (100, 100, 100, 200)
    assert RGB8(77).value == (77, 77, 77)


def test_padding_stays_zero():
    RGBX = rgb_type("rgbx")
    assert RGBX(1, 2, 3).value == (1, 2, 3, 0)
    assert RGBX(1, 2, 3).component(ComponentKind.X) == 0


def test_unpack_decodes():
    r, g, b, a = RGBA8(255, 0, 51, 255).unpack()
    assert (r, g, b, a) == (1.0, 0.0, pytest.approx(0.2), 1.0)


def test_float_components():
    color = RGBAF32(1.0, 0.5, -0.25, 2.0)
    assert color.value == (1.0, 0.5, -0.25, 2.0)
    assert isinstance(color.r, np.float32)


def test_immutable():
    color = RGB8(1, 2, 3)
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        del color._value
    assert color.value == (1, 2, 3)


def test_equality_and_hash():
    assert RGB8(1, 2, 3) == RGB8(1, 2, 3)
    assert RGB8(1, 2, 3) != RGB8(1, 2, 4)
    assert len({RGB8(1, 2, 3), RGB8(1, 2, 3), RGB8(3, 2, 1)}) == 2
    # same values in a different format are different colors
    assert RGB8(1, 2, 3) != rgb_type("bgr")(3, 2, 1)


def test_repr():
    assert repr(RGB8(1, 2, 3)) == "RGB8(1, 2, 3)"


def test_bytes_round_trip():
    color = RGB16(0x1234, 0xABCD, 0x0001)
    data = color.to_bytes()
    assert data == bytes([0x34, 0x12, 0xCD, 0xAB, 0x01, 0x00])
    assert RGB16.from_bytes(data) == color


def test_wrong_arity():
    with pytest.raises(TypeError):
        RGB8(1, 2, 3, 4, 5)
    with pytest.raises(TypeError):
        RGB8()


class TestRgbType:
    def test_named_classes_are_reused(self):
        assert rgb_type("rgb") is RGB8
        assert rgb_type("rgb_8_8_8_sRGB") is RGB8
        assert rgb_type("bgra_8_8_8_8") is BGRA8

    def test_dynamic_classes_are_memoised(self):
        first = rgb_type("rgba_s16_s16_s16_s16_Rec2020")
        assert rgb_type("rgba_s16_s16_s16_s16_Rec2020") is first
        assert is_rgb(first)
        assert first.color_space.id == "Rec2020"
        assert format_string_of(first) == "rgba_s16_s16_s16_s16_Rec2020"

    def test_is_rgb(self):
        assert is_rgb(RGB8)
        assert not is_rgb(int)
        assert not is_rgb(RGB8(1, 2, 3))


class TestNonOperable:
    def test_bit_packed_cannot_be_constructed(self, rgb565):
        assert not rgb565.is_operable
        assert rgb565.codec is None
        with pytest.raises(UnsupportedFormat):
            rgb565(31, 63, 31)

    def test_bit_packed_has_no_byte_access(self, rgb565):
        with pytest.raises(UnsupportedFormat):
            rgb565.from_bytes(b"\xff\xff")
        with pytest.raises(UnsupportedFormat):
            rgb565.from_unpacked(1.0, 1.0, 1.0)
