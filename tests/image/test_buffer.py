import pytest

from chromapixel import (
    RGB8,
    RGBA8,
    XYZ,
    ChromaPixelError,
    Image,
    ParseError,
    UnsupportedFormat,
    UnsupportedFormatFamily,
    create_image_buffer,
    get_format_family,
)
from chromapixel.image.format import get_image_params, registered_families


def test_families_registered():
    assert {"rgb", "xyz"} <= set(registered_families())
    assert get_format_family("bgra_8_8_8_8") == "rgb"
    assert get_format_family("XYZ") == "xyz"
    assert get_format_family("xyY") == "xyz"
    assert get_format_family("YUV") is None


def test_rgb_geometry():
    geometry = get_image_params("rgba", 4, 3)
    assert geometry.bits_per_block == 32
    assert geometry.row_pitch == 16
    assert (geometry.block_width, geometry.block_height) == (1, 1)


def test_row_pitch_rounds_up_to_bytes():
    assert get_image_params("rgb_4_4_4", 3, 1).row_pitch == 5
    assert get_image_params("rgb_5_6_5", 3, 1).row_pitch == 6


def test_invalid_rgb_string_has_no_geometry():
    assert get_image_params("rgb_8_8", 3, 1) is None


def test_create_allocates():
    buffer = create_image_buffer("rgba", 4, 3)
    assert buffer.width == 4
    assert buffer.height == 3
    assert buffer.element_bytes == 4
    assert len(buffer.data) == 48
    assert buffer.metadata is None


def test_create_wraps_existing_memory():
    memory = bytearray(range(12))
    buffer = create_image_buffer("rgb", 2, 2, memory)
    assert buffer.element(1, 1).tobytes() == bytes([9, 10, 11])
    memory[9] = 200
    assert buffer.element(1, 1)[0] == 200


def test_create_errors():
    with pytest.raises(UnsupportedFormatFamily):
        create_image_buffer("YUV", 2, 2)
    with pytest.raises(ParseError):
        create_image_buffer("rgb_8_8", 2, 2)
    with pytest.raises(ValueError):
        create_image_buffer("rgb", 2, 2, bytearray(11))
    with pytest.raises(ChromaPixelError):
        create_image_buffer("rgb", -1, 2)


def test_xyz_buffer():
    buffer = create_image_buffer("XYZ", 3, 1)
    assert buffer.row_pitch == 36
    assert buffer.element_bytes == 12


def test_offsets():
    buffer = create_image_buffer("rgba", 4, 3)
    assert buffer.offset_of(0, 0) == 0
    assert buffer.offset_of(3, 2) == 2 * 16 + 3 * 4
    with pytest.raises(IndexError):
        buffer.offset_of(4, 0)
    with pytest.raises(IndexError):
        buffer.offset_of(0, -1)


def test_unaddressable_blocks():
    buffer = create_image_buffer("rgb_4_4_4", 2, 1)
    with pytest.raises(UnsupportedFormat):
        buffer.element_bytes


class TestImage:
    def test_from_pixels(self, gradient_pixels):
        image = Image.from_pixels(RGBA8, gradient_pixels)
        assert (image.width, image.height) == (4, 3)
        assert image.format == "rgba"
        assert image.at(2, 1) == RGBA8(*gradient_pixels[1][2])
        assert len(list(image)) == 12
        assert image.rows()[2][3] == RGBA8(*gradient_pixels[2][3])

    def test_from_pixels_converts(self):
        image = Image.from_pixels(RGB8, [[RGBA8(1, 2, 3, 4)]])
        assert image.at(0, 0) == RGB8(1, 2, 3)

    def test_from_pixels_ragged(self):
        with pytest.raises(ValueError):
            Image.from_pixels(RGB8, [[(1, 2, 3)], [(1, 2, 3), (4, 5, 6)]])

    def test_create(self):
        image = Image.create(XYZ, 2, 2)
        assert image.at(1, 1) == XYZ(0.0, 0.0, 0.0)

    def test_format_must_match(self):
        Image(RGB8, create_image_buffer("rgb_8_8_8_sRGB", 1, 1))
        with pytest.raises(ValueError):
            Image(RGB8, create_image_buffer("rgba", 1, 1))
        with pytest.raises(ValueError):
            Image(XYZ, create_image_buffer("rgb", 1, 1))
