import pytest

from chromapixel import (
    RGB8,
    RGBA8,
    Image,
    PlanKind,
    convert_image,
    create_image_buffer,
    crop,
    map_image,
    strip_metadata,
)
from chromapixel.image.transform import ConvertedImage


@pytest.fixture
def image(gradient_pixels):
    return Image.from_pixels(RGBA8, gradient_pixels)


class TestCrop:
    def test_window(self, image, gradient_pixels):
        cropped = crop(image, 1, 3, 1, 3)
        assert (cropped.width, cropped.height) == (2, 2)
        assert cropped.at(0, 0) == RGBA8(*gradient_pixels[1][1])
        assert cropped.at(1, 1) == RGBA8(*gradient_pixels[2][2])

    def test_shares_memory(self, image):
        cropped = crop(image, 1, 3, 1, 3)
        offset = image.buffer.offset_of(2, 2)
        image.buffer.data[offset] = 0xAB
        assert cropped.at(1, 1).r == 0xAB

    def test_keeps_row_pitch(self, image):
        cropped = crop(image.buffer, 2, 4, 0, 3)
        assert cropped.row_pitch == image.buffer.row_pitch
        assert cropped.format == image.buffer.format

    def test_empty(self, image):
        cropped = crop(image, 2, 2, 1, 1)
        assert (cropped.width, cropped.height) == (0, 0)

    @pytest.mark.parametrize("bounds", [(0, 5, 0, 1), (2, 1, 0, 1), (0, 1, -1, 1), (0, 1, 2, 4)])
    def test_out_of_bounds(self, image, bounds):
        with pytest.raises(ValueError):
            crop(image, *bounds)

    def test_unaddressable_blocks(self):
        buffer = create_image_buffer("rgb_4_4_4", 4, 1)
        with pytest.raises(ValueError):
            crop(buffer, 1, 2, 0, 1)

    def test_not_an_image(self):
        with pytest.raises(TypeError):
            crop(b"\x00" * 4, 0, 1, 0, 1)


def test_strip_metadata():
    buffer = create_image_buffer("rgb", 2, 2, metadata={"source": "camera"})
    stripped = strip_metadata(buffer)
    assert stripped.metadata is None
    assert buffer.metadata == {"source": "camera"}
    assert stripped.data is buffer.data

    typed = strip_metadata(Image(RGB8, buffer))
    assert typed.buffer.metadata is None


def test_map_image(image, gradient_pixels):
    reds = map_image(image, lambda color: int(color.r))
    assert (reds.width, reds.height) == (4, 3)
    assert reds.rows() == [[px[0] for px in row] for row in gradient_pixels]


class TestConvertImage:
    def test_typed_image(self, image, gradient_pixels):
        converted = convert_image(image, RGB8)
        assert converted.at(3, 2) == RGB8(*gradient_pixels[2][3][:3])
        assert list(converted)[0] == RGB8(*gradient_pixels[0][0][:3])

    def test_raw_buffer(self, image, gradient_pixels):
        converted = convert_image(image.buffer, "bgr")
        assert isinstance(converted, ConvertedImage)
        assert converted.conversion.kind is PlanKind.SAME_SPACE
        r, g, b, _ = gradient_pixels[1][2]
        assert converted.at(2, 1).value == (b, g, r)

    def test_raw_buffer_is_resolved_once(self, image):
        first = convert_image(image.buffer, RGB8)
        second = convert_image(crop(image.buffer, 0, 2, 0, 2), RGB8)
        assert first.conversion is second.conversion

    def test_cropped_raw_buffer(self, image, gradient_pixels):
        converted = convert_image(crop(image.buffer, 1, 4, 1, 3), RGB8)
        assert converted.rows()[1][2] == RGB8(*gradient_pixels[2][3][:3])
