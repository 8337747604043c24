import pytest

from chromapixel import RGB8, XYZ, xyY
from chromapixel.colorspace.registry import D65


def test_xyz_components():
    color = XYZ(0.25, 0.5, 0.75)
    assert (color.X, color.Y, color.Z) == (0.25, 0.5, 0.75)
    assert XYZ((0.25, 0.5, 0.75)) == color


def test_xyz_wrong_arity():
    with pytest.raises(TypeError):
        XYZ(1.0, 2.0)


def test_xyY_round_trip():
    color = XYZ(0.3, 0.4, 0.5)
    chroma = color.to_xyY()
    assert chroma.x == pytest.approx(0.25)
    assert chroma.y == pytest.approx(0.4 / 1.2)
    assert chroma.Y == 0.4
    back = chroma.to_XYZ()
    assert back.X == pytest.approx(0.3)
    assert back.Y == pytest.approx(0.4)
    assert back.Z == pytest.approx(0.5)


def test_black_takes_white_chromaticity():
    chroma = XYZ(0.0, 0.0, 0.0).to_xyY()
    assert (chroma.x, chroma.y) == D65
    assert chroma.Y == 0.0


def test_zero_y_chromaticity():
    assert xyY(0.3, 0.0, 0.5).to_XYZ() == XYZ(0.0, 0.0, 0.0)


def test_bytes_round_trip():
    color = XYZ(0.5, 0.25, 1.0)
    data = color.to_bytes()
    assert len(data) == 12
    assert XYZ.from_bytes(data) == color


def test_xyz_and_xyY_are_distinct():
    assert XYZ(0.1, 0.2, 0.3) != xyY(0.1, 0.2, 0.3)


def test_construct_from_rgb():
    white = XYZ(RGB8(255, 255, 255))
    assert white.X == pytest.approx(0.95047, abs=1e-4)
    assert white.Y == pytest.approx(1.0)
    assert white.Z == pytest.approx(1.08883, abs=2e-3)
