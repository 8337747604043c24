"""Pytest fixtures for chromapixel tests."""
from __future__ import annotations

import pytest

from chromapixel import Config, rgb_type


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def snorm_rgb() -> type:
    return rgb_type("rgb_s8_s8_s8")


@pytest.fixture
def snorm_rgbx() -> type:
    return rgb_type("rgbx_s8_s8_s8_s8")


@pytest.fixture
def rgb565() -> type:
    return rgb_type("rgb_5_6_5")


@pytest.fixture
def gradient_pixels() -> list:
    """A 4x3 grid of (r, g, b, a) byte tuples, distinct per pixel."""
    return [
        [(x * 60, y * 100, (x + y) * 20, 255 - x - y) for x in range(4)]
        for y in range(3)
    ]
