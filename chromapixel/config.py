"""Configuration and validation for chromapixel."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import ChromaPixelError


@dataclass(frozen=True)
class Config:
    """Library-wide defaults."""

    # Color space assumed when a format string names none
    default_color_space: str = "sRGB"
    # Component width assumed when a format string lists no component types
    default_bits: int = 8
    max_image_dimension: int = 65535


DEFAULT_CONFIG = Config()


def validate_image_dimensions(width: int, height: int, config: Config = DEFAULT_CONFIG) -> None:
    """Validate image dimensions are within acceptable bounds.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        config: Limits to validate against.

    Raises:
        ChromaPixelError: If dimensions are invalid.
    """
    if width < 0 or height < 0:
        raise ChromaPixelError("Image dimensions cannot be negative")
    if width > config.max_image_dimension or height > config.max_image_dimension:
        raise ChromaPixelError(
            f"Image dimensions too large (max {config.max_image_dimension}x{config.max_image_dimension})"
        )
