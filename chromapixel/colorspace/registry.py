"""
Named RGB color spaces.

A color space id is a registered name optionally followed by ``^gamma``,
which overrides the space's own transfer curve: ``"sRGB"`` uses the sRGB
curve, ``"sRGB^1"`` is linear sRGB, ``"sRGB^2.2"`` is sRGB primaries with
a plain 2.2 power curve.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, NamedTuple

import numpy as np

from ..errors import UnknownColorSpace
from ..types.color_types import Chromaticity, Matrix3
from .gamma import GammaFuncPair, resolve_gamma

logger = logging.getLogger(__name__)

# White points (CIE 1931 xy)
D50: Chromaticity = (0.3457, 0.3585)
D65: Chromaticity = (0.3127, 0.3290)
DCI_WHITE: Chromaticity = (0.314, 0.351)
ACES_WHITE: Chromaticity = (0.32168, 0.33767)


class RGBSpaceDefinition(NamedTuple):
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity
    white: Chromaticity
    gamma: str


_DEFINITIONS: Dict[str, RGBSpaceDefinition] = {
    "sRGB": RGBSpaceDefinition((0.640, 0.330), (0.300, 0.600), (0.150, 0.060), D65, "sRGB"),
    "Rec709": RGBSpaceDefinition((0.640, 0.330), (0.300, 0.600), (0.150, 0.060), D65, "Rec709"),
    "Rec2020": RGBSpaceDefinition((0.708, 0.292), (0.170, 0.797), (0.131, 0.046), D65, "Rec2020"),
    "AdobeRGB": RGBSpaceDefinition((0.640, 0.330), (0.210, 0.710), (0.150, 0.060), D65, "2.19921875"),
    "DCI-P3": RGBSpaceDefinition((0.680, 0.320), (0.265, 0.690), (0.150, 0.060), DCI_WHITE, "2.6"),
    "DisplayP3": RGBSpaceDefinition((0.680, 0.320), (0.265, 0.690), (0.150, 0.060), D65, "sRGB"),
    "ProPhoto": RGBSpaceDefinition((0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001), D50, "1.8"),
    "ACEScg": RGBSpaceDefinition((0.713, 0.293), (0.165, 0.830), (0.128, 0.044), ACES_WHITE, "1"),
}


def xy_to_XYZ(xy: Chromaticity) -> np.ndarray:
    """Chromaticity to XYZ with Y = 1."""
    x, y = xy
    return np.array([x / y, 1.0, (1.0 - x - y) / y])


def compute_rgb_to_xyz_matrix(red: Chromaticity, green: Chromaticity, blue: Chromaticity,
                              white: Chromaticity) -> Matrix3:
    """
    Derive the RGB -> XYZ matrix from primaries and white point.

    See http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html
    """
    primaries = np.stack([xy_to_XYZ(red), xy_to_XYZ(green), xy_to_XYZ(blue)], axis=-1)
    scale = np.linalg.solve(primaries, xy_to_XYZ(white))
    return primaries * scale


def ex_gamma(color_space_id: str) -> str:
    """Strip the ``^gamma`` suffix from a color space id."""
    return color_space_id.split("^", 1)[0]


@dataclass(frozen=True)
class ColorSpace:
    id: str
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity
    white: Chromaticity
    gamma: str
    rgb_to_xyz: Matrix3 = field(compare=False, repr=False)
    xyz_to_rgb: Matrix3 = field(compare=False, repr=False)

    @property
    def base_id(self) -> str:
        return ex_gamma(self.id)

    @property
    def gamma_funcs(self) -> GammaFuncPair:
        return resolve_gamma(self.gamma)

    @property
    def is_linear(self) -> bool:
        return self.gamma_funcs.is_identity

    @property
    def luma_weights(self) -> np.ndarray:
        """Relative luminance contribution of R, G and B (the Y row of ``rgb_to_xyz``)."""
        return self.rgb_to_xyz[1]

    def same_primaries(self, other: ColorSpace) -> bool:
        return (self.red == other.red and self.green == other.green and
                self.blue == other.blue and self.white == other.white)

    def to_monochrome(self, r: float, g: float, b: float) -> float:
        wr, wg, wb = self.luma_weights
        return float(wr * r + wg * g + wb * b)


def register_color_space(name: str, red: Chromaticity, green: Chromaticity, blue: Chromaticity,
                         white: Chromaticity, gamma: str) -> None:
    """
    Add a named color space to the registry.

    Names are permanent: resolved spaces are bound to color classes and
    conversion plans, so an existing name cannot be registered again.

    Raises:
        ValueError: If the name is taken or contains ``^`` or ``_``.
        UnknownGamma: If ``gamma`` cannot be resolved.
    """
    if "^" in name or "_" in name:
        raise ValueError(f"Color space names cannot contain '^' or '_': {name!r}")
    if name in _DEFINITIONS:
        raise ValueError(f"Color space {name!r} is already registered")
    resolve_gamma(gamma)
    _DEFINITIONS[name] = RGBSpaceDefinition(red, green, blue, white, gamma)


def available_color_spaces() -> tuple:
    return tuple(_DEFINITIONS)


@lru_cache(maxsize=None)
def resolve_color_space(color_space_id: str) -> ColorSpace:
    """
    Look up a color space by id, applying any ``^gamma`` override.

    Raises:
        UnknownColorSpace: If the base name is not registered.
        UnknownGamma: If the gamma override cannot be resolved.
    """
    name, _, gamma = color_space_id.partition("^")
    definition = _DEFINITIONS.get(name)
    if definition is None:
        raise UnknownColorSpace(color_space_id)

    gamma = gamma or definition.gamma
    resolve_gamma(gamma)

    rgb_to_xyz = compute_rgb_to_xyz_matrix(definition.red, definition.green, definition.blue, definition.white)
    xyz_to_rgb = np.linalg.inv(rgb_to_xyz)
    rgb_to_xyz.flags.writeable = False
    xyz_to_rgb.flags.writeable = False

    logger.debug(f"Resolved color space {color_space_id!r} (gamma {gamma!r})")
    return ColorSpace(
        id=color_space_id,
        red=definition.red,
        green=definition.green,
        blue=definition.blue,
        white=definition.white,
        gamma=gamma,
        rgb_to_xyz=rgb_to_xyz,
        xyz_to_rgb=xyz_to_rgb,
    )
