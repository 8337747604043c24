"""Color space and gamma curve registries."""

from .gamma import GammaFuncPair, resolve_gamma, register_gamma, LINEAR
from .registry import (
    ColorSpace,
    resolve_color_space,
    register_color_space,
    available_color_spaces,
    compute_rgb_to_xyz_matrix,
    ex_gamma,
    D50,
    D65,
)

__all__ = [
    "GammaFuncPair",
    "resolve_gamma",
    "register_gamma",
    "LINEAR",
    "ColorSpace",
    "resolve_color_space",
    "register_color_space",
    "available_color_spaces",
    "compute_rgb_to_xyz_matrix",
    "ex_gamma",
    "D50",
    "D65",
]
