"""
Resolved color-space transforms.

A ``TransformPlan`` captures everything needed to move linear-or-gamma RGB
between two color spaces: whether the ids match exactly (no work at all),
the gamma pairs to remove and re-apply, and the single composed 3x3 matrix
used when the primaries differ. Plans are built once per pair of
color space ids and shared by the static and dynamic engines.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Optional

import numpy as np

from ..colorspace.gamma import GammaFuncPair
from ..colorspace.registry import ColorSpace, resolve_color_space
from ..types.color_types import Matrix3, Tristimulus

logger = logging.getLogger(__name__)


class TransformKind(Enum):
    SAME_SPACE = "same_space"
    GAMMA_ONLY = "gamma_only"
    MATRIX = "matrix"


def _multiply(matrix: Matrix3, r: float, g: float, b: float) -> Tristimulus:
    v = matrix @ np.array((r, g, b), dtype=np.float64)
    return float(v[0]), float(v[1]), float(v[2])


@dataclass(frozen=True)
class TransformPlan:
    kind: TransformKind
    source: ColorSpace
    target: ColorSpace
    from_gamma: GammaFuncPair
    to_gamma: GammaFuncPair
    matrix: Optional[Matrix3] = field(default=None, compare=False, repr=False)

    def apply(self, r: float, g: float, b: float) -> Tristimulus:
        """Transform one (r, g, b) triple of reals."""
        if self.kind is TransformKind.SAME_SPACE:
            return r, g, b

        if not self.from_gamma.is_identity:
            to_linear = self.from_gamma.to_linear
            r, g, b = to_linear(r), to_linear(g), to_linear(b)

        if self.matrix is not None:
            r, g, b = _multiply(self.matrix, r, g, b)

        if not self.to_gamma.is_identity:
            to_gamma = self.to_gamma.to_gamma
            r, g, b = to_gamma(r), to_gamma(g), to_gamma(b)

        return r, g, b


@lru_cache(maxsize=None)
def resolve_transform(source_id: str, target_id: str) -> TransformPlan:
    """Build the RGB -> RGB transform between two color space ids."""
    source = resolve_color_space(source_id)
    target = resolve_color_space(target_id)

    if source.id == target.id:
        kind, matrix = TransformKind.SAME_SPACE, None
    elif source.base_id == target.base_id or source.same_primaries(target):
        # identical primaries and white point compose to the identity matrix
        kind, matrix = TransformKind.GAMMA_ONLY, None
    else:
        kind = TransformKind.MATRIX
        # composed once so the pixel path does a single multiply
        matrix = target.xyz_to_rgb @ source.rgb_to_xyz
        matrix.flags.writeable = False

    logger.debug(f"Resolved transform {source_id!r} -> {target_id!r}: {kind.value}")
    return TransformPlan(kind, source, target, source.gamma_funcs, target.gamma_funcs, matrix)


def to_xyz(space: ColorSpace, r: float, g: float, b: float) -> Tristimulus:
    """Gamma-encoded RGB reals in ``space`` to XYZ."""
    gamma = space.gamma_funcs
    if not gamma.is_identity:
        r, g, b = gamma.to_linear(r), gamma.to_linear(g), gamma.to_linear(b)
    return _multiply(space.rgb_to_xyz, r, g, b)


def from_xyz(space: ColorSpace, X: float, Y: float, Z: float) -> Tristimulus:
    """XYZ to gamma-encoded RGB reals in ``space``."""
    r, g, b = _multiply(space.xyz_to_rgb, X, Y, Z)
    gamma = space.gamma_funcs
    if not gamma.is_identity:
        r, g, b = gamma.to_gamma(r), gamma.to_gamma(g), gamma.to_gamma(b)
    return r, g, b
