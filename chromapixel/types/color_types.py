from __future__ import annotations
from typing import Tuple, Union
import numpy as np

Scalar = Union[int, float]
StoredScalar = Union[int, float, np.generic]
Tristimulus = Tuple[float, float, float]
TristimulusAlpha = Tuple[float, float, float, float]
Chromaticity = Tuple[float, float]
Matrix3 = np.ndarray
