# No dependencies
from enum import Enum
import numpy as np


class NumericForm(str, Enum):
    UNSIGNED_NORMALIZED = "unorm"
    SIGNED_NORMALIZED = "snorm"
    UNSIGNED_INT = "uint"
    SIGNED_INT = "sint"
    FLOAT = "float"
    FIXED_POINT = "ufixed"
    SIGNED_FIXED_POINT = "sfixed"


class ComponentKind(str, Enum):
    R = "r"
    G = "g"
    B = "b"
    A = "a"
    L = "l"
    E = "e"
    M = "m"
    X = "x"


# format string type prefix for each numeric form
form_prefixes = {
    NumericForm.UNSIGNED_NORMALIZED: "",
    NumericForm.SIGNED_NORMALIZED: "s",
    NumericForm.UNSIGNED_INT: "u",
    NumericForm.SIGNED_INT: "i",
    NumericForm.FLOAT: "f",
    NumericForm.FIXED_POINT: "q",
    NumericForm.SIGNED_FIXED_POINT: "sq",
}

signed_forms = {
    NumericForm.SIGNED_NORMALIZED,
    NumericForm.SIGNED_INT,
    NumericForm.SIGNED_FIXED_POINT,
}

normalized_forms = {
    NumericForm.UNSIGNED_NORMALIZED,
    NumericForm.SIGNED_NORMALIZED,
}

fixed_point_forms = {
    NumericForm.FIXED_POINT,
    NumericForm.SIGNED_FIXED_POINT,
}

aligned_widths = (8, 16, 32, 64)

unsigned_int_dtypes = {
    8: np.dtype(np.uint8),
    16: np.dtype(np.uint16),
    32: np.dtype(np.uint32),
    64: np.dtype(np.uint64),
}

signed_int_dtypes = {
    8: np.dtype(np.int8),
    16: np.dtype(np.int16),
    32: np.dtype(np.int32),
    64: np.dtype(np.int64),
}

float_dtypes = {
    16: np.dtype(np.float16),
    32: np.dtype(np.float32),
    64: np.dtype(np.float64),
}
