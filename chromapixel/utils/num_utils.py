import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero. ``value`` must be finite."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
