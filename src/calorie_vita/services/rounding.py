"""Integer rounding for displayed percentages."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
