"""Half-up rounding shared by every stage of the target pipeline."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity.

    Built-in round() rounds ties to even (round(2447.5) == 2448 but
    round(2446.5) == 2446); stored targets use floor(x + 0.5) throughout.
    """
    return int(math.floor(value + 0.5))
