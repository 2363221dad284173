"""Random number helpers."""

import random


def rand_range(lower: float, higher: float) -> int:
    """Return a random integer in ``[lower, higher]`` inclusive.

    Bounds are truncated towards zero first, as an integer conversion would.
    """
    low = int(lower)
    high = int(higher)
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    return random.randint(low, high)