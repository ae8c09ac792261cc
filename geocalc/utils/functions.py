"""Module for miscellaneous multi-use functions"""

__all__ = ['all_finite', 'round_half_up']

import math


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def all_finite(*values: float) -> bool:
    """
    Test whether every value is a finite real number (i.e. neither NaN nor +/- infinity).

    Args:
        values:
            Any number of float values

    Returns:
        bool
    """
    return all(math.isfinite(x) for x in values)
