"""
Rounding helpers.

Every rounding step in rank arithmetic, binning and Sample.round() rounds
halves toward positive infinity: round_half_up(2.5) == 3,
round_half_up(-2.5) == -2. Python's built-in round() rounds halves to even
and is not used for these operations.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray


def round_half_up(x: float, digits: int = 0) -> float:
    """
    Round a scalar to ``digits`` decimal places, halves toward +inf.

    Parameters
    ----------
    x : float
        Value to round.
    digits : int
        Number of decimal places. Negative values round to tens,
        hundreds, etc.

    Returns
    -------
    float
    """
    scale = 10.0 ** digits
    return math.floor(x * scale + 0.5) / scale


def round_half_up_int(x: float) -> int:
    """round_half_up to the nearest integer, returned as int."""
    return int(round_half_up(x))


def round_half_up_array(
    values: NDArray[np.floating[Any]], digits: int = 0
) -> NDArray[np.floating[Any]]:
    """Vectorized round_half_up over a float array."""
    scale = 10.0 ** digits
    return np.floor(values * scale + 0.5) / scale
