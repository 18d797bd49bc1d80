"""
Shared compute infrastructure for PySampleStats.

Submodules:
    timing: Execution timing utilities
    tolerances: Floating tolerance tiers
    rounding: Half-up rounding used by rank arithmetic and binning
"""

from pysamplestats.core.compute.timing import Timer
from pysamplestats.core.compute.tolerances import FP64, ToleranceTier
from pysamplestats.core.compute.rounding import (
    round_half_up,
    round_half_up_int,
    round_half_up_array,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "FP64",
    # Rounding
    "round_half_up",
    "round_half_up_int",
    "round_half_up_array",
]
