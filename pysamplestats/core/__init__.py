"""
Core infrastructure for PySampleStats.

Shared abstractions and utilities used by the frequency and descriptive
submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, rounding helpers
"""

from pysamplestats.core.result import Result
from pysamplestats.core.exceptions import (
    PySampleStatsError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    LengthMismatchError,
    NotImplementedFeatureError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PySampleStatsError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "NotImplementedFeatureError",
]
