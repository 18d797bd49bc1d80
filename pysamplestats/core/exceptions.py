"""
Exception hierarchy for PySampleStats.

All exceptions inherit from PySampleStatsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySampleStatsError(Exception):
    """Base exception for all PySampleStats errors."""
    pass


class ValidationError(PySampleStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an array is not 1-D or when two samples that must be
    paired element-wise have different shapes.
    """
    pass


class InvalidArgumentError(ValidationError):
    """
    An operation was called with a missing or conflicting argument.

    Raised, for example, when rank() receives neither ``value`` nor
    ``percentile``, or both at once.

    Attributes:
        argument: Name of the offending argument (or argument group)
    """

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class LengthMismatchError(DimensionError):
    """
    Two samples that must be paired element-wise have different lengths.

    Attributes:
        expected_length: Length of the sample the operation is bound to
        actual_length: Length of the other sample
    """

    def __init__(
        self,
        message: str,
        expected_length: int | None = None,
        actual_length: int | None = None,
    ):
        super().__init__(message)
        self.expected_length = expected_length
        self.actual_length = actual_length


class NotImplementedFeatureError(PySampleStatsError, NotImplementedError):
    """
    A declared operation has no implementation yet.

    Inherits from the builtin NotImplementedError as well, so callers can
    catch either. Never replaced by a placeholder value.

    Attributes:
        feature: Name of the unimplemented operation
    """

    def __init__(self, message: str, feature: str | None = None):
        super().__init__(message)
        self.feature = feature
