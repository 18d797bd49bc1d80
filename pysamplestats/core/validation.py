"""
Input validation utilities for PySampleStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pysamplestats.core.exceptions import (
    ValidationError,
    DimensionError,
    LengthMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types or
    non-numeric data) and non-numeric dtypes such as strings.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.size and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_consistent_length(
    expected: NDArray[np.floating[Any]],
    actual: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify two arrays that are paired element-wise have the same length.

    Args:
        expected: Array the operation is bound to
        actual: Array paired against it
        names: Parameter names for error messages

    Raises:
        LengthMismatchError: If the lengths differ
    """
    if expected.shape[0] != actual.shape[0]:
        raise LengthMismatchError(
            f"Inconsistent lengths: {names[0]}={expected.shape[0]}, "
            f"{names[1]}={actual.shape[0]}",
            expected_length=int(expected.shape[0]),
            actual_length=int(actual.shape[0]),
        )


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is a finite number strictly greater than zero.

    Raises:
        ValidationError: If value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a number, got {type(value).__name__}")
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be positive, got {value}")


def check_count(value: int, name: str, minimum: int = 0) -> None:
    """
    Verify a scalar is an integer no smaller than ``minimum``.

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
