"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_min_samples: minimum sample count
    - check_consistent_length: paired-length matching
    - check_positive / check_count: scalar arguments
"""

import numpy as np
import pytest

from pysamplestats.core.exceptions import (
    DimensionError,
    LengthMismatchError,
    ValidationError,
)
from pysamplestats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_count,
    check_finite,
    check_min_samples,
    check_positive,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "values")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "values")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "values")

    def test_rejects_mixed_objects(self):
        with pytest.raises(ValidationError, match="values"):
            check_array([1, "a", None], "values")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_1d / check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_accepts_finite(self):
        check_finite(np.array([1.0, 2.0]), "values")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "values")

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 2.0]), "values")


class TestCheck1d:

    def test_accepts_1d(self):
        check_1d(np.zeros(3), "values")

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "values")


class TestCheckMinSamples:

    def test_accepts_enough(self):
        check_min_samples(np.zeros(1), 1, "values")

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_min_samples(np.zeros(0), 1, "values")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_same_length_passes(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("a", "b"))

    def test_mismatch_raises_with_lengths(self):
        with pytest.raises(LengthMismatchError, match="a=3, b=4") as excinfo:
            check_consistent_length(np.zeros(3), np.ones(4), names=("a", "b"))
        assert excinfo.value.expected_length == 3
        assert excinfo.value.actual_length == 4


# ═══════════════════════════════════════════════════════════════════════
# Scalar checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositive:

    @pytest.mark.parametrize("value", [0.5, 1, np.float64(2.0)])
    def test_accepts_positive(self, value):
        check_positive(value, "interval")

    @pytest.mark.parametrize("value", [0, -1.0, np.inf, np.nan])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValidationError, match="interval"):
            check_positive(value, "interval")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="expected a number"):
            check_positive(True, "interval")


class TestCheckCount:

    def test_accepts_integer(self):
        check_count(3, "size", minimum=1)

    def test_accepts_numpy_integer(self):
        check_count(np.int64(2), "size", minimum=1)

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_count(2.0, "size")

    def test_rejects_below_minimum(self):
        with pytest.raises(ValidationError, match="must be >= 1, got 0"):
            check_count(0, "size", minimum=1)
