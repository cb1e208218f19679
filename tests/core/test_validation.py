"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_positive_dims: constructor dimension checks
    - check_same_length: operand length matching
    - check_index: range checks for row/column indices
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionsError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_ndim,
    check_positive_dims,
    check_same_length,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "v")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.5], dtype=np.float32), "v")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "v")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "v")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "v")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "v")

    def test_ragged_nested_list_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "A")

    def test_empty_list(self):
        result = check_array([], "v")
        assert result.shape == (0,)


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.ones(3), "v")

    def test_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.ones((2, 2)), "v")

    def test_2d_rejects_scalar(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_2d(np.float64(1.0), "A")

    def test_ndim_message_has_shape(self):
        with pytest.raises(DimensionError, match=r"\(2, 2, 2\)"):
            check_ndim(np.ones((2, 2, 2)), 2, "A")


# ═══════════════════════════════════════════════════════════════════════
# check_positive_dims / check_same_length / check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositiveDims:

    def test_one_by_one_passes(self):
        check_positive_dims(1, 1, "make_matrix")

    @pytest.mark.parametrize("m, n", [(0, 1), (1, 0), (-1, 3), (0, 0)])
    def test_non_positive_rejected(self, m, n):
        with pytest.raises(InvalidDimensionsError, match="make_matrix") as exc_info:
            check_positive_dims(m, n, "make_matrix")
        assert exc_info.value.rows == m
        assert exc_info.value.cols == n


class TestCheckSameLength:

    def test_equal_lengths_pass(self):
        check_same_length([1, 2], [3, 4], "add")

    def test_mismatch_reports_lengths(self):
        with pytest.raises(DimensionMismatchError, match="2 and 3") as exc_info:
            check_same_length([1, 2], [1, 2, 3], "add")
        assert exc_info.value.left_shape == (2,)
        assert exc_info.value.right_shape == (3,)


class TestCheckIndex:

    def test_bounds_pass(self):
        check_index(0, 3, "row")
        check_index(2, 3, "row")

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError, match="column index"):
            check_index(index, 3, "column")
