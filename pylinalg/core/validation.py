"""
Input validation utilities for PyLinAlg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_positive_dims(m: int, n: int, name: str) -> None:
    """
    Verify requested matrix dimensions are both at least one.

    Args:
        m: Requested row count
        n: Requested column count
        name: Operation name for error messages

    Raises:
        InvalidDimensionsError: If m < 1 or n < 1
    """
    if m < 1 or n < 1:
        raise InvalidDimensionsError(
            f"{name}: dimensions must be positive integers, got {m}x{n}",
            rows=m,
            cols=n,
        )


def check_same_length(u, v, name: str) -> None:
    """
    Verify two sized operands have the same length.

    Args:
        u, v: Operands supporting len()
        name: Operation name for error messages

    Raises:
        DimensionMismatchError: If len(u) != len(v)
    """
    if len(u) != len(v):
        raise DimensionMismatchError(
            f"{name}: operands must have the same dimension, got {len(u)} and {len(v)}",
            left_shape=(len(u),),
            right_shape=(len(v),),
        )


def check_index(index: int, size: int, axis: str) -> None:
    """
    Verify 0 <= index < size.

    Negative indices are rejected rather than wrapped around.

    Raises:
        IndexOutOfRangeError: If index is outside [0, size)
    """
    if not 0 <= index < size:
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range for {size} {axis}s",
            index=index,
            size=size,
            axis=axis,
        )
