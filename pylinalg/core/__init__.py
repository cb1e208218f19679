"""
Core infrastructure for PyLinAlg.

This module provides the shared pieces used by the vector and matrix
subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: String rendering of vectors and matrices
    compute: Tolerance tiers and linear algebra kernels
"""

from pylinalg.core.exceptions import (
    LinAlgError,
    ValidationError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
    InconsistentRowsError,
    RowCountMismatchError,
    NonSquareMatrixError,
    EmptyMatrixError,
    NumericalError,
    ZeroVectorError,
    EmptyVectorError,
)

__all__ = [
    "LinAlgError",
    "ValidationError",
    "InvalidDimensionsError",
    "IndexOutOfRangeError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
    "InconsistentRowsError",
    "RowCountMismatchError",
    "NonSquareMatrixError",
    "EmptyMatrixError",
    "NumericalError",
    "ZeroVectorError",
    "EmptyVectorError",
]
