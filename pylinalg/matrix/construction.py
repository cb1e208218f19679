"""
Matrix builders.

make_matrix() is the generator-function constructor every other builder
and most operations go through: it allocates an m x n array and fills cell
(i, j) with f(i, j) in row-major order.
"""

from __future__ import annotations

from typing import Callable
import numpy as np

from pylinalg.core.validation import check_positive_dims
from pylinalg.matrix._matrix import Matrix
from pylinalg.vector import Vector

CellFunction = Callable[[int, int], float]


def make_matrix(m: int, n: int, f: CellFunction) -> Matrix:
    """
    Build an m x n matrix with entry (i, j) = f(i, j).

    Parameters
    ----------
    m : int
        Number of rows, at least 1.
    n : int
        Number of columns, at least 1.
    f : callable
        Cell function of (row index, column index) returning a real number.

    Raises
    ------
    InvalidDimensionsError
        If m < 1 or n < 1.
    """
    check_positive_dims(m, n, "make_matrix")
    data = np.empty((m, n), dtype=np.float64)
    for i in range(m):
        for j in range(n):
            data[i, j] = f(i, j)
    return Matrix._wrap(data)


def zeros(m: int, n: int) -> Matrix:
    """m x n matrix of zeros."""
    return make_matrix(m, n, lambda i, j: 0.0)


def identity(m: int, n: int) -> Matrix:
    """
    m x n matrix with ones where i == j and zeros elsewhere.

    Rectangular shapes are allowed; the ones run down the leading diagonal.
    """
    return make_matrix(m, n, lambda i, j: 1.0 if i == j else 0.0)


def row_matrix(v: Vector) -> Matrix:
    """1 x n matrix whose single row is v."""
    return make_matrix(1, len(v), lambda i, j: v[j])


def column_matrix(v: Vector) -> Matrix:
    """n x 1 matrix whose single column is v."""
    return make_matrix(len(v), 1, lambda i, j: v[i])


def copy(A: Matrix) -> Matrix:
    """Deep copy; swapping rows of the copy leaves A untouched."""
    m, n = A._checked_shape("copy")
    return make_matrix(m, n, lambda i, j: A[i, j])
