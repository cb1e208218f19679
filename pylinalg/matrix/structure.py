"""
Structural operations: joining, appending, resizing and swapping.

All functions here return new matrices except sort_rows_in_place(), which
reorders the rows of its argument through Matrix.swap_in_place().
"""

from __future__ import annotations

from pylinalg.core.exceptions import DimensionMismatchError, RowCountMismatchError
from pylinalg.core.validation import check_index
from pylinalg.matrix._matrix import Matrix
from pylinalg.matrix.construction import column_matrix, make_matrix
from pylinalg.vector import Vector


def join(A: Matrix, B: Matrix) -> Matrix:
    """
    Horizontal concatenation [A | B].

    Raises
    ------
    RowCountMismatchError
        If A and B have different row counts.
    """
    ma, na = A._checked_shape("join")
    mb, nb = B._checked_shape("join")
    if ma != mb:
        raise RowCountMismatchError(
            f"join: matrices must have equal numbers of rows, got {ma} and {mb}",
            left_rows=ma,
            right_rows=mb,
        )

    def cell(i: int, j: int) -> float:
        if j < na:
            return A[i, j]
        return B[i, j - na]

    return make_matrix(ma, na + nb, cell)


def append_column(A: Matrix, x: Vector) -> Matrix:
    """
    A with x appended as a new last column.

    Raises
    ------
    RowCountMismatchError
        If len(x) differs from the row count of A.
    """
    m, _ = A._checked_shape("append_column")
    if len(x) != m:
        raise RowCountMismatchError(
            f"append_column: vector has {len(x)} entries, matrix has {m} rows",
            left_rows=m,
            right_rows=len(x),
        )
    return join(A, column_matrix(x))


def append_row(A: Matrix, x: Vector) -> Matrix:
    """
    A with x appended as a new last row.

    Raises
    ------
    DimensionMismatchError
        If len(x) differs from the column count of A.
    """
    m, n = A._checked_shape("append_row")
    if len(x) != n:
        raise DimensionMismatchError(
            f"append_row: vector has {len(x)} entries, matrix has {n} columns",
            left_shape=(m, n),
            right_shape=(len(x),),
        )

    def cell(i: int, j: int) -> float:
        if i < m:
            return A[i, j]
        return x[j]

    return make_matrix(m + 1, n, cell)


def set_dims(A: Matrix, m: int, n: int) -> Matrix:
    """
    Embed A in the top-left corner of a new m x n matrix.

    Cells outside A are zero. If m or n is smaller than the corresponding
    dimension of A, only the top-left m x n block of A is kept; shrinking
    truncates, it is not an error.

    Raises
    ------
    InvalidDimensionsError
        If m < 1 or n < 1.
    InconsistentRowsError
        If the rows of A differ in length.
    """
    ma, na = A.dimensions()

    def cell(i: int, j: int) -> float:
        if i < ma and j < na:
            return A[i, j]
        return 0.0

    return make_matrix(m, n, cell)


def swap_rows(A: Matrix, i: int, j: int) -> Matrix:
    """
    Copy of A with rows i and j exchanged.

    Raises
    ------
    IndexOutOfRangeError
        If i or j is not in [0, rows).
    """
    m, n = A._checked_shape("swap_rows")
    check_index(i, m, "row")
    check_index(j, m, "row")

    def cell(a: int, b: int) -> float:
        if a == i:
            return A[j, b]
        if a == j:
            return A[i, b]
        return A[a, b]

    return make_matrix(m, n, cell)


def swap_cols(A: Matrix, i: int, j: int) -> Matrix:
    """
    Copy of A with columns i and j exchanged.

    Raises
    ------
    IndexOutOfRangeError
        If i or j is not in [0, columns).
    """
    m, n = A._checked_shape("swap_cols")
    check_index(i, n, "column")
    check_index(j, n, "column")

    def cell(a: int, b: int) -> float:
        if b == i:
            return A[a, j]
        if b == j:
            return A[a, i]
        return A[a, b]

    return make_matrix(m, n, cell)


def sort_rows_in_place(A: Matrix) -> None:
    """
    Stable insertion sort of the rows of A by Matrix.less().

    Mutates A. Rows that do not dominate each other keep their relative
    order, since less() is only a partial order.
    """
    A.dimensions()
    for i in range(1, len(A)):
        j = i
        while j > 0 and A.less(j, j - 1):
            A.swap_in_place(j, j - 1)
            j -= 1
