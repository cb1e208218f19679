"""
Matrix algebra.

Entrywise add/subtract, transpose, the matrix product, the Lie bracket,
equality and formatting. Elementwise operations are carried out row by
row with the Vector functions; the product is built cell by cell as the
inner product of a row of A with a column of B.
"""

from __future__ import annotations

import numpy as np

from pylinalg import vector
from pylinalg.core.compute.tolerances import DEFAULT, ToleranceTier
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    IncompatibleDimensionsError,
    NonSquareMatrixError,
)
from pylinalg.core.formatting import format_rows
from pylinalg.matrix._matrix import Matrix
from pylinalg.matrix.construction import make_matrix


def dimensions(A: Matrix) -> tuple[int, int]:
    """
    (rows, columns) of A.

    Raises
    ------
    InconsistentRowsError
        If the rows of A differ in length.
    """
    return A.dimensions()


def _check_same_shape(A: Matrix, B: Matrix, name: str) -> tuple[int, int]:
    shape_a = A._checked_shape(name)
    shape_b = B._checked_shape(name)
    if shape_a != shape_b:
        raise DimensionMismatchError(
            f"{name}: matrices must have the same number of rows and columns, "
            f"got {shape_a[0]}x{shape_a[1]} and {shape_b[0]}x{shape_b[1]}",
            left_shape=shape_a,
            right_shape=shape_b,
        )
    return shape_a


def add(A: Matrix, B: Matrix) -> Matrix:
    """
    Entrywise sum A + B.

    Raises
    ------
    DimensionMismatchError
        If A and B differ in either dimension.
    """
    _check_same_shape(A, B, "add")
    return Matrix(vector.add(a, b) for a, b in zip(A, B))


def subtract(A: Matrix, B: Matrix) -> Matrix:
    """Entrywise difference A - B."""
    _check_same_shape(A, B, "subtract")
    return Matrix(vector.subtract(a, b) for a, b in zip(A, B))


def transpose(A: Matrix) -> Matrix:
    """n x m matrix with entry (i, j) = A[j, i]."""
    m, n = A._checked_shape("transpose")
    return make_matrix(n, m, lambda i, j: A[j, i])


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product C = AB.

    To multiply by a vector, convert it with column_matrix() first.

    Parameters
    ----------
    A : Matrix
        m x k left factor.
    B : Matrix
        k x n right factor.

    Returns
    -------
    Matrix
        m x n product with C[i, j] = dot(row i of A, column j of B).

    Raises
    ------
    IncompatibleDimensionsError
        If the column count of A differs from the row count of B.
    """
    ma, na = A._checked_shape("multiply")
    mb, nb = B._checked_shape("multiply")
    if na != mb:
        raise IncompatibleDimensionsError(
            f"multiply: columns of A ({na}) must equal rows of B ({mb}); "
            f"got {ma}x{na} and {mb}x{nb}",
            left_shape=(ma, na),
            right_shape=(mb, nb),
        )

    columns = transpose(B)
    return make_matrix(ma, nb, lambda i, j: vector.dot(A[i], columns[j]))


def bracket(A: Matrix, B: Matrix) -> Matrix:
    """
    Lie bracket [A, B] = AB - BA of two square matrices.

    Raises
    ------
    NonSquareMatrixError
        If either operand is not square.
    IncompatibleDimensionsError
        If A and B are square but of different sizes.
    """
    for name, M in (("A", A), ("B", B)):
        m, n = M._checked_shape("bracket")
        if m != n:
            raise NonSquareMatrixError(
                f"bracket: {name} must be square, got {m}x{n}", shape=(m, n)
            )
    return subtract(multiply(A, B), multiply(B, A))


def equals(A: Matrix, B: Matrix) -> bool:
    """
    True if A and B have the same dimensions and identical entries.

    Differing dimensions give False rather than an error.

    Raises
    ------
    InconsistentRowsError
        If either matrix has rows of different lengths.
    """
    if A.dimensions() != B.dimensions():
        return False
    return all(vector.equal(a, b) for a, b in zip(A, B))


def is_close(A: Matrix, B: Matrix, tol: ToleranceTier = DEFAULT) -> bool:
    """Same dimensions and every entry within tolerance."""
    if A.dimensions() != B.dimensions():
        return False
    return bool(np.allclose(A.to_numpy(), B.to_numpy(), rtol=tol.rtol, atol=tol.atol))


def format_matrix(A: Matrix) -> str:
    """Render as "[row0,row1,...]" with each row in vector form."""
    return format_rows(row.data for row in A)
