"""
Determinant dispatch by matrix size.

1x1 and 2x2 use the closed forms; larger matrices go through the LU kernel
in pylinalg.core.compute.linalg.lu.
"""

from __future__ import annotations

from pylinalg.core.compute.linalg.lu import lu_determinant
from pylinalg.core.exceptions import NonSquareMatrixError
from pylinalg.matrix._matrix import Matrix


def determinant(A: Matrix) -> float:
    """
    Determinant of a non-empty square matrix.

    1x1 and 2x2 results are exact closed forms. From 3x3 up the value comes
    from a floating-point LU factorization and is accurate only to rounding
    error; compare it with is_close-style tolerances (FP64_ACCUMULATED), not
    ==. For example [[1, 2, 3], [0, 1, 4], [5, 6, 0]] gives
    0.9999999999999964 rather than 1.0.

    Raises
    ------
    EmptyMatrixError
        If A has no rows or no columns.
    NonSquareMatrixError
        If A is not square.
    InconsistentRowsError
        If the rows of A differ in length.
    """
    m, n = A._checked_shape("determinant")
    if m != n:
        raise NonSquareMatrixError(
            f"determinant: matrix must be square, got {m}x{n}", shape=(m, n)
        )

    if m == 1:
        return A[0, 0]
    if m == 2:
        return A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]
    return lu_determinant(A.to_numpy())
