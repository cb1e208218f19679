"""
LU decomposition and determinant.

Provides the determinant of square matrices of any size via partial-pivoted
LU factorization (LAPACK getrf through SciPy). The matrix package uses the
closed forms for 1x1 and 2x2 and this kernel for everything larger.
"""

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor

from pylinalg.core.exceptions import NonSquareMatrixError, EmptyMatrixError


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting.

    Attributes:
        lu: Packed factors; U on and above the diagonal, unit-diagonal L below
        piv: Pivot indices; row i was interchanged with row piv[i]
        n_swaps: Number of actual row interchanges (sign of the permutation)
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    n_swaps: int

    @property
    def is_singular(self) -> bool:
        """True if U has an exactly zero diagonal entry."""
        return bool(np.any(np.diag(self.lu) == 0.0))


def lu_cpu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU decomposition using LAPACK (via SciPy).

    Computes PA = LU with partial pivoting. Exactly singular input is
    factored normally; SciPy's LinAlgWarning for it is suppressed because
    a zero pivot is an expected outcome here, not a diagnostic.

    Args:
        A: Square matrix (n x n)

    Returns:
        LUResult with packed factors and pivot information

    Raises:
        EmptyMatrixError: If A has no entries
        NonSquareMatrixError: If A is not square
    """
    if A.ndim != 2 or A.size == 0:
        raise EmptyMatrixError(
            f"LU requires a non-empty 2D matrix, got shape {A.shape}",
            shape=tuple(A.shape) if A.ndim == 2 else None,
        )
    n, p = A.shape
    if n != p:
        raise NonSquareMatrixError(
            f"LU requires a square matrix, got {n}x{p}", shape=(n, p)
        )

    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A, check_finite=False)

    n_swaps = int(np.sum(piv != np.arange(n)))
    return LUResult(lu=lu, piv=piv, n_swaps=n_swaps)


def lu_determinant(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant from the LU factors.

    det(A) = (-1)^swaps * prod(diag(U))

    Args:
        A: Square matrix (n x n)

    Returns:
        Determinant as a Python float (exactly 0.0 for a zero pivot)
    """
    result = lu_cpu(A)
    if result.is_singular:
        return 0.0
    sign = -1.0 if result.n_swaps % 2 else 1.0
    return sign * float(np.prod(np.diag(result.lu)))
