"""
Linear algebra kernels for PyLinAlg.

CPU implementations built on NumPy/SciPy (LAPACK under the hood). Each
factorization returns a structured result dataclass; errors are raised
immediately with clear messages.

Submodules:
    lu: LU decomposition and determinant
"""

from pylinalg.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_determinant,
)

__all__ = [
    "LUResult",
    "lu_cpu",
    "lu_determinant",
]
