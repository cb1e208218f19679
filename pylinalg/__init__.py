"""
PyLinAlg: small dense linear algebra for Python.

Vector and Matrix value types with shape-checked elementary arithmetic:
entrywise algebra, matrix products, transpose, dot/cross products,
projection and determinants.

Submodules:
    vector: Vector type and vector operations
    matrix: Matrix type, builders, algebra and structural operations
    core: Exceptions, validation, formatting, tolerances and kernels
"""

__version__ = "0.1.0"

from pylinalg import vector
from pylinalg import matrix
from pylinalg.vector import Vector
from pylinalg.matrix import Matrix
from pylinalg.core.exceptions import LinAlgError

__all__ = [
    "__version__",
    "vector",
    "matrix",
    "Vector",
    "Matrix",
    "LinAlgError",
]
