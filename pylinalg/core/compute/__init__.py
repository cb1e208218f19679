"""
Shared compute infrastructure for PyLinAlg.

Submodules:
    tolerances: Tolerance tiers for approximate comparison
    linalg: Linear algebra kernels (LU)
"""

from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    FP64_ACCUMULATED,
    DEFAULT,
)

__all__ = [
    "ToleranceTier",
    "FP64",
    "FP64_ACCUMULATED",
    "DEFAULT",
]
