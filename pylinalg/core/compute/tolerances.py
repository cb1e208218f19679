"""
Tolerance tiers for approximate numerical comparison.

Defines precision expectations for different kinds of results:
- FP64: a handful of double precision operations (sums, products)
- FP64_ACCUMULATED: long reductions and factorizations (LU, norms of
  large vectors) where rounding error accumulates

Used by is_close() on vectors and matrices and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, few operations per entry',
)

FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='fp64_accumulated',
    description='Double precision after reductions or factorization',
)

DEFAULT = FP64
