"""
Vector module.

Immutable float64 vectors and the free functions that operate on them.

Public API:
    Vector                      - value type
    add, subtract, multiply     - entrywise algebra
    scalar_multiply             - scaling (zero allowed)
    vsum, dot, mean, length     - reductions
    cross, unit, angle_r, proj  - geometry
    less, equal, is_close       - comparison
    format_vector               - "[x0,x1,...]" rendering
"""

from pylinalg.vector._vector import Vector
from pylinalg.vector.operations import (
    add,
    subtract,
    multiply,
    scalar_multiply,
    vsum,
    dot,
    cross,
    mean,
    length,
    unit,
    angle_r,
    proj,
    less,
    equal,
    is_close,
    format_vector,
)

__all__ = [
    "Vector",
    "add",
    "subtract",
    "multiply",
    "scalar_multiply",
    "vsum",
    "dot",
    "cross",
    "mean",
    "length",
    "unit",
    "angle_r",
    "proj",
    "less",
    "equal",
    "is_close",
    "format_vector",
]
