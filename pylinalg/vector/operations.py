"""
Free functions over Vectors.

Elementwise algebra (add, subtract, multiply, scalar_multiply), reductions
(vsum, dot, mean, length), geometry (cross, unit, angle_r, proj) and
comparison (less, equal, is_close). All functions return new Vectors.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.compute.tolerances import DEFAULT, ToleranceTier
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    EmptyVectorError,
    ZeroVectorError,
)
from pylinalg.core.formatting import format_components
from pylinalg.core.validation import check_same_length
from pylinalg.vector._vector import Vector


def add(u: Vector, v: Vector) -> Vector:
    """
    Entrywise sum w = u + v.

    Raises
    ------
    DimensionMismatchError
        If len(u) != len(v).
    """
    check_same_length(u, v, "add")
    return Vector._wrap(u.data + v.data)


def subtract(u: Vector, v: Vector) -> Vector:
    """Entrywise difference w = u - v, computed as u + (-1)v."""
    check_same_length(u, v, "subtract")
    return add(u, scalar_multiply(-1.0, v))


def scalar_multiply(a: float, u: Vector) -> Vector:
    """
    Scale every entry of u by a.

    Any real a is accepted, including zero.
    """
    return Vector._wrap(float(a) * u.data)


def multiply(u: Vector, v: Vector) -> Vector:
    """Entrywise (Hadamard) product w = u * v."""
    check_same_length(u, v, "multiply")
    return Vector._wrap(u.data * v.data)


def vsum(v: Vector) -> float:
    """Sum of the entries; 0.0 for the zero-dimension vector."""
    return float(np.sum(v.data))


def dot(u: Vector, v: Vector) -> float:
    """Inner product, the sum of the entrywise product."""
    check_same_length(u, v, "dot")
    return vsum(multiply(u, v))


def cross(u: Vector, v: Vector) -> Vector:
    """
    Cross product of two 3-dimensional vectors (right-hand rule).

    Raises
    ------
    DimensionMismatchError
        If either operand is not 3-dimensional.
    """
    if len(u) != 3 or len(v) != 3:
        raise DimensionMismatchError(
            f"cross: both operands must be 3-dimensional, got {len(u)} and {len(v)}",
            left_shape=(len(u),),
            right_shape=(len(v),),
        )
    a, b = u.data, v.data
    return Vector._wrap(np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ]))


def mean(v: Vector) -> float:
    """
    Arithmetic mean of the entries.

    Raises
    ------
    EmptyVectorError
        If v has no entries.
    """
    if len(v) == 0:
        raise EmptyVectorError("mean: vector has no entries")
    return vsum(v) / len(v)


def length(v: Vector) -> float:
    """
    Euclidean norm sqrt(dot(v, v)).

    This is the geometric length, not the dimension; use len(v) for that.
    """
    return float(np.sqrt(dot(v, v)))


def unit(v: Vector) -> Vector:
    """
    Unit vector parallel to v.

    Raises
    ------
    ZeroVectorError
        If length(v) == 0 (including the zero-dimension vector).
    """
    norm = length(v)
    if norm == 0.0:
        raise ZeroVectorError(
            f"unit: cannot normalize a vector of length zero (dimension {len(v)})"
        )
    return Vector._wrap(v.data / norm)


def angle_r(u: Vector, v: Vector) -> float:
    """
    Cosine of the angle between u and v.

    Note: despite the name this returns dot(unit(u), unit(v)), i.e. cos(theta),
    not theta in radians. Apply np.arccos to the result to get the angle.

    Raises
    ------
    ZeroVectorError
        If either vector has length zero.
    """
    return dot(unit(u), unit(v))


def proj(u: Vector, v: Vector) -> Vector:
    """
    Vector projection of u onto a non-zero vector v.

    proj(u, v) = dot(u, unit(v)) * unit(v)

    Raises
    ------
    ZeroVectorError
        If v has length zero.
    DimensionMismatchError
        If len(u) != len(v).
    """
    check_same_length(u, v, "proj")
    w = unit(v)
    return scalar_multiply(dot(u, w), w)


def less(u: Vector, v: Vector) -> bool:
    """
    Componentwise strict dominance: every u[i] < v[i].

    This is not lexicographic ordering. Zero-dimension vectors are never less.
    """
    check_same_length(u, v, "less")
    if len(u) == 0:
        return False
    return bool(np.all(u.data < v.data))


def equal(u: Vector, v: Vector) -> bool:
    """
    Exact entrywise equality. Zero-dimension vectors are equal.

    Unlike ``u == v``, operands of different dimension are an error here.

    Raises
    ------
    DimensionMismatchError
        If len(u) != len(v).
    """
    check_same_length(u, v, "equal")
    return bool(np.array_equal(u.data, v.data))


def is_close(u: Vector, v: Vector, tol: ToleranceTier = DEFAULT) -> bool:
    """Entrywise equality within |u - v| <= atol + rtol * |v|."""
    check_same_length(u, v, "is_close")
    return bool(np.allclose(u.data, v.data, rtol=tol.rtol, atol=tol.atol))


def format_vector(v: Vector) -> str:
    """Render as "[x0,x1,...]" with three decimals per component."""
    return format_components(v.data)
