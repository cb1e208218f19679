"""
Tests for vector free functions.

Scenario values are small integers so exact comparison is valid; random
inputs are compared with the FP64 tolerance tier.
"""

import numpy as np
import pytest

from pylinalg.core.compute.tolerances import FP64, FP64_ACCUMULATED
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    EmptyVectorError,
    ZeroVectorError,
)
from pylinalg.vector import (
    Vector,
    add,
    angle_r,
    cross,
    dot,
    equal,
    format_vector,
    is_close,
    length,
    less,
    mean,
    multiply,
    proj,
    scalar_multiply,
    subtract,
    unit,
    vsum,
)


# ═══════════════════════════════════════════════════════════════════════
# Elementwise algebra
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add(self):
        assert add(Vector([1, 2, 3]), Vector([4, 5, 6])) == Vector([5, 7, 9])

    def test_add_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            add(Vector([1, 2]), Vector([1, 2, 3]))

    def test_subtract(self):
        assert subtract(Vector([4, 5, 6]), Vector([1, 2, 3])) == Vector([3, 3, 3])

    def test_subtract_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            subtract(Vector([1]), Vector([1, 2]))

    def test_multiply(self):
        assert multiply(Vector([1, 2, 3]), Vector([4, 5, 6])) == Vector([4, 10, 18])

    def test_multiply_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            multiply(Vector([1, 2, 3]), Vector([1, 2]))

    def test_scalar_multiply(self):
        assert scalar_multiply(3, Vector([1, -2])) == Vector([3, -6])

    def test_scalar_multiply_by_zero_is_allowed(self):
        assert scalar_multiply(0, Vector([1, -2, 3])) == Vector([0, 0, 0])

    def test_operations_do_not_mutate(self):
        u, v = Vector([1, 2]), Vector([3, 4])
        add(u, v)
        scalar_multiply(5, u)
        assert u == Vector([1, 2])
        assert v == Vector([3, 4])

    def test_add_commutative_and_associative(self, random_vectors):
        u, v, w = random_vectors
        assert is_close(add(u, v), add(v, u), FP64)
        assert is_close(add(add(u, v), w), add(u, add(v, w)), FP64)

    def test_subtract_is_add_negated(self, random_vectors):
        u, v, _ = random_vectors
        assert is_close(subtract(u, v), add(u, scalar_multiply(-1, v)), FP64)

    def test_add_subtract_roundtrip(self, random_vectors):
        u, v, _ = random_vectors
        assert is_close(add(u, subtract(add(u, v), u)), add(u, v), FP64)


# ═══════════════════════════════════════════════════════════════════════
# Reductions
# ═══════════════════════════════════════════════════════════════════════


class TestReductions:

    def test_sum(self):
        assert vsum(Vector([1, 2, 3.5])) == 6.5

    def test_sum_empty_is_zero(self):
        assert vsum(Vector()) == 0.0

    def test_dot_scenario(self):
        assert dot(Vector([1, 2, 3]), Vector([4, 5, 6])) == 32.0

    def test_dot_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="^dot:"):
            dot(Vector([1, 2]), Vector([1, 2, 3]))

    def test_dot_commutative(self, random_vectors):
        u, v, _ = random_vectors
        np.testing.assert_allclose(dot(u, v), dot(v, u), rtol=FP64.rtol)

    def test_mean(self):
        assert mean(Vector([1, 2, 3, 4])) == 2.5

    def test_mean_empty(self):
        with pytest.raises(EmptyVectorError):
            mean(Vector())

    def test_length(self):
        assert length(Vector([3, 4])) == 5.0

    def test_length_empty(self):
        assert length(Vector()) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Geometry
# ═══════════════════════════════════════════════════════════════════════


class TestGeometry:

    def test_cross_scenario(self):
        assert cross(Vector([1, 0, 0]), Vector([0, 1, 0])) == Vector([0, 0, 1])

    def test_cross_anticommutative(self):
        u, v = Vector([1, 2, 3]), Vector([4, 5, 6])
        assert cross(u, v) == Vector([-3, 6, -3])
        assert cross(v, u) == Vector([3, -6, 3])

    def test_cross_orthogonal_to_operands(self):
        u, v = Vector([1, 2, 3]), Vector([-2, 0, 5])
        w = cross(u, v)
        assert dot(w, u) == 0.0
        assert dot(w, v) == 0.0

    @pytest.mark.parametrize("u, v", [
        ([1, 0], [0, 1]),
        ([1, 0, 0, 0], [0, 1, 0, 0]),
        ([1, 0, 0], [0, 1]),
    ])
    def test_cross_requires_3d(self, u, v):
        with pytest.raises(DimensionMismatchError):
            cross(Vector(u), Vector(v))

    def test_unit(self):
        assert unit(Vector([3, 4])) == Vector([0.6, 0.8])

    def test_unit_has_length_one(self, random_vectors):
        for v in random_vectors:
            assert abs(length(unit(v)) - 1.0) < 1e-9

    def test_unit_of_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            unit(Vector([0, 0, 0]))

    def test_unit_of_empty_vector(self):
        with pytest.raises(ZeroVectorError):
            unit(Vector())

    def test_angle_r_is_cosine(self):
        assert angle_r(Vector([1, 0]), Vector([0, 2])) == 0.0
        assert angle_r(Vector([1, 0]), Vector([5, 0])) == 1.0
        assert angle_r(Vector([1, 0]), Vector([-3, 0])) == -1.0

    def test_angle_r_not_radians(self):
        c = angle_r(Vector([1, 1]), Vector([1, 0]))
        np.testing.assert_allclose(c, np.cos(np.pi / 4), rtol=FP64.rtol)

    def test_angle_r_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            angle_r(Vector([0, 0]), Vector([1, 0]))

    def test_proj(self):
        assert proj(Vector([3, 4]), Vector([2, 0])) == Vector([3, 0])

    def test_proj_onto_self(self, random_vectors):
        v = random_vectors[0]
        assert is_close(proj(v, v), v, FP64_ACCUMULATED)

    def test_proj_residual_orthogonal(self, random_vectors):
        u, v, _ = random_vectors
        residual = subtract(u, proj(u, v))
        assert abs(dot(residual, v)) < 1e-9

    def test_proj_onto_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            proj(Vector([1, 2]), Vector([0, 0]))

    def test_proj_mismatch_names_proj(self):
        with pytest.raises(DimensionMismatchError, match="^proj:"):
            proj(Vector([1, 2]), Vector([1, 2, 3]))

    def test_proj_mismatch_checked_before_zero_length(self):
        with pytest.raises(DimensionMismatchError, match="^proj:"):
            proj(Vector([1, 2]), Vector([0, 0, 0]))


# ═══════════════════════════════════════════════════════════════════════
# Comparison and formatting
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_less_all_components(self):
        assert less(Vector([1, 2]), Vector([2, 3]))

    def test_less_is_not_lexicographic(self):
        assert not less(Vector([1, 5]), Vector([2, 3]))

    def test_less_requires_strict(self):
        assert not less(Vector([1, 2]), Vector([1, 3]))

    def test_less_empty_is_false(self):
        assert not less(Vector(), Vector())

    def test_less_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            less(Vector([1]), Vector([1, 2]))

    def test_equal(self):
        assert equal(Vector([1, 2]), Vector([1, 2]))
        assert not equal(Vector([1, 2]), Vector([1, 2.5]))

    def test_equal_empty_is_true(self):
        assert equal(Vector(), Vector())

    def test_equal_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            equal(Vector([1]), Vector([1, 2]))

    def test_is_close(self):
        assert is_close(Vector([1.0, 2.0]), Vector([1.0 + 1e-13, 2.0]))
        assert not is_close(Vector([1.0, 2.0]), Vector([1.001, 2.0]))

    def test_format_vector(self):
        assert format_vector(Vector([1, 2.5])) == "[1.000,2.500]"
