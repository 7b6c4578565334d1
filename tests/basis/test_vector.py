"""
Tests for Vector.

Validates:
    - Construction, factories and their argument checks
    - Indexing bounds
    - Arithmetic operators and named equivalents, both operand orders
    - Dimension mismatches leave operands unmodified
    - Structural operations (concat, sub_vector, to_matrix, outer)
    - Text form and parse
    - Copy semantics
"""

import copy
import math
import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pivotmath import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    Matrix,
    NumericalWarning,
    ParseError,
    Vector,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_list(self):
        v = Vector([1, 2, 3])
        assert v.length == 3
        assert len(v) == 3
        assert list(v) == [1.0, 2.0, 3.0]

    def test_from_numpy_is_copied(self):
        source = np.array([1.0, 2.0])
        v = Vector(source)
        source[0] = 10.0
        assert v[0] == 1.0

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError, match="at least one"):
            Vector([])

    def test_two_dimensional_rejected(self):
        with pytest.raises(DimensionMismatchError):
            Vector([[1, 2], [3, 4]])

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Vector(["x", "y"])

    def test_null_fills_length_zeros(self):
        v = Vector.null(4)
        assert v.length == 4
        assert list(v) == [0.0, 0.0, 0.0, 0.0]

    @pytest.mark.parametrize("length", [0, -3])
    def test_null_non_positive(self, length):
        with pytest.raises(InvalidArgumentError):
            Vector.null(length)

    def test_canonical(self):
        assert Vector.canonical(1, 3) == Vector([0, 1, 0])

    def test_canonical_bad_index(self):
        with pytest.raises(IndexOutOfRangeError):
            Vector.canonical(3, 3)

    @pytest.mark.parametrize("index,length", [(0, 0), (0, -2)])
    def test_canonical_non_positive_length(self, index, length):
        with pytest.raises(InvalidArgumentError):
            Vector.canonical(index, length)


# ═══════════════════════════════════════════════════════════════════════
# Indexing
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_get_returns_python_float(self):
        v = Vector([1, 2])
        assert v[1] == 2.0
        assert type(v[1]) is float

    def test_set(self):
        v = Vector([1, 2])
        v[0] = 5
        assert v == Vector([5, 2])

    @pytest.mark.parametrize("index", [2, -1, 100])
    def test_get_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError):
            Vector([1, 2])[index]

    def test_set_out_of_range(self):
        v = Vector([1, 2])
        with pytest.raises(IndexOutOfRangeError):
            v[2] = 1.0
        assert v == Vector([1, 2])

    def test_set_non_numeric(self):
        v = Vector([1, 2])
        with pytest.raises(InvalidArgumentError):
            v[0] = "a"


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_scale_both_orders(self):
        v = Vector([1, -2, 3])
        assert v * 2 == Vector([2, -4, 6])
        assert 2 * v == Vector([2, -4, 6])
        assert v.scale(2) == Vector([2, -4, 6])

    def test_add_subtract(self):
        u = Vector([1, 2, 3])
        v = Vector([4, 5, 6])
        assert u + v == Vector([5, 7, 9])
        assert v - u == Vector([3, 3, 3])
        assert u.add(v) == u + v
        assert v.subtract(u) == v - u

    def test_negate(self):
        assert -Vector([1, -2]) == Vector([-1, 2])

    def test_divide(self):
        assert Vector([2, 4]) / 2 == Vector([1, 2])
        assert Vector([2, 4]).divide(4) == Vector([0.5, 1])

    def test_divide_by_zero_is_ieee(self):
        with pytest.warns(NumericalWarning):
            result = Vector([1, -1, 0]) / 0
        assert result[0] == math.inf
        assert result[1] == -math.inf
        assert math.isnan(result[2])

    def test_overflow_is_not_an_error(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = Vector([1e308]) * 10
        assert result[0] == math.inf

    def test_scale_by_int_beyond_float_range(self):
        assert Vector([1.0, -2.0]) * 10**400 == Vector([math.inf, -math.inf])
        assert -10**400 * Vector([1.0]) == Vector([-math.inf])
        assert Vector([1.0]).scale(10**400) == Vector([math.inf])

    def test_divide_by_int_beyond_float_range(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Vector([1.0, -2.0]) / 10**400 == Vector([0.0, -0.0])
            assert Vector([1.0]).divide(-10**400) == Vector([-0.0])

    def test_dot_product(self):
        assert Vector([1, 2, 3]) * Vector([4, 5, 6]) == 32
        assert Vector([1, 2, 3]).dot(Vector([4, 5, 6])) == 32
        assert Vector([1, 2, 3]) @ Vector([4, 5, 6]) == 32

    def test_plus_mult(self):
        u = Vector([1, 1])
        v = Vector([2, 3])
        assert u.plus_mult(2, v) == Vector([5, 7])
        assert u == Vector([1, 1])

    def test_outer(self):
        m = Vector([1, 2]).outer(Vector([3, 4, 5]))
        assert isinstance(m, Matrix)
        assert m.shape == (2, 3)
        assert_array_equal(m.to_numpy(), [[3, 4, 5], [6, 8, 10]])

    def test_times_matrix(self, rect):
        result = Vector([1, 1]) * rect
        assert isinstance(result, Vector)
        assert result == Vector([5, 7, 9])
        assert Vector([1, 1]) @ rect == result

    def test_times_matrix_mismatch(self, rect):
        with pytest.raises(DimensionMismatchError):
            Vector([1, 1, 1]) * rect

    @pytest.mark.parametrize("op", [
        lambda u, v: u + v,
        lambda u, v: u - v,
        lambda u, v: u * v,
        lambda u, v: u.plus_mult(1.0, v),
    ])
    def test_mismatch_leaves_operands_unmodified(self, op):
        u = Vector([1, 2])
        v = Vector([1, 2, 3])
        with pytest.raises(DimensionMismatchError):
            op(u, v)
        assert u == Vector([1, 2])
        assert v == Vector([1, 2, 3])

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) + 1
        with pytest.raises(TypeError):
            Vector([1, 2]) * "a"

    @pytest.mark.parametrize("call", [
        lambda v: v.add([1, 2]),
        lambda v: v.subtract([1, 2]),
        lambda v: v.dot(np.array([1.0, 2.0])),
        lambda v: v.plus_mult(2.0, [1, 2]),
        lambda v: v.outer([1, 2]),
        lambda v: v.concat([3.0]),
        lambda v: v.allclose((1.0, 2.0)),
    ])
    def test_named_methods_reject_non_vectors(self, call):
        v = Vector([1, 2])
        with pytest.raises(TypeError, match="other: expected a Vector"):
            call(v)
        assert v == Vector([1, 2])

    def test_operations_return_new_vectors(self):
        v = Vector([1, 2])
        w = v * 1
        w[0] = 9
        assert v[0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Structural
# ═══════════════════════════════════════════════════════════════════════


class TestStructural:

    def test_to_matrix_horizontal(self):
        m = Vector([1, 2, 3]).to_matrix(True)
        assert m.shape == (1, 3)
        assert m[0, 2] == 3.0

    def test_to_matrix_vertical(self):
        m = Vector([1, 2, 3]).to_matrix(False)
        assert m.shape == (3, 1)
        assert m[2, 0] == 3.0

    @pytest.mark.parametrize("horizontal", [True, False])
    def test_to_matrix_is_a_copy(self, horizontal):
        v = Vector([1, 2, 3])
        m = v.to_matrix(horizontal)
        m[0, 0] = 9
        assert v == Vector([1, 2, 3])
        v[0] = -1
        assert m[0, 0] == 9.0

    def test_concat_copies_all_of_other(self):
        result = Vector([1, 2]).concat(Vector([3, 4, 5]))
        assert result == Vector([1, 2, 3, 4, 5])

    def test_concat_shorter_other(self):
        result = Vector([1, 2, 3]).concat(Vector([4]))
        assert result == Vector([1, 2, 3, 4])

    def test_sub_vector_inclusive(self):
        v = Vector([0, 1, 2, 3, 4])
        assert v.sub_vector(1, 3) == Vector([1, 2, 3])
        assert v.sub_vector(2, 2) == Vector([2])
        assert v.sub_vector(0, 4) == v

    @pytest.mark.parametrize("start,stop", [(-1, 2), (0, 5), (3, 1)])
    def test_sub_vector_bad_bounds(self, start, stop):
        with pytest.raises(IndexOutOfRangeError):
            Vector([0, 1, 2, 3, 4]).sub_vector(start, stop)

    def test_sub_vector_is_a_copy(self):
        v = Vector([0, 1, 2])
        part = v.sub_vector(0, 1)
        part[0] = 7
        assert v[0] == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Text form
# ═══════════════════════════════════════════════════════════════════════


class TestText:

    def test_str(self):
        assert str(Vector([1, 2.5, -3])) == "(1.0, 2.5, -3.0)"

    def test_str_single(self):
        assert str(Vector([7])) == "(7.0)"

    def test_repr(self):
        assert repr(Vector([1, 2])) == "Vector([1.0, 2.0])"

    def test_parse(self):
        assert Vector.parse("(1.0, 2.5, -3.0)") == Vector([1, 2.5, -3])

    def test_parse_tolerates_whitespace(self):
        assert Vector.parse("  ( 1 ,2,  3 ) ") == Vector([1, 2, 3])

    def test_parse_special_values(self):
        v = Vector.parse("(inf, -inf, nan)")
        assert v[0] == math.inf
        assert v[1] == -math.inf
        assert math.isnan(v[2])

    def test_round_trip_exact(self):
        v = Vector([0.1, 1 / 3, -2e-300, 6.02214076e23])
        assert Vector.parse(str(v)) == v

    @pytest.mark.parametrize("text", [
        "1, 2, 3",
        "(1, 2, 3",
        "1, 2, 3)",
        "()",
        "(1, , 3)",
        "(1, two, 3)",
        "",
    ])
    def test_parse_malformed(self, text):
        with pytest.raises(ParseError):
            Vector.parse(text)

    @pytest.mark.parametrize("text", [
        "(1_000, 2)",
        "(1, 2_5.0)",
        "(\u0661, 2)",
        "(\uff11.5, 2)",
    ])
    def test_parse_rejects_forms_str_never_writes(self, text):
        with pytest.raises(ParseError) as exc_info:
            Vector.parse(text)
        assert exc_info.value.text == text

    def test_parse_error_chains_cause(self):
        with pytest.raises(ParseError) as exc_info:
            Vector.parse("(1, x)")
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.text == "(1, x)"


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_copy_is_independent(self):
        v = Vector([1, 2])
        w = v.copy()
        w[0] = 10
        assert v[0] == 1.0

    @pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy])
    def test_copy_module(self, clone):
        v = Vector([1, 2])
        w = clone(v)
        assert w == v
        w[1] = 0
        assert v[1] == 2.0

    def test_equality_requires_same_length(self):
        assert Vector([1, 2]) != Vector([1, 2, 0])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1]))

    def test_allclose(self):
        v = Vector([1.0, 2.0])
        assert v.allclose(Vector([1.0 + 1e-14, 2.0]))
        assert not v.allclose(Vector([1.1, 2.0]))
        assert not v.allclose(Vector([1.0, 2.0, 3.0]))

    def test_numpy_interop(self):
        v = Vector([1, 2])
        assert_allclose(np.asarray(v), [1.0, 2.0])
        exported = v.to_numpy()
        exported[0] = 5
        assert v[0] == 1.0
