"""
Tests for elementwise unary/binary operations.
"""

import numpy as np
import pytest

from pymtx.core.exceptions import DimensionError, InvalidIndexError, ValidationError
from pymtx.matrix import (
    BinaryOp,
    Matrix,
    UnaryOp,
    add,
    binary_func,
    binary_op,
    get_value,
    init,
    scalar_mult,
    scale_row,
    sub,
    sum_rows,
    unary_func,
    unary_op,
)
from pymtx.matrix.elementwise import _BINARY_OPS, _UNARY_OPS


class TestDispatchTables:
    """Every enumeration member has exactly one implementation."""

    def test_unary_table_exhaustive(self):
        assert set(_UNARY_OPS) == set(UnaryOp)

    def test_binary_table_exhaustive(self):
        assert set(_BINARY_OPS) == set(BinaryOp)


# ═══════════════════════════════════════════════════════════════════════
# unary_op
# ═══════════════════════════════════════════════════════════════════════


class TestUnaryOp:

    def test_increment(self, diag_3x3):
        unary_op(diag_3x3, UnaryOp.INCREMENT)
        np.testing.assert_allclose(diag_3x3.data[0], 2.0, atol=1e-5)
        np.testing.assert_allclose(diag_3x3.data[8], 1.1, atol=1e-5)
        assert diag_3x3.data[1] == 1.0

    def test_decrement(self):
        m = Matrix.from_rows([[1.0, 0.5]])
        unary_op(m, UnaryOp.DECREMENT)
        np.testing.assert_array_equal(m.data, [0.0, -0.5])

    def test_negative(self):
        m = Matrix.from_rows([[1.0, -2.0, 0.0]])
        unary_op(m, UnaryOp.NEGATIVE)
        np.testing.assert_array_equal(m.data, [-1.0, 2.0, 0.0])
        assert np.signbit(m.data[2])

    def test_round_half_away_from_zero(self):
        m = Matrix.from_rows([[0.5, 1.5, 2.5, -0.5, -2.5, 2.4, -2.6]])
        unary_op(m, UnaryOp.ROUND)
        np.testing.assert_array_equal(m.data, [1.0, 2.0, 3.0, -1.0, -3.0, 2.0, -3.0])

    def test_round_keeps_sign_of_zero(self):
        m = Matrix.from_rows([[-0.3, 0.3]])
        unary_op(m, UnaryOp.ROUND)
        assert m.data[0] == 0.0 and np.signbit(m.data[0])
        assert m.data[1] == 0.0 and not np.signbit(m.data[1])

    def test_round_large_integers_unchanged(self):
        big = 2.0 ** 52 + 1.0
        m = Matrix.from_rows([[big, -big]])
        unary_op(m, UnaryOp.ROUND)
        np.testing.assert_array_equal(m.data, [big, -big])

    @pytest.mark.parametrize("op, fn", [
        (UnaryOp.ABS, np.abs),
        (UnaryOp.FLOOR, np.floor),
        (UnaryOp.CEIL, np.ceil),
        (UnaryOp.EXP, np.exp),
    ])
    def test_matches_numpy(self, op, fn):
        values = np.array([[-1.7, -0.2, 0.0, 0.4, 2.6]])
        m = Matrix.from_rows(values)
        unary_op(m, op)
        np.testing.assert_array_equal(m.data, fn(values).ravel())

    @pytest.mark.parametrize("op, fn", [
        (UnaryOp.LOG, np.log),
        (UnaryOp.LOG10, np.log10),
        (UnaryOp.SQRT, np.sqrt),
    ])
    def test_positive_domain(self, op, fn):
        values = np.array([[0.5, 1.0, 4.0, 100.0]])
        m = Matrix.from_rows(values)
        unary_op(m, op)
        np.testing.assert_array_equal(m.data, fn(values).ravel())

    def test_domain_errors_follow_ieee(self):
        m = Matrix.from_rows([[-1.0, 0.0]])
        unary_op(m, UnaryOp.LOG)
        assert np.isnan(m.data[0])
        assert m.data[1] == -np.inf

    def test_float32_stays_float32(self):
        m = Matrix.from_rows([[0.1, 0.2]], dtype=np.float32)
        unary_op(m, UnaryOp.INCREMENT)
        assert m.dtype == np.float32
        np.testing.assert_array_equal(
            m.data, np.array([0.1, 0.2], dtype=np.float32) + np.float32(1)
        )

    def test_rejects_non_member(self, diag_3x3):
        with pytest.raises(ValidationError, match="UnaryOp"):
            unary_op(diag_3x3, 'increment')


# ═══════════════════════════════════════════════════════════════════════
# binary_op
# ═══════════════════════════════════════════════════════════════════════


class TestBinaryOp:

    def test_add(self, diag_3x3):
        ma = diag_3x3
        mb = Matrix(3, 3, diag_3x3.data.copy())
        mc = Matrix.empty(3, 3)
        init(mc)
        binary_op(ma, mb, mc, BinaryOp.ADD)
        np.testing.assert_allclose(mc.data[0], ma.data[0] + mb.data[0], atol=1e-5)
        np.testing.assert_allclose(mc.data[8], ma.data[8] + mb.data[8], atol=1e-5)

    @pytest.mark.parametrize("op, expected", [
        (BinaryOp.ADD, [5.0, 4.0, 6.0]),
        (BinaryOp.SUB, [-3.0, 2.0, 0.0]),
        (BinaryOp.MULT, [4.0, 3.0, 9.0]),
        (BinaryOp.DIV, [0.25, 3.0, 1.0]),
        (BinaryOp.MEAN, [2.5, 2.0, 3.0]),
        (BinaryOp.EXPON, [1.0, 3.0, 27.0]),
        (BinaryOp.MIN, [1.0, 1.0, 3.0]),
        (BinaryOp.MAX, [4.0, 3.0, 3.0]),
        (BinaryOp.EQUAL, [0.0, 0.0, 1.0]),
        (BinaryOp.NEQUAL, [1.0, 1.0, 0.0]),
        (BinaryOp.LESS, [1.0, 0.0, 0.0]),
        (BinaryOp.GREAT, [0.0, 1.0, 0.0]),
        (BinaryOp.LEQ, [1.0, 0.0, 1.0]),
        (BinaryOp.GEQ, [0.0, 1.0, 1.0]),
    ])
    def test_every_op(self, op, expected):
        a = Matrix.from_rows([[1.0, 3.0, 3.0]])
        b = Matrix.from_rows([[4.0, 1.0, 3.0]])
        dest = Matrix.empty(1, 3)
        binary_op(a, b, dest, op)
        np.testing.assert_array_equal(dest.data, expected)

    def test_dest_may_alias_a(self):
        a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix.from_rows([[10.0, 20.0], [30.0, 40.0]])
        binary_op(a, b, a, BinaryOp.SUB)
        np.testing.assert_array_equal(a.data, [-9.0, -18.0, -27.0, -36.0])

    def test_dest_may_alias_b(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix.from_rows([[10.0, 20.0]])
        binary_op(a, b, b, BinaryOp.DIV)
        np.testing.assert_array_equal(b.data, [0.1, 0.1])

    def test_same_operand_twice(self):
        a = Matrix.from_rows([[1.5, -2.0]])
        binary_op(a, a, a, BinaryOp.MULT)
        np.testing.assert_array_equal(a.data, [2.25, 4.0])

    def test_divide_by_zero_is_ieee(self):
        a = Matrix.from_rows([[1.0, -1.0, 0.0]])
        b = Matrix.from_rows([[0.0, 0.0, 0.0]])
        dest = Matrix.empty(1, 3)
        binary_op(a, b, dest, BinaryOp.DIV)
        assert dest.data[0] == np.inf
        assert dest.data[1] == -np.inf
        assert np.isnan(dest.data[2])

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            binary_op(Matrix.empty(2, 2), Matrix.empty(2, 3),
                      Matrix.empty(2, 2), BinaryOp.ADD)

    def test_dest_shape_mismatch_leaves_dest_untouched(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        dest = Matrix(2, 1, np.array([7.0, 7.0]))
        with pytest.raises(DimensionError):
            binary_op(a, a, dest, BinaryOp.ADD)
        np.testing.assert_array_equal(dest.data, [7.0, 7.0])

    def test_rejects_non_member(self):
        m = Matrix.from_rows([[1.0]])
        with pytest.raises(ValidationError, match="BinaryOp"):
            binary_op(m, m, m, UnaryOp.INCREMENT)


# ═══════════════════════════════════════════════════════════════════════
# Callback variants
# ═══════════════════════════════════════════════════════════════════════


class TestCallbacks:

    def test_unary_func_uses_position(self):
        m = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0]])
        unary_func(m, lambda mat, i, j: get_value(mat, i, j) * (i + 1) + j)
        np.testing.assert_array_equal(m.as_array(), [[1.0, 2.0], [2.0, 3.0]])

    def test_unary_func_rejects_non_callable(self):
        with pytest.raises(ValidationError):
            unary_func(Matrix.empty(1, 1), 3.0)

    def test_binary_func(self):
        a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])
        dest = Matrix.empty(2, 2)
        # dest[i][j] = a[i][j] * b[j][i]
        binary_func(a, b, dest,
                    lambda ma, mb, i, j: get_value(ma, i, j) * get_value(mb, j, i))
        np.testing.assert_array_equal(dest.as_array(), [[5.0, 14.0], [18.0, 32.0]])

    def test_binary_func_rejects_alias(self):
        a = Matrix.from_rows([[1.0]])
        b = Matrix.from_rows([[2.0]])
        with pytest.raises(ValidationError, match="share memory"):
            binary_func(a, b, a, lambda ma, mb, i, j: 0.0)

    def test_binary_func_shape_mismatch(self):
        with pytest.raises(DimensionError):
            binary_func(Matrix.empty(1, 2), Matrix.empty(2, 1),
                        Matrix.empty(1, 2), lambda ma, mb, i, j: 0.0)


# ═══════════════════════════════════════════════════════════════════════
# add / sub / scalar_mult
# ═══════════════════════════════════════════════════════════════════════


class TestAdditive:

    def test_add_into_dest(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix.from_rows([[3.0, 4.0]])
        dest = Matrix.empty(1, 2)
        add(a, b, dest)
        np.testing.assert_array_equal(dest.data, [4.0, 6.0])
        np.testing.assert_array_equal(a.data, [1.0, 2.0])

    def test_add_destructive(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix.from_rows([[3.0, 4.0]])
        add(a, b)
        np.testing.assert_array_equal(a.data, [4.0, 6.0])
        np.testing.assert_array_equal(b.data, [3.0, 4.0])

    def test_sub_into_dest(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix.from_rows([[3.0, 5.0]])
        dest = Matrix.empty(1, 2)
        sub(a, b, dest)
        np.testing.assert_array_equal(dest.data, [-2.0, -3.0])

    def test_sub_destructive(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix.from_rows([[3.0, 5.0]])
        sub(a, b)
        np.testing.assert_array_equal(a.data, [-2.0, -3.0])

    def test_add_shape_mismatch(self):
        with pytest.raises(DimensionError):
            add(Matrix.empty(2, 2), Matrix.empty(2, 1))


class TestScalarMult:

    def test_destructive(self, rect_4x2):
        scalar_mult(rect_4x2, 10.0)
        np.testing.assert_allclose(
            rect_4x2.data, [20.0, 30.0, 10.0, 40.0, 40.0, 30.0, 30.0, 40.0], atol=1e-5
        )

    def test_non_destructive(self, rect_4x2):
        before = rect_4x2.data.copy()
        dest = Matrix.empty(4, 2)
        scalar_mult(rect_4x2, -0.5, dest)
        np.testing.assert_array_equal(dest.data, before * -0.5)
        np.testing.assert_array_equal(rect_4x2.data, before)

    def test_dest_shape_mismatch(self, rect_4x2):
        with pytest.raises(DimensionError):
            scalar_mult(rect_4x2, 2.0, Matrix.empty(2, 4))


# ═══════════════════════════════════════════════════════════════════════
# Row operations
# ═══════════════════════════════════════════════════════════════════════


class TestRowOps:

    def test_scale_row(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        scale_row(m, 1, -2.0)
        np.testing.assert_array_equal(m.as_array(), [[1.0, 2.0], [-6.0, -8.0]])

    def test_sum_rows(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        sum_rows(m, 0, 1)
        np.testing.assert_array_equal(m.as_array(), [[4.0, 6.0], [3.0, 4.0]])

    def test_sum_rows_scaled(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        sum_rows(m, 1, 0, scale=-3.0)
        np.testing.assert_array_equal(m.as_array(), [[1.0, 2.0], [0.0, -2.0]])

    def test_row_index_checked(self):
        m = Matrix.empty(2, 2)
        with pytest.raises(InvalidIndexError):
            scale_row(m, 2, 1.0)
        with pytest.raises(InvalidIndexError):
            sum_rows(m, 0, 2)
