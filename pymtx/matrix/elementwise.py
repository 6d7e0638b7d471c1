"""
Elementwise unary/binary operations on matrices.

unary_op() and binary_op() dispatch over closed enumerations: every
UnaryOp and BinaryOp member has exactly one entry in its dispatch table,
and anything else is rejected. The table entries are NumPy ufunc calls
writing straight into the destination buffer, so each output element
depends only on the same-index inputs and the destination may alias an
input.

Floating-point exceptions (divide by zero, log of a negative value,
overflow) are not errors here: results follow IEEE 754 (inf/nan) and
NumPy's warnings for them are suppressed.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymtx.core.exceptions import ValidationError
from pymtx.core.validation import (
    check_index,
    check_no_alias,
    check_same_shape,
)

if TYPE_CHECKING:
    from pymtx.matrix.buffer import Matrix


class UnaryOp(Enum):
    """In-place unary operations."""
    INCREMENT = 'increment'
    DECREMENT = 'decrement'
    NEGATIVE = 'negative'
    ROUND = 'round'
    ABS = 'abs'
    FLOOR = 'floor'
    CEIL = 'ceil'
    EXP = 'exp'
    LOG = 'log'
    LOG10 = 'log10'
    SQRT = 'sqrt'


class BinaryOp(Enum):
    """
    Binary operations applied per position.

    Comparison operations store 1.0 where the relation holds, 0.0 elsewhere.
    """
    ADD = 'add'
    SUB = 'sub'
    MULT = 'mult'
    DIV = 'div'
    MEAN = 'mean'
    EXPON = 'expon'
    MIN = 'min'
    MAX = 'max'
    EQUAL = 'equal'
    NEQUAL = 'nequal'
    LESS = 'less'
    GREAT = 'great'
    LEQ = 'leq'
    GEQ = 'geq'


def _round_half_away(x: NDArray, out: NDArray) -> None:
    # Half away from zero, keeping the sign of zero (round(-0.3) == -0.0)
    t = np.trunc(x)
    step = np.where(np.abs(x - t) >= 0.5, np.sign(x), 0.0)
    np.copysign(t + step, x, out=out)


def _mean(a: NDArray, b: NDArray, out: NDArray) -> None:
    np.add(a, b, out=out)
    np.divide(out, 2, out=out)


_UNARY_OPS: dict[UnaryOp, Callable[[NDArray, NDArray], Any]] = {
    UnaryOp.INCREMENT: lambda x, out: np.add(x, 1, out=out),
    UnaryOp.DECREMENT: lambda x, out: np.subtract(x, 1, out=out),
    UnaryOp.NEGATIVE: lambda x, out: np.negative(x, out=out),
    UnaryOp.ROUND: _round_half_away,
    UnaryOp.ABS: lambda x, out: np.abs(x, out=out),
    UnaryOp.FLOOR: lambda x, out: np.floor(x, out=out),
    UnaryOp.CEIL: lambda x, out: np.ceil(x, out=out),
    UnaryOp.EXP: lambda x, out: np.exp(x, out=out),
    UnaryOp.LOG: lambda x, out: np.log(x, out=out),
    UnaryOp.LOG10: lambda x, out: np.log10(x, out=out),
    UnaryOp.SQRT: lambda x, out: np.sqrt(x, out=out),
}

_BINARY_OPS: dict[BinaryOp, Callable[[NDArray, NDArray, NDArray], Any]] = {
    BinaryOp.ADD: lambda a, b, out: np.add(a, b, out=out),
    BinaryOp.SUB: lambda a, b, out: np.subtract(a, b, out=out),
    BinaryOp.MULT: lambda a, b, out: np.multiply(a, b, out=out),
    BinaryOp.DIV: lambda a, b, out: np.divide(a, b, out=out),
    BinaryOp.MEAN: _mean,
    BinaryOp.EXPON: lambda a, b, out: np.power(a, b, out=out),
    BinaryOp.MIN: lambda a, b, out: np.minimum(a, b, out=out),
    BinaryOp.MAX: lambda a, b, out: np.maximum(a, b, out=out),
    BinaryOp.EQUAL: lambda a, b, out: np.equal(a, b, out=out),
    BinaryOp.NEQUAL: lambda a, b, out: np.not_equal(a, b, out=out),
    BinaryOp.LESS: lambda a, b, out: np.less(a, b, out=out),
    BinaryOp.GREAT: lambda a, b, out: np.greater(a, b, out=out),
    BinaryOp.LEQ: lambda a, b, out: np.less_equal(a, b, out=out),
    BinaryOp.GEQ: lambda a, b, out: np.greater_equal(a, b, out=out),
}


def unary_op(m: Matrix, op: UnaryOp) -> None:
    """
    Apply op to every element of m in place.

    Raises
    ------
    ValidationError
        If op is not a UnaryOp member.
    """
    if not isinstance(op, UnaryOp):
        raise ValidationError(f"op: expected UnaryOp, got {op!r}")
    with np.errstate(all='ignore'):
        _UNARY_OPS[op](m.data, m.data)


def binary_op(a: Matrix, b: Matrix, dest: Matrix, op: BinaryOp) -> None:
    """
    dest[i][j] = op(a[i][j], b[i][j]) for every position.

    dest may be the same matrix as a or b.

    Raises
    ------
    DimensionError
        If a, b and dest don't share one shape.
    ValidationError
        If op is not a BinaryOp member.
    """
    if not isinstance(op, BinaryOp):
        raise ValidationError(f"op: expected BinaryOp, got {op!r}")
    check_same_shape(a, b, dest, names=('a', 'b', 'dest'))
    with np.errstate(all='ignore'):
        _BINARY_OPS[op](a.data, b.data, dest.data)


def unary_func(m: Matrix, fn: Callable[[Matrix, int, int], float]) -> None:
    """
    Replace every element with fn(m, i, j), visiting positions row-major.

    fn sees the matrix as it is being rewritten: positions earlier in
    row-major order already hold their new values.
    """
    if not callable(fn):
        raise ValidationError(f"fn: expected callable, got {type(fn).__name__}")
    data = m.data
    cols = m.cols
    for i in range(m.rows):
        for j in range(cols):
            data[i * cols + j] = fn(m, i, j)


def binary_func(
    a: Matrix,
    b: Matrix,
    dest: Matrix,
    fn: Callable[[Matrix, Matrix, int, int], float],
) -> None:
    """
    dest[i][j] = fn(a, b, i, j) for every position, row-major.

    The callback may read any position of a and b, so dest must not
    share storage with either.
    """
    if not callable(fn):
        raise ValidationError(f"fn: expected callable, got {type(fn).__name__}")
    check_same_shape(a, b, dest, names=('a', 'b', 'dest'))
    check_no_alias(dest, a, 'dest', 'a')
    check_no_alias(dest, b, 'dest', 'b')
    data = dest.data
    cols = dest.cols
    for i in range(dest.rows):
        for j in range(cols):
            data[i * cols + j] = fn(a, b, i, j)


def add(a: Matrix, b: Matrix, dest: Matrix | None = None) -> None:
    """dest = a + b; without dest, a is overwritten."""
    binary_op(a, b, a if dest is None else dest, BinaryOp.ADD)


def sub(a: Matrix, b: Matrix, dest: Matrix | None = None) -> None:
    """dest = a - b; without dest, a is overwritten."""
    binary_op(a, b, a if dest is None else dest, BinaryOp.SUB)


def scalar_mult(m: Matrix, s: float, dest: Matrix | None = None) -> None:
    """
    dest = s * m; without dest, m is overwritten.

    Raises
    ------
    DimensionError
        If dest is given and its shape differs from m.
    """
    target = m if dest is None else dest
    check_same_shape(m, target, names=('m', 'dest'))
    with np.errstate(all='ignore'):
        np.multiply(m.data, s, out=target.data)


def scale_row(m: Matrix, i: int, s: float) -> None:
    """Multiply every element of row i by s."""
    i = check_index(i, m.rows, 'row', 'i')
    row = m.data[i * m.cols:(i + 1) * m.cols]
    with np.errstate(all='ignore'):
        np.multiply(row, s, out=row)


def sum_rows(m: Matrix, i: int, j: int, scale: float = 1.0) -> None:
    """
    Row i += scale * row j.

    This is the elementary row operation of Gauss-Jordan elimination.
    """
    i = check_index(i, m.rows, 'row', 'i')
    j = check_index(j, m.rows, 'row', 'j')
    cols = m.cols
    target = m.data[i * cols:(i + 1) * cols]
    source = m.data[j * cols:(j + 1) * cols]
    with np.errstate(all='ignore'):
        np.add(target, np.multiply(source, scale), out=target)
