"""
Linear algebra kernel: multiply, transpose, minor, determinant,
adjugate and inverse.

All arithmetic runs in the buffers' own dtype using plain IEEE 754
operations in a fixed order. Signs are applied by multiplying with
+1.0 or -1.0, so negative zeros produced by the cofactor arithmetic are
kept as-is. Inverses of order other than 3 come from Gauss-Jordan
elimination, whose zero entries carry the signs its row operations
produce.

The determinant uses recursive cofactor expansion along row 0, which is
O(n!) and only practical for small orders (validated up to 5x5). There
is no cutoff: larger matrices are computed, slowly. The report layer in
pymtx.matrix.solvers warns about them.

None of these operations allow the destination to share storage with a
source, because each output element reads many input elements.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymtx.core.compute.tolerances import singularity_threshold
from pymtx.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pymtx.core.validation import (
    check_index,
    check_no_alias,
    check_shape,
    check_square,
)
from pymtx.matrix.buffer import Matrix
from pymtx.matrix.elementwise import scale_row, sum_rows
from pymtx.matrix.fill import FillStrategy, init


def _cofactor_sign(k: int) -> float:
    return 1.0 if k % 2 == 0 else -1.0


def _minor_into(g: NDArray, i: int, j: int, out: NDArray) -> None:
    """Copy g without row i and column j into out."""
    out[:i, :j] = g[:i, :j]
    out[:i, j:] = g[:i, j + 1:]
    out[i:, :j] = g[i + 1:, :j]
    out[i:, j:] = g[i + 1:, j + 1:]


def _det(g: NDArray) -> Any:
    n = g.shape[0]
    if n == 1:
        return g[0, 0]
    if n == 2:
        return g[0, 0] * g[1, 1] - g[0, 1] * g[1, 0]

    scratch = np.empty((n - 1, n - 1), dtype=g.dtype)
    d = g.dtype.type(0.0)
    for j in range(n):
        _minor_into(g, 0, j, scratch)
        d += _cofactor_sign(j) * g[0, j] * _det(scratch)
    return d


def _adjugate_into(g: NDArray, out: NDArray) -> None:
    n = g.shape[0]
    if n == 1:
        out[0, 0] = 1.0
        return

    scratch = np.empty((n - 1, n - 1), dtype=g.dtype)
    for i in range(n):
        for j in range(n):
            # Transposed cofactor: the minor drops row j and column i
            _minor_into(g, j, i, scratch)
            out[i, j] = _cofactor_sign(i + j) * _det(scratch)


def multiply(a: Matrix, b: Matrix, dest: Matrix) -> None:
    """
    dest = a · b.

    Each element is accumulated as sum_k a[i][k] * b[k][j] with k
    ascending, starting from zero.

    Raises
    ------
    DimensionError
        If a.cols != b.rows, or dest is not a.rows x b.cols.
    ValidationError
        If dest shares storage with a or b.
    """
    if a.cols != b.rows:
        raise DimensionError(
            f"b: expected {a.cols} rows to match a.cols, got {b.rows}",
            expected=a.cols,
            actual=b.rows,
        )
    check_shape(dest, a.rows, b.cols, 'dest')
    check_no_alias(dest, a, 'dest', 'a')
    check_no_alias(dest, b, 'dest', 'b')

    ga = a.as_array()
    gb = b.as_array()
    gd = dest.as_array()
    zero = np.result_type(a.dtype, b.dtype).type(0.0)
    for i in range(a.rows):
        for j in range(b.cols):
            acc = zero
            for k in range(a.cols):
                acc += ga[i, k] * gb[k, j]
            gd[i, j] = acc


def transpose(a: Matrix, dest: Matrix) -> None:
    """
    dest[j][i] = a[i][j].

    Raises
    ------
    DimensionError
        If dest is not a.cols x a.rows.
    ValidationError
        If dest shares storage with a.
    """
    check_shape(dest, a.cols, a.rows, 'dest')
    check_no_alias(dest, a, 'dest', 'a')
    dest.as_array()[...] = a.as_array().T


def minor(a: Matrix, i: int, j: int, dest: Matrix) -> None:
    """
    Copy a without row i and column j into dest.

    Raises
    ------
    DimensionError
        If a has a single row or column, or dest is not
        (a.rows - 1) x (a.cols - 1).
    InvalidIndexError
        If i or j is out of range.
    """
    if a.rows < 2 or a.cols < 2:
        raise DimensionError(
            f"a: minor needs at least 2 rows and 2 columns, got ({a.rows}, {a.cols})",
            actual=(a.rows, a.cols),
        )
    i = check_index(i, a.rows, 'row', 'i')
    j = check_index(j, a.cols, 'col', 'j')
    check_shape(dest, a.rows - 1, a.cols - 1, 'dest')
    check_no_alias(dest, a, 'dest', 'a')
    _minor_into(a.as_array(), i, j, dest.as_array())


def determinant(a: Matrix):
    """
    Determinant by cofactor expansion along row 0.

    Returns
    -------
    NumPy scalar in a's dtype.

    Raises
    ------
    NotSquareError
        If a is not square.
    """
    check_square(a, 'a')
    return _det(a.as_array())


def adjugate(a: Matrix, dest: Matrix) -> None:
    """
    dest[i][j] = (-1)^(i+j) · det(minor(a, j, i)).

    The adjugate of a 1x1 matrix is [[1]].

    Raises
    ------
    NotSquareError
        If a is not square.
    DimensionError
        If dest's shape differs from a.
    ValidationError
        If dest shares storage with a.
    """
    check_square(a, 'a')
    check_shape(dest, a.rows, a.cols, 'dest')
    check_no_alias(dest, a, 'dest', 'a')
    _adjugate_into(a.as_array(), dest.as_array())


def resolve_threshold(threshold: float | None, dtype: np.dtype) -> float:
    """Validate a caller threshold, or fall back to the dtype default."""
    if threshold is None:
        return singularity_threshold(dtype)
    try:
        value = float(threshold)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"threshold: expected a real number, got {threshold!r}") from e
    if not value >= 0.0:
        raise ValidationError(f"threshold: must be >= 0, got {value}")
    return value


def require_nonsingular(d: Any, limit: float, name: str) -> None:
    """
    Raise SingularMatrixError unless |d| > limit.

    A NaN determinant fails the comparison and counts as singular.
    """
    if not abs(d) > limit:
        raise SingularMatrixError(
            f"{name}: matrix is singular (|det| = {abs(float(d)):.3e} <= {limit:.3e})",
            matrix_name=name,
            determinant=float(d),
            threshold=limit,
        )


def _gauss_jordan_into(g: NDArray, out: NDArray) -> bool:
    """
    Gauss-Jordan elimination of g against the identity, result in out.

    A zero pivot is repaired by adding the first later row with a nonzero
    entry in the pivot column. Every other row is then reduced with
    row_k += -(g[k][i] / g[i][i]) * row_i, including rows whose entry is
    already zero, and finally each row is divided by its pivot through
    multiplication with 1 / pivot. Returns False if no usable pivot exists.
    """
    n = g.shape[0]
    work = Matrix(n, n, g.copy().reshape(-1))
    ident = Matrix.empty(n, n, dtype=g.dtype)
    init(ident, FillStrategy.DIAGONAL)
    w = work.as_array()

    for i in range(n):
        if w[i, i] == 0.0:
            for k in range(i + 1, n):
                if w[k, i] != 0.0:
                    sum_rows(work, i, k)
                    sum_rows(ident, i, k)
                    break
            else:
                return False
        for k in range(n):
            if k != i:
                s = -w[k, i] / w[i, i]
                sum_rows(work, k, i, scale=s)
                sum_rows(ident, k, i, scale=s)

    for i in range(n):
        s = 1 / w[i, i]
        scale_row(work, i, s)
        scale_row(ident, i, s)

    out[...] = ident.as_array()
    return True


def _inverse_into(g: NDArray, d: Any, out: NDArray) -> None:
    """
    Write the inverse of g, whose determinant d already passed the
    singularity check, into out.

    Order 3 uses adjugate / d; every other order uses Gauss-Jordan
    elimination. The two paths agree in value but not always in the
    sign of zero entries.
    """
    if g.shape[0] == 3:
        _adjugate_into(g, out)
        with np.errstate(all='ignore'):
            np.divide(out, d, out=out)
        return

    scratch = np.empty_like(g)
    with np.errstate(all='ignore'):
        ok = _gauss_jordan_into(g, scratch)
    if not ok:
        raise SingularMatrixError(
            "a: matrix is singular (no nonzero pivot during elimination)",
            matrix_name='a',
            determinant=float(d),
        )
    out[...] = scratch


def inverse(a: Matrix, dest: Matrix, threshold: float | None = None) -> None:
    """
    dest = a⁻¹.

    3x3 matrices are inverted as adjugate(a) / det(a); all other orders
    by Gauss-Jordan elimination with row operations. Both run in a's
    dtype, so zero entries of the result carry the sign the arithmetic
    gives them.

    Parameters
    ----------
    a : Matrix
        Square input.
    dest : Matrix
        Output of the same shape, not sharing storage with a.
    threshold : float, optional
        a is singular when |det(a)| <= threshold. Defaults to
        singularity_threshold(a.dtype), a small multiple of machine epsilon.

    Raises
    ------
    NotSquareError
        If a is not square.
    DimensionError
        If dest's shape differs from a.
    SingularMatrixError
        If |det(a)| <= threshold, or elimination finds no nonzero pivot.
        dest is left untouched.
    """
    check_square(a, 'a')
    check_shape(dest, a.rows, a.cols, 'dest')
    check_no_alias(dest, a, 'dest', 'a')
    limit = resolve_threshold(threshold, a.dtype)

    g = a.as_array()
    d = _det(g)
    require_nonsingular(d, limit, 'a')
    _inverse_into(g, d, dest.as_array())
