"""
Report-level entry points.

invert() runs the kernel on freshly allocated outputs and returns the
inverse together with its determinant, adjugate, timings and warnings.
Use pymtx.matrix.kernel.inverse directly to write into caller-owned
storage instead.
"""

from __future__ import annotations

import warnings

from pymtx.core.compute.timing import Timer
from pymtx.core.compute.tolerances import MAX_VALIDATED_ORDER, select_tolerance
from pymtx.core.result import Result
from pymtx.core.validation import check_square
from pymtx.matrix import kernel
from pymtx.matrix.buffer import Matrix
from pymtx.matrix.solution import InverseParams, InverseSolution, identity_residual


def _ensure_matrix(a) -> Matrix:
    """Convert nested rows to a Matrix if needed."""
    if isinstance(a, Matrix):
        return a
    return Matrix.from_rows(a)


def invert(a, *, threshold: float | None = None) -> InverseSolution:
    """
    Invert a square matrix.

    The determinant and adjugate come from cofactor expansion; the
    inverse from the same path as pymtx.matrix.kernel.inverse.

    Parameters
    ----------
    a : Matrix or 2D array-like
        Square input. Array-likes are copied into a float64 Matrix.
    threshold : float, optional
        Singularity threshold on |det(a)|. Defaults to
        singularity_threshold(a.dtype).

    Returns
    -------
    InverseSolution with inverse, adjugate and determinant populated.

    Raises
    ------
    NotSquareError
        If a is not square.
    SingularMatrixError
        If |det(a)| <= threshold.

    Warns
    -----
    RuntimeWarning
        For orders above MAX_VALIDATED_ORDER, and when max|A·A⁻¹ - I|
        exceeds the absolute tolerance of a's dtype.
    """
    a = _ensure_matrix(a)
    check_square(a, 'a')
    limit = kernel.resolve_threshold(threshold, a.dtype)
    n = a.rows

    warnings_list: list[str] = []
    if n > MAX_VALIDATED_ORDER:
        msg = (
            f"cofactor expansion on a {n}x{n} matrix is O(n!); "
            f"orders above {MAX_VALIDATED_ORDER} are slow"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warnings_list.append(msg)

    timer = Timer()
    timer.start()

    with timer.section('determinant'):
        d = kernel.determinant(a)

    kernel.require_nonsingular(d, limit, 'a')

    adj = Matrix.empty(n, n, dtype=a.dtype)
    inv = Matrix.empty(n, n, dtype=a.dtype)

    with timer.section('adjugate'):
        kernel.adjugate(a, adj)

    with timer.section('inverse'):
        kernel._inverse_into(a.as_array(), d, inv.as_array())

    timer.stop()

    tol = select_tolerance(a.dtype)
    residual = identity_residual(a, inv)
    if residual > tol.atol:
        msg = (
            f"inverse residual {residual:.3e} exceeds {tol.name} "
            f"tolerance {tol.atol:.0e}; the matrix is ill-conditioned"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warnings_list.append(msg)

    result = Result(
        params=InverseParams(inverse=inv, adjugate=adj, determinant=float(d)),
        info={
            'method': 'cofactor_expansion' if n == 3 else 'gauss_jordan',
            'order': n,
            'dtype': str(a.dtype),
            'threshold': limit,
            'tolerance': tol.name,
        },
        timing=timer.result(),
        backend_name='cpu_reference',
        warnings=tuple(warnings_list),
    )
    return InverseSolution(_result=result, _source=a)
