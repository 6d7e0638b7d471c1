"""
Bounds-checked element, row and column access.

Every function validates its indices and buffer lengths before reading
or writing, so a failed call leaves the matrix untouched. Row and column
buffers follow the vector convention: any 1D array of at least the
required length, read or written from position 0 in index order.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymtx.core.exceptions import DimensionError, ValidationError
from pymtx.core.validation import (
    check_index,
    check_out_vector,
    check_same_shape,
    check_vector,
)

if TYPE_CHECKING:
    from pymtx.matrix.buffer import Matrix


def get_value(m: Matrix, i: int, j: int):
    """
    Read element (i, j).

    Returns
    -------
    NumPy scalar in the buffer's dtype. The sign of zero is preserved.

    Raises
    ------
    InvalidIndexError
        If i >= rows or j >= cols.
    """
    i = check_index(i, m.rows, 'row', 'i')
    j = check_index(j, m.cols, 'col', 'j')
    return m.data[i * m.cols + j]


def set_value(m: Matrix, i: int, j: int, value: float) -> None:
    """
    Write element (i, j).

    Raises
    ------
    InvalidIndexError
        If i >= rows or j >= cols.
    """
    i = check_index(i, m.rows, 'row', 'i')
    j = check_index(j, m.cols, 'col', 'j')
    m.data[i * m.cols + j] = value


def get_row(m: Matrix, i: int, out: NDArray[Any]) -> NDArray[Any]:
    """
    Copy row i into out[:cols].

    Parameters
    ----------
    m : Matrix
    i : int
        Row index.
    out : ndarray
        Writable 1D destination with at least m.cols elements.

    Returns
    -------
    out, for chaining.
    """
    i = check_index(i, m.rows, 'row', 'i')
    out = check_out_vector(out, m.cols, 'out')
    start = i * m.cols
    out[:m.cols] = m.data[start:start + m.cols]
    return out


def set_row(m: Matrix, i: int, values: ArrayLike) -> None:
    """Overwrite row i with values[:cols]."""
    i = check_index(i, m.rows, 'row', 'i')
    src = check_vector(values, m.cols, 'values')
    start = i * m.cols
    m.data[start:start + m.cols] = src[:m.cols]


def get_col(m: Matrix, j: int, out: NDArray[Any]) -> NDArray[Any]:
    """
    Copy column j into out[:rows].

    Parameters
    ----------
    m : Matrix
    j : int
        Column index.
    out : ndarray
        Writable 1D destination with at least m.rows elements.

    Returns
    -------
    out, for chaining.
    """
    j = check_index(j, m.cols, 'col', 'j')
    out = check_out_vector(out, m.rows, 'out')
    out[:m.rows] = m.data[j::m.cols]
    return out


def set_col(m: Matrix, j: int, values: ArrayLike) -> None:
    """Overwrite column j with values[:rows]."""
    j = check_index(j, m.cols, 'col', 'j')
    src = check_vector(values, m.rows, 'values')
    m.data[j::m.cols] = src[:m.rows]


def copy(dest: Matrix, src: Matrix) -> None:
    """
    Copy every element of src into dest.

    Raises
    ------
    DimensionError
        If the shapes differ.
    """
    check_same_shape(dest, src, names=('dest', 'src'))
    np.copyto(dest.data, src.data)


def from_array(m: Matrix, values: ArrayLike) -> None:
    """
    Fill m from a flat (rows*cols) or 2D (rows, cols) array-like, row-major.

    Raises
    ------
    DimensionError
        If the element count or 2D shape doesn't match m.
    ValidationError
        If values is not numeric or has more than two dimensions.
    """
    try:
        arr = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"values: cannot convert to array: {e}") from e

    if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(
            f"values: non-real dtype {arr.dtype}, expected real numeric data"
        )
    if arr.ndim > 2:
        raise ValidationError(
            f"values: expected 1D or 2D array-like, got {arr.ndim}D"
        )
    if arr.ndim == 2 and arr.shape != m.shape:
        raise DimensionError(
            f"values: expected shape {m.shape}, got {arr.shape}",
            expected=m.shape,
            actual=arr.shape,
        )
    if arr.size != m.size:
        raise DimensionError(
            f"values: expected {m.size} elements, got {arr.size}",
            expected=m.size,
            actual=arr.size,
        )
    m.data[:] = arr.reshape(-1)
