"""
Input validation utilities for PyMtx.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every matrix operation runs its
checks before touching any buffer, so a failed call never leaves a
partially written destination.

Design principles:
    - No silent type coercion of caller-owned buffers
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Matrix arguments are duck-typed: anything with rows, cols and data
attributes is accepted, so this module has no dependency on pymtx.matrix.
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymtx.core.exceptions import (
    DimensionError,
    InvalidIndexError,
    NotSquareError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a positive integer, got bool")
    try:
        size = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        ) from e

    if size < 1:
        raise ValidationError(f"{name}: must be >= 1, got {size}")
    return size


def check_buffer(data: Any, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify a caller-owned storage buffer can back a matrix.

    The buffer is returned as-is (never copied), so the matrix stays a
    view over caller storage.

    Args:
        data: Candidate buffer
        name: Parameter name for error messages

    Returns:
        The same ndarray

    Raises:
        ValidationError: If data is not a writable 1D floating ndarray
    """
    if not isinstance(data, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(data).__name__}"
        )
    if data.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D buffer, got {data.ndim}D with shape {data.shape}"
        )
    if not np.issubdtype(data.dtype, np.floating):
        raise ValidationError(
            f"{name}: non-floating dtype {data.dtype}, expected float32 or float64"
        )
    if not data.flags.writeable:
        raise ValidationError(f"{name}: buffer is read-only")
    return data


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a buffer holds exactly the expected number of elements.

    Raises:
        DimensionError: If length != expected
    """
    if length != expected:
        raise DimensionError(
            f"{name}: expected {expected} elements, got {length}",
            expected=expected,
            actual=length,
        )


def check_index(index: Any, bound: int, axis: str, name: str) -> int:
    """
    Verify a row or column index lies in [0, bound).

    Args:
        index: Candidate index
        bound: Number of rows or columns
        axis: 'row' or 'col'
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        InvalidIndexError: If index is not an integer or is out of range
    """
    if isinstance(index, bool):
        raise InvalidIndexError(
            f"{name}: {axis} index must be an integer, got bool",
            index=index, bound=bound, axis=axis,
        )
    try:
        i = operator.index(index)
    except TypeError:
        raise InvalidIndexError(
            f"{name}: {axis} index must be an integer, got {type(index).__name__}",
            index=index, bound=bound, axis=axis,
        ) from None

    if not 0 <= i < bound:
        raise InvalidIndexError(
            f"{name}: {axis} index {i} out of range [0, {bound})",
            index=i, bound=bound, axis=axis,
        )
    return i


def check_shape(matrix: Any, rows: int, cols: int, name: str) -> None:
    """
    Verify a matrix has exactly the given shape.

    Raises:
        DimensionError: If (matrix.rows, matrix.cols) != (rows, cols)
    """
    if (matrix.rows, matrix.cols) != (rows, cols):
        raise DimensionError(
            f"{name}: expected shape ({rows}, {cols}), "
            f"got ({matrix.rows}, {matrix.cols})",
            expected=(rows, cols),
            actual=(matrix.rows, matrix.cols),
        )


def check_same_shape(*matrices: Any, names: tuple[str, ...]) -> None:
    """
    Verify all matrices share one shape.

    Args:
        *matrices: Matrices to check
        names: Parameter names for error messages (must match number of matrices)

    Raises:
        ValueError: If number of names doesn't match number of matrices
        DimensionError: If shapes differ
    """
    if len(matrices) != len(names):
        raise ValueError(
            f"Number of matrices ({len(matrices)}) must match number of names ({len(names)})"
        )

    if len(matrices) < 2:
        return

    shapes = [(m.rows, m.cols) for m in matrices]
    if len(set(shapes)) > 1:
        details = ", ".join(f"{name}={shape}" for name, shape in zip(names, shapes))
        raise DimensionError(f"Inconsistent shapes: {details}")


def check_square(matrix: Any, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if matrix.rows != matrix.cols:
        raise NotSquareError(
            f"{name}: expected square matrix, got shape ({matrix.rows}, {matrix.cols})",
            shape=(matrix.rows, matrix.cols),
        )


def check_no_alias(dest: Any, src: Any, dest_name: str, src_name: str) -> None:
    """
    Verify a destination does not share storage with a source.

    Used by operations whose output elements depend on more than the
    same-index input element (multiply, transpose, adjugate, ...).

    Raises:
        ValidationError: If the two buffers may overlap
    """
    if np.may_share_memory(dest.data, src.data):
        raise ValidationError(
            f"{dest_name}: must not share memory with {src_name}"
        )


def check_vector(values: ArrayLike, min_length: int, name: str) -> NDArray[Any]:
    """
    Validate a row/column source buffer and convert it to an ndarray.

    Args:
        values: 1D array-like source
        min_length: Number of elements that will be read
        name: Parameter name for error messages

    Returns:
        1D ndarray view or copy of values

    Raises:
        ValidationError: If values is not 1D or not numeric
        DimensionError: If values is shorter than min_length
    """
    try:
        arr = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D buffer, got {arr.ndim}D with shape {arr.shape}"
        )
    if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {arr.dtype}, expected real numeric data"
        )
    if arr.shape[0] < min_length:
        raise DimensionError(
            f"{name}: needs at least {min_length} elements, got {arr.shape[0]}",
            expected=min_length,
            actual=arr.shape[0],
        )
    return arr


def check_out_vector(out: Any, min_length: int, name: str) -> NDArray[Any]:
    """
    Validate a caller-supplied destination vector.

    Raises:
        ValidationError: If out is not a writable 1D ndarray
        DimensionError: If out is shorter than min_length
    """
    if not isinstance(out, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(out).__name__}"
        )
    if out.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D buffer, got {out.ndim}D with shape {out.shape}"
        )
    if not out.flags.writeable:
        raise ValidationError(f"{name}: buffer is read-only")
    if out.shape[0] < min_length:
        raise DimensionError(
            f"{name}: needs at least {min_length} elements, got {out.shape[0]}",
            expected=min_length,
            actual=out.shape[0],
        )
    return out
