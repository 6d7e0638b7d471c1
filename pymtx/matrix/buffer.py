"""
Matrix: fixed-size, row-major view over a caller-owned buffer.

The Matrix object never owns its storage. It records the dimensions and
keeps a reference to a 1D NumPy buffer of exactly rows*cols elements;
element (i, j) lives at offset i*cols + j. Dimensions are fixed at
construction.

Construction:
    Matrix(rows, cols, data)          wrap existing storage (no copy)
    Matrix.empty(rows, cols)          allocate uninitialized storage
    Matrix.from_rows([[...], ...])    allocate and copy from nested rows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymtx.core.compute.precision import resolve_dtype
from pymtx.core.exceptions import ValidationError
from pymtx.core.validation import check_buffer, check_dimension, check_length
from pymtx.matrix import access


@dataclass(frozen=True, eq=False, init=False)
class Matrix:
    """
    Dense real matrix backed by caller-owned storage.

    The buffer contents are undefined until init() or from_array() runs.
    Use is_equal() for value comparison; == is identity.
    """
    _rows: int
    _cols: int
    _data: NDArray[np.floating[Any]]

    def __init__(self, rows: int, cols: int, data: NDArray[np.floating[Any]]):
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        data = check_buffer(data, 'data')
        resolve_dtype(data.dtype)
        check_length(data.shape[0], rows * cols, 'data')
        object.__setattr__(self, '_rows', rows)
        object.__setattr__(self, '_cols', cols)
        object.__setattr__(self, '_data', data)

    @classmethod
    def empty(cls, rows: int, cols: int, dtype=None) -> Matrix:
        """
        Allocate a matrix with uninitialized storage.

        Parameters
        ----------
        rows, cols : int
            Positive dimensions.
        dtype : dtype, optional
            float64 (default) or float32.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        return cls(rows, cols, np.empty(rows * cols, dtype=resolve_dtype(dtype)))

    @classmethod
    def from_rows(cls, values: ArrayLike, dtype=None) -> Matrix:
        """
        Allocate a matrix and copy a 2D array-like into it.

        Parameters
        ----------
        values : array-like
            Nested rows, e.g. [[1, 2], [3, 4]], or a 2D ndarray.
        dtype : dtype, optional
            float64 (default) or float32.
        """
        try:
            arr = np.array(values, dtype=resolve_dtype(dtype))
        except (ValueError, TypeError) as e:
            raise ValidationError(f"values: cannot convert to array: {e}") from e

        if arr.ndim != 2:
            raise ValidationError(
                f"values: expected 2D array-like, got {arr.ndim}D with shape {arr.shape}"
            )
        rows, cols = arr.shape
        return cls(rows, cols, arr.reshape(-1))

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Number of elements, rows * cols."""
        return self._rows * self._cols

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """The caller-owned flat buffer, row-major."""
        return self._data

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def as_array(self) -> NDArray[np.floating[Any]]:
        """(rows, cols) view sharing storage with the buffer."""
        return self._data.reshape(self._rows, self._cols)

    def __getitem__(self, key: tuple[int, int]):
        i, j = _split_key(key)
        return access.get_value(self, i, j)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = _split_key(key)
        access.set_value(self, i, j, value)

    def __str__(self) -> str:
        cells = [f"{v:.6f}" for v in self._data]
        width = max(len(c) for c in cells)
        lines = []
        for i in range(self._rows):
            row = cells[i * self._cols:(i + 1) * self._cols]
            lines.append(" ".join(c.rjust(width) for c in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, dtype={self._data.dtype})"


def _split_key(key) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(f"index: expected (row, col) pair, got {key!r}")
    return key
