"""
Reductions over all elements: extremes, equality, non-negativity.

Extremes come from a single row-major scan that replaces the running
candidate only on a strict < (or >) comparison. Index forms therefore
report the first position holding the extreme value, and NaN entries
are skipped unless the very first element is NaN, in which case it is
returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from pymtx.matrix.buffer import Matrix


def _scan(a: Matrix, better) -> int:
    data = a.data
    best = 0
    for k in range(1, data.shape[0]):
        if better(data[k], data[best]):
            best = k
    return best


def _less(x, y) -> bool:
    return x < y


def _greater(x, y) -> bool:
    return x > y


def min_value(a: Matrix):
    """Smallest element."""
    return a.data[_scan(a, _less)]


def max_value(a: Matrix):
    """Largest element."""
    return a.data[_scan(a, _greater)]


def min_index(a: Matrix) -> tuple[int, int]:
    """(row, col) of the first occurrence of the smallest element."""
    return divmod(_scan(a, _less), a.cols)


def max_index(a: Matrix) -> tuple[int, int]:
    """(row, col) of the first occurrence of the largest element."""
    return divmod(_scan(a, _greater), a.cols)


def is_equal(a: Matrix, b: Matrix) -> bool:
    """
    Bit-for-bit equality, no tolerance.

    Matrices of different shapes or dtypes are never equal. Elements are
    compared by their stored bytes, so 0.0 and -0.0 differ and a NaN
    equals an identically encoded NaN.
    """
    if a.shape != b.shape or a.dtype != b.dtype:
        return False
    return a.data.tobytes() == b.data.tobytes()


def is_notneg(a: Matrix) -> bool:
    """True iff every element is >= 0 (-0.0 included)."""
    return bool(np.all(a.data >= 0))
