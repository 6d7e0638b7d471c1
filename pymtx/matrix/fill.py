"""
Matrix initialization strategies.

init() visits every position once in row-major order and stores the
value produced by an entry function of (i, j). The built-in strategies
are FillStrategy members; any callable (i, j) -> value is accepted as a
custom strategy.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, TYPE_CHECKING

from pymtx.core.exceptions import ValidationError

if TYPE_CHECKING:
    from pymtx.matrix.buffer import Matrix


EntryFn = Callable[[int, int], float]


def entry_zero(i: int, j: int) -> float:
    """Every element 0."""
    return 0.0


def entry_diagonal(i: int, j: int) -> float:
    """1 on the main diagonal, 0 elsewhere."""
    return 1.0 if i == j else 0.0


class FillStrategy(Enum):
    """Built-in initialization strategies."""
    ZERO = 'zero'
    DIAGONAL = 'diagonal'

    @property
    def entry_fn(self) -> EntryFn:
        return _ENTRY_FNS[self]


_ENTRY_FNS: dict[FillStrategy, EntryFn] = {
    FillStrategy.ZERO: entry_zero,
    FillStrategy.DIAGONAL: entry_diagonal,
}


def init(m: Matrix, strategy: FillStrategy | EntryFn | None = None) -> None:
    """
    Populate every element of m.

    Parameters
    ----------
    m : Matrix
        Already dimensioned matrix; previous contents are ignored.
    strategy : FillStrategy, callable, or None
        None or FillStrategy.ZERO fills zeros, FillStrategy.DIAGONAL the
        identity pattern. A callable is invoked exactly once per (i, j),
        in row-major order, and its return value stored at that position.

    Raises
    ------
    ValidationError
        If strategy is neither a FillStrategy nor callable.
    """
    if strategy is None:
        entry = entry_zero
    elif isinstance(strategy, FillStrategy):
        entry = strategy.entry_fn
    elif callable(strategy):
        entry = strategy
    else:
        raise ValidationError(
            f"strategy: expected FillStrategy or callable, got {type(strategy).__name__}"
        )

    data = m.data
    cols = m.cols
    for i in range(m.rows):
        for j in range(cols):
            data[i * cols + j] = entry(i, j)
