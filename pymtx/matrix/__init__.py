"""
Dense fixed-size matrix module.

Matrices are row-major views over caller-owned NumPy buffers. Every
operation validates its arguments up front and writes into storage the
caller supplies; only the report function invert() allocates outputs.

Public API:
    Matrix                        - buffer view (rows, cols, data)
    init(m, strategy)             - zero / diagonal / custom fill
    get_value, set_value          - element access
    get_row, set_row, get_col, set_col, copy, from_array
    unary_op, binary_op           - closed-enumeration elementwise dispatch
    unary_func, binary_func       - callback elementwise variants
    add, sub, scalar_mult         - omit dest to overwrite the first operand
    scale_row, sum_rows           - elementary row operations
    multiply, transpose, minor    - kernel
    determinant, adjugate, inverse
    min_value, max_value, min_index, max_index, is_equal, is_notneg
    invert(a)                     - inverse with determinant, adjugate, timing
"""

from pymtx.matrix.buffer import Matrix
from pymtx.matrix.access import (
    get_value,
    set_value,
    get_row,
    set_row,
    get_col,
    set_col,
    copy,
    from_array,
)
from pymtx.matrix.fill import FillStrategy, init, entry_zero, entry_diagonal
from pymtx.matrix.elementwise import (
    UnaryOp,
    BinaryOp,
    unary_op,
    binary_op,
    unary_func,
    binary_func,
    add,
    sub,
    scalar_mult,
    scale_row,
    sum_rows,
)
from pymtx.matrix.kernel import (
    multiply,
    transpose,
    minor,
    determinant,
    adjugate,
    inverse,
)
from pymtx.matrix.reduction import (
    min_value,
    max_value,
    min_index,
    max_index,
    is_equal,
    is_notneg,
)
from pymtx.matrix.solution import InverseParams, InverseSolution
from pymtx.matrix.solvers import invert

__all__ = [
    "Matrix",
    # Access
    "get_value",
    "set_value",
    "get_row",
    "set_row",
    "get_col",
    "set_col",
    "copy",
    "from_array",
    # Fill
    "FillStrategy",
    "init",
    "entry_zero",
    "entry_diagonal",
    # Elementwise
    "UnaryOp",
    "BinaryOp",
    "unary_op",
    "binary_op",
    "unary_func",
    "binary_func",
    "add",
    "sub",
    "scalar_mult",
    "scale_row",
    "sum_rows",
    # Kernel
    "multiply",
    "transpose",
    "minor",
    "determinant",
    "adjugate",
    "inverse",
    # Reductions
    "min_value",
    "max_value",
    "min_index",
    "max_index",
    "is_equal",
    "is_notneg",
    # Report
    "invert",
    "InverseParams",
    "InverseSolution",
]
