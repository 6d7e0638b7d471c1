"""
PyMtx: fixed-size dense matrix algebra for small real matrices.

Caller-owned storage, bounds-checked access, deterministic IEEE 754
arithmetic. Intended for the small fixed orders typical of embedded and
control code, where exact reproducibility matters more than asymptotic
speed.

Submodules:
    matrix: Matrix buffer, access, fill, elementwise ops, kernel, reductions
    core: Exceptions, validation, result envelope, precision/tolerance config
"""

__version__ = "0.1.0"

from pymtx import matrix
from pymtx.matrix import Matrix, FillStrategy, UnaryOp, BinaryOp, invert
from pymtx.core.exceptions import (
    PyMtxError,
    ValidationError,
    InvalidIndexError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "FillStrategy",
    "UnaryOp",
    "BinaryOp",
    "invert",
    "PyMtxError",
    "ValidationError",
    "InvalidIndexError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
