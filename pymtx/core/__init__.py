"""
Core infrastructure for PyMtx.

This module provides shared abstractions and utilities used by the
matrix engine and its report layer.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision and tolerance configuration
"""

from pymtx.core.result import Result
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
    # Result
    "Result",
    # Exceptions
    "PyMtxError",
    "ValidationError",
    "InvalidIndexError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
