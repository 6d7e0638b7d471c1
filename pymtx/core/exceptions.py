"""
Exception hierarchy for PyMtx.

All exceptions inherit from PyMtxError to allow catching any
library-specific error. Each precondition the matrix engine checks maps
to exactly one exception class, so callers discriminate failures by
except clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMtxError(Exception):
    """Base exception for all PyMtx errors."""
    pass


class ValidationError(PyMtxError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: wrong types,
    non-positive dimensions, read-only buffers, or forbidden aliasing
    between source and destination matrices.
    """
    pass


class InvalidIndexError(ValidationError):
    """
    Row or column index is out of bounds for the target matrix.

    Attributes:
        index: The offending index value
        bound: Exclusive upper bound for the index (rows or cols)
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: object | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an operand or destination shape is incompatible with the
    requested operation, including multiplication with mismatched inner
    dimensions and row/column buffers that are too short.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    A square-only operation received a non-square matrix.

    Raised by determinant, adjugate and inverse.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message, actual=shape)
        self.shape = shape


class NumericalError(PyMtxError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when inversion is requested but the determinant magnitude is
    at or below the singularity threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that failed the check, if computed
        threshold: The singularity threshold that was applied
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.threshold = threshold
