"""
Numerical precision constants and utilities.

Provides machine epsilon and the set of floating dtypes a matrix buffer
may use. float64 is the default; float32 corresponds to a single
precision build for constrained targets.
"""

import numpy as np

from pymtx.core.exceptions import ValidationError


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

SUPPORTED_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.float64),
    np.dtype(np.float32),
)

DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def resolve_dtype(dtype: np.dtype | type | str | None) -> np.dtype:
    """
    Normalize a dtype argument to one of SUPPORTED_DTYPES.

    Args:
        dtype: Anything np.dtype() accepts, or None for DEFAULT_DTYPE

    Returns:
        The matching np.dtype

    Raises:
        ValidationError: If the dtype is not float32 or float64
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not a valid dtype: {dtype!r}") from e

    if resolved not in SUPPORTED_DTYPES:
        supported = ", ".join(str(d) for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"dtype: unsupported dtype {resolved}, expected one of: {supported}"
        )
    return resolved
