"""
Shared compute infrastructure for PyMtx.

This module provides timing utilities, precision constants and tolerance
configuration shared by the matrix kernel and its report layer.

IMPORTANT: This is NOT where matrix operations live. Those go in
pymtx.matrix. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Machine epsilon and supported dtypes
    tolerances: Tolerance tiers and the singularity threshold
"""

from pymtx.core.compute.timing import Timer
from pymtx.core.compute.precision import (
    DEFAULT_DTYPE,
    SUPPORTED_DTYPES,
    machine_epsilon,
    resolve_dtype,
)
from pymtx.core.compute.tolerances import (
    MAX_VALIDATED_ORDER,
    ToleranceTier,
    select_tolerance,
    singularity_threshold,
)

__all__ = [
    # Timing
    "Timer",
    # Precision
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    "machine_epsilon",
    "resolve_dtype",
    # Tolerances
    "MAX_VALIDATED_ORDER",
    "ToleranceTier",
    "select_tolerance",
    "singularity_threshold",
]
