"""
Tolerance tiers and numerical thresholds.

Defines precision expectations for the two buffer precisions:
- FP64 (reference): results match reference values to 1e-6
- FP32: relaxed for single-precision arithmetic

Also holds the singularity threshold used by inverse(), and the largest
matrix order the cofactor-expansion kernel is validated for.

Used by the kernel, the report layer, and the test suite.
"""

from dataclasses import dataclass

import numpy as np

from pymtx.core.compute.precision import machine_epsilon, resolve_dtype


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute and relative tolerances for comparing results."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision buffers
REFERENCE_FP64 = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='reference_fp64',
    description='Double precision, matches reference values to 1e-6',
)

# Single precision buffers
REFERENCE_FP32 = ToleranceTier(
    rtol=0.0,
    atol=1e-5,
    name='reference_fp32',
    description='Single precision, matches reference values to 1e-5',
)

# inverse() treats |det| <= SINGULARITY_EPS_FACTOR * eps(dtype) as singular.
SINGULARITY_EPS_FACTOR = 16.0

# Cofactor expansion is O(n!). Orders above this are computed but warned about.
MAX_VALIDATED_ORDER = 5


def singularity_threshold(dtype: np.dtype | type | str | None = None) -> float:
    """Absolute determinant threshold below which a matrix is singular."""
    return SINGULARITY_EPS_FACTOR * machine_epsilon(resolve_dtype(dtype))


def select_tolerance(dtype: np.dtype | type | str | None = None) -> ToleranceTier:
    """Select appropriate tolerance tier for a given buffer dtype."""
    if resolve_dtype(dtype) == np.dtype(np.float32):
        return REFERENCE_FP32
    return REFERENCE_FP64
