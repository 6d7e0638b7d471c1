"""
Generic result container for PyMtx report computations.

The Result class provides a standardized envelope for the higher-level
report functions (e.g. invert()). The low-level kernel writes into
caller-owned matrices and does not use it.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, order, threshold)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so reports can't be edited after the fact
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed quantities (inverse, determinant, etc.)
        info: Structured metadata (method, order, dtype, threshold)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=mi, adjugate=adj, determinant=d),
        ...     info={'method': 'cofactor_expansion', 'order': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_reference'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
