"""
Inversion report types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np

from pymtx.core.result import Result
from pymtx.matrix.buffer import Matrix


def identity_residual(a: Matrix, inv: Matrix) -> float:
    """
    max|a · inv - I|, computed with NumPy in float64.

    A diagnostic for the report layer, not part of the kernel.
    """
    ga = a.as_array().astype(np.float64)
    gi = inv.as_array().astype(np.float64)
    return float(np.max(np.abs(ga @ gi - np.eye(a.rows))))


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for a matrix inversion.

    inverse and adjugate are freshly allocated matrices owned by the report.
    """
    inverse: Matrix
    adjugate: Matrix
    determinant: float


@dataclass
class InverseSolution:
    """
    User-facing inversion results.

    Wraps Result[InverseParams] and provides convenient accessors.
    """
    _result: Result[InverseParams]
    _source: Matrix

    @property
    def inverse(self) -> Matrix:
        return self._result.params.inverse

    @property
    def adjugate(self) -> Matrix:
        return self._result.params.adjugate

    @property
    def determinant(self) -> float:
        return self._result.params.determinant

    @property
    def order(self) -> int:
        """n for an n x n input."""
        return self._source.rows

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def residual(self) -> float:
        """Largest absolute deviation of source · inverse from the identity."""
        return identity_residual(self._source, self.inverse)

    def summary(self) -> str:
        """Text report of the inversion."""
        lines = [
            f"Matrix inverse ({self.order}x{self.order}, {self.info.get('dtype')})",
            f"Method: {self.info.get('method')}",
            f"Determinant: {self.determinant:.6g}",
            f"Singularity threshold: {self.info.get('threshold'):.3e}",
            f"Residual max|A·A⁻¹ - I|: {self.residual():.3e}",
            "",
            "Inverse:",
            str(self.inverse),
        ]
        if self.timing is not None:
            lines.append("")
            lines.append(f"Total time: {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"InverseSolution(order={self.order}, determinant={self.determinant:.6g})"
