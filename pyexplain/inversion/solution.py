"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np

from pyexplain.core.compute.tolerances import ToleranceTier, select_tolerance
from pyexplain.core.result import Result
from pyexplain.matrix._matrix import Matrix

if TYPE_CHECKING:
    from pyexplain.inversion.design import InversionDesign


@dataclass(frozen=True)
class InversionParams:
    """
    Parameter payload for matrix inversion.

    This is the immutable data computed by backends.
    """
    inverse: Matrix
    attempts: int
    pivot_order: tuple[int, ...]
    jittered: bool


@dataclass
class InversionSolution:
    """
    User-facing inversion results.

    Wraps the backend Result and provides accessors for the inverse and
    the retry diagnostics.
    """
    _result: Result[InversionParams]
    _design: 'InversionDesign'

    # Cached computations
    _identity_residual: float | None = None

    @property
    def inverse(self) -> Matrix:
        return self._result.params.inverse

    @property
    def attempts(self) -> int:
        """Inversion attempts made, including the successful one."""
        return self._result.params.attempts

    @property
    def pivot_order(self) -> tuple[int, ...]:
        """Diagonal index used as pivot at each elimination step."""
        return self._result.params.pivot_order

    @property
    def jittered(self) -> bool:
        """Whether the matrix was perturbed before the successful attempt."""
        return self._result.params.jittered

    @property
    def matrix(self) -> Matrix:
        """The matrix that was inverted, after any jitter."""
        return self._design.matrix

    @property
    def identity_residual(self) -> float:
        """
        max |(A @ inv(A) - I)[i, j]| for the matrix actually inverted.

        Computed on first access; costs one matrix product.
        """
        if self._identity_residual is None:
            product = self._design.matrix.data @ self.inverse.data
            residual = product - np.eye(self._design.n)
            self._identity_residual = float(np.max(np.abs(residual)))
        return self._identity_residual

    def within_tolerance(self, tier: ToleranceTier | None = None) -> bool:
        """
        Whether A @ inv(A) matches the identity within a tolerance tier.

        Entry-wise |(A @ inv(A))[i, j] - I[i, j]| <= atol + rtol * |I[i, j]|,
        so rtol loosens the diagonal only. The tier defaults to the one
        matching the jitter state.
        """
        if tier is None:
            tier = select_tolerance(self.jittered)
        product = self._design.matrix.data @ self.inverse.data
        return bool(np.allclose(product, np.eye(self._design.n), rtol=tier.rtol, atol=tier.atol))

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

    def summary(self) -> str:
        """Short text report of the inversion."""
        lines = [
            "Matrix inversion (diagonal-pivoted Gauss-Jordan)",
            "",
            f"Order:          {self._design.n} x {self._design.n}",
            f"Attempts:       {self.attempts} of {self._design.max_attempts}",
            f"Jittered:       {'yes' if self.jittered else 'no'}",
            f"Pivot order:    {', '.join(str(p) for p in self.pivot_order)}",
            f"Zero threshold: {self._design.zero_threshold:.3e}",
            f"|A inv(A) - I|: {self.identity_residual:.3e}",
        ]
        if self.timing is not None:
            lines.append(f"Time:           {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InversionSolution(n={self._design.n}, attempts={self.attempts}, "
            f"jittered={self.jittered})"
        )
