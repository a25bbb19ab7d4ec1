"""
InversionDesign: validated request to invert a square matrix.

Holds the matrix to invert together with the numerical settings of the
request. Construct through from_matrix(), which validates everything up
front so the backend can assume clean input.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyexplain.core.compute.tolerances import (
    DEFAULT_JITTER_DELTA,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_ZERO_THRESHOLD,
)
from pyexplain.core.validation import (
    check_count,
    check_finite,
    check_non_negative,
    check_positive,
    check_square,
)
from pyexplain.matrix._matrix import Matrix, MatrixLike


@dataclass(frozen=True)
class InversionDesign:
    """
    Design for matrix inversion.

    The matrix held here is the one the backend inverts and, on singular
    attempts, jitters in place. Whether that is the caller's own Matrix or
    a private copy is decided by from_matrix(overwrite=...).

    Construction:
        InversionDesign.from_matrix(x, max_attempts=5)
    """
    _matrix: Matrix
    _zero_threshold: float
    _max_attempts: int
    _jitter_delta: float

    @classmethod
    def from_matrix(
        cls,
        x: MatrixLike,
        *,
        zero_threshold: float = DEFAULT_ZERO_THRESHOLD,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        jitter_delta: float = DEFAULT_JITTER_DELTA,
        overwrite: bool = True,
    ) -> InversionDesign:
        """
        Build InversionDesign from a square matrix.

        Parameters
        ----------
        x : Matrix or array-like
            Square, finite matrix to invert.
        zero_threshold : float
            Pivots with magnitude below this are treated as zero. Must be > 0.
        max_attempts : int
            Total inversion attempts including the first, >= 1.
        jitter_delta : float
            Scale of the uniform jitter added between attempts, >= 0.
        overwrite : bool
            If True and `x` is a Matrix, jitter is applied to `x` itself.
            If False, a private copy is jittered. Array-like input is
            always copied.

        Raises
        ------
        DimensionError
            If `x` is not 2D or not square.
        ValidationError
            If `x` holds NaN/Inf or a setting is out of range.
        """
        if isinstance(x, Matrix):
            matrix = x if overwrite else x.copy()
        else:
            matrix = Matrix.from_array(x, name='x')

        check_square(matrix.data, 'x')
        check_finite(matrix.data, 'x')
        check_positive(zero_threshold, 'zero_threshold')
        check_count(max_attempts, 1, 'max_attempts')
        check_non_negative(jitter_delta, 'jitter_delta')

        return cls(
            _matrix=matrix,
            _zero_threshold=float(zero_threshold),
            _max_attempts=int(max_attempts),
            _jitter_delta=float(jitter_delta),
        )

    @property
    def matrix(self) -> Matrix:
        """Matrix to invert (jittered in place by retries)."""
        return self._matrix

    @property
    def n(self) -> int:
        """Order of the square matrix."""
        return self._matrix.rows

    @property
    def zero_threshold(self) -> float:
        return self._zero_threshold

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def jitter_delta(self) -> float:
        return self._jitter_delta

    def __repr__(self) -> str:
        return (
            f"InversionDesign(n={self.n}, zero_threshold={self._zero_threshold}, "
            f"max_attempts={self._max_attempts}, jitter_delta={self._jitter_delta})"
        )
