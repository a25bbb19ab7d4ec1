"""
In-place Gauss-Jordan inversion with diagonal pivoting.

This is the modified Gauss-Jordan scheme described by D. DasGupta,
"In-Place Matrix Inversion by Modified Gauss-Jordan Algorithm" (2013):
each step picks the largest unused diagonal entry as pivot, replaces it
by 1 ("virtualizes" it), scales the pivot row and eliminates the pivot
column from every other row. After n steps the working array holds the
inverse, with no augmented identity block.

Pivoting is restricted to the diagonal. The normal-equation matrices this
engine sees (X'WX) are symmetric and close to diagonally dominant, so a
full search buys little. The price is that matrices with a zero diagonal,
such as [[0, 1], [1, 0]], are reported singular even when invertible.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyexplain.core.exceptions import SingularMatrixError


def find_pivot(work: NDArray[np.floating[Any]], pivots_used: NDArray[np.bool_]) -> int:
    """
    Index of the unused diagonal entry with the largest absolute value.

    Ties go to the lowest index. If every unused candidate is zero, the
    lowest unused index is returned and the caller's threshold check
    rejects it.
    """
    candidates = np.flatnonzero(~pivots_used)
    magnitudes = np.abs(np.diagonal(work)[candidates])
    return int(candidates[np.argmax(magnitudes)])


def gauss_jordan_inverse(
    x: NDArray[np.floating[Any]],
    zero_threshold: float,
) -> tuple[NDArray[np.floating[Any]], tuple[int, ...]]:
    """
    Invert the square matrix `x` by diagonal-pivoted Gauss-Jordan elimination.

    `x` itself is never modified; elimination runs on a fresh copy with a
    fresh pivot marker array.

    Args:
        x: Square float64 array (n x n)
        zero_threshold: Pivot magnitudes below this are treated as zero

    Returns:
        (inverse, pivot_order) where pivot_order lists the diagonal index
        chosen at each step

    Raises:
        SingularMatrixError: If the chosen pivot is numerically zero or
            non-finite, or the elimination overflowed
    """
    work = np.array(x, dtype=np.float64, copy=True)
    n = work.shape[0]
    pivots_used = np.zeros(n, dtype=bool)
    pivot_order: list[int] = []

    with np.errstate(over='ignore', invalid='ignore'):
        for step in range(n):
            pivot = find_pivot(work, pivots_used)
            pivot_value = work[pivot, pivot]

            if not np.isfinite(pivot_value):
                raise SingularMatrixError(
                    f"Matrix cannot be inverted: pivot {pivot} at step "
                    f"{step + 1}/{n} is non-finite ({pivot_value})",
                    matrix_name='x',
                    pivot_index=pivot,
                    pivot_value=float(pivot_value),
                    threshold=zero_threshold,
                )
            if abs(pivot_value) < zero_threshold:
                raise SingularMatrixError(
                    f"Matrix is singular and cannot be inverted: pivot {pivot} "
                    f"at step {step + 1}/{n} has |value| {abs(pivot_value):.3e} "
                    f"< zero_threshold {zero_threshold:.3e}",
                    matrix_name='x',
                    pivot_index=pivot,
                    pivot_value=float(pivot_value),
                    threshold=zero_threshold,
                )

            work[pivot, pivot] = 1.0
            pivots_used[pivot] = True
            work[pivot, :] /= pivot_value

            factors = work[:, pivot].copy()
            factors[pivot] = 0.0
            work[:, pivot] = np.where(np.arange(n) == pivot, work[:, pivot], 0.0)
            work -= np.outer(factors, work[pivot, :])

            pivot_order.append(pivot)

    if not np.isfinite(work).all():
        raise SingularMatrixError(
            f"Matrix cannot be inverted: elimination overflowed, inverse has "
            f"{int(np.count_nonzero(~np.isfinite(work)))} non-finite entries",
            matrix_name='x',
            threshold=zero_threshold,
        )

    return work, tuple(pivot_order)
