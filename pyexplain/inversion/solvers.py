"""
Public entry points for matrix inversion.

invert()            - single attempt, raises SingularMatrixError
invert_with_retry() - jitter retries, returns the inverse Matrix
jitter_invert()     - jitter retries, returns an InversionSolution with
                      attempt count, pivot order, timing and warnings
"""

from __future__ import annotations

import numpy as np

from pyexplain.core.compute.tolerances import (
    DEFAULT_JITTER_DELTA,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_ZERO_THRESHOLD,
)
from pyexplain.core.protocols import RandomSource
from pyexplain.core.validation import check_random_source
from pyexplain.inversion._gauss_jordan import gauss_jordan_inverse
from pyexplain.inversion.backends.cpu import CPUGaussJordanBackend
from pyexplain.inversion.design import InversionDesign
from pyexplain.inversion.solution import InversionSolution
from pyexplain.matrix._matrix import Matrix, MatrixLike


def invert(
    x: MatrixLike,
    zero_threshold: float = DEFAULT_ZERO_THRESHOLD,
) -> Matrix:
    """
    Inverse of the square matrix `x`, in one Gauss-Jordan attempt.

    `x` is never modified.

    Parameters
    ----------
    x : Matrix or array-like
        Square, finite matrix.
    zero_threshold : float
        Pivots with magnitude below this are treated as zero.

    Returns
    -------
    Matrix
        The n x n inverse.

    Raises
    ------
    SingularMatrixError
        If a pivot falls below zero_threshold.
    DimensionError
        If `x` is not square.
    """
    design = InversionDesign.from_matrix(
        x, zero_threshold=zero_threshold, max_attempts=1, overwrite=True,
    )
    inverse, _ = gauss_jordan_inverse(design.matrix.data, design.zero_threshold)
    return Matrix(_data=inverse)


def jitter_invert(
    x: MatrixLike,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    zero_threshold: float = DEFAULT_ZERO_THRESHOLD,
    rng: RandomSource | None = None,
    *,
    jitter_delta: float = DEFAULT_JITTER_DELTA,
    overwrite: bool = True,
) -> InversionSolution:
    """
    Invert `x`, jittering it between attempts while it stays singular.

    The first attempt inverts `x` as given. After each singular attempt
    that is not the last, every entry of the matrix is increased by
    jitter_delta * U(0, 1) and inversion restarts from scratch. The
    accuracy loss is bounded by the jitter scale; in exchange, duplicate or
    collinear perturbation samples no longer abort an explanation.

    Parameters
    ----------
    x : Matrix or array-like
        Square, finite matrix. With overwrite=True (default) a Matrix
        argument is jittered IN PLACE; pass overwrite=False or a copy to
        keep it intact. Array-like input is always copied.
    max_attempts : int
        Total attempts, including the first unperturbed one.
    zero_threshold : float
        Pivots with magnitude below this are treated as zero.
    rng : RandomSource, optional
        Source of the jitter draws. Defaults to a fresh
        np.random.default_rng() seeded from OS entropy; pass a seeded
        generator for reproducible retries. Must accept a size argument;
        the standard library's random.Random is rejected.
    jitter_delta : float
        Jitter scale.
    overwrite : bool
        Whether a Matrix argument may be jittered in place.

    Returns
    -------
    InversionSolution

    Raises
    ------
    UninvertibleMatrixError
        If every attempt was singular. The last SingularMatrixError is
        chained as __cause__.
    ValidationError
        If rng cannot draw arrays of a given size.

    Warns
    -----
    RuntimeWarning
        If the inverse was only obtained after jittering.
    """
    design = InversionDesign.from_matrix(
        x,
        zero_threshold=zero_threshold,
        max_attempts=max_attempts,
        jitter_delta=jitter_delta,
        overwrite=overwrite,
    )
    if rng is None:
        rng = np.random.default_rng()
    check_random_source(rng, 'rng')

    result = CPUGaussJordanBackend().solve(design, rng)
    return InversionSolution(_result=result, _design=design)


def invert_with_retry(
    x: MatrixLike,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    zero_threshold: float = DEFAULT_ZERO_THRESHOLD,
    rng: RandomSource | None = None,
    *,
    jitter_delta: float = DEFAULT_JITTER_DELTA,
    overwrite: bool = True,
) -> Matrix:
    """
    Inverse of `x` with jitter recovery. See jitter_invert() for details.

    Returns
    -------
    Matrix
        The n x n inverse of `x` (of the jittered `x`, if jitter was needed).

    Raises
    ------
    UninvertibleMatrixError
        If every attempt was singular.
    """
    return jitter_invert(
        x,
        max_attempts=max_attempts,
        zero_threshold=zero_threshold,
        rng=rng,
        jitter_delta=jitter_delta,
        overwrite=overwrite,
    ).inverse
