"""
Vector and matrix construction.

Converts flat sequences and prediction samples into Matrix objects
compatible with the operators in pyexplain.matrix.operators.
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from pyexplain.core.exceptions import ShapeMismatchError, ValidationError
from pyexplain.core.protocols import NumericSample
from pyexplain.core.validation import check_1d, check_array
from pyexplain.matrix._matrix import Matrix, MatrixLike, _is_scalar, as_vector

SampleLike = Union[NumericSample, Sequence[float], NDArray[np.floating[Any]]]


def row_vector(values: MatrixLike) -> Matrix:
    """
    Wrap a length-N sequence as a 1 x N matrix.

    The result owns its storage: mutating it never affects `values`.
    """
    v = as_vector(values, 'values')
    return Matrix._build(v.reshape(1, -1).copy(), 'values')


def column_vector(values: MatrixLike) -> Matrix:
    """Reshape a length-N sequence into an N x 1 matrix, one entry per row."""
    v = as_vector(values, 'values')
    return Matrix._build(v.reshape(-1, 1).copy(), 'values')


def create_row_matrix(vector: MatrixLike) -> Matrix:
    """One-row matrix from a vector. Same as row_vector()."""
    return row_vector(vector)


def _sample_values(sample: SampleLike, name: str) -> NDArray[np.floating[Any]]:
    """Numeric values of one sample as a 1D array."""
    if isinstance(sample, NumericSample):
        raw = sample.numeric_values()
    else:
        raw = sample
    arr = check_array(raw, name)
    check_1d(arr, name)
    return arr


def matrix_from_samples(samples: SampleLike | Sequence[SampleLike]) -> Matrix:
    """
    Convert prediction samples into a matrix.

    A single sample (a NumericSample, or a flat sequence of numbers) becomes
    a 1 x K row vector. A sequence of M samples becomes an M x K matrix:
    sample order is row order and value order is column order.

    Parameters
    ----------
    samples : NumericSample, sequence of numbers, or sequence of samples

    Returns
    -------
    Matrix

    Raises
    ------
    ValidationError
        If the batch is empty or a sample holds non-numeric values.
    ShapeMismatchError
        If samples in a batch have different value counts.
    """
    if isinstance(samples, NumericSample):
        return row_vector(_sample_values(samples, 'sample'))

    if isinstance(samples, np.ndarray):
        if samples.ndim == 1:
            return row_vector(samples)
        return Matrix.from_array(samples, name='samples')

    samples = list(samples)
    if not samples:
        raise ValidationError("samples: need at least 1 sample, got 0")

    if all(_is_scalar(s) for s in samples):
        return row_vector(samples)

    rows = [_sample_values(s, f'samples[{i}]') for i, s in enumerate(samples)]
    width = rows[0].shape[0]
    for i, row in enumerate(rows):
        if row.shape[0] != width:
            raise ShapeMismatchError(
                f"samples[{i}] has {row.shape[0]} value(s), expected {width} "
                f"like samples[0]",
                shape_a=(width,),
                shape_b=(row.shape[0],),
                operation='matrix_from_samples',
            )
    return Matrix._build(np.vstack(rows).astype(np.float64, copy=False), 'samples')


def matrix_from_inputs(inputs: SampleLike | Sequence[SampleLike]) -> Matrix:
    """Matrix of feature values from one or more prediction inputs."""
    return matrix_from_samples(inputs)


def matrix_from_outputs(outputs: SampleLike | Sequence[SampleLike]) -> Matrix:
    """Matrix of output values from one or more prediction outputs."""
    return matrix_from_samples(outputs)


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise ValidationError(f"n: must be an integer >= 1, got {n!r}")
    return Matrix._build(np.eye(int(n), dtype=np.float64))
