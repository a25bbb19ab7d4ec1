"""
Auxiliary vector and matrix statistics used by the explainers.
"""

from __future__ import annotations

import sys
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyexplain.core.validation import check_min_samples
from pyexplain.matrix._matrix import MatrixLike, as_matrix, as_vector


def min_pos(v: MatrixLike) -> float:
    """
    Smallest strictly positive entry of `v`.

    Returns sys.float_info.max when no entry is positive, the same sentinel
    scikit-learn's arrayfuncs.min_pos uses. Callers branch on it, so it is
    returned rather than raised.
    """
    v = as_vector(v, 'v')
    positive = v[v > 0]
    if positive.size == 0:
        return sys.float_info.max
    return float(positive.min())


def variance(v: MatrixLike) -> float:
    """Population variance of `v` (divisor N, not N - 1)."""
    v = as_vector(v, 'v')
    check_min_samples(v, 1, 'v')
    mean = v.sum() / v.shape[0]
    return float(np.sum((v - mean) ** 2) / v.shape[0])


def row_sum(m: MatrixLike) -> NDArray[np.floating[Any]]:
    """Sum of all rows of `m`, a vector of length cols(m)."""
    m = as_matrix(m, 'm')
    return m.data.sum(axis=0)


def row_square_sum(m: MatrixLike) -> NDArray[np.floating[Any]]:
    """Sum of the element-wise squares of all rows of `m`, length cols(m)."""
    m = as_matrix(m, 'm')
    return np.sum(m.data * m.data, axis=0)
