"""
Element-wise and algebraic matrix operators.

Every binary operator validates both operand shapes before reading any
data and raises ShapeMismatchError with both shapes in the message. All
operators allocate and return a new result; inputs are never modified,
except by swap_rows() and swap_entries(), which are in-place by contract.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyexplain.core.exceptions import (
    DimensionError,
    EmptyIndexSetError,
    ShapeMismatchError,
    ValidationError,
)
from pyexplain.core.validation import check_1d, check_array, check_index
from pyexplain.matrix._matrix import (
    Axis,
    Matrix,
    MatrixLike,
    _is_scalar,
    as_matrix,
    as_vector,
)

_SHAPE = "Matrix {label} shape: {rows} x {cols}"


def _describe(label: str, shape: tuple[int, ...]) -> str:
    if len(shape) == 1:
        return f"Vector {label} shape: {shape[0]}"
    return _SHAPE.format(label=label, rows=shape[0], cols=shape[1])


def _mismatch(
    requirement: str,
    shape_a: tuple[int, ...],
    shape_b: tuple[int, ...],
    operation: str,
) -> ShapeMismatchError:
    return ShapeMismatchError(
        f"{operation}: {requirement}. "
        f"{_describe('A', shape_a)}, {_describe('B', shape_b)}",
        shape_a=shape_a,
        shape_b=shape_b,
        operation=operation,
    )


# === Two matrix operations ===================================================

def matrix_sum(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Element-wise sum. Shapes must be identical."""
    a, b = as_matrix(a, 'a'), as_matrix(b, 'b')
    if a.shape != b.shape:
        raise _mismatch("shape of matrix A must match shape of matrix B",
                        a.shape, b.shape, 'matrix_sum')
    return Matrix(_data=a.data + b.data)


def matrix_difference(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Element-wise difference a - b. Shapes must be identical."""
    a, b = as_matrix(a, 'a'), as_matrix(b, 'b')
    if a.shape != b.shape:
        raise _mismatch("shape of matrix A must match shape of matrix B",
                        a.shape, b.shape, 'matrix_difference')
    return Matrix(_data=a.data - b.data)


def matrix_row_sum(a: MatrixLike, v: MatrixLike) -> Matrix:
    """Add vector `v` to every row of `a`. len(v) must equal cols(a)."""
    a = as_matrix(a, 'a')
    v = as_vector(v, 'v')
    if v.shape[0] != a.cols:
        raise _mismatch("length of vector B must match # columns of matrix A",
                        a.shape, v.shape, 'matrix_row_sum')
    return Matrix(_data=a.data + v[np.newaxis, :])


def matrix_row_difference(a: MatrixLike, v: MatrixLike) -> Matrix:
    """Subtract vector `v` from every row of `a`. len(v) must equal cols(a)."""
    a = as_matrix(a, 'a')
    v = as_vector(v, 'v')
    if v.shape[0] != a.cols:
        raise _mismatch("length of vector B must match # columns of matrix A",
                        a.shape, v.shape, 'matrix_row_difference')
    return Matrix(_data=a.data - v[np.newaxis, :])


def matrix_col_difference(a: MatrixLike, v: MatrixLike) -> Matrix:
    """Subtract vector `v` from every column of `a`. len(v) must equal rows(a)."""
    a = as_matrix(a, 'a')
    v = as_vector(v, 'v')
    if v.shape[0] != a.rows:
        raise _mismatch("length of vector B must match # rows of matrix A",
                        a.shape, v.shape, 'matrix_col_difference')
    return Matrix(_data=a.data - v[:, np.newaxis])


def matrix_multiply(a: MatrixLike, b: Any) -> Matrix | NDArray[np.floating[Any]]:
    """
    Multiply a matrix by a scalar, a vector or another matrix.

    Dispatch on `b`:
        scalar     -> element-wise product, same shape as `a`
        1D vector  -> matrix-vector product, vector of length rows(a);
                      requires len(b) == cols(a)
        matrix     -> matrix product, rows(a) x cols(b);
                      requires cols(a) == rows(b)

    Accumulation is plain float64 summation.

    Raises
    ------
    ShapeMismatchError
        If the inner dimensions disagree.
    DimensionError
        If `b` is neither a scalar, a 1D vector nor a 2D matrix.
    """
    a = as_matrix(a, 'a')

    if _is_scalar(b):
        return Matrix(_data=a.data * float(b))

    if isinstance(b, Matrix):
        return _matrix_product(a, b)

    arr = check_array(b, 'b')
    if arr.ndim == 1:
        return _matrix_vector_product(a, arr)
    if arr.ndim == 2:
        return _matrix_product(a, Matrix.from_array(arr, name='b'))
    raise DimensionError(
        f"b: expected a scalar, 1D vector or 2D matrix, got {arr.ndim}D with shape {arr.shape}"
    )


def _matrix_product(a: Matrix, b: Matrix) -> Matrix:
    if a.cols != b.rows:
        raise _mismatch("# columns of matrix A must match # rows of matrix B",
                        a.shape, b.shape, 'matrix_multiply')
    return Matrix(_data=a.data @ b.data)


def _matrix_vector_product(a: Matrix, v: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    if a.cols != v.shape[0]:
        raise _mismatch("# columns of matrix A must match length of vector B",
                        a.shape, v.shape, 'matrix_multiply')
    return a.data @ v


# === Single matrix operations ================================================

def transpose(x: MatrixLike) -> Matrix:
    """New cols x rows matrix with out[j, i] == x[i, j]."""
    x = as_matrix(x, 'x')
    return Matrix(_data=np.array(x.data.T, order='C', copy=True))


def axis_sum(x: MatrixLike, axis: Axis | str) -> NDArray[np.floating[Any]]:
    """
    Sum the entries of `x` along one axis.

    Axis.ROW adds all rows together (vector of length cols);
    Axis.COLUMN adds all columns together (vector of length rows).
    """
    x = as_matrix(x, 'x')
    try:
        axis = Axis(axis)
    except ValueError as e:
        raise ValidationError(
            f"axis: expected 'row' or 'column', got {axis!r}"
        ) from e

    if axis is Axis.ROW:
        return x.data.sum(axis=0)
    return x.data.sum(axis=1)


def get_col(x: MatrixLike, i: int) -> NDArray[np.floating[Any]]:
    """
    The i-th column of `x` as a new vector.

    Raises
    ------
    IndexOutOfRangeError
        If i < 0 or i >= cols(x).
    """
    x = as_matrix(x, 'x')
    i = check_index(i, x.cols, 'i')
    return x.data[:, i].copy()


def get_cols(x: MatrixLike, idxs: Sequence[int]) -> Matrix:
    """
    Columns `idxs` of `x`, in the given order, as a new rows x len(idxs) matrix.

    Every index is validated before any column is copied.

    Raises
    ------
    EmptyIndexSetError
        If idxs is empty.
    IndexOutOfRangeError
        On the first index outside [0, cols(x)).
    """
    x = as_matrix(x, 'x')
    idxs = list(idxs)
    if not idxs:
        raise EmptyIndexSetError("idxs: empty column index set passed to get_cols")
    checked = [check_index(idx, x.cols, f'idxs[{pos}]') for pos, idx in enumerate(idxs)]
    return Matrix(_data=x.data[:, checked])


def swap_rows(m: Matrix, i: int, j: int) -> None:
    """Swap rows i and j of `m` in place."""
    if not isinstance(m, Matrix):
        raise ValidationError(f"m: swap_rows works in place and needs a Matrix, got {type(m).__name__}")
    i = check_index(i, m.rows, 'i', axis='row')
    j = check_index(j, m.rows, 'j', axis='row')
    m.data[[i, j], :] = m.data[[j, i], :]


def swap_entries(v: NDArray[Any], i: int, j: int) -> None:
    """Swap entries i and j of the 1D array `v` in place."""
    if not isinstance(v, np.ndarray):
        raise ValidationError(f"v: swap_entries works in place and needs an ndarray, got {type(v).__name__}")
    check_1d(v, 'v')
    i = check_index(i, v.shape[0], 'i', axis='entry')
    j = check_index(j, v.shape[0], 'j', axis='entry')
    v[i], v[j] = v[j], v[i]
