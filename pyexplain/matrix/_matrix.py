"""
Matrix primitive: a shape-checked dense 2D float64 container.

Matrix is a thin value wrapper around a numpy array. Shape is always read
from the array, never stored next to it. Matrix.from_array copies its
input, so a Matrix never aliases caller-owned storage.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyexplain.core.exceptions import DimensionError, ValidationError
from pyexplain.core.validation import check_1d, check_2d, check_array


class Axis(str, Enum):
    """Reduction direction for axis_sum()."""
    ROW = 'row'
    COLUMN = 'column'


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense rows x cols matrix of float64 values.

    Invariants: 2D, rows >= 1, cols >= 1, dtype float64.

    Construction:
        Matrix.from_array([[1, 2], [3, 4]])

    Operations in pyexplain.matrix return new Matrix objects. The only code
    that writes into an existing Matrix is the jitter step of the retry
    inversion and swap_rows(); both are documented as in-place.
    """
    _data: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, values: ArrayLike, name: str = 'values') -> Matrix:
        """
        Build a Matrix from any 2D array-like.

        Parameters
        ----------
        values : array-like
            Nested sequence or numpy array with 2 dimensions.
        name : str
            Parameter name used in error messages.
        """
        data = np.array(check_array(values, name), dtype=np.float64, copy=True)
        return cls._build(data, name)

    @classmethod
    def _build(cls, data: NDArray, name: str = 'values') -> Matrix:
        """Internal builder with validation. Takes ownership of `data`."""
        check_2d(data, name)
        rows, cols = data.shape
        if rows < 1:
            raise ValidationError(f"{name}: need at least 1 row, got {rows}")
        if cols < 1:
            raise ValidationError(f"{name}: need at least 1 column, got {cols}")
        return cls(_data=data)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Backing array (rows x cols). Writes through to this Matrix."""
        return self._data

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    @property
    def is_square(self) -> bool:
        return self._data.shape[0] == self._data.shape[1]

    def copy(self) -> Matrix:
        """Independent copy."""
        return Matrix(_data=self._data.copy())

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the entries as a 2D ndarray."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def __getitem__(self, key):
        return self._data[key]

    def __array__(self, dtype=None, copy=None):
        if dtype is None or np.dtype(dtype) == self._data.dtype:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable backing storage

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"


MatrixLike = Union[Matrix, ArrayLike]


def _is_scalar(value: Any) -> bool:
    """Real number, bools excluded."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def as_matrix(x: MatrixLike, name: str = 'x') -> Matrix:
    """Return `x` unchanged if it is a Matrix, otherwise build one (copying)."""
    if isinstance(x, Matrix):
        return x
    return Matrix.from_array(x, name=name)


def as_vector(v: MatrixLike, name: str = 'v') -> NDArray[np.floating[Any]]:
    """
    Coerce `v` to a 1D float64 array.

    A Matrix, or a nested 2D array-like, is accepted when it has exactly
    one row or one column; it is flattened into a fresh array. The result
    never aliases a Matrix.
    """
    if not isinstance(v, Matrix):
        arr = check_array(v, name)
        if arr.ndim != 2:
            check_1d(arr, name)
            return arr
        v = Matrix.from_array(arr, name=name)
    if v.rows != 1 and v.cols != 1:
        raise DimensionError(
            f"{name}: expected a row or column vector, got {v.rows} x {v.cols} matrix"
        )
    return v.data.reshape(-1).copy()


def shape(x: MatrixLike) -> tuple[int, int]:
    """(rows, cols) of a matrix."""
    return as_matrix(x).shape
