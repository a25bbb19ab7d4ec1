"""
Input validation utilities for pyexplain.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import random

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyexplain.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, ragged rows or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of entries.

    Args:
        array: Array to check
        min_samples: Minimum required length (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} entries, got {n}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: matrix must be square, got {rows} x {cols}"
        )


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar parameter is a finite, strictly positive number.

    Raises:
        ValidationError: If value is not a real number, non-finite or <= 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be finite and > 0, got {value}")


def check_non_negative(value: float, name: str) -> None:
    """
    Verify a scalar parameter is a finite number >= 0.

    Raises:
        ValidationError: If value is not a real number, non-finite or < 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    if not np.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be finite and >= 0, got {value}")


def check_count(value: int, minimum: int, name: str) -> None:
    """
    Verify an integer parameter is at least `minimum`.

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")


def check_index(index: int, bound: int, name: str, axis: str = 'column') -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected rather than wrapped around.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages
        axis: 'row' or 'column', carried on the exception

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index < 0 or index >= bound
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer index, got {type(index).__name__}")
    index = int(index)
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name}: {axis} index {index} out of range, valid indices are 0..{bound - 1} ({bound} {axis}(s))",
            index=index,
            bound=bound,
            axis=axis,
        )
    return index


def check_random_source(rng: Any, name: str) -> None:
    """
    Verify `rng` can produce shaped uniform draws through rng.random(size).

    The standard library's random.Random also has a random() method, but it
    takes no size and returns a single float, so it is rejected here rather
    than failing on the first jitter attempt.

    Raises:
        ValidationError: If rng is random.Random or has no callable random()
    """
    if isinstance(rng, (np.random.Generator, np.random.RandomState)):
        return
    if isinstance(rng, random.Random):
        raise ValidationError(
            f"{name}: random.Random cannot draw arrays; pass a numpy.random.Generator, "
            f"e.g. np.random.default_rng(seed)"
        )
    if not callable(getattr(rng, 'random', None)):
        raise ValidationError(
            f"{name}: expected an object with random(size), such as numpy.random.Generator, "
            f"got {type(rng).__name__}"
        )
