"""
Core infrastructure for pyexplain.

This module provides shared abstractions, utilities, and compute
infrastructure used by the domain submodules (matrix, inversion).

Key components:
    protocols: NumericSample, RandomSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, defaults and tolerance tiers
"""

from pyexplain.core.protocols import NumericSample, RandomSource, Backend
from pyexplain.core.result import Result
from pyexplain.core.exceptions import (
    PyExplainError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    EmptyIndexSetError,
    NumericalError,
    SingularMatrixError,
    UninvertibleMatrixError,
)

__all__ = [
    # Protocols
    "NumericSample",
    "RandomSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyExplainError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "EmptyIndexSetError",
    "NumericalError",
    "SingularMatrixError",
    "UninvertibleMatrixError",
]
