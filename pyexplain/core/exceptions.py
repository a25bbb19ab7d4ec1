"""
Exception hierarchy for pyexplain.

All exceptions inherit from PyExplainError to allow catching any
library-specific error. Domain modules raise the most specific class
available here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyExplainError(Exception):
    """Base exception for all pyexplain errors."""
    pass


class ValidationError(PyExplainError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, e.g. a
    3D array where a matrix is expected or a non-square matrix passed
    to inversion.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Always raised before any data is touched, so a rejected operation
    never leaves a partially written result behind.

    Attributes:
        shape_a: Shape of the first operand
        shape_b: Shape of the second operand (a 1-tuple for vectors)
        operation: Name of the rejected operation, if known
    """

    def __init__(
        self,
        message: str,
        shape_a: tuple[int, ...] | None = None,
        shape_b: tuple[int, ...] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.shape_a = shape_a
        self.shape_b = shape_b
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    A row or column index falls outside the matrix bounds.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound of valid indices
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int,
        bound: int,
        axis: str = 'column',
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class EmptyIndexSetError(ValidationError):
    """A column selection was requested with zero indices."""
    pass


class NumericalError(PyExplainError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by a single inversion attempt when the selected pivot falls
    below the zero threshold. The jitter retry wrapper treats this as
    recoverable; only the plain invert() lets it reach the caller.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically n for an n x n matrix)
        pivot_index: Diagonal index of the rejected pivot
        pivot_value: Value of the rejected pivot
        threshold: Zero threshold the pivot was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.threshold = threshold


class UninvertibleMatrixError(NumericalError):
    """
    Matrix stayed singular through every jitter retry.

    Fatal to the inversion request. Raised from the last
    SingularMatrixError, which is available as __cause__.

    Attributes:
        attempts: Number of inversion attempts made
        threshold: Zero threshold used for every attempt
        jitter_delta: Jitter magnitude applied between attempts
    """

    def __init__(
        self,
        message: str,
        attempts: int,
        threshold: float | None = None,
        jitter_delta: float | None = None,
    ):
        super().__init__(message)
        self.attempts = attempts
        self.threshold = threshold
        self.jitter_delta = jitter_delta
