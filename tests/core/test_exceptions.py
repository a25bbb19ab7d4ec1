"""
Tests for the pyexplain exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyExplainError)
    - Diagnostic attributes on ShapeMismatchError, IndexOutOfRangeError,
      SingularMatrixError, UninvertibleMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyexplain.core.exceptions import (
    DimensionError,
    EmptyIndexSetError,
    IndexOutOfRangeError,
    NumericalError,
    PyExplainError,
    ShapeMismatchError,
    SingularMatrixError,
    UninvertibleMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyExplainError."""

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_shape_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise ShapeMismatchError("A is 2 x 3, B is 3 x 3")

    def test_index_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("bad index", index=5, bound=3)

    def test_index_out_of_range_is_index_error(self):
        """Callers catching the builtin IndexError still see it."""
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("bad index", index=-1, bound=3)

    def test_empty_index_set_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise EmptyIndexSetError("no indices")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_uninvertible_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise UninvertibleMatrixError("gave up", attempts=3)

    def test_uninvertible_is_not_singular(self):
        """Exhausted retries must not be mistaken for a recoverable attempt failure."""
        err = UninvertibleMatrixError("gave up", attempts=3)
        assert not isinstance(err, SingularMatrixError)

    @pytest.mark.parametrize("exc", [
        ValidationError("x"),
        DimensionError("x"),
        ShapeMismatchError("x"),
        IndexOutOfRangeError("x", index=1, bound=1),
        EmptyIndexSetError("x"),
        NumericalError("x"),
        SingularMatrixError("x"),
        UninvertibleMatrixError("x", attempts=1),
    ])
    def test_all_are_pyexplain_errors(self, exc):
        assert isinstance(exc, PyExplainError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:

    def test_attributes(self):
        err = ShapeMismatchError(
            "mismatch", shape_a=(2, 3), shape_b=(3, 3), operation="matrix_sum",
        )
        assert str(err) == "mismatch"
        assert err.shape_a == (2, 3)
        assert err.shape_b == (3, 3)
        assert err.operation == "matrix_sum"

    def test_defaults_are_none(self):
        err = ShapeMismatchError("mismatch")
        assert err.shape_a is None
        assert err.shape_b is None
        assert err.operation is None


class TestIndexOutOfRangeError:

    def test_attributes(self):
        err = IndexOutOfRangeError("bad", index=7, bound=4, axis="row")
        assert err.index == 7
        assert err.bound == 4
        assert err.axis == "row"

    def test_axis_defaults_to_column(self):
        assert IndexOutOfRangeError("bad", index=7, bound=4).axis == "column"


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "pivot too small",
            matrix_name="X'WX",
            condition_number=1e18,
            rank=3,
            expected_rank=5,
            pivot_index=2,
            pivot_value=1e-14,
            threshold=1e-10,
        )
        assert str(err) == "pivot too small"
        assert err.matrix_name == "X'WX"
        assert err.condition_number == 1e18
        assert err.rank == 3
        assert err.expected_rank == 5
        assert err.pivot_index == 2
        assert err.pivot_value == 1e-14
        assert err.threshold == 1e-10

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None
        assert err.pivot_index is None
        assert err.pivot_value is None
        assert err.threshold is None


class TestUninvertibleMatrixError:

    def test_all_attributes(self):
        err = UninvertibleMatrixError(
            "gave up", attempts=5, threshold=1e-10, jitter_delta=1e-8,
        )
        assert err.attempts == 5
        assert err.threshold == 1e-10
        assert err.jitter_delta == 1e-8

    def test_required_attempts(self):
        """attempts is required (positional)."""
        err = UninvertibleMatrixError("gave up", 4)
        assert err.attempts == 4
        assert err.threshold is None
        assert err.jitter_delta is None
