"""
Tests for vector/matrix construction and sample conversion.
"""

from dataclasses import dataclass

import numpy as np
import pytest

from pyexplain.core.exceptions import DimensionError, ShapeMismatchError, ValidationError
from pyexplain.core.protocols import NumericSample
from pyexplain.matrix import (
    Matrix,
    column_vector,
    create_row_matrix,
    identity,
    matrix_from_inputs,
    matrix_from_outputs,
    matrix_from_samples,
    row_vector,
)


@dataclass
class FakePrediction:
    """Stand-in for a prediction input/output with numeric features."""
    values: tuple

    def numeric_values(self):
        return list(self.values)


class TestRowColumnVectors:

    def test_row_vector_shape(self):
        m = row_vector([1, 2, 3])
        assert m.shape == (1, 3)
        np.testing.assert_array_equal(m.data, [[1, 2, 3]])

    def test_column_vector_shape(self):
        m = column_vector([1, 2, 3])
        assert m.shape == (3, 1)
        np.testing.assert_array_equal(m.data[:, 0], [1, 2, 3])

    def test_row_vector_independent_of_source_array(self):
        src = np.array([1.0, 2.0])
        m = row_vector(src)
        m.data[0, 0] = 50.0
        assert src[0] == 1.0

    def test_row_vector_independent_of_source_matrix(self):
        src = Matrix.from_array([[1, 2, 3]])
        m = row_vector(src)
        m.data[0, 1] = -5.0
        assert src[0, 1] == 2.0

    def test_column_to_row_round_trip(self):
        col = column_vector([4, 5, 6])
        assert row_vector(col) == Matrix.from_array([[4, 5, 6]])

    def test_create_row_matrix(self):
        assert create_row_matrix(np.array([7.0, 8.0])) == row_vector([7, 8])

    def test_empty_vector_rejected(self):
        with pytest.raises(ValidationError, match="at least 1 column"):
            row_vector([])

    def test_2d_input_rejected(self):
        with pytest.raises(DimensionError):
            column_vector([[1, 2], [3, 4]])


class TestMatrixFromSamples:

    def test_single_sample_is_row(self):
        m = matrix_from_samples(FakePrediction((1.0, 2.5, -3.0)))
        assert m.shape == (1, 3)
        np.testing.assert_array_equal(m.data, [[1.0, 2.5, -3.0]])

    def test_flat_numbers_are_single_sample(self):
        assert matrix_from_samples([1, 2, 3]).shape == (1, 3)

    def test_batch_preserves_order(self):
        samples = [FakePrediction((1, 2)), FakePrediction((3, 4)), FakePrediction((5, 6))]
        m = matrix_from_samples(samples)
        assert m.shape == (3, 2)
        np.testing.assert_array_equal(m.data, [[1, 2], [3, 4], [5, 6]])

    def test_batch_of_sequences(self):
        m = matrix_from_samples([[1, 2], (3, 4)])
        np.testing.assert_array_equal(m.data, [[1, 2], [3, 4]])

    def test_mixed_batch(self):
        m = matrix_from_samples([FakePrediction((1, 2)), [3, 4]])
        assert m.shape == (2, 2)

    def test_numpy_2d_input(self):
        m = matrix_from_samples(np.arange(6.0).reshape(3, 2))
        assert m.shape == (3, 2)

    def test_ragged_batch_rejected(self):
        samples = [FakePrediction((1, 2)), FakePrediction((3, 4)), FakePrediction((5,))]
        with pytest.raises(ShapeMismatchError, match=r"samples\[2\]") as exc_info:
            matrix_from_samples(samples)
        assert exc_info.value.shape_a == (2,)
        assert exc_info.value.shape_b == (1,)

    def test_empty_batch_rejected(self):
        with pytest.raises(ValidationError, match="at least 1 sample"):
            matrix_from_samples([])

    def test_non_numeric_sample_rejected(self):
        with pytest.raises(ValidationError):
            matrix_from_samples([FakePrediction(("a", "b"))])

    def test_fake_prediction_satisfies_protocol(self):
        assert isinstance(FakePrediction((1,)), NumericSample)

    def test_inputs_and_outputs_aliases(self):
        batch = [FakePrediction((0.5,)), FakePrediction((1.5,))]
        assert matrix_from_inputs(batch) == matrix_from_samples(batch)
        assert matrix_from_outputs(batch).shape == (2, 1)


class TestIdentity:

    def test_identity(self):
        np.testing.assert_array_equal(identity(3).data, np.eye(3))

    @pytest.mark.parametrize("n", [0, -2, 2.5])
    def test_invalid_order(self, n):
        with pytest.raises(ValidationError):
            identity(n)
