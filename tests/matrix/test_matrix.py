"""
Tests for the Matrix primitive, shape queries and coercion helpers.
"""

import numpy as np
import pytest

from pyexplain.core.exceptions import DimensionError, ValidationError
from pyexplain.matrix import Matrix, as_matrix, as_vector, shape


class TestConstruction:

    def test_from_nested_list(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m.data.dtype == np.float64

    def test_from_array_copies(self):
        src = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(src)
        src[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array([1, 2, 3])

    def test_rejects_3d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.zeros((2, 2, 2)))

    def test_rejects_zero_rows(self):
        with pytest.raises(ValidationError, match="at least 1 row"):
            Matrix.from_array(np.zeros((0, 3)))

    def test_rejects_zero_cols(self):
        with pytest.raises(ValidationError, match="at least 1 column"):
            Matrix.from_array([[]])

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([["a", "b"]])

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([[1, 2], [3]])

    def test_error_uses_parameter_name(self):
        with pytest.raises(DimensionError, match="weights"):
            Matrix.from_array([1, 2], name="weights")


class TestAccessors:

    def test_is_square(self):
        assert Matrix.from_array([[1, 2], [3, 4]]).is_square
        assert not Matrix.from_array([[1, 2, 3]]).is_square

    def test_copy_is_independent(self):
        m = Matrix.from_array([[1, 2], [3, 4]])
        c = m.copy()
        c.data[0, 0] = -1.0
        assert m[0, 0] == 1.0

    def test_to_array_is_copy(self):
        m = Matrix.from_array([[1, 2]])
        arr = m.to_array()
        arr[0, 0] = 7.0
        assert m[0, 0] == 1.0

    def test_tolist(self):
        assert Matrix.from_array([[1, 2], [3, 4]]).tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_numpy_interop(self):
        m = Matrix.from_array([[1, 2], [3, 4]])
        np.testing.assert_array_equal(np.asarray(m), [[1, 2], [3, 4]])
        assert np.asarray(m, dtype=np.float32).dtype == np.float32

    def test_repr(self):
        assert repr(Matrix.from_array([[1, 2]])) == "Matrix([[1.0, 2.0]])"


class TestEquality:

    def test_equal_values(self):
        assert Matrix.from_array([[1, 2]]) == Matrix.from_array([[1.0, 2.0]])

    def test_different_values(self):
        assert Matrix.from_array([[1, 2]]) != Matrix.from_array([[1, 3]])

    def test_different_shapes(self):
        assert Matrix.from_array([[1, 2]]) != Matrix.from_array([[1], [2]])

    def test_not_equal_to_list(self):
        assert Matrix.from_array([[1, 2]]) != [[1, 2]]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix.from_array([[1]]))


class TestShapeAndCoercion:

    def test_shape_of_matrix(self):
        assert shape(Matrix.from_array([[1, 2, 3]])) == (1, 3)

    def test_shape_of_nested_list(self):
        assert shape([[1], [2], [3]]) == (3, 1)

    def test_as_matrix_passthrough(self):
        m = Matrix.from_array([[1]])
        assert as_matrix(m) is m

    def test_as_vector_from_list(self):
        v = as_vector([1, 2, 3])
        assert v.shape == (3,)
        assert v.dtype == np.float64

    def test_as_vector_from_row_matrix(self):
        m = Matrix.from_array([[1, 2, 3]])
        v = as_vector(m)
        np.testing.assert_array_equal(v, [1, 2, 3])
        v[0] = 10.0
        assert m[0, 0] == 1.0

    def test_as_vector_from_column_matrix(self):
        np.testing.assert_array_equal(as_vector(Matrix.from_array([[1], [2]])), [1, 2])

    def test_as_vector_rejects_full_matrix(self):
        with pytest.raises(DimensionError, match="2 x 2"):
            as_vector(Matrix.from_array([[1, 2], [3, 4]]))

    def test_as_vector_from_nested_row_list(self):
        np.testing.assert_array_equal(as_vector([[1, 2, 3]]), [1, 2, 3])

    def test_as_vector_from_nested_column_list(self):
        np.testing.assert_array_equal(as_vector([[1], [2]]), [1, 2])

    def test_as_vector_nested_list_matches_matrix(self):
        from_list = as_vector([[4, 5]])
        from_matrix = as_vector(Matrix.from_array([[4, 5]]))
        np.testing.assert_array_equal(from_list, from_matrix)

    def test_as_vector_rejects_nested_list(self):
        with pytest.raises(DimensionError):
            as_vector([[1, 2], [3, 4]])
