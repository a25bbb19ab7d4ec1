"""
Dense matrix primitive and operators.

Public API:
    Matrix, Axis                     - container and reduction axis
    shape, as_matrix, as_vector      - shape query and coercion
    row_vector, column_vector,
    matrix_from_samples, ...         - construction
    matrix_sum, matrix_multiply,
    transpose, get_cols, ...         - operators
    min_pos, variance, row_sum, ...  - auxiliary statistics

Example:
    >>> from pyexplain.matrix import Matrix, matrix_multiply
    >>> matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    Matrix([[19.0, 22.0], [43.0, 50.0]])
"""

from pyexplain.matrix._matrix import Axis, Matrix, as_matrix, as_vector, shape
from pyexplain.matrix.construction import (
    column_vector,
    create_row_matrix,
    identity,
    matrix_from_inputs,
    matrix_from_outputs,
    matrix_from_samples,
    row_vector,
)
from pyexplain.matrix.operators import (
    axis_sum,
    get_col,
    get_cols,
    matrix_col_difference,
    matrix_difference,
    matrix_multiply,
    matrix_row_difference,
    matrix_row_sum,
    matrix_sum,
    swap_entries,
    swap_rows,
    transpose,
)
from pyexplain.matrix.statistics import min_pos, row_square_sum, row_sum, variance

__all__ = [
    # Primitive
    "Axis",
    "Matrix",
    "as_matrix",
    "as_vector",
    "shape",
    # Construction
    "column_vector",
    "create_row_matrix",
    "identity",
    "matrix_from_inputs",
    "matrix_from_outputs",
    "matrix_from_samples",
    "row_vector",
    # Operators
    "axis_sum",
    "get_col",
    "get_cols",
    "matrix_col_difference",
    "matrix_difference",
    "matrix_multiply",
    "matrix_row_difference",
    "matrix_row_sum",
    "matrix_sum",
    "swap_entries",
    "swap_rows",
    "transpose",
    # Statistics
    "min_pos",
    "row_square_sum",
    "row_sum",
    "variance",
]
