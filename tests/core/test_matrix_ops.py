"""Tests for matrix operations."""

import numpy as np

from zetaml.matrix_ops import (
    add_mat_scalar,
    add_mats,
    add_mats_inplace,
    augment_mat,
    augment_vec,
    divide_mat_scalar_inplace,
    get_col,
    get_row,
    identity_matrix,
    mat_equals,
    mat_gt,
    mat_gte,
    mat_lt,
    mat_lte,
    multiply_mat_scalar,
    multiply_mats,
    multiply_mats_elementwise,
    multiply_mats_elementwise_inplace,
    multiply_mats_inplace,
    set_col,
    set_row,
    subtract_mat_scalar,
    subtract_mats,
    transpose,
    transposed,
    zero_matrix,
)
from zetaml.types import Matrix, matrix_from_rows, null_matrix, vec2, vec3


def test_add_and_subtract_mats(sample_matrix):
    """Test elementwise addition and subtraction."""
    doubled = add_mats(sample_matrix, sample_matrix)
    np.testing.assert_array_equal(doubled.elements, sample_matrix.elements * 2)

    restored = subtract_mats(doubled, sample_matrix)
    np.testing.assert_array_equal(restored.elements, sample_matrix.elements)


def test_shape_mismatch_returns_null(caplog):
    """Test value-returning ops on mismatched shapes."""
    result = add_mats(identity_matrix(2, 2), identity_matrix(3, 3))

    assert result.is_null
    assert "DimensionMismatch" in caplog.text


def test_shape_mismatch_inplace_leaves_target():
    """Test in-place ops on mismatched shapes."""
    target = identity_matrix(2, 2)

    add_mats_inplace(target, identity_matrix(3, 3))

    np.testing.assert_array_equal(target.elements, np.eye(2))


def test_elementwise_multiply_is_hadamard():
    """Test the elementwise product."""
    m1 = matrix_from_rows([[1, 2], [3, 4]])
    m2 = matrix_from_rows([[5, 6], [7, 8]])

    result = multiply_mats_elementwise(m1, m2)
    assert result.tolist() == [[5.0, 12.0], [21.0, 32.0]]

    multiply_mats_elementwise_inplace(m1, m2)
    assert m1.tolist() == [[5.0, 12.0], [21.0, 32.0]]


def test_matrix_product():
    """Test the row-by-column matrix product."""
    m1 = matrix_from_rows([[1, 2], [3, 4]])
    m2 = matrix_from_rows([[5, 6], [7, 8]])

    result = multiply_mats(m1, m2)

    assert result.tolist() == [[19.0, 22.0], [43.0, 50.0]]


def test_matrix_product_non_square(sample_matrix):
    """Test a 2x3 by 3x2 product."""
    result = multiply_mats(sample_matrix, transposed(sample_matrix))

    assert result.shape == (2, 2)
    np.testing.assert_array_almost_equal(
        result.elements,
        sample_matrix.elements @ sample_matrix.elements.T,
    )


def test_identity_product_preserves_matrix(sample_matrix):
    """Test that multiplying by the identity is a no-op."""
    left = multiply_mats(identity_matrix(2, 2), sample_matrix)
    right = multiply_mats(sample_matrix, identity_matrix(3, 3))

    np.testing.assert_array_almost_equal(left.elements, sample_matrix.elements)
    np.testing.assert_array_almost_equal(right.elements, sample_matrix.elements)


def test_matrix_product_inplace_uses_buffer():
    """Test that the in-place product reads the unmodified operand throughout."""
    mat = matrix_from_rows([[1, 2], [3, 4]])

    multiply_mats_inplace(mat, matrix_from_rows([[1, 2], [3, 4]]))

    assert mat.tolist() == [[7.0, 10.0], [15.0, 22.0]]


def test_matrix_product_inplace_changes_shape(sample_matrix):
    """Test that the in-place product takes the result's shape."""
    multiply_mats_inplace(sample_matrix, zero_matrix(3, 1))

    assert sample_matrix.shape == (2, 1)


def test_matrix_product_mismatch(caplog, sample_matrix):
    """Test the inner-dimension precondition."""
    assert multiply_mats(sample_matrix, sample_matrix).is_null
    assert "cannot multiply 2x3 by 2x3" in caplog.text

    multiply_mats_inplace(sample_matrix, sample_matrix)
    assert sample_matrix.shape == (2, 3)


def test_scalar_arithmetic(sample_matrix):
    """Test scalar variants."""
    base = sample_matrix.elements

    np.testing.assert_array_equal(add_mat_scalar(sample_matrix, 1).elements, base + 1)
    np.testing.assert_array_equal(subtract_mat_scalar(sample_matrix, 1).elements, base - 1)
    np.testing.assert_array_equal(multiply_mat_scalar(sample_matrix, 3).elements, base * 3)

    divide_mat_scalar_inplace(sample_matrix, 2)
    np.testing.assert_array_equal(sample_matrix.elements, base / 2)


def test_transpose_round_trip(sample_matrix):
    """Test that transposing twice restores the matrix."""
    once = transposed(sample_matrix)
    assert once.shape == (3, 2)

    twice = transposed(once)
    np.testing.assert_array_equal(twice.elements, sample_matrix.elements)


def test_transpose_in_place_square():
    """Test in-place transpose of a square matrix."""
    mat = matrix_from_rows([[1, 2], [3, 4]])

    transpose(mat)

    assert mat.tolist() == [[1.0, 3.0], [2.0, 4.0]]


def test_get_row_and_col_are_copies(sample_matrix):
    """Test row/column extraction."""
    row = get_row(sample_matrix, 1)
    col = get_col(sample_matrix, 2)

    assert row.tolist() == [4.0, 5.0, 6.0]
    assert col.tolist() == [3.0, 6.0]

    row[0] = 0.0
    assert sample_matrix[1, 0] == 4.0


def test_get_row_out_of_range(caplog, sample_matrix):
    """Test an out-of-range index."""
    assert get_row(sample_matrix, 5).is_null
    assert get_col(sample_matrix, -1).is_null
    assert "out of range" in caplog.text


def test_set_row_and_col(sample_matrix):
    """Test overwriting rows and columns by value."""
    row = vec3(7, 8, 9)
    set_row(sample_matrix, 0, row)
    row[0] = 0.0

    assert sample_matrix.tolist()[0] == [7.0, 8.0, 9.0]

    set_col(sample_matrix, 1, vec2(-1, -2))
    assert get_col(sample_matrix, 1).tolist() == [-1.0, -2.0]


def test_set_row_requires_exact_size(caplog, sample_matrix):
    """Test that a wrongly sized vector leaves the matrix unchanged."""
    before = sample_matrix.elements.copy()

    set_row(sample_matrix, 0, vec2(1, 1))
    set_col(sample_matrix, 0, vec3(1, 1, 1))

    np.testing.assert_array_equal(sample_matrix.elements, before)
    assert "DimensionMismatch" in caplog.text


def test_augment_vec(sample_matrix):
    """Test appending a vector as a new row."""
    augment_vec(sample_matrix, vec3(7, 8, 9))

    assert sample_matrix.shape == (3, 3)
    assert get_row(sample_matrix, 2).tolist() == [7.0, 8.0, 9.0]


def test_augment_vec_mismatch(sample_matrix):
    """Test that a wrongly sized vector is rejected."""
    augment_vec(sample_matrix, vec2(1, 2))

    assert sample_matrix.shape == (2, 3)


def test_augment_vec_onto_null_matrix():
    """Test that the null matrix adopts the vector's width."""
    mat = null_matrix()

    augment_vec(mat, vec2(1, 2))

    assert mat.tolist() == [[1.0, 2.0]]


def test_augment_mat(sample_matrix):
    """Test appending a matrix's rows."""
    augment_mat(sample_matrix, identity_matrix(2, 3))

    assert sample_matrix.shape == (4, 3)
    assert get_row(sample_matrix, 3).tolist() == [0.0, 1.0, 0.0]


def test_augment_mat_mismatch(caplog, sample_matrix):
    """Test that a matrix with a different width is rejected."""
    augment_mat(sample_matrix, identity_matrix(2, 2))

    assert sample_matrix.shape == (2, 3)
    assert "DimensionMismatch" in caplog.text


def test_matrix_comparisons():
    """Test elementwise matrix comparisons."""
    small = matrix_from_rows([[1, 2], [3, 4]])
    large = matrix_from_rows([[2, 3], [4, 5]])

    assert mat_equals(small, matrix_from_rows([[1, 2], [3, 4]]))
    assert not mat_equals(small, large)
    assert mat_gt(large, small)
    assert mat_gte(small, small)
    assert mat_lt(small, large)
    assert mat_lte(small, small)
    assert not mat_lt(small, matrix_from_rows([[2, 3], [4, 4]]))


def test_matrix_comparison_mismatch_is_false():
    """Test comparisons on mismatched shapes."""
    assert not mat_equals(identity_matrix(2, 2), identity_matrix(2, 3))


def test_identity_and_zero_reexports():
    """Test the constructors exposed by the matrix module."""
    assert identity_matrix(3, 3).is_square
    assert isinstance(zero_matrix(1, 2), Matrix)
