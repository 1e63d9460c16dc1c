"""Arithmetic, structural and comparison operations on matrices.

Two products are provided and kept distinct:

- ``multiply_mats``: the true matrix product, ``result[r][c]`` is the dot
  product of row ``r`` of the left operand and column ``c`` of the right.
- ``multiply_mats_elementwise``: the Hadamard product of two matrices of
  identical shape.
"""

from typing import Callable

import numpy as np

from zetaml.errors import report_dimension_mismatch
from zetaml.types import (
    Matrix,
    Vector,
    copy_matrix,
    identity_matrix,  # noqa: F401  re-exported
    null_matrix,
    null_vector,
    zero_matrix,  # noqa: F401  re-exported
)
from zetaml.vector_ops import dot

ElementwiseOp = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _same_shape(m1: Matrix, m2: Matrix, operation: str) -> bool:
    """Check that two matrices have identical shapes, reporting if not."""
    if m1.shape != m2.shape:
        report_dimension_mismatch(
            operation,
            f"matrix shapes differ ({m1.rows}x{m1.cols} vs {m2.rows}x{m2.cols})",
        )
        return False
    return True


def _apply(op: ElementwiseOp, a: np.ndarray, b) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return op(a, b)


def _binary(m1: Matrix, m2: Matrix, op: ElementwiseOp, operation: str) -> Matrix:
    if not _same_shape(m1, m2, operation):
        return null_matrix()
    return Matrix(_apply(op, m1.elements, m2.elements))


def _binary_inplace(m1: Matrix, m2: Matrix, op: ElementwiseOp, operation: str) -> None:
    if not _same_shape(m1, m2, operation):
        return
    m1.elements = _apply(op, m1.elements, m2.elements)


# ---------------------------------------------------------------------------
# Elementwise arithmetic
# ---------------------------------------------------------------------------


def add_mats(m1: Matrix, m2: Matrix) -> Matrix:
    """Return the elementwise sum ``m1 + m2`` (null matrix on a shape mismatch)."""
    return _binary(m1, m2, np.add, "add_mats")


def add_mats_inplace(m1: Matrix, m2: Matrix) -> None:
    _binary_inplace(m1, m2, np.add, "add_mats_inplace")


def subtract_mats(m1: Matrix, m2: Matrix) -> Matrix:
    """Return the elementwise difference ``m1 - m2`` (null matrix on a shape mismatch)."""
    return _binary(m1, m2, np.subtract, "subtract_mats")


def subtract_mats_inplace(m1: Matrix, m2: Matrix) -> None:
    _binary_inplace(m1, m2, np.subtract, "subtract_mats_inplace")


def multiply_mats_elementwise(m1: Matrix, m2: Matrix) -> Matrix:
    """Return the elementwise (Hadamard) product of ``m1`` and ``m2``.

    Use ``multiply_mats`` for the matrix product.

    Args:
        m1: First matrix
        m2: Second matrix of the same shape

    Returns:
        New matrix, or the null matrix on a shape mismatch
    """
    return _binary(m1, m2, np.multiply, "multiply_mats_elementwise")


def multiply_mats_elementwise_inplace(m1: Matrix, m2: Matrix) -> None:
    _binary_inplace(m1, m2, np.multiply, "multiply_mats_elementwise_inplace")


# ---------------------------------------------------------------------------
# Matrix product
# ---------------------------------------------------------------------------


def _can_multiply(m1: Matrix, m2: Matrix, operation: str) -> bool:
    if m1.cols != m2.rows:
        report_dimension_mismatch(
            operation,
            f"cannot multiply {m1.rows}x{m1.cols} by {m2.rows}x{m2.cols}",
        )
        return False
    return True


def _product(m1: Matrix, m2: Matrix) -> Matrix:
    m1_rows = [get_row(m1, r) for r in range(m1.rows)]
    m2_cols = [get_col(m2, c) for c in range(m2.cols)]

    # computed into a separate buffer so m1 is never read half-updated
    buf = np.zeros((m1.rows, m2.cols), dtype=m1.elements.dtype)
    for r, row in enumerate(m1_rows):
        for c, col in enumerate(m2_cols):
            buf[r, c] = dot(row, col)
    return Matrix(buf)


def multiply_mats(m1: Matrix, m2: Matrix) -> Matrix:
    """Compute the matrix product ``m1 @ m2``.

    Args:
        m1: Left operand (rows x n)
        m2: Right operand (n x cols)

    Returns:
        A new rows x cols matrix, or the null matrix if ``m1.cols != m2.rows``
    """
    if not _can_multiply(m1, m2, "multiply_mats"):
        return null_matrix()
    return _product(m1, m2)


def multiply_mats_inplace(m1: Matrix, m2: Matrix) -> None:
    """Replace ``m1`` with ``m1 @ m2``. ``m1`` takes the product's shape."""
    if not _can_multiply(m1, m2, "multiply_mats_inplace"):
        return
    m1.elements = _product(m1, m2).elements


# ---------------------------------------------------------------------------
# Scalar arithmetic
# ---------------------------------------------------------------------------


def add_mat_scalar(mat: Matrix, scalar: float) -> Matrix:
    return Matrix(_apply(np.add, mat.elements, scalar))


def add_mat_scalar_inplace(mat: Matrix, scalar: float) -> None:
    mat.elements = _apply(np.add, mat.elements, scalar)


def subtract_mat_scalar(mat: Matrix, scalar: float) -> Matrix:
    return Matrix(_apply(np.subtract, mat.elements, scalar))


def subtract_mat_scalar_inplace(mat: Matrix, scalar: float) -> None:
    mat.elements = _apply(np.subtract, mat.elements, scalar)


def multiply_mat_scalar(mat: Matrix, scalar: float) -> Matrix:
    """Return ``mat`` scaled by ``scalar``."""
    return Matrix(_apply(np.multiply, mat.elements, scalar))


def multiply_mat_scalar_inplace(mat: Matrix, scalar: float) -> None:
    mat.elements = _apply(np.multiply, mat.elements, scalar)


def divide_mat_scalar(mat: Matrix, scalar: float) -> Matrix:
    """Return ``mat`` divided by ``scalar``; a zero divisor gives inf/NaN."""
    return Matrix(_apply(np.divide, mat.elements, scalar))


def divide_mat_scalar_inplace(mat: Matrix, scalar: float) -> None:
    mat.elements = _apply(np.divide, mat.elements, scalar)


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def transposed(mat: Matrix) -> Matrix:
    """Return a transposed copy of ``mat``."""
    result = copy_matrix(mat)
    transpose(result)
    return result


def transpose(mat: Matrix) -> None:
    """Transpose ``mat`` in place. Non-square matrices change shape."""
    buf = mat.elements.copy()
    transposed_elements = np.empty((mat.cols, mat.rows), dtype=buf.dtype)
    for r in range(mat.cols):
        for c in range(mat.rows):
            transposed_elements[r, c] = buf[c, r]
    mat.elements = transposed_elements


def get_row(mat: Matrix, index: int) -> Vector:
    """Return row ``index`` of ``mat`` as an independent vector.

    Returns:
        A copy of the row, or the null vector if ``index`` is out of range
    """
    if not 0 <= index < mat.rows:
        report_dimension_mismatch(
            "get_row",
            f"row index {index} out of range for {mat.rows}x{mat.cols} matrix",
        )
        return null_vector()
    return Vector(mat.elements[index, :].copy())


def get_col(mat: Matrix, index: int) -> Vector:
    """Return column ``index`` of ``mat`` as an independent vector.

    Returns:
        A copy of the column, or the null vector if ``index`` is out of range
    """
    if not 0 <= index < mat.cols:
        report_dimension_mismatch(
            "get_col",
            f"column index {index} out of range for {mat.rows}x{mat.cols} matrix",
        )
        return null_vector()
    return Vector(mat.elements[:, index].copy())


def set_row(mat: Matrix, index: int, vec: Vector) -> None:
    """Overwrite row ``index`` of ``mat`` with the values of ``vec``."""
    if vec.size != mat.cols:
        report_dimension_mismatch(
            "set_row",
            f"vector of size {vec.size} does not fit a row of {mat.cols} columns",
        )
        return
    if not 0 <= index < mat.rows:
        report_dimension_mismatch(
            "set_row",
            f"row index {index} out of range for {mat.rows}x{mat.cols} matrix",
        )
        return
    mat.elements[index, :] = vec.elements


def set_col(mat: Matrix, index: int, vec: Vector) -> None:
    """Overwrite column ``index`` of ``mat`` with the values of ``vec``."""
    if vec.size != mat.rows:
        report_dimension_mismatch(
            "set_col",
            f"vector of size {vec.size} does not fit a column of {mat.rows} rows",
        )
        return
    if not 0 <= index < mat.cols:
        report_dimension_mismatch(
            "set_col",
            f"column index {index} out of range for {mat.rows}x{mat.cols} matrix",
        )
        return
    mat.elements[:, index] = vec.elements


def augment_vec(mat: Matrix, vec: Vector) -> None:
    """Append ``vec`` to ``mat`` as a new final row.

    A null ``mat`` becomes a single-row matrix.
    """
    if mat.is_null:
        if vec.is_null:
            return
        mat.elements = vec.elements.copy().reshape(1, vec.size)
        return
    if vec.size != mat.cols:
        report_dimension_mismatch(
            "augment_vec",
            f"vector of size {vec.size} cannot extend a matrix with {mat.cols} columns",
        )
        return

    buf = np.empty((mat.rows + 1, mat.cols), dtype=mat.elements.dtype)
    buf[: mat.rows, :] = mat.elements
    buf[mat.rows, :] = vec.elements
    mat.elements = buf


def augment_mat(mat: Matrix, other: Matrix) -> None:
    """Append the rows of ``other`` below the rows of ``mat``."""
    if other.is_null:
        return
    if mat.is_null:
        mat.elements = other.elements.copy()
        return
    if other.cols != mat.cols:
        report_dimension_mismatch(
            "augment_mat",
            f"matrix with {other.cols} columns cannot extend one with {mat.cols}",
        )
        return

    buf = np.empty((mat.rows + other.rows, mat.cols), dtype=mat.elements.dtype)
    buf[: mat.rows, :] = mat.elements
    buf[mat.rows :, :] = other.elements
    mat.elements = buf


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


def _compare(m1: Matrix, m2: Matrix, op: ElementwiseOp, operation: str) -> bool:
    if not _same_shape(m1, m2, operation):
        return False
    return bool(np.all(op(m1.elements, m2.elements)))


def mat_equals(m1: Matrix, m2: Matrix) -> bool:
    """Check whether ``m1`` and ``m2`` have equal shape and elements."""
    return _compare(m1, m2, np.equal, "mat_equals")


def mat_gt(m1: Matrix, m2: Matrix) -> bool:
    return _compare(m1, m2, np.greater, "mat_gt")


def mat_gte(m1: Matrix, m2: Matrix) -> bool:
    return _compare(m1, m2, np.greater_equal, "mat_gte")


def mat_lt(m1: Matrix, m2: Matrix) -> bool:
    return _compare(m1, m2, np.less, "mat_lt")


def mat_lte(m1: Matrix, m2: Matrix) -> bool:
    return _compare(m1, m2, np.less_equal, "mat_lte")
