"""Arithmetic, geometric and comparison operations on vectors.

Value-returning functions allocate a new vector. Functions ending in
``_inplace`` overwrite their first argument and return None. Size mismatches
are reported (see ``zetaml.errors``) and never raised.
"""

import logging
import math
from typing import Callable

import numpy as np

from zetaml.errors import report_dimension_mismatch
from zetaml.types import Matrix, Vector, copy_vector, null_vector

logger = logging.getLogger(__name__)

ElementwiseOp = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _same_size(v1: Vector, v2: Vector, operation: str) -> bool:
    """Check that two vectors have the same size, reporting if not."""
    if v1.size != v2.size:
        report_dimension_mismatch(
            operation,
            f"vector sizes differ ({v1.size} vs {v2.size})",
        )
        return False
    return True


def _apply(op: ElementwiseOp, a: np.ndarray, b) -> np.ndarray:
    # IEEE results (inf/nan) are kept for division by zero
    with np.errstate(divide="ignore", invalid="ignore"):
        return op(a, b)


def _binary(v1: Vector, v2: Vector, op: ElementwiseOp, operation: str) -> Vector:
    if not _same_size(v1, v2, operation):
        return null_vector()
    return Vector(_apply(op, v1.elements, v2.elements))


def _binary_inplace(v1: Vector, v2: Vector, op: ElementwiseOp, operation: str) -> None:
    if not _same_size(v1, v2, operation):
        return
    v1.elements = _apply(op, v1.elements, v2.elements)


# ---------------------------------------------------------------------------
# Elementwise arithmetic
# ---------------------------------------------------------------------------


def add_vecs(v1: Vector, v2: Vector) -> Vector:
    """Return the elementwise sum ``v1 + v2`` (null vector on a size mismatch)."""
    return _binary(v1, v2, np.add, "add_vecs")


def add_vecs_inplace(v1: Vector, v2: Vector) -> None:
    """Add ``v2`` to ``v1`` elementwise, in place."""
    _binary_inplace(v1, v2, np.add, "add_vecs_inplace")


def subtract_vecs(v1: Vector, v2: Vector) -> Vector:
    """Return the elementwise difference ``v1 - v2`` (null vector on a size mismatch)."""
    return _binary(v1, v2, np.subtract, "subtract_vecs")


def subtract_vecs_inplace(v1: Vector, v2: Vector) -> None:
    """Subtract ``v2`` from ``v1`` elementwise, in place."""
    _binary_inplace(v1, v2, np.subtract, "subtract_vecs_inplace")


def multiply_vecs(v1: Vector, v2: Vector) -> Vector:
    """Return the elementwise product of ``v1`` and ``v2`` (null vector on a size mismatch)."""
    return _binary(v1, v2, np.multiply, "multiply_vecs")


def multiply_vecs_inplace(v1: Vector, v2: Vector) -> None:
    """Multiply ``v1`` by ``v2`` elementwise, in place."""
    _binary_inplace(v1, v2, np.multiply, "multiply_vecs_inplace")


def divide_vecs(v1: Vector, v2: Vector) -> Vector:
    """Return the elementwise quotient ``v1 / v2``.

    Division by zero follows IEEE rules (inf or NaN components).

    Args:
        v1: Dividend
        v2: Divisor, same size as ``v1``

    Returns:
        New vector, or the null vector on a size mismatch
    """
    return _binary(v1, v2, np.divide, "divide_vecs")


def divide_vecs_inplace(v1: Vector, v2: Vector) -> None:
    """Divide ``v1`` by ``v2`` elementwise, in place."""
    _binary_inplace(v1, v2, np.divide, "divide_vecs_inplace")


# ---------------------------------------------------------------------------
# Scalar arithmetic
# ---------------------------------------------------------------------------


def add_vec_scalar(vec: Vector, scalar: float) -> Vector:
    """Return ``vec`` with ``scalar`` added to every element."""
    return Vector(_apply(np.add, vec.elements, scalar))


def add_vec_scalar_inplace(vec: Vector, scalar: float) -> None:
    """Add ``scalar`` to every element of ``vec``."""
    vec.elements = _apply(np.add, vec.elements, scalar)


def subtract_vec_scalar(vec: Vector, scalar: float) -> Vector:
    """Return ``vec`` with ``scalar`` subtracted from every element."""
    return Vector(_apply(np.subtract, vec.elements, scalar))


def subtract_vec_scalar_inplace(vec: Vector, scalar: float) -> None:
    """Subtract ``scalar`` from every element of ``vec``."""
    vec.elements = _apply(np.subtract, vec.elements, scalar)


def multiply_vec_scalar(vec: Vector, scalar: float) -> Vector:
    """Return ``vec`` scaled by ``scalar``."""
    return Vector(_apply(np.multiply, vec.elements, scalar))


def multiply_vec_scalar_inplace(vec: Vector, scalar: float) -> None:
    """Scale every element of ``vec`` by ``scalar``."""
    vec.elements = _apply(np.multiply, vec.elements, scalar)


def divide_vec_scalar(vec: Vector, scalar: float) -> Vector:
    """Return ``vec`` divided by ``scalar``; a zero divisor gives inf/NaN."""
    return Vector(_apply(np.divide, vec.elements, scalar))


def divide_vec_scalar_inplace(vec: Vector, scalar: float) -> None:
    """Divide every element of ``vec`` by ``scalar``."""
    vec.elements = _apply(np.divide, vec.elements, scalar)


def negated(vec: Vector) -> Vector:
    """Return ``-vec``."""
    return multiply_vec_scalar(vec, -1.0)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def dot(v1: Vector, v2: Vector) -> float:
    """Compute the dot product of two vectors.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Sum of elementwise products. A size mismatch is reported and yields
        0.0, so a zero result does not by itself prove orthogonality.
    """
    if not _same_size(v1, v2, "dot"):
        return 0.0
    return float(np.dot(v1.elements, v2.elements))


def cross(v1: Vector, v2: Vector) -> Vector:
    """Compute the cross product of two 3-dimensional vectors.

    Returns:
        ``v1 x v2``, or the null vector if either operand is not 3-D
    """
    if v1.size != 3 or v2.size != 3:
        report_dimension_mismatch(
            "cross",
            f"cross product needs two 3D vectors, got sizes {v1.size} and {v2.size}",
        )
        return null_vector()

    a = v1.elements
    b = v2.elements
    return Vector(
        np.array(
            [
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            ]
        )
    )


def magnitude(vec: Vector) -> float:
    """Euclidean norm of ``vec``."""
    squared = float(np.sum(vec.elements * vec.elements))
    # + 0.0 turns a negative zero into positive zero
    return math.sqrt(squared) + 0.0


def normalized(vec: Vector) -> Vector:
    """Return ``vec`` divided by its magnitude.

    A zero-magnitude vector is not guarded: its components become NaN,
    following IEEE division semantics.
    """
    result = copy_vector(vec)
    normalize(result)
    return result


def normalize(vec: Vector) -> None:
    """Normalise ``vec`` in place. See ``normalized``."""
    mag = magnitude(vec)
    if mag == 0.0 and vec.size > 0:
        logger.warning("Normalising a zero-magnitude vector, result is NaN")
    divide_vec_scalar_inplace(vec, mag)


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


def _compare(v1: Vector, v2: Vector, op: ElementwiseOp, operation: str) -> bool:
    if not _same_size(v1, v2, operation):
        return False
    return bool(np.all(op(v1.elements, v2.elements)))


def vec_equals(v1: Vector, v2: Vector) -> bool:
    """Check whether every element of ``v1`` equals its counterpart in ``v2``.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        True if all pairs compare equal; False otherwise or on a size
        mismatch (which is reported)
    """
    return _compare(v1, v2, np.equal, "vec_equals")


def vec_gt(v1: Vector, v2: Vector) -> bool:
    """Check ``v1[i] > v2[i]`` for every ``i``."""
    return _compare(v1, v2, np.greater, "vec_gt")


def vec_gte(v1: Vector, v2: Vector) -> bool:
    """Check ``v1[i] >= v2[i]`` for every ``i``."""
    return _compare(v1, v2, np.greater_equal, "vec_gte")


def vec_lt(v1: Vector, v2: Vector) -> bool:
    """Check ``v1[i] < v2[i]`` for every ``i``."""
    return _compare(v1, v2, np.less, "vec_lt")


def vec_lte(v1: Vector, v2: Vector) -> bool:
    """Check ``v1[i] <= v2[i]`` for every ``i``."""
    return _compare(v1, v2, np.less_equal, "vec_lte")


def vec_equals_scalar(vec: Vector, scalar: float) -> bool:
    """Check whether every element equals ``scalar`` (True for the null vector)."""
    return bool(np.all(vec.elements == scalar))


def vec_gt_scalar(vec: Vector, scalar: float) -> bool:
    return bool(np.all(vec.elements > scalar))


def vec_gte_scalar(vec: Vector, scalar: float) -> bool:
    return bool(np.all(vec.elements >= scalar))


def vec_lt_scalar(vec: Vector, scalar: float) -> bool:
    return bool(np.all(vec.elements < scalar))


def vec_lte_scalar(vec: Vector, scalar: float) -> bool:
    return bool(np.all(vec.elements <= scalar))


# ---------------------------------------------------------------------------
# Vector-matrix multiplication
# ---------------------------------------------------------------------------


def multiply_vec_mat(vec: Vector, mat: Matrix) -> Vector:
    """Multiply ``vec`` by a square matrix.

    Each output element ``i`` is the dot product of ``vec`` with row ``i``
    of ``mat``.

    Args:
        vec: Vector of size ``mat.rows``
        mat: Square matrix

    Returns:
        The product, or the null vector on a shape mismatch
    """
    if not mat.is_square:
        report_dimension_mismatch(
            "multiply_vec_mat",
            f"matrix must be square, got {mat.rows}x{mat.cols}",
        )
        return null_vector()
    if vec.size != mat.rows:
        report_dimension_mismatch(
            "multiply_vec_mat",
            f"vector of size {vec.size} does not fit a {mat.rows}x{mat.cols} matrix",
        )
        return null_vector()

    result = np.array(
        [dot(vec, Vector(mat.elements[i])) for i in range(mat.rows)],
        dtype=vec.elements.dtype,
    )
    return Vector(result)


def multiply_vec_mat_inplace(vec: Vector, mat: Matrix) -> None:
    """Replace ``vec`` with ``mat @ vec``; ``vec`` is unchanged on error."""
    result = multiply_vec_mat(vec, mat)
    if result.is_null and not vec.is_null:
        return
    vec.elements = result.elements
