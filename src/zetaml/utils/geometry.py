"""Geometric utilities for applying transforms and measuring vectors.

This module provides helper functions built on the vector and matrix types.
"""

import math

import numpy as np

from zetaml.errors import report_dimension_mismatch, report_shape_error
from zetaml.types import Matrix, Vector, null_vector
from zetaml.vector_ops import dot, magnitude, subtract_vecs


def transform_point(
    mat: Matrix,
    point: Vector,
) -> Vector:
    """Transform a 3D point by a 4x4 homogeneous matrix.

    The point is extended with ``w = 1``. When the resulting ``w`` is neither
    0 nor 1 (a projection), the result is divided by it.

    Args:
        mat: 4x4 transform matrix
        point: Point to transform (x, y, z)

    Returns:
        Transformed point, or the null vector on a shape mismatch
    """
    if mat.shape != (4, 4):
        report_shape_error(
            "transform_point",
            f"given matrix is {mat.rows}x{mat.cols}, expected 4x4",
        )
        return null_vector()
    if point.size != 3:
        report_dimension_mismatch(
            "transform_point",
            f"given point has size {point.size}, expected 3",
        )
        return null_vector()

    homogeneous = np.append(point.elements, 1.0)
    x, y, z, w = mat.elements @ homogeneous
    if w != 1.0 and w != 0.0:
        return Vector(np.array([x / w, y / w, z / w]))
    return Vector(np.array([x, y, z]))


def compute_distance(
    point1: Vector,
    point2: Vector,
) -> float:
    """Compute Euclidean distance between two points.

    Args:
        point1: First point
        point2: Second point

    Returns:
        Euclidean distance (0.0 on a size mismatch, which is reported)
    """
    difference = subtract_vecs(point1, point2)
    return magnitude(difference)


def angle_between_vectors(
    vec1: Vector,
    vec2: Vector,
) -> float:
    """Compute angle between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Angle in radians (NaN if either vector has zero length)
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        cos_angle = np.divide(dot(vec1, vec2), magnitude(vec1) * magnitude(vec2))
    return math.acos(float(np.clip(cos_angle, -1.0, 1.0)))
