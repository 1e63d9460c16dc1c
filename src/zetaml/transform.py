"""3D transform and projection matrices.

All matrices here are 4x4 homogeneous transforms acting on column vectors
(``p' = M @ p``): the upper-left 3x3 block holds rotation and scale, and
column 3 holds translation. With this convention a rotation of 90 degrees
about Z maps (1, 0, 0) to (0, 1, 0).

Functions come in three flavours, following the vector and matrix modules:
    - ``translate(mat, ...)``: modify ``mat`` in place
    - ``translated(mat, ...)``: return a modified copy of ``mat``
    - ``translate_identity(...)``: apply to a fresh 4x4 identity

In-place functions given a matrix that is not 4x4 report a ShapeError and
leave the matrix unchanged.

Handedness is chosen by calling the ``_lh`` or ``_rh`` variant, or by passing
``{"left_handed": True}`` to ``ortho``, ``perspective`` or ``look_at``.
Angles are radians unless the config sets ``use_degrees``.
"""

import math
from typing import Optional

import numpy as np

from zetaml.errors import report_dimension_mismatch, report_shape_error
from zetaml.matrix_ops import get_col, set_col, set_row
from zetaml.types import (
    Matrix,
    Vector,
    construct_vector,
    construct_vector_default,
    copy_matrix,
    identity_matrix,
    vec3,
    zero_matrix,
)
from zetaml.utils.config import angle_to_radians, is_left_handed
from zetaml.vector_ops import (
    add_vecs_inplace,
    cross,
    dot,
    multiply_vec_scalar,
    multiply_vec_scalar_inplace,
    negated,
    normalize,
    subtract_vecs,
    vec_equals_scalar,
)

TRANSFORM_SIZE = 4
SPATIAL_SIZE = 3


def _is_transform(mat: Matrix, operation: str) -> bool:
    if mat.shape != (TRANSFORM_SIZE, TRANSFORM_SIZE):
        report_shape_error(
            operation,
            f"given matrix is {mat.rows}x{mat.cols}, not 4x4, no transformation performed",
        )
        return False
    return True


def _is_spatial(vec: Vector, operation: str, name: str = "vector") -> bool:
    if vec.size != SPATIAL_SIZE:
        report_dimension_mismatch(
            operation,
            f"given {name} is of size {vec.size}, not 3, no transformation performed",
        )
        return False
    return True


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def translate(mat: Matrix, vec: Vector) -> None:
    """Apply a translation by ``vec`` to ``mat`` in place.

    The translation is expressed in the basis of ``mat``: column 3 becomes
    ``col_0 * x + col_1 * y + col_2 * z + col_3``.

    Args:
        mat: 4x4 matrix to modify
        vec: Translation (x, y, z)
    """
    if not _is_transform(mat, "translate") or not _is_spatial(vec, "translate"):
        return
    if vec_equals_scalar(vec, 0.0):
        return

    result = construct_vector_default(TRANSFORM_SIZE, 0.0)
    for i in range(TRANSFORM_SIZE):
        col = get_col(mat, i)
        # the last column is carried over unscaled
        if i < SPATIAL_SIZE:
            multiply_vec_scalar_inplace(col, vec[i])
        add_vecs_inplace(result, col)

    set_col(mat, 3, result)


def translated(mat: Matrix, vec: Vector) -> Matrix:
    """Return a copy of ``mat`` translated by ``vec``."""
    result = copy_matrix(mat)
    translate(result, vec)
    return result


def translate_identity(vec: Vector) -> Matrix:
    """Build a translation matrix for ``vec``."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    translate(result, vec)
    return result


# ---------------------------------------------------------------------------
# Rotation
# ---------------------------------------------------------------------------


def _rotation_matrix(axis: Vector, angle: float) -> np.ndarray:
    """Rodrigues' rotation matrix for a unit ``axis`` and ``angle`` (radians)."""
    x, y, z = axis.elements
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c

    return np.array(
        [
            [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
        ]
    )


def rotate(
    mat: Matrix,
    angle: float,
    x: float,
    y: float,
    z: float,
    config: Optional[dict] = None,
) -> None:
    """Rotate ``mat`` in place by ``angle`` around the axis (x, y, z).

    The axis need not be normalised. Column 3 is left untouched.

    Args:
        mat: 4x4 matrix to modify
        angle: Rotation angle (radians, or degrees with ``use_degrees``)
        x: X component of the rotation axis
        y: Y component of the rotation axis
        z: Z component of the rotation axis
        config: Optional configuration dictionary with:
            - use_degrees: bool, interpret ``angle`` as degrees
    """
    if not _is_transform(mat, "rotate"):
        return

    angle = angle_to_radians(angle, config)
    if angle == 0.0 or (x == 0.0 and y == 0.0 and z == 0.0):
        return

    axis = vec3(x, y, z)
    normalize(axis)
    rotation = _rotation_matrix(axis, angle)

    basis = [get_col(mat, j) for j in range(SPATIAL_SIZE)]
    result = copy_matrix(mat)

    # result column i = sum over j of (column j of mat) * R[j][i]
    for i in range(SPATIAL_SIZE):
        col = construct_vector_default(TRANSFORM_SIZE, 0.0)
        for j in range(SPATIAL_SIZE):
            add_vecs_inplace(col, multiply_vec_scalar(basis[j], rotation[j, i]))
        set_col(result, i, col)

    mat.elements = result.elements


def rotated(
    mat: Matrix,
    angle: float,
    x: float,
    y: float,
    z: float,
    config: Optional[dict] = None,
) -> Matrix:
    """Return a copy of ``mat`` rotated by ``angle`` around (x, y, z)."""
    result = copy_matrix(mat)
    rotate(result, angle, x, y, z, config=config)
    return result


def rotate_identity(
    angle: float,
    x: float,
    y: float,
    z: float,
    config: Optional[dict] = None,
) -> Matrix:
    """Build a rotation matrix for ``angle`` around (x, y, z)."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    rotate(result, angle, x, y, z, config=config)
    return result


# ---------------------------------------------------------------------------
# Scale
# ---------------------------------------------------------------------------


def scale(mat: Matrix, vec: Vector) -> None:
    """Scale columns 0-2 of ``mat`` in place by the components of ``vec``.

    A zero ``vec`` is treated as "no scaling" and leaves ``mat`` unchanged.
    """
    if not _is_transform(mat, "scale") or not _is_spatial(vec, "scale"):
        return
    if vec_equals_scalar(vec, 0.0):
        return

    for i in range(SPATIAL_SIZE):
        col = get_col(mat, i)
        multiply_vec_scalar_inplace(col, vec[i])
        set_col(mat, i, col)


def scaled(mat: Matrix, vec: Vector) -> Matrix:
    """Return a copy of ``mat`` scaled by ``vec``."""
    result = copy_matrix(mat)
    scale(result, vec)
    return result


def scale_identity(vec: Vector) -> Matrix:
    """Build a scale matrix for ``vec``."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    scale(result, vec)
    return result


# ---------------------------------------------------------------------------
# Orthographic projection
# ---------------------------------------------------------------------------


def _update_ortho(
    mat: Matrix,
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    z_sign: float,
    operation: str,
) -> None:
    if not _is_transform(mat, operation):
        return

    left, right, bottom, top, near, far = np.array(
        [left, right, bottom, top, near, far], dtype=np.float64
    )
    # degenerate bounds give IEEE inf/nan terms rather than an exception
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = {
            (0, 0): 2.0 / (right - left),
            (1, 1): 2.0 / (top - bottom),
            (2, 2): z_sign * 2.0 / (far - near),
            (0, 3): -(right + left) / (right - left),
            (1, 3): -(top + bottom) / (top - bottom),
            (2, 3): -(far + near) / (far - near),
        }

    m = mat.elements
    for index, value in terms.items():
        m[index] = value


def update_ortho_matrix_lh(
    mat: Matrix,
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> None:
    """Turn ``mat`` into a left-handed orthographic projection.

    Equal bounds on any axis give inf or NaN entries instead of raising.

    Args:
        mat: 4x4 matrix to modify
        left: Left-most boundary
        right: Right-most boundary
        bottom: Bottom-most boundary
        top: Top-most boundary
        near: Nearest Z coordinate that will be rendered
        far: Farthest Z coordinate that will be rendered
    """
    _update_ortho(
        mat, left, right, bottom, top, near, far,
        z_sign=1.0, operation="update_ortho_matrix_lh",
    )


def update_ortho_matrix_rh(
    mat: Matrix,
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> None:
    """Turn ``mat`` into a right-handed orthographic projection.

    Same arguments as ``update_ortho_matrix_lh``; the Z scale is negated.
    """
    _update_ortho(
        mat, left, right, bottom, top, near, far,
        z_sign=-1.0, operation="update_ortho_matrix_rh",
    )


def construct_ortho_matrix_lh(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> Matrix:
    """Build a left-handed orthographic projection on a 4x4 identity."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    update_ortho_matrix_lh(result, left, right, bottom, top, near, far)
    return result


def construct_ortho_matrix_rh(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> Matrix:
    """Build a right-handed orthographic projection on a 4x4 identity."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    update_ortho_matrix_rh(result, left, right, bottom, top, near, far)
    return result


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    config: Optional[dict] = None,
) -> Matrix:
    """Build an orthographic projection with the configured handedness."""
    if is_left_handed(config):
        return construct_ortho_matrix_lh(left, right, bottom, top, near, far)
    return construct_ortho_matrix_rh(left, right, bottom, top, near, far)


# ---------------------------------------------------------------------------
# Perspective projection
# ---------------------------------------------------------------------------


def _update_perspective(
    mat: Matrix,
    near: float,
    far: float,
    fovy: float,
    aspect_ratio: float,
    z_sign: float,
    config: Optional[dict],
    operation: str,
) -> None:
    if not _is_transform(mat, operation):
        return

    near, far, aspect_ratio = np.array([near, far, aspect_ratio], dtype=np.float64)
    tan_half_fovy = np.tan(np.float64(angle_to_radians(fovy, config)) / 2.0)

    # zero field of view, zero aspect ratio or near == far give IEEE inf/nan
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = {
            (0, 0): 1.0 / (aspect_ratio * tan_half_fovy),
            (1, 1): 1.0 / tan_half_fovy,
            (2, 2): z_sign * (near + far) / (far - near),
            (3, 2): z_sign,
            (2, 3): -(2.0 * far * near) / (far - near),
        }

    m = mat.elements
    for index, value in terms.items():
        m[index] = value


def update_perspective_matrix_lh(
    mat: Matrix,
    near: float,
    far: float,
    fovy: float,
    aspect_ratio: float,
    config: Optional[dict] = None,
) -> None:
    """Write left-handed perspective terms into ``mat``.

    Only the projection entries are written; every other entry of ``mat``
    keeps its value.
    A zero field of view or aspect ratio, or ``near == far``, gives inf
    or NaN entries instead of raising.

    Args:
        mat: 4x4 matrix to modify
        near: Distance from the viewer to the near clipping plane
        far: Distance from the viewer to the far clipping plane
        fovy: Vertical field of view
        aspect_ratio: Viewport width divided by height
        config: Optional configuration dictionary with:
            - use_degrees: bool, interpret ``fovy`` as degrees
    """
    _update_perspective(
        mat, near, far, fovy, aspect_ratio,
        z_sign=1.0, config=config, operation="update_perspective_matrix_lh",
    )


def update_perspective_matrix_rh(
    mat: Matrix,
    near: float,
    far: float,
    fovy: float,
    aspect_ratio: float,
    config: Optional[dict] = None,
) -> None:
    """Write right-handed perspective terms into ``mat``.

    Same arguments as ``update_perspective_matrix_lh``.
    """
    _update_perspective(
        mat, near, far, fovy, aspect_ratio,
        z_sign=-1.0, config=config, operation="update_perspective_matrix_rh",
    )


def construct_perspective_matrix_lh(
    near: float,
    far: float,
    fovy: float,
    aspect_ratio: float,
    config: Optional[dict] = None,
) -> Matrix:
    """Build a left-handed perspective projection.

    The matrix starts from zeros rather than the identity, so ``[3][3]`` is
    0 and ``w`` equals the view depth. Points on the near and far planes map
    to NDC depth -1 and +1 after the perspective divide.

    Args:
        near: Distance from the viewer to the near clipping plane
        far: Distance from the viewer to the far clipping plane
        fovy: Vertical field of view
        aspect_ratio: Viewport width divided by height
        config: Optional configuration dictionary with:
            - use_degrees: bool, interpret ``fovy`` as degrees

    Returns:
        New 4x4 projection matrix
    """
    result = zero_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    update_perspective_matrix_lh(result, near, far, fovy, aspect_ratio, config=config)
    return result


def construct_perspective_matrix_rh(
    near: float,
    far: float,
    fovy: float,
    aspect_ratio: float,
    config: Optional[dict] = None,
) -> Matrix:
    """Build a right-handed perspective projection.

    Same arguments and zero base as ``construct_perspective_matrix_lh``;
    ``[3][2]`` is -1, so ``w`` is the negated view-space Z.
    """
    result = zero_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    update_perspective_matrix_rh(result, near, far, fovy, aspect_ratio, config=config)
    return result


def perspective(
    near: float,
    far: float,
    fovy: float,
    aspect_ratio: float,
    config: Optional[dict] = None,
) -> Matrix:
    """Build a perspective projection with the configured handedness."""
    if is_left_handed(config):
        return construct_perspective_matrix_lh(near, far, fovy, aspect_ratio, config=config)
    return construct_perspective_matrix_rh(near, far, fovy, aspect_ratio, config=config)


# ---------------------------------------------------------------------------
# Look-at
# ---------------------------------------------------------------------------


def _update_look_at(
    mat: Matrix,
    pos: Vector,
    focus: Vector,
    up: Vector,
    left_handed: bool,
    operation: str,
) -> None:
    if not _is_transform(mat, operation):
        return
    if not (
        _is_spatial(pos, operation, "position")
        and _is_spatial(focus, operation, "focus")
        and _is_spatial(up, operation, "up vector")
    ):
        return

    direction = subtract_vecs(focus, pos)
    normalize(direction)
    right = cross(direction, up)
    normalize(right)
    relative_up = cross(right, direction)

    if left_handed:
        forward = direction
        forward_offset = -dot(direction, pos)
    else:
        forward = negated(direction)
        forward_offset = dot(direction, pos)

    # each of the first three rows holds a basis vector followed by the
    # camera position projected onto it; row 3 stays [0, 0, 0, 1]
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    set_row(result, 0, construct_vector([*right, -dot(right, pos)]))
    set_row(result, 1, construct_vector([*relative_up, -dot(relative_up, pos)]))
    set_row(result, 2, construct_vector([*forward, forward_offset]))

    mat.elements = result.elements


def update_look_at_matrix_lh(mat: Matrix, pos: Vector, focus: Vector, up: Vector) -> None:
    """Turn ``mat`` into a left-handed look-at (view) matrix.

    Args:
        mat: 4x4 matrix to modify
        pos: Position of the viewer
        focus: Position the viewer is looking at
        up: Absolute up direction, e.g. (0, 1, 0) when Y is up
    """
    _update_look_at(mat, pos, focus, up, left_handed=True, operation="update_look_at_matrix_lh")


def update_look_at_matrix_rh(mat: Matrix, pos: Vector, focus: Vector, up: Vector) -> None:
    """Turn ``mat`` into a right-handed look-at (view) matrix.

    Same arguments as ``update_look_at_matrix_lh``.
    """
    _update_look_at(mat, pos, focus, up, left_handed=False, operation="update_look_at_matrix_rh")


def construct_look_at_matrix_lh(pos: Vector, focus: Vector, up: Vector) -> Matrix:
    """Build a left-handed look-at (view) matrix."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    update_look_at_matrix_lh(result, pos, focus, up)
    return result


def construct_look_at_matrix_rh(pos: Vector, focus: Vector, up: Vector) -> Matrix:
    """Build a right-handed look-at (view) matrix."""
    result = identity_matrix(TRANSFORM_SIZE, TRANSFORM_SIZE)
    update_look_at_matrix_rh(result, pos, focus, up)
    return result


def look_at(
    pos: Vector,
    focus: Vector,
    up: Vector,
    config: Optional[dict] = None,
) -> Matrix:
    """Build a look-at matrix with the configured handedness."""
    if is_left_handed(config):
        return construct_look_at_matrix_lh(pos, focus, up)
    return construct_look_at_matrix_rh(pos, focus, up)
