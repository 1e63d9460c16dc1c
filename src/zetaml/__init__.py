"""zetaml: vectors, matrices and 3D transform matrices.

This package provides:
- Vector and Matrix value types backed by owned NumPy storage
- Elementwise, scalar and geometric vector operations
- Matrix arithmetic, structure manipulation and products
- Translation, rotation, scale, projection and look-at matrices
"""

from zetaml.errors import ErrorKind
from zetaml.matrix_ops import (
    add_mats,
    augment_mat,
    augment_vec,
    get_col,
    get_row,
    mat_equals,
    multiply_mat_scalar,
    multiply_mats,
    multiply_mats_elementwise,
    set_col,
    set_row,
    subtract_mats,
    transpose,
    transposed,
)
from zetaml.transform import (
    construct_look_at_matrix_lh,
    construct_look_at_matrix_rh,
    construct_ortho_matrix_lh,
    construct_ortho_matrix_rh,
    construct_perspective_matrix_lh,
    construct_perspective_matrix_rh,
    look_at,
    ortho,
    perspective,
    rotate,
    rotate_identity,
    rotated,
    scale,
    scale_identity,
    scaled,
    translate,
    translate_identity,
    translated,
)
from zetaml.types import (
    Matrix,
    Vector,
    construct_vector,
    construct_vector_default,
    copy_matrix,
    copy_vector,
    identity_matrix,
    matrix_from_rows,
    null_matrix,
    null_vector,
    vec2,
    vec3,
    vec4,
    vector_from_sequence,
    zero_matrix,
)
from zetaml.vector_ops import (
    add_vecs,
    cross,
    dot,
    magnitude,
    multiply_vec_mat,
    normalize,
    normalized,
    subtract_vecs,
    vec_equals,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "Matrix",
    "Vector",
    "add_mats",
    "add_vecs",
    "augment_mat",
    "augment_vec",
    "construct_look_at_matrix_lh",
    "construct_look_at_matrix_rh",
    "construct_ortho_matrix_lh",
    "construct_ortho_matrix_rh",
    "construct_perspective_matrix_lh",
    "construct_perspective_matrix_rh",
    "construct_vector",
    "construct_vector_default",
    "copy_matrix",
    "copy_vector",
    "cross",
    "dot",
    "get_col",
    "get_row",
    "identity_matrix",
    "look_at",
    "magnitude",
    "mat_equals",
    "matrix_from_rows",
    "multiply_mat_scalar",
    "multiply_mats",
    "multiply_mats_elementwise",
    "multiply_vec_mat",
    "normalize",
    "normalized",
    "null_matrix",
    "null_vector",
    "ortho",
    "perspective",
    "rotate",
    "rotate_identity",
    "rotated",
    "scale",
    "scale_identity",
    "scaled",
    "set_col",
    "set_row",
    "subtract_mats",
    "subtract_vecs",
    "translate",
    "translate_identity",
    "translated",
    "transpose",
    "transposed",
    "vec2",
    "vec3",
    "vec4",
    "vec_equals",
    "vector_from_sequence",
    "zero_matrix",
]
