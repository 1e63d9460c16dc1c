"""Example script exercising the zetaml API.

This script builds a few vectors, matrices and camera transforms and
prints them, along with the scalar helpers.
"""

import logging
import math

from zetaml.matrix_ops import multiply_mat_scalar_inplace, multiply_mats, set_col
from zetaml.transform import look_at, perspective, rotate_identity, translate_identity
from zetaml.types import identity_matrix, vec3, vec4
from zetaml.utils.conversions import lerp, to_degrees, to_radians
from zetaml.utils.formatting import print_matrix, print_vector
from zetaml.utils.geometry import transform_point
from zetaml.utils.logging_config import setup_logging
from zetaml.vector_ops import cross, dot, multiply_vec_mat

# Setup logging
logger = setup_logging(log_level=logging.INFO).getChild("demo")


def scalar_helpers() -> None:
    """Print the scalar utility results."""
    logger.info(f"pi = {math.pi:.6f}")
    logger.info(f"to_degrees(pi) = {to_degrees(math.pi):.6f}")
    logger.info(f"to_radians(180) = {to_radians(180):.6f}")
    logger.info(f"lerp(5, 0, 10, 0, 100) = {lerp(5, 0, 10, 0, 100):.6f}")
    logger.info(f"lerp(50, 0, 100, 0, 10) = {lerp(50, 0, 100, 0, 10):.6f}")


def vector_basics() -> None:
    """Print dot/cross products and a vector-matrix product."""
    logger.info(f"dot = {dot(vec3(2, 3, 0), vec3(2, 3, 0))}")
    print_vector(cross(vec3(0, 0, 1), vec3(1, 0, 0)))

    mat = identity_matrix(4, 4)
    multiply_mat_scalar_inplace(mat, 4.0)
    set_col(mat, 3, vec4(2, 5, 2, 1))
    print_matrix(mat)
    print_vector(multiply_vec_mat(vec4(1, 1, 1, 1), mat))


def camera_pipeline() -> None:
    """Project a model-space point through model, view and projection."""
    config = {"use_degrees": True}

    model = multiply_mats(
        translate_identity(vec3(0, 0, -2)),
        rotate_identity(45, 0, 1, 0, config=config),
    )
    view = look_at(vec3(0, 1, 5), vec3(0, 0, 0), vec3(0, 1, 0), config=config)
    projection = perspective(0.1, 100.0, 60, 16 / 9, config=config)

    mvp = multiply_mats(projection, multiply_mats(view, model))
    print_matrix(mvp)
    print_vector(transform_point(mvp, vec3(1, 1, 1)))


def main() -> None:
    """Main function for the zetaml demo."""
    logger.info("Starting zetaml demo")
    scalar_helpers()
    vector_basics()
    camera_pipeline()
    logger.info("Demo finished")


if __name__ == "__main__":
    main()
