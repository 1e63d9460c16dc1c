"""Text formatting for vectors and matrices.

Values are written with 5 decimal places:
    'vec3' ( 1.00000, 2.00000, 3.00000 )
    'mat2x2' ( ( 1.00000, 0.00000 ), ( 0.00000, 1.00000 ) )
"""

import sys
from typing import Iterable, Optional, TextIO

from zetaml.types import Matrix, Vector

DECIMAL_PLACES = 5


def _join(values: Iterable[float]) -> str:
    return ", ".join(f"{value:.{DECIMAL_PLACES}f}" for value in values)


def vector_to_string(vec: Vector) -> str:
    """Format a vector as ``'vecN' ( a, b, ... )``."""
    if vec.is_null:
        return "'vec0' ( )"
    return f"'vec{vec.size}' ( {_join(vec.elements)} )"


def matrix_to_string(mat: Matrix) -> str:
    """Format a matrix as ``'matRxC' ( ( row ), ( row ), ... )``."""
    if mat.is_null:
        return "'mat0x0' ( )"
    rows = ", ".join(f"( {_join(row)} )" for row in mat.elements)
    return f"'mat{mat.rows}x{mat.cols}' ( {rows} )"


def print_vector(vec: Vector, stream: Optional[TextIO] = None) -> None:
    """Write the formatted vector and a newline to ``stream`` (stdout)."""
    if stream is None:
        stream = sys.stdout
    stream.write(vector_to_string(vec) + "\n")


def print_matrix(mat: Matrix, stream: Optional[TextIO] = None) -> None:
    """Write the formatted matrix and a newline to ``stream`` (stdout)."""
    if stream is None:
        stream = sys.stdout
    stream.write(matrix_to_string(mat) + "\n")
