"""Tests for vector and matrix formatting."""

import io

from zetaml.types import matrix_from_rows, null_matrix, null_vector, vec2, vec3
from zetaml.utils.formatting import (
    matrix_to_string,
    print_matrix,
    print_vector,
    vector_to_string,
)


def test_vector_to_string():
    """Test the fixed-precision vector format."""
    assert vector_to_string(vec3(1, -2.5, 1 / 3)) == (
        "'vec3' ( 1.00000, -2.50000, 0.33333 )"
    )


def test_matrix_to_string():
    """Test the fixed-precision matrix format."""
    mat = matrix_from_rows([[1, 2, 3], [4, 5, 6]])

    assert matrix_to_string(mat) == (
        "'mat2x3' ( ( 1.00000, 2.00000, 3.00000 ), ( 4.00000, 5.00000, 6.00000 ) )"
    )


def test_null_values_format():
    """Test formatting of the null sentinels."""
    assert vector_to_string(null_vector()) == "'vec0' ( )"
    assert matrix_to_string(null_matrix()) == "'mat0x0' ( )"


def test_print_to_stream():
    """Test printing to an explicit text stream."""
    stream = io.StringIO()

    print_vector(vec2(1, 2), stream=stream)
    print_matrix(matrix_from_rows([[1]]), stream=stream)

    assert stream.getvalue() == (
        "'vec2' ( 1.00000, 2.00000 )\n'mat1x1' ( ( 1.00000 ) )\n"
    )


def test_print_defaults_to_stdout(capsys):
    """Test that printing without a stream goes to stdout."""
    print_vector(vec2(0, 1))

    assert capsys.readouterr().out == "'vec2' ( 0.00000, 1.00000 )\n"
