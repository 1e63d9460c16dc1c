"""Vector and Matrix value types.

Both types own a NumPy ``float64`` array. Constructing either type copies its
input, so no two live instances share storage. A zero-sized vector and a 0x0
matrix are the null sentinels returned by operations that cannot produce a
meaningful result.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from zetaml.errors import report_dimension_mismatch

FLOAT_DTYPE = np.float64


@dataclass(eq=False)
class Vector:
    """Ordered, fixed-length sequence of floats.

    Attributes:
        elements: Owned 1-D storage (numpy array, dtype=float64)
    """

    elements: np.ndarray

    def __post_init__(self) -> None:
        elements = np.array(self.elements, dtype=FLOAT_DTYPE)
        if elements.size == 0:
            elements = np.zeros(0, dtype=FLOAT_DTYPE)
        elif elements.ndim != 1:
            raise ValueError(
                f"Vector elements must be one-dimensional, got shape {elements.shape}"
            )
        self.elements = elements

    @property
    def size(self) -> int:
        return int(self.elements.shape[0])

    @property
    def is_null(self) -> bool:
        return self.size == 0

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return (float(e) for e in self.elements)

    def __getitem__(self, index: int) -> float:
        return float(self.elements[index])

    def __setitem__(self, index: int, value: float) -> None:
        self.elements[index] = value

    def tolist(self) -> list[float]:
        return [float(e) for e in self.elements]

    def __str__(self) -> str:
        from zetaml.utils.formatting import vector_to_string

        return vector_to_string(self)


@dataclass(eq=False)
class Matrix:
    """Grid of ``rows x cols`` floats stored row-major.

    Attributes:
        elements: Owned 2-D storage of shape (rows, cols), dtype=float64
    """

    elements: np.ndarray

    def __post_init__(self) -> None:
        elements = np.array(self.elements, dtype=FLOAT_DTYPE)
        if elements.size == 0:
            elements = np.zeros((0, 0), dtype=FLOAT_DTYPE)
        elif elements.ndim != 2:
            raise ValueError(
                f"Matrix elements must be two-dimensional, got shape {elements.shape}"
            )
        self.elements = elements

    @property
    def rows(self) -> int:
        return int(self.elements.shape[0])

    @property
    def cols(self) -> int:
        return int(self.elements.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_null(self) -> bool:
        return self.rows == 0 and self.cols == 0

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, index):
        value = self.elements[index]
        if isinstance(value, np.ndarray):
            return value.copy()
        return float(value)

    def __setitem__(self, index, value) -> None:
        self.elements[index] = value

    def tolist(self) -> list[list[float]]:
        return self.elements.tolist()

    def __str__(self) -> str:
        from zetaml.utils.formatting import matrix_to_string

        return matrix_to_string(self)


def null_vector() -> Vector:
    """Return a fresh null vector (size 0)."""
    return Vector(np.zeros(0, dtype=FLOAT_DTYPE))


def null_matrix() -> Matrix:
    """Return a fresh null matrix (0x0)."""
    return Matrix(np.zeros((0, 0), dtype=FLOAT_DTYPE))


def alloc_vector(size: int) -> Vector:
    """Allocate a vector of the given size. Elements are NOT initialised."""
    return Vector(np.empty(size, dtype=FLOAT_DTYPE))


def construct_vector(values: Sequence[float]) -> Vector:
    """Construct a vector holding ``values``."""
    return Vector(np.asarray(values, dtype=FLOAT_DTYPE).reshape(-1))


def vector_from_sequence(size: int, values: Sequence[float]) -> Vector:
    """Construct a vector from a length-prefixed sequence.

    Args:
        size: Expected number of elements
        values: The element values

    Returns:
        The vector, or the null vector if ``len(values) != size``
    """
    if len(values) != size:
        report_dimension_mismatch(
            "vector_from_sequence",
            f"expected {size} values, got {len(values)}",
        )
        return null_vector()
    return construct_vector(values)


def vec2(x: float, y: float) -> Vector:
    """Construct a 2D vector."""
    return construct_vector((x, y))


def vec3(x: float, y: float, z: float) -> Vector:
    """Construct a 3D vector."""
    return construct_vector((x, y, z))


def vec4(x: float, y: float, z: float, w: float) -> Vector:
    """Construct a 4D (homogeneous) vector."""
    return construct_vector((x, y, z, w))


def construct_vector_default(size: int, value: float) -> Vector:
    """Construct a vector with every element set to ``value``."""
    return Vector(np.full(size, value, dtype=FLOAT_DTYPE))


def copy_vector(vec: Vector) -> Vector:
    """Return an independent copy of ``vec``."""
    return Vector(vec.elements.copy())


def free_vector(vec: Vector) -> None:
    """Release a vector's storage, leaving it as the null vector."""
    vec.elements = np.zeros(0, dtype=FLOAT_DTYPE)


def alloc_matrix(rows: int, cols: int) -> Matrix:
    """Allocate a matrix. Elements are NOT initialised."""
    if rows == 0 or cols == 0:
        return null_matrix()
    return Matrix(np.empty((rows, cols), dtype=FLOAT_DTYPE))


def identity_matrix(rows: int, cols: int) -> Matrix:
    """Build a matrix with ones on the main diagonal and zeros elsewhere.

    Non-square shapes are allowed and get a partial identity.
    """
    if rows == 0 or cols == 0:
        return null_matrix()
    return Matrix(np.eye(rows, cols, dtype=FLOAT_DTYPE))


def zero_matrix(rows: int, cols: int) -> Matrix:
    """Build a ``rows x cols`` matrix of zeros."""
    if rows == 0 or cols == 0:
        return null_matrix()
    return Matrix(np.zeros((rows, cols), dtype=FLOAT_DTYPE))


def matrix_from_rows(rows: Sequence[Sequence[float]]) -> Matrix:
    """Build a matrix from a sequence of equally sized rows.

    Returns:
        The matrix, or the null matrix if the rows differ in length
    """
    lengths = {len(row) for row in rows}
    if len(lengths) > 1:
        report_dimension_mismatch(
            "matrix_from_rows",
            f"rows have differing lengths {sorted(lengths)}",
        )
        return null_matrix()
    return Matrix(np.asarray(rows, dtype=FLOAT_DTYPE))


def copy_matrix(mat: Matrix) -> Matrix:
    """Return an independent copy of ``mat``."""
    return Matrix(mat.elements.copy())


def free_matrix(mat: Matrix) -> None:
    """Release a matrix's storage, leaving it as the null matrix."""
    mat.elements = np.zeros((0, 0), dtype=FLOAT_DTYPE)
