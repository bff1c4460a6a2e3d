"""
Dense matrix and vector data structures.

Public API:
    Vector          fixed-size vector of floats
    Matrix          W x H matrix of floats, (x, y) = (column, row) addressing
    format_matrix   tab-separated text rendering
    format_vector
    print_matrix
    print_vector

Example:
    >>> from pylinalg.matrix import Matrix
    >>> A = Matrix.from_rows([[1, 2], [3, 4]])
    >>> A.concatenate(Matrix.identity(2))
    >>> A.width
    4
"""

from pylinalg.matrix.vector import Vector
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.formatting import (
    format_matrix,
    format_vector,
    print_matrix,
    print_vector,
)

__all__ = [
    "Vector",
    "Matrix",
    "format_matrix",
    "format_vector",
    "print_matrix",
    "print_vector",
]
