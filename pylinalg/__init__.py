"""
PyLinalg: a small dense linear algebra kernel.

Matrix and vector data structures plus three exact algorithms built on
them: cofactor and permutation determinants, and Gaussian elimination.

Submodules:
    matrix: Matrix, Vector and text formatting
    determinant: Cofactor and permutation (Leibniz) determinants
    gaussian: Gauss-Jordan elimination for n x n systems
"""

__version__ = "0.1.0"

from pylinalg import matrix
from pylinalg import determinant
from pylinalg import gaussian
from pylinalg.matrix import Matrix, Vector

__all__ = [
    "__version__",
    "matrix",
    "determinant",
    "gaussian",
    "Matrix",
    "Vector",
]
