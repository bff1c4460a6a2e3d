"""
Determinants by exact expansion.

Two independent derivations of the same quantity, selected explicitly:
cofactor (Laplace) expansion and permutation (Leibniz) expansion.

Public API:
    determinant(matrix, method=...) -> DeterminantSolution
    cofactor_determinant(matrix) -> float
    permutation_determinant(matrix) -> float

Example:
    >>> from pylinalg.matrix import Matrix
    >>> from pylinalg.determinant import determinant
    >>> result = determinant(Matrix.from_rows([[2, 0, 0], [0, 3, 0], [0, 0, 4]]),
    ...                      method='permutation')
    >>> result.value
    24.0
"""

from pylinalg.determinant.design import DeterminantDesign
from pylinalg.determinant.solution import DeterminantSolution, DeterminantParams
from pylinalg.determinant.solvers import (
    determinant,
    cofactor_determinant,
    permutation_determinant,
)

__all__ = [
    "determinant",
    "cofactor_determinant",
    "permutation_determinant",
    "DeterminantDesign",
    "DeterminantSolution",
    "DeterminantParams",
]
