"""
Solver dispatch for determinants.

This module provides the determinant() function (public API) and backend
selection. The caller always picks the algorithm explicitly.
"""

from __future__ import annotations

import warnings
from typing import Literal

from pylinalg.determinant._common import factorial_cost_warning
from pylinalg.determinant.design import DeterminantDesign
from pylinalg.determinant.solution import DeterminantSolution
from pylinalg.determinant.backends.cofactor import CofactorBackend
from pylinalg.determinant.backends.permutation import PermutationBackend
from pylinalg.matrix.matrix import Matrix


MethodChoice = Literal['cofactor', 'laplace', 'permutation', 'leibniz']


def determinant(
    matrix: Matrix | DeterminantDesign,
    *,
    method: MethodChoice = 'cofactor',
) -> DeterminantSolution:
    """
    Compute the determinant of a square matrix.

    Both methods are exact expansions with O(n!) cost and agree on every
    square input up to rounding:
        - 'cofactor' / 'laplace': recursive expansion along the first row
        - 'permutation' / 'leibniz': signed sum over all n! permutations

    The input matrix is never mutated. The 0 x 0 matrix has determinant 1.

    Args:
        matrix: Square Matrix, or an already-built DeterminantDesign
        method: Algorithm to use

    Returns:
        DeterminantSolution; float(solution) is the determinant

    Raises:
        ValidationError: If matrix is not square or holds NaN or Inf
        ValueError: If method is unknown

    Example:
        >>> from pylinalg.matrix import Matrix
        >>> from pylinalg.determinant import determinant
        >>> float(determinant(Matrix.from_rows([[1, 2], [3, 4]])))
        -2.0
    """
    # === Input Validation ===
    if isinstance(matrix, DeterminantDesign):
        design = matrix
    else:
        design = DeterminantDesign.from_matrix(matrix)

    # === Select Backend ===
    backend_impl = _get_backend(method)

    warning = factorial_cost_warning(method.capitalize(), design.n)
    if warning:
        warnings.warn(warning, RuntimeWarning, stacklevel=2)

    # === Solve ===
    result = backend_impl.solve(design)

    return DeterminantSolution(_result=result)


def cofactor_determinant(matrix: Matrix) -> float:
    """Determinant by cofactor expansion, as a plain float."""
    return determinant(matrix, method='cofactor').value


def permutation_determinant(matrix: Matrix) -> float:
    """Determinant by permutation (Leibniz) expansion, as a plain float."""
    return determinant(matrix, method='permutation').value


def _get_backend(choice: MethodChoice):
    """
    Instantiate the backend for the chosen method.

    Raises:
        ValueError: If unknown method specified
    """
    if choice in ('cofactor', 'laplace'):
        return CofactorBackend()

    elif choice in ('permutation', 'leibniz'):
        return PermutationBackend()

    else:
        raise ValueError(f"Unknown method: {choice!r}")
