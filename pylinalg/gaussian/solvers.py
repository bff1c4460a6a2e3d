"""
Solver dispatch for linear systems.

This module provides the solve() function (public API).
"""

from __future__ import annotations

from pylinalg.core.compute.tolerances import PIVOT_TOLERANCE
from pylinalg.core.validation import check_tolerance
from pylinalg.gaussian.design import GaussianDesign
from pylinalg.gaussian.solution import GaussianSolution
from pylinalg.gaussian.backends.cpu import GaussJordanBackend, PivotingChoice
from pylinalg.matrix.matrix import Matrix


def solve(
    augmented: Matrix | GaussianDesign,
    *,
    tol: float = PIVOT_TOLERANCE,
    pivoting: PivotingChoice = 'partial',
) -> GaussianSolution:
    """
    Solve the n x n linear system given as augmented matrix [A | b].

    The matrix is reduced by Gauss-Jordan elimination to [I | x]; the
    caller's matrix is left untouched.

    Args:
        augmented: n x (n+1) Matrix, or a GaussianDesign
        tol: Relative pivot tolerance. Pivots at or below tol times the
            largest coefficient magnitude count as zero
        pivoting: 'partial' (default) or 'none'

    Returns:
        GaussianSolution with the reduced matrix and solution vector

    Raises:
        ValidationError: If augmented is not n x (n+1), holds NaN or Inf,
            or tol is invalid
        ValueError: If pivoting is unknown
        SingularMatrixError: If A is singular (no unique solution)

    Example:
        >>> from pylinalg.matrix import Matrix
        >>> from pylinalg.gaussian import solve
        >>> result = solve(Matrix.from_rows([[2, 3, 8], [4, 5, 14]]))
        >>> list(result.solution)
        [1.0, 2.0]
    """
    check_tolerance(tol, 'tol')

    if isinstance(augmented, GaussianDesign):
        # reduce a fresh copy so a design can be solved more than once
        design = GaussianDesign.from_matrix(augmented.augmented)
    else:
        design = GaussianDesign.from_matrix(augmented)

    backend_impl = GaussJordanBackend(tol=tol, pivoting=pivoting)
    result = backend_impl.solve(design)

    return GaussianSolution(_result=result)
