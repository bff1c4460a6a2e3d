"""
Linear systems by Gaussian (Gauss-Jordan) elimination.

Public API:
    solve(augmented, ...) -> GaussianSolution
    swap_rows, scale_row, add_scaled_row   elementary row transformations

Example:
    >>> from pylinalg.matrix import Matrix
    >>> from pylinalg.gaussian import solve
    >>> result = solve(Matrix.from_rows([[2, 3, 8], [4, 5, 14]]))
    >>> print(result.summary())
"""

from pylinalg.gaussian.design import GaussianDesign
from pylinalg.gaussian.solution import GaussianSolution, GaussianParams
from pylinalg.gaussian.solvers import solve
from pylinalg.gaussian.transformations import swap_rows, scale_row, add_scaled_row

__all__ = [
    "solve",
    "swap_rows",
    "scale_row",
    "add_scaled_row",
    "GaussianDesign",
    "GaussianSolution",
    "GaussianParams",
]
