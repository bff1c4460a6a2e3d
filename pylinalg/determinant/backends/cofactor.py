"""
Cofactor (Laplace) expansion backend.

Expands along the first row: each minor is built from a clone of the
current matrix with row 0 and one column removed, and evaluated
recursively. O(n!) multiplications; kept as the naive baseline.
"""

from typing import Any

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.determinant._common import factorial_cost_warning
from pylinalg.determinant.design import DeterminantDesign
from pylinalg.determinant.solution import DeterminantParams
from pylinalg.matrix.matrix import Matrix


class CofactorBackend:
    """
    Recursive cofactor expansion.

    Implements the Backend protocol for DeterminantDesign -> DeterminantParams.
    Recursion depth equals the matrix dimension.
    """

    @property
    def name(self) -> str:
        return 'cpu_cofactor'

    def solve(self, design: DeterminantDesign) -> Result[DeterminantParams]:
        """
        Expand the determinant of design.matrix along its first row.

        The 0 x 0 matrix has determinant 1 (empty product).
        """
        n_minors = [0]
        with Timer() as timer, timer.section('expansion'):
            if design.n == 0:
                value = 1.0
            else:
                value = _expand(design.matrix, n_minors)

        warning = factorial_cost_warning('Cofactor', design.n)

        info: dict[str, Any] = {
            'method': 'cofactor',
            'n_minors': n_minors[0],
        }

        return Result(
            params=DeterminantParams(value=value, n=design.n),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(warning,) if warning else (),
        )


def _expand(matrix: Matrix, n_minors: list[int]) -> float:
    if matrix.height == 1:
        return matrix.get(0, 0)

    determinant = 0.0
    for x in range(matrix.width):
        minor = matrix.clone()
        minor.remove_row(0)
        minor.remove_column(x)
        n_minors[0] += 1

        if x % 2 == 0:
            determinant += matrix.get(x, 0) * _expand(minor, n_minors)
        else:
            determinant -= matrix.get(x, 0) * _expand(minor, n_minors)
    return determinant
