"""
Gauss-Jordan elimination backend.

Reduces [A | b] to [I | x] with the three elementary row transformations.
For each column r:
    1. pivot search among rows r..n-1
    2. swap the pivot row into position r            (type 1)
    3. divide row r by its pivot                     (type 2)
    4. clear column r in every other row             (type 3)

Fails with SingularMatrixError as soon as a column has no usable pivot.
"""

from typing import Any, Literal

import numpy as np

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import PIVOT_TOLERANCE
from pylinalg.gaussian.design import GaussianDesign
from pylinalg.gaussian.solution import GaussianParams
from pylinalg.gaussian.transformations import swap_rows, scale_row, add_scaled_row
from pylinalg.matrix.matrix import Matrix


PivotingChoice = Literal['partial', 'none']


class GaussJordanBackend:
    """
    CPU Gauss-Jordan elimination.

    Implements the Backend protocol for GaussianDesign -> GaussianParams.

    Args:
        tol: Relative pivot tolerance. A pivot with magnitude <= tol times
            the largest coefficient magnitude of the input counts as zero,
            independent of the scale of A
        pivoting: 'partial' picks the largest-magnitude candidate,
            'none' picks the first non-negligible one (textbook variant,
            only advisable for exact input)
    """

    def __init__(self, tol: float = PIVOT_TOLERANCE, pivoting: PivotingChoice = 'partial'):
        if pivoting not in ('partial', 'none'):
            raise ValueError(f"Unknown pivoting: {pivoting!r}")
        self._tol = tol
        self._pivoting = pivoting

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: GaussianDesign) -> Result[GaussianParams]:
        """
        Reduce the design's augmented matrix in place.

        Raises:
            SingularMatrixError: If some column has no pivot above the threshold
        """
        A = design.augmented
        n = design.n
        n_swaps = 0
        pivot_product = 1.0
        # taken from the input, not updated as rows are reduced
        threshold = self._tol * _coefficient_scale(A, n)

        with Timer() as timer:
            for r in range(n):
                with timer.section('pivot_search'):
                    pivot_row = self._find_pivot(A, r, n, threshold)

                if pivot_row is None:
                    raise SingularMatrixError(
                        f"No pivot in column {r}: all candidates have magnitude <= "
                        f"{threshold} (tol={self._tol} relative to the largest "
                        f"coefficient). The system is singular, inconsistent or "
                        f"underdetermined.",
                        matrix_name='coefficients',
                        column=r,
                        rank=r,
                        expected_rank=n,
                    )

                with timer.section('row_swap'):
                    if pivot_row != r:
                        swap_rows(A, r, pivot_row)
                        n_swaps += 1

                with timer.section('normalize'):
                    pivot = A.get(r, r)
                    pivot_product *= pivot
                    scale_row(A, r, 1.0 / pivot)
                    # remove rounding residue on the diagonal
                    A.set(r, r, 1.0)

                with timer.section('eliminate'):
                    for i in range(n):
                        if i == r:
                            continue
                        factor = A.get(r, i)
                        if factor != 0.0:
                            add_scaled_row(A, r, i, -factor)
                            A.set(r, i, 0.0)

        determinant = -pivot_product if n_swaps % 2 else pivot_product

        params = GaussianParams(
            reduced=A,
            n=n,
            n_swaps=n_swaps,
            determinant=determinant,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'pivoting': self._pivoting,
            'tol': self._tol,
            'pivot_threshold': threshold,
            'n_swaps': n_swaps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )

    def _find_pivot(self, A: Matrix, r: int, n: int, threshold: float) -> int | None:
        """Row index of the pivot for column r, or None if there is none."""
        if self._pivoting == 'none':
            for i in range(r, n):
                if abs(A.get(r, i)) > threshold:
                    return i
            return None

        best_row = r
        best = abs(A.get(r, r))
        for i in range(r + 1, n):
            candidate = abs(A.get(r, i))
            if candidate > best:
                best_row, best = i, candidate
        if best <= threshold:
            return None
        return best_row


def _coefficient_scale(A: Matrix, n: int) -> float:
    """Largest magnitude in the n x n coefficient block; 0.0 when n == 0."""
    if n == 0:
        return 0.0
    return float(np.max(np.abs(A.to_numpy()[:, :n])))
