"""
DeterminantDesign: validated input for determinant algorithms.

Squareness is checked once here, so the backends never validate. The
design holds its own clone of the input matrix: the caller's matrix is
never seen, let alone mutated, by an algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import ArrayLike

from pylinalg.core.validation import check_finite, check_square
from pylinalg.matrix.matrix import Matrix


@dataclass(frozen=True)
class DeterminantDesign:
    """
    Design for determinant computation.

    Wraps an n x n matrix (n >= 0). Immutable after construction.

    Construction:
        DeterminantDesign.from_matrix(A)
        DeterminantDesign.from_rows([[1, 2], [3, 4]])
    """
    _matrix: Matrix
    _n: int

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> DeterminantDesign:
        """
        Raises:
            ValidationError: If matrix is not square or holds NaN or Inf
        """
        check_square(matrix.width, matrix.height, 'matrix')
        check_finite(matrix.to_numpy(), 'matrix')
        return cls(_matrix=matrix.clone(), _n=matrix.width)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> DeterminantDesign:
        return cls.from_matrix(Matrix.from_rows(rows))

    @property
    def matrix(self) -> Matrix:
        """The design's private copy. Backends must treat it as read-only."""
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._n

    def __repr__(self) -> str:
        return f"DeterminantDesign(n={self._n})"
