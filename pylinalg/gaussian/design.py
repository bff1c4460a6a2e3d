"""
GaussianDesign: validated augmented matrix for linear-system solving.

A system of n equations in n unknowns is stored as the n x (n+1)
augmented matrix [A | b]. The design holds its own clone; the solver
reduces that clone, never the caller's matrix.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import ArrayLike

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_finite, check_square, check_same_length
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.vector import Vector


@dataclass(frozen=True)
class GaussianDesign:
    """
    Design for Gaussian elimination.

    Construction:
        GaussianDesign.from_matrix(augmented)          # n x (n+1)
        GaussianDesign.from_system(coefficients, rhs)  # n x n and length n
        GaussianDesign.from_rows([[2, 3, 8], [4, 5, 14]])
    """
    _augmented: Matrix
    _n: int

    @classmethod
    def from_matrix(cls, augmented: Matrix) -> GaussianDesign:
        """
        Raises:
            ValidationError: If augmented is not n x (n+1) or holds NaN or Inf
        """
        if augmented.width != augmented.height + 1:
            raise ValidationError(
                f"augmented: expected n x (n+1) with a square coefficient block, "
                f"got width={augmented.width}, height={augmented.height}"
            )
        check_finite(augmented.to_numpy(), 'augmented')
        return cls(_augmented=augmented.clone(), _n=augmented.height)

    @classmethod
    def from_system(cls, coefficients: Matrix, rhs: Vector) -> GaussianDesign:
        """
        Build [coefficients | rhs].

        Raises:
            ValidationError: If coefficients is not square or an entry is NaN or Inf
            DimensionError: If rhs length differs from the number of rows
        """
        check_square(coefficients.width, coefficients.height, 'coefficients')
        check_same_length(rhs.size(), coefficients.height, 'rhs')

        augmented = coefficients.clone()
        column = Matrix(1, coefficients.height)
        column.paste_column(0, rhs)
        augmented.concatenate(column)
        return cls.from_matrix(augmented)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> GaussianDesign:
        return cls.from_matrix(Matrix.from_rows(rows))

    @property
    def augmented(self) -> Matrix:
        """The design's private copy of [A | b]."""
        return self._augmented

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    def __repr__(self) -> str:
        return f"GaussianDesign(n={self._n})"
