"""
Gaussian elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

from pylinalg.core.result import Result
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.vector import Vector


@dataclass(frozen=True)
class GaussianParams:
    """
    Parameter payload for Gaussian elimination.

    Attributes:
        reduced: The n x (n+1) matrix reduced to [I | x]
        n: Number of unknowns
        n_swaps: Row exchanges performed
        determinant: Determinant of the coefficient block, from the pivots
    """
    reduced: Matrix
    n: int
    n_swaps: int
    determinant: float


@dataclass
class GaussianSolution:
    """
    User-facing result of solving a linear system.

    The solution vector is read from the last column of the reduced matrix.
    Accessors return copies, so mutating them leaves the solution intact.
    """
    _result: Result[GaussianParams]

    @property
    def reduced(self) -> Matrix:
        """Copy of the reduced augmented matrix [I | x]."""
        return self._result.params.reduced.clone()

    @property
    def solution(self) -> Vector:
        """The unique solution x, as a new Vector."""
        params = self._result.params
        return params.reduced.get_column(params.n)

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def n_swaps(self) -> int:
        return self._result.params.n_swaps

    @property
    def determinant(self) -> float:
        return self._result.params.determinant

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        """Short text report: one line per unknown plus diagnostics."""
        lines = [f"Gaussian elimination ({self.info['pivoting']} pivoting)"]
        for i, value in enumerate(self.solution):
            lines.append(f"  x[{i}] = {value!r}")
        lines.append(f"  row swaps:   {self.n_swaps}")
        lines.append(f"  determinant: {self.determinant!r}")
        if self.timing is not None:
            lines.append(f"  time:        {self.timing['total_seconds']:.6f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GaussianSolution(n={self.n}, solution={list(self.solution)!r})"
