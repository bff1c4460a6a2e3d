"""
Determinant solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

from pylinalg.core.result import Result


@dataclass(frozen=True)
class DeterminantParams:
    """
    Parameter payload for determinant computation.

    This is the immutable data computed by backends.
    """
    value: float
    n: int


@dataclass
class DeterminantSolution:
    """
    User-facing determinant result.

    Wraps the backend Result. Converts to float, so
    float(determinant(A)) gives the plain value.
    """
    _result: Result[DeterminantParams]

    @property
    def value(self) -> float:
        return self._result.params.value

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __float__(self) -> float:
        return self.value

    def summary(self) -> str:
        """Short text report of the computation."""
        lines = [
            f"Determinant ({self.method})",
            f"  dimension: {self.n} x {self.n}",
            f"  value:     {self.value!r}",
        ]
        for key in ('n_minors', 'n_permutations'):
            if key in self.info:
                lines.append(f"  {key}: {self.info[key]}")
        if self.timing is not None:
            lines.append(f"  time:      {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"  warning:   {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DeterminantSolution(value={self.value!r}, n={self.n}, method={self.method!r})"
