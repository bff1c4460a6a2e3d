"""
Vector: fixed-length sequence of real numbers.

Storage is a private float64 numpy array. Values passed in are always
copied, so a Vector never aliases caller-owned data. The size is fixed at
construction; add(), scale() and set() mutate in place.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.validation import (
    check_array,
    check_ndim,
    check_index,
    check_non_negative_size,
    check_same_length,
    check_scalar,
)


class Vector:
    """
    Ordered, fixed-size sequence of floats.

    Construction:
        Vector(3)                 # zero vector of size 3
        Vector([1.0, 2.0, 3.0])   # values are copied
    """

    __slots__ = ('_values',)

    def __init__(self, size_or_values: int | ArrayLike):
        if isinstance(size_or_values, (int, np.integer)) and not isinstance(size_or_values, bool):
            check_non_negative_size(size_or_values, 'size')
            self._values = np.zeros(int(size_or_values), dtype=np.float64)
        else:
            values = check_array(size_or_values, 'values')
            check_ndim(values, 1, 'values')
            self._values = values

    @classmethod
    def _wrap(cls, values: NDArray[np.floating[Any]]) -> Vector:
        """Adopt an already-owned float64 array without copying."""
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    def size(self) -> int:
        return self._values.shape[0]

    def __len__(self) -> int:
        return self.size()

    def get(self, index: int) -> float:
        check_index(index, self.size(), 'index')
        return float(self._values[index])

    def set(self, index: int, value: float) -> None:
        check_index(index, self.size(), 'index')
        self._values[index] = check_scalar(value, 'value')

    def add(self, other: Vector) -> None:
        """Element-wise sum, in place."""
        check_same_length(other.size(), self.size(), 'other')
        self._values += other._values

    def scale(self, factor: float) -> None:
        """Multiply every element by factor, in place."""
        self._values *= check_scalar(factor, 'factor')

    def scalar_product(self, other: Vector) -> float:
        """Dot product with a vector of the same size."""
        check_same_length(other.size(), self.size(), 'other')
        return float(np.dot(self._values, other._values))

    def sum(self) -> float:
        return float(np.sum(self._values))

    def clone(self) -> Vector:
        return Vector._wrap(self._values.copy())

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the values as a 1D float64 array."""
        return self._values.copy()

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()})"
