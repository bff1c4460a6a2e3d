"""
Tests for Vector.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, IndexOutOfRangeError, ValidationError
from pylinalg.matrix import Vector


class TestConstruction:

    def test_zero_vector(self):
        v = Vector(3)
        assert v.size() == 3
        assert list(v) == [0.0, 0.0, 0.0]

    def test_empty(self):
        assert len(Vector(0)) == 0
        assert len(Vector([])) == 0

    def test_from_values(self):
        v = Vector([1, 2, 3])
        assert v.get(2) == 3.0

    def test_values_copied(self):
        data = np.array([1.0, 2.0])
        v = Vector(data)
        data[0] = 99.0
        assert v.get(0) == 1.0

    def test_negative_size(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            Vector(-1)

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            Vector([[1, 2], [3, 4]])

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            Vector([1 + 2j, 3])


class TestAccess:

    def test_set_get(self):
        v = Vector(2)
        v.set(1, 4.5)
        assert v.get(1) == 4.5

    @pytest.mark.parametrize("index", [-1, 3])
    def test_get_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError):
            Vector([1, 2, 3]).get(index)

    def test_set_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            Vector(2).set(2, 1.0)

    def test_set_non_real_value(self):
        v = Vector([1, 2])
        with pytest.raises(ValidationError, match="value"):
            v.set(0, "abc")
        assert list(v) == [1.0, 2.0]


class TestArithmetic:

    def test_add(self):
        v = Vector([1, 2, 3])
        v.add(Vector([10, 20, 30]))
        assert list(v) == [11.0, 22.0, 33.0]

    def test_add_size_mismatch(self):
        v = Vector([1, 2, 3])
        with pytest.raises(DimensionError):
            v.add(Vector([1, 2]))
        assert list(v) == [1.0, 2.0, 3.0]

    def test_scale(self):
        v = Vector([1, -2])
        v.scale(-3)
        assert list(v) == [-3.0, 6.0]

    def test_scalar_product(self):
        assert Vector([1, 2, 3]).scalar_product(Vector([4, 5, 6])) == 32.0

    def test_scalar_product_mismatch(self):
        with pytest.raises(DimensionError):
            Vector([1, 2, 3]).scalar_product(Vector([1]))

    def test_sum(self):
        assert Vector([1.5, 2.5, -1]).sum() == 3.0
        assert Vector(0).sum() == 0.0


class TestClone:

    def test_independent(self):
        v = Vector([1, 2])
        c = v.clone()
        c.set(0, 7.0)
        assert v.get(0) == 1.0
        assert c == Vector([7, 2])

    def test_to_numpy_is_copy(self):
        v = Vector([1, 2])
        arr = v.to_numpy()
        arr[0] = 5.0
        assert v.get(0) == 1.0

    def test_repr(self):
        assert repr(Vector([1, 2])) == "Vector([1.0, 2.0])"
