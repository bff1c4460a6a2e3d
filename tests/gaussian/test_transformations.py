"""
Tests for the elementary row transformations.
"""

import pytest

from pylinalg.core.exceptions import IndexOutOfRangeError
from pylinalg.gaussian import add_scaled_row, scale_row, swap_rows
from pylinalg.matrix import Matrix


@pytest.fixture
def M():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


class TestSwapRows:

    def test_swap(self, M):
        swap_rows(M, 0, 2)
        assert M == Matrix.from_rows([[7, 8, 9], [4, 5, 6], [1, 2, 3]])

    def test_swap_same_row_is_noop(self, M):
        before = M.clone()
        swap_rows(M, 1, 1)
        assert M == before

    def test_invalid_index(self, M):
        with pytest.raises(IndexOutOfRangeError):
            swap_rows(M, 0, 3)


class TestScaleRow:

    def test_scale(self, M):
        scale_row(M, 1, 0.5)
        assert list(M.get_row(1)) == [2.0, 2.5, 3.0]

    def test_invalid_index(self, M):
        with pytest.raises(IndexOutOfRangeError):
            scale_row(M, -1, 2.0)


class TestAddScaledRow:

    def test_add(self, M):
        add_scaled_row(M, 0, 2, -7.0)
        assert list(M.get_row(2)) == [0.0, -6.0, -12.0]
        assert list(M.get_row(0)) == [1.0, 2.0, 3.0]

    def test_add_to_itself(self, M):
        add_scaled_row(M, 1, 1, 1.0)
        assert list(M.get_row(1)) == [8.0, 10.0, 12.0]

    def test_invalid_indices(self, M):
        before = M.clone()
        with pytest.raises(IndexOutOfRangeError):
            add_scaled_row(M, 5, 0, 1.0)
        with pytest.raises(IndexOutOfRangeError):
            add_scaled_row(M, 0, 5, 1.0)
        assert M == before
