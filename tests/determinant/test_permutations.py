"""
Tests for permutation enumeration and sign helpers.
"""

import itertools
from math import factorial

import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.determinant._permutations import (
    cycle_parity_sign,
    next_permutation,
    permutation_sign,
    permutations_lexicographic,
    product_sign,
)


class TestNextPermutation:

    def test_successor(self):
        perm = [0, 2, 1]
        assert next_permutation(perm)
        assert perm == [1, 0, 2]

    def test_last_permutation_unchanged(self):
        perm = [2, 1, 0]
        assert not next_permutation(perm)
        assert perm == [2, 1, 0]

    def test_trivial_lengths(self):
        assert not next_permutation([])
        assert not next_permutation([0])


class TestEnumeration:

    @pytest.mark.parametrize("n", range(0, 6))
    def test_count(self, n):
        assert len(list(permutations_lexicographic(n))) == factorial(n)

    @pytest.mark.parametrize("n", range(1, 6))
    def test_matches_itertools_order(self, n):
        assert list(permutations_lexicographic(n)) == list(itertools.permutations(range(n)))


class TestSign:

    def test_identity_positive(self):
        assert permutation_sign([0, 1, 2, 3]) == 1

    def test_single_transposition_negative(self):
        assert permutation_sign([1, 0, 2]) == -1

    def test_three_cycle_positive(self):
        assert permutation_sign([1, 2, 0]) == 1

    def test_empty(self):
        assert permutation_sign([]) == 1
        assert product_sign([]) == 1

    @pytest.mark.parametrize("n", range(1, 7))
    def test_parity_agrees_with_product_formula(self, n):
        for perm in permutations_lexicographic(n):
            assert permutation_sign(perm) == product_sign(perm)
            assert cycle_parity_sign(perm) == product_sign(perm)

    @pytest.mark.parametrize("bad", [[0, 0], [1, 2], [0, 2, 3]])
    def test_rejects_non_permutations(self, bad):
        with pytest.raises(ValidationError, match="permutation"):
            permutation_sign(bad)
        with pytest.raises(ValidationError):
            product_sign(bad)
