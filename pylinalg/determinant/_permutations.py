"""
Permutation enumeration and sign.

Permutations are lists holding each of 0..n-1 exactly once. Enumeration
is lexicographic, starting from the identity.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from pylinalg.core.exceptions import ValidationError


def next_permutation(perm: list[int]) -> bool:
    """
    Advance perm to its lexicographic successor, in place.

    Finds the rightmost ascent perm[i] < perm[i+1], swaps perm[i] with the
    smallest larger element to its right, then reverses the suffix.

    Returns:
        False if perm was already the last permutation (left unchanged),
        True otherwise
    """
    i = len(perm) - 2
    while i >= 0 and perm[i] >= perm[i + 1]:
        i -= 1
    if i < 0:
        return False

    # suffix perm[i+1:] is non-increasing, so scan from the right
    j = len(perm) - 1
    while perm[j] <= perm[i]:
        j -= 1
    perm[i], perm[j] = perm[j], perm[i]
    perm[i + 1:] = reversed(perm[i + 1:])
    return True


def permutations_lexicographic(n: int) -> Iterator[tuple[int, ...]]:
    """Yield all n! permutations of range(n) in lexicographic order."""
    perm = list(range(n))
    yield tuple(perm)
    while next_permutation(perm):
        yield tuple(perm)


def _check_permutation(perm: Sequence[int]) -> None:
    if sorted(perm) != list(range(len(perm))):
        raise ValidationError(
            f"perm: expected a permutation of 0..{len(perm) - 1}, got {list(perm)}"
        )


def permutation_sign(perm: Sequence[int]) -> int:
    """
    Sign of a permutation from the parity of its cycle decomposition.

    A cycle of length k is k - 1 transpositions.

    Raises:
        ValidationError: If perm is not a permutation of 0..n-1
    """
    _check_permutation(perm)
    return cycle_parity_sign(perm)


def cycle_parity_sign(perm: Sequence[int]) -> int:
    """Unchecked permutation_sign for permutations produced by the enumerator."""
    n = len(perm)
    seen = [False] * n
    transpositions = 0
    for start in range(n):
        if seen[start]:
            continue
        length = 0
        k = start
        while not seen[k]:
            seen[k] = True
            k = perm[k]
            length += 1
        transpositions += length - 1
    return -1 if transpositions % 2 else 1


def product_sign(perm: Sequence[int]) -> int:
    """
    Sign of a permutation as prod_{i<j} (perm[j] - perm[i]) / (j - i).

    Numerator and denominator are accumulated as exact integers.

    Raises:
        ValidationError: If perm is not a permutation of 0..n-1
    """
    _check_permutation(perm)
    numerator = 1
    denominator = 1
    n = len(perm)
    for i in range(n):
        for j in range(i + 1, n):
            numerator *= perm[j] - perm[i]
            denominator *= j - i
    return numerator // denominator
