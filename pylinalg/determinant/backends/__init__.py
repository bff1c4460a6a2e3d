"""
Determinant backends.

Available backends:
    CofactorBackend: recursive expansion along the first row
    PermutationBackend: Leibniz sum over all permutations
"""

from pylinalg.determinant.backends.cofactor import CofactorBackend
from pylinalg.determinant.backends.permutation import PermutationBackend

__all__ = [
    "CofactorBackend",
    "PermutationBackend",
]
