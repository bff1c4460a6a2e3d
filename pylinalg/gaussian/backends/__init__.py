"""
Gaussian elimination backends.

Available backends:
    GaussJordanBackend: CPU reduction to [I | x] with optional partial pivoting
"""

from pylinalg.gaussian.backends.cpu import GaussJordanBackend

__all__ = [
    "GaussJordanBackend",
]
