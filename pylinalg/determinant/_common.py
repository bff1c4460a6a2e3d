"""
Shared helpers for the determinant backends.
"""

from math import factorial

from pylinalg.core.compute.tolerances import FACTORIAL_WARNING_THRESHOLD


def factorial_cost_warning(method: str, n: int) -> str | None:
    """Warning text for an O(n!) expansion of an n x n matrix, or None if n is small."""
    if n <= FACTORIAL_WARNING_THRESHOLD:
        return None
    return (
        f"{method} expansion of a {n}x{n} matrix is O(n!) "
        f"({factorial(n)} terms) and will be slow"
    )
