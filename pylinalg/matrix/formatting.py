"""
Plain-text rendering of matrices and vectors.

Kept apart from Matrix and Vector: the data types never print.

Layout:
    matrix      every entry followed by a tab, one row per line,
                then one blank line
    vector      horizontal: entries tab-terminated on one line
                vertical:   one tab-terminated entry per line, then a blank line
"""

from __future__ import annotations

import sys
from typing import TextIO

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.vector import Vector


def _cell(value: float) -> str:
    return repr(float(value)) + "\t"


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix as tab-separated rows followed by a blank line."""
    lines = []
    for y in range(matrix.height):
        row = matrix.get_row(y)
        lines.append("".join(_cell(v) for v in row))
    return "".join(line + "\n" for line in lines) + "\n"


def format_vector(vector: Vector, *, vertical: bool = False) -> str:
    """Render a vector on one line, or one entry per line when vertical."""
    if vertical:
        return "".join(_cell(v) + "\n" for v in vector) + "\n"
    return "".join(_cell(v) for v in vector) + "\n"


def print_matrix(matrix: Matrix, file: TextIO | None = None) -> None:
    (file or sys.stdout).write(format_matrix(matrix))


def print_vector(
    vector: Vector,
    *,
    vertical: bool = False,
    file: TextIO | None = None,
) -> None:
    (file or sys.stdout).write(format_vector(vector, vertical=vertical))
