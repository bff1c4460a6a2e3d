"""
Elementary row transformations.

The three operations Gaussian elimination is built from. They act in
place on any Matrix and are usable on their own:

    type 1  swap_rows        exchange two rows
    type 2  scale_row        multiply a row by a factor
    type 3  add_scaled_row   add a multiple of one row to another

Each validates its row indices and raises IndexOutOfRangeError.
"""

from pylinalg.core.validation import check_index
from pylinalg.matrix.matrix import Matrix


def swap_rows(matrix: Matrix, first: int, second: int) -> None:
    """Type 1: exchange rows first and second."""
    check_index(first, matrix.height, 'first')
    check_index(second, matrix.height, 'second')
    if first == second:
        return
    first_row = matrix.get_row(first)
    second_row = matrix.get_row(second)
    matrix.paste_row(first, second_row)
    matrix.paste_row(second, first_row)


def scale_row(matrix: Matrix, row: int, factor: float) -> None:
    """Type 2: multiply every entry of row by factor."""
    matrix.scale_row(row, factor)


def add_scaled_row(matrix: Matrix, source: int, target: int, factor: float) -> None:
    """Type 3: row[target] += factor * row[source]."""
    check_index(target, matrix.height, 'target')
    source_row = matrix.get_row(source)
    source_row.scale(factor)
    matrix.add_to_row(target, source_row)
