"""
Tests for text rendering of matrices and vectors.
"""

import io

from pylinalg.matrix import (
    Matrix,
    Vector,
    format_matrix,
    format_vector,
    print_matrix,
    print_vector,
)


class TestFormatMatrix:

    def test_tab_terminated_rows_then_blank_line(self):
        A = Matrix.from_rows([[1, 2], [3, 4.5]])
        assert format_matrix(A) == "1.0\t2.0\t\n3.0\t4.5\t\n\n"

    def test_empty_matrix(self):
        assert format_matrix(Matrix(0, 0)) == "\n"

    def test_print_to_file(self):
        buffer = io.StringIO()
        print_matrix(Matrix.identity(1), file=buffer)
        assert buffer.getvalue() == "1.0\t\n\n"


class TestFormatVector:

    def test_horizontal(self):
        assert format_vector(Vector([1, 2, 3])) == "1.0\t2.0\t3.0\t\n"

    def test_vertical(self):
        assert format_vector(Vector([1, 2]), vertical=True) == "1.0\t\n2.0\t\n\n"

    def test_print_vector(self):
        buffer = io.StringIO()
        print_vector(Vector([-1]), file=buffer)
        assert buffer.getvalue() == "-1.0\t\n"
