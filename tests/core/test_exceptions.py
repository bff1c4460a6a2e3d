"""
Tests for PyLinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinalgError)
    - IndexOutOfRangeError doubles as a builtin IndexError
    - Diagnostic attributes on IndexOutOfRangeError and SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    PyLinalgError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinalgError."""

    def test_validation_error_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("size mismatch")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("row 5 out of range", index=5, bound=3)

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("row 5 out of range")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestIndexOutOfRangeError:

    def test_attributes(self):
        err = IndexOutOfRangeError("x: index 4 out of range [0, 2)", index=4, bound=2)
        assert str(err) == "x: index 4 out of range [0, 2)"
        assert err.index == 4
        assert err.bound == 2

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("bad")
        assert err.index is None
        assert err.bound is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "No pivot in column 1",
            matrix_name="coefficients",
            column=1,
            rank=1,
            expected_rank=2,
        )
        assert str(err) == "No pivot in column 1"
        assert err.matrix_name == "coefficients"
        assert err.column == 1
        assert err.rank == 1
        assert err.expected_rank == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.column is None
        assert err.rank is None
        assert err.expected_rank is None
