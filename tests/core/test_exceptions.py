"""
Tests for the figfit exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via FigFitError)
    - Diagnostic attributes on InsufficientSamplesError,
      DegenerateInputError, UndefinedOperationError
    - Default attribute values (None for optional attributes)
"""

import pytest

from figfit.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    FigFitError,
    InsufficientSamplesError,
    NumericalError,
    UndefinedOperationError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via FigFitError."""

    def test_validation_error_is_figfit_error(self):
        with pytest.raises(FigFitError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_insufficient_samples_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InsufficientSamplesError("too few")

    def test_degenerate_input_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateInputError("collinear")

    def test_undefined_operation_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise UndefinedOperationError("zero vector")

    def test_numerical_error_is_figfit_error(self):
        with pytest.raises(FigFitError):
            raise NumericalError("failed")

    def test_degenerate_input_is_not_validation_error(self):
        err = DegenerateInputError("collinear")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInsufficientSamplesError:

    def test_all_attributes(self):
        err = InsufficientSamplesError(
            "circle: requires at least 3 samples, got 2",
            figure="circle",
            required=3,
            actual=2,
        )
        assert str(err) == "circle: requires at least 3 samples, got 2"
        assert err.figure == "circle"
        assert err.required == 3
        assert err.actual == 2

    def test_defaults_are_none(self):
        err = InsufficientSamplesError("too few")
        assert err.figure is None
        assert err.required is None
        assert err.actual is None


class TestDegenerateInputError:

    def test_reason(self):
        err = DegenerateInputError("points coincide", reason="coincident_points")
        assert err.reason == "coincident_points"
        assert "coincide" in str(err)

    def test_reason_default_none(self):
        assert DegenerateInputError("x").reason is None


class TestUndefinedOperationError:

    def test_operation(self):
        err = UndefinedOperationError("zero vector", operation="normalize")
        assert err.operation == "normalize"

    def test_operation_default_none(self):
        assert UndefinedOperationError("x").operation is None
