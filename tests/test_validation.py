"""
Tests for numeric validation of physical quantities.

Covers the finiteness gate, each constraint flag on its own, the fixed
check order, and list-valued quantities.
"""

import math
import pytest

from physics.errors import (
    ArrayShapeError, CalculationError, DomainViolation, MalformedInput,
)
from physics.validation import (
    ValidationRules, is_finite_number, validate_number, validate_sequence,
)


ALL_FLAGS = dict(check_zero=True, check_positive=True,
                 check_non_negative=True, check_integer=True)


class TestFiniteness:
    """Non-numbers and non-finite values fail before any constraint."""

    @pytest.mark.parametrize("value", [
        float("nan"), float("inf"), float("-inf"), "5", None, True, False,
        [1], {"v": 1}, 10 ** 400,
    ])
    def test_rejected_regardless_of_flags(self, value):
        for flags in ({}, ALL_FLAGS):
            with pytest.raises(MalformedInput) as exc:
                validate_number(value, "v", **flags)
            assert str(exc.value) == "v must be a finite number."

    @pytest.mark.parametrize("value", [0, -3, 2.5, 1e308, -1e-308])
    def test_finite_numbers_pass_without_flags(self, value):
        assert validate_number(value, "v") is None

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_number("x", "v")
        assert issubclass(MalformedInput, CalculationError)

    def test_is_finite_number(self):
        assert is_finite_number(1.5)
        assert not is_finite_number(True)
        assert not is_finite_number(math.nan)


class TestConstraints:
    """Each flag on its own."""

    def test_zero(self):
        with pytest.raises(DomainViolation, match="^r cannot be zero.$"):
            validate_number(0, "r", check_zero=True)
        validate_number(-1, "r", check_zero=True)

    def test_negative_zero_is_zero(self):
        with pytest.raises(DomainViolation, match="cannot be zero"):
            validate_number(-0.0, "r", check_zero=True)

    def test_positive(self):
        for value in (0, -1):
            with pytest.raises(DomainViolation,
                               match="^m must be a positive number.$"):
                validate_number(value, "m", check_positive=True)
        validate_number(1e-300, "m", check_positive=True)

    def test_non_negative(self):
        validate_number(0, "m", check_non_negative=True)
        with pytest.raises(DomainViolation, match="^m cannot be negative.$"):
            validate_number(-1, "m", check_non_negative=True)

    def test_integer(self):
        validate_number(3.0, "n", check_integer=True)
        validate_number(-2, "n", check_integer=True)
        with pytest.raises(DomainViolation, match="^n must be an integer.$"):
            validate_number(1.5, "n", check_integer=True)

    def test_zero_independent_of_non_negative(self):
        """0 passes non-negativity but fails the zero check."""
        validate_number(0, "x", check_non_negative=True)
        with pytest.raises(DomainViolation):
            validate_number(0, "x", check_zero=True)

    def test_rules_object(self):
        rules = ValidationRules(check_positive=True)
        with pytest.raises(DomainViolation):
            validate_number(-1, "x", rules)
        assert rules.as_dict() == {
            "check_zero": False, "check_positive": True,
            "check_non_negative": False, "check_integer": False,
        }


class TestCheckOrder:
    """zero -> positive -> non-negative -> integer; first failure wins."""

    def test_zero_before_positive(self):
        with pytest.raises(DomainViolation, match="cannot be zero"):
            validate_number(0, "x", **ALL_FLAGS)

    def test_positive_before_non_negative(self):
        with pytest.raises(DomainViolation, match="must be a positive number"):
            validate_number(-1, "x", check_positive=True,
                            check_non_negative=True)

    def test_sign_before_integer(self):
        with pytest.raises(DomainViolation, match="cannot be negative"):
            validate_number(-1.5, "x", check_non_negative=True,
                            check_integer=True)

    def test_integer_last(self):
        with pytest.raises(DomainViolation, match="must be an integer"):
            validate_number(2.5, "x", **ALL_FLAGS)

    def test_label_prefix(self):
        with pytest.raises(DomainViolation) as exc:
            validate_number(0, "atomicNumber (Z)", check_positive=True)
        assert str(exc.value) == "atomicNumber (Z) must be a positive number."


class TestSequences:
    """List-valued quantities."""

    def test_non_list_rejected(self):
        with pytest.raises(ArrayShapeError,
                           match="^resistances must be an array.$"):
            validate_sequence(5, "resistances")

    def test_element_named_by_index(self):
        with pytest.raises(MalformedInput,
                           match=r"^resistances\[2\] must be a finite number.$"):
            validate_sequence([1, 2, "x"], "resistances")

    def test_rules_apply_per_element(self):
        with pytest.raises(DomainViolation, match=r"c\[1\] cannot be zero"):
            validate_sequence([1, 0], "c", ValidationRules(check_zero=True))

    def test_empty_list_is_valid(self):
        validate_sequence([], "resistances")
