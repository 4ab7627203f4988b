"""
Tests for result formatting.

The formatter picks fixed-point or exponential notation by magnitude
and by how much of the fixed-point text is zeros. Rounding is half-up
on the exact binary value of the float.
"""

import math
import pytest

from physics.errors import FormattingError
from physics.formatting import (
    DEFAULT_DIGITS, format_number, resolve_digits, to_exponential, to_fixed,
)


class TestZeroAndNonFinite:

    @pytest.mark.parametrize("digits", [0, 2, 4, 16])
    def test_zero_is_integer_zero(self, digits):
        result = format_number(0, digits)
        assert result == 0
        assert isinstance(result, int)

    def test_negative_zero(self):
        assert format_number(-0.0, 4) == 0

    def test_nan_passes_through(self):
        assert math.isnan(format_number(float("nan"), 4))

    def test_infinities_pass_through(self):
        assert format_number(math.inf, 4) == math.inf
        assert format_number(-math.inf, 2) == -math.inf


class TestLargeMagnitudes:
    """|x| >= 1e12 always goes through exponential notation."""

    def test_threshold_is_exponential(self):
        assert format_number(1e12, 2) == 1e12

    def test_mantissa_rounded(self):
        assert format_number(123456789012345, 2) == 1.23e14

    def test_negative(self):
        assert format_number(-2.56e15, 1) == -2.6e15

    def test_negative_threshold_is_exponential(self):
        assert format_number(-1e12, 4) == -1e12
        assert to_exponential(-1e12, 2) == "-1.00e+12"

    def test_negative_just_inside_threshold_is_fixed(self):
        assert format_number(-999999999999.5, 1) == -999999999999.5
        assert to_fixed(-999999999999.5, 1) == "-999999999999.5"

    def test_negative_rounds_across_threshold(self):
        # fixed text "-1000000000000", not exponential
        assert format_number(-999999999999.5, 0) == -1e12

    def test_mantissa_carry_into_next_decade(self):
        assert format_number(9.99996e12, 4) == 1e13

    def test_zero_digits(self):
        assert format_number(1234567890123, 0) == 1e12

    def test_overflow_scale(self):
        assert format_number(1e308, 4) == 1e308


class TestFixedRange:
    """1 <= |x| < 1e12 is fixed-point."""

    def test_just_below_threshold(self):
        assert format_number(999999999999.25, 1) == 999999999999.3

    def test_one(self):
        assert format_number(1, 4) == 1.0

    def test_rounding(self):
        assert format_number(3.14159265, 4) == 3.1416
        assert format_number(-8.99e9, 4) == -8990000000

    def test_zero_digits(self):
        assert format_number(7.6, 0) == 8.0


class TestSmallMagnitudes:
    """0 < |x| < 1 switches to exponential when the fixed text is mostly zeros."""

    def test_mostly_zeros(self):
        assert format_number(0.00001, 2) == 1e-05

    def test_exactly_half_zeros_is_exponential(self):
        # "0.0012": three zeros out of six characters
        assert format_number(0.001234, 4) == 0.001234

    def test_few_zeros_stays_fixed(self):
        assert format_number(0.123456, 4) == 0.1235

    def test_point_six(self):
        assert format_number(0.6, 2) == 0.6

    def test_sign_counts_toward_length(self):
        # "-0.0012": three zeros out of seven characters stays fixed
        assert format_number(-0.001234, 4) == -0.0012

    def test_rounds_to_zero_text(self):
        assert format_number(4e-9, 4) == 4e-09


class TestHalfUpRounding:
    """Ties round away from zero, on the exact binary value."""

    def test_exact_tie_rounds_up(self):
        assert format_number(2.5, 0) == 3.0
        assert format_number(0.125, 2) == 0.13

    def test_negative_tie_rounds_away_from_zero(self):
        assert format_number(-2.5, 0) == -3.0

    def test_binary_value_below_tie(self):
        # 1.005 is stored as 1.00499999999999989...
        assert format_number(1.005, 2) == 1.0

    def test_text_renderings(self):
        assert to_fixed(2.5, 0) == "3"
        assert to_fixed(-0.5, 2) == "-0.50"
        assert to_exponential(123456, 2) == "1.23e+5"
        assert to_exponential(0.125, 1) == "1.3e-1"
        assert to_exponential(9.99996e12, 4) == "1.0000e+13"


class TestIdempotence:

    @pytest.mark.parametrize("value", [
        3.14159, 0.00042, 123.456, -0.07, 5e-9, 0.5, 42.0, 6.02214076e23,
    ])
    @pytest.mark.parametrize("digits", [2, 4, 6])
    def test_format_twice_is_format_once(self, value, digits):
        once = format_number(value, digits)
        assert format_number(once, digits) == once


class TestInvalidInput:

    @pytest.mark.parametrize("value", ["1", None, True, [1.0]])
    def test_non_number_value(self, value):
        with pytest.raises(FormattingError, match="value must be a number"):
            format_number(value, 4)

    @pytest.mark.parametrize("digits", [-1, 1.5, 101, "2", None, True,
                                        float("nan")])
    def test_bad_digits(self, digits):
        with pytest.raises(FormattingError, match="digits must be an integer"):
            format_number(1.0, digits)

    def test_integral_float_digits_accepted(self):
        assert format_number(1.23456, 2.0) == 1.23

    def test_digit_bounds(self):
        assert format_number(1.5, 0) == 2.0
        assert format_number(1.5, 100) == 1.5


class TestResolveDigits:

    def test_default(self):
        assert resolve_digits({}) == DEFAULT_DIGITS == 4

    def test_from_body(self):
        assert resolve_digits({"digits": 2}) == 2
