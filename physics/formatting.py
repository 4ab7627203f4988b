"""
Numeric formatting of formula results.

Results are rounded to a fixed number of fractional digits and returned
as numbers, switching between fixed-point and exponential notation:

    |x| >= 1e12          exponential (mantissa rounded to `digits`)
    1 <= |x| < 1e12      fixed-point
    0 < |x| < 1          fixed-point, unless the fixed text is at least
                         half '0' characters, then exponential
    x == 0               integer 0

Rounding is half-up on the exact binary value of the float (ties go
away from zero), which is what browser-side clients see from
Number.prototype.toFixed / toExponential. The stdlib float formatter
rounds half-to-even instead, so both renderings go through Decimal.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from decimal import Context, Decimal, ROUND_HALF_UP

from physics.errors import FormattingError
from physics.validation import is_finite_number, is_number

# Default trailing digits when a request does not send "digits"
DEFAULT_DIGITS = 4

# Largest digit count accepted (same range as toFixed / toExponential)
MAX_DIGITS = 100

# Magnitude at and above which results are always exponential
EXPONENTIAL_THRESHOLD = 1e12

# Wide enough to hold the exact expansion of any double (the smallest
# subnormal has 751 significant digits) plus MAX_DIGITS of rounding room.
_CONTEXT = Context(prec=1200, rounding=ROUND_HALF_UP)


def _check_digits(trailing_digits):
    if is_finite_number(trailing_digits):
        digits = int(trailing_digits)
        if digits == trailing_digits and 0 <= digits <= MAX_DIGITS:
            return digits
    raise FormattingError(
        "Invalid input: digits must be an integer between 0 and {}.".format(
            MAX_DIGITS))


def to_fixed(value, digits):
    """Fixed-point text of `value` with exactly `digits` decimals."""
    quantum = Decimal(1).scaleb(-digits)
    return format(_CONTEXT.quantize(Decimal(float(value)), quantum), "f")


def to_exponential(value, digits):
    """
    Exponential text of `value`, e.g. to_exponential(123456, 2) -> '1.23e+5'.

    Parameters
    ----------
    value : float
        Finite, non-zero number.
    digits : int
        Fractional digits of the mantissa.

    Returns
    -------
    str
        Mantissa in [1, 10) with `digits` decimals, 'e', signed exponent.
    """
    exact = Decimal(float(value))
    quantum = Decimal(1).scaleb(-digits)
    exponent = exact.adjusted()
    mantissa = _CONTEXT.quantize(exact.scaleb(-exponent, _CONTEXT), quantum)
    if abs(mantissa) >= 10:
        # rounding carried into a new decade, e.g. 9.99996 -> 10.0000
        exponent += 1
        mantissa = _CONTEXT.quantize(exact.scaleb(-exponent, _CONTEXT), quantum)
    return "{}e{:+d}".format(format(mantissa, "f"), exponent)


def format_number(value, trailing_digits=DEFAULT_DIGITS):
    """
    Round a result and choose fixed or exponential notation.

    Parameters
    ----------
    value : int or float
        Raw formula result. NaN and +/-inf pass through unchanged.
    trailing_digits : int
        Fractional digits to keep, 0..MAX_DIGITS.

    Returns
    -------
    int or float
        0 for zero input, otherwise the numeric value of the chosen
        rendering.

    Raises
    ------
    FormattingError
        If value is not a number or trailing_digits is out of range.
    """
    if not is_number(value):
        raise FormattingError("Invalid input: value must be a number.")
    digits = _check_digits(trailing_digits)

    if not is_finite_number(value):
        return value
    if value == 0:
        return 0

    if abs(value) >= EXPONENTIAL_THRESHOLD:
        return float(to_exponential(value, digits))

    fixed = to_fixed(value, digits)
    if abs(value) < 1 and fixed.count("0") >= len(fixed) / 2:
        return float(to_exponential(value, digits))
    return float(fixed)


def resolve_digits(inputs):
    """Trailing digits requested by a calculation body (key "digits")."""
    return inputs.get("digits", DEFAULT_DIGITS)
