"""
Numeric validation of physical quantities.

A quantity is valid only if it is a finite real number. After the
finiteness check, optional constraints run in a fixed order:

    zero -> positive -> non-negative -> integer

The first failing check raises; later checks are not evaluated. Error
messages are always prefixed with the caller-supplied quantity name so
they can be returned to the client unchanged.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
import numbers

from physics.errors import ArrayShapeError, DomainViolation, MalformedInput


class ValidationRules:
    """
    Constraint flags for a single quantity.

    Parameters
    ----------
    check_zero : bool
        Reject exactly 0.
    check_positive : bool
        Reject values <= 0.
    check_non_negative : bool
        Reject values < 0.
    check_integer : bool
        Reject values with a fractional part.
    """

    __slots__ = ("check_zero", "check_positive", "check_non_negative",
                 "check_integer")

    def __init__(self, check_zero=False, check_positive=False,
                 check_non_negative=False, check_integer=False):
        self.check_zero = bool(check_zero)
        self.check_positive = bool(check_positive)
        self.check_non_negative = bool(check_non_negative)
        self.check_integer = bool(check_integer)

    def as_dict(self):
        return {name: getattr(self, name) for name in self.__slots__}

    def __repr__(self):
        flags = [name for name in self.__slots__ if getattr(self, name)]
        return "ValidationRules({})".format(", ".join(flags))


NO_RULES = ValidationRules()


def is_number(value):
    """True for int/float values; bool is not a number here."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_finite_number(value):
    """True for numbers that are neither NaN nor infinite."""
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # JSON integers beyond float range
        return False


def validate_number(value, name, rules=None, **flags):
    """
    Validate that a value is a usable physical quantity.

    Parameters
    ----------
    value : object
        Raw value, usually taken straight from a JSON request body.
    name : str
        Quantity name used as the message prefix, e.g. "Radius (r)".
    rules : ValidationRules, optional
        Constraint flags. Keyword flags (check_zero=True, ...) may be
        given instead.

    Raises
    ------
    MalformedInput
        If the value is not a finite number.
    DomainViolation
        If the value fails one of the enabled constraints.
    """
    if rules is None:
        rules = ValidationRules(**flags) if flags else NO_RULES

    if not is_finite_number(value):
        raise MalformedInput("{} must be a finite number.".format(name))
    if rules.check_zero and value == 0:
        raise DomainViolation("{} cannot be zero.".format(name))
    if rules.check_positive and value <= 0:
        raise DomainViolation("{} must be a positive number.".format(name))
    if rules.check_non_negative and value < 0:
        raise DomainViolation("{} cannot be negative.".format(name))
    if rules.check_integer and value != math.floor(value):
        raise DomainViolation("{} must be an integer.".format(name))


def validate_sequence(values, name, rules=None):
    """
    Validate a list-valued quantity element by element.

    Each element is checked with validate_number under the name
    "<name>[<index>]", so the first bad element is reported precisely.

    Raises
    ------
    ArrayShapeError
        If values is not a list.
    """
    if not isinstance(values, (list, tuple)):
        raise ArrayShapeError("{} must be an array.".format(name))
    for i, value in enumerate(values):
        validate_number(value, "{}[{}]".format(name, i), rules)
