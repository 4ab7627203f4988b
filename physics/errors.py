"""
Error taxonomy for formula evaluation.

Every failure raised while validating inputs, evaluating a formula or
formatting its result is a CalculationError. The request adapter is the
single place that catches them and turns them into HTTP 400 responses;
nothing between the formula and the adapter recovers from them.

CalculationError subclasses ValueError so callers that only know the
builtin exception hierarchy still treat these as bad-input errors.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""


class CalculationError(ValueError):
    """Base class for all formula evaluation failures."""


class MalformedInput(CalculationError):
    """A quantity is missing, not numeric, or not finite."""


class DomainViolation(CalculationError):
    """A quantity fails a constraint, or inputs are physically impossible."""


class ArrayShapeError(CalculationError):
    """A list-valued quantity was not supplied as a list."""


class DegenerateResult(CalculationError):
    """An intermediate value is exactly zero where the next step divides by it."""


class FormattingError(CalculationError):
    """The formatter was given a non-number or an invalid digit count."""
