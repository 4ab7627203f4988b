"""
Typed formula records: declared quantities bound from a JSON body.

A Formula names every input it reads as a Quantity, together with the
validation rules and optional default for that input. Binding a request
body to those quantities is one generic step, so individual formulas
only contain the arithmetic:

    COULOMBS_LAW = Formula(
        "coulombs-law", "F = k q1 q2 / r^2",
        lambda k, q1, q2, r: k * (q1 * q2) / (r * r),
        [Quantity("k", default=K_COULOMB), Quantity("q1"), Quantity("q2"),
         Quantity("r", check_zero=True, check_non_negative=True)],
    )

Quantities are validated in declaration order, which fixes which error
a client sees first when several inputs are bad. The evaluate callable
receives the validated values positionally in that same order.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

import numpy as np

from physics.errors import DegenerateResult
from physics.formatting import format_number, resolve_digits
from physics.validation import (
    ValidationRules, validate_number, validate_sequence,
)

# Relative tolerance used by equality checks when the body omits it
DEFAULT_TOLERANCE = 1e-9


class Quantity:
    """
    One named input of a formula.

    Parameters
    ----------
    name : str
        Key in the JSON request body.
    label : str, optional
        Name used in error messages. Defaults to `name`.
    default : float, optional
        Value used when the key is absent. An explicit JSON null is not
        absent and fails validation.
    sequence : bool
        True for list-valued inputs (e.g. a list of resistances).
    **flags
        check_zero, check_positive, check_non_negative, check_integer.
    """

    def __init__(self, name, label=None, default=None, sequence=False, **flags):
        self.name = name
        self.label = label or name
        self.default = default
        self.sequence = sequence
        self.rules = ValidationRules(**flags)

    def extract(self, inputs):
        """
        Pull this quantity out of a request body and validate it.

        Returns
        -------
        float or numpy.ndarray
            Validated value; list-valued quantities come back as a float
            array.
        """
        value = inputs.get(self.name, self.default)
        if self.sequence:
            validate_sequence(value, self.label, self.rules)
            return np.asarray(value, dtype=float)
        validate_number(value, self.label, self.rules)
        return float(value)

    def metadata(self):
        return {
            "name": self.name,
            "label": self.label,
            "default": self.default,
            "array": self.sequence,
            "rules": self.rules.as_dict(),
        }


class Formula:
    """
    A single closed-form formula exposed as a calculation endpoint.

    Calling the formula with a request body validates every declared
    quantity, evaluates, and formats the result with the body's
    "digits" (default 4).

    Parameters
    ----------
    slug : str
        URL segment, e.g. "coulombs-law".
    equation : str
        Human-readable equation text (ASCII).
    evaluate : callable
        Arithmetic on the validated values, in declaration order. May
        raise a CalculationError for inputs that pass per-quantity
        validation but are jointly impossible.
    quantities : list of Quantity
    description : str, optional
    """

    kind = "value"

    def __init__(self, slug, equation, evaluate, quantities, description=""):
        self.slug = slug
        self.equation = equation
        self.evaluate = evaluate
        self.quantities = list(quantities)
        self.description = description

    def bind(self, inputs):
        """Validated values for every declared quantity, in order."""
        return [q.extract(inputs) for q in self.quantities]

    def compute(self, values):
        """
        Evaluate on already validated values.

        A division by an intermediate that rounded to exactly zero is
        reported as a DegenerateResult like any other calculation error.
        """
        try:
            return self.evaluate(*values)
        except ZeroDivisionError:
            raise DegenerateResult(
                "An intermediate value is zero, cannot calculate {}.".format(
                    self.slug)) from None

    def __call__(self, inputs):
        values = self.bind(inputs)
        return format_number(self.compute(values), resolve_digits(inputs))

    def metadata(self):
        return {
            "slug": self.slug,
            "equation": self.equation,
            "description": self.description,
            "kind": self.kind,
            "quantities": [q.metadata() for q in self.quantities],
        }

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.slug)


class EqualityCheck(Formula):
    """
    A formula that checks whether the sides of an equation agree.

    `evaluate` returns a sequence of two or more sides; the result is
    True when every adjacent pair agrees within the relative "tolerance"
    from the body (default DEFAULT_TOLERANCE; 0 means exact equality).
    The boolean result is returned as is and never formatted.
    """

    kind = "check"

    TOLERANCE = Quantity("tolerance", default=DEFAULT_TOLERANCE,
                         check_non_negative=True)

    def __call__(self, inputs):
        values = self.bind(inputs)
        tolerance = self.TOLERANCE.extract(inputs)
        sides = [float(side) for side in self.compute(values)]
        return all(
            math.isclose(a, b, rel_tol=tolerance)
            for a, b in zip(sides, sides[1:])
        )

    def metadata(self):
        meta = super().metadata()
        meta["quantities"].append(self.TOLERANCE.metadata())
        return meta
