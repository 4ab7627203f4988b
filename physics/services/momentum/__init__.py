"""
Momentum Service: linear momentum, impulse and the impulse-momentum
theorem.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.formula import EqualityCheck, Formula, Quantity
from physics.services import FormulaService


FORMULAS = [
    Formula(
        "momentum", "p = m v",
        lambda m, v: m * v,
        [Quantity("m", check_non_negative=True), Quantity("v")],
        "Linear momentum.",
    ),
    Formula(
        "impulse", "J = F dt",
        lambda force, delta_t: force * delta_t,
        [Quantity("F"), Quantity("deltaT", check_non_negative=True)],
        "Impulse of a constant force over a time interval.",
    ),
    EqualityCheck(
        "impulse-momentum", "F dt = m dv",
        lambda force, delta_t, m, delta_v: (force * delta_t, m * delta_v),
        [Quantity("F"), Quantity("deltaT", check_non_negative=True),
         Quantity("m", check_non_negative=True), Quantity("deltaV")],
        "Checks the impulse-momentum theorem.",
    ),
]


class MomentumService(FormulaService):

    id = "momentum"
    name = "Momentum"
    description = "Momentum, impulse and the impulse-momentum theorem"

    def formulas(self):
        return FORMULAS
