"""
Circular Motion Service: centripetal acceleration.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.errors import DomainViolation
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def centripetal_acceleration(v, r):
    """
    Centripetal acceleration from tangential speed.

    Parameters
    ----------
    v : float
        Tangential speed (m/s).
    r : float
        Radius of the circular path (m). Must be non-zero.

    Returns
    -------
    float
        a_c = v^2 / r, in m/s^2.

    Raises
    ------
    DomainViolation
        If r is zero.
    """
    if r == 0:
        raise DomainViolation("Radius (r) cannot be zero.")
    return (v * v) / r


def centripetal_acceleration_angular(omega, r):
    """a_c = omega^2 r for angular speed omega (rad/s)."""
    return omega * omega * r


FORMULAS = [
    Formula(
        "centripetal-acceleration", "a_c = v^2 / r",
        centripetal_acceleration,
        [Quantity("v"), Quantity("r")],
        "Centripetal acceleration from tangential speed.",
    ),
    Formula(
        "centripetal-acceleration-angular", "a_c = omega^2 r",
        centripetal_acceleration_angular,
        [Quantity("omega"), Quantity("r")],
        "Centripetal acceleration from angular speed.",
    ),
]


class CircularMotionService(FormulaService):

    id = "circular_motion"
    name = "Circular Motion"
    description = "Centripetal acceleration from linear or angular speed"

    def formulas(self):
        return FORMULAS
