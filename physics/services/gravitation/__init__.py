"""
Gravitation Service: Newtonian gravity between point masses.

Forces, fields, energies and potentials follow the attractive sign
convention (negative values). G defaults to the CODATA value and may be
overridden per request.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import G
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def universal_gravitation(g, m1, m2, r):
    """
    Newton's law of universal gravitation.

    Parameters
    ----------
    g : float
        Gravitational constant (m^3 kg^-1 s^-2).
    m1, m2 : float
        Masses (kg).
    r : float
        Separation (m), non-zero.

    Returns
    -------
    float
        F = -G m1 m2 / r^2, in newtons (negative = attractive).
    """
    return (-g * m1 * m2) / r / r


def orbital_speed(g, m, r):
    """v = sqrt(G M / r) for a circular orbit of radius r."""
    return math.sqrt((g * m) / r)


def escape_speed(g, m, r):
    """v = sqrt(2 G M / r) from distance r."""
    return math.sqrt((2 * g * m) / r)


def _gravity_quantities(*masses, positive_r=False):
    quantities = [Quantity("G", default=G, check_non_negative=True)]
    quantities += [Quantity(name, check_non_negative=positive_r)
                   for name in masses]
    quantities.append(Quantity("r", check_zero=True, check_positive=positive_r))
    return quantities


FORMULAS = [
    Formula(
        "universal-gravitation", "F = -G m1 m2 / r^2",
        universal_gravitation,
        _gravity_quantities("m1", "m2"),
        "Gravitational force between two point masses.",
    ),
    Formula(
        "gravitational-field", "g = -G m / r^2",
        lambda g, m, r: (-g * m) / r / r,
        _gravity_quantities("m"),
        "Gravitational field strength of a point mass.",
    ),
    Formula(
        "gravitational-pe", "U = -G m1 m2 / r",
        lambda g, m1, m2, r: (-g * m1 * m2) / r,
        _gravity_quantities("m1", "m2"),
        "Gravitational potential energy of two point masses.",
    ),
    Formula(
        "gravitational-potential", "V = -G m / r",
        lambda g, m, r: (-g * m) / r,
        _gravity_quantities("m"),
        "Gravitational potential of a point mass.",
    ),
    Formula(
        "orbital-speed", "v = sqrt(G m / r)",
        orbital_speed,
        _gravity_quantities("m", positive_r=True),
        "Speed of a circular orbit.",
    ),
    Formula(
        "escape-speed", "v = sqrt(2 G m / r)",
        escape_speed,
        _gravity_quantities("m", positive_r=True),
        "Escape speed from a point mass.",
    ),
]


class GravitationService(FormulaService):

    id = "gravitation"
    name = "Gravitation"
    description = "Newtonian gravitational force, field, energy and orbits"

    def formulas(self):
        return FORMULAS
