"""
Oscillations Service: springs, simple harmonic motion and pendulums.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import G_EARTH
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def sho_period(m, k):
    """
    Period of a mass on an ideal spring.

    Parameters
    ----------
    m : float
        Mass (kg), non-negative.
    k : float
        Spring constant (N/m), positive.

    Returns
    -------
    float
        T = 2 pi sqrt(m / k), in seconds.
    """
    return 2 * math.pi * math.sqrt(m / k)


def pendulum_period(length, g):
    """T = 2 pi sqrt(l / g), small-angle approximation."""
    return 2 * math.pi * math.sqrt(length / g)


FORMULAS = [
    Formula(
        "spring-pe", "U = k dx^2 / 2",
        lambda k, delta_x: 0.5 * k * delta_x * delta_x,
        [Quantity("k"), Quantity("deltaX")],
        "Elastic potential energy of a spring.",
    ),
    Formula(
        "sho-period", "T = 2 pi sqrt(m / k)",
        sho_period,
        [Quantity("m", check_non_negative=True),
         Quantity("k", check_positive=True)],
        "Period of a simple harmonic oscillator.",
    ),
    Formula(
        "simple-pendulum-period", "T = 2 pi sqrt(l / g)",
        pendulum_period,
        [Quantity("l", check_non_negative=True),
         Quantity("g", default=G_EARTH, check_positive=True)],
        "Period of a simple pendulum.",
    ),
    Formula(
        "frequency", "f = 1 / T",
        lambda period: 1 / period,
        [Quantity("T", check_zero=True)],
        "Frequency from period.",
    ),
    Formula(
        "angular-frequency", "omega = 2 pi f",
        lambda f: 2 * math.pi * f,
        [Quantity("f")],
        "Angular frequency from frequency.",
    ),
]


class OscillationsService(FormulaService):

    id = "oscillations"
    name = "Oscillations"
    description = "Spring energy, oscillator and pendulum periods, frequency"

    def formulas(self):
        return FORMULAS
