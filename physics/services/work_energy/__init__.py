"""
Work and Energy Service: work, kinetic and potential energy, efficiency
and power.

Angles are in radians.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import G_EARTH
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def work(force, delta_s, theta):
    """W = F ds cos(theta) for a constant force at angle theta (rad)."""
    return force * delta_s * math.cos(theta)


def kinetic_energy_from_momentum(p, m):
    """
    Kinetic energy from momentum.

    Parameters
    ----------
    p : float
        Momentum (kg m/s).
    m : float
        Mass (kg), positive.

    Returns
    -------
    float
        KE = p^2 / (2 m), in joules.
    """
    return (p * p) / (2 * m)


FORMULAS = [
    Formula(
        "work", "W = F ds cos(theta)",
        work,
        [Quantity("F"), Quantity("deltaS"), Quantity("theta")],
        "Work done by a constant force.",
    ),
    Formula(
        "kinetic-energy", "KE = m v^2 / 2",
        lambda m, v: 0.5 * m * v * v,
        [Quantity("m", check_non_negative=True), Quantity("v")],
        "Translational kinetic energy.",
    ),
    Formula(
        "kinetic-energy-from-momentum", "KE = p^2 / (2 m)",
        kinetic_energy_from_momentum,
        [Quantity("p"), Quantity("m", check_positive=True)],
        "Kinetic energy from momentum.",
    ),
    Formula(
        "gravitational-potential-energy", "PE = m g dh",
        lambda m, g, delta_h: m * g * delta_h,
        [Quantity("m", check_non_negative=True),
         Quantity("g", default=G_EARTH), Quantity("deltaH")],
        "Change in gravitational potential energy near a surface.",
    ),
    Formula(
        "efficiency", "eta = W_out / E_in",
        lambda w_out, e_in: w_out / e_in,
        [Quantity("Wout"), Quantity("Ein", check_positive=True)],
        "Ratio of useful work output to energy input.",
    ),
    Formula(
        "power", "P = dW / dt",
        lambda delta_w, delta_t: delta_w / delta_t,
        [Quantity("deltaW"), Quantity("deltaT", check_positive=True)],
        "Average power.",
    ),
    Formula(
        "power-velocity", "P = F v cos(theta)",
        lambda force, v, theta: force * v * math.cos(theta),
        [Quantity("F"), Quantity("v"), Quantity("theta")],
        "Instantaneous power of a force on a moving body.",
    ),
]


class WorkEnergyService(FormulaService):

    id = "work_energy"
    name = "Work and Energy"
    description = "Work, kinetic and potential energy, efficiency, power"

    def formulas(self):
        return FORMULAS
