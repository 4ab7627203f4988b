"""
Fluids Service: hydrostatics, flow rates, viscosity and dimensionless
numbers.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import G_EARTH
from physics.formula import EqualityCheck, Formula, Quantity
from physics.services import FormulaService


def bernoulli_sides(p1, rho, g, y1, v1, p2, y2, v2):
    """
    Total head at two points of a streamline.

    Returns
    -------
    tuple of float
        (P1 + rho g y1 + rho v1^2 / 2, P2 + rho g y2 + rho v2^2 / 2)
    """
    return (
        p1 + rho * g * y1 + 0.5 * rho * v1 * v1,
        p2 + rho * g * y2 + 0.5 * rho * v2 * v2,
    )


def dynamic_viscosity(force, delta_vx, area, delta_y):
    """eta = F dy / (A dvx) for laminar shear between plates."""
    return (force * delta_y) / area / delta_vx


def froude_number(v, g, length):
    """
    Froude number.

    Parameters
    ----------
    v : float
        Flow speed (m/s).
    g : float
        Gravitational acceleration (m/s^2), positive.
    length : float
        Characteristic length (m), positive.

    Returns
    -------
    float
        Fr = v / sqrt(g l).
    """
    # g l can underflow to 0 for tiny positive inputs
    return v / math.sqrt(g) / math.sqrt(length)


FORMULAS = [
    Formula(
        "density", "rho = m / V",
        lambda m, volume: m / volume,
        [Quantity("m"), Quantity("V", check_zero=True)],
        "Mass density.",
    ),
    Formula(
        "pressure", "P = F / A",
        lambda force, area: force / area,
        [Quantity("F"), Quantity("A", check_zero=True)],
        "Pressure of a force over an area.",
    ),
    Formula(
        "pressure-in-fluid", "P = P0 + rho g h",
        lambda p0, rho, g, h: p0 + rho * g * h,
        [Quantity("P0"), Quantity("rho"), Quantity("g", default=G_EARTH),
         Quantity("h")],
        "Hydrostatic pressure at depth h.",
    ),
    Formula(
        "buoyancy", "F_b = rho g V",
        lambda rho, g, displaced: rho * g * displaced,
        [Quantity("rho"), Quantity("g", default=G_EARTH),
         Quantity("Vdisplaced")],
        "Archimedes buoyant force.",
    ),
    Formula(
        "mass-flow-rate", "m_dot = dm / dt",
        lambda delta_m, delta_t: delta_m / delta_t,
        [Quantity("deltaM"), Quantity("deltaT", check_zero=True)],
        "Mass flow rate.",
    ),
    Formula(
        "volume-flow-rate", "Q = dV / dt",
        lambda delta_v, delta_t: delta_v / delta_t,
        [Quantity("deltaV1"), Quantity("deltaT1", check_zero=True)],
        "Volumetric flow rate.",
    ),
    EqualityCheck(
        "bernoulli-equation",
        "P1 + rho g y1 + rho v1^2 / 2 = P2 + rho g y2 + rho v2^2 / 2",
        bernoulli_sides,
        [Quantity("P1"), Quantity("rho"), Quantity("g", default=G_EARTH),
         Quantity("y1"), Quantity("v1"), Quantity("P2"), Quantity("y2"),
         Quantity("v2")],
        "Checks Bernoulli's equation between two points.",
    ),
    Formula(
        "dynamic-viscosity", "eta = F dy / (A dvx)",
        dynamic_viscosity,
        [Quantity("F"), Quantity("deltaVx", check_zero=True),
         Quantity("A", check_zero=True), Quantity("deltaY")],
        "Dynamic viscosity from shear force.",
    ),
    Formula(
        "kinematic-viscosity", "nu = eta / rho",
        lambda eta, rho: eta / rho,
        [Quantity("eta"), Quantity("rho", check_zero=True)],
        "Kinematic viscosity.",
    ),
    Formula(
        "drag", "F_D = rho C A v^2 / 2",
        lambda rho, ca, v: 0.5 * rho * ca * v * v,
        [Quantity("rho"), Quantity("CA"), Quantity("v")],
        "Aerodynamic drag; CA is drag coefficient times area.",
    ),
    Formula(
        "mach-number", "Ma = v / c",
        lambda v, c: v / c,
        [Quantity("v"), Quantity("c", check_zero=True)],
        "Mach number.",
    ),
    Formula(
        "reynolds-number", "Re = rho v D / eta",
        lambda rho, v, diameter, eta: (rho * v * diameter) / eta,
        [Quantity("rho"), Quantity("v"), Quantity("D"),
         Quantity("eta", check_zero=True)],
        "Reynolds number.",
    ),
    Formula(
        "froude-number", "Fr = v / sqrt(g l)",
        froude_number,
        [Quantity("v"), Quantity("g", default=G_EARTH, check_positive=True),
         Quantity("l", check_positive=True)],
        "Froude number.",
    ),
    Formula(
        "surface-tension", "gamma = F / l",
        lambda force, length: force / length,
        [Quantity("F"), Quantity("l", check_zero=True)],
        "Surface tension.",
    ),
]


class FluidsService(FormulaService):

    id = "fluids"
    name = "Fluids"
    description = "Pressure, buoyancy, flow, viscosity and fluid numbers"

    def formulas(self):
        return FORMULAS
