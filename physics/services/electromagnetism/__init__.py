"""
Electromagnetism Service: electrostatics, capacitors, DC circuits,
magnetic fields, induction and AC reactance.

Series/parallel combinations take a JSON array of component values and
are evaluated with numpy. Vacuum permittivity and permeability and the
Coulomb constant default to CODATA values; the capacitor geometries
always use EPSILON_0 scaled by the dielectric constant kEpsilon.

Angles are in radians.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

import numpy as np

from physics.constants import EPSILON_0, K_COULOMB, MU_0
from physics.errors import DegenerateResult
from physics.formula import EqualityCheck, Formula, Quantity
from physics.services import FormulaService


# ---------------------------------------------------------------------------
# Electrostatics and capacitors
# ---------------------------------------------------------------------------

def coulombs_law(k, q1, q2, r):
    """
    Electrostatic force between two point charges.

    Parameters
    ----------
    k : float
        Coulomb constant (N m^2 C^-2).
    q1, q2 : float
        Charges (C).
    r : float
        Separation (m), positive.

    Returns
    -------
    float
        F = k q1 q2 / r^2, in newtons (negative = attractive).
    """
    return (k * (q1 * q2)) / r / r


def cylindrical_capacitor(k_epsilon, length, r2, r1):
    """
    Capacitance of a coaxial cylindrical capacitor.

    Parameters
    ----------
    k_epsilon : float
        Dielectric constant.
    length : float
        Length (m).
    r2, r1 : float
        Outer and inner radii (m), positive.

    Returns
    -------
    float
        C = 2 pi k eps0 l / ln(r2 / r1), in farads.

    Raises
    ------
    DegenerateResult
        If r1 == r2 (ln(r2 / r1) is zero).
    """
    log_ratio = math.log(r2) - math.log(r1)
    if log_ratio == 0:
        raise DegenerateResult("Radii r1 and r2 must differ.")
    return (2 * math.pi * k_epsilon * EPSILON_0 * length) / log_ratio


def spherical_capacitor(k_epsilon, r1, r2):
    """C = 4 pi k eps0 / (1/r1 - 1/r2) for concentric spheres."""
    denominator = 1 / r1 - 1 / r2
    if denominator == 0:
        raise DegenerateResult("Radii r1 and r2 must differ.")
    return (4 * math.pi * k_epsilon * EPSILON_0) / denominator


# ---------------------------------------------------------------------------
# Series / parallel combinations
# ---------------------------------------------------------------------------

def reciprocal_sum(values, what):
    """
    Combine components as 1 / sum(1 / x_i).

    A zero component contributes an infinite reciprocal, so the combined
    value is 0 (a short circuit for resistors).

    Parameters
    ----------
    values : numpy.ndarray
        Component values.
    what : str
        Name of the combination for the error message, e.g.
        "parallel resistance".

    Raises
    ------
    DegenerateResult
        If the reciprocals sum to exactly zero (including an empty list).
    """
    with np.errstate(divide="ignore"):
        total = float(np.sum(1.0 / values))
    if total == 0:
        raise DegenerateResult(
            "Sum of reciprocals is zero, cannot calculate {}.".format(what))
    return 1.0 / total


def direct_sum(values):
    return float(np.sum(values))


# ---------------------------------------------------------------------------
# Power and stored energy checks
# ---------------------------------------------------------------------------

def capacitive_pe_sides(q, v, c):
    """The three forms of stored energy: QV/2, CV^2/2, Q^2/(2C)."""
    return (0.5 * q * v, 0.5 * c * v * v, (0.5 * q * q) / c)


def electric_power_sides(v, i, r):
    """The three forms of dissipated power: VI, I^2 R, V^2 / R."""
    return (v * i, i * i * r, (v * v) / r)


FORMULAS = [
    Formula(
        "coulombs-law", "F = k q1 q2 / r^2",
        coulombs_law,
        [Quantity("k", default=K_COULOMB), Quantity("q1"), Quantity("q2"),
         Quantity("r", check_zero=True, check_non_negative=True)],
        "Coulomb force between two point charges.",
    ),
    Formula(
        "electric-field", "E = F_E / q",
        lambda f_e, q: f_e / q,
        [Quantity("FE"), Quantity("q", check_zero=True)],
        "Electric field from the force on a test charge.",
    ),
    Formula(
        "electric-potential", "V = dU_E / q",
        lambda delta_ue, q: delta_ue / q,
        [Quantity("deltaUE"), Quantity("q", check_zero=True)],
        "Electric potential from potential energy per charge.",
    ),
    Formula(
        "field-and-potential", "E = dV / d",
        lambda delta_v, d: delta_v / d,
        [Quantity("deltaV"), Quantity("d", check_zero=True)],
        "Uniform field from a potential difference.",
    ),
    Formula(
        "capacitance", "C = Q / V",
        lambda q, v: q / v,
        [Quantity("Q"), Quantity("V", check_zero=True)],
        "Capacitance from charge and voltage.",
    ),
    Formula(
        "plate-capacitor", "C = k eps0 A / d",
        lambda k_epsilon, area, d: (k_epsilon * EPSILON_0 * area) / d,
        [Quantity("kEpsilon"), Quantity("A"),
         Quantity("d", check_zero=True, check_non_negative=True)],
        "Parallel-plate capacitance.",
    ),
    Formula(
        "cylindrical-capacitor", "C = 2 pi k eps0 l / ln(r2 / r1)",
        cylindrical_capacitor,
        [Quantity("kEpsilon"), Quantity("l"),
         Quantity("r2", check_zero=True, check_non_negative=True),
         Quantity("r1", check_zero=True, check_non_negative=True)],
        "Coaxial cylindrical capacitance.",
    ),
    Formula(
        "spherical-capacitor", "C = 4 pi k eps0 / (1/r1 - 1/r2)",
        spherical_capacitor,
        [Quantity("kEpsilon"),
         Quantity("r1", check_zero=True, check_non_negative=True),
         Quantity("r2", check_zero=True)],
        "Concentric spherical capacitance.",
    ),
    EqualityCheck(
        "capacitive-pe", "U = QV / 2 = CV^2 / 2 = Q^2 / (2C)",
        capacitive_pe_sides,
        [Quantity("Q"), Quantity("V"), Quantity("C", check_zero=True)],
        "Checks that the three forms of capacitor energy agree.",
    ),
    Formula(
        "electric-current", "I = dQ / dt",
        lambda delta_q, delta_t: delta_q / delta_t,
        [Quantity("deltaQ"), Quantity("deltaT", check_zero=True)],
        "Average electric current.",
    ),
    Formula(
        "charge-density", "rho = Q / V",
        lambda q, volume: q / volume,
        [Quantity("Q"), Quantity("V", check_zero=True)],
        "Volume charge density.",
    ),
    Formula(
        "current-density", "J = I / A",
        lambda i, area: i / area,
        [Quantity("I"), Quantity("A", check_zero=True, check_non_negative=True)],
        "Current density.",
    ),
    Formula(
        "ohms-law", "R = V / I",
        lambda v, i: v / i,
        [Quantity("V"), Quantity("I", check_zero=True)],
        "Resistance from voltage and current.",
    ),
    Formula(
        "resistivity-conductivity", "sigma = 1 / rho",
        lambda rho: 1 / rho,
        [Quantity("rhoValue", check_zero=True)],
        "Conductivity from resistivity.",
    ),
    Formula(
        "electric-resistance", "R = rho l / A",
        lambda rho, length, area: (rho * length) / area,
        [Quantity("rhoValue"), Quantity("l"),
         Quantity("A", check_zero=True, check_non_negative=True)],
        "Resistance of a uniform conductor.",
    ),
    EqualityCheck(
        "electric-power", "P = VI = I^2 R = V^2 / R",
        electric_power_sides,
        [Quantity("V"), Quantity("I"), Quantity("R", check_zero=True)],
        "Checks that the three forms of electric power agree.",
    ),
    Formula(
        "resistors-in-series", "R = sum(R_i)",
        direct_sum,
        [Quantity("resistances", sequence=True)],
        "Equivalent resistance of resistors in series.",
    ),
    Formula(
        "resistors-in-parallel", "1 / R = sum(1 / R_i)",
        lambda values: reciprocal_sum(values, "parallel resistance"),
        [Quantity("resistances", sequence=True)],
        "Equivalent resistance of resistors in parallel.",
    ),
    Formula(
        "capacitors-in-series", "1 / C = sum(1 / C_i)",
        lambda values: reciprocal_sum(values, "series capacitance"),
        [Quantity("capacitances", sequence=True)],
        "Equivalent capacitance of capacitors in series.",
    ),
    Formula(
        "capacitors-in-parallel", "C = sum(C_i)",
        direct_sum,
        [Quantity("capacitances", sequence=True)],
        "Equivalent capacitance of capacitors in parallel.",
    ),
    Formula(
        "magnetic-force-charge", "F = q v B sin(theta)",
        lambda q, v, b, theta: q * v * b * math.sin(theta),
        [Quantity("q"), Quantity("v"), Quantity("B"), Quantity("theta")],
        "Magnetic force on a moving charge.",
    ),
    Formula(
        "magnetic-force-current", "F = I l B sin(theta)",
        lambda i, length, b, theta: i * length * b * math.sin(theta),
        [Quantity("I"), Quantity("l"), Quantity("B"), Quantity("theta")],
        "Magnetic force on a current-carrying wire.",
    ),
    Formula(
        "biot-savart-law", "dB = mu0 I ds / (4 pi r^2)",
        lambda mu0, i, ds, r: (mu0 * i * ds) / (4 * math.pi) / r / r,
        [Quantity("mu0", default=MU_0), Quantity("I"), Quantity("ds"),
         Quantity("r", check_zero=True, check_non_negative=True)],
        "Field of a current element (perpendicular geometry).",
    ),
    Formula(
        "solenoid", "B = mu0 n I",
        lambda mu0, n, i: mu0 * n * i,
        [Quantity("mu0", default=MU_0), Quantity("n"), Quantity("I")],
        "Field inside a long solenoid.",
    ),
    Formula(
        "straight-wire", "B = mu0 I / (2 pi r)",
        lambda mu0, i, r: (mu0 * i) / (2 * math.pi * r),
        [Quantity("mu0", default=MU_0), Quantity("I"),
         Quantity("r", check_zero=True, check_non_negative=True)],
        "Field around a long straight wire.",
    ),
    Formula(
        "parallel-wires", "F / l = mu0 I1 I2 / (2 pi d)",
        lambda mu0, i1, i2, d: ((mu0 / (2 * math.pi)) * (i1 * i2)) / d,
        [Quantity("mu0", default=MU_0), Quantity("I1", check_zero=True),
         Quantity("I2", check_zero=True),
         Quantity("d", check_zero=True, check_non_negative=True)],
        "Force per unit length between parallel wires.",
    ),
    Formula(
        "electric-flux", "Phi_E = E A cos(theta)",
        lambda e, area, theta: e * area * math.cos(theta),
        [Quantity("E"), Quantity("A"), Quantity("theta")],
        "Electric flux through a flat surface.",
    ),
    Formula(
        "magnetic-flux", "Phi_B = B A cos(theta)",
        lambda b, area, theta: b * area * math.cos(theta),
        [Quantity("B"), Quantity("A"), Quantity("theta")],
        "Magnetic flux through a flat surface.",
    ),
    Formula(
        "motional-emf", "emf = B l v",
        lambda b, length, v: b * length * v,
        [Quantity("B"), Quantity("l"), Quantity("v")],
        "EMF of a conductor moving through a field.",
    ),
    Formula(
        "induced-emf", "emf = -dPhi_B / dt",
        lambda delta_phi, delta_t: -delta_phi / delta_t,
        [Quantity("deltaPhiB"), Quantity("deltaT", check_zero=True)],
        "Faraday's law of induction.",
    ),
    Formula(
        "inductance-induced-emf", "emf = -L dI / dt",
        lambda inductance, d_i, d_t: (-inductance * d_i) / d_t,
        [Quantity("L"), Quantity("dI"), Quantity("dt", check_zero=True)],
        "Self-induced EMF of an inductor.",
    ),
    Formula(
        "capacitive-reactance", "X_C = 1 / (2 pi f C)",
        lambda f, c: 1 / (2 * math.pi * f) / c,
        [Quantity("f", check_zero=True), Quantity("C", check_zero=True)],
        "Reactance of a capacitor.",
    ),
    Formula(
        "inductive-reactance", "X_L = 2 pi f L",
        lambda f, inductance: 2 * math.pi * f * inductance,
        [Quantity("f"), Quantity("L")],
        "Reactance of an inductor.",
    ),
    Formula(
        "impedance", "Z = sqrt(R^2 + (X_L - X_C)^2)",
        lambda r, x_l, x_c: math.hypot(r, x_l - x_c),
        [Quantity("R"), Quantity("XL"), Quantity("XC")],
        "Impedance of a series RLC circuit.",
    ),
]


class ElectromagnetismService(FormulaService):

    id = "electromagnetism"
    name = "Electromagnetism"
    description = "Electrostatics, circuits, magnetic fields and induction"

    def formulas(self):
        return FORMULAS
