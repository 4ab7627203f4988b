"""
Thermal and Thermodynamics Service: thermal expansion, heat, kinetic
theory of gases and heat engines.

Temperatures are absolute (K) wherever they appear in a ratio or under
a square root. Boltzmann and gas constants default to CODATA values.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import K_BOLTZMANN, R_GAS
from physics.errors import DegenerateResult
from physics.formula import EqualityCheck, Formula, Quantity
from physics.services import FormulaService


def molecular_speed(factor, k, t, m):
    """
    Characteristic molecular speed sqrt(factor k T / m).

    factor is 2 for the most probable speed, 8/pi for the mean speed and
    3 for the root-mean-square speed.
    """
    return math.sqrt((factor * k * t) / m)


def cop_real(q_c, q_h):
    """
    Coefficient of performance of a real refrigerator.

    Parameters
    ----------
    q_c : float
        Heat removed from the cold reservoir (J).
    q_h : float
        Heat delivered to the hot reservoir (J).

    Returns
    -------
    float
        COP = Q_C / (Q_H - Q_C).

    Raises
    ------
    DegenerateResult
        If Q_H equals Q_C (no work input).
    """
    if q_h == q_c:
        raise DegenerateResult("QH and QC must differ (no work input).")
    return q_c / (q_h - q_c)


def cop_ideal(t_c, t_h):
    """COP = T_C / (T_H - T_C) for a Carnot refrigerator."""
    if t_h == t_c:
        raise DegenerateResult("TH and TC must differ (no work input).")
    return t_c / (t_h - t_c)


def _gas_quantities():
    return [
        Quantity("k", default=K_BOLTZMANN, check_positive=True),
        Quantity("T", check_non_negative=True),
        Quantity("m", check_positive=True),
    ]


FORMULAS = [
    Formula(
        "solid-expansion-length", "dL = alpha L0 dT",
        lambda alpha, l0, delta_t: alpha * l0 * delta_t,
        [Quantity("alpha"), Quantity("L0"), Quantity("deltaT")],
        "Linear thermal expansion.",
    ),
    Formula(
        "solid-expansion-area", "dA = 2 alpha A0 dT",
        lambda alpha, a0, delta_t: 2 * alpha * a0 * delta_t,
        [Quantity("alpha"), Quantity("A0"), Quantity("deltaT")],
        "Area thermal expansion.",
    ),
    Formula(
        "solid-expansion-volume", "dV = 3 alpha V0 dT",
        lambda alpha, v0, delta_t: 3 * alpha * v0 * delta_t,
        [Quantity("alpha"), Quantity("V0"), Quantity("deltaT")],
        "Volume thermal expansion of a solid.",
    ),
    Formula(
        "liquid-expansion", "dV = beta V0 dT",
        lambda beta, v0, delta_t: beta * v0 * delta_t,
        [Quantity("beta"), Quantity("V0"), Quantity("deltaT")],
        "Volume thermal expansion of a liquid.",
    ),
    Formula(
        "sensible-heat", "Q = m c dT",
        lambda m, c, delta_t: m * c * delta_t,
        [Quantity("m"), Quantity("c"), Quantity("deltaT")],
        "Heat for a temperature change.",
    ),
    Formula(
        "latent-heat", "Q = m L",
        lambda m, latent: m * latent,
        [Quantity("m"), Quantity("L")],
        "Heat for a phase change.",
    ),
    EqualityCheck(
        "ideal-gas-law", "P V = n R T",
        lambda p, volume, n, r, t: (p * volume, n * r * t),
        [Quantity("P"), Quantity("V"), Quantity("n"),
         Quantity("R", default=R_GAS), Quantity("T")],
        "Checks the ideal gas law.",
    ),
    Formula(
        "molecular-ke", "KE = 3 k T / 2",
        lambda k, t: 1.5 * k * t,
        [Quantity("k", default=K_BOLTZMANN), Quantity("T")],
        "Mean translational kinetic energy of a gas molecule.",
    ),
    Formula(
        "molecular-speed-vp", "v_p = sqrt(2 k T / m)",
        lambda k, t, m: molecular_speed(2, k, t, m),
        _gas_quantities(),
        "Most probable molecular speed.",
    ),
    Formula(
        "molecular-speed-avg", "v_avg = sqrt(8 k T / (pi m))",
        lambda k, t, m: molecular_speed(8 / math.pi, k, t, m),
        _gas_quantities(),
        "Mean molecular speed.",
    ),
    Formula(
        "molecular-speed-rms", "v_rms = sqrt(3 k T / m)",
        lambda k, t, m: molecular_speed(3, k, t, m),
        _gas_quantities(),
        "Root-mean-square molecular speed.",
    ),
    Formula(
        "internal-energy-change", "dU = 3 n R dT / 2",
        lambda n_r, delta_t: 1.5 * n_r * delta_t,
        [Quantity("nR"), Quantity("deltaT")],
        "Internal energy change of a monatomic ideal gas.",
    ),
    Formula(
        "thermodynamic-work", "W = -P dV",
        lambda p, delta_v: -p * delta_v,
        [Quantity("P"), Quantity("deltaV")],
        "Work done on a gas at constant pressure.",
    ),
    Formula(
        "efficiency-real", "eta = 1 - Q_C / Q_H",
        lambda q_c, q_h: 1 - q_c / q_h,
        [Quantity("QC"), Quantity("QH", check_zero=True)],
        "Efficiency of a real heat engine.",
    ),
    Formula(
        "efficiency-ideal", "eta = 1 - T_C / T_H",
        lambda t_c, t_h: 1 - t_c / t_h,
        [Quantity("TC"), Quantity("TH", check_zero=True)],
        "Carnot efficiency.",
    ),
    Formula(
        "cop-real", "COP = Q_C / (Q_H - Q_C)",
        cop_real,
        [Quantity("QC"), Quantity("QH")],
        "Coefficient of performance of a real refrigerator.",
    ),
    Formula(
        "cop-ideal", "COP = T_C / (T_H - T_C)",
        cop_ideal,
        [Quantity("TC"), Quantity("TH")],
        "Coefficient of performance of a Carnot refrigerator.",
    ),
]


class ThermalService(FormulaService):

    id = "thermal"
    name = "Thermal and Thermodynamics"
    description = "Thermal expansion, heat, kinetic theory and heat engines"

    def formulas(self):
        return FORMULAS
