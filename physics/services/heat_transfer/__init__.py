"""
Heat Transfer Service: conduction and thermal radiation.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.constants import SIGMA_STEFAN, WIEN_B, WIEN_B_FREQUENCY
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def thermal_conduction(k, area, delta_t, length):
    """
    Fourier's law for steady conduction through a slab.

    Parameters
    ----------
    k : float
        Thermal conductivity (W m^-1 K^-1).
    area : float
        Cross-sectional area (m^2).
    delta_t : float
        Temperature difference across the slab (K).
    length : float
        Slab thickness (m), non-zero.

    Returns
    -------
    float
        Heat flow P = k A dT / L, in watts.
    """
    return (k * area * delta_t) / length


def stefan_boltzmann(epsilon, sigma, area, t, t0):
    """Net radiated power P = eps sigma A (T^4 - T0^4)."""
    # products overflow to inf where float ** raises
    return epsilon * sigma * area * (t * t * t * t - t0 * t0 * t0 * t0)


FORMULAS = [
    Formula(
        "thermal-conduction", "P = k A dT / L",
        thermal_conduction,
        [Quantity("k"), Quantity("A"), Quantity("deltaT"),
         Quantity("L", check_zero=True)],
        "Steady-state conductive heat flow.",
    ),
    Formula(
        "stefan-boltzmann-law", "P = eps sigma A (T^4 - T0^4)",
        stefan_boltzmann,
        [Quantity("epsilon"), Quantity("sigma", default=SIGMA_STEFAN),
         Quantity("A"), Quantity("T"), Quantity("T0")],
        "Net power radiated by a grey body.",
    ),
    Formula(
        "wien-law-lambda-max", "lambda_max = b / T",
        lambda b, t: b / t,
        [Quantity("b", default=WIEN_B), Quantity("T", check_zero=True)],
        "Peak wavelength of black-body radiation.",
    ),
    Formula(
        "wien-law-f-max", "f_max = b' T",
        lambda b_prime, t: b_prime * t,
        [Quantity("bPrime", default=WIEN_B_FREQUENCY), Quantity("T")],
        "Peak frequency of black-body radiation.",
    ),
]


class HeatTransferService(FormulaService):

    id = "heat_transfer"
    name = "Heat Transfer"
    description = "Conduction, Stefan-Boltzmann radiation and Wien's law"

    def formulas(self):
        return FORMULAS
