"""
Physical constants used as formula defaults.

Values come from scipy.constants (CODATA 2018 at the time of writing);
exact SI definitions (c, h, k_B) are exact there as well. Formulas never
hard-code these numbers: quantities that default to a constant take it
from this module, and GET /api/v1/constants publishes the same table.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

import math
from collections import OrderedDict

from scipy import constants as codata

# Gravitational constant
G = codata.G  # m^3 kg^-1 s^-2

# Speed of light in vacuum (exact)
C = codata.c  # m/s

# Planck constant (exact) and reduced Planck constant
H = codata.h  # J s
H_BAR = codata.hbar  # J s

# Vacuum permittivity and permeability
EPSILON_0 = codata.epsilon_0  # F/m
MU_0 = codata.mu_0  # N/A^2

# Coulomb constant k = 1 / (4 pi eps0)
K_COULOMB = 1.0 / (4.0 * math.pi * EPSILON_0)  # N m^2 C^-2

# Boltzmann constant (exact) and molar gas constant
K_BOLTZMANN = codata.k  # J/K
R_GAS = codata.R  # J mol^-1 K^-1

# Stefan-Boltzmann constant
SIGMA_STEFAN = codata.Stefan_Boltzmann  # W m^-2 K^-4

# Wien displacement constants (wavelength and frequency forms)
WIEN_B = codata.Wien  # m K
WIEN_B_FREQUENCY = codata.physical_constants[
    "Wien frequency displacement law constant"][0]  # Hz/K

# Rydberg constant
RYDBERG = codata.Rydberg  # 1/m

# Standard acceleration of gravity (exact)
G_EARTH = codata.g  # m/s^2


PHYSICAL_CONSTANTS = OrderedDict([
    ("G", (G, "m^3 kg^-1 s^-2", "Gravitational constant")),
    ("C", (C, "m s^-1", "Speed of light in vacuum")),
    ("H", (H, "J s", "Planck constant")),
    ("H_BAR", (H_BAR, "J s", "Reduced Planck constant")),
    ("EPSILON_0", (EPSILON_0, "F m^-1", "Vacuum electric permittivity")),
    ("MU_0", (MU_0, "N A^-2", "Vacuum magnetic permeability")),
    ("K_COULOMB", (K_COULOMB, "N m^2 C^-2", "Coulomb constant")),
    ("K_BOLTZMANN", (K_BOLTZMANN, "J K^-1", "Boltzmann constant")),
    ("R_GAS", (R_GAS, "J mol^-1 K^-1", "Molar gas constant")),
    ("SIGMA_STEFAN", (SIGMA_STEFAN, "W m^-2 K^-4", "Stefan-Boltzmann constant")),
    ("WIEN_B", (WIEN_B, "m K", "Wien wavelength displacement constant")),
    ("WIEN_B_FREQUENCY", (WIEN_B_FREQUENCY, "Hz K^-1",
                          "Wien frequency displacement constant")),
    ("RYDBERG", (RYDBERG, "m^-1", "Rydberg constant")),
    ("G_EARTH", (G_EARTH, "m s^-2", "Standard acceleration of gravity")),
])


def as_dict():
    """
    Return the constants table in JSON-friendly form.

    Returns
    -------
    dict
        {symbol: {"value": float, "unit": str, "description": str}}
    """
    return OrderedDict(
        (symbol, {"value": value, "unit": unit, "description": description})
        for symbol, (value, unit, description) in PHYSICAL_CONSTANTS.items()
    )
