"""
Tests for physical constants module.

Validates the defaults formulas fall back on against CODATA values and
checks the published table.
"""

import math

from physics import constants
from physics.constants import (
    C, EPSILON_0, G, G_EARTH, H, K_BOLTZMANN, K_COULOMB, MU_0, R_GAS,
    RYDBERG, SIGMA_STEFAN, WIEN_B, WIEN_B_FREQUENCY,
)


class TestPhysicalConstants:
    """Verify fundamental constants are at expected values."""

    def test_exact_si_values(self):
        assert C == 299792458.0
        assert H == 6.62607015e-34
        assert K_BOLTZMANN == 1.380649e-23
        assert G_EARTH == 9.80665

    def test_gravitational_constant(self):
        assert abs(G - 6.674e-11) / 6.674e-11 < 1e-3

    def test_coulomb_constant(self):
        assert abs(K_COULOMB - 8.9875517e9) / 8.9875517e9 < 1e-6

    def test_permittivity_and_permeability(self):
        """eps0 mu0 c^2 = 1"""
        assert abs(EPSILON_0 * MU_0 * C * C - 1) < 1e-9

    def test_gas_constant(self):
        assert abs(R_GAS - 8.314462618) < 1e-8

    def test_radiation_constants(self):
        assert abs(SIGMA_STEFAN - 5.670374419e-8) / 5.670374419e-8 < 1e-9
        assert abs(WIEN_B - 2.897771955e-3) / 2.897771955e-3 < 1e-9
        assert abs(WIEN_B_FREQUENCY - 5.878925757e10) / 5.878925757e10 < 1e-9

    def test_rydberg(self):
        assert abs(RYDBERG - 10973731.568) < 1e-2


class TestConstantsTable:

    def test_every_entry_finite(self):
        for symbol, entry in constants.as_dict().items():
            assert math.isfinite(entry["value"]), symbol
            assert entry["unit"]
            assert entry["description"]

    def test_table_matches_module_values(self):
        table = constants.as_dict()
        assert table["K_COULOMB"]["value"] == K_COULOMB
        assert table["WIEN_B"]["value"] == WIEN_B
