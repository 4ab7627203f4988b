"""
Solid Mechanics Service: Hooke's law and the elastic moduli.

Each modulus is stress over strain, (F / A) / (deformation / original
dimension). Deformations may be negative (compression) but not zero;
areas and original dimensions must be positive.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.formula import Formula, Quantity
from physics.services import FormulaService


def elastic_modulus(force, deformation, area, original):
    """
    Stress over strain.

    Parameters
    ----------
    force : float
        Applied force (N).
    deformation : float
        Change in length, transverse displacement or volume; non-zero.
    area : float
        Area the force acts on (m^2), positive.
    original : float
        Original length, height or volume, positive.

    Returns
    -------
    float
        (F * original) / (A * deformation), in pascals.
    """
    return (force * original) / area / deformation


def _modulus_quantities(deformation, original):
    return [
        Quantity("F"),
        Quantity(deformation, check_zero=True),
        Quantity("A", check_positive=True),
        Quantity(original, check_positive=True),
    ]


FORMULAS = [
    Formula(
        "hookes-law", "F = -k dx",
        lambda k, delta_x: -k * delta_x,
        [Quantity("k", check_non_negative=True), Quantity("deltaX")],
        "Restoring force of an ideal spring.",
    ),
    Formula(
        "youngs-modulus", "E = (F / A) / (dL / L0)",
        elastic_modulus,
        _modulus_quantities("deltaL", "L0"),
        "Young's modulus (tensile stiffness).",
    ),
    Formula(
        "shear-modulus", "G = (F / A) / (dx / y)",
        elastic_modulus,
        _modulus_quantities("deltaX", "y"),
        "Shear modulus.",
    ),
    Formula(
        "bulk-modulus", "B = (F / A) / (dV / V0)",
        elastic_modulus,
        _modulus_quantities("deltaV", "V0"),
        "Bulk modulus.",
    ),
]


class SolidMechanicsService(FormulaService):

    id = "solid_mechanics"
    name = "Solid Mechanics"
    description = "Hooke's law, Young's, shear and bulk moduli"

    def formulas(self):
        return FORMULAS
