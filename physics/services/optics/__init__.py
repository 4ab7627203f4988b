"""
Optics Service: refraction, interference, thin lenses and mirrors, and
Cherenkov radiation.

Angles are in radians. Formulas built on an inverse sine or cosine
reject inputs that put the argument outside [-1, 1] instead of
returning NaN.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import C
from physics.errors import DomainViolation
from physics.formula import EqualityCheck, Formula, Quantity
from physics.services import FormulaService


def cerenkov_angle(c, n, vp):
    """
    Cherenkov emission angle.

    Parameters
    ----------
    c : float
        Speed of light in vacuum (m/s).
    n : float
        Refractive index of the medium.
    vp : float
        Particle speed (m/s).

    Returns
    -------
    float
        theta = acos(c / (n vp)), in radians.

    Raises
    ------
    DomainViolation
        If the particle is below the Cherenkov threshold (vp <= c / n),
        where no radiation is emitted.
    """
    ratio = c / n / vp
    if ratio > 1:
        raise DomainViolation(
            "Particle speed (vp) must exceed c / n for Cherenkov radiation.")
    return math.acos(ratio)


def critical_angle(n1, n2):
    """
    Critical angle for total internal reflection, in radians.

    Raises
    ------
    DomainViolation
        If n2 > n1 (no total internal reflection).
    """
    if n2 > n1:
        raise DomainViolation(
            "n2 cannot be greater than n1 for total internal reflection.")
    return math.asin(n2 / n1)


FORMULAS = [
    Formula(
        "cerenkov-angle", "cos(theta) = c / (n v_p)",
        cerenkov_angle,
        [Quantity("c", default=C, check_positive=True),
         Quantity("n", check_positive=True),
         Quantity("vp", check_positive=True)],
        "Cherenkov radiation angle.",
    ),
    Formula(
        "interference-fringes", "y = n lambda L / d",
        lambda wavelength, d, screen, n: (n * wavelength * screen) / d,
        [Quantity("lambda", check_positive=True),
         Quantity("d", check_positive=True),
         Quantity("L", check_non_negative=True), Quantity("n")],
        "Position of the n-th double-slit fringe.",
    ),
    Formula(
        "index-of-refraction", "n = c / v",
        lambda c, v: c / v,
        [Quantity("c", default=C, check_positive=True),
         Quantity("v", check_positive=True)],
        "Refractive index from the speed of light in a medium.",
    ),
    EqualityCheck(
        "snells-law", "n1 sin(theta1) = n2 sin(theta2)",
        lambda n1, n2, theta1, theta2: (
            n1 * math.sin(theta1), n2 * math.sin(theta2)),
        [Quantity("n1", check_non_negative=True),
         Quantity("n2", check_non_negative=True),
         Quantity("theta1"), Quantity("theta2")],
        "Checks Snell's law of refraction.",
    ),
    Formula(
        "critical-angle", "sin(theta_c) = n2 / n1",
        critical_angle,
        [Quantity("n1", check_positive=True),
         Quantity("n2", check_non_negative=True)],
        "Critical angle for total internal reflection.",
    ),
    EqualityCheck(
        "image-location", "1 / f = 1 / d_o + 1 / d_i",
        lambda f, d_o, d_i: (1 / f, 1 / d_o + 1 / d_i),
        [Quantity("f", check_zero=True), Quantity("doValue", check_zero=True),
         Quantity("diValue", check_zero=True)],
        "Checks the thin lens / mirror equation.",
    ),
    EqualityCheck(
        "image-size", "h_i / h_o = d_i / d_o",
        lambda h_i, d_i, h_o, d_o: (h_i / h_o, d_i / d_o),
        [Quantity("hiValue"), Quantity("diValue"),
         Quantity("hoValue", check_zero=True),
         Quantity("doValue", check_zero=True)],
        "Checks the magnification relation.",
    ),
    Formula(
        "spherical-mirror", "f = r / 2",
        lambda r: r / 2,
        [Quantity("r")],
        "Focal length of a spherical mirror.",
    ),
]


class OpticsService(FormulaService):

    id = "optics"
    name = "Optics"
    description = "Refraction, interference, lenses, mirrors and Cherenkov angle"

    def formulas(self):
        return FORMULAS
