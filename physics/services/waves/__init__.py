"""
Waves Service: wave speed, intensity, sound levels, Doppler shift and
Mach cones.

Sound levels are in decibels relative to a caller-supplied reference.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.errors import DegenerateResult, DomainViolation
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def doppler_ratio(c, vo, vs):
    """
    Classical Doppler frequency ratio f / f0.

    Parameters
    ----------
    c : float
        Wave speed in the medium (m/s).
    vo : float
        Observer speed toward the source (m/s).
    vs : float
        Source speed toward the observer (m/s).

    Returns
    -------
    float
        (c + vo) / (c - vs).

    Raises
    ------
    DegenerateResult
        If the source moves at the wave speed.
    """
    if c == vs:
        raise DegenerateResult(
            "Source speed (vs) cannot equal the wave speed (c).")
    return (c + vo) / (c - vs)


def decibels(factor, value, reference):
    """
    Level in decibels, factor * log10(value / reference).

    The logarithms are taken separately: value / reference can underflow
    to 0 or overflow even when both are positive and finite.
    """
    return factor * (math.log10(value) - math.log10(reference))


def mach_angle(c, v):
    """
    Half-angle of a Mach cone, in radians.

    Raises
    ------
    DomainViolation
        If the source is subsonic (c / v > 1), where no cone forms.
    """
    ratio = c / v
    if ratio > 1:
        raise DomainViolation(
            "Speed (v) must be at least the wave speed (c) to form a Mach cone.")
    return math.asin(ratio)


FORMULAS = [
    Formula(
        "periodic-wave-velocity", "v = f lambda",
        lambda f, wavelength: f * wavelength,
        [Quantity("f"), Quantity("lambda")],
        "Speed of a periodic wave.",
    ),
    Formula(
        "intensity", "I = P_avg / A",
        lambda avg_power, area: avg_power / area,
        [Quantity("avgPower"), Quantity("A", check_zero=True)],
        "Wave intensity.",
    ),
    Formula(
        "intensity-level", "L = 10 log10(I / I0)",
        lambda i, i0: decibels(10, i, i0),
        [Quantity("I", check_positive=True), Quantity("I0", check_positive=True)],
        "Sound intensity level in decibels.",
    ),
    Formula(
        "pressure-level", "L = 20 log10(dP / dP0)",
        lambda delta_p, delta_p0: decibels(20, delta_p, delta_p0),
        [Quantity("deltaP", check_positive=True),
         Quantity("deltaP0", check_positive=True)],
        "Sound pressure level in decibels.",
    ),
    Formula(
        "doppler-effect", "f / f0 = (c + vo) / (c - vs)",
        doppler_ratio,
        [Quantity("c"), Quantity("vo"), Quantity("vs")],
        "Classical Doppler frequency ratio.",
    ),
    Formula(
        "mach-angle", "sin(mu) = c / v",
        mach_angle,
        [Quantity("c", check_non_negative=True),
         Quantity("v", check_positive=True)],
        "Mach cone half-angle.",
    ),
]


class WavesService(FormulaService):

    id = "waves"
    name = "Waves"
    description = "Wave speed, intensity, decibel levels, Doppler and Mach"

    def formulas(self):
        return FORMULAS
