"""
Mechanics Service: one-dimensional kinematics and basic dynamics.

Constant-acceleration motion, Newton's second law, weight and dry
friction. All quantities are signed components unless noted; no
constraint beyond finiteness is applied except on time intervals used
as denominators.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.constants import G_EARTH
from physics.formula import Formula, Quantity
from physics.services import FormulaService


def motion_displacement(s0, v0, t, a):
    """
    Position under constant acceleration.

    Parameters
    ----------
    s0 : float
        Initial position (m).
    v0 : float
        Initial velocity (m/s).
    t : float
        Elapsed time (s).
    a : float
        Acceleration (m/s^2).

    Returns
    -------
    float
        s = s0 + v0 t + a t^2 / 2, in meters.
    """
    return s0 + v0 * t + 0.5 * a * t * t


def motion_velocity_squared(v0, a, s, s0):
    """v^2 = v0^2 + 2 a (s - s0); returns the square, not v."""
    return v0 * v0 + 2 * a * (s - s0)


FORMULAS = [
    Formula(
        "velocity", "v = ds / dt",
        lambda delta_s, delta_t: delta_s / delta_t,
        [Quantity("deltaS"), Quantity("deltaT", check_zero=True)],
        "Average velocity over a time interval.",
    ),
    Formula(
        "acceleration", "a = dv / dt",
        lambda delta_v, delta_t: delta_v / delta_t,
        [Quantity("deltaV"), Quantity("deltaT", check_zero=True)],
        "Average acceleration over a time interval.",
    ),
    Formula(
        "motion-v", "v = v0 + a t",
        lambda v0, a, t: v0 + a * t,
        [Quantity("v0"), Quantity("a"), Quantity("t")],
        "Velocity under constant acceleration.",
    ),
    Formula(
        "motion-s", "s = s0 + v0 t + a t^2 / 2",
        motion_displacement,
        [Quantity("s0"), Quantity("v0"), Quantity("t"), Quantity("a")],
        "Position under constant acceleration.",
    ),
    Formula(
        "motion-v2", "v^2 = v0^2 + 2 a (s - s0)",
        motion_velocity_squared,
        [Quantity("v0"), Quantity("a"), Quantity("s"), Quantity("s0")],
        "Squared velocity after a displacement under constant acceleration.",
    ),
    Formula(
        "motion-v-avg", "v_avg = (v + v0) / 2",
        lambda v, v0: 0.5 * (v + v0),
        [Quantity("v"), Quantity("v0")],
        "Average velocity under constant acceleration.",
    ),
    Formula(
        "force", "F = m a",
        lambda m, a: m * a,
        [Quantity("m"), Quantity("a")],
        "Newton's second law.",
    ),
    Formula(
        "weight", "W = m g",
        lambda m, g: m * g,
        [Quantity("m"), Quantity("g", default=G_EARTH)],
        "Weight; g defaults to standard gravity.",
    ),
    Formula(
        "dry-friction-static-max", "f_s = mu_s N",
        lambda mu_s, normal: mu_s * normal,
        [Quantity("muS"), Quantity("N")],
        "Maximum static friction force.",
    ),
    Formula(
        "dry-friction-kinetic", "f_k = mu_k N",
        lambda mu_k, normal: mu_k * normal,
        [Quantity("muK"), Quantity("N")],
        "Kinetic friction force.",
    ),
]


class MechanicsService(FormulaService):

    id = "mechanics"
    name = "Mechanics"
    description = "Kinematics, Newton's second law, weight and friction"

    def formulas(self):
        return FORMULAS
