"""
Rotational Motion Service: angular kinematics, torque and rotational
energy.

Angles are in radians, angular velocities in rad/s. The moment of
inertia formula is for a point mass (I = m r^2).

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.formula import Formula, Quantity
from physics.services import FormulaService


def rotation_angle(theta0, omega0, t, alpha):
    """theta = theta0 + omega0 t + alpha t^2 / 2."""
    return theta0 + omega0 * t + 0.5 * alpha * t * t


def angular_momentum(m, r, v, theta):
    """
    Angular momentum of a point mass about an axis.

    Parameters
    ----------
    m : float
        Mass (kg).
    r : float
        Distance from the axis (m).
    v : float
        Speed (m/s).
    theta : float
        Angle between r and v (rad).

    Returns
    -------
    float
        L = m r v sin(theta), in kg m^2/s.
    """
    return m * r * v * math.sin(theta)


FORMULAS = [
    Formula(
        "angular-velocity", "omega = dtheta / dt",
        lambda delta_theta, delta_t: delta_theta / delta_t,
        [Quantity("deltaTheta"), Quantity("deltaT", check_zero=True)],
        "Average angular velocity.",
    ),
    Formula(
        "angular-acceleration", "alpha = domega / dt",
        lambda delta_omega, delta_t: delta_omega / delta_t,
        [Quantity("deltaOmega"), Quantity("deltaT", check_zero=True)],
        "Average angular acceleration.",
    ),
    Formula(
        "rotation-omega", "omega = omega0 + alpha t",
        lambda omega0, alpha, t: omega0 + alpha * t,
        [Quantity("omega0"), Quantity("alpha"), Quantity("t")],
        "Angular velocity under constant angular acceleration.",
    ),
    Formula(
        "rotation-theta", "theta = theta0 + omega0 t + alpha t^2 / 2",
        rotation_angle,
        [Quantity("theta0"), Quantity("omega0"), Quantity("t"),
         Quantity("alpha")],
        "Angle under constant angular acceleration.",
    ),
    Formula(
        "rotation-omega2", "omega^2 = omega0^2 + 2 alpha (theta - theta0)",
        lambda omega0, alpha, theta, theta0: (
            omega0 * omega0 + 2 * alpha * (theta - theta0)),
        [Quantity("omega0"), Quantity("alpha"), Quantity("theta"),
         Quantity("theta0")],
        "Squared angular velocity after an angular displacement.",
    ),
    Formula(
        "rotation-omega-avg", "omega_avg = (omega + omega0) / 2",
        lambda omega, omega0: 0.5 * (omega + omega0),
        [Quantity("omega"), Quantity("omega0")],
        "Average angular velocity under constant angular acceleration.",
    ),
    Formula(
        "torque", "tau = r F sin(theta)",
        lambda r, force, theta: r * force * math.sin(theta),
        [Quantity("r"), Quantity("F"), Quantity("theta")],
        "Torque of a force about an axis.",
    ),
    Formula(
        "2nd-law-rotation", "tau = I alpha",
        lambda inertia, alpha: inertia * alpha,
        [Quantity("I"), Quantity("alpha")],
        "Newton's second law for rotation.",
    ),
    Formula(
        "moment-of-inertia", "I = m r^2",
        lambda m, r: m * r * r,
        [Quantity("m"), Quantity("r")],
        "Moment of inertia of a point mass.",
    ),
    Formula(
        "rotational-work", "W = tau dtheta",
        lambda tau, delta_theta: tau * delta_theta,
        [Quantity("tau"), Quantity("deltaTheta")],
        "Work done by a constant torque.",
    ),
    Formula(
        "rotational-power", "P = tau omega cos(theta)",
        lambda tau, omega, theta: tau * omega * math.cos(theta),
        [Quantity("tau"), Quantity("omega"), Quantity("theta")],
        "Power delivered by a torque.",
    ),
    Formula(
        "rotational-ke", "KE = I omega^2 / 2",
        lambda inertia, omega: 0.5 * inertia * omega * omega,
        [Quantity("I"), Quantity("omega")],
        "Rotational kinetic energy.",
    ),
    Formula(
        "angular-momentum", "L = m r v sin(theta)",
        angular_momentum,
        [Quantity("m"), Quantity("r"), Quantity("v"), Quantity("theta")],
        "Angular momentum of a point mass.",
    ),
    Formula(
        "angular-impulse", "H = tau dt",
        lambda tau, delta_t: tau * delta_t,
        [Quantity("tau"), Quantity("deltaT")],
        "Angular impulse of a constant torque.",
    ),
]


class RotationalMotionService(FormulaService):

    id = "rotational_motion"
    name = "Rotational Motion"
    description = "Angular kinematics, torque, rotational energy and momentum"

    def formulas(self):
        return FORMULAS
