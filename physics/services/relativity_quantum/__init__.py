"""
Relativity and Quantum Service: special relativity and photon physics.

Special relativity
------------------
Lorentz factor, time dilation, length contraction, velocity addition,
relativistic energy / momentum / kinetic energy and the relativistic
Doppler shift. The speed of light c defaults to the exact SI value and
may be overridden (e.g. c = 1 for natural units).

Speeds above c are rejected. Exactly at c the massive-particle
quantities diverge and are returned as infinities, which the API
serializes as null.

Quantum
-------
Photon energy and momentum, the photoelectric effect and hydrogen-like
Rydberg transitions.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from physics.constants import C, H, RYDBERG
from physics.errors import DegenerateResult, DomainViolation
from physics.formula import Formula, Quantity
from physics.services import FormulaService

FASTER_THAN_LIGHT = "Velocity (v) cannot be greater than the speed of light (c)."


def speed_ratio_squared(v, c):
    """
    beta^2 = v^2 / c^2, rejecting superluminal speeds.

    Raises
    ------
    DomainViolation
        If |v| > |c|.
    """
    # v / c first: v^2 and c^2 can underflow or overflow on their own
    beta = v / c
    beta2 = beta * beta
    if beta2 > 1:
        raise DomainViolation(FASTER_THAN_LIGHT)
    return beta2


def lorentz_factor(v, c):
    """gamma = 1 / sqrt(1 - v^2/c^2); inf at |v| = c."""
    beta2 = speed_ratio_squared(v, c)
    if beta2 == 1:
        return math.inf
    return 1 / math.sqrt(1 - beta2)


def time_dilation(t0, v, c):
    """Dilated time t = gamma t0."""
    beta2 = speed_ratio_squared(v, c)
    if beta2 == 1:
        return math.inf
    return t0 / math.sqrt(1 - beta2)


def length_contraction(l0, v, c):
    """Contracted length L = L0 / gamma; zero at |v| = c."""
    beta2 = speed_ratio_squared(v, c)
    if beta2 == 1:
        return 0
    return l0 * math.sqrt(1 - beta2)


def relativistic_velocity(u, v, c):
    """
    Relativistic velocity addition.

    Parameters
    ----------
    u, v : float
        Velocities to compose (m/s).
    c : float
        Speed of light (m/s).

    Returns
    -------
    float
        (u + v) / (1 + u v / c^2).

    Raises
    ------
    DegenerateResult
        If 1 + u v / c^2 is zero.
    """
    if u == 0 or v == 0:
        return u + v
    denominator = 1 + (u / c) * (v / c)
    if denominator == 0:
        raise DegenerateResult(
            "Invalid input velocities (u, v) or speed of light (c) causing "
            "division by zero.")
    return (u + v) / denominator


def _require_rest_mass(m, v, c, use_instead):
    if m == 0:
        if abs(v) != c:
            raise DomainViolation(
                "Massless particles (m=0) must travel at the speed of light (v=c).")
        raise DomainViolation(
            "Massless particles (m=0) are not supported here; use {} "
            "instead.".format(use_instead))


def relativistic_energy(m, v, c):
    """Total energy E = gamma m c^2 of a massive particle."""
    _require_rest_mass(m, v, c, "energy-momentum (E = pc)")
    beta2 = speed_ratio_squared(v, c)
    if beta2 == 1:
        return math.inf
    return (m * c * c) / math.sqrt(1 - beta2)


def relativistic_momentum(m, v, c):
    """Momentum p = gamma m v of a massive particle; keeps the sign of v."""
    _require_rest_mass(m, v, c,
                       "photon-momentum-from-wavelength or energy-momentum")
    beta2 = speed_ratio_squared(v, c)
    if beta2 == 1:
        return math.copysign(math.inf, v)
    return (m * v) / math.sqrt(1 - beta2)


def energy_momentum(p, m, c):
    """E = sqrt((pc)^2 + (mc^2)^2)."""
    return math.hypot(p * c, m * c * c)


def relativistic_ke(m, v, c):
    """
    Relativistic kinetic energy KE = (gamma - 1) m c^2.

    Zero for a particle at rest, whatever its mass.

    Raises
    ------
    DomainViolation
        For a moving massless particle, or if |v| >= c.
    """
    if v == 0:
        return 0
    if m == 0:
        raise DomainViolation(
            "Relativistic kinetic energy (KE) is typically calculated for "
            "particles with rest mass (m > 0). For massless particles, "
            "KE = Total Energy (E = pc).")
    beta2 = (v / c) * (v / c)
    if beta2 >= 1:
        raise DomainViolation(
            "Velocity (v) must be less than the speed of light (c) for "
            "finite kinetic energy calculation with rest mass.")
    gamma = 1 / math.sqrt(1 - beta2)
    return (gamma - 1) * m * c * c


def relativistic_doppler(lambda0, v_rel, c):
    """
    Relativistic Doppler-shifted wavelength.

    Parameters
    ----------
    lambda0 : float
        Emitted wavelength (m).
    v_rel : float
        Recession speed (m/s); positive means receding (redshift).
    c : float
        Speed of light (m/s).

    Returns
    -------
    float
        lambda = lambda0 sqrt((1 + beta) / (1 - beta)).

    Raises
    ------
    DomainViolation
        If |v_rel| >= c.
    """
    beta = v_rel / c
    if abs(beta) >= 1:
        raise DomainViolation(
            "Relative velocity (v_rel) must be less than the speed of light (c).")
    return lambda0 * math.sqrt((1 + beta) / (1 - beta))


def rydberg_transition(n_initial, n_final, atomic_number, constant):
    """
    Wavenumber of a hydrogen-like electronic transition.

    Parameters
    ----------
    n_initial, n_final : float
        Principal quantum numbers (positive integers, distinct).
    atomic_number : float
        Nuclear charge Z (positive integer).
    constant : float
        Rydberg constant (1/m).

    Returns
    -------
    float
        1 / lambda = R Z^2 (1 / n_i^2 - 1 / n_f^2). Negative for emission
        (n_i > n_f).

    Raises
    ------
    DomainViolation
        If n_initial equals n_final.
    """
    if n_initial == n_final:
        raise DomainViolation(
            "nInitial and nFinal must be different for a transition.")
    initial_term = 1 / (n_initial * n_initial)
    final_term = 1 / (n_final * n_final)
    return constant * (atomic_number * atomic_number) * (initial_term - final_term)


def _speed_of_light(**flags):
    flags = flags or {"check_zero": True}
    return Quantity("c", default=C, **flags)


FORMULAS = [
    Formula(
        "lorentz-factor", "gamma = 1 / sqrt(1 - v^2 / c^2)",
        lorentz_factor,
        [Quantity("v"), _speed_of_light()],
        "Lorentz factor.",
    ),
    Formula(
        "time-dilation", "t = t0 / sqrt(1 - v^2 / c^2)",
        time_dilation,
        [Quantity("t0", check_non_negative=True), Quantity("v"),
         _speed_of_light()],
        "Dilated time interval.",
    ),
    Formula(
        "length-contraction", "L = L0 sqrt(1 - v^2 / c^2)",
        length_contraction,
        [Quantity("L0", check_non_negative=True), Quantity("v"),
         _speed_of_light()],
        "Contracted length.",
    ),
    Formula(
        "relativistic-velocity", "w = (u + v) / (1 + u v / c^2)",
        relativistic_velocity,
        [Quantity("u"), Quantity("v"), _speed_of_light()],
        "Relativistic velocity addition.",
    ),
    Formula(
        "relativistic-energy", "E = m c^2 / sqrt(1 - v^2 / c^2)",
        relativistic_energy,
        [Quantity("m", check_non_negative=True), Quantity("v"),
         _speed_of_light()],
        "Total energy of a massive particle.",
    ),
    Formula(
        "relativistic-momentum", "p = m v / sqrt(1 - v^2 / c^2)",
        relativistic_momentum,
        [Quantity("m", check_non_negative=True), Quantity("v"),
         _speed_of_light()],
        "Momentum of a massive particle.",
    ),
    Formula(
        "energy-momentum", "E^2 = (p c)^2 + (m c^2)^2",
        energy_momentum,
        [Quantity("p", check_non_negative=True),
         Quantity("m", check_non_negative=True), _speed_of_light()],
        "Energy-momentum relation.",
    ),
    Formula(
        "mass-energy", "E = m c^2",
        lambda m, c: m * c * c,
        [Quantity("m", check_non_negative=True), _speed_of_light()],
        "Mass-energy equivalence.",
    ),
    Formula(
        "relativistic-ke", "KE = (gamma - 1) m c^2",
        relativistic_ke,
        [Quantity("m", check_non_negative=True), Quantity("v"),
         _speed_of_light()],
        "Relativistic kinetic energy.",
    ),
    Formula(
        "relativistic-doppler-effect",
        "lambda = lambda0 sqrt((1 + beta) / (1 - beta))",
        relativistic_doppler,
        [Quantity("lambda0", check_positive=True), Quantity("v_rel"),
         _speed_of_light(check_positive=True)],
        "Relativistic Doppler shift of a wavelength.",
    ),
    Formula(
        "photon-energy-from-frequency", "E = h f",
        lambda f, h: h * f,
        [Quantity("f", check_non_negative=True),
         Quantity("h", default=H, check_positive=True)],
        "Photon energy.",
    ),
    Formula(
        "photon-momentum-from-wavelength", "p = h / lambda",
        lambda wavelength, h: h / wavelength,
        [Quantity("lambda", check_positive=True),
         Quantity("h", default=H, check_positive=True)],
        "Photon momentum.",
    ),
    Formula(
        "photoelectric-effect-ke", "KE_max = max(0, E - phi)",
        lambda photon_energy, phi: max(0.0, photon_energy - phi),
        [Quantity("photonEnergy", check_non_negative=True),
         Quantity("phi", check_non_negative=True)],
        "Maximum kinetic energy of photoelectrons.",
    ),
    Formula(
        "rydberg-transition", "1 / lambda = R Z^2 (1 / n_i^2 - 1 / n_f^2)",
        rydberg_transition,
        [Quantity("nInitial", check_positive=True, check_integer=True),
         Quantity("nFinal", check_positive=True, check_integer=True),
         Quantity("atomicNumber", label="atomicNumber (Z)", default=1,
                  check_positive=True, check_integer=True),
         Quantity("constant", label="constant (Rydberg value)",
                  default=RYDBERG, check_positive=True)],
        "Wavenumber of a hydrogen-like transition.",
    ),
]


class RelativityQuantumService(FormulaService):

    id = "relativity_quantum"
    name = "Relativity and Quantum"
    description = "Special relativity, photon energy and momentum, Rydberg lines"

    def formulas(self):
        return FORMULAS
