"""
Nuclear Service: radioactive decay and radiation dose.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.formula import Formula, Quantity
from physics.services import FormulaService


def remaining_quantity(n0, t, t_half):
    """
    Quantity left after exponential decay.

    Parameters
    ----------
    n0 : float
        Initial quantity (nuclei, mass or activity).
    t : float
        Elapsed time, same unit as t_half.
    t_half : float
        Half-life, positive.

    Returns
    -------
    float
        N = N0 (1/2)^(t / T_half).
    """
    return n0 * 0.5 ** (t / t_half)


FORMULAS = [
    Formula(
        "activity", "A = N / t",
        lambda n, t: n / t,
        [Quantity("nValue", check_non_negative=True, check_integer=True),
         Quantity("tValue", check_positive=True)],
        "Average activity from decays counted over a time interval.",
    ),
    Formula(
        "half-life", "N = N0 (1/2)^(t / T_half)",
        remaining_quantity,
        [Quantity("N0", check_non_negative=True),
         Quantity("tValue", check_non_negative=True),
         Quantity("Thalf", check_positive=True)],
        "Remaining quantity after radioactive decay.",
    ),
    Formula(
        "absorbed-dose", "D = E / m",
        lambda energy, m: energy / m,
        [Quantity("EValue", check_non_negative=True),
         Quantity("mValue", check_positive=True)],
        "Absorbed dose in grays.",
    ),
    Formula(
        "equivalent-dose", "H = w_R D",
        lambda w_r, dose: w_r * dose,
        [Quantity("wR", check_non_negative=True),
         Quantity("DValue", check_non_negative=True)],
        "Equivalent dose in sieverts.",
    ),
    Formula(
        "effective-dose", "E = w_T H",
        lambda w_t, dose: w_t * dose,
        [Quantity("wT", check_non_negative=True),
         Quantity("HValue", check_non_negative=True)],
        "Effective dose in sieverts.",
    ),
]


class NuclearService(FormulaService):

    id = "nuclear"
    name = "Nuclear"
    description = "Activity, half-life decay and radiation dose"

    def formulas(self):
        return FORMULAS
