"""Axis expansion around the scale limits."""

import numpy as np

from unitscales.utils.validation import validate_pair

# mult_lo, add_lo, mult_hi, add_hi
DEFAULT_CONTINUOUS_EXPANSION = (0.05, 0.0, 0.05, 0.0)


def expansion(mult: float | tuple[float, float] = 0, add: float | tuple[float, float] = 0) -> tuple[float, ...]:
    """
    Build an expansion vector.

    Parameters
    ----------
    mult : float or pair of float
        Multiplicative padding, as a fraction of the axis span. A pair gives
        separate lower and upper values.
    add : float or pair of float
        Additive padding in data units.

    Returns
    -------
    tuple
        ``(mult_lo, add_lo, mult_hi, add_hi)``.
    """
    m = validate_pair(mult, "mult")
    a = validate_pair(add, "add")
    return (float(m[0]), float(a[0]), float(m[1]), float(a[1]))


def expand_range(limits: np.ndarray, expand: tuple[float, ...]) -> np.ndarray:
    """Widen `limits` by `expand`; a zero-width range is widened by the additive terms only."""
    lo, hi = (float(v) for v in limits)
    mult_lo, add_lo, mult_hi, add_hi = expand
    span = hi - lo
    return np.array([lo - span * mult_lo - add_lo, hi + span * mult_hi + add_hi])
