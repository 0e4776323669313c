"""
Out-of-bounds policies.

Each policy takes plain values and a ``(low, high)`` range and returns a new
float array; inputs are never modified in place.
"""

import numpy as np


def censor(values: np.ndarray, limits: np.ndarray) -> np.ndarray:
    """Replace finite values outside `limits` with NaN."""
    x = np.array(values, dtype=float)
    lo, hi = np.sort(np.asarray(limits, dtype=float))
    outside = np.isfinite(x) & ((x < lo) | (x > hi))
    x[outside] = np.nan
    return x


def squish(values: np.ndarray, limits: np.ndarray) -> np.ndarray:
    """Clamp values (including infinities) into `limits`."""
    x = np.array(values, dtype=float)
    lo, hi = np.sort(np.asarray(limits, dtype=float))
    return np.clip(x, lo, hi)


def squish_infinite(values: np.ndarray, limits: np.ndarray) -> np.ndarray:
    """Clamp only -inf/+inf onto the limits."""
    x = np.array(values, dtype=float)
    lo, hi = np.sort(np.asarray(limits, dtype=float))
    x[x == -np.inf] = lo
    x[x == np.inf] = hi
    return x


def keep(values: np.ndarray, limits: np.ndarray) -> np.ndarray:
    return np.array(values, dtype=float)
