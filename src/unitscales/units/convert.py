"""Conversion of unit-tagged values into plain numeric arrays."""

from typing import Any

import numpy as np
import pint

from unitscales.errors import UnitMismatchError
from unitscales.utils.logging import get_logger

logger = get_logger(__name__)


def is_quantity(values: Any) -> bool:
    """Return True if `values` carries a pint unit."""
    return isinstance(values, pint.Quantity)


def strip_units(values: Any) -> np.ndarray:
    """Return the magnitudes of `values` as a 1-D float array; plain values pass through."""
    if is_quantity(values):
        values = values.magnitude
    return np.atleast_1d(np.asarray(values, dtype=float))


def convert_to(values: pint.Quantity, unit: pint.Unit) -> np.ndarray:
    """
    Convert `values` into `unit` and return the plain magnitudes.

    Parameters
    ----------
    values : pint.Quantity
        Unit-tagged values, scalar or array.
    unit : pint.Unit
        Target unit. May belong to another registry as long as its unit names
        are defined in the registry of `values`.

    Returns
    -------
    np.ndarray
        1-D float array of magnitudes expressed in `unit`.

    Raises
    ------
    UnitMismatchError
        If `values` and `unit` have different dimensionality.
    """
    try:
        converted = values.to(unit)
    except pint.DimensionalityError as e:
        error = UnitMismatchError(values.units, unit)
        logger.error(str(error))
        raise error from e
    return strip_units(converted)
