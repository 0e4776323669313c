"""
Shared pint unit registry.

All unit text handed to a scale is parsed against a single registry so that
units resolved by different scales compare and convert against each other.
The registry is also installed as pint's application registry, which lets
callers build quantities with ``pint.get_application_registry()``.
"""

from functools import lru_cache

import pint

# short, pretty pint format used for axis titles ("km/h", "W", "m²")
DEFAULT_UNIT_FORMAT = "~P"


@lru_cache(maxsize=1)
def load_unit_registry() -> pint.UnitRegistry:
    """
    Return the package-wide unit registry.

    Returns
    -------
    pint.UnitRegistry
        Registry created on first call and reused afterwards.

    Notes
    -----
    - Offset units (degC, degF) are converted to base units on multiplication.
    - Side effect: the registry becomes pint's application registry.
    """
    ureg = pint.UnitRegistry(autoconvert_offset_to_baseunit=True)
    pint.set_application_registry(ureg)
    return ureg
