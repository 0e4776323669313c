"""
Normalize user-supplied unit arguments.

A scale's `unit` option may be given as nothing at all, unit text, an
already-parsed pint unit, or a quantity whose unit should be borrowed. This
module turns all of these into a single ``pint.Unit | None`` value.
"""

from tokenize import TokenError
from typing import Any

import pint

from unitscales.config import load_unit_registry
from unitscales.errors import ConfigurationError, ParseError
from unitscales.utils.logging import get_logger

# pint's expression parser reports some malformed input (e.g. "m/") through a bare assert
PARSE_ERRORS = (
    pint.errors.PintError, AssertionError, AttributeError, IndexError, TypeError, ValueError, SyntaxError, TokenError
)

logger = get_logger(__name__)


def parse_unit(text: str) -> pint.Unit:
    """
    Parse unit text against the package registry.

    Parameters
    ----------
    text : str
        Unit expression such as ``"m"``, ``"km/h"`` or ``"kg*m/s**2"``.

    Returns
    -------
    pint.Unit
        Parsed unit.

    Raises
    ------
    ParseError
        If the text is empty or not a valid unit expression.
    """
    if not text.strip():
        logger.error("Unit text must not be empty.")
        raise ParseError("Unit text must not be empty.")

    ureg = load_unit_registry()
    try:
        return ureg.Unit(text)
    except PARSE_ERRORS as e:
        logger.error(f"Could not parse unit {text!r}: {e}")
        raise ParseError(f"Could not parse unit {text!r}: {e}") from e


def resolve_unit(unit: Any) -> pint.Unit | None:
    """
    Resolve a unit argument into a pint unit.

    Parameters
    ----------
    unit : None, str, pint.Unit or pint.Quantity
        ``None`` stays ``None``; a unit passes through; text is parsed; a
        quantity contributes the unit it carries.

    Returns
    -------
    pint.Unit or None
        The resolved unit.

    Raises
    ------
    ParseError
        If unit text cannot be parsed.
    ConfigurationError
        For any other argument type.
    """
    if unit is None:
        return None
    if isinstance(unit, pint.Unit):
        return unit
    if isinstance(unit, pint.Quantity):
        return unit.units
    if isinstance(unit, str):
        return parse_unit(unit)
    msg = f"unit must either be None or a pint Unit, Quantity or unit string, got {type(unit).__name__}."
    logger.error(msg)
    raise ConfigurationError(msg)
