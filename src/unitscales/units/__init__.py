"""Unit resolution and conversion helpers built on pint."""

from unitscales.units.convert import convert_to, is_quantity, strip_units
from unitscales.units.resolver import parse_unit, resolve_unit

__all__ = ["convert_to", "is_quantity", "parse_unit", "resolve_unit", "strip_units"]
