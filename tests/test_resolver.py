"""
Unit tests for unit argument resolution.

These tests validate:
- Pass-through of None, pint units and quantities
- Parsing of unit text and ParseError on malformed text
- ConfigurationError for unsupported argument types
"""

import pint
import pytest

from unitscales.errors import ConfigurationError, ParseError, UnitMismatchError, UnitScaleError
from unitscales.units import convert_to, is_quantity, parse_unit, resolve_unit, strip_units


def test_none_stays_none():
    """An absent unit is not resolved to anything."""
    assert resolve_unit(None) is None


def test_unit_passes_through(ureg):
    """An already parsed unit is returned as-is."""
    unit = ureg.Unit("W")
    assert resolve_unit(unit) is unit


def test_string_is_parsed(ureg):
    """Unit text is parsed against the package registry."""
    assert resolve_unit("km/h") == ureg.Unit("kilometer / hour")


def test_quantity_contributes_its_unit(Q_, ureg):
    """A quantity contributes the unit it carries."""
    assert resolve_unit(Q_([1.0, 2.0], "mi")) == ureg.Unit("mile")


@pytest.mark.parametrize("text", ["not-a-real-unit", "furlongz", "   ", "m/", "m**", "1/", "**", "'"])
def test_bad_text_raises_parse_error(text):
    """Malformed or unknown unit text raises ParseError."""
    with pytest.raises(ParseError):
        parse_unit(text)


@pytest.mark.parametrize("value", [5, 2.5, ["m"], {"unit": "m"}])
def test_unsupported_type_raises_configuration_error(value):
    """Arguments that are not None, text, units or quantities are rejected."""
    with pytest.raises(ConfigurationError, match="unit must either be None"):
        resolve_unit(value)


def test_error_hierarchy():
    """All domain errors share a root and are ValueErrors."""
    for err in (ConfigurationError, ParseError, UnitMismatchError):
        assert issubclass(err, UnitScaleError)
        assert issubclass(err, ValueError)


def test_convert_to(Q_, ureg):
    """Quantities convert into a compatible unit and come back as plain floats."""
    out = convert_to(Q_([1, 2], "km"), ureg.Unit("m"))
    assert not is_quantity(out)
    assert out.tolist() == [1000.0, 2000.0]


def test_convert_to_incompatible(Q_, ureg):
    """Incompatible dimensions raise UnitMismatchError wrapping pint's error."""
    with pytest.raises(UnitMismatchError) as excinfo:
        convert_to(Q_([1, 2], "s"), ureg.Unit("m"))
    assert isinstance(excinfo.value.__cause__, pint.DimensionalityError)


def test_strip_units_scalar(Q_):
    """Scalars become one-element arrays."""
    assert strip_units(Q_(3, "m")).tolist() == [3.0]
    assert strip_units(4).tolist() == [4.0]
