"""
Unit tests for automatic scale selection.

These tests validate:
- Scale kinds reported for quantities, numbers, strings and declared types
- Default scale construction per aesthetic and axis family
- Errors for non-position aesthetics and unsupported kinds
"""

import numpy as np
import pytest

from unitscales.errors import ConfigurationError
from unitscales.scales import ContinuousPositionScale, ScaleContinuousPositionUnit, find_scale, scale_type
from unitscales.scales.dispatch import SCALE_FACTORIES, axis_family, register_scale


class Tagged:
    """Value type declaring its own scale kinds."""

    __scale_type__ = ("unit", "continuous")


def test_quantity_is_unit_and_continuous(Q_):
    """Unit-tagged values select unit scales before plain continuous ones."""
    assert scale_type(Q_([1.0, 2.0], "m")) == ("unit", "continuous")
    assert scale_type(Q_(3, "W")) == ("unit", "continuous")


@pytest.mark.parametrize("values", [np.array([1.0, 2.0]), [1, 2, 3], 4.5])
def test_numbers_are_continuous(values):
    """Numeric data selects continuous scales."""
    assert scale_type(values) == ("continuous",)


@pytest.mark.parametrize("values", ["a", np.array(["a", "b"]), [True, False]])
def test_text_and_booleans_are_discrete(values):
    """Text and booleans select discrete scales."""
    assert scale_type(values) == ("discrete",)


def test_declared_scale_type():
    """Objects can declare their kinds explicitly."""
    assert scale_type(Tagged()) == ("unit", "continuous")


def test_axis_family():
    """Position aesthetics are grouped per axis."""
    assert axis_family("xend") == "x"
    assert axis_family("upper") == "y"
    with pytest.raises(ConfigurationError, match="not a position aesthetic"):
        axis_family("colour")


def test_find_scale_for_quantities(Q_):
    """Quantities on x get a unit scale with no unit set yet."""
    sc = find_scale("x", Q_([1.0], "m"))
    assert isinstance(sc, ScaleContinuousPositionUnit)
    assert sc.unit is None
    assert "x" in sc.aesthetics


def test_find_scale_for_numbers():
    """Plain numbers on ymin get a continuous y scale."""
    sc = find_scale("ymin", np.array([1.0, 2.0]))
    assert isinstance(sc, ContinuousPositionScale)
    assert sc.position == "left"


def test_find_scale_unsupported_kind():
    """Kinds without a registered factory are an error."""
    with pytest.raises(ConfigurationError, match="No default scale"):
        find_scale("x", np.array(["a", "b"]))


def test_register_scale(monkeypatch):
    """Registered factories take part in scale selection."""
    monkeypatch.setitem(SCALE_FACTORIES, ("x", "discrete"), lambda: "discrete-x")
    assert find_scale("x", ["a"]) == "discrete-x"
    sentinel = object()
    monkeypatch.setitem(SCALE_FACTORIES, ("y", "discrete"), None)
    register_scale("y", "discrete", lambda: sentinel)
    assert find_scale("y", ["a"]) is sentinel
