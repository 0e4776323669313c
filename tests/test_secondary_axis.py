"""
Unit tests for secondary axis specifications.

These tests validate:
- Promotion of bare callables and rejection of other values
- Resolution of derived options from the primary scale
- Break computation and numeric inversion onto the primary axis
"""

import numpy as np
import pytest

from unitscales.errors import ConfigurationError
from unitscales.scales import (
    SecondaryAxis,
    derive,
    dup_axis,
    is_derived,
    is_sec_axis,
    is_waiver,
    scale_x_continuous,
    sec_axis,
)
from unitscales.scales.secondary_axis import as_sec_axis


def to_feet(x):
    return x * 3.28084


def test_sec_axis_defaults_to_identity():
    """Without a transformation the secondary axis mirrors the primary one."""
    sec = sec_axis()
    assert np.allclose(sec.trans(np.array([1.0, 2.0])), [1.0, 2.0])


def test_callable_is_promoted():
    """A bare callable is shorthand for sec_axis(callable)."""
    sec = as_sec_axis(to_feet)
    assert is_sec_axis(sec)
    assert sec == sec_axis(to_feet)


def test_sec_axis_passes_through():
    """Fully constructed specs are returned unchanged."""
    sec = sec_axis(to_feet, name="ft")
    assert as_sec_axis(sec) is sec


@pytest.mark.parametrize("value", ["ft", 3, [1, 2]])
def test_invalid_secondary_axis(value):
    """Anything else is rejected with a pointer to sec_axis()."""
    with pytest.raises(ConfigurationError, match="Secondary axes must be specified using 'sec_axis\\(\\)'"):
        as_sec_axis(value)


def test_non_callable_trans():
    """The transformation itself must be callable."""
    with pytest.raises(ConfigurationError, match="must be callable"):
        SecondaryAxis(trans="x * 2")


def test_sec_axis_options_default_to_waiver():
    """sec_axis leaves name, breaks, labels and guide as waivers that init does not resolve."""
    primary = scale_x_continuous(name="distance", breaks=[0, 5])
    for sec in (sec_axis(to_feet), SecondaryAxis(to_feet)):
        resolved = sec.init(primary)
        for option in ("name", "breaks", "labels", "guide"):
            assert is_waiver(getattr(sec, option))
            assert is_waiver(getattr(resolved, option))


def test_dup_axis_derives_from_primary():
    """dup_axis copies name, breaks and labels from the primary scale without mutating itself."""
    primary = scale_x_continuous(name="distance", breaks=[0, 5])
    dup = dup_axis()
    resolved = dup.init(primary)
    assert resolved.name == "distance"
    assert resolved.breaks == [0, 5]
    assert resolved.guide == "none"
    assert is_derived(dup.name)
    assert is_derived(derive())


def test_break_info():
    """Secondary breaks are computed on the transformed range and positioned on the primary axis."""
    sec = sec_axis(lambda x: x * 1000, breaks=[0, 500, 1000, 1500, 2000, 2500])
    info = sec.break_info(np.array([0.0, 2.0]))
    assert np.allclose(info["range"], [0.0, 2000.0])
    assert info["major"].tolist() == [0.0, 500.0, 1000.0, 1500.0, 2000.0]
    assert np.allclose(info["major_source"], [0.0, 0.5, 1.0, 1.5, 2.0])
    assert info["labels"] == ["0", "500", "1000", "1500", "2000"]


def test_break_info_decreasing_transform():
    """Decreasing transformations are inverted correctly."""
    sec = sec_axis(lambda x: 10 - x, breaks=[2, 8])
    info = sec.break_info(np.array([0.0, 10.0]))
    assert np.allclose(info["major_source"], [8.0, 2.0])


def test_non_monotonic_transform():
    """Non-monotonic transformations cannot be inverted."""
    sec = sec_axis(lambda x: (x - 1) ** 2)
    with pytest.raises(ConfigurationError, match="monotonic"):
        sec.break_info(np.array([0.0, 2.0]))


def test_inverse():
    """Secondary values map back onto the primary axis."""
    sec = sec_axis(to_feet)
    assert np.allclose(sec.inverse([3.28084, 6.56168], np.array([0.0, 10.0])), [1.0, 2.0])


def test_label_mismatch():
    """Fixed secondary labels must match the secondary breaks."""
    sec = sec_axis(lambda x: x * 2, breaks=[0, 2], labels=["zero"])
    with pytest.raises(ConfigurationError, match="different lengths"):
        sec.break_info(np.array([0.0, 2.0]))
