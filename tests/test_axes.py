"""
Unit tests for applying position scales to matplotlib axes.

Uses the non-interactive Agg backend; figures are closed after each test.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from unitscales.scales import scale_x_unit, scale_y_unit, sec_axis  # noqa: E402
from unitscales.viz import apply_position_scale  # noqa: E402


@pytest.fixture
def ax():
    """Yield a fresh matplotlib Axes and close its figure afterwards."""
    fig, axes = plt.subplots()
    yield axes
    plt.close(fig)


def test_apply_x_scale(ax, Q_):
    """Limits, ticks, labels and title come from the trained scale."""
    sc = scale_x_unit(unit="m", breaks=[0, 1000, 2000])
    sc.train(Q_([0, 2], "km"))
    out = apply_position_scale(ax, sc)

    assert out is ax
    assert np.allclose(ax.get_xlim(), (-100.0, 2100.0))
    assert ax.get_xticks().tolist() == [0.0, 1000.0, 2000.0]
    assert [t.get_text() for t in ax.get_xticklabels()] == ["0", "1000", "2000"]
    assert ax.get_xlabel() == "x [m]"


def test_apply_y_scale_on_right(ax, Q_):
    """y scales honour their position and the default title argument."""
    sc = scale_y_unit(position="right", breaks=[10, 20])
    sc.train(Q_([10, 20], "W"))
    sc.map(Q_([10, 20], "W"))
    apply_position_scale(ax, sc, default_title="power")

    assert ax.get_ylabel() == "power [W]"
    assert ax.yaxis.get_label_position() == "right"


def test_apply_secondary_axis(ax, Q_):
    """A secondary axis is drawn on the opposite side with its own breaks."""
    sc = scale_x_unit(unit="m", sec_axis=sec_axis(lambda x: x / 1000, name="distance [km]", breaks=[0, 1, 2]))
    sc.train(Q_([0, 2000], "m"))
    secax = apply_position_scale(ax, sc)

    assert secax is not ax
    assert secax.get_xlabel() == "distance [km]"
    assert secax.get_xticks().tolist() == [0.0, 1.0, 2.0]
