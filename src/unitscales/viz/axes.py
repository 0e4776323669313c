"""
Push trained position scales onto matplotlib axes.

The plot coordinates are the scale's transformed space: limits come from
``scale.dimension()``, ticks from ``scale.break_info()`` and the axis title
from ``scale.get_title()``.
"""

import numpy as np
from matplotlib.axes import Axes

from unitscales.scales.base import PositionScale
from unitscales.scales.sentinels import is_waiver

OPPOSITE_SIDE = {"bottom": "top", "top": "bottom", "left": "right", "right": "left"}


def apply_position_scale(ax: Axes, scale: PositionScale, default_title: str | None = None) -> Axes:
    """
    Configure one axis of `ax` from a trained position scale.

    Parameters
    ----------
    ax : matplotlib.axes.Axes
        Target axes.
    scale : PositionScale
        Trained x or y scale.
    default_title : str, optional
        Title used when the scale name is a waiver. Defaults to the aesthetic name.

    Returns
    -------
    matplotlib.axes.Axes
        The secondary axes when the scale has a secondary axis, otherwise `ax`.
    """
    family = scale.aesthetics[0]
    is_x = family == "x"
    axis = ax.xaxis if is_x else ax.yaxis

    lo, hi = scale.dimension()
    (ax.set_xlim if is_x else ax.set_ylim)(lo, hi)

    info = scale.break_info()
    axis.set_ticks(info["major"])
    if info["labels"]:
        axis.set_ticklabels(info["labels"])
    else:
        axis.set_ticklabels([""] * len(info["major"]))
    axis.set_ticks(info["minor"], minor=True)

    title = scale.get_title(default_title or family)
    if title is not None:
        axis.set_label_text(title)
    axis.set_label_position(scale.position)
    axis.set_ticks_position(scale.position)
    if getattr(scale, "verbose", False):
        scale.logger.debug(f"Applied {family} scale: limits=({lo:g}, {hi:g}), {len(info['major'])} breaks, title={title!r}")

    if scale.secondary_axis is None:
        return ax
    return _apply_secondary_axis(ax, scale, np.array([lo, hi]), is_x)


def _apply_secondary_axis(ax: Axes, scale: PositionScale, extent: np.ndarray, is_x: bool) -> Axes:
    sec = scale.secondary_axis.init(scale)

    def forward(values):
        return np.asarray(sec.trans(scale.trans.inverse(np.asarray(values, dtype=float))), dtype=float)

    def inverse(values):
        return sec.inverse(values, extent, scale.trans)

    location = OPPOSITE_SIDE[scale.position]
    secax = (ax.secondary_xaxis if is_x else ax.secondary_yaxis)(location, functions=(forward, inverse))
    sec_axis = secax.xaxis if is_x else secax.yaxis

    info = sec.break_info(extent, scale.trans)
    secax.set_ticks(info["major"])
    if info["labels"]:
        sec_axis.set_ticklabels(info["labels"])
    if sec.name is not None and not is_waiver(sec.name):
        sec_axis.set_label_text(str(sec.name))
    return secax
