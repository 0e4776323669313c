"""Drawing support for trained position scales."""

from unitscales.viz.axes import apply_position_scale

__all__ = ["apply_position_scale"]
