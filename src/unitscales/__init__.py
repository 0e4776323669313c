"""unitscales package."""

from unitscales._version import __version__
from unitscales.config import load_unit_registry
from unitscales.errors import ConfigurationError, ParseError, UnitMismatchError, UnitScaleError
from unitscales.scales import (
    ScaleContinuousPositionUnit,
    dup_axis,
    find_scale,
    scale_type,
    scale_x_continuous,
    scale_x_unit,
    scale_y_continuous,
    scale_y_unit,
    sec_axis,
    waiver,
)
from unitscales.viz import apply_position_scale

__all__ = [
    "ConfigurationError",
    "ParseError",
    "ScaleContinuousPositionUnit",
    "UnitMismatchError",
    "UnitScaleError",
    "__version__",
    "apply_position_scale",
    "dup_axis",
    "find_scale",
    "load_unit_registry",
    "scale_type",
    "scale_x_continuous",
    "scale_x_unit",
    "scale_y_continuous",
    "scale_y_unit",
    "sec_axis",
    "waiver",
]
