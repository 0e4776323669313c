"""Position scales, their options, and automatic scale selection."""

from unitscales.scales.base import ContinuousPositionScale, PositionScale
from unitscales.scales.dispatch import find_scale, register_scale, scale_type
from unitscales.scales.expansion import expansion
from unitscales.scales.oob import censor, keep, squish, squish_infinite
from unitscales.scales.position import scale_x_continuous, scale_x_unit, scale_y_continuous, scale_y_unit
from unitscales.scales.range import ContinuousRange
from unitscales.scales.secondary_axis import SecondaryAxis, dup_axis, is_sec_axis, sec_axis
from unitscales.scales.sentinels import derive, is_derived, is_waiver, waiver
from unitscales.scales.transforms import Transform, as_transform
from unitscales.scales.unit import ScaleContinuousPositionUnit

__all__ = [
    "ContinuousPositionScale",
    "ContinuousRange",
    "PositionScale",
    "ScaleContinuousPositionUnit",
    "SecondaryAxis",
    "Transform",
    "as_transform",
    "censor",
    "derive",
    "dup_axis",
    "expansion",
    "find_scale",
    "is_derived",
    "is_sec_axis",
    "is_waiver",
    "keep",
    "register_scale",
    "scale_type",
    "scale_x_continuous",
    "scale_x_unit",
    "scale_y_continuous",
    "scale_y_unit",
    "sec_axis",
    "squish",
    "squish_infinite",
    "waiver",
]
