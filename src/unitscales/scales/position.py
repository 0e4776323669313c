"""
Factories for x and y position scales.

`scale_x_continuous` / `scale_y_continuous` build plain numeric scales;
`scale_x_unit` / `scale_y_unit` build scales for pint quantities, optionally
coercing the axis to a fixed, dimensionally compatible unit.
"""

from collections.abc import Callable
from typing import Any

import numpy as np
import pint

from unitscales.config import DEFAULT_UNIT_FORMAT
from unitscales.scales.base import ContinuousPositionScale
from unitscales.scales.oob import censor
from unitscales.scales.secondary_axis import as_sec_axis
from unitscales.scales.sentinels import is_waiver, waiver
from unitscales.scales.transforms import Transform
from unitscales.scales.unit import ScaleContinuousPositionUnit
from unitscales.units import convert_to, is_quantity, resolve_unit, strip_units
from unitscales.utils.validation import validate_choice

X_AESTHETICS = ("x", "xmin", "xmax", "xend", "xintercept", "xmin_final", "xmax_final", "xlower", "xmiddle", "xupper")
Y_AESTHETICS = ("y", "ymin", "ymax", "yend", "yintercept", "ymin_final", "ymax_final", "lower", "middle", "upper")
X_POSITIONS = ("bottom", "top")
Y_POSITIONS = ("left", "right")


def _continuous_position(
    aesthetics: tuple[str, ...],
    positions: tuple[str, ...],
    name: Any,
    breaks: Any,
    minor_breaks: Any,
    labels: Any,
    limits: Any,
    expand: Any,
    oob: Callable[[np.ndarray, np.ndarray], np.ndarray],
    na_value: float,
    trans: str | Transform,
    position: str,
    sec_axis: Any,
    verbose: bool,
) -> ContinuousPositionScale:
    position = validate_choice(position, positions, "position")

    # None and waiver() both mean "no secondary axis"
    secondary = None
    if sec_axis is not None and not is_waiver(sec_axis):
        secondary = as_sec_axis(sec_axis)

    return ContinuousPositionScale(
        aesthetics,
        name=name,
        breaks=breaks,
        minor_breaks=minor_breaks,
        labels=labels,
        limits=limits,
        expand=expand,
        oob=oob,
        na_value=na_value,
        trans=trans,
        guide="none",
        position=position,
        secondary_axis=secondary,
        verbose=verbose,
    )


def _quantity_option(value: Any, unit: pint.Unit | None) -> tuple[Any, pint.Unit | None]:
    """Express a quantity-valued option (limits, breaks) in `unit`, adopting its unit when none is set."""
    if not is_quantity(value):
        return value, unit
    if unit is None:
        return strip_units(value), value.units
    return convert_to(value, unit), unit


def _unit_position(
    aesthetics: tuple[str, ...],
    positions: tuple[str, ...],
    unit: Any,
    unit_format: str,
    verbose: bool,
    **options: Any,
) -> ScaleContinuousPositionUnit:
    resolved = resolve_unit(unit)
    for key in ("limits", "breaks", "minor_breaks"):
        options[key], resolved = _quantity_option(options[key], resolved)

    base = _continuous_position(aesthetics, positions, verbose=verbose, **options)
    scale = ScaleContinuousPositionUnit(base, unit=resolved, unit_format=unit_format, verbose=verbose)
    if verbose:
        scale.logger.debug(f"Created {aesthetics[0]} unit scale with unit '{resolved}'")
    return scale


def scale_x_continuous(
    name: Any = waiver(),
    breaks: Any = waiver(),
    minor_breaks: Any = waiver(),
    labels: Any = waiver(),
    limits: Any = None,
    expand: Any = waiver(),
    oob: Callable[[np.ndarray, np.ndarray], np.ndarray] = censor,
    na_value: float = np.nan,
    trans: str | Transform = "identity",
    position: str = "bottom",
    sec_axis: Any = waiver(),
    verbose: bool = False,
) -> ContinuousPositionScale:
    """Continuous x scale for plain numeric data. See :func:`scale_x_unit` for the options."""
    return _continuous_position(
        X_AESTHETICS, X_POSITIONS, name, breaks, minor_breaks, labels, limits, expand, oob, na_value, trans,
        position, sec_axis, verbose,
    )


def scale_y_continuous(
    name: Any = waiver(),
    breaks: Any = waiver(),
    minor_breaks: Any = waiver(),
    labels: Any = waiver(),
    limits: Any = None,
    expand: Any = waiver(),
    oob: Callable[[np.ndarray, np.ndarray], np.ndarray] = censor,
    na_value: float = np.nan,
    trans: str | Transform = "identity",
    position: str = "left",
    sec_axis: Any = waiver(),
    verbose: bool = False,
) -> ContinuousPositionScale:
    """Continuous y scale for plain numeric data."""
    return _continuous_position(
        Y_AESTHETICS, Y_POSITIONS, name, breaks, minor_breaks, labels, limits, expand, oob, na_value, trans,
        position, sec_axis, verbose,
    )


def scale_x_unit(
    name: Any = waiver(),
    breaks: Any = waiver(),
    unit: Any = None,
    minor_breaks: Any = waiver(),
    labels: Any = waiver(),
    limits: Any = None,
    expand: Any = waiver(),
    oob: Callable[[np.ndarray, np.ndarray], np.ndarray] = censor,
    na_value: float = np.nan,
    trans: str | Transform = "identity",
    position: str = "bottom",
    sec_axis: Any = waiver(),
    unit_format: str = DEFAULT_UNIT_FORMAT,
    verbose: bool = False,
) -> ScaleContinuousPositionUnit:
    """
    Position scale for unit-tagged x values.

    Parameters
    ----------
    name : str, None or waiver, optional
        Axis title; the unit is appended in brackets.
    breaks : None, waiver, sequence, quantity or callable, optional
        Major breaks in the axis unit.
    unit : None, str, pint.Unit or pint.Quantity, optional
        Display unit. Data is converted into it before plotting; incompatible
        data raises UnitMismatchError. When None the first mapped data decides.
    minor_breaks : None, waiver, sequence, quantity or callable, optional
        Minor breaks in the axis unit.
    labels : None, waiver, sequence or callable, optional
        Break labels.
    limits : pair of float or quantity, optional
        Axis limits. Quantities are converted into `unit`.
    expand : tuple or waiver, optional
        Expansion from :func:`unitscales.scales.expansion.expansion`.
    oob : callable, optional
        Out-of-bounds policy. Default :func:`censor`.
    na_value : float, optional
        Value used for missing data. Default NaN.
    trans : str or Transform, optional
        Axis transformation. Default ``"identity"``.
    position : {"bottom", "top"}, optional
        Axis side.
    sec_axis : SecondaryAxis or callable, optional
        Secondary axis; a bare callable is promoted with ``sec_axis()``.
    unit_format : str, optional
        pint format spec for the unit in the title, or ``"latex"``.
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    ScaleContinuousPositionUnit

    Raises
    ------
    ParseError
        If `unit` is text that pint cannot parse.
    ConfigurationError
        For an unsupported `unit` type, a bad `position` or a malformed `sec_axis`.

    Examples
    --------
    >>> from unitscales.config import load_unit_registry
    >>> ureg = load_unit_registry()
    >>> sc = scale_x_unit(unit="W")
    >>> power = ureg.Quantity([1, 2], "kW")
    >>> sc.train(power)
    >>> sc.map(power)
    array([1000., 2000.])
    """
    return _unit_position(
        X_AESTHETICS, X_POSITIONS, unit, unit_format, verbose,
        name=name, breaks=breaks, minor_breaks=minor_breaks, labels=labels, limits=limits, expand=expand,
        oob=oob, na_value=na_value, trans=trans, position=position, sec_axis=sec_axis,
    )


def scale_y_unit(
    name: Any = waiver(),
    breaks: Any = waiver(),
    unit: Any = None,
    minor_breaks: Any = waiver(),
    labels: Any = waiver(),
    limits: Any = None,
    expand: Any = waiver(),
    oob: Callable[[np.ndarray, np.ndarray], np.ndarray] = censor,
    na_value: float = np.nan,
    trans: str | Transform = "identity",
    position: str = "left",
    sec_axis: Any = waiver(),
    unit_format: str = DEFAULT_UNIT_FORMAT,
    verbose: bool = False,
) -> ScaleContinuousPositionUnit:
    """Position scale for unit-tagged y values. Options as in :func:`scale_x_unit`; `position` is "left" or "right"."""
    return _unit_position(
        Y_AESTHETICS, Y_POSITIONS, unit, unit_format, verbose,
        name=name, breaks=breaks, minor_breaks=minor_breaks, labels=labels, limits=limits, expand=expand,
        oob=oob, na_value=na_value, trans=trans, position=position, sec_axis=sec_axis,
    )
