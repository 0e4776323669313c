"""
Automatic scale selection.

`scale_type` reports which scale families can represent a set of values, in
order of preference. `find_scale` turns that into a default scale for an
aesthetic, e.g. a unit-aware x scale for pint quantities mapped to ``x``.
"""

from collections.abc import Callable
from functools import singledispatch
from typing import Any

import numpy as np
import pint

from unitscales.errors import ConfigurationError
from unitscales.scales.position import (
    X_AESTHETICS,
    Y_AESTHETICS,
    scale_x_continuous,
    scale_x_unit,
    scale_y_continuous,
    scale_y_unit,
)
from unitscales.utils.logging import get_logger

logger = get_logger(__name__)

# (axis family, scale kind) -> factory called without arguments
SCALE_FACTORIES: dict[tuple[str, str], Callable[[], Any]] = {
    ("x", "unit"): scale_x_unit,
    ("x", "continuous"): scale_x_continuous,
    ("y", "unit"): scale_y_unit,
    ("y", "continuous"): scale_y_continuous,
}


@singledispatch
def scale_type(values: Any) -> tuple[str, ...]:
    """
    Return the scale kinds suitable for `values`, most specific first.

    Objects may declare their kinds with a ``__scale_type__`` attribute;
    otherwise the numpy dtype decides.
    """
    declared = getattr(values, "__scale_type__", None)
    if declared is not None:
        return tuple(declared)

    kind = np.asarray(values).dtype.kind
    if kind in "iuf":
        return ("continuous",)
    if kind in "bOUS":
        return ("discrete",)
    return ("identity",)


@scale_type.register
def _(values: pint.Quantity) -> tuple[str, ...]:
    return ("unit", "continuous")


@scale_type.register
def _(values: str) -> tuple[str, ...]:
    return ("discrete",)


def axis_family(aesthetic: str) -> str:
    """Return ``"x"`` or ``"y"`` for a position aesthetic."""
    if aesthetic in X_AESTHETICS:
        return "x"
    if aesthetic in Y_AESTHETICS:
        return "y"
    msg = f"'{aesthetic}' is not a position aesthetic."
    logger.error(msg)
    raise ConfigurationError(msg)


def register_scale(family: str, kind: str, factory: Callable[[], Any]) -> None:
    """Make `factory` the default scale for values of `kind` on the `family` axis."""
    SCALE_FACTORIES[(family, kind)] = factory


def find_scale(aesthetic: str, values: Any) -> Any:
    """
    Build the default scale for `aesthetic` given the values mapped to it.

    Raises
    ------
    ConfigurationError
        If no registered factory handles any of the kinds reported by
        :func:`scale_type`.
    """
    family = axis_family(aesthetic)
    kinds = scale_type(values)
    for kind in kinds:
        factory = SCALE_FACTORIES.get((family, kind))
        if factory is not None:
            return factory()
    msg = f"No default scale for aesthetic '{aesthetic}' with values of kind {', '.join(kinds)}."
    logger.error(msg)
    raise ConfigurationError(msg)
