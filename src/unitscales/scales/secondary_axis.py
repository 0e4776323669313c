"""
Secondary axis specifications.

A secondary axis shares the spatial extent of its primary scale but labels it
through a one-to-one transformation, e.g. metres on the bottom axis and feet
on the top axis.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np
from matplotlib.ticker import StrMethodFormatter

from unitscales.errors import ConfigurationError
from unitscales.scales.oob import censor
from unitscales.scales.sentinels import derive, is_derived, is_waiver, waiver
from unitscales.scales.transforms import TRANSFORMS, Transform, extended_breaks
from unitscales.utils.logging import get_logger

SECONDARY_AXIS_MESSAGE = "Secondary axes must be specified using 'sec_axis()'"

logger = get_logger(__name__)


def _identity(x: np.ndarray) -> np.ndarray:
    return x


@dataclass
class SecondaryAxis:
    """
    Secondary axis definition.

    Attributes
    ----------
    trans : callable
        Vectorised, monotonic function from primary data values to secondary values.
    name : str, None, waiver or derive
        Secondary axis title. ``derive()`` reuses the primary scale name.
    breaks : None, waiver, derive, sequence or callable
        Breaks in secondary units. A callable receives the secondary range.
    labels : None, waiver, derive, sequence or callable
        Labels for the breaks.
    guide : str or waiver
        Guide type for the secondary axis.
    detail : int
        Number of grid points used to invert `trans` numerically.
    """

    trans: Callable[[np.ndarray], np.ndarray] = _identity
    name: Any = field(default_factory=waiver)
    breaks: Any = field(default_factory=waiver)
    labels: Any = field(default_factory=waiver)
    guide: Any = field(default_factory=waiver)
    detail: int = 1000

    def __post_init__(self) -> None:
        if not callable(self.trans):
            msg = f"Secondary axis transformation must be callable, got {self.trans!r}."
            logger.error(msg)
            raise ConfigurationError(msg)

    def init(self, scale: Any) -> "SecondaryAxis":
        """Return a copy with every derived option filled in from the primary `scale`."""
        resolved = replace(self)
        if is_derived(resolved.name):
            resolved.name = scale.name
        if is_derived(resolved.breaks):
            resolved.breaks = scale.breaks
        if is_derived(resolved.labels):
            resolved.labels = scale.labels
        if is_derived(resolved.guide):
            resolved.guide = scale.guide
        return resolved

    def _grid(self, limits: np.ndarray, primary_trans: Transform) -> tuple[np.ndarray, np.ndarray]:
        # grid over the primary axis (transformed space) and its image on the secondary axis
        lo, hi = np.sort(np.asarray(limits, dtype=float))
        grid = np.linspace(lo, hi, self.detail)
        secondary = np.asarray(self.trans(primary_trans.inverse(grid)), dtype=float)
        if secondary.shape != grid.shape:
            msg = "Secondary axis transformation must be vectorised over numpy arrays."
            logger.error(msg)
            raise ConfigurationError(msg)

        steps = np.diff(secondary)
        if not (np.all(steps >= 0) or np.all(steps <= 0)) or np.all(steps == 0):
            msg = "Transformation for secondary axes must be monotonic."
            logger.error(msg)
            raise ConfigurationError(msg)
        return grid, secondary

    def inverse(self, values: np.ndarray, limits: np.ndarray, primary_trans: Transform = TRANSFORMS["identity"]) -> np.ndarray:
        """Map secondary values back onto the primary axis (transformed space) by interpolation."""
        grid, secondary = self._grid(limits, primary_trans)
        order = np.argsort(secondary)
        return np.interp(np.asarray(values, dtype=float), secondary[order], grid[order])

    def break_info(self, limits: np.ndarray, primary_trans: Transform = TRANSFORMS["identity"]) -> dict[str, Any]:
        """
        Compute breaks for the secondary axis.

        Parameters
        ----------
        limits : array-like
            Primary scale limits in transformed space.
        primary_trans : Transform, optional
            Transformation of the primary scale.

        Returns
        -------
        dict
            ``range`` (secondary range), ``major`` (breaks in secondary units),
            ``major_source`` (the same breaks positioned on the primary axis)
            and ``labels``.
        """
        grid, secondary = self._grid(limits, primary_trans)
        sec_range = np.array([secondary.min(), secondary.max()])

        if self.breaks is None:
            breaks = np.array([], dtype=float)
        elif is_waiver(self.breaks) or is_derived(self.breaks):
            breaks = extended_breaks().tick_values(sec_range[0], sec_range[1])
        elif callable(self.breaks):
            breaks = self.breaks(sec_range)
        else:
            breaks = self.breaks
        breaks = censor(np.atleast_1d(np.asarray(breaks, dtype=float)), sec_range)
        breaks = breaks[np.isfinite(breaks)]

        order = np.argsort(secondary)
        major_source = np.interp(breaks, secondary[order], grid[order])

        if self.labels is None:
            labels = []
        elif is_waiver(self.labels) or is_derived(self.labels):
            formatter = StrMethodFormatter("{x:g}")
            labels = [formatter(b, i) for i, b in enumerate(breaks)]
        else:
            labels = self.labels(breaks) if callable(self.labels) else self.labels
            labels = [str(label) for label in labels]
            if len(labels) != breaks.size:
                msg = f"Secondary axis `breaks` and `labels` have different lengths ({breaks.size} vs {len(labels)})."
                logger.error(msg)
                raise ConfigurationError(msg)

        return {"range": sec_range, "major": breaks, "major_source": major_source, "labels": labels}


def sec_axis(
    trans: Callable[[np.ndarray], np.ndarray] | None = None,
    name: Any = waiver(),
    breaks: Any = waiver(),
    labels: Any = waiver(),
    guide: Any = waiver(),
) -> SecondaryAxis:
    """
    Specify a secondary axis.

    Parameters
    ----------
    trans : callable, optional
        Function from primary to secondary values, e.g. ``lambda x: x * 3.28084``.
        Defaults to the identity.
    name, breaks, labels, guide
        See :class:`SecondaryAxis`.

    Returns
    -------
    SecondaryAxis
    """
    return SecondaryAxis(trans=_identity if trans is None else trans, name=name, breaks=breaks, labels=labels, guide=guide)


def dup_axis(
    trans: Callable[[np.ndarray], np.ndarray] | None = None,
    name: Any = derive(),
    breaks: Any = derive(),
    labels: Any = derive(),
    guide: Any = derive(),
) -> SecondaryAxis:
    """Secondary axis duplicating the primary one; every option is derived by default."""
    return sec_axis(trans=trans, name=name, breaks=breaks, labels=labels, guide=guide)


def is_sec_axis(obj: Any) -> bool:
    return isinstance(obj, SecondaryAxis)


def as_sec_axis(obj: Any) -> SecondaryAxis:
    """
    Validate a secondary axis argument.

    A bare callable is the shorthand for ``sec_axis(callable)`` and is
    promoted; anything else that is not a :class:`SecondaryAxis` raises
    ConfigurationError.
    """
    if callable(obj) and not is_sec_axis(obj):
        obj = sec_axis(obj)
    if not is_sec_axis(obj):
        logger.error(SECONDARY_AXIS_MESSAGE)
        raise ConfigurationError(SECONDARY_AXIS_MESSAGE)
    return obj
