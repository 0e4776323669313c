"""
Continuous position scales.

`PositionScale` is the capability set a plot build relies on: train on data,
map data to drawn positions, and describe the axis (limits, breaks, labels,
title). `ContinuousPositionScale` is the default implementation for plain
numeric data. Specialised scales wrap an instance of it and delegate.
"""

import copy
from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

import numpy as np
from matplotlib.ticker import StrMethodFormatter

from unitscales.errors import ConfigurationError
from unitscales.scales.expansion import DEFAULT_CONTINUOUS_EXPANSION, expand_range, expansion
from unitscales.scales.oob import censor
from unitscales.scales.range import ContinuousRange
from unitscales.scales.sentinels import is_waiver, waiver
from unitscales.scales.transforms import Transform, as_transform
from unitscales.utils.logging import get_logger

DEFAULT_LABEL_FORMAT = "{x:g}"


@runtime_checkable
class PositionScale(Protocol):
    """Operations a plot build performs on a position scale, in call order."""

    aesthetics: tuple[str, ...]

    def transform(self, values: Any) -> Any: ...

    def train(self, values: Any) -> None: ...

    def get_limits(self) -> np.ndarray: ...

    def map(self, values: Any, limits: np.ndarray | None = None) -> np.ndarray: ...

    def dimension(self, expand: tuple[float, ...] | None = None) -> np.ndarray: ...

    def get_breaks(self, limits: np.ndarray | None = None) -> np.ndarray: ...

    def get_minor_breaks(self, major: np.ndarray | None = None, limits: np.ndarray | None = None) -> np.ndarray: ...

    def get_labels(self, breaks: np.ndarray | None = None) -> list[str]: ...

    def make_title(self, title: str | None) -> str | None: ...

    def get_title(self, default: str | None = None) -> str | None: ...

    def is_empty(self) -> bool: ...

    def reset(self) -> None: ...


class ContinuousPositionScale:
    """
    Default continuous position scale.

    Parameters
    ----------
    aesthetics : sequence of str
        Aesthetic names the scale applies to (``x``, ``xmin``, ...).
    name : str, None or waiver
        Axis title. ``waiver()`` uses the default title supplied at draw time.
    breaks, minor_breaks : None, waiver, sequence or callable
        Break positions in data space. ``None`` removes them; ``waiver()``
        computes them; a callable receives the data-space limits.
    labels : None, waiver, sequence or callable
        Break labels. A callable receives the data-space breaks.
    limits : pair of float or callable, optional
        Data-space limits; NaN entries fall back to the trained range.
    expand : tuple or waiver
        Expansion vector from :func:`expansion`.
    oob : callable
        Out-of-bounds policy applied when mapping.
    na_value : float
        Replacement for missing values after mapping.
    trans : str or Transform
        Axis transformation.
    guide : str
        Guide type.
    position : str
        Axis side.
    secondary_axis : SecondaryAxis, optional
        Already validated secondary axis.
    """

    def __init__(
        self,
        aesthetics: Sequence[str],
        name: Any = waiver(),
        breaks: Any = waiver(),
        minor_breaks: Any = waiver(),
        labels: Any = waiver(),
        limits: Any = None,
        expand: Any = waiver(),
        oob: Callable[[np.ndarray, np.ndarray], np.ndarray] = censor,
        na_value: float = np.nan,
        trans: str | Transform = "identity",
        guide: str = "none",
        position: str = "left",
        secondary_axis: Any = None,
        verbose: bool = False,
    ) -> None:
        self.verbose = verbose
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self.aesthetics = tuple(aesthetics)
        self.name = name
        self.breaks = breaks
        self.minor_breaks = minor_breaks
        self.labels = labels
        self.trans = as_transform(trans)
        self.limits = self._transform_limits(limits)
        self.expand = expand
        self.oob = oob
        self.na_value = na_value
        self.guide = guide
        self.position = position
        self.secondary_axis = secondary_axis
        self.range = ContinuousRange()

    def _transform_limits(self, limits: Any) -> Any:
        # explicit limits are stored in transformed space
        if limits is None or callable(limits):
            return limits
        arr = np.asarray(limits, dtype=float).ravel()
        if arr.size != 2:
            msg = f"`limits` must be a pair of numbers, got {limits!r}."
            self.logger.error(msg)
            raise ConfigurationError(msg)
        return self.trans.transform(arr)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.aesthetics[0]} range={self.range.range}>"

    def clone(self) -> "ContinuousPositionScale":
        """Return an untrained copy sharing the configuration."""
        new = copy.copy(self)
        new.range = ContinuousRange()
        return new

    def reset(self) -> None:
        self.range.reset()

    def is_empty(self) -> bool:
        return self.range.range is None and self.limits is None

    def transform(self, values: Any) -> np.ndarray:
        """Apply the axis transformation to data-space values."""
        return self.trans.transform(np.asarray(values, dtype=float))

    def train(self, values: Any) -> None:
        """Fold `values` (transformed space) into the trained range."""
        x = np.atleast_1d(np.asarray(values, dtype=float))
        if x.size == 0:
            return
        self.range.train(x)

    def get_limits(self) -> np.ndarray:
        """Return the current limits in transformed space."""
        trained = self.range.range
        if self.limits is None:
            return np.array([0.0, 1.0]) if trained is None else trained.copy()
        if callable(self.limits):
            base = np.array([0.0, 1.0]) if trained is None else self.trans.inverse(trained)
            return self.trans.transform(np.asarray(self.limits(base), dtype=float))
        limits = np.array(self.limits, dtype=float)
        if trained is not None:
            missing = np.isnan(limits)
            limits[missing] = trained[missing]
        return limits

    def map(self, values: Any, limits: np.ndarray | None = None) -> np.ndarray:
        """Apply the out-of-bounds policy against `limits` and fill missing values."""
        if limits is None:
            limits = self.get_limits()
        scaled = self.oob(np.atleast_1d(np.asarray(values, dtype=float)), limits)
        return np.where(np.isnan(scaled), self.na_value, scaled)

    def dimension(self, expand: tuple[float, ...] | None = None) -> np.ndarray:
        """Return the expanded limits, in transformed space."""
        if expand is None:
            expand = DEFAULT_CONTINUOUS_EXPANSION if is_waiver(self.expand) else tuple(self.expand)
        if len(expand) == 2:
            expand = expansion(mult=expand[0], add=expand[1])
        if len(expand) != 4:
            msg = f"`expand` must have 2 or 4 entries, got {expand!r}."
            self.logger.error(msg)
            raise ConfigurationError(msg)
        return expand_range(self.get_limits(), expand)

    def get_breaks(self, limits: np.ndarray | None = None) -> np.ndarray:
        """
        Return major breaks in transformed space.

        Breaks outside the limits are censored to NaN, so the result lines up
        with :meth:`get_labels`.
        """
        if limits is None:
            limits = self.get_limits()
        if self.breaks is None:
            return np.array([], dtype=float)

        data_limits = np.sort(self.trans.inverse(np.asarray(limits, dtype=float)))
        if is_waiver(self.breaks):
            breaks = self.trans.locator().tick_values(data_limits[0], data_limits[1])
        elif callable(self.breaks):
            breaks = self.breaks(data_limits)
        else:
            breaks = self.breaks

        breaks = self.trans.transform(np.atleast_1d(np.asarray(breaks, dtype=float)))
        return censor(breaks, limits)

    def get_minor_breaks(self, major: np.ndarray | None = None, limits: np.ndarray | None = None) -> np.ndarray:
        """Return minor breaks in transformed space."""
        if limits is None:
            limits = self.get_limits()
        if self.minor_breaks is None:
            return np.array([], dtype=float)

        lo, hi = np.sort(np.asarray(limits, dtype=float))
        if is_waiver(self.minor_breaks):
            if major is None:
                major = self.get_breaks(limits)
            major = np.sort(major[np.isfinite(major)])
            if major.size < 2:
                return np.array([], dtype=float)
            step = np.diff(major)
            # midpoints plus one half-step beyond each end
            minor = np.concatenate(
                [[major[0] - step[0] / 2], major[:-1] + step / 2, [major[-1] + step[-1] / 2]]
            )
        else:
            data_limits = np.sort(self.trans.inverse(np.array([lo, hi])))
            values = self.minor_breaks(data_limits) if callable(self.minor_breaks) else self.minor_breaks
            minor = self.trans.transform(np.atleast_1d(np.asarray(values, dtype=float)))
        return minor[(minor >= lo) & (minor <= hi)]

    def get_labels(self, breaks: np.ndarray | None = None) -> list[str]:
        """Return one label per break; censored (NaN) breaks get an empty label."""
        if breaks is None:
            breaks = self.get_breaks()
        breaks = np.atleast_1d(np.asarray(breaks, dtype=float))
        if self.labels is None:
            return []

        data_breaks = self.trans.inverse(breaks)
        if is_waiver(self.labels):
            formatter = StrMethodFormatter(DEFAULT_LABEL_FORMAT)
            return ["" if np.isnan(b) else formatter(b, i) for i, b in enumerate(data_breaks)]

        labels = self.labels(data_breaks) if callable(self.labels) else self.labels
        labels = [str(label) for label in labels]
        if len(labels) != breaks.size:
            msg = f"`breaks` and `labels` have different lengths ({breaks.size} vs {len(labels)})."
            self.logger.error(msg)
            raise ConfigurationError(msg)
        return labels

    def break_info(self, limits: np.ndarray | None = None) -> dict[str, Any]:
        """Collect limits, finite major breaks with labels, and minor breaks."""
        if limits is None:
            limits = self.get_limits()
        major = self.get_breaks(limits)
        labels = self.get_labels(major)
        finite = np.isfinite(major)
        return {
            "range": np.asarray(limits, dtype=float),
            "major": major[finite],
            "labels": [label for label, keep in zip(labels, finite) if keep] if labels else [],
            "minor": self.get_minor_breaks(major, limits),
        }

    def make_title(self, title: str | None) -> str | None:
        return title

    def get_title(self, default: str | None = None) -> str | None:
        """Resolve a waiver name to `default`, then decorate it with :meth:`make_title`."""
        title = default if is_waiver(self.name) else self.name
        return self.make_title(title)
