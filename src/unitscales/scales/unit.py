"""
Position scale for unit-tagged data.

`ScaleContinuousPositionUnit` wraps a plain `ContinuousPositionScale`. It
converts pint quantities into the axis unit, strips the unit and hands plain
numbers to the wrapped scale, and prints the unit in the axis title.
"""

from typing import Any

import numpy as np
import pint

from unitscales.config import DEFAULT_UNIT_FORMAT
from unitscales.scales.base import ContinuousPositionScale
from unitscales.scales.sentinels import is_waiver
from unitscales.units import convert_to, is_quantity, strip_units
from unitscales.utils.format import make_unit_label
from unitscales.utils.logging import get_logger


class ScaleContinuousPositionUnit:
    """
    Continuous position scale that resolves and converts physical units.

    Parameters
    ----------
    base : ContinuousPositionScale
        Scale that performs range training, limits, breaks and mapping on
        plain numbers.
    unit : pint.Unit, optional
        Display unit of the axis. When absent, the unit of the first
        unit-tagged values passed to :meth:`map` is adopted.
    unit_format : str, optional
        pint format spec for the unit in the title, or ``"latex"``.
    verbose : bool, optional
        Enable debug logging.

    Notes
    -----
    - Values without a unit are assumed to already be expressed in the axis unit.
    - Configuration fields (``name``, ``breaks``, ``limits``, ...) are read
      from the wrapped scale.
    """

    def __init__(
        self,
        base: ContinuousPositionScale,
        unit: pint.Unit | None = None,
        unit_format: str = DEFAULT_UNIT_FORMAT,
        verbose: bool = False,
    ) -> None:
        self._base = base
        self.unit = unit
        self.unit_format = unit_format
        self.verbose = verbose
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def __getattr__(self, name: str) -> Any:
        # only reached for attributes not set on the wrapper itself
        if name.startswith("__") or name == "_base":
            raise AttributeError(name)
        return getattr(self._base, name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.aesthetics[0]} unit={self.unit} range={self._base.range.range}>"

    @property
    def base(self) -> ContinuousPositionScale:
        """ContinuousPositionScale: The wrapped scale."""
        return self._base

    def clone(self) -> "ScaleContinuousPositionUnit":
        """Return an untrained copy that keeps the configured unit."""
        return ScaleContinuousPositionUnit(
            self._base.clone(), unit=self.unit, unit_format=self.unit_format, verbose=self.verbose
        )

    def _magnitudes(self, values: Any, adopt: bool) -> Any:
        """Express unit-tagged `values` in the axis unit and drop the tag; plain values pass through."""
        if not is_quantity(values):
            return values
        if self.unit is None:
            if not adopt:
                return strip_units(values)
            self.unit = values.units
            if self.verbose:
                self.logger.debug(f"Adopted axis unit '{self.unit}' from mapped values")
            return strip_units(values)
        x = convert_to(values, self.unit)
        if self.verbose:
            self.logger.debug(f"Converted {np.size(x)} values from '{values.units}' to '{self.unit}'")
        return x

    def transform(self, values: Any) -> Any:
        """
        Apply the axis transformation.

        With the identity transformation, values are returned untouched so
        their units survive until :meth:`train` and :meth:`map`. Otherwise the
        values are converted into (or establish) the axis unit first.
        """
        if self.trans.is_identity:
            return values
        return self._base.transform(self._magnitudes(values, adopt=True))

    def train(self, values: Any) -> None:
        """
        Fold `values` into the trained range.

        Unit-tagged values are converted into the axis unit when it is set and
        used as-is otherwise. A failed conversion leaves the range untouched.
        """
        x = self._magnitudes(values, adopt=False)
        if np.size(x) == 0:
            return
        self._base.train(x)

    def map(self, values: Any, limits: np.ndarray | None = None) -> np.ndarray:
        """
        Map `values` to plot positions.

        The first unit-tagged values mapped while the axis unit is unset fix
        the axis unit; later values are converted into it and raise
        UnitMismatchError when incompatible.
        """
        return self._base.map(self._magnitudes(values, adopt=True), limits)

    def get_limits(self) -> np.ndarray:
        return self._base.get_limits()

    def dimension(self, expand: tuple[float, ...] | None = None) -> np.ndarray:
        return self._base.dimension(expand)

    def get_breaks(self, limits: np.ndarray | None = None) -> np.ndarray:
        return self._base.get_breaks(limits)

    def get_minor_breaks(self, major: np.ndarray | None = None, limits: np.ndarray | None = None) -> np.ndarray:
        return self._base.get_minor_breaks(major, limits)

    def get_labels(self, breaks: np.ndarray | None = None) -> list[str]:
        return self._base.get_labels(breaks)

    def break_info(self, limits: np.ndarray | None = None) -> dict[str, Any]:
        return self._base.break_info(limits)

    def is_empty(self) -> bool:
        return self._base.is_empty()

    def reset(self) -> None:
        self._base.reset()

    def make_title(self, title: str | None) -> str | None:
        """Return ``"title [unit]"``; ``[1]`` when no unit has been resolved yet."""
        return make_unit_label(title, self.unit, self.unit_format)

    def get_title(self, default: str | None = None) -> str | None:
        title = default if is_waiver(self._base.name) else self._base.name
        return self.make_title(title)
