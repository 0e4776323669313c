"""Continuous axis transformations."""

from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np
from matplotlib.ticker import Locator, LogLocator, MaxNLocator

from unitscales.errors import ConfigurationError
from unitscales.utils.logging import get_logger

logger = get_logger(__name__)


def extended_breaks() -> Locator:
    """Locator for evenly spaced "nice" breaks on a linear axis."""
    return MaxNLocator(nbins=5, steps=[1, 2, 2.5, 5, 10])


@dataclass(frozen=True)
class Transform:
    """
    Pair of functions mapping data space to transformed space and back.

    Attributes
    ----------
    name : str
        Registry name, e.g. ``"log10"``.
    transform : callable
        Data space to transformed space.
    inverse : callable
        Transformed space back to data space.
    locator : callable
        Factory for the matplotlib locator that picks default breaks in data space.
    """

    name: str
    transform: Callable[[np.ndarray], np.ndarray]
    inverse: Callable[[np.ndarray], np.ndarray]
    locator: Callable[[], Locator] = field(default=extended_breaks, compare=False)

    @property
    def is_identity(self) -> bool:
        return self.name == "identity"


def _identity(x: np.ndarray) -> np.ndarray:
    return np.asarray(x, dtype=float)


TRANSFORMS: dict[str, Transform] = {
    "identity": Transform("identity", _identity, _identity),
    "log10": Transform("log10", np.log10, lambda x: np.power(10.0, x), lambda: LogLocator(base=10.0)),
    "log2": Transform("log2", np.log2, lambda x: np.power(2.0, x), lambda: LogLocator(base=2.0)),
    "log": Transform("log", np.log, np.exp, lambda: LogLocator(base=np.e)),
    "exp": Transform("exp", np.exp, np.log),
    "sqrt": Transform("sqrt", np.sqrt, np.square),
    "reverse": Transform("reverse", np.negative, np.negative),
}


def as_transform(trans: str | Transform) -> Transform:
    """Look up a transform by name; Transform instances pass through."""
    if isinstance(trans, Transform):
        return trans
    if isinstance(trans, str) and trans in TRANSFORMS:
        return TRANSFORMS[trans]
    msg = f"Unknown transform {trans!r}. Available transforms: {', '.join(TRANSFORMS)}"
    logger.error(msg)
    raise ConfigurationError(msg)
