"""Running domain extent of a continuous scale."""

import numpy as np


class ContinuousRange:
    """Track the min/max of every finite value a scale has been trained on."""

    def __init__(self) -> None:
        self.range: np.ndarray | None = None

    def train(self, values: np.ndarray) -> None:
        x = np.asarray(values, dtype=float)
        x = x[np.isfinite(x)]
        if x.size == 0:
            return
        lo, hi = float(np.min(x)), float(np.max(x))
        if self.range is not None:
            lo = min(lo, self.range[0])
            hi = max(hi, self.range[1])
        self.range = np.array([lo, hi])

    def reset(self) -> None:
        self.range = None

    def __repr__(self) -> str:
        return f"ContinuousRange({self.range!r})"
