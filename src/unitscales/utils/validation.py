"""
Contains generic input validation utilities used across unitscales modules.

These functions are stateless and reusable, designed to enforce type, value, and structural constraints
without introducing domain-specific logic.
"""

from collections.abc import Iterable
from typing import Any

import numpy as np

from unitscales.errors import ConfigurationError
from unitscales.utils.logging import get_logger

logger = get_logger(__name__)


def validate_choice(value: Any, choices: Iterable[str], arg: str) -> str:
    """Return `value` if it is one of `choices`, otherwise raise ConfigurationError."""
    choices = tuple(choices)
    if not isinstance(value, str) or value not in choices:
        msg = f"`{arg}` must be one of {', '.join(map(repr, choices))}, got {value!r}."
        logger.error(msg)
        raise ConfigurationError(msg)
    return value


def validate_pair(value: Any, arg: str) -> np.ndarray:
    # scalars are recycled to (value, value); pairs pass through
    try:
        arr = np.asarray(value, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        logger.error(f"`{arg}` must be numeric, got {value!r}.")
        raise ConfigurationError(f"`{arg}` must be numeric, got {value!r}.") from e
    if arr.size == 1:
        arr = np.repeat(arr, 2)
    if arr.size != 2:
        msg = f"`{arg}` must be a number or a pair of numbers, got {value!r}."
        logger.error(msg)
        raise ConfigurationError(msg)
    return arr
