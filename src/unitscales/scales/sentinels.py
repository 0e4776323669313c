"""Sentinel values for scale options left at their default."""

from typing import Any


class Waiver:
    """Marker for an option the scale should fill in itself."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "waiver()"


class Derived:
    """Marker for a secondary-axis option inherited from the primary scale."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "derive()"


def waiver() -> Waiver:
    """Return the default-value marker."""
    return Waiver()


def is_waiver(value: Any) -> bool:
    return isinstance(value, Waiver)


def derive() -> Derived:
    """Return the inherit-from-primary marker used by secondary axes."""
    return Derived()


def is_derived(value: Any) -> bool:
    return isinstance(value, Derived)
