"""Centralized configuration and registries."""

from unitscales.config.unit_registry import DEFAULT_UNIT_FORMAT, load_unit_registry

__all__ = ["DEFAULT_UNIT_FORMAT", "load_unit_registry"]
