"""Shared fixtures for the unitscales test suite."""

import pytest

from unitscales.config import load_unit_registry


@pytest.fixture
def ureg():
    """Package-wide pint unit registry."""
    return load_unit_registry()


@pytest.fixture
def Q_(ureg):
    """Quantity constructor bound to the package registry."""
    return ureg.Quantity
