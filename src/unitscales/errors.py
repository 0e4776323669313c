"""Exception types raised by unit-aware scales."""


class UnitScaleError(Exception):
    """Base class for all errors raised by :mod:`unitscales`."""


class ConfigurationError(UnitScaleError, ValueError):
    """Invalid scale configuration (unit argument, secondary axis, position, ...)."""


class ParseError(UnitScaleError, ValueError):
    """Unit text that the unit registry cannot parse."""


class UnitMismatchError(UnitScaleError, ValueError):
    """Conversion attempted between dimensionally incompatible units."""

    def __init__(self, source, target) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot convert values in '{source}' to incompatible unit '{target}'.")
