"""Infrastructure helpers."""

from unitscales.utils.format import format_unit_str, make_unit_label
from unitscales.utils.logging import get_logger
from unitscales.utils.validation import validate_choice, validate_pair

__all__ = ["format_unit_str", "get_logger", "make_unit_label", "validate_choice", "validate_pair"]
