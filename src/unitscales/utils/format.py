"""String and label formatting."""

import re
from re import Match

import pint

from unitscales.config import DEFAULT_UNIT_FORMAT

# label used when an axis has no unit, or a dimensionless one
UNLABELED_UNIT = "1"


def _str_to_latex_math(text: str) -> str:
    """Convert a string representing mathematical expressions and units into LaTeX math format."""
    try:

        def inverse_fix(match: Match[str]) -> str:
            """Replace /unit ** exponent with /unit^{exponent}."""
            unit = match.group(1)
            exp = match.group(2)
            return f"/{unit}^{{{exp}}}"

        # correct inverse unit format of first type
        text = re.sub(r"/\s*([a-zA-Z]+)\s*\*\*\s*(\d+)", inverse_fix, text)

        def inverse_unit_repl(match: Match[str]) -> str:
            """Inverse replacement for /unit^{exp} or /unitexp to unit^{-exp}."""
            unit = match.group(1)
            m_exp = re.match(r"^([a-zA-Z]+)\^\{(-?\d+)\}$", unit)
            if m_exp:
                letters, exponent = m_exp.groups()
                return rf"\text{{ }}\mathrm{{{letters}^{{{-int(exponent)}}}}}"
            m_simple = re.match(r"^([a-zA-Z]+)(\d+)$", unit)
            if m_simple:
                letters, digits = m_simple.groups()
                return rf"\text{{ }}\mathrm{{{letters}^{{-{digits}}}}}"
            return rf"\text{{ }}\mathrm{{{unit}^{{-1}}}}"

        # replace /unit^{exp} to unit^{-exp}
        text = re.sub(r"/\s*([a-zA-Z0-9_\^\{\}]+)", inverse_unit_repl, text)

        # convert superscripts **exp to ^{exp}
        text = re.sub(r"\*\*\s*(\(?[^\s\)]+(?:[^\s]*?)\)?)", r"^{\1}", text)

        # convert subscripts to _{val}
        text = re.sub(r"_(\(?[a-zA-Z0-9+\-*/=]+\)?)", r"_{\1}", text)

        # wrap with $ if needed
        if not (text.startswith("$") and text.endswith("$")):
            text = f"${text}$"

        return text

    except re.error as e:
        raise RuntimeError(f"Error converting string to LaTeX math: {e}") from e


def format_unit_str(unit: pint.Unit | str) -> str:
    """Format a unit as LaTeX math for matplotlib text.

    Parameters
    ----------
    unit : pint.Unit or str
        The unit to format. Units are rendered in compact pint form (``~C``)
        first, e.g. ``kilometer / hour`` becomes ``km/h``.

    Returns
    -------
    str
        A LaTeX math string representing the units.
    """
    text = format(unit, "~C") if isinstance(unit, pint.Unit) else str(unit)
    return _str_to_latex_math(text)


def format_unit(unit: pint.Unit | None, unit_format: str = DEFAULT_UNIT_FORMAT) -> str:
    """Render `unit` as short text; absent or dimensionless units render as ``"1"``."""
    if unit is None or format(unit, "~").strip() in ("", "dimensionless"):
        return UNLABELED_UNIT
    if unit_format == "latex":
        return format_unit_str(unit)
    return format(unit, unit_format)


def make_unit_label(title: str | None, unit: pint.Unit | None, unit_format: str = DEFAULT_UNIT_FORMAT) -> str | None:
    """
    Decorate an axis title with its unit.

    Parameters
    ----------
    title : str or None
        Axis title. ``None`` means the axis has no title and is returned unchanged.
    unit : pint.Unit or None
        Resolved axis unit.
    unit_format : str, optional
        pint format spec, or ``"latex"`` for matplotlib math text.

    Returns
    -------
    str or None
        ``"title [unit]"``.

    Examples
    --------
    >>> from unitscales.config import load_unit_registry
    >>> ureg = load_unit_registry()
    >>> make_unit_label("power", ureg.Unit("W"))
    'power [W]'
    """
    if title is None:
        return None
    return f"{title} [{format_unit(unit, unit_format)}]"
