"""
Numeric pattern formatting with round-half-up semantics.

Renders a number through a caller-supplied pattern in one of three styles:

- printf style: "%.2f", "%08.3f", "%d", "~%.1f" (literal text around exactly one conversion)
- format-spec style: ".2f", ",.1f", ">10.2f", "{:.2f}", "{}"
- decimal pattern style: "#.##", "0.00", "#,##0.0"

Builtin float formatting rounds half-to-even on the binary value (f"{2.5:.0f}" == "2"), here
every style rounds the exact decimal value half-up (2.5 -> "3", 0.125 -> "0.13").
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
from decimal import Decimal
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import round_half_up
from .tools import fmt_type, fmt_value

# @formatter:off

# Default precision of printf and format-spec float conversions
DEFAULT_PRECISION = 6

_DECIMAL_PATTERN = re.compile(r"(?P<int>[#0,]*)(?:\.(?P<frac>[#0]*))?")
_PRINTF_TOKEN = re.compile(r"%%|%(?P<flags>[-+ 0,]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<type>[A-Za-z])")
_FORMAT_SPEC = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?(?P<sign>[-+ ])?(?P<zero>0)?(?P<width>\d+)?"
    r"(?P<grouping>[,_])?(?:\.(?P<precision>\d+))?(?P<type>[dfF]?)"
)
_BRACES = re.compile(r"\{:?(?P<spec>.*)\}", re.DOTALL)
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class PatternStyle(StrEnum):
    """
    Styles of numeric format patterns.

    Attributes:
        DECIMAL (str) : Decimal pattern with # and 0 digit placeholders - #,##0.##
        PRINTF (str)  : printf conversion with optional literal text - %.2f
        SPEC (str)    : Python format-spec mini-language, optionally in braces - .2f or {:.2f}
    """
    DECIMAL = "decimal"
    PRINTF = "printf"
    SPEC = "spec"


# Methods --------------------------------------------------------------------------------------------------------------

def pattern_style(pattern: str) -> PatternStyle:
    """
    Detect the style of a numeric format pattern.

    Decimal patterns are recognized first: a non-empty pattern made of '#', '0', ',' and at most one '.'
    with at least one digit placeholder. Any pattern containing '%' is printf style, everything else
    is tried as a format spec.

    Examples:
        >>> pattern_style("#.##")
        <PatternStyle.DECIMAL: 'decimal'>
        >>> pattern_style("%.1f")
        <PatternStyle.PRINTF: 'printf'>
        >>> pattern_style("{:.2f}")
        <PatternStyle.SPEC: 'spec'>
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a str, got {fmt_type(pattern)}")

    if re.search(r"[#0]", pattern) and _DECIMAL_PATTERN.fullmatch(pattern):
        return PatternStyle.DECIMAL
    if "%" in pattern:
        return PatternStyle.PRINTF
    return PatternStyle.SPEC


def format_number(value: int | float | Decimal, pattern: str) -> str:
    """
    Format a number with a printf, format-spec or decimal pattern, rounding half-up.

    Args:
        value: The number to format. Floats are taken by their repr(), Decimals as they are.
        pattern: The numeric format pattern, see the module docstring for the supported styles.

    Returns:
        The formatted number.

    Raises:
        TypeError: If value is not int, float or Decimal, or pattern is not a str.
        ValueError: If value is not finite or the pattern is malformed or has an unsupported conversion.

    Examples:
        >>> format_number(2.5, "%.0f")
        '3'
        >>> format_number(Decimal("0.25"), ".2f")
        '0.25'
        >>> format_number(1234.5, "#,##0.00")
        '1,234.50'
        >>> format_number(2.5, "#.##")
        '2.5'
    """
    number = _std_decimal(value)
    style = pattern_style(pattern)

    if style == PatternStyle.DECIMAL:
        return _format_decimal_pattern(number, pattern)
    if style == PatternStyle.PRINTF:
        return _format_printf(number, pattern)
    return _format_spec(number, pattern)


# Private Methods ------------------------------------------------------------------------------------------------------

def _std_decimal(value) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"value must be int | float | Decimal, got {fmt_type(value)}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"value must be finite, got {fmt_value(value)}")
        if value.is_integer():
            return Decimal(int(value))
        return Decimal(repr(value))
    if isinstance(value, Decimal) and not value.is_finite():
        raise ValueError(f"value must be finite, got {fmt_value(value)}")
    return Decimal(value)


def _format_decimal_pattern(number: Decimal, pattern: str) -> str:
    """
    Decimal pattern: '0' is a mandatory digit, '#' an optional one, ',' marks the grouping size.

    The integer part always keeps at least one digit, so "#.##" renders 0.25 as "0.25".
    """
    match = _DECIMAL_PATTERN.fullmatch(pattern)
    int_pattern, frac_pattern = match.group("int"), match.group("frac") or ""

    if not re.fullmatch(r"0*#*", frac_pattern):
        raise ValueError(f"optional '#' digits must follow '0' digits in the fraction: {fmt_value(pattern)}")

    min_int = int_pattern.count("0")
    min_frac, max_frac = frac_pattern.count("0"), len(frac_pattern)
    grouping = len(int_pattern) - int_pattern.rindex(",") - 1 if "," in int_pattern else 0
    if "," in int_pattern and grouping == 0:
        raise ValueError(f"grouping separator can not end the integer part: {fmt_value(pattern)}")

    rounded = round_half_up(number, max_frac)
    int_digits, _, frac_digits = format(rounded.copy_abs(), "f").partition(".")

    frac_digits = frac_digits.rstrip("0").ljust(min_frac, "0")
    int_digits = int_digits.lstrip("0").rjust(max(min_int, 1), "0")
    if grouping:
        int_digits = _group_digits(int_digits, grouping)

    sign = "-" if rounded < 0 else ""
    return f"{sign}{int_digits}.{frac_digits}" if frac_digits else f"{sign}{int_digits}"


def _format_printf(number: Decimal, pattern: str) -> str:
    conversions = [m for m in _PRINTF_TOKEN.finditer(pattern) if m.group(0) != "%%"]
    if len(conversions) != 1:
        raise ValueError(f"printf pattern must contain exactly one conversion, got {fmt_value(pattern)}")

    conversion = conversions[0]
    flags = conversion.group("flags")
    rendered = _render(
        number,
        type_=conversion.group("type"),
        precision=conversion.group("precision"),
        align="<" if "-" in flags else "",
        sign="+" if "+" in flags else (" " if " " in flags else ""),
        zero="0" in flags and "-" not in flags,
        width=conversion.group("width") or "",
        grouping="," if "," in flags else "",
    )

    head = pattern[:conversion.start()].replace("%%", "%")
    tail = pattern[conversion.end():].replace("%%", "%")
    return f"{head}{rendered}{tail}"


def _format_spec(number: Decimal, pattern: str) -> str:
    braces = _BRACES.fullmatch(pattern)
    spec = braces.group("spec") if braces else pattern

    match = _FORMAT_SPEC.fullmatch(spec)
    if match is None:
        raise ValueError(f"invalid numeric format pattern: {fmt_value(pattern)}")

    return _render(
        number,
        type_=match.group("type"),
        precision=match.group("precision"),
        align=f"{match.group('fill') or ''}{match.group('align') or ''}",
        sign=match.group("sign") or "",
        zero=bool(match.group("zero")),
        width=match.group("width") or "",
        grouping=match.group("grouping") or "",
    )


def _render(
        number: Decimal,
        *,
        type_: str,
        precision: str | None,
        align: str = "",
        sign: str = "",
        zero: bool = False,
        width: str = "",
        grouping: str = "",
) -> str:
    """Round half-up to the conversion precision, then format the exact result."""
    flags = f"{align}{sign}{'0' if zero else ''}{width}{grouping}"

    if type_ == "d":
        if precision is not None:
            raise ValueError("precision not allowed for integer conversion 'd'")
        return format(int(round_half_up(number, 0)), f"{flags}d")

    if type_ not in ("f", "F", ""):
        raise ValueError(f"unsupported conversion type {fmt_value(type_)}, expected one of 'd', 'f', 'F'")

    if precision is not None:
        places = int(precision)
    elif type_:
        places = DEFAULT_PRECISION
    else:
        # No type and no precision, keep the significant fraction digits only
        places = len(format(number, "f").partition(".")[2].rstrip("0"))

    rounded = round_half_up(number, places)
    return format(rounded, f"{flags}.{places}{type_ or 'f'}")


def _group_digits(digits: str, size: int, separator: str = ",") -> str:
    groups = []
    while len(digits) > size:
        groups.insert(0, digits[-size:])
        digits = digits[:-size]
    groups.insert(0, digits)
    return separator.join(groups)
