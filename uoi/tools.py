"""
UOI Tools for exception and warning messages.

Safe, compact type/value formatting so that error messages never fail on an odd
argument (broken __repr__, huge values) while reporting what the caller passed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Literal

# Classes --------------------------------------------------------------------------------------------------------------

Style = Literal["ascii", "equal", "unicode-angle"]


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(int)
        'int'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__name__}"
    return cls.__name__


def fmt_type(obj: Any, *, style: Style = "ascii", fully_qualified: bool = False) -> str:
    """Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type("abc", style="unicode-angle")
        '⟨str⟩'
    """
    return _fmt_type_value(class_name(obj, fully_qualified=fully_qualified), style=style)


def fmt_value(
        obj: Any,
        *,
        style: Style = "ascii",
        max_repr: int = 120,
        ellipsis: str | None = None,
) -> str:
    """
    Format a single value as a type–value pair for exception messages.

    Long representations are truncated to max_repr characters and followed by the ellipsis.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=5)
        "<str: 'hello...'>"
    """
    repr_ = _safe_repr(obj)
    ellipsis_token = ellipsis if ellipsis is not None else ("..." if style == "ascii" else "…")

    if style == "ascii":
        repr_ = repr_.replace(">", "\\>")

    return _fmt_type_value(class_name(obj), _fmt_truncate(repr_, max_repr, ellipsis_token), style=style)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(repr_: str, max_len: int, ellipsis: str) -> str:
    """Truncate to max_len visible characters, keeping the quotes of a str repr."""
    if max_len <= 0:
        return ""
    if len(repr_) <= max_len:
        return repr_

    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        quote = repr_[0]
        return f"{quote}{repr_[1:1 + max_len]}{ellipsis}{quote}"

    return repr_[:max_len] + ellipsis


def _fmt_type_value(type_name: str, value_repr: str | None = None, *, style: Style = "ascii") -> str:
    if style == "equal":
        return type_name if value_repr is None else f"{type_name}={value_repr}"
    if style == "unicode-angle":
        return f"⟨{type_name}⟩" if value_repr is None else f"⟨{type_name}: {value_repr}⟩"
    return f"<{type_name}>" if value_repr is None else f"<{type_name}: {value_repr}>"


def _safe_repr(obj) -> str:
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
