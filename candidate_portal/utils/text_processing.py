"""Lenient parsing of raw filter inputs and small text helpers."""

import math
import re

_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

TRUE_WORDS = {"true", "1", "yes", "on", "y"}
FALSE_WORDS = {"false", "0", "no", "off", "n", ""}


def parse_float(value, default: float = 0.0) -> float:
    """Parse a number the way form inputs are read: leading digits win.

    "7.5" -> 7.5, "7.5abc" -> 7.5, "abc" -> default, None -> default.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        if not match:
            return default
        value = match.group(1)
    elif not isinstance(value, (int, float)):
        return default

    try:
        number = float(value)
    except OverflowError:
        return default
    # NaN and infinities are not usable thresholds
    return number if math.isfinite(number) else default


def parse_int(value, default: int = 0) -> int:
    """Parse a leading integer; floats are truncated toward zero."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if not isinstance(value, str):
        return default

    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1))


def parse_bool(value, default: bool = False) -> bool:
    """Parse checkbox-style values ("on", "true", "1", ...)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return value != 0

    text = str(value).strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    return default


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in haystack.lower()


def truncate(text: str, limit: int) -> str:
    """Shorten text to ``limit`` characters, marking the cut with an ellipsis."""
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    return text[: max(limit - 1, 0)] + "…"
