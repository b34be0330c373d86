"""
Text and number normalization utilities for the data parser.

This module provides the lenient numeric coercion shared by every detector
and the label normalizer applied before labels reach the renderer.
"""

import math
import re
from typing import Any, Iterable, List, Optional


# As a prefix match this accepts what a browser's parseFloat accepts:
# "12abc" -> 12, ".5" -> 0.5, "1e3x" -> 1000, "abc" -> no number
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_WHITESPACE_RUN = re.compile(r"\s+")

UNKNOWN_LABEL = "Unknown"


def parse_float(value: Any) -> Optional[float]:
    """
    Parse the leading number of a string.

    Leading whitespace is skipped and anything after the numeric prefix is
    ignored.

    Args:
        value: Raw cell or token

    Returns:
        Parsed float, or None when the string does not start with a number

    Examples:
        >>> parse_float(" 12.5kg")
        12.5
        >>> parse_float("abc") is None
        True
    """
    if value is None:
        return None

    match = _NUMBER.match(str(value).lstrip())
    if not match:
        return None

    number = float(match.group(0))
    if not math.isfinite(number):
        return None
    return number


def is_numeric(value: Any) -> bool:
    """True when ``value`` starts with a parseable number."""
    return parse_float(value) is not None


def coerce_number(value: Any) -> float:
    """
    Parse the leading number of ``value``, defaulting to 0.

    Examples:
        >>> coerce_number("42")
        42.0
        >>> coerce_number("n/a")
        0.0
    """
    return parse_float(value) or 0.0


def strip_thousands(raw: str) -> str:
    """Remove comma thousands separators: ``"1,234.5" -> "1234.5"``."""
    return raw.replace(",", "")


def coerce_json_number(value: Any) -> float:
    """
    Convert a decoded JSON value into a data point.

    Numbers pass through, booleans count as 1/0, numeric strings are parsed as
    a whole (``"10"`` but not ``"10abc"``); anything else becomes 0.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        if _NUMBER.fullmatch(stripped):
            number = float(stripped)
            return number if math.isfinite(number) else 0.0

    return 0.0


def to_display_string(value: Any) -> str:
    """
    Stringify a label the way it reads in the source text.

    Integral floats drop their trailing ``.0`` and JSON literals keep their
    JSON spelling.

    Examples:
        >>> to_display_string(2023.0)
        '2023'
        >>> to_display_string(None)
        'null'
    """
    if value is None:
        return "null"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))

    return str(value)


def normalize_label(label: Any) -> str:
    """
    Clean a single label for display.

    Applies the following transformations:
    1. Missing or empty labels become "Unknown"
    2. Stringify and trim
    3. Uppercase the first character
    4. Collapse internal whitespace runs to one space

    Examples:
        >>> normalize_label(" john  doe ")
        'John doe'
        >>> normalize_label(None)
        'Unknown'
    """
    if not label:
        return UNKNOWN_LABEL

    cleaned = to_display_string(label).strip()
    if not cleaned:
        return UNKNOWN_LABEL

    cleaned = cleaned[:1].upper() + cleaned[1:]
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned)

    return cleaned


def normalize_labels(labels: Iterable[Any]) -> List[str]:
    """
    Normalize every label in ``labels``.

    Examples:
        >>> normalize_labels([" john  doe ", None])
        ['John doe', 'Unknown']
    """
    return [normalize_label(label) for label in labels]


__all__ = [
    "UNKNOWN_LABEL",
    "parse_float",
    "is_numeric",
    "coerce_number",
    "strip_thousands",
    "coerce_json_number",
    "to_display_string",
    "normalize_label",
    "normalize_labels",
]
