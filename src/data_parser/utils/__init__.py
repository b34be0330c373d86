"""Utilities for the data parser."""

from .text_cleaner import (
    coerce_json_number,
    coerce_number,
    is_numeric,
    normalize_label,
    normalize_labels,
    parse_float,
    strip_thousands,
    to_display_string,
)
from .chart_type_sanitizer import is_auto_chart_type, sanitize_chart_type

__all__ = [
    "coerce_json_number",
    "coerce_number",
    "is_numeric",
    "normalize_label",
    "normalize_labels",
    "parse_float",
    "strip_thousands",
    "to_display_string",
    "is_auto_chart_type",
    "sanitize_chart_type",
]
