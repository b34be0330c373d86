"""
Data Parser Module.

This module turns free-form user text into chart data:
- Format detectors (JSON, CSV, key-value, table, natural language, numbers)
- Strategy dispatcher with a guaranteed fallback
- Context label inference, chart type advice and label normalization
"""

from .agent import SmartDataParser, get_parser, parse_user_input
from .tools import infer_context_labels, suggest_chart_type, suggest_chart_type_with_reason
from .utils import normalize_labels
from .fallback import create_fallback_result

__all__ = [
    "SmartDataParser",
    "get_parser",
    "parse_user_input",
    "infer_context_labels",
    "suggest_chart_type",
    "suggest_chart_type_with_reason",
    "normalize_labels",
    "create_fallback_result",
]
