"""
Sanitization of user supplied chart type overrides.

Chart types chosen in the session or passed to the pipeline may carry
descriptive text or different casing. They are reduced to the exact literals
accepted by the ChartPayload schema.

Examples:
    >>> sanitize_chart_type("Pie (share of total)")
    'pie'

    >>> sanitize_chart_type("line")
    'line'

    >>> sanitize_chart_type("scatter")
    None
"""

import re
import logging
from typing import Optional

from src.data_parser.core.settings import VALID_CHART_TYPES

logger = logging.getLogger(__name__)


# Values meaning "no override, use the advisor's suggestion"
AUTO_CHART_TYPES = ["auto", "none", "null", "n/a", ""]

# Common names for the supported types
CHART_TYPE_SYNONYMS = {
    "donut": "doughnut",
    "column": "bar",
    "columns": "bar",
    "bars": "bar",
    "lines": "line",
}


def sanitize_chart_type(raw_value: Optional[str]) -> Optional[str]:
    """
    Sanitize a chart type override.

    Lowercases, keeps the first word (text after a space or parenthesis is
    descriptive), maps synonyms, and validates against VALID_CHART_TYPES.

    Args:
        raw_value: Raw chart type string

    Returns:
        Sanitized chart type, or None if the value is empty, "auto" or invalid

    Examples:
        >>> sanitize_chart_type("Doughnut chart")
        'doughnut'

        >>> sanitize_chart_type("donut")
        'doughnut'

        >>> sanitize_chart_type("auto")
        None
    """
    if not raw_value:
        return None

    normalized = raw_value.strip().lower()

    # "bar (comparison)" -> "bar", "bar chart" -> "bar"
    sanitized = re.split(r"[\s(]", normalized)[0]

    if sanitized in AUTO_CHART_TYPES:
        return None

    sanitized = CHART_TYPE_SYNONYMS.get(sanitized, sanitized)

    if sanitized in VALID_CHART_TYPES:
        return sanitized

    logger.warning(
        f"[sanitize_chart_type] Invalid chart_type after sanitization: "
        f"raw='{raw_value}' -> sanitized='{sanitized}'. "
        f"Allowed values: {VALID_CHART_TYPES}"
    )
    return None


def is_auto_chart_type(raw_value: Optional[str]) -> bool:
    """
    True when ``raw_value`` asks for the advisor's suggestion.

    Examples:
        >>> is_auto_chart_type("Auto")
        True

        >>> is_auto_chart_type("pie")
        False
    """
    if raw_value is None:
        return True
    return raw_value.strip().lower() in AUTO_CHART_TYPES
