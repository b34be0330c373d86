"""
Chart type advisor.

Recommends a chart type from the shape of the parsed data. Rules are checked
in order and the first match wins:

1. Labels look temporal (month, quarter, weekday or year tokens) -> line
2. Values look like shares of a whole and there are at most 6 -> doughnut
3. At most 4 non-negative values -> pie
4. More than 10 values -> line
5. Anything else -> bar
"""

import logging
from typing import Any, Optional, Sequence

from src.data_parser.core.settings import DEFAULT_CHART_TYPE
from src.shared_lib.models.schema import ChartSuggestion, ChartTypeLiteral

logger = logging.getLogger(__name__)


# Substrings that mark a label as a point in time
TIME_TOKENS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
    "q1", "q2", "q3", "q4",
    "mon", "tue",
    "2020", "2021", "2022", "2023", "2024",
]

PERCENT_TOTAL = 100
PERCENT_TOLERANCE = 5
DOUGHNUT_MAX_POINTS = 6
PIE_MAX_POINTS = 4
LINE_MIN_POINTS = 11


class ChartTypeAdvisor:
    """
    Heuristic chart type recommendation.

    Example:
        >>> advisor = ChartTypeAdvisor()
        >>> advisor.suggest(["Jan", "Feb", "Mar"], [10, 20, 30]).chart_type
        'line'
    """

    def suggest(
        self,
        labels: Optional[Sequence[Any]],
        data: Optional[Sequence[float]],
    ) -> ChartSuggestion:
        """
        Recommend a chart type for ``labels`` / ``data``.

        Args:
            labels: Category labels (any values, compared as lowercase strings)
            data: Numeric values

        Returns:
            ChartSuggestion with the chart type and the rule that chose it
        """
        if not labels or not data:
            return ChartSuggestion(chart_type=DEFAULT_CHART_TYPE, reason="No data to analyze")

        count = len(data)
        total = sum(data)
        all_positive = all(value >= 0 for value in data)
        looks_like_share = abs(total - PERCENT_TOTAL) < PERCENT_TOLERANCE or all(
            0 <= value <= 1 for value in data
        )

        if self.is_time_series(labels):
            return ChartSuggestion(chart_type="line", reason="Time series data detected")

        if looks_like_share and all_positive and count <= DOUGHNUT_MAX_POINTS:
            return ChartSuggestion(chart_type="doughnut", reason="Percentage distribution")

        if count <= PIE_MAX_POINTS and all_positive:
            return ChartSuggestion(chart_type="pie", reason="Small category count")

        if count >= LINE_MIN_POINTS:
            return ChartSuggestion(chart_type="line", reason="Many data points")

        return ChartSuggestion(chart_type=DEFAULT_CHART_TYPE, reason="Default comparison chart")

    @staticmethod
    def is_time_series(labels: Sequence[Any]) -> bool:
        """True when any label contains a month, quarter, weekday or year token."""
        for label in labels:
            lowered = str(label).lower()
            if any(token in lowered for token in TIME_TOKENS):
                return True
        return False


def suggest_chart_type_with_reason(
    labels: Optional[Sequence[Any]],
    data: Optional[Sequence[float]],
) -> ChartSuggestion:
    """Convenience wrapper returning the full ChartSuggestion."""
    suggestion = ChartTypeAdvisor().suggest(labels, data)
    logger.debug(f"Suggested chart type: {suggestion.chart_type} ({suggestion.reason})")
    return suggestion


def suggest_chart_type(
    labels: Optional[Sequence[Any]],
    data: Optional[Sequence[float]],
) -> ChartTypeLiteral:
    """
    Recommend a chart type for ``labels`` / ``data``.

    Examples:
        >>> suggest_chart_type(["Jan", "Feb", "Mar"], [10, 20, 30])
        'line'
        >>> suggest_chart_type(["A", "B", "C", "D"], [25, 25, 25, 25])
        'doughnut'
        >>> suggest_chart_type(None, [1, 2])
        'bar'
    """
    return suggest_chart_type_with_reason(labels, data).chart_type
