"""Inference tools used around the detectors: context labels and chart type advice."""

from .context_labels import ContextLabelInferrer, infer_context_labels
from .chart_type_advisor import (
    ChartTypeAdvisor,
    suggest_chart_type,
    suggest_chart_type_with_reason,
)

__all__ = [
    "ContextLabelInferrer",
    "infer_context_labels",
    "ChartTypeAdvisor",
    "suggest_chart_type",
    "suggest_chart_type_with_reason",
]
