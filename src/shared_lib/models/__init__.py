"""Pydantic models shared by the parser, pipeline and renderer adapter."""

from .schema import (
    ChartPayload,
    ChartSuggestion,
    ChartTypeLiteral,
    ParseResult,
    SeriesSpec,
)

__all__ = [
    "ChartPayload",
    "ChartSuggestion",
    "ChartTypeLiteral",
    "ParseResult",
    "SeriesSpec",
]
