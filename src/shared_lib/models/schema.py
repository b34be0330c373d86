"""
Pydantic schemas for the chart data parser.

This module defines the data structures for:
- Parse results produced by the strategy dispatcher
- Chart type suggestions produced by the advisor
- The final payload handed to the chart rendering collaborator
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# CHART TYPES
# ============================================================================

ChartTypeLiteral = Literal["bar", "line", "pie", "doughnut"]


# ============================================================================
# PARSE RESULT (Pydantic)
# ============================================================================


class SeriesSpec(BaseModel):
    """One named numeric series sharing the outer label set."""

    label: str = Field(..., description="Series name (first cell of a CSV data row)")

    data: List[float] = Field(
        default_factory=list, description="Values aligned to the outer labels"
    )


class ParseResult(BaseModel):
    """
    Structured outcome of parsing a free-form user string.

    A successful result always carries at least two labels and exactly one
    value per label. The only unsuccessful result is the empty input case,
    which carries an ``error`` message instead of data.
    """

    success: bool = Field(..., description="False only for empty/non-string input")

    labels: List[str] = Field(default_factory=list)

    data: List[float] = Field(default_factory=list)

    title: Optional[str] = Field(default=None)

    parser: Optional[str] = Field(
        default=None, description="Name of the detector that matched, or 'fallback'"
    )

    warning: Optional[str] = Field(default=None)

    error: Optional[str] = Field(default=None)

    multi_series: Optional[List[SeriesSpec]] = Field(
        default=None, alias="multiSeries"
    )

    is_percentage: Optional[bool] = Field(default=None, alias="isPercentage")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "labels": ["JavaScript", "Python"],
                    "data": [10, 75],
                    "title": None,
                    "parser": "KeyValue",
                    "isPercentage": True,
                },
                {"success": False, "error": "Empty input"},
            ]
        },
    )

    @model_validator(mode="after")
    def validate_alignment(self) -> "ParseResult":
        """Successful results must pair every label with exactly one value."""

        if not self.success:
            return self

        if len(self.labels) != len(self.data):
            raise ValueError(
                f"labels and data must have the same length, "
                f"got {len(self.labels)} labels and {len(self.data)} values"
            )

        if len(self.labels) < 2:
            raise ValueError(
                f"a successful parse requires at least 2 data points, got {len(self.labels)}"
            )

        if self.multi_series:
            for series in self.multi_series:
                if len(series.data) > len(self.labels):
                    raise ValueError(
                        f"series '{series.label}' has {len(series.data)} values "
                        f"for {len(self.labels)} labels"
                    )

        return self

    def to_dict(self) -> dict:
        """Wire form consumed by the renderer (camelCase keys)."""
        return self.model_dump(by_alias=True)


# ============================================================================
# CHART SUGGESTION
# ============================================================================


class ChartSuggestion(BaseModel):
    """Chart type recommendation with the rule that produced it."""

    chart_type: ChartTypeLiteral = Field(default="bar")

    reason: str = Field(default="Default comparison chart")


# ============================================================================
# PIPELINE OUTPUT
# ============================================================================


class ChartPayload(BaseModel):
    """
    Final tuple handed to the chart rendering collaborator.

    Labels are already normalized for display and ``chart_type`` is either the
    advisor's suggestion or a validated user override.
    """

    success: bool

    labels: List[str] = Field(default_factory=list)

    data: List[float] = Field(default_factory=list)

    title: Optional[str] = None

    parser: Optional[str] = None

    chart_type: Optional[ChartTypeLiteral] = Field(default=None, alias="chartType")

    chart_type_reason: Optional[str] = Field(default=None, alias="chartTypeReason")

    chart_type_overridden: bool = Field(default=False, alias="chartTypeOverridden")

    warning: Optional[str] = None

    error: Optional[str] = None

    multi_series: Optional[List[SeriesSpec]] = Field(
        default=None, alias="multiSeries"
    )

    is_percentage: Optional[bool] = Field(default=None, alias="isPercentage")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def validate_chart_type(self) -> "ChartPayload":
        """A successful payload always names the chart to draw."""

        if self.success and self.chart_type is None:
            raise ValueError("successful payloads require a chart_type")

        return self

    @property
    def point_count(self) -> int:
        return len(self.data)

    def to_dict(self) -> dict:
        """Wire form consumed by the renderer (camelCase keys)."""
        return self.model_dump(by_alias=True)


__all__ = [
    "ChartTypeLiteral",
    "SeriesSpec",
    "ParseResult",
    "ChartSuggestion",
    "ChartPayload",
]
