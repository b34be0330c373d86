"""
BarGenerator - vertical bar charts, grouped when the payload has several series.
"""

import plotly.graph_objects as go

from src.plotly_generator.generators.base import BaseChartGenerator
from src.shared_lib.models.schema import ChartPayload


class BarGenerator(BaseChartGenerator):
    """
    Generator for bar charts.

    One go.Bar trace per series; multi-series payloads are drawn side by side
    (barmode="group").

    Example:
        >>> payload = ChartPayload(success=True, labels=["A", "B"], data=[1, 2], chart_type="bar")
        >>> fig = BarGenerator().generate(payload)
        >>> fig.data[0].type
        'bar'
    """

    def generate(self, payload: ChartPayload) -> go.Figure:
        self.validate(payload)

        series = self._series(payload)
        colors = self._colors(len(series))
        suffix = self._value_suffix(payload)

        fig = go.Figure()
        for (name, values), color in zip(series, colors):
            fig.add_trace(
                go.Bar(
                    x=payload.labels[: len(values)],
                    y=values,
                    name=name,
                    marker={"color": color},
                    hovertemplate=(
                        "<b>%{x}</b><br>"
                        f"{name}: %{{y:,}}{suffix}"
                        "<extra></extra>"
                    ),
                )
            )

        self._apply_common_layout(fig, payload)
        fig.update_layout(
            barmode="group",
            showlegend=len(series) > 1,
            yaxis={"ticksuffix": suffix},
        )

        self.logger.info(f"Bar chart generated: {len(series)} series, {payload.point_count} bars")
        return fig
