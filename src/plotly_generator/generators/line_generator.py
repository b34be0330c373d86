"""
LineGenerator - line charts with markers, one line per series.
"""

import plotly.graph_objects as go

from src.plotly_generator.generators.base import BaseChartGenerator
from src.shared_lib.models.schema import ChartPayload


class LineGenerator(BaseChartGenerator):
    """
    Generator for line charts.

    Typical use: time series (months, quarters, years) and long sequences.
    """

    def generate(self, payload: ChartPayload) -> go.Figure:
        self.validate(payload)

        series = self._series(payload)
        colors = self._colors(len(series))
        suffix = self._value_suffix(payload)

        fig = go.Figure()
        for (name, values), color in zip(series, colors):
            fig.add_trace(
                go.Scatter(
                    x=payload.labels[: len(values)],
                    y=values,
                    name=name,
                    mode="lines+markers",
                    line={"color": color, "width": 2},
                    marker={"size": 7},
                    hovertemplate=(
                        "<b>%{x}</b><br>"
                        f"{name}: %{{y:,}}{suffix}"
                        "<extra></extra>"
                    ),
                )
            )

        self._apply_common_layout(fig, payload)
        fig.update_layout(
            showlegend=len(series) > 1,
            hovermode="x unified" if len(series) > 1 else "closest",
            yaxis={"ticksuffix": suffix},
        )

        self.logger.info(f"Line chart generated: {len(series)} series, {payload.point_count} points")
        return fig
