"""
PieGenerator - pie and doughnut charts.

- No axes: labels + values
- Only the main data is drawn; pies have a single series
- Doughnuts are pies with a hole
"""

import plotly.graph_objects as go

from src.plotly_generator.core.settings import DOUGHNUT_HOLE
from src.plotly_generator.generators.base import BaseChartGenerator
from src.shared_lib.models.schema import ChartPayload


class PieGenerator(BaseChartGenerator):
    """
    Generator for pie charts.

    Example:
        >>> payload = ChartPayload(
        ...     success=True, labels=["A", "B"], data=[60, 40], chart_type="pie"
        ... )
        >>> PieGenerator().generate(payload).data[0].hole
        0
    """

    hole: float = 0

    def generate(self, payload: ChartPayload) -> go.Figure:
        self.validate(payload)

        suffix = self._value_suffix(payload)

        trace = go.Pie(
            labels=payload.labels,
            values=payload.data,
            marker={"colors": self._colors(len(payload.labels))},
            textinfo="label+percent",
            hovertemplate=(
                "<b>%{label}</b><br>"
                f"Value: %{{value:,}}{suffix}<br>"
                "Share: %{percent}<br>"
                "<extra></extra>"
            ),
            hole=self.hole,  # 0 = full pie, > 0 = doughnut
            sort=False,
        )

        fig = go.Figure(data=[trace])
        self._apply_common_layout(fig, payload)

        fig.update_layout(
            showlegend=True,
            legend={
                "orientation": "v",
                "yanchor": "middle",
                "y": 0.5,
                "xanchor": "left",
                "x": 1.05,
            },
        )

        self.logger.info(f"Pie chart generated: {len(payload.labels)} slices (hole={self.hole})")
        return fig


class DoughnutGenerator(PieGenerator):
    """Pie chart with a hole in the middle."""

    hole = DOUGHNUT_HOLE
