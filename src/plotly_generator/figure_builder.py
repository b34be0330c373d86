"""
ChartFigureBuilder - turns a ChartPayload into a plotly Figure.

Entry point of the rendering adapter: routes the payload to the generator for
its chart type and, optionally, saves the result as HTML.
"""

from pathlib import Path
from typing import Optional

import plotly.graph_objects as go

from src.plotly_generator.generators.router import GeneratorRouter
from src.plotly_generator.utils.file_saver import FileSaver
from src.shared_lib.models.schema import ChartPayload
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class ChartFigureBuilder:
    """
    Builds plotly figures from chart payloads.

    Example:
        >>> from src.pipeline_orchestrator import run_chart_pipeline
        >>> payload = run_chart_pipeline("Jan 10, Feb 20, Mar 15")
        >>> fig = ChartFigureBuilder().build(payload)
        >>> fig.data[0].mode
        'lines+markers'
    """

    def __init__(self, router: Optional[GeneratorRouter] = None):
        self.router = router or GeneratorRouter()

    def build(self, payload: ChartPayload) -> go.Figure:
        """
        Build the figure for ``payload``.

        Args:
            payload: Successful ChartPayload

        Returns:
            go.Figure ready to show or save

        Raises:
            ValueError: If the payload is unsuccessful or its chart type is unknown
        """
        if not payload.success or payload.chart_type is None:
            raise ValueError(f"Cannot render an unsuccessful payload: {payload.error}")

        generator = self.router.get_generator(payload.chart_type)
        logger.debug(f"Rendering {payload.chart_type} with {type(generator).__name__}")
        return generator.generate(payload)

    def save(
        self,
        payload: ChartPayload,
        output_dir: Optional[Path] = None,
        filename: Optional[str] = None,
    ) -> Path:
        """
        Build the figure and save it as interactive HTML.

        Args:
            payload: Successful ChartPayload
            output_dir: Target directory (defaults to CHART_OUTPUT_DIR)
            filename: Optional file name, auto-generated when None

        Returns:
            Path of the written file
        """
        fig = self.build(payload)
        saver = FileSaver(output_dir) if output_dir is not None else FileSaver()
        return saver.save_html(fig, filename=filename)
