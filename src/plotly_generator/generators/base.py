"""
BaseChartGenerator - abstract base for every payload -> figure generator.

Defines the common interface and the helpers shared by the bar, line and
pie generators.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import plotly.graph_objects as go
from plotly.colors import qualitative

from src.plotly_generator.core.settings import (
    DEFAULT_PALETTE,
    DEFAULT_TITLE,
    get_default_layout_config,
)
from src.shared_lib.models.schema import ChartPayload
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class BaseChartGenerator(ABC):
    """
    Abstract base class for chart generators.

    Subclasses implement generate(); validate() is shared because every
    generator needs the same thing: a successful payload with data.

    Example of a subclass:
        >>> class AreaGenerator(BaseChartGenerator):
        ...     def generate(self, payload):
        ...         self.validate(payload)
        ...         return go.Figure()
    """

    def __init__(self, palette: str = DEFAULT_PALETTE):
        """
        Initialize the generator.

        Args:
            palette: Name of a plotly qualitative palette
        """
        self.palette = palette
        self.logger = get_logger(self.__class__.__name__)

    def validate(self, payload: ChartPayload) -> None:
        """
        Check that a payload can be drawn.

        Raises:
            ValueError: If the payload is unsuccessful or empty
        """
        if not payload.success:
            raise ValueError(f"Cannot render an unsuccessful payload: {payload.error}")

        if not payload.labels or not payload.data:
            raise ValueError("Empty payload - nothing to render")

    @abstractmethod
    def generate(self, payload: ChartPayload) -> go.Figure:
        """
        Build the plotly Figure for ``payload``.

        Raises:
            ValueError: If validation fails
        """

    # Shared helpers

    def _series(self, payload: ChartPayload) -> List[Tuple[str, List[float]]]:
        """
        Return (name, values) pairs to draw.

        Multi-series payloads give one pair per series; otherwise the main
        data is the only series, named after the title.
        """
        if payload.multi_series:
            return [(series.label, list(series.data)) for series in payload.multi_series]
        return [(payload.title or "Value", list(payload.data))]

    def _colors(self, count: int) -> List[str]:
        """Cycle the configured palette to ``count`` colors."""
        colors = getattr(qualitative, self.palette, None) or qualitative.Set2
        return [colors[i % len(colors)] for i in range(count)]

    @staticmethod
    def _value_suffix(payload: ChartPayload) -> str:
        return "%" if payload.is_percentage else ""

    def _apply_common_layout(self, fig: go.Figure, payload: ChartPayload) -> None:
        """
        Apply font, margins, background and title.

        Args:
            fig: Figure to update in place
            payload: Payload providing the title
        """
        fig.update_layout(**get_default_layout_config())
        fig.update_layout(title={"text": self._title(payload)})

    @staticmethod
    def _title(payload: ChartPayload, default: Optional[str] = None) -> str:
        return payload.title or default or DEFAULT_TITLE
