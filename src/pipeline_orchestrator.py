"""
Chart Pipeline - complete flow from user text to a renderable payload.

This module connects the pieces around the data parser:
- Parse: SmartDataParser picks the first matching detector (or the fallback)
- Normalize: labels are cleaned for display
- Advise: a chart type is suggested, unless the user chose one
- Assemble: everything is packed into a ChartPayload for the renderer
"""

import logging
from typing import Any, Optional

from src.data_parser.agent import SmartDataParser, get_parser
from src.data_parser.tools.chart_type_advisor import ChartTypeAdvisor
from src.data_parser.utils.chart_type_sanitizer import is_auto_chart_type, sanitize_chart_type
from src.data_parser.utils.text_cleaner import normalize_labels
from src.shared_lib.models.schema import ChartPayload, ParseResult

logger = logging.getLogger(__name__)


USER_OVERRIDE_REASON = "Selected by user"


class ChartPipeline:
    """
    Runs parse -> normalize -> advise for one piece of user text.

    Example:
        >>> pipeline = ChartPipeline()
        >>> payload = pipeline.process("Jan 10, Feb 20, Mar 15")
        >>> payload.chart_type
        'line'
    """

    def __init__(
        self,
        parser: Optional[SmartDataParser] = None,
        advisor: Optional[ChartTypeAdvisor] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            parser: Parser to use (defaults to the global parser)
            advisor: Chart type advisor (defaults to a new ChartTypeAdvisor)
        """
        self.parser = parser or get_parser()
        self.advisor = advisor or ChartTypeAdvisor()

    def process(self, text: Any, chart_type: Optional[str] = None) -> ChartPayload:
        """
        Turn user text into a ChartPayload.

        Args:
            text: Raw user input
            chart_type: Optional chart type chosen by the user; an invalid
                value is ignored and the suggestion is used instead

        Returns:
            ChartPayload. ``success`` is False only for empty input.
        """
        parsed = self.parser.parse(text)

        if not parsed.success:
            logger.info(f"Pipeline stopped: {parsed.error}")
            return ChartPayload(success=False, error=parsed.error)

        return self.assemble(parsed, chart_type)

    def assemble(self, parsed: ParseResult, chart_type: Optional[str] = None) -> ChartPayload:
        """
        Build the payload for an already parsed result.

        Args:
            parsed: Successful ParseResult
            chart_type: Optional user chart type override

        Returns:
            ChartPayload with normalized labels and a chart type
        """
        labels = normalize_labels(parsed.labels)
        suggestion = self.advisor.suggest(labels, parsed.data)

        final_type = suggestion.chart_type
        reason = suggestion.reason
        overridden = False

        override = sanitize_chart_type(chart_type)
        if override:
            final_type = override
            reason = USER_OVERRIDE_REASON
            overridden = override != suggestion.chart_type
        elif not is_auto_chart_type(chart_type):
            logger.warning(
                f"Ignoring invalid chart type '{chart_type}', "
                f"using suggestion '{suggestion.chart_type}'"
            )

        logger.info(
            f"Chart type: {final_type} ({reason}) for {len(labels)} points "
            f"from {parsed.parser}"
        )

        return ChartPayload(
            success=True,
            labels=labels,
            data=list(parsed.data),
            title=parsed.title,
            parser=parsed.parser,
            chart_type=final_type,
            chart_type_reason=reason,
            chart_type_overridden=overridden,
            warning=parsed.warning,
            multi_series=parsed.multi_series,
            is_percentage=parsed.is_percentage,
        )


def run_chart_pipeline(text: Any, chart_type: Optional[str] = None) -> ChartPayload:
    """
    Convenience function running a default ChartPipeline.

    Args:
        text: Raw user input
        chart_type: Optional user chart type override

    Returns:
        ChartPayload ready for the renderer

    Example:
        >>> run_chart_pipeline("A,B,C\\n10,20,30").to_dict()["chartType"]
        'pie'
    """
    return ChartPipeline().process(text, chart_type=chart_type)


__all__ = [
    "ChartPipeline",
    "run_chart_pipeline",
]
