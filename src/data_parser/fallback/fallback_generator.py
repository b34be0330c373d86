"""
FallbackGenerator: guaranteed result when no detector accepts the input.

Core Principle:
- Parsing never hard-fails for a non-empty string
- The user is told through ``warning`` that the chart shows sample data
"""

from src.data_parser.core.settings import FALLBACK_PARSER_NAME
from src.shared_lib.models.schema import ParseResult
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class FallbackGenerator:
    """
    Produces the fixed four-category sample dataset.

    The sample is deterministic so a fallback chart looks the same every time
    and can be recognized by the ``parser == "fallback"`` marker.
    """

    SAMPLE_LABELS = ["Category A", "Category B", "Category C", "Category D"]
    SAMPLE_DATA = [25, 35, 20, 20]
    SAMPLE_TITLE = "Sample Data"
    WARNING = "Could not parse your data. Showing sample chart."

    def generate(self) -> ParseResult:
        """
        Build the sample ParseResult.

        Returns:
            Successful ParseResult flagged with ``parser="fallback"`` and a warning
        """
        logger.warning("All detectors rejected the input, using fallback sample data")

        return ParseResult(
            success=True,
            labels=list(self.SAMPLE_LABELS),
            data=list(self.SAMPLE_DATA),
            title=self.SAMPLE_TITLE,
            parser=FALLBACK_PARSER_NAME,
            warning=self.WARNING,
        )


# Factory function for easy instantiation
def create_fallback_result() -> ParseResult:
    """Returns a fresh fallback ParseResult."""
    return FallbackGenerator().generate()
