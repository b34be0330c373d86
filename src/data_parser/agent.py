"""
Strategy dispatcher for free-form chart data.

This module implements the SmartDataParser class, which tries every format
detector in a fixed order and turns the first acceptable match into a
validated ParseResult.
"""

import logging
from typing import Any, List, Optional, Sequence

from src.data_parser.core.settings import (
    DETECTOR_ORDER,
    EMPTY_INPUT_ERROR,
    INPUT_PREVIEW_CHARS,
    MIN_DATA_POINTS,
)
from src.data_parser.detectors import (
    BaseDetector,
    CSVDetector,
    DetectorMatch,
    JSONDetector,
    KeyValueDetector,
    NaturalLanguageDetector,
    NotApplicable,
    NumbersOnlyDetector,
    TableDetector,
)
from src.data_parser.fallback import FallbackGenerator
from src.shared_lib.models.schema import ParseResult, SeriesSpec

logger = logging.getLogger(__name__)


DETECTOR_CLASSES = {
    "JSON": JSONDetector,
    "CSV": CSVDetector,
    "KeyValue": KeyValueDetector,
    "Table": TableDetector,
    "NaturalLanguage": NaturalLanguageDetector,
    "NumbersOnly": NumbersOnlyDetector,
}


def build_default_detectors() -> List[BaseDetector]:
    """Instantiate the detectors in DETECTOR_ORDER."""
    return [DETECTOR_CLASSES[name]() for name in DETECTOR_ORDER]


class SmartDataParser:
    """
    Parser that understands messy user input.

    The parser runs each detector in order (most structured first, most
    permissive last) and accepts the first match with at least two labels and
    two values. Detector failures are never fatal: when nothing matches, the
    fallback sample is returned, so parsing only fails for empty input.

    The parser holds no mutable state and can be shared freely.

    Example:
        >>> parser = SmartDataParser()
        >>> result = parser.parse("Label,Value\\nA,10\\nB,20")
        >>> result.labels, result.data, result.parser
        (['A', 'B'], [10.0, 20.0], 'CSV')
    """

    def __init__(
        self,
        detectors: Optional[Sequence[BaseDetector]] = None,
        fallback: Optional[FallbackGenerator] = None,
        min_points: int = MIN_DATA_POINTS,
    ):
        """
        Initialize the parser.

        Args:
            detectors: Detectors in dispatch order (defaults to DETECTOR_ORDER)
            fallback: Generator used when every detector rejects the input
            min_points: Minimum labels and values a match needs to be accepted
        """
        self.detectors = tuple(detectors) if detectors is not None else tuple(build_default_detectors())
        self.fallback = fallback or FallbackGenerator()
        self.min_points = min_points

    def parse(self, text: Any) -> ParseResult:
        """
        Parse free-form text into chart data.

        Args:
            text: Raw user input

        Returns:
            ParseResult. ``success`` is False only for empty or non-string input.

        Example:
            >>> SmartDataParser().parse("JavaScript: 10%, Python: 75%").to_dict()
            {'success': True, 'labels': ['JavaScript', 'Python'], 'data': [10.0, 75.0], ...}
        """
        if not isinstance(text, str) or not text.strip():
            logger.info("Rejecting empty input")
            return ParseResult(success=False, error=EMPTY_INPUT_ERROR)

        text = text.strip()
        logger.debug(f"[SmartParser] Parsing input: {text[:INPUT_PREVIEW_CHARS]}...")

        for detector in self.detectors:
            outcome = detector.run(text)

            if isinstance(outcome, NotApplicable):
                logger.debug(f"[SmartParser] {detector.name} not applicable: {outcome.reason}")
                continue

            if not outcome.meets_threshold(self.min_points):
                logger.debug(
                    f"[SmartParser] {detector.name} rejected: "
                    f"{len(outcome.labels)} labels, {len(outcome.data)} values"
                )
                continue

            logger.info(f"[SmartParser] Success with {detector.name}")
            return self._to_result(outcome, detector.name)

        return self.fallback.generate()

    @staticmethod
    def _to_result(match: DetectorMatch, parser_name: str) -> ParseResult:
        """
        Convert an accepted match into a ParseResult.

        Labels and values are aligned to their common length, and each series
        is truncated to the label count.
        """
        size = min(len(match.labels), len(match.data))
        if size != len(match.labels) or size != len(match.data):
            logger.warning(
                f"[SmartParser] {parser_name} produced {len(match.labels)} labels "
                f"and {len(match.data)} values, keeping the first {size}"
            )

        multi_series = None
        if match.multi_series is not None:
            multi_series = [
                SeriesSpec(label=label, data=list(values[:size]))
                for label, values in match.multi_series
            ]

        return ParseResult(
            success=True,
            labels=list(match.labels[:size]),
            data=list(match.data[:size]),
            title=match.title,
            parser=parser_name,
            multi_series=multi_series,
            is_percentage=match.is_percentage,
        )

    def __repr__(self) -> str:
        names = ", ".join(detector.name for detector in self.detectors)
        return f"SmartDataParser(detectors=[{names}])"


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

# Global parser instance (lazy-loaded)
_global_parser: Optional[SmartDataParser] = None


def get_parser() -> SmartDataParser:
    """
    Get or create the global parser instance.

    Returns:
        Global SmartDataParser instance

    Example:
        >>> from src.data_parser.agent import get_parser
        >>> get_parser().parse("10 20 30").parser
        'NumbersOnly'
    """
    global _global_parser

    if _global_parser is None:
        logger.debug("Creating global parser instance")
        _global_parser = SmartDataParser()

    return _global_parser


def parse_user_input(text: Any) -> ParseResult:
    """
    Parse text using the global parser instance.

    Example:
        >>> from src.data_parser.agent import parse_user_input
        >>> parse_user_input('{"labels": ["A", "B"], "data": [1, 2]}').parser
        'JSON'
    """
    return get_parser().parse(text)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DETECTOR_CLASSES",
    "build_default_detectors",
    "SmartDataParser",
    "get_parser",
    "parse_user_input",
]
