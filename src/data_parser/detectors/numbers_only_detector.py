"""
Numbers-only detector, the last resort before the fallback sample.

Collects every positive number in the text. Labels come from the words of
the text when there are enough of them, otherwise from context keywords.
"""

import re
from typing import Optional

from src.data_parser.core.settings import NUMBERS_ONLY_MAX_POINTS
from src.data_parser.detectors.base import (
    BaseDetector,
    DetectorMatch,
    DetectorOutcome,
    NotApplicable,
)
from src.data_parser.tools.context_labels import ContextLabelInferrer
from src.data_parser.utils.text_cleaner import parse_float, strip_thousands
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


NUMBER_TOKEN = re.compile(r"[0-9,.]+")
WORD_TOKEN = re.compile(r"[A-Za-zА-Яа-яёЁ]{2,}")


class NumbersOnlyDetector(BaseDetector):
    """
    Detector for bare number lists ("10 20 30", "sales: 5, 7 and 9 units").

    At most ``max_points`` values are kept.
    """

    name = "NumbersOnly"

    def __init__(
        self,
        max_points: int = NUMBERS_ONLY_MAX_POINTS,
        label_inferrer: Optional[ContextLabelInferrer] = None,
    ):
        self.max_points = max_points
        self.label_inferrer = label_inferrer or ContextLabelInferrer()

    def detect(self, text: str) -> DetectorOutcome:
        numbers = []
        for token in NUMBER_TOKEN.findall(text):
            value = parse_float(strip_thousands(token))
            if value is not None and value > 0:
                numbers.append(value)

        if len(numbers) < 2:
            return NotApplicable(
                "fewer than 2 positive numbers", details={"numbers": len(numbers)}
            )

        words = WORD_TOKEN.findall(text)
        data = numbers[: self.max_points]

        # Words win when there is one for every number found
        if len(words) >= len(numbers):
            labels = words[: len(data)]
        else:
            labels = self.label_inferrer.infer(text, len(data))
            logger.debug(f"[{self.name}] inferred labels from context: {labels}")

        return DetectorMatch(labels=labels, data=data)
