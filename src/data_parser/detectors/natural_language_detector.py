"""
Natural language detector.

Extracts word/number pairs from sentences such as
"Sales were 100 in January, 200 in February" or "Apples 30 Oranges 45".
"""

import re

from src.data_parser.detectors.base import (
    BaseDetector,
    DetectorMatch,
    DetectorOutcome,
    NotApplicable,
)
from src.data_parser.utils.text_cleaner import coerce_number, strip_thousands
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


WORD = r"[A-Za-zА-Яа-яёЁ]"
NUMBER = r"[0-9,.]+"


class NaturalLanguageDetector(BaseDetector):
    """
    Detector for numbers embedded in prose.

    Patterns, first with at least two matches wins:
    1. word, optional verb, number   ("sales were 100")
    2. number, optional preposition, word   ("100 in January")
    3. any word of 2+ letters followed by a number   ("Apples30")
    """

    name = "NaturalLanguage"

    WORD_NUMBER = re.compile(
        rf"({WORD}+)\s+(?:was|were|is|are|had|has|got|reached|hit)?\s*({NUMBER})",
        re.IGNORECASE,
    )
    NUMBER_WORD = re.compile(
        rf"({NUMBER})\s+(?:for|in|of|on)?\s*({WORD}+)",
        re.IGNORECASE,
    )
    WORD_ADJACENT_NUMBER = re.compile(rf"({WORD}{{2,}})\s*({NUMBER})")

    def detect(self, text: str) -> DetectorOutcome:
        pairs = [
            (match.group(1), match.group(2))
            for match in self.WORD_NUMBER.finditer(text)
        ]

        if len(pairs) < 2:
            pairs = [
                (match.group(2), match.group(1))
                for match in self.NUMBER_WORD.finditer(text)
            ]

        if len(pairs) < 2:
            pairs = [
                (match.group(1), match.group(2))
                for match in self.WORD_ADJACENT_NUMBER.finditer(text)
            ]

        if len(pairs) < 2:
            return NotApplicable("fewer than 2 word/number pairs")

        return DetectorMatch(
            labels=[word for word, _ in pairs],
            data=[coerce_number(strip_thousands(number)) for _, number in pairs],
        )

