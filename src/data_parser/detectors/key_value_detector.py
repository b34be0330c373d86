"""
Key-value detector.

Handles inline pairs such as "JavaScript: 10%, Python: 75%",
"Sales = 100, Revenue = 200" or "North - 40".
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


# Latin and Cyrillic letters, digits, whitespace, underscore, hyphen
LABEL_CHARS = r"[A-Za-zА-Яа-яёЁ0-9\s_-]+"
VALUE_CHARS = r"[0-9,.]+"


class KeyValueDetector(BaseDetector):
    """
    Detector for ``Label: Value``, ``Label = Value`` and ``Label - Value``.

    Separators are tried in that order; the first one producing at least two
    pairs wins. A trailing ``%`` after each value is allowed.
    """

    name = "KeyValue"

    PATTERNS = [
        re.compile(rf"({LABEL_CHARS}):\s*({VALUE_CHARS})\s*%?"),
        re.compile(rf"({LABEL_CHARS})\s*=\s*({VALUE_CHARS})\s*%?"),
        re.compile(rf"({LABEL_CHARS})\s*-\s*({VALUE_CHARS})\s*%?"),
    ]

    def detect(self, text: str) -> DetectorOutcome:
        for pattern in self.PATTERNS:
            matches = list(pattern.finditer(text))
            if len(matches) >= 2:
                logger.debug(
                    f"[{self.name}] {len(matches)} pairs with pattern {pattern.pattern}"
                )
                return DetectorMatch(
                    labels=[match.group(1).strip() for match in matches],
                    data=[coerce_number(strip_thousands(match.group(2))) for match in matches],
                    is_percentage="%" in text,
                )

        return NotApplicable("fewer than 2 key-value pairs")
