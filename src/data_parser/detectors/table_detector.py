"""
Table detector.

Handles markdown-style and space-aligned tables:

    | North | 120 |          North      120
    | South |  80 |          South       80

The label is the first cell and the value the last cell of each row.
"""

import re

from src.data_parser.detectors.base import (
    BaseDetector,
    DetectorMatch,
    DetectorOutcome,
    NotApplicable,
)
from src.data_parser.detectors.csv_detector import split_lines
from src.data_parser.utils.text_cleaner import parse_float
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


TABLE_BORDER = re.compile(r"^\||\|$")
CELL_SPLIT = re.compile(r"\||\s{2,}")
NON_NUMERIC = re.compile(r"[^0-9.-]")


class TableDetector(BaseDetector):
    """Detector for rows of cells separated by pipes or wide spacing."""

    name = "Table"

    def detect(self, text: str) -> DetectorOutcome:
        lines = split_lines(text)
        if len(lines) < 2:
            return NotApplicable("table requires at least 2 non-blank lines")

        labels = []
        data = []

        for line in lines:
            cleaned = TABLE_BORDER.sub("", line).strip()
            cells = [cell.strip() for cell in CELL_SPLIT.split(cleaned)]
            cells = [cell for cell in cells if cell]

            if len(cells) < 2:
                continue

            value = parse_float(NON_NUMERIC.sub("", cells[-1]))
            if value is None:
                continue

            labels.append(cells[0])
            data.append(value)

        if len(labels) < 2:
            return NotApplicable(
                "fewer than 2 table rows with a numeric last cell",
                details={"valid_rows": len(labels), "lines": len(lines)},
            )

        return DetectorMatch(labels=labels, data=data)
