"""
CSV detector.

Handles delimited text in either orientation:

    Label,Value          A,B,C            Category,Jan,Feb
    A,10                 10,20,30         Sales,100,200
    B,20                                  Costs,80,90

Rows are split on newlines and cells on the first delimiter found in the
first line (comma, tab, semicolon or pipe).
"""

import re
from typing import List

from src.data_parser.detectors.base import (
    BaseDetector,
    DetectorMatch,
    DetectorOutcome,
    NotApplicable,
)
from src.data_parser.utils.text_cleaner import coerce_number, is_numeric
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


LINE_SPLIT = re.compile(r"[\n\r]+")
SURROUNDING_QUOTES = re.compile(r"^[\"']|[\"']$")


def split_lines(text: str) -> List[str]:
    """Split on newline runs and drop blank lines."""
    return [line for line in LINE_SPLIT.split(text) if line.strip()]


class CSVDetector(BaseDetector):
    """
    Detector for delimited rows.

    Orientation rules, first match wins:
    1. Two rows, text header, numeric first cell in row 2: horizontal
    2. Text header and numbers in row 2: vertical pairs (2 columns) or
       series rows (more columns, one multi-series entry per data row)
    3. Two rows with a text header: horizontal
    """

    name = "CSV"

    DELIMITERS = [",", "\t", ";", "|"]

    def detect(self, text: str) -> DetectorOutcome:
        lines = split_lines(text)
        if len(lines) < 2:
            return NotApplicable("CSV requires at least 2 non-blank lines")

        delimiter = self._detect_delimiter(lines[0])
        rows = [self._split_row(line, delimiter) for line in lines]

        header = rows[0]
        first_row_all_text = not any(is_numeric(cell) for cell in header)
        second_row_has_numbers = any(is_numeric(cell) for cell in rows[1])

        # A single row of values under a row of labels: "A,B,C\n10,20,30"
        if len(rows) == 2 and first_row_all_text and is_numeric(rows[1][0]):
            return self._horizontal(rows)

        if first_row_all_text and second_row_has_numbers:
            if len(header) == 2:
                return self._vertical(rows)
            return self._series_rows(rows)

        if len(rows) == 2 and first_row_all_text:
            return self._horizontal(rows)

        return NotApplicable(
            "no header row detected",
            details={"rows": len(rows), "delimiter": delimiter},
        )

    def _detect_delimiter(self, first_line: str) -> str:
        for delimiter in self.DELIMITERS:
            if delimiter in first_line:
                return delimiter
        return ","

    @staticmethod
    def _split_row(line: str, delimiter: str) -> List[str]:
        return [SURROUNDING_QUOTES.sub("", cell.strip()) for cell in line.split(delimiter)]

    @staticmethod
    def _vertical(rows: List[List[str]]) -> DetectorMatch:
        """Label,Value header followed by one label/value pair per row."""
        body = rows[1:]
        return DetectorMatch(
            labels=[row[0] for row in body],
            data=[coerce_number(row[1]) if len(row) > 1 else 0.0 for row in body],
        )

    @staticmethod
    def _series_rows(rows: List[List[str]]) -> DetectorMatch:
        """Header of column labels; each following row is a named series."""
        first_series = rows[1]

        multi_series = None
        if len(rows) > 2:
            multi_series = [
                (row[0], [coerce_number(value) for value in row[1:]])
                for row in rows[1:]
            ]

        return DetectorMatch(
            labels=rows[0][1:],
            data=[coerce_number(value) for value in first_series[1:]],
            title=first_series[0] or None,
            multi_series=multi_series,
        )

    @staticmethod
    def _horizontal(rows: List[List[str]]) -> DetectorMatch:
        return DetectorMatch(
            labels=rows[0],
            data=[coerce_number(value) for value in rows[1]],
        )
