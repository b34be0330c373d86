"""
JSON detector.

Recognizes the JSON shapes users paste when they already have structured
data:

    {"labels": ["A", "B"], "data": [10, 20], "title": "Sales"}
    [{"label": "A", "value": 10}, {"name": "B", "amount": 20}]
    [["A", "B"], [10, 20]]
    {"A": 10, "B": 20, "note": "ignored"}
"""

import json
from typing import Any, Dict, List, Optional

from src.data_parser.detectors.base import (
    BaseDetector,
    DetectorMatch,
    DetectorOutcome,
    NotApplicable,
)
from src.data_parser.utils.text_cleaner import coerce_json_number, to_display_string
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class JSONDetector(BaseDetector):
    """
    Detector for JSON documents.

    Applicable only when the input starts with ``{`` or ``[``. Shapes are
    tried in order: labels/data object, array of records, pair of arrays,
    flat object of numbers.
    """

    name = "JSON"

    LABEL_KEYS = ["label", "name", "category"]
    VALUE_KEYS = ["value", "amount", "count", "percent"]

    def detect(self, text: str) -> DetectorOutcome:
        stripped = text.strip()
        if not stripped.startswith(("{", "[")):
            return NotApplicable("input does not start with '{' or '['")

        try:
            document = json.loads(stripped)
        except json.JSONDecodeError as e:
            return NotApplicable(
                f"invalid JSON: {e.msg}", details={"line": e.lineno, "column": e.colno}
            )

        if isinstance(document, dict) and self._has_labels_and_data(document):
            return self._from_labels_and_data(document)

        if isinstance(document, list):
            records = self._from_records(document)
            if records is not None:
                return records

            pairs = self._from_array_pair(document)
            if pairs is not None:
                return pairs

        if isinstance(document, dict):
            return self._from_flat_object(document)

        return NotApplicable("unrecognized JSON shape")

    @staticmethod
    def _has_labels_and_data(document: Dict[str, Any]) -> bool:
        return document.get("labels") is not None and document.get("data") is not None

    def _from_labels_and_data(self, document: Dict[str, Any]) -> DetectorOutcome:
        labels = document["labels"]
        data = document["data"]

        if not isinstance(labels, list) or not isinstance(data, list):
            return NotApplicable(
                "'labels' and 'data' must be arrays",
                details={
                    "labels_type": type(labels).__name__,
                    "data_type": type(data).__name__,
                },
            )

        title = document.get("title")

        return DetectorMatch(
            labels=[to_display_string(label) for label in labels],
            data=[coerce_json_number(value) for value in data],
            title=to_display_string(title) if title else None,
        )

    def _from_records(self, document: List[Any]) -> Optional[DetectorMatch]:
        """[{"label": "A", "value": 10}, ...]"""
        if not document or not isinstance(document[0], dict):
            return None

        if not any(key in document[0] for key in self.LABEL_KEYS):
            return None

        labels = []
        data = []
        for item in document:
            record = item if isinstance(item, dict) else {}
            label = self._first_truthy(record, self.LABEL_KEYS)
            value = self._first_truthy(record, self.VALUE_KEYS)
            labels.append(to_display_string(label) if label else "")
            data.append(coerce_json_number(value) if value else 0.0)

        return DetectorMatch(labels=labels, data=data)

    @staticmethod
    def _from_array_pair(document: List[Any]) -> Optional[DetectorMatch]:
        """[["A", "B"], [10, 20]]"""
        if len(document) < 2:
            return None

        if not isinstance(document[0], list) or not isinstance(document[1], list):
            return None

        return DetectorMatch(
            labels=[to_display_string(label) for label in document[0]],
            data=[coerce_json_number(value) for value in document[1]],
        )

    @staticmethod
    def _from_flat_object(document: Dict[str, Any]) -> DetectorOutcome:
        """{"A": 10, "B": 20}"""
        entries = [
            (key, value)
            for key, value in document.items()
            if isinstance(value, (int, float)) and not isinstance(value, bool)
        ]

        if len(entries) < 2:
            return NotApplicable(
                "object has fewer than 2 numeric entries",
                details={"numeric_entries": len(entries)},
            )

        return DetectorMatch(
            labels=[key for key, _ in entries],
            data=[coerce_json_number(value) for _, value in entries],
        )

    @staticmethod
    def _first_truthy(record: Dict[str, Any], keys: List[str]) -> Any:
        for key in keys:
            value = record.get(key)
            if value:
                return value
        return None
