"""
Format detectors for the data parser.

Each detector implements one parsing strategy and answers with a tagged
outcome (DetectorMatch or NotApplicable).
"""

from .base import BaseDetector, DetectorMatch, DetectorOutcome, NotApplicable
from .json_detector import JSONDetector
from .csv_detector import CSVDetector
from .key_value_detector import KeyValueDetector
from .table_detector import TableDetector
from .natural_language_detector import NaturalLanguageDetector
from .numbers_only_detector import NumbersOnlyDetector

__all__ = [
    "BaseDetector",
    "DetectorMatch",
    "DetectorOutcome",
    "NotApplicable",
    "JSONDetector",
    "CSVDetector",
    "KeyValueDetector",
    "TableDetector",
    "NaturalLanguageDetector",
    "NumbersOnlyDetector",
]
