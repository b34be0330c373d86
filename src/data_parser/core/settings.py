"""
Environment settings and configuration variables.

This module loads environment variables and defines project-wide constants
for the data parser, the chart pipeline and the interactive session.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
# settings.py is in src/data_parser/core/settings.py
# so we need to go up 4 levels to reach project root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Logging Configuration
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None

# Output Paths
CHART_OUTPUT_DIR: str = os.getenv(
    "CHART_OUTPUT_DIR",
    str(PROJECT_ROOT / "output" / "charts")
)

# Number of input characters echoed in diagnostic logs
INPUT_PREVIEW_CHARS: int = int(os.getenv("INPUT_PREVIEW_CHARS", "100"))

# Parser Configuration
MIN_DATA_POINTS: int = 2
NUMBERS_ONLY_MAX_POINTS: int = 8

# Detector dispatch order (most structured first, most permissive last)
DETECTOR_ORDER = [
    "JSON",
    "CSV",
    "KeyValue",
    "Table",
    "NaturalLanguage",
    "NumbersOnly",
]

FALLBACK_PARSER_NAME: str = "fallback"
EMPTY_INPUT_ERROR: str = "Empty input"

# Valid Chart Types
VALID_CHART_TYPES = [
    "bar",
    "line",
    "pie",
    "doughnut",
]

DEFAULT_CHART_TYPE: str = "bar"


def validate_settings() -> bool:
    """
    Validate that all critical settings are properly configured.

    Returns:
        bool: True if all settings are valid

    Raises:
        ValueError: If a setting has an unusable value
    """
    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        raise ValueError(f"LOG_LEVEL must be a standard logging level, got: {LOG_LEVEL}")

    if INPUT_PREVIEW_CHARS < 1:
        raise ValueError(
            f"INPUT_PREVIEW_CHARS must be positive, got: {INPUT_PREVIEW_CHARS}"
        )

    return True
