"""Utilities module for shared helper functions."""

from .logger import *
from .json_serialization import json_default, json_dumps, sanitize_for_json

__all__ = [
    "setup_logging",
    "setup_logger",
    "get_logger",
    "sanitize_for_json",
    "json_default",
    "json_dumps",
]
