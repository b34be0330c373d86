"""
Core module - rendering settings for the plotly adapter.
"""

from src.plotly_generator.core.settings import (
    OUTPUT_DIR,
    DEFAULT_PALETTE,
    DEFAULT_TITLE,
    CHART_TRACE_KINDS,
    validate_settings,
    get_default_layout_config,
)

__all__ = [
    "OUTPUT_DIR",
    "DEFAULT_PALETTE",
    "DEFAULT_TITLE",
    "CHART_TRACE_KINDS",
    "validate_settings",
    "get_default_layout_config",
]
