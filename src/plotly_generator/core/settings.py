"""
Rendering settings for the plotly adapter.

Style defaults for the figures built from chart payloads. Output location
comes from the data parser settings (CHART_OUTPUT_DIR).
"""

import os
from typing import Dict

from dotenv import load_dotenv

from src.data_parser.core.settings import CHART_OUTPUT_DIR, VALID_CHART_TYPES

load_dotenv()

# Diretorio de saida para graficos gerados
OUTPUT_DIR = CHART_OUTPUT_DIR

# Qualitative palette name from plotly.colors.qualitative
DEFAULT_PALETTE = os.getenv("PLOTLY_DEFAULT_PALETTE", "Set2")

# "cdn", "inline" or "directory"
PLOTLY_JS_MODE = os.getenv("PLOTLY_JS_MODE", "cdn")

DEFAULT_TITLE = "Chart"
DOUGHNUT_HOLE = 0.5

# Map of payload chart type -> trace kind
CHART_TRACE_KINDS: Dict[str, str] = {
    "bar": "bar",
    "line": "scatter",
    "pie": "pie",
    "doughnut": "pie",
}

# Configuracoes de estilo
FONT_FAMILY = os.getenv("PLOTLY_FONT_FAMILY", "Arial, sans-serif")
FONT_SIZE = int(os.getenv("PLOTLY_FONT_SIZE", "12"))

# Margens padrao
MARGIN_LEFT = int(os.getenv("PLOTLY_MARGIN_LEFT", "80"))
MARGIN_RIGHT = int(os.getenv("PLOTLY_MARGIN_RIGHT", "40"))
MARGIN_TOP = int(os.getenv("PLOTLY_MARGIN_TOP", "80"))
MARGIN_BOTTOM = int(os.getenv("PLOTLY_MARGIN_BOTTOM", "60"))

PLOT_BGCOLOR = os.getenv("PLOTLY_PLOT_BGCOLOR", "white")
PAPER_BGCOLOR = os.getenv("PLOTLY_PAPER_BGCOLOR", "white")


def validate_settings() -> bool:
    """
    Validate rendering settings.

    Returns:
        True if every check passes

    Raises:
        ValueError: If a setting is invalid
    """
    if PLOTLY_JS_MODE not in ("cdn", "inline", "directory"):
        raise ValueError(f"PLOTLY_JS_MODE must be cdn, inline or directory: {PLOTLY_JS_MODE}")

    margins = [MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP, MARGIN_BOTTOM]
    if any(m < 0 for m in margins):
        raise ValueError(
            f"Margins must be non-negative: L={MARGIN_LEFT}, R={MARGIN_RIGHT}, "
            f"T={MARGIN_TOP}, B={MARGIN_BOTTOM}"
        )

    missing = [chart_type for chart_type in VALID_CHART_TYPES if chart_type not in CHART_TRACE_KINDS]
    if missing:
        raise ValueError(f"No trace kind configured for chart types: {missing}")

    if FONT_SIZE <= 0:
        raise ValueError(f"FONT_SIZE must be positive: {FONT_SIZE}")

    return True


def get_default_layout_config() -> dict:
    """
    Default layout shared by every figure.

    Returns:
        Dict of layout settings for ``fig.update_layout``
    """
    return {
        "font": {
            "family": FONT_FAMILY,
            "size": FONT_SIZE
        },
        "margin": {
            "l": MARGIN_LEFT,
            "r": MARGIN_RIGHT,
            "t": MARGIN_TOP,
            "b": MARGIN_BOTTOM
        },
        "plot_bgcolor": PLOT_BGCOLOR,
        "paper_bgcolor": PAPER_BGCOLOR
    }
