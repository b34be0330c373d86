"""
Vizom Data Parser - turns pasted text into chart-ready data.

This package provides:
- Format detection and parsing of free-form text (data_parser)
- The parse -> normalize -> advise flow (pipeline_orchestrator)
- Plotly rendering of the resulting payloads (plotly_generator)
- A Rich interactive session (pipeline_session)
- Shared utilities and schemas (shared_lib)

Architecture:
    src/
    ├── shared_lib/               # Schemas, logging, JSON helpers
    ├── data_parser/              # Detectors, dispatcher, fallback, advisor
    ├── plotly_generator/         # Payload -> plotly Figure, HTML export
    ├── pipeline_session/         # Interactive CLI
    └── pipeline_orchestrator.py  # Full pipeline integration
"""

__version__ = "0.1.0"

# Export main entry points for convenience
from src.data_parser import SmartDataParser, parse_user_input
from src.pipeline_orchestrator import ChartPipeline, run_chart_pipeline

__all__ = [
    "SmartDataParser",
    "parse_user_input",
    "ChartPipeline",
    "run_chart_pipeline",
]
