"""
Pipeline Session Module

Interactive session for the chart data pipeline.
Provides a CLI interface with Rich display for trying inputs.
"""

from src.pipeline_session.session import InteractivePipelineSession, main
from src.pipeline_session.result import SessionResult
from src.pipeline_session.statistics import SessionStatistics

__all__ = [
    'InteractivePipelineSession',
    'SessionResult',
    'SessionStatistics',
    'main',
]
