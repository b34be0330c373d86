"""
Chart generators, one per payload chart type.
"""

from src.plotly_generator.generators.base import BaseChartGenerator
from src.plotly_generator.generators.bar_generator import BarGenerator
from src.plotly_generator.generators.line_generator import LineGenerator
from src.plotly_generator.generators.pie_generator import DoughnutGenerator, PieGenerator
from src.plotly_generator.generators.router import GeneratorRouter

__all__ = [
    "BaseChartGenerator",
    "BarGenerator",
    "LineGenerator",
    "PieGenerator",
    "DoughnutGenerator",
    "GeneratorRouter",
]
