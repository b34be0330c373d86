"""
Plotly rendering adapter

Turns chart payloads produced by the pipeline into interactive plotly figures.

Modulos:
    - core: Rendering settings
    - generators: One generator per chart type (bar, line, pie, doughnut)
    - utils: File saving
    - figure_builder: ChartFigureBuilder entry point
"""

from src.plotly_generator.figure_builder import ChartFigureBuilder
from src.plotly_generator.utils.file_saver import FileSaver

__version__ = "0.1.0"
__all__ = ["__version__", "ChartFigureBuilder", "FileSaver"]
