"""
Rendering utilities.
"""

from src.plotly_generator.utils.file_saver import FileSaver

__all__ = ["FileSaver"]
