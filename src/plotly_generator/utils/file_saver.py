"""
File Saver Utility for Plotly Charts

Saves rendered charts to disk as interactive HTML.

Features:
- Automatic timestamped filenames
- Output directory creation
- Configurable Plotly.js inclusion mode
"""

from pathlib import Path
from datetime import datetime
from typing import List, Optional, Union
import plotly.graph_objects as go

from src.plotly_generator.core.settings import OUTPUT_DIR, PLOTLY_JS_MODE
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class FileSaver:
    """
    Manager for saving Plotly charts to disk.

    Example Usage:
        >>> saver = FileSaver(output_dir=Path("charts"))
        >>> fig = go.Figure(data=[go.Bar(x=["A", "B"], y=[4, 5])])
        >>> html_path = saver.save_html(fig)
    """

    def __init__(self, output_dir: Union[str, Path] = OUTPUT_DIR):
        """
        Initialize FileSaver.

        Args:
            output_dir: Directory where charts will be saved
                        Will be created if it doesn't exist
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"FileSaver initialized with output_dir: {self.output_dir}")

    def save_html(
        self,
        fig: go.Figure,
        filename: Optional[str] = None,
        include_plotlyjs: Union[str, bool] = PLOTLY_JS_MODE,
    ) -> Path:
        """
        Save chart as interactive HTML file.

        Args:
            fig: Plotly Figure object to save
            filename: Custom filename (optional, auto-generated if None)
                      Example: "sales_chart.html"
            include_plotlyjs: How to include Plotly.js library
                - "cdn": Load from CDN (smaller file, requires internet)
                - "inline": Embed full library (larger file, works offline)
                - False: Don't include (for embedding in existing page)

        Returns:
            Path: Full path to saved HTML file

        Raises:
            IOError: If file cannot be written
        """
        if filename is None:
            filename = self._generate_filename(fig, "html")
        elif not filename.lower().endswith(".html"):
            filename = f"{filename}.html"

        filepath = self.output_dir / filename

        try:
            fig.write_html(
                str(filepath),
                include_plotlyjs=include_plotlyjs,
                config={
                    "displayModeBar": True,
                    "displaylogo": False,
                    "modeBarButtonsToRemove": ["sendDataToCloud"],
                },
            )
        except Exception as e:
            logger.error(f"Failed to save HTML file: {e}", exc_info=True)
            raise IOError(f"Could not save HTML to {filepath}: {e}") from e

        logger.info(f"Chart saved as HTML: {filepath} ({self._get_file_size(filepath)})")
        return filepath

    def _generate_filename(self, fig: go.Figure, extension: str) -> str:
        """
        Generate unique filename based on timestamp and trace type.

        Format: chart_{trace_type}_{timestamp}.{extension}
        Example: chart_pie_20251112_143022_512004.html
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

        chart_type = fig.data[0].type if fig.data else "chart"

        filename = f"chart_{chart_type}_{timestamp}.{extension}"
        logger.debug(f"Generated filename: {filename}")
        return filename

    def _get_file_size(self, filepath: Path) -> str:
        """Human-readable file size (e.g. "1.2 MB", "345 KB")."""
        size_bytes = filepath.stat().st_size

        if size_bytes < 1024:
            return f"{size_bytes} bytes"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.1f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"

    def list_saved_files(self, extension: Optional[str] = None) -> List[Path]:
        """
        List saved chart files in the output directory.

        Args:
            extension: Filter by extension (e.g. "html"); all files if None
        """
        pattern = f"*.{extension}" if extension else "*.*"

        files = sorted(self.output_dir.glob(pattern))
        logger.debug(f"Found {len(files)} files matching {pattern}")
        return files
