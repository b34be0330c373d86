"""
Interactive Pipeline Session Module

Main class for interactive parsing sessions: read text, run the chart
pipeline, show the payload.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import time
import traceback

from rich.console import Console
from rich.prompt import Prompt

from src.data_parser.core.settings import CHART_OUTPUT_DIR
from src.data_parser.utils.chart_type_sanitizer import sanitize_chart_type
from src.pipeline_orchestrator import ChartPipeline, run_chart_pipeline
from src.pipeline_session.commands import CommandHandler
from src.pipeline_session.display import DisplayHelper
from src.pipeline_session.result import SessionResult
from src.pipeline_session.statistics import SessionStatistics
from src.plotly_generator.figure_builder import ChartFigureBuilder
from src.shared_lib.utils.json_serialization import json_dumps
from src.shared_lib.utils.logger import get_logger, setup_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class SessionConfig:
    """Configuration for the interactive session."""

    output_dir: Path = field(default_factory=lambda: Path(CHART_OUTPUT_DIR))
    debug_mode: bool = False
    verbose: bool = False


class InteractivePipelineSession:
    """
    Interactive session for the chart data pipeline.

    Provides a CLI with Rich displays to try inputs, compare detectors and
    chart types, and save the resulting charts.
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        chart_type: Optional[str] = None,
        verbose: bool = False,
        console: Optional[Console] = None,
        pipeline: Optional[ChartPipeline] = None,
        builder: Optional[ChartFigureBuilder] = None,
    ):
        """
        Initialize interactive session.

        Args:
            output_dir: Directory for saved charts (defaults to CHART_OUTPUT_DIR)
            chart_type: Initial chart type override (None = suggestion)
            verbose: Enable verbose logging
            console: Rich console (a new one if None)
            pipeline: ChartPipeline to use (a default one if None)
            builder: Figure builder used by /save
        """
        self.config = SessionConfig(verbose=verbose)
        if output_dir:
            self.config.output_dir = Path(output_dir)

        # Display and UI
        self.console = console or Console()
        self.display = DisplayHelper(self.console)
        self.command_handler = CommandHandler(self)

        self.pipeline = pipeline or ChartPipeline()
        self.builder = builder or ChartFigureBuilder()

        # Session state
        self.history: List[SessionResult] = []
        self.statistics = SessionStatistics()
        self.last_result: Optional[SessionResult] = None
        self.last_input: Optional[str] = None
        self.chart_type_override: Optional[str] = sanitize_chart_type(chart_type)

    def run(self):
        """
        Run the interactive session.

        Main entry point for the interactive CLI.
        """
        self.configure_logging()
        self.display.show_welcome()
        if self.chart_type_override:
            self.display.show_info(f"Chart type override: {self.chart_type_override}")

        while True:
            try:
                text = Prompt.ask("\n[bold cyan]vizom>[/bold cyan]", console=self.console)

                if not text.strip():
                    continue

                if text.strip().startswith("/"):
                    if not self.command_handler.handle(text):
                        break
                else:
                    self.process_input(text)

            except KeyboardInterrupt:
                self.console.print("\n[yellow]Use /exit to quit[/yellow]")
                continue
            except EOFError:
                break
            except Exception as e:
                logger.error(f"Unexpected session error: {e}", exc_info=True)
                self.display.show_error(f"Unexpected error: {e}")
                if self.config.debug_mode:
                    self.console.print(traceback.format_exc())

        self.shutdown()

    def configure_logging(self):
        """Verbose sessions log at DEBUG to the console, quiet ones only to LOG_FILE."""
        verbose = self.config.verbose
        return setup_logger(
            __name__,
            level="DEBUG" if verbose else None,
            console_output=verbose,
        )

    def read_multiline(self) -> str:
        """Read lines until an empty line (or end of input)."""
        self.console.print("[dim]Paste your data, then an empty line to finish:[/dim]")
        lines = []
        while True:
            try:
                line = self.console.input()
            except EOFError:
                break
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines)

    def process_input(self, text: str) -> SessionResult:
        """
        Run ``text`` through the pipeline, display and record the result.

        Args:
            text: Raw user input

        Returns:
            SessionResult for this input
        """
        self.last_input = text
        start_time = time.perf_counter()

        try:
            payload = self.pipeline.process(text, chart_type=self.chart_type_override)
            result = SessionResult.from_payload(
                input_text=text,
                payload=payload,
                total_time=time.perf_counter() - start_time,
                chart_type_override=self.chart_type_override,
            )
            self.display.show_result(result)

        except Exception as e:
            logger.error(f"Input processing failed: {e}", exc_info=True)
            result = SessionResult(
                input_text=text,
                status="error",
                total_time=time.perf_counter() - start_time,
                chart_type_override=self.chart_type_override,
                errors=[str(e)],
            )
            self.display.show_error(f"Input processing failed: {e}")
            if self.config.debug_mode:
                self.console.print(traceback.format_exc())

        self._update_statistics(result)
        self.history.append(result)
        self.last_result = result
        return result

    def save_chart(self, result: SessionResult, filename: Optional[str] = None) -> Path:
        """
        Render ``result`` and write it as HTML into the output directory.

        Raises:
            ValueError: If the result has no renderable payload
            IOError: If the file cannot be written
        """
        if result.payload is None:
            raise ValueError("Result has no payload")

        return self.builder.save(
            result.payload, output_dir=self.config.output_dir, filename=filename
        )

    def _update_statistics(self, result: SessionResult):
        payload = result.payload
        self.statistics.record_input(
            status=result.status,
            total_time=result.total_time,
            parser=result.parser,
            chart_type=result.chart_type,
            overridden=bool(payload and payload.chart_type_overridden),
        )

    def shutdown(self):
        """Shutdown session gracefully."""
        self.console.print()
        self.display.show_info("Shutting down session...")

        if self.statistics.total_inputs > 0:
            self.console.print()
            self.console.print(self.statistics.to_table())

        self.console.print("\n[bold green]Thank you for using the Vizom parser![/bold green]")

    def export_session(self, path: str):
        """
        Export session history and statistics to a JSON file.

        Args:
            path: File path for export
        """
        session_data = {
            "config": {
                "output_dir": str(self.config.output_dir),
                "chart_type_override": self.chart_type_override,
                "verbose": self.config.verbose,
            },
            "statistics": self.statistics.to_dict(),
            "history": [result.to_dict() for result in self.history],
        }

        with open(path, "w", encoding="utf-8") as f:
            f.write(json_dumps(session_data, indent=2, ensure_ascii=False))

        logger.info(f"Session exported to {path}")
        self.display.show_success(f"Session exported to {path}")


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the interactive session.

    With a TEXT argument the input is parsed once and the payload is printed
    as JSON; otherwise the interactive session starts.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Turn pasted text into chart-ready data"
    )
    parser.add_argument("text", nargs="?", help="Parse this text once and print the payload")
    parser.add_argument("--chart", "-c", help="Chart type override (bar, line, pie, doughnut)")
    parser.add_argument("--output-dir", "-o", help="Directory for saved charts")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)

    if args.text is not None:
        setup_logging(level="DEBUG" if args.verbose else None, console_output=args.verbose)
        payload = run_chart_pipeline(args.text, chart_type=args.chart)
        print(json_dumps(payload, indent=2, ensure_ascii=False))
        return 0 if payload.success else 1

    session = InteractivePipelineSession(
        output_dir=args.output_dir,
        chart_type=args.chart,
        verbose=args.verbose,
    )

    session.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
