"""
Session Statistics Module

Tracks and displays statistics for an interactive parsing session.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Optional
from collections import Counter
from rich.table import Table
from rich import box


@dataclass
class SessionStatistics:
    """
    Tracks statistics for an interactive parsing session.

    Monitors inputs, outcomes, timing, and which detectors and chart types
    were used.
    """

    session_start: datetime = field(default_factory=datetime.now)

    # Input counters
    total_inputs: int = 0
    successful_inputs: int = 0
    fallback_inputs: int = 0
    failed_inputs: int = 0
    overridden_inputs: int = 0

    # Timing aggregates (seconds)
    total_time: float = 0.0
    slowest_time: float = 0.0

    # Distributions
    parsers: Counter = field(default_factory=Counter)
    chart_types: Counter = field(default_factory=Counter)

    def record_input(
        self,
        status: str,
        total_time: float,
        parser: Optional[str] = None,
        chart_type: Optional[str] = None,
        overridden: bool = False,
    ):
        """
        Record one processed input.

        Args:
            status: 'success', 'fallback' or 'error'
            total_time: Pipeline time in seconds
            parser: Name of the detector used (or "fallback")
            chart_type: Final chart type
            overridden: Whether the user overrode the suggested chart type
        """
        self.total_inputs += 1

        if status == "success":
            self.successful_inputs += 1
        elif status == "fallback":
            self.fallback_inputs += 1
        else:
            self.failed_inputs += 1

        if overridden:
            self.overridden_inputs += 1

        self.total_time += total_time
        self.slowest_time = max(self.slowest_time, total_time)

        if parser:
            self.parsers[parser] += 1

        if chart_type:
            self.chart_types[chart_type] += 1

    @property
    def session_duration(self) -> timedelta:
        """Get session duration."""
        return datetime.now() - self.session_start

    @property
    def success_rate(self) -> float:
        """Share of inputs parsed by a detector, as a percentage."""
        if self.total_inputs == 0:
            return 0.0
        return (self.successful_inputs / self.total_inputs) * 100

    @property
    def fallback_rate(self) -> float:
        if self.total_inputs == 0:
            return 0.0
        return (self.fallback_inputs / self.total_inputs) * 100

    @property
    def average_time(self) -> float:
        """Average pipeline time in milliseconds."""
        if self.total_inputs == 0:
            return 0.0
        return (self.total_time / self.total_inputs) * 1000

    def to_table(self) -> Table:
        """
        Create a Rich Table for display.

        Returns:
            Rich Table with session statistics
        """
        table = Table(
            title=f"Session Statistics (Duration: {self._format_duration(self.session_duration)})",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan",
        )

        table.add_column("Metric", style="white", width=30)
        table.add_column("Value", justify="right", style="yellow")

        table.add_row("Total Inputs", str(self.total_inputs))
        table.add_row(
            "Parsed",
            f"{self.successful_inputs} ({self.success_rate:.1f}%)",
            style="green",
        )
        table.add_row(
            "Fallback",
            f"{self.fallback_inputs} ({self.fallback_rate:.1f}%)",
            style="yellow" if self.fallback_inputs > 0 else "dim",
        )
        table.add_row(
            "Failed",
            str(self.failed_inputs),
            style="red" if self.failed_inputs > 0 else "dim",
        )
        table.add_row("Chart Type Overrides", str(self.overridden_inputs))
        table.add_row("", "")  # Spacer

        table.add_row("Average Time", f"{self.average_time:.1f}ms")
        table.add_row("Slowest", f"{self.slowest_time * 1000:.1f}ms")
        table.add_row("Total Time", f"{self.total_time:.3f}s")
        table.add_row("", "")  # Spacer

        if self.parsers:
            table.add_row("[bold]Parsers:[/bold]", "")
            for parser, count in self.parsers.most_common():
                table.add_row(f"  {parser}", str(count))
            table.add_row("", "")  # Spacer

        if self.chart_types:
            table.add_row("[bold]Chart Types:[/bold]", "")
            for chart_type, count in self.chart_types.most_common():
                table.add_row(f"  {chart_type}", str(count))

        return table

    def _format_duration(self, duration: timedelta) -> str:
        """Format duration as human-readable string."""
        total_seconds = int(duration.total_seconds())
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60

        if hours > 0:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        else:
            return f"{minutes:02d}:{seconds:02d}"

    def reset(self):
        """Reset all statistics."""
        self.session_start = datetime.now()
        self.total_inputs = 0
        self.successful_inputs = 0
        self.fallback_inputs = 0
        self.failed_inputs = 0
        self.overridden_inputs = 0
        self.total_time = 0.0
        self.slowest_time = 0.0
        self.parsers.clear()
        self.chart_types.clear()

    def to_dict(self) -> Dict:
        """Convert statistics to dictionary."""
        return {
            "session_start": self.session_start.isoformat(),
            "session_duration": str(self.session_duration),
            "total_inputs": self.total_inputs,
            "successful_inputs": self.successful_inputs,
            "fallback_inputs": self.fallback_inputs,
            "failed_inputs": self.failed_inputs,
            "overridden_inputs": self.overridden_inputs,
            "success_rate": self.success_rate,
            "fallback_rate": self.fallback_rate,
            "average_time_ms": self.average_time,
            "total_time": self.total_time,
            "parsers": dict(self.parsers),
            "chart_types": dict(self.chart_types),
        }
