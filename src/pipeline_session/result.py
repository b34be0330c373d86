"""
Session Result Module

Wraps one pipeline run (input text, payload, timing) with Rich display support.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.data_parser.core.settings import FALLBACK_PARSER_NAME
from src.shared_lib.models.schema import ChartPayload
from src.shared_lib.utils.json_serialization import json_dumps


@dataclass
class SessionResult:
    """
    Result container for one input processed in the interactive session.

    ``status`` is 'success' when a detector matched, 'fallback' when the
    sample data was used and 'error' when nothing could be produced.
    """

    input_text: str
    status: str  # 'success', 'fallback', 'error'
    payload: Optional[ChartPayload] = None
    timestamp: datetime = field(default_factory=datetime.now)

    # Chart type requested by the user (None = suggestion)
    chart_type_override: Optional[str] = None

    # Seconds spent in the pipeline
    total_time: float = 0.0

    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(
        cls,
        input_text: str,
        payload: ChartPayload,
        total_time: float = 0.0,
        chart_type_override: Optional[str] = None,
    ) -> "SessionResult":
        """Build a result, deriving the status from the payload."""
        if not payload.success:
            status = "error"
            errors = [payload.error] if payload.error else []
        elif payload.parser == FALLBACK_PARSER_NAME:
            status = "fallback"
            errors = []
        else:
            status = "success"
            errors = []

        return cls(
            input_text=input_text,
            status=status,
            payload=payload,
            chart_type_override=chart_type_override,
            total_time=total_time,
            errors=errors,
        )

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_fallback(self) -> bool:
        return self.status == "fallback"

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @property
    def has_data(self) -> bool:
        return bool(self.payload and self.payload.success and self.payload.labels)

    @property
    def parser(self) -> Optional[str]:
        return self.payload.parser if self.payload else None

    @property
    def chart_type(self) -> Optional[str]:
        return self.payload.chart_type if self.payload else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "input": self.input_text,
            "status": self.status,
            "timestamp": self.timestamp.isoformat(),
            "chart_type_override": self.chart_type_override,
            "total_time": self.total_time,
            "payload": self.payload.to_dict() if self.payload else None,
            "errors": self.errors,
        }

    def get_json_display(self) -> str:
        """Payload as indented JSON (camelCase keys)."""
        data = self.payload if self.payload is not None else self.to_dict()
        return json_dumps(data, indent=2, ensure_ascii=False)

    def to_panel(self) -> Panel:
        """
        Create a Rich Panel summarizing the run.

        Returns:
            Rich Panel object
        """
        status_icons = {"success": "✓", "fallback": "⚠", "error": "✗"}
        icon = status_icons.get(self.status, "?")

        content_parts = [
            f"[bold]{icon} {self.status.upper()}[/bold] | "
            f"{self.total_time * 1000:.0f}ms | {self.parser or 'N/A'}"
        ]

        preview = self.input_text if len(self.input_text) <= 80 else self.input_text[:77] + "..."
        content_parts.append(f"\n[dim]Input:[/dim] {escape(preview)}\n")

        payload = self.payload
        if payload and payload.success:
            content_parts.append(
                f"[cyan]Chart:[/cyan] {payload.chart_type} "
                f"[dim]({payload.chart_type_reason})[/dim]"
            )
            if payload.title:
                content_parts.append(f"[cyan]Title:[/cyan] {escape(payload.title)}")
            content_parts.append(f"[cyan]Points:[/cyan] {payload.point_count}")
            if payload.multi_series:
                names = ", ".join(series.label for series in payload.multi_series)
                content_parts.append(f"[cyan]Series:[/cyan] {names}")
            if payload.is_percentage:
                content_parts.append("[cyan]Values:[/cyan] percentages")
            if payload.warning:
                content_parts.append(f"\n[yellow]⚠ {payload.warning}[/yellow]")

        if self.errors:
            content_parts.append("\n[red bold]Errors:[/red bold]")
            for error in self.errors:
                content_parts.append(f"  [red]• {error}[/red]")

        border = {"success": "green", "fallback": "yellow"}.get(self.status, "red")

        return Panel(
            "\n".join(content_parts),
            title="Parse Result",
            border_style=border,
            box=box.ROUNDED,
        )

    def to_table(self, max_rows: int = 20) -> Optional[Table]:
        """
        Create a Rich Table of labels and values.

        Multi-series payloads get one extra column per series.

        Args:
            max_rows: Maximum rows to display

        Returns:
            Rich Table object or None if there is no data
        """
        if not self.has_data:
            return None

        payload = self.payload
        table = Table(
            title=f"Data ({payload.point_count} points)",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        table.add_column("Label", style="white")
        table.add_column("Value", style="yellow", justify="right")

        series = payload.multi_series or []
        for entry in series:
            table.add_column(entry.label, style="green", justify="right")

        suffix = "%" if payload.is_percentage else ""
        for i, (label, value) in enumerate(zip(payload.labels, payload.data)):
            if i >= max_rows:
                break
            extra = [
                f"{entry.data[i]:g}" if i < len(entry.data) else ""
                for entry in series
            ]
            table.add_row(escape(label), f"{value:g}{suffix}", *extra)

        return table
