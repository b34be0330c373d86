"""
Display Module

Rich display helpers for the interactive parsing session.
"""

from typing import Any, List, Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.json import JSON
from rich import box

from src.pipeline_session.result import SessionResult
from src.shared_lib.utils.json_serialization import json_dumps


class DisplayHelper:
    """
    Helper class for Rich display formatting.

    Keeps every session output (results, JSON, history, messages) in one
    consistent style.
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize display helper.

        Args:
            console: Rich Console instance (creates new if None)
        """
        self.console = console or Console()

    def show_welcome(self):
        """Display welcome banner."""
        welcome_text = """
[bold cyan]╔═══════════════════════════════════════════════════════════╗[/bold cyan]
[bold cyan]║[/bold cyan]          [bold white]Vizom Data Parser - Interactive Session[/bold white]          [bold cyan]║[/bold cyan]
[bold cyan]╚═══════════════════════════════════════════════════════════╝[/bold cyan]

[yellow]Paste data in any of these shapes:[/yellow]
  • [cyan]JSON[/cyan] - {"labels": [...], "data": [...]}, records or flat objects
  • [cyan]CSV / TSV[/cyan] - header row plus values, any of , ; | or tab
  • [cyan]Key: value[/cyan] - "Sales: 100, Costs: 80"
  • [cyan]Tables[/cyan] - markdown or space-aligned columns
  • [cyan]Sentences[/cyan] - "sales were 100 in January"
  • [cyan]Numbers[/cyan] - "10 20 30" (labels inferred from context)

[dim]Type a line of data, /paste for multi-line input, or /help for commands[/dim]
"""
        self.console.print(Panel(welcome_text, border_style="cyan", box=box.DOUBLE))

    def show_result(self, result: SessionResult, max_rows: int = 20):
        """
        Display a session result: summary panel plus data table.

        Args:
            result: SessionResult to display
            max_rows: Maximum table rows
        """
        self.console.print()
        self.console.print(result.to_panel())

        table = result.to_table(max_rows=max_rows)
        if table:
            self.console.print(table)

        if result.has_data:
            self.console.print(
                "[dim]Commands: /chart <type> (override) | /json | /save (HTML) | /help[/dim]"
            )

    def show_json(self, data: Any, title: str = "JSON Output"):
        """
        Display JSON data with formatting.

        Args:
            data: Data (or an already encoded JSON string) to display
            title: Panel title
        """
        if isinstance(data, str):
            json_str = data
        else:
            json_str = json_dumps(data, indent=2, ensure_ascii=False)

        panel = Panel(JSON(json_str), title=title, border_style="cyan", box=box.ROUNDED)
        self.console.print(panel)

    def show_history(self, history: List[SessionResult], max_items: int = 20):
        """
        Display the most recent inputs.

        Args:
            history: Session results, oldest first
            max_items: Number of entries to show
        """
        if not history:
            self.console.print("[dim]No input history[/dim]")
            return

        table = Table(title="Input History", show_header=True, header_style="bold cyan")
        table.add_column("#", style="dim", width=4)
        table.add_column("Input", style="white")
        table.add_column("Status", style="yellow", width=12)
        table.add_column("Parser", style="magenta", width=16)
        table.add_column("Chart", style="cyan", width=10)
        table.add_column("Time", style="green", width=10)

        offset = max(len(history) - max_items, 0)
        for i, result in enumerate(history[offset:], offset + 1):
            text = " ".join(result.input_text.split())
            text_short = text[:50] + "..." if len(text) > 50 else text
            status_icon = {"success": "✓", "fallback": "⚠"}.get(result.status, "✗")
            table.add_row(
                str(i),
                escape(text_short),
                f"{status_icon} {result.status}",
                result.parser or "N/A",
                result.chart_type or "N/A",
                f"{result.total_time * 1000:.1f}ms",
            )

        self.console.print(table)

    def show_error(self, error_msg: str, details: Optional[str] = None):
        """
        Display error message.

        Args:
            error_msg: Main error message
            details: Additional error details
        """
        content = f"[bold red]Error:[/bold red] {escape(error_msg)}"
        if details:
            content += f"\n\n[dim]{details}[/dim]"

        panel = Panel(content, title="Error", border_style="red", box=box.ROUNDED)
        self.console.print(panel)

    def show_warning(self, warning_msg: str):
        self.console.print(f"[yellow]⚠ {warning_msg}[/yellow]")

    def show_success(self, success_msg: str):
        self.console.print(f"[green]✓ {success_msg}[/green]")

    def show_info(self, info_msg: str):
        self.console.print(f"[cyan]ℹ {info_msg}[/cyan]")

    def clear(self):
        """Clear the console."""
        self.console.clear()

    def print(self, *args, **kwargs):
        """Wrapper for console.print."""
        self.console.print(*args, **kwargs)
