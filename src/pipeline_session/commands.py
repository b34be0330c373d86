"""
Command Handlers Module

Handles slash commands for the interactive parsing session.
"""

from typing import TYPE_CHECKING, Callable, Dict

from rich.markup import escape
from rich.panel import Panel

from src.data_parser.core.settings import VALID_CHART_TYPES
from src.data_parser.utils.chart_type_sanitizer import is_auto_chart_type, sanitize_chart_type

if TYPE_CHECKING:
    from src.pipeline_session.session import InteractivePipelineSession


HELP_TEXT = """
[bold cyan]Available Commands:[/bold cyan]

[yellow]Input:[/yellow]
  <text>              - Parse one line of data
  /paste              - Multi-line input, finish with an empty line

[yellow]Chart:[/yellow]
  /chart <type>       - Re-run the last input as bar, line, pie or doughnut
  /chart auto         - Go back to the suggested chart type
  /json               - Show the last payload as JSON
  /save \\[file.html]  - Save the last chart as interactive HTML

[yellow]Session:[/yellow]
  /history            - Show input history
  /stats              - Show session statistics
  /export <file.json> - Export history and statistics as JSON
  /debug              - Toggle debug mode (tracebacks)

[yellow]Control:[/yellow]
  /help               - Show this help
  /clear              - Clear screen
  /exit, /quit        - Exit session
"""


class CommandHandler:
    """
    Handles special commands in the interactive session.

    Every handler takes the argument string and returns False to end the
    session, True to continue.
    """

    def __init__(self, session: "InteractivePipelineSession"):
        """
        Initialize command handler.

        Args:
            session: Reference to the InteractivePipelineSession
        """
        self.session = session
        self.console = session.console

        # Command registry
        self.commands: Dict[str, Callable[[str], bool]] = {
            # Input
            '/paste': self.cmd_paste,

            # Chart
            '/chart': self.cmd_chart,
            '/json': self.cmd_json,
            '/save': self.cmd_save,

            # Session
            '/history': self.cmd_show_history,
            '/stats': self.cmd_show_stats,
            '/export': self.cmd_export,
            '/debug': self.cmd_toggle_debug,

            # Help and control
            '/help': self.cmd_help,
            '/clear': self.cmd_clear,
            '/exit': self.cmd_exit,
            '/quit': self.cmd_exit,  # Alias
        }

    def handle(self, command_str: str) -> bool:
        """
        Handle a command.

        Args:
            command_str: Command string starting with '/'

        Returns:
            bool: False if should exit, True to continue
        """
        parts = command_str.strip().split(maxsplit=1)
        cmd = parts[0].lower()
        args = parts[1].strip() if len(parts) > 1 else ''

        if cmd in self.commands:
            return self.commands[cmd](args)

        self.console.print(f"[red]Unknown command: {cmd}[/red]")
        self.console.print("Type [cyan]/help[/cyan] for available commands")
        return True

    # ========================================================================
    # INPUT COMMANDS
    # ========================================================================

    def cmd_paste(self, args: str) -> bool:
        """Read multi-line input and parse it."""
        text = self.session.read_multiline()
        if not text.strip():
            self.console.print("[dim]Nothing pasted[/dim]")
            return True

        self.session.process_input(text)
        return True

    # ========================================================================
    # CHART COMMANDS
    # ========================================================================

    def cmd_chart(self, args: str) -> bool:
        """
        Set or clear the chart type override and re-run the last input.

        Usage: /chart <bar|line|pie|doughnut|auto>
        """
        if not args:
            current = self.session.chart_type_override or "auto"
            self.console.print(f"[cyan]Chart type:[/cyan] {current}")
            self.console.print(f"[yellow]Usage: /chart <{'|'.join(VALID_CHART_TYPES)}|auto>[/yellow]")
            return True

        if is_auto_chart_type(args):
            self.session.chart_type_override = None
            self.console.print("[green]Chart type back to automatic suggestion[/green]")
        else:
            chart_type = sanitize_chart_type(args)
            if chart_type is None:
                self.console.print(f"[red]Unknown chart type: {escape(args)}[/red]")
                self.console.print(f"Supported types: {', '.join(VALID_CHART_TYPES)}, auto")
                return True

            self.session.chart_type_override = chart_type
            self.console.print(f"[green]Chart type set to {chart_type}[/green]")

        if self.session.last_input is not None:
            self.session.process_input(self.session.last_input)

        return True

    def cmd_json(self, args: str) -> bool:
        """Show the last payload as JSON."""
        if not self.session.last_result:
            self.console.print("[yellow]No result available[/yellow]")
            return True

        self.session.display.show_json(
            self.session.last_result.get_json_display(), title="Chart Payload"
        )
        return True

    def cmd_save(self, args: str) -> bool:
        """
        Save the last chart as HTML.

        Usage: /save [file.html]
        """
        result = self.session.last_result
        if not result or not result.has_data:
            self.console.print("[yellow]No chart to save[/yellow]")
            return True

        try:
            path = self.session.save_chart(result, filename=args or None)
        except (IOError, ValueError) as e:
            self.session.display.show_error(f"Save failed: {e}")
            return True

        self.session.display.show_success(f"Chart saved to {path}")
        return True

    # ========================================================================
    # SESSION COMMANDS
    # ========================================================================

    def cmd_show_history(self, args: str) -> bool:
        """Show input history."""
        self.session.display.show_history(self.session.history)
        return True

    def cmd_show_stats(self, args: str) -> bool:
        """Show session statistics."""
        self.console.print(self.session.statistics.to_table())
        return True

    def cmd_export(self, args: str) -> bool:
        """
        Export session history and statistics.

        Usage: /export <file.json>
        """
        if not args:
            self.console.print("[yellow]Usage: /export <file.json>[/yellow]")
            return True

        try:
            self.session.export_session(args)
        except OSError as e:
            self.session.display.show_error(f"Export failed: {e}")

        return True

    def cmd_toggle_debug(self, args: str) -> bool:
        """Toggle debug mode."""
        self.session.config.debug_mode = not self.session.config.debug_mode
        status = "enabled" if self.session.config.debug_mode else "disabled"
        self.console.print(f"[green]Debug mode {status}[/green]")
        return True

    # ========================================================================
    # HELP AND CONTROL COMMANDS
    # ========================================================================

    def cmd_help(self, args: str) -> bool:
        """Show help message."""
        panel = Panel(HELP_TEXT, title="Vizom Parser Help", border_style="cyan")
        self.console.print(panel)
        return True

    def cmd_clear(self, args: str) -> bool:
        """Clear screen."""
        self.console.clear()
        return True

    def cmd_exit(self, args: str) -> bool:
        """Exit session."""
        return False
