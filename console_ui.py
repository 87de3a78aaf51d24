#!/usr/bin/env python3
"""
Console UI Module using Rich

Provides the console output used by onomasia: styled status lines,
a run header, a configuration table and an operation summary. All
output goes to standard output.
"""

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class ConsoleUI:
    """Console output handler using Rich"""

    def __init__(self, force_terminal: Optional[bool] = None, no_color: bool = False):
        """Initialize console with optional terminal forcing"""
        # soft_wrap keeps long paths on one line
        self.console = Console(
            force_terminal=force_terminal, no_color=no_color, highlight=False, emoji=False, soft_wrap=True
        )

    # Basic styled output methods; messages are printed verbatim, file names may contain "[...]"
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(message, style="green", markup=False)

    def print_error(self, message: str):
        """Print error message in red"""
        self.console.print(message, style="red bold", markup=False)

    def print_warning(self, message: str):
        """Print warning message in yellow"""
        self.console.print(message, style="yellow", markup=False)

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.console.print(message, style="cyan", markup=False)

    def print_progress(self, message: str):
        """Print progress message in dim white"""
        self.console.print(message, style="white dim", markup=False)

    def print_plain(self, message: str):
        """Print message in plain white"""
        self.console.print(message, style="white", markup=False)

    def print_provenance(self, marker: str, message: str):
        """Print a line prefixed with a dim provenance marker such as 'PATT>'"""
        self.console.print(f"[dim]{escape(marker)}[/dim] {escape(message)}")

    def print_header(self, title: str, subtitle: Optional[str] = None):
        """Print a header with optional subtitle"""
        if subtitle:
            header_text = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            header_text = f"[bold]{escape(title)}[/bold]"

        panel = Panel(header_text, box=box.ROUNDED, padding=(0, 1), expand=False)
        self.console.print(panel)

    # Configuration display
    def show_configuration(self, config: dict[str, Any]):
        """Display configuration in a formatted table"""
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Setting", style="cyan dim", min_width=12, justify="right")
        table.add_column("Value", style="cyan", min_width=30)

        for key, value in config.items():
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(v) for v in value)
            table.add_row(escape(key), escape(str(value)))

        self.console.print(table)

    def show_operation_summary(self, successful: list[str], failed: list[tuple[str, str]], operation_name: str):
        """Show summary of completed operations"""
        if successful:
            self.print_success(f"Successfully {operation_name} {len(successful)} files")

        if failed:
            self.print_error(f"Failed to process {len(failed)} files:")
            for filename, error in failed:
                self.console.print(f"  • {filename}: {error}", style="red dim", markup=False)
