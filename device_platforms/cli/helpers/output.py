"""Output formatting and display utilities."""
import json
import sys
from typing import Sequence

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from device_platforms.platforms import Platform
from device_platforms.utils.exceptions import PlatformsException, UnknownPlatformError
from . import get_panel_box, CONSOLE_WIDTH


class OutputHelper:
    """Output formatting and display utilities."""

    # Ensure stdout uses UTF-8 encoding
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')

    _console = Console()
    PANEL_WIDTH = None

    @staticmethod
    def _get_panel_width():
        """Get panel width."""
        if OutputHelper.PANEL_WIDTH is None:
            OutputHelper.PANEL_WIDTH = CONSOLE_WIDTH
        return OutputHelper.PANEL_WIDTH

    @staticmethod
    def print_panel(content, title: str = "", border_style: str = "blue"):
        """Print content in a rich panel box."""
        width = OutputHelper._get_panel_width()
        OutputHelper._console.print(Panel(content, title=title, title_align="left", border_style=border_style, box=get_panel_box(), expand=True, width=width))

    @staticmethod
    def create_platform_table(platforms: Sequence[Platform]) -> Table:
        table = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2), expand=False)
        table.add_column("ID", justify="right", no_wrap=True)
        table.add_column("NAME", style="bright_green", no_wrap=True)
        table.add_column("TAGS", style="dim")
        for p in platforms:
            table.add_row(str(p.id), p.name, ", ".join(p.tags))
        return table

    @staticmethod
    def print_platforms(platforms: Sequence[Platform], output_format: str, title: str = "Platforms"):
        """Print platforms as a table panel, JSON, or one name per line."""
        if output_format == 'json':
            typer.echo(json.dumps([p.to_dict() for p in platforms], indent=2))
        elif output_format == 'names':
            for p in platforms:
                typer.echo(p.name)
        elif not platforms:
            OutputHelper.print_panel("[dim]No matching platforms.[/dim]", title=title, border_style="yellow")
        else:
            OutputHelper.print_panel(
                OutputHelper.create_platform_table(platforms),
                title=f"{title} ({len(platforms)})",
                border_style="green"
            )

    @staticmethod
    def handle_error(error: PlatformsException):
        """Report a device-platforms error in a red panel."""
        if isinstance(error, UnknownPlatformError):
            OutputHelper.print_panel(
                f"{error.message}\n\n"
                "Run [bright_blue]device-platforms list[/bright_blue] or "
                "[bright_blue]device-platforms tags[/bright_blue] to see known values.",
                title="Error",
                border_style="red"
            )
        else:
            OutputHelper.print_panel(error.message, title="Error", border_style="red")
