import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from device_platforms import __version__
from device_platforms.utils.exceptions import PlatformsException
from .helpers.output import OutputHelper, get_panel_box, CONSOLE_WIDTH
from .config import _set_global_options


# Resolved from typer so it matches whichever click (bundled or external) typer raises
UsageError = next(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == 'UsageError')


def _handle_usage_error(e):
    console = Console(width=CONSOLE_WIDTH, file=sys.stderr)

    error_msg = str(e.format_message()) if hasattr(e, 'format_message') else str(e)
    error_lines = []

    cmd_name = None
    if e.ctx and e.ctx.info_name and e.ctx.info_name != 'device-platforms':
        cmd_name = e.ctx.info_name

    if cmd_name:
        error_lines.append(f"[bold cyan]Usage:[/bold cyan] device-platforms {cmd_name} [OPTIONS] [ARGS]...")
    else:
        error_lines.append("[bold cyan]Usage:[/bold cyan] device-platforms [OPTIONS] COMMAND [ARGS]...")
    error_lines.append("")
    error_lines.append(f"[red]{error_msg}[/red]")

    console.print(Panel(
        "\n".join(error_lines),
        title="Error",
        border_style="red",
        box=get_panel_box(),
        width=CONSOLE_WIDTH
    ))


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    help="Query the Device OS platform registry."
)


def _print_main_help():
    lines = []
    lines.append("[bold]Device OS platform registry[/bold]")
    lines.append("[dim]Look up platforms by id, name or tag, and select build targets with tag expressions[/dim]")
    lines.append("")
    lines.append("[bold cyan]Usage:[/bold cyan]")
    lines.append("  device-platforms [yellow][OPTIONS][/yellow] [green]COMMAND[/green] [[dim]ARGS[/dim]]...")
    lines.append("")
    lines.append("[bold cyan]Global Options:[/bold cyan]")
    lines.append("  [yellow]-f, --format[/yellow] [cyan]FORMAT[/cyan]   Output format [dim](table, json, names)[/dim]")

    commands = [
        ("list", "List every known platform"),
        ("show", "Show one platform by id or name"),
        ("tags", "List every known tag and the platforms carrying it"),
        ("query", "Select platforms with tag expressions"),
        ("version", "Show version information"),
    ]

    lines.append("")
    lines.append("[bold cyan]Commands:[/bold cyan]")
    for cmd, desc in commands:
        lines.append(f"  [green]{cmd:<12}[/green] {desc}")

    lines.append("")
    lines.append("[bold cyan]Query examples:[/bold cyan]")
    lines.append("  device-platforms query \"wifi gen3\" cellular   [dim]# (wifi AND gen3) OR cellular[/dim]")
    lines.append("  device-platforms query '!photon'             [dim]# every platform except photon[/dim]")
    lines.append("")
    lines.append("[dim]Use 'device-platforms COMMAND --help' for detailed help on each command.[/dim]")

    OutputHelper.print_panel(
        "\n".join(lines),
        title="device-platforms",
        border_style="bright_blue"
    )


# =============================================================================
# App Callback
# =============================================================================

@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    global_format: Optional[str] = typer.Option(
        None,
        "--format", "-f",
        help="Output format: table, json or names",
        is_eager=True
    ),
):
    """
    Query the Device OS platform registry.
    """
    _set_global_options(global_format)

    if ctx.invoked_subcommand is None:
        _print_main_help()
        raise typer.Exit()


# =============================================================================
# Import all commands to register them with the app
# =============================================================================
from .commands import platform

# This import is for side-effect (command registration)
_command_modules = (platform,)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    if len(sys.argv) == 2 and sys.argv[1] in ('--version', '-v'):
        OutputHelper.print_panel(
            f"[bright_blue]device-platforms[/bright_blue] version [bright_green]{__version__}[/bright_green]",
            title="Version",
            border_style="green"
        )
        sys.exit(0)

    if len(sys.argv) == 2 and sys.argv[1] in ('--help', '-h'):
        _print_main_help()
        sys.exit(0)

    try:
        # Without standalone mode click returns the typer.Exit code instead of exiting
        result = app(standalone_mode=False)
        exit_code = result if isinstance(result, int) else 0
    except UsageError as e:
        _handle_usage_error(e)
        exit_code = 2
    except typer.Abort:
        print()
        exit_code = 1
    except PlatformsException as e:
        OutputHelper.handle_error(e)
        exit_code = 1
    except KeyboardInterrupt:
        print()
        exit_code = 130
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
