import json
from typing import List

import typer
from rich.table import Table

from device_platforms import __version__
from device_platforms.platforms import (
    PLATFORMS,
    Platform,
    platform_for_id,
    platform_for_name,
    platform_tags,
    platforms_for_tag,
)
from device_platforms.query import parse_platforms
from device_platforms.utils.exceptions import PlatformsException
from ..config import resolve_output_format
from ..helpers import OutputHelper

from ..app import app


def _output_format() -> str:
    try:
        return resolve_output_format()
    except PlatformsException as e:
        OutputHelper.handle_error(e)
        raise typer.Exit(1)


def _lookup_platform(key: str) -> Platform:
    """Resolve KEY as a numeric platform id, or as a platform name."""
    key = key.strip()
    if key.isdecimal():
        return platform_for_id(int(key))
    return platform_for_name(key.lower())


@app.command(name="list")
def list_cmd():
    """
    List every known platform in definition order.
    """
    fmt = _output_format()
    OutputHelper.print_platforms(PLATFORMS, fmt, title="Platforms")


@app.command()
def show(
    key: str = typer.Argument(..., help="Platform id (e.g. 12) or name (e.g. argon)")
):
    """
    Show one platform by id or name.
    """
    fmt = _output_format()
    try:
        p = _lookup_platform(key)
    except PlatformsException as e:
        OutputHelper.handle_error(e)
        raise typer.Exit(1)

    if fmt == 'json':
        typer.echo(json.dumps(p.to_dict(), indent=2))
    elif fmt == 'names':
        typer.echo(p.name)
    else:
        OutputHelper.print_panel(
            f"[bold]ID[/bold]    {p.id}\n"
            f"[bold]Name[/bold]  [bright_green]{p.name}[/bright_green]\n"
            f"[bold]Tags[/bold]  {', '.join(p.tags)}",
            title=f"Platform: {p.name}",
            border_style="green"
        )


@app.command()
def tags():
    """
    List every known tag and the platforms carrying it.
    """
    fmt = _output_format()
    by_tag = {tag: [p.name for p in platforms_for_tag(tag)] for tag in platform_tags()}

    if fmt == 'json':
        typer.echo(json.dumps(by_tag, indent=2))
        return
    if fmt == 'names':
        for tag in by_tag:
            typer.echo(tag)
        return

    table = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2), expand=False)
    table.add_column("TAG", style="yellow", no_wrap=True)
    table.add_column("PLATFORMS")
    for tag, names in by_tag.items():
        table.add_row(tag, ", ".join(names))
    OutputHelper.print_panel(table, title=f"Tags ({len(by_tag)})", border_style="green")


@app.command()
def query(
    expressions: List[str] = typer.Argument(..., help="Tag expressions, e.g. \"wifi gen3\" cellular '!mesh'")
):
    """
    Select platforms with tag expressions.

    Tokens inside one quoted expression are ANDed, separate expressions are ORed.
    Prefix a token with ! to negate it; 'all' matches every platform.
    """
    fmt = _output_format()
    try:
        platforms = parse_platforms(expressions)
    except PlatformsException as e:
        OutputHelper.handle_error(e)
        raise typer.Exit(1)
    OutputHelper.print_platforms(platforms, fmt, title="Matching platforms")


@app.command(name="version")
def version_cmd():
    """
    Show device-platforms version information.
    """
    OutputHelper.print_panel(
        f"device-platforms [green]{__version__}[/green]",
        title="Version",
        border_style="cyan"
    )
