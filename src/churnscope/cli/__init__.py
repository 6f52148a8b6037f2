"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from ._common import console

app = typer.Typer(
    name="churnscope",
    help="churnscope - contribution analytics from git history",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Repository to analyze (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Contribution analytics from git history.

    [bold cyan]Examples:[/bold cyan]

      churnscope summary --days 90

      churnscope weekly --author "Jane Doe"

      churnscope -C ../other-repo ownership --tree
    """
    ctx.ensure_object(dict)
    ctx.obj["path"] = path if path else Path.cwd()
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if version:
        from .. import __version__

        console.print(f"[bold cyan]churnscope[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


# Import subcommands to register them
from .summary import summary as _summary  # noqa: F401, E402
from .periods import daily as _daily, weekly as _weekly, monthly as _monthly  # noqa: F401, E402
from .ownership import ownership as _ownership  # noqa: F401, E402
