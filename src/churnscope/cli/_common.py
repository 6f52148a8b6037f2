"""Shared CLI helpers: console, option declarations, analysis runner."""

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from ..analysis import AnalysisResult, AnalyzerOptions, analyze_contributions
from ..config import AnalysisConfig, load_config
from ..exceptions import ChurnscopeError
from ..git import GitLogSource
from ..logging_config import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]

SinceOption = typer.Option(
    None, "--since", "-s", formats=DATE_FORMATS, help="Start date (YYYY-MM-DD)"
)
UntilOption = typer.Option(
    None, "--until", "-u", formats=DATE_FORMATS, help="End date (YYYY-MM-DD)"
)
DaysOption = typer.Option(
    None, "--days", "-d", min=1, help="Look back this many days (default: 30)"
)
AuthorOption = typer.Option(
    None, "--author", "-a", help="Only include this author (repeatable, case-insensitive)"
)
BranchOption = typer.Option(None, "--branch", "-b", help="Branch or revision to analyze")
MinCommitsOption = typer.Option(
    None, "--min-commits", "-m", min=1, help="Hide authors with fewer commits"
)
JsonOption = typer.Option(False, "--json", help="Output in machine-readable JSON format")


def resolve_config(ctx: typer.Context) -> AnalysisConfig:
    """Build configuration from the global CLI options."""
    obj = ctx.obj or {}
    return load_config(
        config_file=obj.get("config"),
        verbose=obj.get("verbose", False),
        quiet=obj.get("quiet", False),
    )


def run_analysis(ctx: typer.Context, options: AnalyzerOptions) -> AnalysisResult:
    """Run one analysis, turning library errors into a red message and exit 1."""
    obj = ctx.obj or {}

    try:
        config = resolve_config(ctx)
        setup_logging(
            verbose=config.verbosity == "verbose",
            quiet=config.verbosity == "quiet",
            log_file=config.log_file,
        )
        if options.since is None and options.days is None:
            options.days = config.default_days
        source = GitLogSource(
            str(obj.get("path", ".")), timeout_seconds=config.git_timeout_seconds
        )
        return analyze_contributions(options, source, config)

    except ChurnscopeError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def print_json(value: Any) -> None:
    print(json.dumps(to_jsonable(value), indent=2, default=_json_default, ensure_ascii=False))


def describe_window(options: AnalyzerOptions) -> str:
    """Human-readable description of the analyzed time range."""
    end = options.until.strftime("%Y-%m-%d") if options.until else "now"
    if options.since:
        return f"{options.since.strftime('%Y-%m-%d')} to {end}"
    return f"last {options.days} days"


def format_signed(insertions: int, deletions: int) -> str:
    return f"[green]+{insertions}[/green] [red]-{deletions}[/red]"
