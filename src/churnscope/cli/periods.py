"""Daily, weekly and monthly CLI commands -- per-author totals per period."""

from datetime import datetime
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis import AnalyzerOptions
from ..constants import AnalysisMode, PeriodUnit
from ..models import PeriodAuthorStats
from . import app
from ._common import (
    AuthorOption,
    BranchOption,
    DaysOption,
    JsonOption,
    MinCommitsOption,
    SinceOption,
    UntilOption,
    console,
    describe_window,
    format_signed,
    print_json,
    run_analysis,
)


def _show_periods(
    ctx: typer.Context,
    period_unit: PeriodUnit,
    since: Optional[datetime],
    until: Optional[datetime],
    days: Optional[int],
    author: Optional[list[str]],
    branch: Optional[str],
    min_commits: Optional[int],
    json_output: bool,
) -> None:
    options = AnalyzerOptions(
        since=since,
        until=until,
        days=days,
        mode=AnalysisMode.PERIODIC,
        period_unit=period_unit,
        authors=author or None,
        branch=branch,
        min_commits=min_commits,
    )
    rows: list[PeriodAuthorStats] = run_analysis(ctx, options)

    if json_output:
        print_json(rows)
        return

    if not rows:
        console.print("[yellow]No commits found in the selected range.[/yellow]")
        return

    console.print()
    console.print(
        f"[bold cyan]{period_unit.value.upper()} CONTRIBUTIONS[/bold cyan] -- "
        f"{describe_window(options)}"
    )
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Period")
    table.add_column("Author", min_width=16)
    table.add_column("Commits", justify="right")
    table.add_column("Changes", justify="right")
    table.add_column("Files", justify="right")

    previous_period = None
    for row in rows:
        # Print each period label once
        label = row.period if row.period != previous_period else ""
        previous_period = row.period
        table.add_row(
            f"[bold]{label}[/bold]",
            escape(row.author),
            str(row.stats.commits),
            format_signed(row.stats.insertions, row.stats.deletions),
            str(row.stats.files_touched),
        )

    console.print(table)
    console.print()


@app.command()
def daily(
    ctx: typer.Context,
    since: Optional[datetime] = SinceOption,
    until: Optional[datetime] = UntilOption,
    days: Optional[int] = DaysOption,
    author: Optional[list[str]] = AuthorOption,
    branch: Optional[str] = BranchOption,
    min_commits: Optional[int] = MinCommitsOption,
    json_output: bool = JsonOption,
):
    """
    Show contributions per day.

    [bold cyan]Examples:[/bold cyan]

      churnscope daily --days 7

      churnscope daily --author "Jane Doe" --json
    """
    _show_periods(
        ctx, PeriodUnit.DAILY, since, until, days, author, branch, min_commits, json_output
    )


@app.command()
def weekly(
    ctx: typer.Context,
    since: Optional[datetime] = SinceOption,
    until: Optional[datetime] = UntilOption,
    days: Optional[int] = DaysOption,
    author: Optional[list[str]] = AuthorOption,
    branch: Optional[str] = BranchOption,
    min_commits: Optional[int] = MinCommitsOption,
    json_output: bool = JsonOption,
):
    """
    Show contributions per ISO week (YYYY-Wnn).

    [bold cyan]Examples:[/bold cyan]

      churnscope weekly --days 90
    """
    _show_periods(
        ctx, PeriodUnit.WEEKLY, since, until, days, author, branch, min_commits, json_output
    )


@app.command()
def monthly(
    ctx: typer.Context,
    since: Optional[datetime] = SinceOption,
    until: Optional[datetime] = UntilOption,
    days: Optional[int] = DaysOption,
    author: Optional[list[str]] = AuthorOption,
    branch: Optional[str] = BranchOption,
    min_commits: Optional[int] = MinCommitsOption,
    json_output: bool = JsonOption,
):
    """
    Show contributions per calendar month.

    [bold cyan]Examples:[/bold cyan]

      churnscope monthly --since 2025-01-01
    """
    _show_periods(
        ctx, PeriodUnit.MONTHLY, since, until, days, author, branch, min_commits, json_output
    )
