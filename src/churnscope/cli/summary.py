"""Summary CLI command -- per-author totals, efficiency and contributor type."""

from datetime import datetime
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis import AnalyzerOptions
from ..classifier import classify_all_contributors, get_contributor_type_info
from ..constants import AnalysisMode
from ..models import AggregateResult
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
    resolve_config,
    run_analysis,
)


@app.command()
def summary(
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
    Show per-author totals for the whole time range.

    Authors are sorted by lines changed. Each row carries the mean commit
    size ("efficiency") and a contributor type derived from the author's
    insertion/deletion mix and breadth of files touched.

    [bold cyan]Examples:[/bold cyan]

      churnscope summary

      churnscope summary --days 90 --min-commits 5

      churnscope summary --since 2025-01-01 --until 2025-06-30 --json
    """
    options = AnalyzerOptions(
        since=since,
        until=until,
        days=days,
        mode=AnalysisMode.AGGREGATE,
        authors=author or None,
        branch=branch,
        min_commits=min_commits,
    )
    result: AggregateResult = run_analysis(ctx, options)
    types = classify_all_contributors(result.stats, resolve_config(ctx).classifier)

    if json_output:
        print_json(
            {
                "stats": result.stats,
                "efficiency": result.efficiency,
                "types": {a: t.value for a, t in types.items()},
            }
        )
        return

    if not result.stats:
        console.print("[yellow]No commits found in the selected range.[/yellow]")
        return

    ranked = sorted(result.stats.items(), key=lambda item: item[1].total_changes, reverse=True)

    console.print()
    console.print(
        f"[bold cyan]CONTRIBUTIONS[/bold cyan] -- {describe_window(options)}, "
        f"{len(ranked)} authors"
    )
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Author", min_width=16)
    table.add_column("Commits", justify="right")
    table.add_column("Changes", justify="right")
    table.add_column("Files", justify="right")
    table.add_column("Lines/commit", justify="right")
    table.add_column("Type")

    for name, stats in ranked:
        efficiency = result.efficiency.get(name)
        eff_str = f"{efficiency.efficiency} [dim]{efficiency.label.value}[/dim]" if efficiency else "-"
        table.add_row(
            escape(name),
            str(stats.commits),
            format_signed(stats.insertions, stats.deletions),
            str(stats.files_touched),
            eff_str,
            get_contributor_type_info(types[name]).label,
        )

    console.print(table)
    console.print()
