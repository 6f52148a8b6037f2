"""Ownership CLI command -- who owns which files and directories."""

from datetime import datetime
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ..analysis import AnalyzerOptions
from ..constants import AnalysisMode
from ..filters import FileType, group_files_by_type
from ..models import OwnershipResult
from ..ownership import (
    TreeNode,
    build_directory_tree,
    flatten_single_child_paths,
    knowledge_concentration,
)
from . import app
from ._common import (
    AuthorOption,
    BranchOption,
    DaysOption,
    JsonOption,
    SinceOption,
    UntilOption,
    console,
    describe_window,
    print_json,
    run_analysis,
)


def _share_style(share: int) -> str:
    if share >= 80:
        return "red"
    if share >= 50:
        return "yellow"
    return "green"


def _node_label(node: TreeNode) -> str:
    name = escape(node.name)
    if node.is_directory:
        name = f"[bold]{name}/[/bold]"
    if not node.owner:
        return f"{name} [dim]{node.lines} lines[/dim]"
    style = _share_style(node.share)
    return (
        f"{name} [dim]{node.lines} lines[/dim] "
        f"{escape(node.owner)} [{style}]{node.share}%[/{style}]"
    )


def _add_children(branch: Tree, node: TreeNode, depth: int, max_depth: Optional[int]) -> None:
    for child in node.children:
        sub = branch.add(_node_label(child))
        if child.is_directory and (max_depth is None or depth + 1 < max_depth):
            _add_children(sub, child, depth + 1, max_depth)


def _print_tree(result: OwnershipResult, max_depth: Optional[int]) -> None:
    tree = flatten_single_child_paths(build_directory_tree(result.files))
    rendered = Tree(_node_label(tree))
    _add_children(rendered, tree, 0, max_depth)
    console.print(rendered)


def _print_tables(result: OwnershipResult, limit: int) -> None:
    directories = sorted(
        result.directories.values(), key=lambda d: d.total_lines, reverse=True
    )[:limit]

    table = Table(title="Directories", show_header=True, pad_edge=True)
    table.add_column("Directory", min_width=20)
    table.add_column("Owner", min_width=16)
    table.add_column("Share", justify="right")
    table.add_column("Files", justify="right")
    table.add_column("Lines", justify="right")
    for d in directories:
        style = _share_style(d.share)
        table.add_row(
            escape(d.directory),
            escape(d.owner),
            f"[{style}]{d.share}%[/{style}]",
            f"{d.owner_files}/{d.total_files}",
            str(d.total_lines),
        )
    console.print(table)
    console.print()

    authors = sorted(result.authors.values(), key=lambda a: a.total_lines, reverse=True)
    table = Table(title="Authors", show_header=True, pad_edge=True)
    table.add_column("Author", min_width=16)
    table.add_column("Files", justify="right")
    table.add_column("Lines", justify="right")
    table.add_column("By type")
    table.add_column("Top file")
    for a in authors[:limit]:
        grouped = group_files_by_type(a.files)
        by_type = ", ".join(
            f"{file_type.value} {len(grouped[file_type])}"
            for file_type in FileType
            if grouped[file_type]
        )
        top = f"{escape(a.files[0].file)} ({a.files[0].share}%)" if a.files else "-"
        table.add_row(escape(a.author), str(a.total_files), str(a.total_lines), by_type, top)
    console.print(table)


@app.command()
def ownership(
    ctx: typer.Context,
    since: Optional[datetime] = SinceOption,
    until: Optional[datetime] = UntilOption,
    days: Optional[int] = DaysOption,
    author: Optional[list[str]] = AuthorOption,
    branch: Optional[str] = BranchOption,
    directory: Optional[str] = typer.Option(
        None, "--dir", help="Only analyze files under this directory"
    ),
    exclude: Optional[list[str]] = typer.Option(
        None, "--exclude", "-e", help="Glob pattern to exclude (repeatable)"
    ),
    no_gitignore: bool = typer.Option(
        False, "--no-gitignore", help="Keep files matched by .gitignore rules"
    ),
    show_tree: bool = typer.Option(False, "--tree", help="Show a directory tree"),
    depth: Optional[int] = typer.Option(
        None, "--depth", min=1, help="Maximum tree depth (with --tree)"
    ),
    limit: int = typer.Option(
        20, "--limit", "-n", min=1, help="Rows per table"
    ),
    json_output: bool = JsonOption,
):
    """
    Show file, directory and author ownership by churn.

    A file's owner is the author with the most lines changed in it; a
    directory's owner is the author who owns the most of its files.
    Lock files, build output and other generated files are excluded.

    [bold cyan]Examples:[/bold cyan]

      churnscope ownership --days 180

      churnscope ownership --dir src --tree --depth 3

      churnscope ownership --exclude "docs/**" --json
    """
    options = AnalyzerOptions(
        since=since,
        until=until,
        days=days,
        mode=AnalysisMode.OWNERSHIP,
        authors=author or None,
        branch=branch,
        exclude_patterns=list(exclude or []),
        respect_gitignore=False if no_gitignore else None,
        directory=directory,
    )
    result: OwnershipResult = run_analysis(ctx, options)

    if json_output:
        print_json(result)
        return

    if not result.files:
        console.print("[yellow]No file changes found in the selected range.[/yellow]")
        return

    console.print()
    console.print(
        f"[bold cyan]OWNERSHIP[/bold cyan] -- {describe_window(options)}, "
        f"{len(result.files)} files"
    )
    console.print()

    if show_tree:
        _print_tree(result, depth)
    else:
        _print_tables(result, limit)

    areas = knowledge_concentration(build_directory_tree(result.files), directory=directory)
    if areas:
        console.print()
        console.print("[bold yellow]Knowledge concentration[/bold yellow]")
        for area in areas:
            console.print(
                f"  {escape(area.path)}/ -- {escape(area.owner)} "
                f"owns 100% of {area.lines} changed lines"
            )
    console.print()
