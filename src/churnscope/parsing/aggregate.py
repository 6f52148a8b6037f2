"""Parse the aggregate log into per-author totals.

Expected input is ``git log --numstat --pretty=format:%aN``::

    Alice
    12\t3\tsrc/app.py
    -\t-\tassets/logo.png

    Bob
    4\t0\tREADME.md

A line without a tab starts a new commit for that author; a line with a tab
is a file change for the current commit.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..logging_config import get_logger
from ..models import AuthorStats
from .numstat import author_filter, split_numstat

logger = get_logger(__name__)


def parse_aggregate_stats(
    log: str, authors: Optional[Sequence[str]] = None
) -> dict[str, AuthorStats]:
    """Aggregate commits, insertions, deletions and distinct files per author.

    Args:
        log: Raw git log text
        authors: Optional case-insensitive allow-list. Commits by other
            authors are skipped together with their file lines.

    Returns:
        Map of author name to AuthorStats, in first-seen order
    """
    allowed = author_filter(authors)
    stats: dict[str, AuthorStats] = {}
    author_files: dict[str, set[str]] = {}
    current_author = ""

    for raw_line in log.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if "\t" in line:
            if not current_author:
                continue
            change = split_numstat(line)
            author_stats = stats[current_author]
            author_stats.insertions += change.insertions
            author_stats.deletions += change.deletions
            if change.path:
                author_files[current_author].add(change.path)
            continue

        current_author = line
        if allowed is not None and current_author.lower() not in allowed:
            current_author = ""
            continue

        if current_author not in stats:
            stats[current_author] = AuthorStats()
            author_files[current_author] = set()
        stats[current_author].commits += 1

    for author, author_stats in stats.items():
        author_stats.files_touched = len(author_files[author])

    logger.debug("Parsed aggregate log: %d authors", len(stats))
    return stats
