"""Parse the periodic log into (period, author) rows.

Expected input is ``git log --numstat --pretty=format:%aN|%cd --date=iso``.
Each header line is ``Author Name|2025-12-31 12:34:56 +0900``.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..constants import PeriodUnit
from ..logging_config import get_logger
from ..models import AuthorStats, PeriodAuthorStats
from ..temporal import parse_git_date, period_label
from .numstat import author_filter, split_numstat

logger = get_logger(__name__)


def parse_period_stats(
    log: str,
    period_unit: PeriodUnit,
    authors: Optional[Sequence[str]] = None,
) -> list[PeriodAuthorStats]:
    """Group commits by period bucket and author.

    ``files_touched`` counts file-change lines in the bucket, so a file
    changed by two commits in one period counts twice.

    Returns:
        Rows sorted by period label descending, then by
        insertions + deletions descending. Ties keep first-seen order.
    """
    allowed = author_filter(authors)
    grouped: dict[str, dict[str, AuthorStats]] = {}
    current: Optional[AuthorStats] = None

    for raw_line in log.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if "\t" in line:
            if current is None:
                continue
            change = split_numstat(line)
            current.insertions += change.insertions
            current.deletions += change.deletions
            current.files_touched += 1
            continue

        parts = line.split("|")
        if len(parts) != 2:
            continue

        current = None
        author, date_text = parts
        if allowed is not None and author.lower() not in allowed:
            continue

        commit_date = parse_git_date(date_text)
        if commit_date is None:
            logger.debug("Skipping commit with unparseable date: %r", date_text)
            continue

        period = period_label(commit_date, period_unit)
        bucket = grouped.setdefault(period, {})
        current = bucket.setdefault(author, AuthorStats())
        current.commits += 1

    rows = [
        PeriodAuthorStats(period=period, author=author, stats=stats)
        for period, bucket in grouped.items()
        for author, stats in bucket.items()
    ]
    # Both sorts are stable: impact first, then period as the primary key
    rows.sort(key=lambda row: row.stats.total_changes, reverse=True)
    rows.sort(key=lambda row: row.period, reverse=True)

    logger.debug("Parsed period log: %d periods, %d rows", len(grouped), len(rows))
    return rows
