"""Parse the commit-stream log into one record per commit.

Expected input is
``git log --numstat --pretty=format:%aN|%cd --date=iso --reverse``.
"""

from __future__ import annotations

from typing import Optional

from ..logging_config import get_logger
from ..models import CommitRecord
from ..temporal import parse_git_date
from .numstat import split_numstat

logger = get_logger(__name__)


def parse_commit_stream(log: str) -> list[CommitRecord]:
    """Return commits in log order, including commits with no file changes."""
    commits: list[CommitRecord] = []
    current: Optional[CommitRecord] = None

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
            if change.path:
                current.files.append(change.path)
        elif "|" in line:
            author, date_text = line.split("|")[:2]
            current = CommitRecord(author=author, date=parse_git_date(date_text))
            commits.append(current)

    logger.debug("Parsed commit stream: %d commits", len(commits))
    return commits
