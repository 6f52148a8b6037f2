"""Parse the ownership log into file, directory and author ownership.

Expected input is
``git log --numstat --pretty=format:AUTHOR:%aN|DATE:%cd --date=iso``::

    AUTHOR:Alice|DATE:2025-01-15 10:30:45 +0900
    10\t2\tsrc/app.py
    3\t0\tdocs/{guide => manual}/intro.md

The ``AUTHOR:`` prefix keeps author names from being mistaken for paths.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional, Sequence

from ..logging_config import get_logger
from ..math import percent_share
from ..models import FileOwnership, OwnershipResult
from ..ownership.rollup import build_author_ownership, build_directory_ownership, pick_owner
from ..temporal import parse_git_date
from .numstat import author_filter, split_numstat

logger = get_logger(__name__)

AUTHOR_PREFIX = "AUTHOR:"
DATE_SEPARATOR = "|DATE:"

# {old => new}, {old => }, { => new}
_RENAME_RE = re.compile(r"\{[^}]*?\s*=>\s*([^}]*)\}")
_ARROW = "=>"


def normalize_rename(file_path: str) -> str:
    """Rewrite git rename notation to the new path.

    ``src/{old => new}/a.py`` becomes ``src/new/a.py`` and a whole-path
    rename ``old.py => new.py`` becomes ``new.py``. When any rename
    segment has an empty target (``{old => }/a.py``) the record describes a
    removal and an empty string is returned so the caller drops it.
    """
    dropped = False

    def _replace(match: re.Match) -> str:
        nonlocal dropped
        target = match.group(1).strip()
        if not target:
            dropped = True
        return target

    result = _RENAME_RE.sub(_replace, file_path)
    if not dropped and _ARROW in result:
        result = result.rsplit(_ARROW, 1)[1].strip()
        dropped = not result
    if dropped:
        return ""
    return result


def _parse_header(header: str) -> tuple[str, Optional[datetime]]:
    body = header.replace(AUTHOR_PREFIX, "", 1).strip()
    if DATE_SEPARATOR not in body:
        return body, None
    author, date_text = body.split(DATE_SEPARATOR, 1)
    return author.strip(), parse_git_date(date_text)


def parse_ownership_stats(
    log: str, authors: Optional[Sequence[str]] = None
) -> OwnershipResult:
    """Attribute churn per file and derive primary owners.

    Args:
        log: Raw ownership log text
        authors: Optional case-insensitive allow-list applied at each header

    Returns:
        OwnershipResult with files, directories and authors populated
    """
    allowed = author_filter(authors)
    file_author_lines: dict[str, dict[str, int]] = {}
    file_last_dates: dict[str, datetime] = {}
    current_author = ""
    current_date: Optional[datetime] = None

    for raw_line in log.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(AUTHOR_PREFIX):
            current_author, current_date = _parse_header(line)
            if allowed is not None and current_author.lower() not in allowed:
                current_author = ""
            continue

        if "\t" not in line or not current_author:
            continue

        if line.count("\t") < 2:
            continue
        change = split_numstat(line)
        if not change.path:
            continue

        file_path = normalize_rename(change.path)
        if not file_path:
            continue

        per_author = file_author_lines.setdefault(file_path, {})
        per_author[current_author] = (
            per_author.get(current_author, 0) + change.insertions + change.deletions
        )

        if current_date is not None:
            latest = file_last_dates.get(file_path)
            if latest is None or current_date > latest:
                file_last_dates[file_path] = current_date

    files: dict[str, FileOwnership] = {}
    for file_path, author_lines in file_author_lines.items():
        owner, owner_lines = pick_owner(author_lines)
        if not owner:
            continue
        total_lines = sum(author_lines.values())
        files[file_path] = FileOwnership(
            file=file_path,
            owner=owner,
            share=percent_share(owner_lines, total_lines),
            owner_lines=owner_lines,
            total_lines=total_lines,
            authors=dict(author_lines),
            last_commit_date=file_last_dates.get(file_path),
        )

    result = OwnershipResult(
        files=files,
        directories=build_directory_ownership(files),
        authors=build_author_ownership(files.values()),
    )
    logger.debug(
        "Parsed ownership log: %d files, %d directories, %d owners",
        len(result.files),
        len(result.directories),
        len(result.authors),
    )
    return result
