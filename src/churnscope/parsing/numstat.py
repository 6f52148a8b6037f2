"""Helpers for `git log --numstat` lines: ``insertions<TAB>deletions<TAB>path``."""

import re
from typing import NamedTuple, Optional

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class NumstatLine(NamedTuple):
    insertions: int
    deletions: int
    path: Optional[str]


def parse_count(text: str) -> int:
    """Leading integer of ``text``, or 0.

    Binary files are reported as ``-`` and count as 0 changed lines.
    """
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def split_numstat(line: str) -> NumstatLine:
    """Split a tab-separated numstat line; missing fields become 0 / None."""
    parts = line.split("\t")
    insertions = parse_count(parts[0])
    deletions = parse_count(parts[1]) if len(parts) > 1 else 0
    path = parts[2] if len(parts) > 2 and parts[2] else None
    return NumstatLine(insertions, deletions, path)


def author_filter(authors) -> Optional[set]:
    """Lower-cased allow-list, or None when no filtering was requested.

    An empty list means no filtering.
    """
    if not authors:
        return None
    return {a.lower() for a in authors}
