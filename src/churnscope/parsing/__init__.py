"""Log parsers: raw `git log` text in, structured statistics out.

Parsers never raise on malformed text. Unparseable counts become 0 and lines
that match no expected shape are skipped.
"""

from .aggregate import parse_aggregate_stats
from .commit_stream import parse_commit_stream
from .ownership import normalize_rename, parse_ownership_stats
from .period import parse_period_stats

__all__ = [
    "parse_aggregate_stats",
    "parse_period_stats",
    "parse_commit_stream",
    "parse_ownership_stats",
    "normalize_rename",
]
