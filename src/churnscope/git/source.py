"""The log-source boundary: what the analyzer asks for, and who answers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class LogQuery:
    """Window and scope of a log request.

    ``since``/``until`` are passed to git verbatim, so both ``2025-01-31``
    and ``30 days ago`` are accepted.
    """

    since: Optional[str] = None
    until: Optional[str] = None
    branch: Optional[str] = None
    directory: Optional[str] = None


class LogSource(Protocol):
    """Supplies the four log formats the parsers understand.

    Implementations raise ``GitCommandError`` on failure; an error whose
    ``is_empty_history`` is true is turned into an empty result.
    """

    def is_repository(self) -> bool: ...

    def get_aggregate_log(self, query: LogQuery) -> str: ...

    def get_periodic_log(self, query: LogQuery) -> str: ...

    def get_commit_stream_log(self, query: LogQuery) -> str: ...

    def get_ownership_log(self, query: LogQuery) -> str: ...
