"""Time-range helpers: git date formatting, parsing and validation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..exceptions import InvalidTimeRangeError

# Formats emitted by `git log --date=iso` and `--date=iso-strict`
_GIT_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)


def days_ago(days: int, now: Optional[datetime] = None) -> datetime:
    """The datetime ``days`` days before ``now`` (default: current local time)."""
    return (now or datetime.now()) - timedelta(days=days)


def format_date_for_git(d: datetime) -> str:
    """Format a date for ``--since``/``--until`` as ``YYYY-MM-DD``."""
    return d.strftime("%Y-%m-%d")


def parse_git_date(text: str) -> Optional[datetime]:
    """Parse a commit date printed by git.

    Returns None when the text is not a recognizable date; log parsers treat
    that as "no date" rather than an error.
    """
    text = text.strip()
    if not text:
        return None
    for fmt in _GIT_DATE_FORMATS:
        try:
            return _as_aware(datetime.strptime(text, fmt))
        except ValueError:
            continue
    try:
        return _as_aware(datetime.fromisoformat(text))
    except ValueError:
        return None


def _as_aware(d: datetime) -> datetime:
    # Offset-less git dates keep their wall-clock fields under UTC
    return d.replace(tzinfo=timezone.utc) if d.tzinfo is None else d


def _as_local(d: datetime) -> datetime:
    return d.astimezone() if d.tzinfo is None else d


def validate_time_range(
    since: Optional[datetime] = None,
    until: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> None:
    """Reject windows that cannot contain commits.

    Naive bounds are read as local time, so CLI dates and offset-carrying
    git dates compare safely.

    Raises:
        InvalidTimeRangeError: If since > until, or either bound is in the future
    """
    since = _as_local(since) if since is not None else None
    until = _as_local(until) if until is not None else None
    now = _as_local(now) if now is not None else datetime.now().astimezone()

    if since is not None and until is not None and since > until:
        raise InvalidTimeRangeError("--since date must be before --until date")

    if since is not None and since > now:
        raise InvalidTimeRangeError("--since date cannot be in the future")

    if until is not None and until > now:
        raise InvalidTimeRangeError("--until date cannot be in the future")
