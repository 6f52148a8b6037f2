"""Analyzer options, their defaults, and the git log query they produce."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Union

from ..config import AnalysisConfig
from ..constants import VALID_MODES, VALID_PERIOD_UNITS, AnalysisMode, PeriodUnit
from ..exceptions import InvalidConfigError, UnknownModeError
from ..git import LogQuery
from ..temporal import format_date_for_git, validate_time_range


@dataclass
class AnalyzerOptions:
    """What to analyze and how.

    Attributes:
        since: Start of the window; takes precedence over ``days``
        until: End of the window (default: now)
        days: Look back this many days when ``since`` is not set
        mode: aggregate, periodic or ownership
        period_unit: daily, weekly or monthly (periodic mode only)
        authors: Case-insensitive allow-list; empty or None means everyone
        branch: Branch or revision to read instead of HEAD
        min_commits: Drop authors/rows with fewer commits
        exclude_patterns: Extra globs excluded in ownership mode
        respect_gitignore: Drop ownership entries matched by ignore rules
        directory: Restrict ownership analysis to this subtree
    """

    since: Optional[datetime] = None
    until: Optional[datetime] = None
    days: Optional[int] = None
    mode: Union[AnalysisMode, str, None] = None
    period_unit: Union[PeriodUnit, str, None] = None
    authors: Optional[list[str]] = None
    branch: Optional[str] = None
    min_commits: Optional[int] = None
    exclude_patterns: list[str] = field(default_factory=list)
    respect_gitignore: Optional[bool] = None
    directory: Optional[str] = None


def _to_mode(value: Union[AnalysisMode, str]) -> AnalysisMode:
    if isinstance(value, AnalysisMode):
        return value
    try:
        return AnalysisMode(value)
    except ValueError:
        raise UnknownModeError(str(value), VALID_MODES)


def _to_period_unit(value: Union[PeriodUnit, str]) -> PeriodUnit:
    if isinstance(value, PeriodUnit):
        return value
    try:
        return PeriodUnit(value)
    except ValueError:
        raise InvalidConfigError(
            "period_unit", value, f"must be one of: {', '.join(VALID_PERIOD_UNITS)}"
        )


def resolve_options(
    options: AnalyzerOptions, config: Optional[AnalysisConfig] = None
) -> AnalyzerOptions:
    """Fill unset options from ``config`` and coerce mode/unit to enums.

    Raises:
        UnknownModeError: If ``mode`` names no known analysis mode
        InvalidConfigError: If ``period_unit`` is not a known unit
    """
    config = config or AnalysisConfig()

    days = options.days
    if options.since is None and days is None:
        days = config.default_days

    respect_gitignore = options.respect_gitignore
    if respect_gitignore is None:
        respect_gitignore = config.respect_gitignore

    return replace(
        options,
        days=days,
        mode=_to_mode(options.mode if options.mode is not None else config.default_mode),
        period_unit=_to_period_unit(
            options.period_unit
            if options.period_unit is not None
            else config.default_period_unit
        ),
        respect_gitignore=respect_gitignore,
    )


def build_log_query(options: AnalyzerOptions) -> LogQuery:
    """Translate resolved options into a LogQuery.

    The time range is validated here, before any log is fetched. A relative
    ``days`` window is passed to git as ``"N days ago"``.

    Raises:
        InvalidTimeRangeError: If since > until or either lies in the future
    """
    if options.since is not None or options.until is not None:
        validate_time_range(options.since, options.until)

    since: Optional[str] = None
    if options.since is not None:
        since = format_date_for_git(options.since)
    elif options.days:
        since = f"{options.days} days ago"

    until = format_date_for_git(options.until) if options.until is not None else None

    return LogQuery(
        since=since,
        until=until,
        branch=options.branch,
        directory=options.directory,
    )
