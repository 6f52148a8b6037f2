"""Temporal helpers: period labels and commit time ranges."""

from .periods import daily_label, month_label, period_label, week_label
from .ranges import days_ago, format_date_for_git, parse_git_date, validate_time_range

__all__ = [
    "daily_label",
    "week_label",
    "month_label",
    "period_label",
    "days_ago",
    "format_date_for_git",
    "parse_git_date",
    "validate_time_range",
]
