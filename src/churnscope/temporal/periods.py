"""Period labels used to bucket commits for trend analysis.

All functions read the datetime's own calendar fields. An aware datetime is
labelled in its own UTC offset, not converted to UTC first, so a commit made
at 23:30 +0900 on the 31st stays on the 31st. Callers that need one shared
timezone must convert before labelling.
"""

from datetime import date

from ..constants import PeriodUnit


def daily_label(d: date) -> str:
    """``YYYY-MM-DD``."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def week_label(d: date) -> str:
    """ISO-8601 week label ``YYYY-Wnn``.

    The week that holds the date's Thursday decides both the year and the
    week number, so 2025-12-31 is ``2026-W01`` and 2021-01-01 is ``2020-W53``.
    """
    iso_year, iso_week, _ = d.isocalendar()[:3]
    return f"{iso_year:04d}-W{iso_week:02d}"


def month_label(d: date) -> str:
    """``YYYY-MM``."""
    return f"{d.year:04d}-{d.month:02d}"


_LABELLERS = {
    PeriodUnit.DAILY: daily_label,
    PeriodUnit.WEEKLY: week_label,
    PeriodUnit.MONTHLY: month_label,
}


def period_label(d: date, unit: PeriodUnit) -> str:
    """Label ``d`` for the given period unit."""
    return _LABELLERS[unit](d)
