"""Analysis modes, period units and their defaults."""

from enum import Enum


class AnalysisMode(Enum):
    """The three result shapes the analyzer can produce."""

    AGGREGATE = "aggregate"
    PERIODIC = "periodic"
    OWNERSHIP = "ownership"


class PeriodUnit(Enum):
    """Bucket size for periodic analysis."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


VALID_MODES = [m.value for m in AnalysisMode]
VALID_PERIOD_UNITS = [p.value for p in PeriodUnit]

DEFAULT_MODE = AnalysisMode.AGGREGATE
DEFAULT_PERIOD_UNIT = PeriodUnit.DAILY
DEFAULT_DAYS = 30
