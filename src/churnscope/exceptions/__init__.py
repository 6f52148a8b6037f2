"""Exception hierarchy for churnscope."""

from .analysis import (
    EMPTY_HISTORY_MARKER,
    AnalysisError,
    GitCommandError,
    NotARepositoryError,
    UnknownModeError,
)
from .base import ChurnscopeError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidTimeRangeError,
)

__all__ = [
    "ChurnscopeError",
    "AnalysisError",
    "GitCommandError",
    "NotARepositoryError",
    "UnknownModeError",
    "EMPTY_HISTORY_MARKER",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidTimeRangeError",
]
