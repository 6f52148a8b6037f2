"""churnscope - contribution analytics from git history.

Parses ``git log`` output into per-author totals, time-bucketed trends,
commit-size efficiency profiles and file/directory ownership maps.

Example:
    >>> from churnscope import AnalyzerOptions, analyze_contributions
    >>> result = analyze_contributions(AnalyzerOptions(days=90))
    >>> sorted(result.stats)
    ['Jane Doe', 'John Smith']
"""

__version__ = "0.1.0"

from .analysis import AnalyzerOptions, analyze_contributions
from .config import AnalysisConfig, load_config
from .constants import AnalysisMode, PeriodUnit
from .exceptions import ChurnscopeError
from .git import GitLogSource, LogQuery, LogSource
from .models import (
    AggregateResult,
    AuthorStats,
    FileOwnership,
    OwnershipResult,
    PeriodAuthorStats,
)

__all__ = [
    "__version__",
    "AnalyzerOptions",
    "analyze_contributions",
    "AnalysisConfig",
    "load_config",
    "AnalysisMode",
    "PeriodUnit",
    "ChurnscopeError",
    "GitLogSource",
    "LogQuery",
    "LogSource",
    "AggregateResult",
    "AuthorStats",
    "FileOwnership",
    "OwnershipResult",
    "PeriodAuthorStats",
]
