"""Entry point for contribution analysis."""

from __future__ import annotations

from typing import Optional

from ..config import AnalysisConfig
from ..constants import VALID_MODES, AnalysisMode
from ..exceptions import NotARepositoryError, UnknownModeError
from ..filters import FilePatternFilter, FilterChain, MinCommitsFilter
from ..git import GitLogSource, LogSource
from ..logging_config import get_logger
from .modes import AnalysisResult, build_modes
from .options import AnalyzerOptions, resolve_options

logger = get_logger(__name__)


def analyze_contributions(
    options: Optional[AnalyzerOptions] = None,
    source: Optional[LogSource] = None,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Analyze contribution statistics for a repository.

    Args:
        options: What to analyze; unset fields fall back to ``config``
        source: Where logs come from (default: git in the current directory)
        config: Defaults, thresholds and exclude patterns

    Returns:
        AggregateResult, a list of PeriodAuthorStats, or OwnershipResult,
        depending on the mode.

    Raises:
        NotARepositoryError: If the source is not a git repository
        UnknownModeError: If the mode is not recognized
        InvalidTimeRangeError: If the time range is unusable
        GitCommandError: If git fails for a reason other than an empty history
    """
    config = config or AnalysisConfig()
    source = source or GitLogSource(timeout_seconds=config.git_timeout_seconds)

    if not source.is_repository():
        raise NotARepositoryError(getattr(source, "repo_path", None))

    resolved = resolve_options(options or AnalyzerOptions(), config)
    mode = build_modes(config).get(resolved.mode)
    if mode is None:
        raise UnknownModeError(str(resolved.mode), VALID_MODES)

    logger.debug("Running %s analysis", resolved.mode.value)
    result = mode.handle(resolved, source)

    if resolved.mode is AnalysisMode.OWNERSHIP:
        # git already scoped the log to options.directory
        oracle = getattr(source, "check_ignore", None) if resolved.respect_gitignore else None
        pattern_filter = FilePatternFilter(
            exclude_patterns=[*config.exclude_patterns, *resolved.exclude_patterns],
            ignore_oracle=oracle,
        )
        return pattern_filter.filter(result)

    chain = FilterChain()
    if resolved.min_commits is not None and resolved.min_commits > 1:
        chain.add_filter(MinCommitsFilter(resolved.min_commits))
    if chain.is_empty():
        return result
    return chain.apply(result)
