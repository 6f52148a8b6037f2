"""Analysis modes: fetch the right log, parse it, compute metrics.

Each mode exposes ``handle(options, source)``. A source that reports an
empty history ("does not have any commits") yields an empty result of the
mode's shape instead of an error.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Protocol, Union

from ..config import (
    DEFAULT_EFFICIENCY_THRESHOLDS,
    AnalysisConfig,
    EfficiencyThresholds,
)
from ..constants import AnalysisMode, PeriodUnit
from ..exceptions import GitCommandError
from ..git import LogSource
from ..logging_config import get_logger
from ..metrics import analyze_all_efficiency
from ..models import AggregateResult, OwnershipResult, PeriodAuthorStats
from ..parsing import (
    parse_aggregate_stats,
    parse_commit_stream,
    parse_ownership_stats,
    parse_period_stats,
)
from ..parsing.numstat import author_filter
from .options import AnalyzerOptions, build_log_query

logger = get_logger(__name__)

AnalysisResult = Union[AggregateResult, list[PeriodAuthorStats], OwnershipResult]


class Mode(Protocol):
    def handle(self, options: AnalyzerOptions, source: LogSource) -> AnalysisResult: ...


class AggregateMode:
    """Per-author totals plus commit-size efficiency."""

    def __init__(self, thresholds: EfficiencyThresholds = DEFAULT_EFFICIENCY_THRESHOLDS):
        self.thresholds = thresholds

    def handle(self, options: AnalyzerOptions, source: LogSource) -> AggregateResult:
        query = build_log_query(options)

        try:
            with ThreadPoolExecutor(max_workers=2) as executor:
                aggregate_future = executor.submit(source.get_aggregate_log, query)
                stream_future = executor.submit(source.get_commit_stream_log, query)
                aggregate_log = aggregate_future.result()
                stream_log = stream_future.result()
        except GitCommandError as e:
            if e.is_empty_history:
                logger.debug("Empty history, returning empty aggregate result")
                return AggregateResult()
            raise

        stats = parse_aggregate_stats(aggregate_log, options.authors)

        commits = parse_commit_stream(stream_log)
        allowed = author_filter(options.authors)
        if allowed is not None:
            commits = [c for c in commits if c.author.lower() in allowed]

        return AggregateResult(
            stats=stats,
            efficiency=analyze_all_efficiency(commits, self.thresholds),
        )


class PeriodicMode:
    """Per-author totals bucketed by day, ISO week or month."""

    def handle(
        self, options: AnalyzerOptions, source: LogSource
    ) -> list[PeriodAuthorStats]:
        query = build_log_query(options)
        try:
            log = source.get_periodic_log(query)
        except GitCommandError as e:
            if e.is_empty_history:
                logger.debug("Empty history, returning no periods")
                return []
            raise

        period_unit = options.period_unit
        if not isinstance(period_unit, PeriodUnit):
            period_unit = PeriodUnit(period_unit or PeriodUnit.DAILY.value)
        return parse_period_stats(log, period_unit, options.authors)


class OwnershipMode:
    """File, directory and author ownership by churn."""

    def handle(self, options: AnalyzerOptions, source: LogSource) -> OwnershipResult:
        query = build_log_query(options)
        try:
            log = source.get_ownership_log(query)
        except GitCommandError as e:
            if e.is_empty_history:
                logger.debug("Empty history, returning empty ownership result")
                return OwnershipResult()
            raise
        return parse_ownership_stats(log, options.authors)


def build_modes(config: AnalysisConfig) -> dict[AnalysisMode, Mode]:
    """Mode table for one analysis call."""
    return {
        AnalysisMode.AGGREGATE: AggregateMode(config.efficiency),
        AnalysisMode.PERIODIC: PeriodicMode(),
        AnalysisMode.OWNERSHIP: OwnershipMode(),
    }
