"""Drop authors (aggregate) or rows (periodic) below a commit threshold."""

from __future__ import annotations

from ..models import AggregateResult
from .base import StatsResult


class MinCommitsFilter:
    def __init__(self, min_commits: int):
        self.min_commits = min_commits

    def apply(self, result: StatsResult) -> StatsResult:
        if isinstance(result, list):
            return [row for row in result if row.stats.commits >= self.min_commits]

        stats = {a: s for a, s in result.stats.items() if s.commits >= self.min_commits}
        efficiency = {a: e for a, e in result.efficiency.items() if a in stats}
        return AggregateResult(stats=stats, efficiency=efficiency)
