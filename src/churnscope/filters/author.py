"""Keep only allow-listed authors (case-insensitive)."""

from __future__ import annotations

from typing import Sequence

from ..models import AggregateResult
from .base import StatsResult


class AuthorFilter:
    def __init__(self, authors: Sequence[str]):
        self._allowed = {a.lower() for a in authors}

    def _keep(self, author: str) -> bool:
        return author.lower() in self._allowed

    def apply(self, result: StatsResult) -> StatsResult:
        if isinstance(result, list):
            return [row for row in result if self._keep(row.author)]

        stats = {a: s for a, s in result.stats.items() if self._keep(a)}
        efficiency = {a: e for a, e in result.efficiency.items() if a in stats}
        return AggregateResult(stats=stats, efficiency=efficiency)
