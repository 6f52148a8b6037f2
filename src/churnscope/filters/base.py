"""Filter protocol and chain for aggregate and periodic results."""

from __future__ import annotations

from typing import Protocol, Union

from ..models import AggregateResult, PeriodAuthorStats

StatsResult = Union[AggregateResult, list[PeriodAuthorStats]]


class ResultFilter(Protocol):
    def apply(self, result: StatsResult) -> StatsResult: ...


class FilterChain:
    """Apply filters in insertion order."""

    def __init__(self) -> None:
        self._filters: list[ResultFilter] = []

    def add_filter(self, result_filter: ResultFilter) -> "FilterChain":
        self._filters.append(result_filter)
        return self

    def apply(self, result: StatsResult) -> StatsResult:
        for result_filter in self._filters:
            result = result_filter.apply(result)
        return result

    def is_empty(self) -> bool:
        return not self._filters

    def __len__(self) -> int:
        return len(self._filters)
