"""Label each contributor by the shape of their changes.

Rules are evaluated in order and the first match wins:

    1. Scout       total changes < min_changes
    2. Refactorer  deletions / changes >= refactorer_deletion_ratio
    3. Explorer    insertions / changes > explorer_insertion_ratio
    4. Generalist  files touched > average files touched * multiplier
    5. Artisan     everything else
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ..config import DEFAULT_CLASSIFIER_THRESHOLDS, ClassifierThresholds
from ..models import AuthorStats


class ContributorType(Enum):
    SCOUT = "Scout"
    GENERALIST = "Generalist"
    REFACTORER = "Refactorer"
    EXPLORER = "Explorer"
    ARTISAN = "Artisan"


@dataclass(frozen=True)
class ContributorTypeInfo:
    type: ContributorType
    emoji: str
    label: str


_TYPE_INFO = {
    ContributorType.SCOUT: ContributorTypeInfo(ContributorType.SCOUT, "✨", "✨ Scout"),
    ContributorType.GENERALIST: ContributorTypeInfo(
        ContributorType.GENERALIST, "\U0001f464", "\U0001f464 Generalist"
    ),
    ContributorType.REFACTORER: ContributorTypeInfo(
        ContributorType.REFACTORER, "\U0001f6e0", "\U0001f6e0 Refactorer"
    ),
    ContributorType.EXPLORER: ContributorTypeInfo(
        ContributorType.EXPLORER, "\U0001f680", "\U0001f680 Explorer"
    ),
    ContributorType.ARTISAN: ContributorTypeInfo(
        ContributorType.ARTISAN, "\U0001f48e", "\U0001f48e Artisan"
    ),
}


def classify_contributor(
    stats: AuthorStats,
    avg_files_touched: float,
    thresholds: ClassifierThresholds = DEFAULT_CLASSIFIER_THRESHOLDS,
) -> ContributorType:
    total_changes = stats.total_changes

    if total_changes < thresholds.min_changes:
        return ContributorType.SCOUT

    # min_changes >= 1, so total_changes is never 0 past this point
    insertion_ratio = stats.insertions / total_changes
    deletion_ratio = stats.deletions / total_changes

    if deletion_ratio >= thresholds.refactorer_deletion_ratio:
        return ContributorType.REFACTORER

    if insertion_ratio > thresholds.explorer_insertion_ratio:
        return ContributorType.EXPLORER

    if stats.files_touched > avg_files_touched * thresholds.generalist_files_multiplier:
        return ContributorType.GENERALIST

    return ContributorType.ARTISAN


def calculate_average_files_touched(stats_map: Mapping[str, AuthorStats]) -> float:
    """Mean ``files_touched`` across authors; 0 for an empty map."""
    if not stats_map:
        return 0.0
    return sum(s.files_touched for s in stats_map.values()) / len(stats_map)


def classify_all_contributors(
    stats_map: Mapping[str, AuthorStats],
    thresholds: ClassifierThresholds = DEFAULT_CLASSIFIER_THRESHOLDS,
) -> dict[str, ContributorType]:
    avg_files = calculate_average_files_touched(stats_map)
    return {
        author: classify_contributor(stats, avg_files, thresholds)
        for author, stats in stats_map.items()
    }


def get_contributor_type_info(contributor_type: ContributorType) -> ContributorTypeInfo:
    return _TYPE_INFO[contributor_type]
