"""Contributor classification built on aggregated author stats."""

from .contributor import (
    ContributorType,
    ContributorTypeInfo,
    calculate_average_files_touched,
    classify_all_contributors,
    classify_contributor,
    get_contributor_type_info,
)

__all__ = [
    "ContributorType",
    "ContributorTypeInfo",
    "calculate_average_files_touched",
    "classify_all_contributors",
    "classify_contributor",
    "get_contributor_type_info",
]
