"""Metrics computed from parsed commit streams."""

from .efficiency import (
    analyze_all_efficiency,
    analyze_author_efficiency,
    classify_commit_size,
    get_efficiency_label,
)

__all__ = [
    "analyze_all_efficiency",
    "analyze_author_efficiency",
    "classify_commit_size",
    "get_efficiency_label",
]
