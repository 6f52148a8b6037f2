"""Commit-size efficiency: mean lines per commit and a size histogram."""

from __future__ import annotations

from typing import Iterable

from ..config import DEFAULT_EFFICIENCY_THRESHOLDS, EfficiencyThresholds
from ..math import round_half_up
from ..models import CommitRecord, CommitSizeDistribution, EfficiencyLabel, EfficiencyStats


def get_efficiency_label(
    efficiency: float, thresholds: EfficiencyThresholds = DEFAULT_EFFICIENCY_THRESHOLDS
) -> EfficiencyLabel:
    """Tag an author's mean lines per commit.

    These comparisons differ from ``classify_commit_size`` on purpose:
    a mean of exactly ``micro`` is Small here but a commit of that size
    lands in the micro bucket.
    """
    if efficiency < thresholds.micro:
        return EfficiencyLabel.MICRO
    if thresholds.optimal_min <= efficiency <= thresholds.optimal_max:
        return EfficiencyLabel.OPTIMAL
    if efficiency > thresholds.huge:
        return EfficiencyLabel.HUGE
    if efficiency > thresholds.optimal_max:
        return EfficiencyLabel.HIGH_LOAD
    return EfficiencyLabel.SMALL


def classify_commit_size(
    lines_changed: int, thresholds: EfficiencyThresholds = DEFAULT_EFFICIENCY_THRESHOLDS
) -> str:
    """Histogram bucket name for one commit."""
    if lines_changed <= thresholds.micro:
        return "micro"
    if lines_changed < thresholds.optimal_min:
        return "small"
    if lines_changed <= thresholds.optimal_max:
        return "optimal"
    if lines_changed <= thresholds.huge:
        return "high"
    return "huge"


def analyze_author_efficiency(
    author: str,
    commits: Iterable[CommitRecord],
    thresholds: EfficiencyThresholds = DEFAULT_EFFICIENCY_THRESHOLDS,
) -> EfficiencyStats:
    """Efficiency stats for ``author`` over ``commits``.

    Author matching is exact and case-sensitive, unlike the parsers'
    allow-lists. An author with no commits gets efficiency 0.
    """
    distribution = CommitSizeDistribution()
    total_lines = 0
    count = 0

    for commit in commits:
        if commit.author != author:
            continue
        lines = commit.lines_changed
        total_lines += lines
        count += 1
        bucket = classify_commit_size(lines, thresholds)
        setattr(distribution, bucket, getattr(distribution, bucket) + 1)

    efficiency = round_half_up(total_lines / count) if count else 0
    return EfficiencyStats(
        author=author,
        efficiency=efficiency,
        label=get_efficiency_label(efficiency, thresholds),
        distribution=distribution,
        total_commits=count,
    )


def analyze_all_efficiency(
    commits: list[CommitRecord],
    thresholds: EfficiencyThresholds = DEFAULT_EFFICIENCY_THRESHOLDS,
) -> dict[str, EfficiencyStats]:
    """Efficiency stats for every author in ``commits``, first-seen order."""
    authors = dict.fromkeys(commit.author for commit in commits)
    return {
        author: analyze_author_efficiency(author, commits, thresholds) for author in authors
    }
