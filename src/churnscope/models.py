"""Data models shared by the log parsers, metrics, filters and ownership rollups.

Every structure here is built during a single analysis call and is never
shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass
class AuthorStats:
    """Per-author totals for one aggregation scope (whole range or one period)."""

    commits: int = 0
    insertions: int = 0
    deletions: int = 0
    files_touched: int = 0

    @property
    def total_changes(self) -> int:
        return self.insertions + self.deletions


@dataclass
class PeriodAuthorStats:
    period: str  # daily / ISO-week / month label
    author: str
    stats: AuthorStats


@dataclass
class CommitRecord:
    """One commit from the commit-stream log."""

    author: str
    date: Optional[datetime]  # None when git printed an unparseable date
    insertions: int = 0
    deletions: int = 0
    files: list[str] = field(default_factory=list)

    @property
    def lines_changed(self) -> int:
        return self.insertions + self.deletions


class EfficiencyLabel(Enum):
    """Qualitative tag for an author's mean lines per commit."""

    MICRO = "Micro"
    SMALL = "Small"
    OPTIMAL = "Optimal"
    HIGH_LOAD = "High Load"
    HUGE = "Huge"


@dataclass
class CommitSizeDistribution:
    micro: int = 0
    small: int = 0
    optimal: int = 0
    high: int = 0
    huge: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "micro": self.micro,
            "small": self.small,
            "optimal": self.optimal,
            "high": self.high,
            "huge": self.huge,
        }


@dataclass
class EfficiencyStats:
    author: str
    efficiency: int  # rounded mean lines changed per commit
    label: EfficiencyLabel
    distribution: CommitSizeDistribution
    total_commits: int


@dataclass
class AggregateResult:
    stats: dict[str, AuthorStats] = field(default_factory=dict)
    efficiency: dict[str, EfficiencyStats] = field(default_factory=dict)


@dataclass
class FileOwnership:
    """Churn attribution for one file.

    ``owner`` has the strictly largest entry in ``authors``; on ties the
    author seen first in the log keeps ownership.
    """

    file: str
    owner: str
    share: int  # 0-100, owner_lines / total_lines
    owner_lines: int
    total_lines: int
    authors: dict[str, int]
    last_commit_date: Optional[datetime] = None


@dataclass
class DirectoryOwnership:
    """Ownership of one directory's direct files, counted by files not lines."""

    directory: str  # parent path with trailing slash, "./" for the root
    owner: str
    share: int  # 0-100, owner_files / total_files
    owner_files: int
    total_files: int
    total_lines: int


@dataclass
class OwnedFile:
    file: str
    lines: int
    share: int


@dataclass
class AuthorOwnership:
    """Files for which ``author`` is the primary owner, largest first."""

    author: str
    files: list[OwnedFile] = field(default_factory=list)
    total_files: int = 0
    total_lines: int = 0


@dataclass
class OwnershipResult:
    files: dict[str, FileOwnership] = field(default_factory=dict)
    directories: dict[str, DirectoryOwnership] = field(default_factory=dict)
    authors: dict[str, AuthorOwnership] = field(default_factory=dict)
