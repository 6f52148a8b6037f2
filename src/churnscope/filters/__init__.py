"""Post-parse filters for aggregate, periodic and ownership results."""

from .author import AuthorFilter
from .base import FilterChain, ResultFilter, StatsResult
from .file_patterns import (
    DEFAULT_EXCLUDE_PATTERNS,
    FilePatternFilter,
    IgnoreOracle,
    glob_to_regex,
    is_in_directory,
)
from .file_types import FileType, classify_file_type, group_files_by_type
from .min_commits import MinCommitsFilter

__all__ = [
    "AuthorFilter",
    "FilterChain",
    "ResultFilter",
    "StatsResult",
    "MinCommitsFilter",
    "DEFAULT_EXCLUDE_PATTERNS",
    "FilePatternFilter",
    "IgnoreOracle",
    "glob_to_regex",
    "is_in_directory",
    "FileType",
    "classify_file_type",
    "group_files_by_type",
]
