"""Exclude generated, vendored and ignored files from ownership results.

After files are removed, directory and author ownership are rebuilt from
the survivors rather than patched.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Optional, Sequence

from ..logging_config import get_logger
from ..models import OwnershipResult
from ..ownership.rollup import build_author_ownership, build_directory_ownership

logger = get_logger(__name__)

# Batch oracle: given candidate paths, return the subset that is ignored
IgnoreOracle = Callable[[list[str]], Iterable[str]]

DEFAULT_EXCLUDE_PATTERNS = [
    # Lock files
    "**/*.lock",
    "**/package-lock.json",
    "**/yarn.lock",
    "**/pnpm-lock.yaml",
    "**/uv.lock",
    "**/Cargo.lock",
    "**/Gemfile.lock",
    "**/Pipfile.lock",
    "**/poetry.lock",
    "**/composer.lock",
    "**/go.sum",
    "**/go.mod",
    # Build outputs
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/out/**",
    "**/.next/**",
    "**/.nuxt/**",
    "**/.cache/**",
    "**/coverage/**",
    "**/.coverage/**",
    # Generated files
    "**/openapi.json",
    "**/openapi.yaml",
    "**/openapi.yml",
    "**/*.generated.*",
    "**/*.pb.go",
    "**/*.pb.ts",
    "**/*.pb.js",
    # Editor and OS files
    "**/.idea/**",
    "**/.vscode/**",
    "**/.DS_Store",
    "**/Thumbs.db",
    # Logs and temporary files
    "**/*.log",
    "**/*.tmp",
    "**/*.temp",
]


def _strip_dot_slash(path: str) -> str:
    return path[2:] if path.startswith("./") else path


def glob_to_regex(pattern: str) -> re.Pattern:
    """Compile a glob into an anchored regex over ``/``-separated paths.

    ``**/`` matches zero or more directories, ``**`` anything, ``*`` and
    ``?`` stay within one segment. A leading ``/`` anchors to the
    repository root; otherwise the pattern may start at any segment.
    """
    pattern = _strip_dot_slash(pattern)
    anchored = pattern.startswith("/")
    pattern = pattern.lstrip("/")

    out = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1

    body = "".join(out)
    if not anchored and not pattern.startswith("**"):
        body = "(?:.*/)?" + body
    return re.compile(f"^{body}$")


def is_in_directory(file_path: str, directory: str) -> bool:
    """True when ``file_path`` is ``directory`` or lies beneath it."""
    directory = _strip_dot_slash(directory).rstrip("/")
    file_path = _strip_dot_slash(file_path)
    return file_path == directory or file_path.startswith(f"{directory}/")


class FilePatternFilter:
    """Remove files by glob, directory scope and an optional ignore oracle.

    Args:
        exclude_patterns: Extra globs, unioned with DEFAULT_EXCLUDE_PATTERNS
        ignore_oracle: Called once with every path that survived pattern
            matching; paths it returns are dropped. Errors from the oracle
            are logged and treated as "nothing ignored".
        include_directory: Keep only files inside this directory
    """

    def __init__(
        self,
        exclude_patterns: Sequence[str] = (),
        ignore_oracle: Optional[IgnoreOracle] = None,
        include_directory: Optional[str] = None,
    ):
        self.exclude_patterns = [*DEFAULT_EXCLUDE_PATTERNS, *exclude_patterns]
        self._compiled = [glob_to_regex(p) for p in self.exclude_patterns]
        self.ignore_oracle = ignore_oracle
        self.include_directory = include_directory

    def matches_exclude(self, file_path: str) -> bool:
        path = _strip_dot_slash(file_path)
        return any(regex.match(path) for regex in self._compiled)

    def should_exclude(self, file_path: str) -> bool:
        """Pattern and directory check, without consulting the oracle."""
        if self.include_directory and not is_in_directory(file_path, self.include_directory):
            return True
        return self.matches_exclude(file_path)

    def _ignored(self, paths: list[str]) -> set[str]:
        if self.ignore_oracle is None or not paths:
            return set()
        try:
            return set(self.ignore_oracle(paths))
        except Exception as e:
            logger.warning("Ignore check failed, keeping all files: %s", e)
            return set()

    def filter(self, result: OwnershipResult) -> OwnershipResult:
        candidates = [path for path in result.files if not self.should_exclude(path)]
        ignored = self._ignored(candidates)
        files = {path: result.files[path] for path in candidates if path not in ignored}

        directories = build_directory_ownership(files)
        if self.include_directory:
            directories = {
                d: ownership
                for d, ownership in directories.items()
                if is_in_directory(d.rstrip("/"), self.include_directory)
            }

        logger.debug(
            "Pattern filter kept %d of %d files (%d ignored)",
            len(files),
            len(result.files),
            len(ignored),
        )
        return OwnershipResult(
            files=files,
            directories=directories,
            authors=build_author_ownership(files.values()),
        )
