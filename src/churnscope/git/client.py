"""Fetch log text from a local repository via the git CLI."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import GitCommandError
from ..logging_config import get_logger
from .source import LogQuery

logger = get_logger(__name__)

AGGREGATE_FORMAT = "--pretty=format:%aN"
PERIODIC_FORMAT = "--pretty=format:%aN|%cd"
OWNERSHIP_FORMAT = "--pretty=format:AUTHOR:%aN|DATE:%cd"


class GitLogSource:
    """LogSource backed by ``git log`` subprocesses."""

    def __init__(self, repo_path: str = ".", timeout_seconds: int = 60):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout_seconds = timeout_seconds

    def is_repository(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-parse", "--is-inside-work-tree"],
                capture_output=True,
                text=True,
                timeout=5,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def get_aggregate_log(self, query: LogQuery) -> str:
        return self._log(["--numstat", AGGREGATE_FORMAT], query)

    def get_periodic_log(self, query: LogQuery) -> str:
        return self._log(["--numstat", PERIODIC_FORMAT, "--date=iso"], query)

    def get_commit_stream_log(self, query: LogQuery) -> str:
        return self._log(["--numstat", PERIODIC_FORMAT, "--date=iso", "--reverse"], query)

    def get_ownership_log(self, query: LogQuery) -> str:
        return self._log(
            ["--numstat", OWNERSHIP_FORMAT, "--date=iso"], query, pathspec=query.directory
        )

    def check_ignore(self, paths: Sequence[str]) -> set[str]:
        """Subset of ``paths`` matched by the repository's ignore rules.

        Paths are sent in one batch on stdin.
        """
        if not paths:
            return set()
        args = ["check-ignore", "--stdin"]
        result = self._run(args, stdin="\n".join(paths) + "\n", check=False)
        # 0: some paths ignored, 1: none ignored, anything else is an error
        if result.returncode not in (0, 1):
            raise GitCommandError(args, result.stderr, result.returncode)
        return {line for line in result.stdout.splitlines() if line}

    def _log(
        self, format_args: list[str], query: LogQuery, pathspec: Optional[str] = None
    ) -> str:
        args = ["log", *format_args]
        if query.branch:
            args.append(query.branch)
        if query.since:
            args.append(f"--since={query.since}")
        if query.until:
            args.append(f"--until={query.until}")
        if pathspec:
            args.extend(["--", pathspec])
        return self._run(args).stdout

    def _run(
        self, args: list[str], stdin: Optional[str] = None, check: bool = True
    ) -> subprocess.CompletedProcess:
        cmd = ["git", "-C", self.repo_path, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                input=stdin,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise GitCommandError(args, f"git executable not found: {e}")
        except subprocess.TimeoutExpired:
            raise GitCommandError(args, f"git timed out after {self.timeout_seconds}s")

        if check and result.returncode != 0:
            raise GitCommandError(args, result.stderr, result.returncode)
        return result
