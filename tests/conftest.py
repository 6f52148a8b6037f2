"""Shared fixtures: sample git log text and an in-memory log source."""

import os
from typing import Optional

import pytest

from churnscope.exceptions import GitCommandError
from churnscope.git import LogQuery


AGGREGATE_LOG = (
    "Alice\n"
    "10\t2\tsrc/app.py\n"
    "5\t0\tsrc/util.py\n"
    "\n"
    "Bob\n"
    "-\t-\tassets/logo.png\n"
    "\n"
    "Alice\n"
    "3\t1\tsrc/app.py\n"
    "\n"
    "Carol\n"
)

PERIOD_LOG = (
    "Dana|2025-12-16 09:00:00 +0000\n"
    "10\t6\tsrc/a.py\n"
    "\n"
    "Erin|2025-12-15 18:00:00 +0000\n"
    "80\t20\tsrc/b.py\n"
    "\n"
    "Dana|2025-12-15 11:00:00 +0000\n"
    "50\t3\tsrc/a.py\n"
)

COMMIT_STREAM_LOG = (
    "Alice|2025-01-01 10:00:00 +0000\n"
    "4\t1\tsrc/app.py\n"
    "\n"
    "Bob|2025-01-02 10:00:00 +0000\n"
    "100\t50\tsrc/big.py\n"
    "\n"
    "Alice|2025-01-03 10:00:00 +0000\n"
    "\n"
    "alice|2025-01-04 10:00:00 +0000\n"
    "7\t0\tREADME.md\n"
)

OWNERSHIP_LOG = (
    "AUTHOR:Alice|DATE:2025-01-10 10:00:00 +0000\n"
    "30\t10\tsrc/app.py\n"
    "5\t0\tsrc/util.py\n"
    "\n"
    "AUTHOR:Bob|DATE:2025-02-01 12:00:00 +0000\n"
    "10\t0\tsrc/util.py\n"
    "20\t0\tREADME.md\n"
    "1\t0\tyarn.lock\n"
)


class FakeLogSource:
    """LogSource returning canned text and recording the queries it saw."""

    def __init__(
        self,
        aggregate: str = "",
        periodic: str = "",
        commit_stream: str = "",
        ownership: str = "",
        is_repo: bool = True,
        error: Optional[GitCommandError] = None,
        ignored: Optional[set] = None,
    ):
        self.logs = {
            "aggregate": aggregate,
            "periodic": periodic,
            "commit_stream": commit_stream,
            "ownership": ownership,
        }
        self.is_repo = is_repo
        self.error = error
        self.ignored = ignored
        self.queries: list = []
        self.ignore_calls: list = []

    def is_repository(self) -> bool:
        return self.is_repo

    def _get(self, kind: str, query: LogQuery) -> str:
        self.queries.append((kind, query))
        if self.error is not None:
            raise self.error
        return self.logs[kind]

    def get_aggregate_log(self, query: LogQuery) -> str:
        return self._get("aggregate", query)

    def get_periodic_log(self, query: LogQuery) -> str:
        return self._get("periodic", query)

    def get_commit_stream_log(self, query: LogQuery) -> str:
        return self._get("commit_stream", query)

    def get_ownership_log(self, query: LogQuery) -> str:
        return self._get("ownership", query)

    def check_ignore(self, paths):
        self.ignore_calls.append(list(paths))
        if self.ignored is None:
            return set()
        return {p for p in paths if p in self.ignored}


@pytest.fixture
def aggregate_log():
    return AGGREGATE_LOG


@pytest.fixture
def period_log():
    """Dana: 12-16 impact 16, 12-15 impact 53. Erin: 12-15 impact 100."""
    return PERIOD_LOG


@pytest.fixture
def commit_stream_log():
    return COMMIT_STREAM_LOG


@pytest.fixture
def ownership_log():
    return OWNERSHIP_LOG


@pytest.fixture
def make_source():
    """Factory for FakeLogSource with custom logs or failures."""
    return FakeLogSource


@pytest.fixture
def fake_source():
    """Log source preloaded with every sample log."""
    return FakeLogSource(
        aggregate=AGGREGATE_LOG,
        periodic=PERIOD_LOG,
        commit_stream=COMMIT_STREAM_LOG,
        ownership=OWNERSHIP_LOG,
    )


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no global/project config files and no CHURNSCOPE_* variables."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("CHURNSCOPE_"):
            monkeypatch.delenv(key)
    return work
