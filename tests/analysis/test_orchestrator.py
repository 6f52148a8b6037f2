"""Tests for analysis/orchestrator.py and analysis/modes.py."""

from datetime import datetime

import pytest

from churnscope.analysis import AnalyzerOptions, analyze_contributions
from churnscope.config import AnalysisConfig
from churnscope.constants import AnalysisMode, PeriodUnit
from churnscope.exceptions import (
    GitCommandError,
    InvalidTimeRangeError,
    NotARepositoryError,
    UnknownModeError,
)
from churnscope.models import AggregateResult, OwnershipResult

EMPTY_HISTORY = GitCommandError(
    ["log"], "fatal: your current branch 'main' does not have any commits yet", 128
)


class TestRepositoryChecks:
    def test_not_a_repository(self, make_source):
        with pytest.raises(NotARepositoryError):
            analyze_contributions(AnalyzerOptions(), make_source(is_repo=False))

    def test_unknown_mode_fetches_nothing(self, fake_source):
        with pytest.raises(UnknownModeError):
            analyze_contributions(AnalyzerOptions(mode="sideways"), fake_source)
        assert fake_source.queries == []

    def test_invalid_range_fetches_nothing(self, fake_source):
        options = AnalyzerOptions(since=datetime(2025, 3, 1), until=datetime(2025, 1, 1))
        with pytest.raises(InvalidTimeRangeError):
            analyze_contributions(options, fake_source)
        assert fake_source.queries == []

    def test_other_git_errors_propagate(self, make_source):
        source = make_source(error=GitCommandError(["log"], "fatal: bad revision 'nope'", 128))
        with pytest.raises(GitCommandError):
            analyze_contributions(AnalyzerOptions(branch="nope"), source)


class TestAggregateMode:
    def test_fetches_both_logs(self, fake_source):
        result = analyze_contributions(AnalyzerOptions(days=10), fake_source)
        assert isinstance(result, AggregateResult)
        assert sorted(kind for kind, _ in fake_source.queries) == ["aggregate", "commit_stream"]
        assert all(q.since == "10 days ago" for _, q in fake_source.queries)

    def test_stats_and_efficiency(self, fake_source):
        result = analyze_contributions(AnalyzerOptions(), fake_source)
        assert list(result.stats) == ["Alice", "Bob", "Carol"]
        assert list(result.efficiency) == ["Alice", "Bob", "alice"]

    def test_author_filter_applies_to_efficiency_case_insensitively(self, fake_source):
        result = analyze_contributions(AnalyzerOptions(authors=["ALICE"]), fake_source)
        assert list(result.stats) == ["Alice"]
        # efficiency keeps exact-name buckets
        assert list(result.efficiency) == ["Alice", "alice"]

    def test_min_commits(self, fake_source):
        result = analyze_contributions(AnalyzerOptions(min_commits=2), fake_source)
        assert list(result.stats) == ["Alice"]

    def test_thresholds_from_config(self, fake_source):
        config = AnalysisConfig()
        result = analyze_contributions(AnalyzerOptions(), fake_source, config)
        assert result.efficiency["Bob"].distribution.optimal == 1

    def test_empty_history(self, make_source):
        result = analyze_contributions(AnalyzerOptions(), make_source(error=EMPTY_HISTORY))
        assert result == AggregateResult()


class TestPeriodicMode:
    def test_rows(self, fake_source):
        rows = analyze_contributions(
            AnalyzerOptions(mode=AnalysisMode.PERIODIC, period_unit=PeriodUnit.DAILY),
            fake_source,
        )
        assert [(r.period, r.author) for r in rows] == [
            ("2025-12-16", "Dana"),
            ("2025-12-15", "Erin"),
            ("2025-12-15", "Dana"),
        ]

    def test_default_unit_from_config(self, fake_source):
        config = AnalysisConfig(default_period_unit="monthly")
        rows = analyze_contributions(AnalyzerOptions(mode="periodic"), fake_source, config)
        assert {r.period for r in rows} == {"2025-12"}

    def test_min_commits_on_rows(self, fake_source):
        rows = analyze_contributions(
            AnalyzerOptions(mode="periodic", period_unit="monthly", min_commits=2), fake_source
        )
        assert [r.author for r in rows] == ["Dana"]

    def test_empty_history(self, make_source):
        rows = analyze_contributions(
            AnalyzerOptions(mode="periodic"), make_source(error=EMPTY_HISTORY)
        )
        assert rows == []


class TestOwnershipMode:
    def test_default_patterns_applied(self, fake_source):
        result = analyze_contributions(AnalyzerOptions(mode="ownership"), fake_source)
        assert isinstance(result, OwnershipResult)
        assert "yarn.lock" not in result.files

    def test_config_and_option_patterns_are_combined(self, fake_source):
        config = AnalysisConfig(exclude_patterns=["**/*.md"])
        result = analyze_contributions(
            AnalyzerOptions(mode="ownership", exclude_patterns=["src/app.py"]),
            fake_source,
            config,
        )
        assert list(result.files) == ["src/util.py"]

    def test_gitignore_oracle_used_once(self, make_source, ownership_log):
        source = make_source(ownership=ownership_log, ignored={"README.md"})
        result = analyze_contributions(AnalyzerOptions(mode="ownership"), source)
        assert len(source.ignore_calls) == 1
        assert "README.md" not in result.files

    def test_gitignore_can_be_disabled(self, make_source, ownership_log):
        source = make_source(ownership=ownership_log, ignored={"README.md"})
        result = analyze_contributions(
            AnalyzerOptions(mode="ownership", respect_gitignore=False), source
        )
        assert source.ignore_calls == []
        assert "README.md" in result.files

    def test_directory_scopes_the_log_query(self, fake_source):
        analyze_contributions(AnalyzerOptions(mode="ownership", directory="src"), fake_source)
        kind, query = fake_source.queries[0]
        assert (kind, query.directory) == ("ownership", "src")

    def test_empty_history(self, make_source):
        result = analyze_contributions(
            AnalyzerOptions(mode="ownership"), make_source(error=EMPTY_HISTORY)
        )
        assert result == OwnershipResult()
