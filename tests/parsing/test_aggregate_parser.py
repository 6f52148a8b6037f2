"""Tests for parsing/aggregate.py - per-author totals."""

from churnscope.parsing import parse_aggregate_stats


class TestAggregateParser:
    """Test commit counting, numstat accumulation and author filtering."""

    def test_totals(self, aggregate_log):
        stats = parse_aggregate_stats(aggregate_log)
        alice = stats["Alice"]
        assert alice.commits == 2
        assert alice.insertions == 18
        assert alice.deletions == 3

    def test_files_touched_counts_distinct_paths(self, aggregate_log):
        """src/app.py appears in two of Alice's commits but counts once."""
        stats = parse_aggregate_stats(aggregate_log)
        assert stats["Alice"].files_touched == 2

    def test_commit_without_files_still_counts(self, aggregate_log):
        stats = parse_aggregate_stats(aggregate_log)
        carol = stats["Carol"]
        assert carol.commits == 1
        assert carol.files_touched == 0
        assert carol.total_changes == 0

    def test_binary_file_counts_as_touched(self, aggregate_log):
        bob = parse_aggregate_stats(aggregate_log)["Bob"]
        assert (bob.insertions, bob.deletions) == (0, 0)
        assert bob.files_touched == 1

    def test_author_filter_is_case_insensitive(self, aggregate_log):
        stats = parse_aggregate_stats(aggregate_log, ["alice"])
        assert list(stats) == ["Alice"]

    def test_filtered_author_lines_are_dropped(self):
        """Numstat lines after a rejected header are not given to anyone."""
        log = "Alice\n1\t1\ta.py\n\nBob\n100\t100\tb.py\n"
        stats = parse_aggregate_stats(log, ["Alice"])
        assert stats["Alice"].insertions == 1
        assert stats["Alice"].files_touched == 1

    def test_first_seen_order(self, aggregate_log):
        assert list(parse_aggregate_stats(aggregate_log)) == ["Alice", "Bob", "Carol"]

    def test_numstat_before_any_header_is_ignored(self):
        stats = parse_aggregate_stats("5\t5\torphan.py\nAlice\n")
        assert list(stats) == ["Alice"]
        assert stats["Alice"].total_changes == 0

    def test_empty_input(self):
        assert parse_aggregate_stats("") == {}
