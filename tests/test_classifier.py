"""Tests for classifier/contributor.py - contributor types."""

import pytest

from churnscope.classifier import (
    ContributorType,
    calculate_average_files_touched,
    classify_all_contributors,
    classify_contributor,
    get_contributor_type_info,
)
from churnscope.config import ClassifierThresholds
from churnscope.models import AuthorStats


def make_stats(insertions: int, deletions: int, files: int = 1) -> AuthorStats:
    return AuthorStats(commits=1, insertions=insertions, deletions=deletions, files_touched=files)


class TestClassifyContributor:
    """Rules apply in order: Scout, Refactorer, Explorer, Generalist, Artisan."""

    def test_scout_below_min_changes(self):
        assert classify_contributor(make_stats(60, 39), 1.0) is ContributorType.SCOUT

    def test_zero_changes_is_scout(self):
        assert classify_contributor(make_stats(0, 0, files=0), 0.0) is ContributorType.SCOUT

    def test_refactorer_at_deletion_threshold(self):
        assert classify_contributor(make_stats(60, 40), 10.0) is ContributorType.REFACTORER

    def test_refactorer_beats_generalist(self):
        """Deletion ratio 0.5 with a huge file count is still a Refactorer."""
        stats = make_stats(100, 100, files=1000)
        assert classify_contributor(stats, 2.0) is ContributorType.REFACTORER

    def test_explorer_above_insertion_ratio(self):
        assert classify_contributor(make_stats(71, 29), 10.0) is ContributorType.EXPLORER

    def test_insertion_ratio_exactly_threshold_is_not_explorer(self):
        assert classify_contributor(make_stats(70, 30), 10.0) is ContributorType.ARTISAN

    def test_generalist(self):
        assert classify_contributor(make_stats(65, 35, files=26), 10.0) is ContributorType.GENERALIST

    def test_at_generalist_threshold_is_artisan(self):
        assert classify_contributor(make_stats(65, 35, files=25), 10.0) is ContributorType.ARTISAN

    def test_custom_thresholds(self):
        thresholds = ClassifierThresholds(min_changes=10)
        assert classify_contributor(make_stats(6, 5), 1.0, thresholds) is ContributorType.REFACTORER


class TestClassifyAll:
    def test_average_files_touched(self):
        stats = {"a": make_stats(1, 0, files=2), "b": make_stats(1, 0, files=4)}
        assert calculate_average_files_touched(stats) == 3.0

    def test_average_of_empty_map(self):
        assert calculate_average_files_touched({}) == 0.0

    def test_classify_all_uses_corpus_average(self):
        stats = {
            "wide": make_stats(65, 35, files=30),
            "narrow1": make_stats(65, 35, files=1),
            "narrow2": make_stats(65, 35, files=1),
            "narrow3": make_stats(65, 35, files=1),
        }
        types = classify_all_contributors(stats)
        # average is 8.25, so 30 > 20.625
        assert types["wide"] is ContributorType.GENERALIST
        assert types["narrow1"] is ContributorType.ARTISAN


class TestTypeInfo:
    @pytest.mark.parametrize("contributor_type", list(ContributorType))
    def test_every_type_has_info(self, contributor_type):
        info = get_contributor_type_info(contributor_type)
        assert info.type is contributor_type
        assert info.label.endswith(contributor_type.value)
        assert info.label.startswith(info.emoji)
