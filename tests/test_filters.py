"""Tests for listing filter predicates."""

from datetime import datetime, timezone

import pytest

from blob_tools.core.exceptions import ValidationError
from blob_tools.objectstorage.listing.filters import (
    accept_all,
    all_of,
    build_filter,
    min_size_filter,
    modified_before_filter,
    regex_filter,
    suffix_filter,
)


class TestSingleFilters:
    """Test individual predicates."""

    def test_accept_all(self, summary_factory):
        """Test that accept_all keeps everything."""
        assert accept_all(summary_factory("anything")) is True

    def test_regex_filter_matches_whole_key(self, summary_factory):
        """Test that the regex must match the entire key."""
        predicate = regex_filter(r".*\.json")

        assert predicate(summary_factory("srcKeyPrefix/file.json"))
        assert not predicate(summary_factory("srcKeyPrefix/file2.csv"))
        assert not predicate(summary_factory("srcKeyPrefix/file.json.bak"))

    def test_regex_filter_invalid_pattern(self):
        """Test that a broken expression is rejected up front."""
        with pytest.raises(ValidationError, match="Invalid filter expression"):
            regex_filter("[unclosed")

    def test_suffix_filter(self, summary_factory):
        """Test suffix matching on keys."""
        predicate = suffix_filter(".csv")

        assert predicate(summary_factory("data/file2.csv"))
        assert not predicate(summary_factory("data/"))

    def test_min_size_filter(self, summary_factory):
        """Test size threshold is inclusive."""
        predicate = min_size_filter(100)

        assert predicate(summary_factory("big", size_bytes=100))
        assert not predicate(summary_factory("small", size_bytes=99))

    def test_min_size_filter_negative(self):
        """Test that a negative size is rejected."""
        with pytest.raises(ValidationError):
            min_size_filter(-1)

    def test_modified_before_filter(self, summary_factory):
        """Test that only strictly older objects are kept."""
        cutoff = datetime(2024, 6, 1, tzinfo=timezone.utc)
        predicate = modified_before_filter(cutoff)

        old = summary_factory(
            "old", last_modified=datetime(2024, 1, 1, tzinfo=timezone.utc)
        )
        same = summary_factory("same", last_modified=cutoff)

        assert predicate(old)
        assert not predicate(same)

    def test_modified_before_filter_naive_cutoff(self, summary_factory):
        """Test that a naive cutoff is read as UTC."""
        predicate = modified_before_filter(datetime(2024, 6, 1))

        assert predicate(
            summary_factory(
                "old", last_modified=datetime(2024, 5, 31, 23, 0, tzinfo=timezone.utc)
            )
        )


class TestCombinators:
    """Test combining predicates."""

    def test_all_of_requires_every_predicate(self, summary_factory):
        """Test conjunction of predicates."""
        predicate = all_of(suffix_filter(".csv"), min_size_filter(50))

        assert predicate(summary_factory("a.csv", size_bytes=50))
        assert not predicate(summary_factory("a.csv", size_bytes=10))
        assert not predicate(summary_factory("a.json", size_bytes=50))

    def test_all_of_short_circuits(self, summary_factory):
        """Test that later predicates are skipped once one rejects."""
        calls = []

        def tracking(summary):
            calls.append(summary.key)
            return True

        predicate = all_of(lambda s: False, tracking)

        assert not predicate(summary_factory("a"))
        assert calls == []

    def test_all_of_empty_accepts_all(self):
        """Test that no predicates means accept everything."""
        assert all_of() is accept_all

    def test_build_filter_no_options(self):
        """Test that no options gives accept_all."""
        assert build_filter() is accept_all

    def test_build_filter_combines_options(self, summary_factory):
        """Test that every given option is applied."""
        predicate = build_filter(
            regex=r"logs/.*",
            suffix=".gz",
            min_size=1,
            older_than=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )

        assert predicate(summary_factory("logs/app.gz"))
        assert not predicate(summary_factory("logs/app.txt"))
        assert not predicate(summary_factory("other/app.gz"))
        assert not predicate(summary_factory("logs/empty.gz", size_bytes=0))
