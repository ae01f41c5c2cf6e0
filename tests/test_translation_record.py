"""Unit tests for TranslationRecord, key composition and merge policies."""

from translation_tables.domain.load_result import LoadResult, LoadStatus, MergeStats
from translation_tables.domain.translation import (
    KEY_SEPARATOR,
    MergePolicy,
    TranslationRecord,
    make_key,
)


class TestMakeKey:
    def test_without_instance(self):
        assert make_key("A", "Hello") == "A\rHello"

    def test_with_instance(self):
        assert make_key("A", "Hello", "1") == KEY_SEPARATOR.join(["A", "Hello", "1"])

    def test_empty_instance_differs_from_no_instance(self):
        assert make_key("A", "Hello", "") != make_key("A", "Hello")

    def test_record_key_matches(self):
        record = TranslationRecord(context="A", reference="Hello", instance="2")
        assert record.key == make_key("A", "Hello", "2")


class TestMerge:
    def test_first_wins_keeps_existing_value(self):
        record = TranslationRecord(context="A", reference="Hello")
        assert record.merge("EN", "Hi", MergePolicy.FIRST_WINS)
        assert not record.merge("EN", "Hey", MergePolicy.FIRST_WINS)
        assert record.translations == {"EN": "Hi"}

    def test_last_wins_overwrites(self):
        record = TranslationRecord(context="A", reference="Hello")
        record.merge("EN", "Hi", MergePolicy.LAST_WINS)
        assert record.merge("EN", "Hey", MergePolicy.LAST_WINS)
        assert record.translations == {"EN": "Hey"}

    def test_same_value_is_not_a_change(self):
        record = TranslationRecord(context="A", reference="Hello", translations={"EN": "Hi"})
        assert not record.merge("EN", "Hi", MergePolicy.LAST_WINS)

    def test_blank_language_is_never_stored(self):
        record = TranslationRecord(context="A", reference="Hello")
        assert not record.merge("", "x", MergePolicy.LAST_WINS)
        assert not record.merge("  ", "x", MergePolicy.FIRST_WINS)
        assert record.translations == {}

    def test_empty_value_is_stored(self):
        record = TranslationRecord(context="A", reference="Hello")
        assert record.merge("EN", "", MergePolicy.FIRST_WINS)
        assert record.translations == {"EN": ""}


class TestLoadResult:
    def test_from_stats(self):
        stats = MergeStats(added=2, updated=1, skipped_rows=3)
        result = LoadResult.from_stats("f.csv", LoadStatus.RECOVERED, stats)
        assert (result.added, result.updated, result.skipped_rows) == (2, 1, 3)
        assert result.ok

    def test_failed_is_not_ok(self):
        assert not LoadResult(source="f.csv", status=LoadStatus.FAILED, message="x").ok

    def test_missing_is_ok(self):
        assert LoadResult(source="f.csv", status=LoadStatus.MISSING).ok
