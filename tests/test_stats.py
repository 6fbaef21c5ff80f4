"""Tests for adrscope/views/stats.py - statistics aggregation."""

from datetime import date

from adrscope.views.stats import RecordStatistics, compute_statistics

from conftest import make_records


class TestRecordStatistics:
    """Test totals, per-year counts and the date range."""

    def test_status_scenario(self):
        stats = compute_statistics(make_records([
            {"status": "accepted"}, {"status": "accepted"}, {"status": "proposed"},
        ]))
        assert stats.total_count == 3
        assert stats.by_status == {"proposed": 1, "accepted": 2, "deprecated": 0, "superseded": 0}

    def test_repeated_value_count(self):
        stats = compute_statistics(make_records(
            [{"category": "db"}] * 4 + [{"category": "cache"}] + [{}]
        ))
        assert stats.total_count == 6
        assert stats.by_category == {"db": 4, "cache": 1}

    def test_years_and_date_range(self):
        stats = compute_statistics(make_records([
            {"created": "2024-06-01"},
            {"created": "2023-02-10"},
            {"created": "2024-11-30"},
            {},
        ]))
        assert stats.by_year == {2024: 2, 2023: 1}
        assert stats.earliest_date == date(2023, 2, 10)
        assert stats.latest_date == date(2024, 11, 30)

    def test_single_date_is_both_ends(self):
        stats = compute_statistics(make_records([{"created": "2025-01-15"}]))
        assert stats.earliest_date == stats.latest_date == date(2025, 1, 15)

    def test_no_dates(self):
        stats = compute_statistics(make_records([{}]))
        assert stats.earliest_date is None
        assert stats.by_year == {}

    def test_empty(self):
        stats = RecordStatistics.from_records([])
        assert stats.total_count == 0
        assert sum(stats.by_status.values()) == 0


class TestTopN:

    def test_highest_counts_first(self):
        assert RecordStatistics.top_n({"a": 1, "b": 5, "c": 3}, 2) == [("b", 5), ("c", 3)]

    def test_ties_keep_iteration_order(self):
        assert RecordStatistics.top_n({"z": 2, "a": 2, "m": 2}, 3) == [("z", 2), ("a", 2), ("m", 2)]

    def test_n_larger_than_mapping(self):
        assert RecordStatistics.top_n({"a": 1}, 10) == [("a", 1)]


class TestSummaryAndDict:

    def test_summary(self):
        stats = compute_statistics(make_records([
            {"status": "accepted", "category": "db", "author": "alice", "created": "2024-01-01"},
            {"status": "proposed", "category": "db", "created": "2025-01-01"},
        ]))
        summary = stats.summary()

        assert summary.startswith("ADR Statistics\n==============\nTotal: 2 records\n")
        assert "By Status: proposed (1), accepted (1)" in summary
        assert "By Category: db (2)" in summary
        assert "Authors: alice (1)" in summary
        assert "Date Range: 2024-01-01 -> 2025-01-01" in summary

    def test_to_dict(self):
        data = compute_statistics(make_records([{"created": "2024-05-05"}])).to_dict()
        assert data["total_count"] == 1
        assert data["by_year"] == {"2024": 1}
        assert data["earliest_date"] == "2024-05-05"

    def test_to_dict_without_dates(self):
        data = compute_statistics([]).to_dict()
        assert "earliest_date" not in data
        assert "latest_date" not in data
