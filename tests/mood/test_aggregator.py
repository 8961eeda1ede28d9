"""Tests for mood aggregation."""

from datetime import datetime, timedelta, timezone

import pytest

from mood.aggregator import (
    CategoryCount,
    category_frequencies,
    hour_labels,
    hourly_distribution,
    round2,
    summarize,
    week_average,
    week_comparison,
    week_window,
    weekday_index,
    weekly_averages,
)
from mood.models import MoodRecord

SUNDAY = datetime(2024, 1, 7, 10, 0)


class TestEmptyInput:
    def test_weekly_averages_empty(self):
        assert weekly_averages([]) == [0, 0, 0, 0, 0, 0, 0]

    def test_hourly_distribution_empty(self):
        assert hourly_distribution([]) == [0] * 24

    def test_category_frequencies_empty(self):
        assert category_frequencies([]) == []

    def test_week_average_empty(self, fixed_now):
        assert week_average([], 0, fixed_now) == 0


class TestWeeklyAverages:
    def test_sunday_bucket_mean(self, make_record):
        records = [make_record("Energetic", SUNDAY), make_record("Tired", SUNDAY)]
        result = weekly_averages(records)
        assert result[0] == 3.5
        assert result[1:] == [0, 0, 0, 0, 0, 0]

    def test_aggregates_across_all_weeks(self, make_record):
        """Mondays from different weeks share one bucket."""
        records = [
            make_record("Energetic", datetime(2024, 1, 8, 9)),
            make_record("Frustrated", datetime(2024, 3, 4, 9)),
        ]
        assert weekly_averages(records)[1] == 3.0

    def test_sample_history(self, sample_records):
        result = weekly_averages(sample_records)
        assert len(result) == 7
        assert result[0] == 3.67  # (2 + 5 + 4) / 3
        assert result[1] == 4.0
        assert result[3] == 2.0  # (1 + 3) / 2
        assert result[2] == result[4] == result[5] == result[6] == 0

    def test_unknown_mood_scores_zero_but_counts(self, make_record):
        records = [make_record("Energetic", SUNDAY), make_record("Ecstatic", SUNDAY)]
        assert weekly_averages(records)[0] == 2.5

    def test_unparsable_date_skipped(self, make_record):
        records = [make_record("Energetic", SUNDAY), make_record("Frustrated", None)]
        result = weekly_averages(records)
        assert result[0] == 5.0
        assert sum(result) == 5.0

    def test_rounds_to_two_places(self, make_record):
        records = [make_record(m, SUNDAY) for m in ("Energetic", "Calm", "Calm")]
        assert weekly_averages(records)[0] == 4.33


class TestCategoryFrequencies:
    def test_counts_in_first_occurrence_order(self, make_record):
        records = [make_record("Calm")] * 3 + [make_record("Tired")]
        result = category_frequencies(records)
        assert [(c.label, c.count) for c in result] == [("Calm", 3), ("Tired", 1)]
        assert result[0].color == "#32CD32"

    def test_order_not_sorted_by_count(self, make_record):
        records = [make_record("Tired"), make_record("Calm"), make_record("Calm")]
        assert [c.label for c in category_frequencies(records)] == ["Tired", "Calm"]

    def test_unknown_label_gets_fallback_color(self, make_record):
        result = category_frequencies([make_record("Meh")])
        assert result == [CategoryCount(label="Meh", count=1, color="#ccc")]

    def test_undated_records_still_counted(self, make_record):
        result = category_frequencies([make_record("Calm", None)])
        assert result[0].count == 1


class TestHourlyDistribution:
    def test_single_record(self, make_record):
        result = hourly_distribution([make_record(date=datetime(2024, 1, 9, 14, 59))])
        assert result[14] == 1
        assert sum(result) == 1

    def test_sample_history(self, sample_records):
        result = hourly_distribution(sample_records)
        assert len(result) == 24
        assert result[14] == 2
        assert result[0] == result[8] == result[9] == result[21] == 1
        assert sum(result) == len(sample_records)

    def test_unparsable_date_skipped(self, make_record):
        assert sum(hourly_distribution([make_record(date=None)])) == 0

    def test_hour_labels(self):
        labels = hour_labels()
        assert len(labels) == 24
        assert labels[0] == "0:00"
        assert labels[3] == "3:00"
        assert labels[21] == "21:00"
        assert labels[1] == labels[2] == labels[22] == ""

    def test_hour_labels_custom_step(self):
        labels = hour_labels(6)
        assert [l for l in labels if l] == ["0:00", "6:00", "12:00", "18:00"]


class TestWeekWindow:
    def test_current_week_starts_sunday_midnight(self, fixed_now):
        start, end = week_window(0, fixed_now)
        assert start == datetime(2024, 1, 14)
        assert end == datetime(2024, 1, 21)

    def test_previous_week(self, fixed_now):
        start, end = week_window(1, fixed_now)
        assert start == datetime(2024, 1, 7)
        assert end == datetime(2024, 1, 14)

    def test_now_on_sunday(self):
        start, _ = week_window(0, datetime(2024, 1, 14, 23, 59))
        assert start == datetime(2024, 1, 14)

    def test_now_on_saturday(self):
        start, _ = week_window(0, datetime(2024, 1, 20, 0, 1))
        assert start == datetime(2024, 1, 14)

    def test_windows_are_contiguous(self, fixed_now):
        _, end_last = week_window(1, fixed_now)
        start_this, _ = week_window(0, fixed_now)
        assert end_last == start_this

    def test_crosses_year_boundary(self):
        start, end = week_window(0, datetime(2025, 1, 2, 12))
        assert start == datetime(2024, 12, 29)
        assert end == datetime(2025, 1, 5)

    def test_weekday_index_sunday_is_zero(self):
        assert weekday_index(SUNDAY) == 0
        assert weekday_index(SUNDAY + timedelta(days=6)) == 6


class TestWeekAverage:
    def test_this_and_last_week(self, sample_records, fixed_now):
        assert week_average(sample_records, 0, fixed_now) == 3.67
        assert week_average(sample_records, 1, fixed_now) == 2.67

    def test_empty_window(self, sample_records, fixed_now):
        assert week_average(sample_records, 5, fixed_now) == 0

    def test_boundary_record_in_exactly_one_window(self, make_record, fixed_now):
        boundary = datetime(2024, 1, 14)
        records = [make_record("Energetic", boundary)]
        this_week = week_average(records, 0, fixed_now)
        last_week = week_average(records, 1, fixed_now)
        assert (this_week, last_week) == (5.0, 0)

    def test_record_just_before_boundary(self, make_record, fixed_now):
        records = [make_record("Energetic", datetime(2024, 1, 13, 23, 59, 59))]
        assert week_average(records, 0, fixed_now) == 0
        assert week_average(records, 1, fixed_now) == 5.0

    def test_anchored_to_now_not_data(self, make_record):
        records = [make_record("Calm", datetime(2020, 6, 1))]
        assert week_average(records, 0, datetime(2024, 1, 17)) == 0

    def test_undated_records_excluded(self, make_record, fixed_now):
        records = [make_record("Energetic", fixed_now), make_record("Frustrated", None)]
        assert week_average(records, 0, fixed_now) == 5.0

    def test_aware_now_converted_to_local(self, make_record):
        now = datetime(2024, 1, 17, 12, tzinfo=timezone.utc)
        local_now = now.astimezone().replace(tzinfo=None)
        records = [make_record("Tired", local_now)]
        assert week_average(records, 0, now) == 2.0

    def test_week_comparison(self, sample_records, fixed_now):
        comparison = week_comparison(sample_records, fixed_now)
        assert comparison.this_week == 3.67
        assert comparison.last_week == 2.67
        assert comparison.delta == 1.0


class TestPurity:
    def test_inputs_not_mutated(self, sample_records, fixed_now):
        snapshot = list(sample_records)
        for _ in range(2):
            weekly_averages(sample_records)
            category_frequencies(sample_records)
            hourly_distribution(sample_records)
            week_average(sample_records, 0, fixed_now)
        assert sample_records == snapshot

    def test_idempotent(self, sample_records, fixed_now):
        assert weekly_averages(sample_records) == weekly_averages(sample_records)
        assert category_frequencies(sample_records) == category_frequencies(sample_records)
        assert hourly_distribution(sample_records) == hourly_distribution(sample_records)
        assert week_average(sample_records, 1, fixed_now) == week_average(sample_records, 1, fixed_now)

    def test_all_degenerate_records(self, fixed_now):
        records = [MoodRecord(id=i, mood="???", date=None) for i in range(4)]
        assert weekly_averages(records) == [0] * 7
        assert hourly_distribution(records) == [0] * 24
        assert week_average(records, 0, fixed_now) == 0
        assert category_frequencies(records)[0].count == 4


class TestRounding:
    @pytest.mark.parametrize(
        "value,expected",
        [(3.5, 3.5), (10 / 3, 3.33), (0.125, 0.13), (2 / 3, 0.67), (0, 0.0)],
    )
    def test_round2(self, value, expected):
        assert round2(value) == expected


class TestSummarize:
    def test_shape(self, sample_records, fixed_now):
        summary = summarize(sample_records, fixed_now)
        assert summary["total_entries"] == 6
        assert list(summary["weekly_averages"]) == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert summary["frequencies"][0] == {"label": "Tired", "count": 1, "color": "#00BFFF"}
        assert len(summary["hourly"]["counts"]) == 24
        assert summary["week_comparison"] == {"this_week": 3.67, "last_week": 2.67, "delta": 1.0}

    def test_empty(self, fixed_now):
        summary = summarize([], fixed_now)
        assert summary["total_entries"] == 0
        assert summary["frequencies"] == []
        assert summary["week_comparison"]["this_week"] == 0
