"""Mood aggregation: turn the flat record list into chart-ready summaries.

Every function here is pure. Inputs are never mutated, empty input gives a
zero-filled result, and malformed records degrade instead of raising:

- unknown labels score 0 and still count toward averages,
- records whose date could not be parsed are left out of any weekday, hour
  or week bucket (they still show up in category frequencies).

Weekdays are numbered 0 = Sunday .. 6 = Saturday and weeks start on Sunday.
"""

import statistics
from collections import Counter
from dataclasses import asdict, dataclass
from datetime import datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .categories import color_for, score_for
from .models import MoodRecord, to_local_naive

DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
HOURS_PER_DAY = 24


@dataclass(frozen=True)
class CategoryCount:
    label: str
    count: int
    color: str


@dataclass(frozen=True)
class WeekComparison:
    this_week: float
    last_week: float

    @property
    def delta(self) -> float:
        return round2(self.this_week - self.last_week)


def round2(value: float) -> float:
    """Round to 2 places, half away from zero on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def weekday_index(dt: datetime) -> int:
    """Weekday with Sunday as 0."""
    return (dt.weekday() + 1) % 7


def _mean_score(records: Iterable[MoodRecord]) -> float:
    scores = [score_for(r.mood) for r in records]
    if not scores:
        return 0.0
    return round2(statistics.mean(scores))


def weekly_averages(records: list[MoodRecord]) -> list[float]:
    """Average score per weekday across all history (not just this week).

    An empty weekday reads 0, the same as an average of unknown moods.
    """
    buckets: list[list[MoodRecord]] = [[] for _ in DAYS]
    for record in records:
        if record.date is None:
            continue
        buckets[weekday_index(record.date)].append(record)
    return [_mean_score(bucket) for bucket in buckets]


def category_frequencies(records: list[MoodRecord]) -> list[CategoryCount]:
    """Count each distinct label, in order of first occurrence."""
    counts = Counter(r.mood for r in records)
    return [CategoryCount(label=label, count=n, color=color_for(label)) for label, n in counts.items()]


def hourly_distribution(records: list[MoodRecord]) -> list[int]:
    """Number of entries per local hour of day."""
    hours = [0] * HOURS_PER_DAY
    for record in records:
        if record.date is not None:
            hours[record.date.hour] += 1
    return hours


def hour_labels(step: int = 3) -> list[str]:
    """Axis labels for the hourly chart; only every ``step``-th hour is named."""
    step = max(1, step)
    return [f"{h}:00" if h % step == 0 else "" for h in range(HOURS_PER_DAY)]


def week_window(week_offset: int, now: datetime) -> tuple[datetime, datetime]:
    """Midnight-aligned [start, end) window of the week ``week_offset`` weeks before ``now``."""
    now = to_local_naive(now)
    start_day = now.date() - timedelta(days=weekday_index(now) + 7 * week_offset)
    start = datetime.combine(start_day, time.min)
    return start, start + timedelta(days=7)


def week_average(records: list[MoodRecord], week_offset: int, now: datetime) -> float:
    """Mean score of the records inside one week window, 0.0 when it is empty."""
    start, end = week_window(week_offset, now)
    return _mean_score(r for r in records if r.date is not None and start <= r.date < end)


def week_comparison(records: list[MoodRecord], now: datetime) -> WeekComparison:
    return WeekComparison(
        this_week=week_average(records, 0, now),
        last_week=week_average(records, 1, now),
    )


def summarize(records: list[MoodRecord], now: datetime, hour_label_step: int = 3) -> dict:
    """All analytics views in one JSON-serialisable dict."""
    comparison = week_comparison(records, now)
    return {
        "generated_at": to_local_naive(now).isoformat(timespec="seconds"),
        "total_entries": len(records),
        "weekly_averages": dict(zip(DAYS, weekly_averages(records))),
        "frequencies": [asdict(c) for c in category_frequencies(records)],
        "hourly": {
            "counts": hourly_distribution(records),
            "labels": hour_labels(hour_label_step),
        },
        "week_comparison": {
            "this_week": comparison.this_week,
            "last_week": comparison.last_week,
            "delta": comparison.delta,
        },
    }
