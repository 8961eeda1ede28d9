from .aggregator import (
    category_frequencies,
    hourly_distribution,
    week_average,
    weekly_averages,
)
from .history import MoodHistory
from .models import MoodRecord
from .storage import KeyValueStore

__all__ = [
    "MoodRecord",
    "MoodHistory",
    "KeyValueStore",
    "weekly_averages",
    "category_frequencies",
    "hourly_distribution",
    "week_average",
]
