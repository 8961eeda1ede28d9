"""Shared test fixtures for moodlog."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# 2024-01-17 is a Wednesday; its week runs Sun 2024-01-14 .. Sat 2024-01-20
FIXED_NOW = datetime(2024, 1, 17, 15, 30)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def store(tmp_path):
    """Key-value store in a temp directory."""
    from mood.storage import KeyValueStore

    return KeyValueStore(tmp_path / "moodlog.db")


@pytest.fixture
def history(store):
    from mood.history import MoodHistory

    return MoodHistory(store)


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults."""
    from mood.models import MoodRecord

    counter = {"id": 0}

    def _make(mood="Calm", date=FIXED_NOW, note=""):
        counter["id"] += 1
        return MoodRecord(id=counter["id"], mood=mood, note=note, date=date)

    return _make


@pytest.fixture
def sample_records(make_record):
    """A week and a half of entries around FIXED_NOW."""
    return [
        make_record("Tired", datetime(2024, 1, 7, 8, 15)),  # Sun, last week
        make_record("Energetic", datetime(2024, 1, 7, 21, 0)),  # Sun, last week
        make_record("Frustrated", datetime(2024, 1, 10, 14, 5)),  # Wed, last week
        make_record("Calm", datetime(2024, 1, 14, 0, 0)),  # Sun, this week
        make_record("Calm", datetime(2024, 1, 15, 9, 45), note="coffee"),  # Mon
        make_record("Reflective", datetime(2024, 1, 17, 14, 20)),  # Wed
    ]
