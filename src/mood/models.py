"""Mood record model and the JSON boundary of the stored history."""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

import structlog

from .categories import UNKNOWN_LABEL

logger = structlog.get_logger()

# Renderings produced by the mobile app's toLocaleString()
_LOCALE_FORMATS = (
    "%m/%d/%Y, %I:%M:%S %p",
    "%m/%d/%Y, %H:%M:%S",
    "%d.%m.%Y, %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
)


@dataclass(frozen=True)
class MoodRecord:
    """A single logged mood entry.

    ``date`` is naive local time, or None when the stored value could not be
    parsed. ``raw_date`` keeps whatever was stored so it can be written back
    and displayed unchanged.
    """

    id: int
    mood: str
    note: str = ""
    date: Optional[datetime] = None
    raw_date: Optional[str] = None

    @property
    def display_date(self) -> str:
        if self.date is not None:
            return self.date.strftime("%Y-%m-%d %H:%M")
        return self.raw_date or ""

    def to_dict(self) -> dict:
        if self.date is not None:
            date_value = self.date.isoformat(timespec="seconds")
        else:
            date_value = self.raw_date
        return {"id": self.id, "mood": self.mood, "note": self.note, "date": date_value}


def to_local_naive(dt: datetime) -> datetime:
    """Convert aware datetimes to naive local time; naive ones pass through."""
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a stored date value. Returns None instead of raising."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Epoch milliseconds
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip().replace("\u202f", " ").replace("\xa0", " ")
    try:
        return to_local_naive(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        pass

    for fmt in _LOCALE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _coerce_id(value: Any, date: Optional[datetime], index: int) -> int:
    if isinstance(value, bool):
        value = None
    if isinstance(value, (int, float, str)):
        try:
            return int(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            pass
    if date is not None:
        try:
            return int(date.timestamp() * 1000)
        except (OverflowError, OSError, ValueError):
            pass
    return index


def record_from_dict(data: dict, index: int = 0) -> MoodRecord:
    """Build a record from a stored object, degrading malformed fields."""
    mood = data.get("mood")
    if not isinstance(mood, str) or not mood.strip():
        mood = UNKNOWN_LABEL

    note = data.get("note")
    note = "" if note is None else str(note)

    raw = data.get("date")
    date = parse_timestamp(raw)
    raw_date = raw if isinstance(raw, str) else (None if raw is None else str(raw))

    return MoodRecord(
        id=_coerce_id(data.get("id"), date, index),
        mood=mood,
        note=note,
        date=date,
        raw_date=raw_date,
    )


def parse_records(payload: Optional[str]) -> list[MoodRecord]:
    """Decode the stored JSON array into records.

    Missing or corrupt payloads yield an empty list; items that are not
    objects are skipped.
    """
    if not payload:
        return []

    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning("history_parse_failed", error=str(e))
        return []

    if not isinstance(data, list):
        logger.warning("history_not_a_list", got=type(data).__name__)
        return []

    records = []
    skipped = 0
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            skipped += 1
            continue
        records.append(record_from_dict(item, idx))

    if skipped:
        logger.warning("history_items_skipped", skipped=skipped, total=len(data))

    return records


def serialize_records(records: list[MoodRecord]) -> str:
    """Encode records as the JSON array stored under the history key."""
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)
