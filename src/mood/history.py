"""Mood history: the stored, insertion-ordered list of records."""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from .categories import is_known, resolve_label
from .models import MoodRecord, parse_records, serialize_records, to_local_naive
from .storage import KeyValueStore

logger = structlog.get_logger()

HISTORY_KEY = "moodHistory"
MAX_NOTE_LENGTH = 2000


class InvalidMoodError(ValueError):
    """Raised when a new entry names a mood outside the category table."""


@dataclass(frozen=True)
class Milestone:
    title: str
    message: str


@dataclass(frozen=True)
class SaveResult:
    record: MoodRecord
    count: int
    milestone: Optional[Milestone] = None


MILESTONES = {
    3: Milestone("Streak!", "3-day mood streak unlocked!"),
    10: Milestone("MoodMaster!", "10 moods logged!"),
}


def milestone_for(count: int) -> Optional[Milestone]:
    """Celebration earned when the history reaches exactly ``count`` entries."""
    return MILESTONES.get(count)


def _next_id(records: list[MoodRecord], now: datetime) -> int:
    candidate = int(now.timestamp() * 1000)
    if records:
        last = max(r.id for r in records)
        if candidate <= last:
            candidate = last + 1
    return candidate


class MoodHistory:
    """Load, append to and clear the history stored under one key."""

    def __init__(self, store: KeyValueStore, key: str = HISTORY_KEY):
        self.store = store
        self.key = key

    async def load(self) -> list[MoodRecord]:
        """Stored records in insertion order; an unreadable store reads as empty."""
        try:
            payload = await self.store.get(self.key)
        except sqlite3.Error as e:
            logger.warning("history_read_failed", key=self.key, error=str(e))
            return []
        return parse_records(payload)

    async def add(self, mood: str, note: str = "", now: Optional[datetime] = None) -> SaveResult:
        """Append a new entry.

        Args:
            mood: Category label (matched case-insensitively)
            note: Optional free text
            now: Creation time, defaults to the current local time

        Raises:
            InvalidMoodError: If mood is not a known category or note is too long
        """
        label = resolve_label(mood) if isinstance(mood, str) else None
        if label is None or not is_known(label):
            raise InvalidMoodError(f"Unknown mood '{mood}'")

        note = (note or "").strip()
        if len(note) > MAX_NOTE_LENGTH:
            raise InvalidMoodError(f"Note exceeds max length ({MAX_NOTE_LENGTH} chars)")

        now = to_local_naive(now) if now is not None else datetime.now().replace(microsecond=0)

        records = await self.load()
        record = MoodRecord(
            id=_next_id(records, now),
            mood=label,
            note=note,
            date=now,
        )
        records.append(record)

        await self.store.set(self.key, serialize_records(records))
        logger.info("mood_saved", mood=label, count=len(records))
        logger.debug("mood_note", record_id=record.id, note=note)

        return SaveResult(record=record, count=len(records), milestone=milestone_for(len(records)))

    async def recent(self, limit: Optional[int] = None) -> list[MoodRecord]:
        """Most recent first. The stored order is left untouched."""
        records = list(reversed(await self.load()))
        if limit is not None:
            records = records[:limit]
        return records

    async def clear(self) -> int:
        """Remove the whole history. Returns how many records were removed."""
        count = len(await self.load())
        await self.store.remove(self.key)
        logger.info("history_cleared", count=count)
        return count
