"""Shared enums and types for moodlog."""

from enum import StrEnum


class MoodLabel(StrEnum):
    ENERGETIC = "Energetic"
    CALM = "Calm"
    REFLECTIVE = "Reflective"
    TIRED = "Tired"
    FRUSTRATED = "Frustrated"
