"""Static mood category table.

Every path that needs a score, a color or a glyph for a mood label goes
through this table. Labels outside it resolve to ``FALLBACK_CATEGORY``.
"""

from dataclasses import dataclass

from shared_types import MoodLabel


@dataclass(frozen=True)
class MoodCategory:
    label: str
    glyph: str
    score: int  # 1-5, orders moods for averaging
    color: str


CATEGORIES: dict[str, MoodCategory] = {
    c.label: c
    for c in (
        MoodCategory(MoodLabel.ENERGETIC.value, "🌞", 5, "#FFD700"),
        MoodCategory(MoodLabel.CALM.value, "🧘", 4, "#32CD32"),
        MoodCategory(MoodLabel.REFLECTIVE.value, "💭", 3, "#9370DB"),
        MoodCategory(MoodLabel.TIRED.value, "😴", 2, "#00BFFF"),
        MoodCategory(MoodLabel.FRUSTRATED.value, "😡", 1, "#FF6347"),
    )
}

UNKNOWN_LABEL = "Unknown"
FALLBACK_CATEGORY = MoodCategory(UNKNOWN_LABEL, "❔", 0, "#ccc")

MOOD_LABELS = tuple(CATEGORIES)


def get_category(label) -> MoodCategory:
    """Look up a category, falling back for unknown or non-string labels."""
    if not isinstance(label, str):
        return FALLBACK_CATEGORY
    return CATEGORIES.get(label, FALLBACK_CATEGORY)


def is_known(label) -> bool:
    return isinstance(label, str) and label in CATEGORIES


def score_for(label) -> int:
    """Numeric score for a label; 0 when the label is not in the table."""
    return get_category(label).score


def color_for(label) -> str:
    return get_category(label).color


def resolve_label(text: str) -> str | None:
    """Match user input to a table label, ignoring case and surrounding space."""
    wanted = text.strip().lower()
    for label in MOOD_LABELS:
        if label.lower() == wanted:
            return label
    return None
