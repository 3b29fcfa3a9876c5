"""
Mood model
Mood values and their 1-5 scale are shared by journal entries and mood entries
"""

from typing import ClassVar, Dict, Literal, Optional, Tuple
from .base import Record

Mood = Literal["very-happy", "happy", "neutral", "sad", "very-sad"]

MOODS: Tuple[str, ...] = ("very-happy", "happy", "neutral", "sad", "very-sad")

MOOD_SCALE: Dict[str, int] = {
    "very-sad": 1,
    "sad": 2,
    "neutral": 3,
    "happy": 4,
    "very-happy": 5,
}

NEUTRAL_SCORE = MOOD_SCALE["neutral"]


class MoodEntry(Record):
    """One mood check-in; at most one per user per calendar day"""

    kind: ClassVar[str] = "mood"
    collection: ClassVar[str] = "mood-entries"

    mood: Mood
    notes: Optional[str] = None
    date: str
