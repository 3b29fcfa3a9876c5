"""
Habit model
"""

from typing import ClassVar, List, Literal, Optional
from pydantic import Field
from .base import Record

Frequency = Literal["daily", "weekly", "monthly"]


class Habit(Record):
    """Habit with a stored streak counter

    streak is maintained incrementally by the toggle rule and is not
    recomputed from completed_dates.
    """

    kind: ClassVar[str] = "habit"
    collection: ClassVar[str] = "habits"

    name: str
    description: Optional[str] = None
    frequency: Frequency = "daily"
    streak: int = 0
    completed_dates: List[str] = Field(default_factory=list)
