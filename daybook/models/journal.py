"""
Journal entry model
"""

from typing import ClassVar, List, Optional
from pydantic import Field
from .base import Record
from .mood import Mood


class JournalEntry(Record):
    """Journal entry"""

    kind: ClassVar[str] = "journal"
    collection: ClassVar[str] = "journal-entries"

    title: str
    content: str
    mood: Optional[Mood] = None
    tags: List[str] = Field(default_factory=list)
    date: str
