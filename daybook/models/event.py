"""
Calendar event model
"""

from typing import ClassVar, Optional
from .base import Record


class Event(Record):
    """Calendar event; end_date is expected to be at or after start_date but not enforced"""

    kind: ClassVar[str] = "event"
    collection: ClassVar[str] = "events"

    title: str
    description: Optional[str] = None
    start_date: str
    end_date: str
    all_day: bool = False
    color: Optional[str] = None
