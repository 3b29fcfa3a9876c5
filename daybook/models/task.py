"""
Task model
"""

from typing import ClassVar, Dict, Literal, Optional
from .base import Record

Priority = Literal["low", "medium", "high"]
TaskCategory = Literal["work", "personal", "hobbies"]

PRIORITY_ORDER: Dict[str, int] = {"high": 3, "medium": 2, "low": 1}


class Task(Record):
    """To-do item"""

    kind: ClassVar[str] = "task"
    collection: ClassVar[str] = "tasks"

    title: str
    description: Optional[str] = None
    completed: bool = False
    priority: Priority = "medium"
    category: TaskCategory = "personal"
    due_date: Optional[str] = None
