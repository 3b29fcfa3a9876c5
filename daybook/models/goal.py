"""
Goal model
"""

from typing import ClassVar, Optional
from .base import Record


class Goal(Record):
    """Measurable goal

    completed is set independently of current_value; only the progress update
    clamps current_value into [0, target_value].
    """

    kind: ClassVar[str] = "goal"
    collection: ClassVar[str] = "goals"

    title: str
    description: Optional[str] = None
    target_value: float
    current_value: float = 0
    unit: str
    category: str
    deadline: Optional[str] = None
    completed: bool = False
