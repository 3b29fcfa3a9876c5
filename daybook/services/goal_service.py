"""
Goal service
"""

from typing import Optional

from daybook.models.goal import Goal
from daybook.services.record_service import RecordService
from daybook.utils.errors import RecordValidationError


class GoalService(RecordService[Goal]):
    """Goals of a user"""

    model = Goal
    required_fields = ("title", "unit", "category")

    def validate(self, record: Goal) -> None:
        super().validate(record)
        if record.target_value <= 0:
            raise RecordValidationError(self.model.kind, "target_value must be greater than 0")

    async def update_progress(self, goal: Goal, new_value: float) -> Optional[Goal]:
        """
        Record progress

        The value is clamped into [0, target_value] and the goal is marked
        completed once it reaches the target. Direct edits through update()
        are not clamped.

        Args:
            goal: the stored goal
            new_value: the new current value

        Returns:
            the stored goal, None if the store rejected it
        """
        value = max(0, min(new_value, goal.target_value))
        return await self.update(goal, {
            "current_value": value,
            "completed": value >= goal.target_value,
        })


goal_service = GoalService()
