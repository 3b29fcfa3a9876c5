"""
Habit service
"""

from typing import Any, Dict, Optional

from daybook.models.habit import Habit
from daybook.models.user import Session
from daybook.services.record_service import RecordService
from daybook.services.streaks import toggle_completion
from daybook.utils.dates import DateLike


class HabitService(RecordService[Habit]):
    """Habits of a user"""

    model = Habit
    required_fields = ("name",)

    async def create(self, session: Session, data: Dict[str, Any]) -> Optional[Habit]:
        """New habits always start without completions"""
        data = {**data, "streak": 0, "completed_dates": []}
        data.pop("completedDates", None)
        return await super().create(session, data)

    async def toggle_day(self, habit: Habit, day: Optional[DateLike] = None) -> Optional[Habit]:
        """
        Toggle a day (today by default) and store the full habit

        Args:
            habit: the stored habit
            day: day to toggle

        Returns:
            the stored habit, None if the store rejected it
        """
        return await self.replace(toggle_completion(habit, day))


habit_service = HabitService()
