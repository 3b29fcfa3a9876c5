"""
Task service
"""

from typing import Optional

from daybook.models.task import Task
from daybook.services.record_service import RecordService


class TaskService(RecordService[Task]):
    """Tasks of a user"""

    model = Task
    required_fields = ("title",)

    async def toggle(self, task: Task) -> Optional[Task]:
        """Flip the completed flag and store the task"""
        return await self.update(task, {"completed": not task.completed})


task_service = TaskService()
