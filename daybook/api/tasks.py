"""
Tasks API
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from daybook.api.dependencies import get_session, get_task_service, require_record, require_stored
from daybook.models.schemas import TaskCreate, TaskUpdate
from daybook.models.task import Task
from daybook.models.user import Session
from daybook.services.filters import ALL, filter_tasks
from daybook.services.stats import task_stats
from daybook.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def list_tasks(q: str = "", category: str = ALL, priority: str = ALL, status: str = ALL,
                     session: Session = Depends(get_session),
                     service: TaskService = Depends(get_task_service)) -> Dict[str, Any]:
    """Filtered task list with the task counters"""
    tasks = await service.list_for_user(session.user_id)
    facets = {"category": category, "priority": priority, "status": status}
    return {
        "tasks": filter_tasks(tasks, q, facets),
        "stats": task_stats(tasks),
    }


@router.post("", status_code=201)
async def create_task(body: TaskCreate, session: Session = Depends(get_session),
                      service: TaskService = Depends(get_task_service)) -> Task:
    return require_stored(await service.create(session, body.model_dump()), "task")


@router.put("/{task_id}")
async def update_task(task_id: str, body: TaskUpdate, session: Session = Depends(get_session),
                      service: TaskService = Depends(get_task_service)) -> Task:
    task = require_record(await service.get(session.user_id, task_id), "task")
    return require_stored(await service.update(task, body.model_dump(exclude_unset=True)), "task")


@router.post("/{task_id}/toggle")
async def toggle_task(task_id: str, session: Session = Depends(get_session),
                      service: TaskService = Depends(get_task_service)) -> Task:
    task = require_record(await service.get(session.user_id, task_id), "task")
    return require_stored(await service.toggle(task), "task")


@router.delete("/{task_id}")
async def delete_task(task_id: str, session: Session = Depends(get_session),
                      service: TaskService = Depends(get_task_service)) -> Dict[str, Any]:
    require_record(await service.get(session.user_id, task_id), "task")
    require_stored(await service.delete(task_id), "task")
    return {"deleted": task_id}
