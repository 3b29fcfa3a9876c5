"""
Goals API
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from daybook.api.dependencies import get_goal_service, get_session, require_record, require_stored
from daybook.models.goal import Goal
from daybook.models.schemas import GoalCreate, GoalUpdate, ProgressUpdate
from daybook.models.user import Session
from daybook.services.filters import ALL, filter_goals, progress_percentage
from daybook.services.goal_service import GoalService
from daybook.services.stats import goal_stats
from daybook.utils.dates import now_local

router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("")
async def list_goals(q: str = "", category: str = ALL, status: str = ALL, deadline: str = ALL,
                     session: Session = Depends(get_session),
                     service: GoalService = Depends(get_goal_service)) -> Dict[str, Any]:
    """Filtered goal list with per-goal display progress and the goal counters"""
    goals = await service.list_for_user(session.user_id)
    now = now_local()
    facets = {"category": category, "status": status, "deadline": deadline}
    filtered = filter_goals(goals, q, facets, now=now)
    return {
        "goals": filtered,
        "progress": {goal.id: progress_percentage(goal) for goal in filtered},
        "categories": sorted({goal.category for goal in goals}),
        "stats": goal_stats(goals, now=now),
    }


@router.post("", status_code=201)
async def create_goal(body: GoalCreate, session: Session = Depends(get_session),
                      service: GoalService = Depends(get_goal_service)) -> Goal:
    return require_stored(await service.create(session, body.model_dump()), "goal")


@router.put("/{goal_id}")
async def update_goal(goal_id: str, body: GoalUpdate, session: Session = Depends(get_session),
                      service: GoalService = Depends(get_goal_service)) -> Goal:
    goal = require_record(await service.get(session.user_id, goal_id), "goal")
    return require_stored(await service.update(goal, body.model_dump(exclude_unset=True)), "goal")


@router.post("/{goal_id}/progress")
async def update_progress(goal_id: str, body: ProgressUpdate, session: Session = Depends(get_session),
                          service: GoalService = Depends(get_goal_service)) -> Goal:
    goal = require_record(await service.get(session.user_id, goal_id), "goal")
    return require_stored(await service.update_progress(goal, body.value), "goal")


@router.delete("/{goal_id}")
async def delete_goal(goal_id: str, session: Session = Depends(get_session),
                      service: GoalService = Depends(get_goal_service)) -> Dict[str, Any]:
    require_record(await service.get(session.user_id, goal_id), "goal")
    require_stored(await service.delete(goal_id), "goal")
    return {"deleted": goal_id}
