"""
Dashboard API
Loads every collection of the caller and derives the dashboard view
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from daybook.api.dependencies import (
    get_event_service, get_goal_service, get_habit_service, get_journal_service,
    get_mood_service, get_session, get_task_service,
)
from daybook.models.user import Session
from daybook.services.event_service import EventService
from daybook.services.filters import active_goals, recent_tasks, upcoming_events
from daybook.services.goal_service import GoalService
from daybook.services.habit_service import HabitService
from daybook.services.journal_service import JournalService
from daybook.services.mood_service import MoodService
from daybook.services.stats import dashboard_summary
from daybook.services.task_service import TaskService
from daybook.utils.dates import now_local

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
async def get_dashboard(session: Session = Depends(get_session),
                        tasks_svc: TaskService = Depends(get_task_service),
                        events_svc: EventService = Depends(get_event_service),
                        journal_svc: JournalService = Depends(get_journal_service),
                        goals_svc: GoalService = Depends(get_goal_service),
                        habits_svc: HabitService = Depends(get_habit_service),
                        moods_svc: MoodService = Depends(get_mood_service)) -> Dict[str, Any]:
    """
    Dashboard view

    Returns:
        summary counters, the next events, open tasks and active goals
    """
    # Sequential loads, one collection per request
    tasks = await tasks_svc.list_for_user(session.user_id)
    events = await events_svc.list_for_user(session.user_id)
    entries = await journal_svc.list_for_user(session.user_id)
    goals = await goals_svc.list_for_user(session.user_id)
    habits = await habits_svc.list_for_user(session.user_id)
    moods = await moods_svc.list_for_user(session.user_id)

    now = now_local()
    return {
        "user": session.name,
        "summary": dashboard_summary(tasks, events, entries, goals, habits, moods, now=now),
        "upcoming_events": upcoming_events(events, now=now),
        "recent_tasks": recent_tasks(tasks),
        "active_goals": active_goals(goals),
    }
