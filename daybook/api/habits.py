"""
Habits and mood API
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from daybook.api.dependencies import (
    get_habit_service, get_mood_service, get_session, require_record, require_stored,
)
from daybook.models.habit import Habit
from daybook.models.mood import MoodEntry
from daybook.models.schemas import HabitCreate, HabitToggle, HabitUpdate, MoodLog
from daybook.models.user import Session
from daybook.services.habit_service import HabitService
from daybook.services.mood_service import MoodService, entry_for_day
from daybook.services.stats import habit_stats, mood_stats, weekly_mood_trend
from daybook.utils.dates import now_local

router = APIRouter(prefix="/api", tags=["habits", "mood"])


@router.get("/habits")
async def list_habits(session: Session = Depends(get_session),
                      service: HabitService = Depends(get_habit_service)) -> Dict[str, Any]:
    habits = await service.list_for_user(session.user_id)
    return {"habits": habits, "stats": habit_stats(habits)}


@router.post("/habits", status_code=201)
async def create_habit(body: HabitCreate, session: Session = Depends(get_session),
                       service: HabitService = Depends(get_habit_service)) -> Habit:
    return require_stored(await service.create(session, body.model_dump()), "habit")


@router.put("/habits/{habit_id}")
async def update_habit(habit_id: str, body: HabitUpdate, session: Session = Depends(get_session),
                       service: HabitService = Depends(get_habit_service)) -> Habit:
    habit = require_record(await service.get(session.user_id, habit_id), "habit")
    return require_stored(await service.update(habit, body.model_dump(exclude_unset=True)), "habit")


@router.post("/habits/{habit_id}/toggle")
async def toggle_habit(habit_id: str, body: HabitToggle = HabitToggle(),
                       session: Session = Depends(get_session),
                       service: HabitService = Depends(get_habit_service)) -> Habit:
    habit = require_record(await service.get(session.user_id, habit_id), "habit")
    return require_stored(await service.toggle_day(habit, body.day), "habit")


@router.delete("/habits/{habit_id}")
async def delete_habit(habit_id: str, session: Session = Depends(get_session),
                       service: HabitService = Depends(get_habit_service)) -> Dict[str, Any]:
    require_record(await service.get(session.user_id, habit_id), "habit")
    require_stored(await service.delete(habit_id), "habit")
    return {"deleted": habit_id}


@router.get("/mood")
async def mood_overview(session: Session = Depends(get_session),
                        moods: MoodService = Depends(get_mood_service),
                        habits: HabitService = Depends(get_habit_service)) -> Dict[str, Any]:
    """Mood and habit tracker view"""
    entries = await moods.list_for_user(session.user_id)
    user_habits = await habits.list_for_user(session.user_id)
    now = now_local()
    return {
        "today": entry_for_day(entries, now.date()),
        "stats": mood_stats(entries, now=now),
        "weekly": weekly_mood_trend(entries, now.date()),
        "habit_stats": habit_stats(user_habits, now.date()),
    }


@router.post("/mood")
async def log_mood(body: MoodLog, session: Session = Depends(get_session),
                   service: MoodService = Depends(get_mood_service)) -> MoodEntry:
    return require_stored(await service.log_mood(session, body.mood, body.notes), "mood entry")
