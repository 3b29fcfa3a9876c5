"""
Statistics
Summary counters for the stat cards and the dashboard, recomputed from the loaded collections on every view
"""

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel

from daybook.models.event import Event
from daybook.models.goal import Goal
from daybook.models.habit import Habit
from daybook.models.journal import JournalEntry
from daybook.models.mood import MOOD_SCALE, NEUTRAL_SCORE, MoodEntry
from daybook.models.task import Task
from daybook.services.filters import completion_percentage
from daybook.services.streaks import is_done_on
from daybook.utils.dates import now_local, parse_datetime, start_of_day, to_day, week_bounds


class TaskStats(BaseModel):
    completed: int
    total: int
    pending_by_priority: Dict[str, int]


class GoalStats(BaseModel):
    total: int
    completed: int
    in_progress: int
    overdue: int
    average_progress: float


class HabitStats(BaseModel):
    total: int
    active_streaks: int
    completed_today: int
    longest_streak: int


class MoodStats(BaseModel):
    total: int
    this_week: int
    dominant_mood: str


class JournalCounts(BaseModel):
    this_week: int
    this_month: int


class DashboardSummary(BaseModel):
    tasks_completed: int
    total_tasks: int
    upcoming_events: int
    journal_entries: int
    goals_progress: float
    current_streak: int
    weekly_mood: List[int]


def task_stats(tasks: Sequence[Task]) -> TaskStats:
    """Completed and total counts, plus open tasks grouped by priority"""
    pending_by_priority = {"high": 0, "medium": 0, "low": 0}
    for task in tasks:
        if not task.completed:
            pending_by_priority[task.priority] += 1

    return TaskStats(
        completed=sum(1 for task in tasks if task.completed),
        total=len(tasks),
        pending_by_priority=pending_by_priority,
    )


def is_overdue(goal: Goal, now: datetime) -> bool:
    return bool(goal.deadline) and not goal.completed and parse_datetime(goal.deadline) < now


def average_progress(goals: Sequence[Goal]) -> float:
    """Mean unclamped completion percentage, 0 without goals"""
    if not goals:
        return 0.0
    return sum(completion_percentage(goal) for goal in goals) / len(goals)


def goal_stats(goals: Sequence[Goal], now: Optional[datetime] = None) -> GoalStats:
    now = now or now_local()
    return GoalStats(
        total=len(goals),
        completed=sum(1 for goal in goals if goal.completed),
        in_progress=sum(1 for goal in goals if not goal.completed and goal.current_value > 0),
        overdue=sum(1 for goal in goals if is_overdue(goal, now)),
        average_progress=average_progress(goals),
    )


def habit_stats(habits: Sequence[Habit], today: Optional[date] = None) -> HabitStats:
    today = today or now_local().date()
    return HabitStats(
        total=len(habits),
        active_streaks=sum(1 for habit in habits if habit.streak > 0),
        completed_today=sum(1 for habit in habits if is_done_on(habit, today)),
        longest_streak=max((habit.streak for habit in habits), default=0),
    )


def dominant_mood(entries: Sequence[MoodEntry]) -> str:
    """
    Most frequent mood

    Ties go to the mood seen first in the entries; "neutral" without entries.
    """
    counts: Dict[str, int] = {}
    for entry in entries:
        counts[entry.mood] = counts.get(entry.mood, 0) + 1
    if not counts:
        return "neutral"
    # max() keeps the first of equal counts, and dicts keep insertion order
    return max(counts, key=counts.__getitem__)


def mood_stats(entries: Sequence[MoodEntry], now: Optional[datetime] = None) -> MoodStats:
    """Total entries, entries within [now - 7 days, now], dominant mood"""
    now = now or now_local()
    week_ago = now - timedelta(days=7)
    return MoodStats(
        total=len(entries),
        this_week=sum(1 for entry in entries if week_ago <= parse_datetime(entry.date) <= now),
        dominant_mood=dominant_mood(entries),
    )


def weekly_mood_trend(entries: Sequence[MoodEntry], today: Optional[date] = None) -> List[int]:
    """
    Mood score (1-5) for each of the last seven calendar days, oldest first

    The first entry found for a day wins; days without one score neutral (3).
    """
    today = today or now_local().date()
    by_day: Dict[date, int] = {}
    for entry in entries:
        by_day.setdefault(to_day(entry.date), MOOD_SCALE[entry.mood])

    return [by_day.get(today - timedelta(days=offset), NEUTRAL_SCORE) for offset in range(6, -1, -1)]


def journal_counts(entries: Sequence[JournalEntry], now: Optional[datetime] = None) -> JournalCounts:
    """Entries dated within the trailing 7 and 30 days"""
    now = now or now_local()
    dates = [parse_datetime(entry.date) for entry in entries]
    return JournalCounts(
        this_week=sum(1 for d in dates if d >= now - timedelta(days=7)),
        this_month=sum(1 for d in dates if d >= now - timedelta(days=30)),
    )


def current_streak(habits: Sequence[Habit]) -> int:
    """Streak of the habit completed most recently, 0 if none was ever completed"""
    done = [habit for habit in habits if habit.completed_dates]
    if not done:
        return 0
    latest = max(done, key=lambda habit: max(to_day(d) for d in habit.completed_dates))
    return latest.streak


def dashboard_summary(tasks: Sequence[Task], events: Sequence[Event],
                      entries: Sequence[JournalEntry], goals: Sequence[Goal],
                      habits: Sequence[Habit], moods: Sequence[MoodEntry],
                      now: Optional[datetime] = None) -> DashboardSummary:
    """
    Dashboard counters

    Args:
        tasks, events, entries, goals, habits, moods: the user's collections
        now: reference time

    Returns:
        the summary; upcoming events start within the next seven days from
        midnight today, journal entries are counted for the Sunday-Saturday week
    """
    now = now or now_local()
    today = start_of_day(now.date())
    week_start, week_end = week_bounds(now.date())

    upcoming = sum(
        1 for event in events
        if today <= parse_datetime(event.start_date) <= today + timedelta(days=7)
    )
    journal_this_week = sum(
        1 for entry in entries
        if week_start <= parse_datetime(entry.date) <= week_end
    )

    return DashboardSummary(
        tasks_completed=sum(1 for task in tasks if task.completed),
        total_tasks=len(tasks),
        upcoming_events=upcoming,
        journal_entries=journal_this_week,
        goals_progress=average_progress(goals),
        current_streak=current_streak(habits),
        weekly_mood=weekly_mood_trend(moods, now.date()),
    )
