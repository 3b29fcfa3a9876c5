"""
View filters
Derive the filtered, ordered lists each screen shows from an already-fetched, user-scoped collection.

All functions are pure: the input list is never reordered or modified, and a
new list is returned. Sorts are stable, so records with equal keys keep their
input order. A facet value of "all" means no restriction.
"""

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from daybook.models.base import Record
from daybook.models.event import Event
from daybook.models.goal import Goal
from daybook.models.journal import JournalEntry
from daybook.models.task import PRIORITY_ORDER, Task
from daybook.utils.config import settings
from daybook.utils.dates import DateLike, now_local, parse_datetime, start_of_day, to_day
from daybook.utils.logger import logger

ALL = "all"

TASK_STATUSES = ("completed", "pending")
GOAL_STATUSES = ("completed", "in-progress", "not-started")
DEADLINE_BUCKETS = ("overdue", "this-week", "this-month", "future", "no-deadline")

# Sorts after every real due date
_NO_DUE_DATE = datetime(9999, 12, 31)
# Sorts after every real creation time when newest comes first
_NO_CREATED_AT = datetime.min


def _text_fields(record: Record) -> List[str]:
    """Searchable text of a record, by record kind"""
    if isinstance(record, Task):
        return [record.title, record.description or ""]
    if isinstance(record, Goal):
        return [record.title, record.description or "", record.category]
    if isinstance(record, JournalEntry):
        return [record.title, record.content, *record.tags]
    if isinstance(record, Event):
        return [record.title, record.description or ""]
    raise TypeError(f"records of kind {getattr(record, 'kind', type(record).__name__)!r} are not searchable")


def matches_query(record: Record, query: str) -> bool:
    """Case-insensitive substring search; a match in any text field passes"""
    if not query:
        return True
    needle = query.lower()
    return any(needle in text.lower() for text in _text_fields(record))


def _facet(facets: Optional[Dict[str, str]], name: str) -> str:
    if not facets:
        return ALL
    return facets.get(name) or ALL


def completion_percentage(goal: Goal) -> float:
    """
    current_value / target_value * 100, unclamped

    A goal with a non-positive target cannot be measured; it counts as 0%
    rather than producing a division error or NaN.
    """
    if goal.target_value <= 0:
        logger.warning(f"Goal {goal.id} has non-positive target {goal.target_value}, progress counted as 0")
        return 0.0
    return goal.current_value / goal.target_value * 100


def progress_percentage(goal: Goal) -> float:
    """Display progress, capped at 100"""
    return min(completion_percentage(goal), 100.0)


def _created(task: Task) -> datetime:
    return parse_datetime(task.created_at) if task.created_at else _NO_CREATED_AT


def filter_tasks(tasks: Sequence[Task], query: str = "",
                 facets: Optional[Dict[str, str]] = None) -> List[Task]:
    """
    Filter and order tasks

    Args:
        tasks: the user's tasks
        query: free-text search over title and description
        facets: category, priority, status ("completed" or "pending")

    Returns:
        tasks by priority (high first), newest first within a priority
    """
    category = _facet(facets, "category")
    priority = _facet(facets, "priority")
    status = _facet(facets, "status")

    filtered = [task for task in tasks if matches_query(task, query)]
    if category != ALL:
        filtered = [task for task in filtered if task.category == category]
    if priority != ALL:
        filtered = [task for task in filtered if task.priority == priority]
    if status == "completed":
        filtered = [task for task in filtered if task.completed]
    elif status == "pending":
        filtered = [task for task in filtered if not task.completed]

    # Two stable passes: secondary key first, then the dominant one
    filtered.sort(key=_created, reverse=True)
    filtered.sort(key=lambda task: PRIORITY_ORDER[task.priority], reverse=True)
    return filtered


def deadline_bucket_matches(goal: Goal, bucket: str, now: datetime) -> bool:
    """
    Whether a goal falls in one deadline bucket

    Buckets are evaluated independently: a goal due in three days is both
    "this-week" and "this-month".
    """
    if not goal.deadline:
        return bucket == "no-deadline"

    deadline = parse_datetime(goal.deadline)
    one_week = now + timedelta(days=7)
    one_month = now + timedelta(days=30)

    if bucket == "overdue":
        return deadline < now and not goal.completed
    if bucket == "this-week":
        return now <= deadline <= one_week
    if bucket == "this-month":
        return now <= deadline <= one_month
    if bucket == "future":
        return deadline > one_month
    if bucket == "no-deadline":
        return False
    return True


def filter_goals(goals: Sequence[Goal], query: str = "",
                 facets: Optional[Dict[str, str]] = None,
                 now: Optional[datetime] = None) -> List[Goal]:
    """
    Filter and order goals

    Args:
        goals: the user's goals
        query: free-text search over title, description and category
        facets: category, status ("completed", "in-progress", "not-started"),
            deadline (one of DEADLINE_BUCKETS)
        now: reference time for the deadline buckets

    Returns:
        incomplete goals first, each group by completion percentage, highest first
    """
    category = _facet(facets, "category")
    status = _facet(facets, "status")
    deadline = _facet(facets, "deadline")

    filtered = [goal for goal in goals if matches_query(goal, query)]
    if category != ALL:
        filtered = [goal for goal in filtered if goal.category == category]

    if status == "completed":
        filtered = [goal for goal in filtered if goal.completed]
    elif status == "in-progress":
        filtered = [goal for goal in filtered if not goal.completed and goal.current_value > 0]
    elif status == "not-started":
        filtered = [goal for goal in filtered if not goal.completed and goal.current_value == 0]

    if deadline != ALL:
        now = now or now_local()
        filtered = [goal for goal in filtered if deadline_bucket_matches(goal, deadline, now)]

    filtered.sort(key=lambda goal: (goal.completed, -completion_percentage(goal)))
    return filtered


def filter_journal_entries(entries: Sequence[JournalEntry], query: str = "",
                           mood: str = ALL, date_prefix: str = "",
                           tag: str = "") -> List[JournalEntry]:
    """
    Filter and order journal entries

    Args:
        entries: the user's journal entries
        query: free-text search over title, content and tags
        mood: exact mood, or "all"
        date_prefix: keeps entries whose stored date starts with it ("2024-06", "2024-06-05")
        tag: case-insensitive substring over the tags

    Returns:
        entries newest first
    """
    filtered = [entry for entry in entries if matches_query(entry, query)]
    if date_prefix:
        filtered = [entry for entry in filtered if entry.date.startswith(date_prefix)]
    if mood and mood != ALL:
        filtered = [entry for entry in filtered if entry.mood == mood]
    if tag:
        needle = tag.lower()
        filtered = [entry for entry in filtered if any(needle in t.lower() for t in entry.tags)]

    filtered.sort(key=lambda entry: parse_datetime(entry.date), reverse=True)
    return filtered


def all_tags(entries: Iterable[JournalEntry]) -> List[str]:
    """Distinct tags across entries, sorted"""
    return sorted({tag for entry in entries for tag in entry.tags})


def upcoming_events(events: Sequence[Event], now: Optional[datetime] = None,
                    limit: Optional[int] = None) -> List[Event]:
    """
    Events not yet over, soonest first

    The cutoff is the start of today, so an event that ended earlier today
    is still listed.

    Args:
        events: the user's events
        now: reference time; events ending before its calendar day are dropped
        limit: maximum number returned, defaults to settings.upcoming_events_limit
    """
    now = now or now_local()
    limit = settings.upcoming_events_limit if limit is None else limit

    today = start_of_day(now.date())
    upcoming = [event for event in events if parse_datetime(event.end_date) >= today]
    upcoming.sort(key=lambda event: parse_datetime(event.start_date))
    return upcoming[:limit]


def events_on_day(events: Sequence[Event], day: DateLike) -> List[Event]:
    """Events starting on a calendar day, by start time"""
    target = to_day(day)
    matched = [event for event in events if to_day(event.start_date) == target]
    matched.sort(key=lambda event: parse_datetime(event.start_date))
    return matched


def recent_tasks(tasks: Sequence[Task], limit: Optional[int] = None) -> List[Task]:
    """
    Open tasks for the dashboard: high priority first, then by due date

    Tasks without a due date come last.
    """
    limit = settings.dashboard_recent_tasks_limit if limit is None else limit

    def due(task: Task) -> datetime:
        return parse_datetime(task.due_date) if task.due_date else _NO_DUE_DATE

    pending = [task for task in tasks if not task.completed]
    pending.sort(key=lambda task: (task.priority != "high", due(task)))
    return pending[:limit]


def active_goals(goals: Sequence[Goal], limit: Optional[int] = None) -> List[Goal]:
    """Goals below target for the dashboard, most advanced first"""
    limit = settings.dashboard_active_goals_limit if limit is None else limit

    active = [goal for goal in goals if goal.current_value < goal.target_value]
    active.sort(key=completion_percentage, reverse=True)
    return active[:limit]
