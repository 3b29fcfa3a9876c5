"""
Habit streaks
Toggle rule that keeps a habit's stored streak counter in step with its completed dates
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from daybook.models.habit import Habit
from daybook.utils.dates import DateLike, iso_timestamp, to_day, today_local


def toggle_completion(habit: Habit, day: Optional[DateLike] = None) -> Habit:
    """
    Mark a day done, or undo it if it is already done

    Undo removes the day and decrements the streak (never below 0). Marking
    adds the day and extends the streak when the previous day is done or the
    streak is 0; otherwise the streak restarts at 1. Only the previous day is
    examined, so toggling past days can leave the counter out of step with
    the real run of completed days.

    Args:
        habit: the stored habit, left unchanged
        day: the day to toggle, defaults to today

    Returns:
        a copy with new completed_dates, streak and updated_at
    """
    target = to_day(day) if day is not None else today_local()
    key = target.isoformat()

    if key in habit.completed_dates:
        completed_dates = [d for d in habit.completed_dates if d != key]
        streak = max(0, habit.streak - 1)
    else:
        completed_dates = sorted(set(habit.completed_dates) | {key})
        yesterday = (target - timedelta(days=1)).isoformat()
        if yesterday in habit.completed_dates or habit.streak == 0:
            streak = habit.streak + 1
        else:
            streak = 1

    return habit.model_copy(update={
        "completed_dates": completed_dates,
        "streak": streak,
        "updated_at": iso_timestamp(),
    })


def is_done_on(habit: Habit, day: date) -> bool:
    return day.isoformat() in habit.completed_dates


def longest_run(completed_dates: Iterable[str]) -> int:
    """Longest run of consecutive days; diagnostic only, never written back"""
    days = sorted({to_day(d) for d in completed_dates})
    best = run = 0
    previous = None
    for day in days:
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        best = max(best, run)
        previous = day
    return best
