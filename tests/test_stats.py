from datetime import date, datetime

import pytest

from conftest import make_entry, make_event, make_goal, make_habit, make_mood, make_task
from daybook.services.stats import (
    dashboard_summary, dominant_mood, goal_stats, habit_stats, journal_counts,
    mood_stats, task_stats, weekly_mood_trend,
)
from daybook.utils.config import settings

NOW = datetime(2024, 6, 6, 12, 0)
TODAY = NOW.date()


def test_task_stats():
    tasks = [
        make_task(priority="high"),
        make_task(priority="high", completed=True),
        make_task(priority="low"),
    ]

    stats = task_stats(tasks)

    assert stats.completed == 1
    assert stats.total == 3
    assert stats.pending_by_priority == {"high": 1, "medium": 0, "low": 1}


def test_goal_stats():
    goals = [
        make_goal(current_value=10, completed=True, deadline="2024-06-01"),
        make_goal(current_value=5, deadline="2024-06-01"),
        make_goal(current_value=0),
    ]

    stats = goal_stats(goals, now=NOW)

    assert stats.total == 3
    assert stats.completed == 1
    assert stats.in_progress == 1
    assert stats.overdue == 1
    assert stats.average_progress == pytest.approx(50.0)


def test_goal_stats_empty():
    stats = goal_stats([], now=NOW)

    assert stats.total == 0
    assert stats.average_progress == 0


def test_average_uses_unclamped_percentage():
    stats = goal_stats([make_goal(current_value=15), make_goal(current_value=5)], now=NOW)

    assert stats.average_progress == pytest.approx(100.0)


def test_habit_stats():
    habits = [
        make_habit(streak=4, completed_dates=["2024-06-05", "2024-06-06"]),
        make_habit(streak=0),
        make_habit(streak=7, completed_dates=["2024-06-01"]),
    ]

    stats = habit_stats(habits, today=TODAY)

    assert stats.total == 3
    assert stats.active_streaks == 2
    assert stats.completed_today == 1
    assert stats.longest_streak == 7


def test_habit_stats_empty():
    stats = habit_stats([], today=TODAY)

    assert stats.longest_streak == 0
    assert stats.completed_today == 0


def test_dominant_mood():
    entries = [make_mood(mood="happy"), make_mood(mood="happy"), make_mood(mood="sad")]

    assert dominant_mood(entries) == "happy"


def test_dominant_mood_tie_goes_to_first_seen():
    entries = [make_mood(mood="sad"), make_mood(mood="happy"), make_mood(mood="happy"), make_mood(mood="sad")]

    assert dominant_mood(entries) == "sad"
    assert dominant_mood([]) == "neutral"


def test_mood_stats_week_window_inclusive():
    entries = [
        make_mood(date="2024-05-30T12:00:00"),  # exactly seven days back
        make_mood(date="2024-05-30T11:59:59"),
        make_mood(date="2024-06-06T12:00:00"),
        make_mood(date="2024-06-07T08:00:00"),  # after now
    ]

    stats = mood_stats(entries, now=NOW)

    assert stats.total == 4
    assert stats.this_week == 2


def test_weekly_trend_defaults_to_neutral():
    entries = [
        make_mood(mood="happy", date="2024-06-06T08:00:00"),
        make_mood(mood="very-sad", date="2024-06-01T21:00:00"),
        make_mood(mood="very-happy", date="2024-05-20T08:00:00"),
    ]

    assert weekly_mood_trend(entries, today=TODAY) == [3, 1, 3, 3, 3, 3, 4]


def test_weekly_trend_first_entry_of_day_wins():
    entries = [
        make_mood(mood="sad", date="2024-06-06T08:00:00"),
        make_mood(mood="very-happy", date="2024-06-06T20:00:00"),
    ]

    assert weekly_mood_trend(entries, today=TODAY)[-1] == 2


def test_cross_midnight_entry_lands_on_local_day(monkeypatch):
    entry = make_mood(mood="very-happy", date="2024-06-05T23:30:00Z")

    monkeypatch.setattr(settings, "timezone", "+02:00")
    assert weekly_mood_trend([entry], today=TODAY) == [3, 3, 3, 3, 3, 3, 5]

    monkeypatch.setattr(settings, "timezone", "UTC")
    assert weekly_mood_trend([entry], today=TODAY) == [3, 3, 3, 3, 3, 5, 3]


def test_completed_today_follows_calendar_day(monkeypatch):
    monkeypatch.setattr(settings, "timezone", "-05:00")
    habit = make_habit(streak=1, completed_dates=["2024-06-06"])

    assert habit_stats([habit], today=date(2024, 6, 6)).completed_today == 1
    assert habit_stats([habit], today=date(2024, 6, 7)).completed_today == 0


def test_journal_counts():
    entries = [
        make_entry(date="2024-06-05"),
        make_entry(date="2024-05-20"),
        make_entry(date="2024-04-01"),
    ]

    counts = journal_counts(entries, now=NOW)

    assert counts.this_week == 1
    assert counts.this_month == 2


def test_dashboard_summary():
    tasks = [make_task(completed=True), make_task()]
    events = [
        make_event(start_date="2024-06-06T09:00:00", end_date="2024-06-06T10:00:00"),
        make_event(start_date="2024-06-12", end_date="2024-06-12"),
        make_event(start_date="2024-06-20", end_date="2024-06-20"),
        make_event(start_date="2024-06-01", end_date="2024-06-01"),
    ]
    entries = [
        make_entry(date="2024-06-02"),  # Sunday, start of the week
        make_entry(date="2024-06-08T22:00:00"),  # Saturday
        make_entry(date="2024-06-01"),  # previous week
    ]
    goals = [make_goal(current_value=5), make_goal(current_value=10)]
    habits = [
        make_habit(streak=2, completed_dates=["2024-06-01", "2024-06-02"]),
        make_habit(streak=5, completed_dates=["2024-06-05"]),
        make_habit(streak=9),
    ]
    moods = [make_mood(mood="happy", date="2024-06-06T08:00:00")]

    summary = dashboard_summary(tasks, events, entries, goals, habits, moods, now=NOW)

    assert summary.tasks_completed == 1
    assert summary.total_tasks == 2
    assert summary.upcoming_events == 2
    assert summary.journal_entries == 2
    assert summary.goals_progress == pytest.approx(75.0)
    assert summary.current_streak == 5
    assert summary.weekly_mood == [3, 3, 3, 3, 3, 3, 4]
