import asyncio
from datetime import datetime

import pytest

from conftest import MemoryStore
from daybook.services.event_service import EventService
from daybook.services.goal_service import GoalService
from daybook.services.habit_service import HabitService
from daybook.services.journal_service import JournalService, parse_tags
from daybook.services.mood_service import MoodService
from daybook.services.task_service import TaskService
from daybook.utils.errors import RecordValidationError

STAMP = "2024-06-01T08:00:00"


def seeded_store() -> MemoryStore:
    return MemoryStore({
        "tasks": {
            "-t1": {"userId": "u1", "title": "Mine", "priority": "high", "category": "work",
                    "completed": False, "createdAt": STAMP, "updatedAt": STAMP, "id": "1717000000000"},
            "-t2": {"userId": "u2", "title": "Theirs", "priority": "low", "category": "work",
                    "completed": False, "createdAt": STAMP, "updatedAt": STAMP},
            "-t3": {"userId": "u1", "title": "Broken", "priority": "urgent", "category": "work",
                    "createdAt": STAMP},
        },
        "goals": {
            "-g1": {"userId": "u1", "title": "Run", "targetValue": 10, "currentValue": 4,
                    "unit": "km", "category": "health", "completed": False,
                    "createdAt": STAMP, "updatedAt": STAMP, "reminder": "weekly"},
        },
    })


def test_list_for_user_scopes_and_uses_store_key():
    service = TaskService(seeded_store())

    tasks = asyncio.run(service.list_for_user("u1"))

    # -t3 has an invalid priority and is skipped
    assert [t.id for t in tasks] == ["-t1"]
    assert tasks[0].title == "Mine"


def test_unreachable_store_means_no_data():
    store = seeded_store()
    store.fail = True

    assert asyncio.run(TaskService(store).list_for_user("u1")) == []


def test_create_stamps_owner_and_times(store, session):
    service = TaskService(store)

    task = asyncio.run(service.create(session, {"title": "  Plan trip ", "description": "  ",
                                                "priority": "high", "category": "personal"}))

    assert task.id == "-key1"
    stored = store.data["tasks"]["-key1"]
    assert stored["title"] == "Plan trip"
    assert stored["userId"] == "u1"
    assert "description" not in stored
    assert stored["createdAt"] == stored["updatedAt"]
    assert stored["id"].isdigit()


def test_create_accepts_wire_names(store, session):
    task = asyncio.run(TaskService(store).create(session, {"title": "Pay rent", "dueDate": "2024-07-01"}))

    assert task.due_date == "2024-07-01"
    assert store.data["tasks"]["-key1"]["dueDate"] == "2024-07-01"


@pytest.mark.parametrize("data", [
    {"title": "   "},
    {"title": "Ok", "priority": "urgent"},
    {"description": "no title"},
])
def test_invalid_task_rejected_before_any_write(store, session, data):
    with pytest.raises(RecordValidationError):
        asyncio.run(TaskService(store).create(session, data))

    assert store.writes() == []


def test_create_returns_none_when_store_rejects(store, session):
    store.fail = True

    assert asyncio.run(TaskService(store).create(session, {"title": "x"})) is None


def test_update_merges_and_replaces_full_record():
    store = seeded_store()
    service = GoalService(store)
    goal = asyncio.run(service.get("u1", "-g1"))

    updated = asyncio.run(service.update(goal, {"title": "Run more"}))

    stored = store.data["goals"]["-g1"]
    assert updated.title == "Run more"
    assert stored["title"] == "Run more"
    assert stored["currentValue"] == 4
    assert stored["reminder"] == "weekly"
    assert stored["updatedAt"] != STAMP
    assert ("put", "goals/-g1") in store.calls


def test_direct_edit_is_not_clamped():
    store = seeded_store()
    service = GoalService(store)
    goal = asyncio.run(service.get("u1", "-g1"))

    updated = asyncio.run(service.update(goal, {"current_value": 25}))

    assert updated.current_value == 25
    assert updated.completed is False


@pytest.mark.parametrize("value,expected,completed", [
    (25, 10, True),
    (10, 10, True),
    (7, 7, False),
    (-3, 0, False),
])
def test_progress_update_clamps(value, expected, completed):
    store = seeded_store()
    service = GoalService(store)
    goal = asyncio.run(service.get("u1", "-g1"))

    updated = asyncio.run(service.update_progress(goal, value))

    assert updated.current_value == expected
    assert updated.completed is completed
    assert store.data["goals"]["-g1"]["currentValue"] == expected


def test_goal_requires_positive_target(store, session):
    with pytest.raises(RecordValidationError):
        asyncio.run(GoalService(store).create(session, {"title": "Save", "target_value": 0,
                                                        "unit": "EUR", "category": "money"}))

    assert store.writes() == []


def test_toggle_task():
    store = seeded_store()
    service = TaskService(store)
    task = asyncio.run(service.get("u1", "-t1"))

    toggled = asyncio.run(service.toggle(task))

    assert toggled.completed is True
    assert store.data["tasks"]["-t1"]["completed"] is True


def test_get_ignores_other_users_records():
    assert asyncio.run(TaskService(seeded_store()).get("u1", "-t2")) is None


def test_delete():
    store = seeded_store()

    assert asyncio.run(TaskService(store).delete("-t1")) is True
    assert "-t1" not in store.data["tasks"]

    store.fail = True
    assert asyncio.run(TaskService(store).delete("-t2")) is False


def test_journal_tags_from_comma_string(store, session):
    entry = asyncio.run(JournalService(store).create(session, {
        "title": "Trip", "content": "Lisbon", "tags": "travel, , food ,", "date": "2024-06-02",
    }))

    assert entry.tags == ["travel", "food"]
    assert parse_tags(None) == []
    assert parse_tags([" a ", ""]) == ["a"]


def test_journal_requires_content(store, session):
    with pytest.raises(RecordValidationError):
        asyncio.run(JournalService(store).create(session, {"title": "Trip", "content": " ", "date": "2024-06-02"}))


def test_all_day_event_spans_whole_days(store, session):
    event = asyncio.run(EventService(store).create(session, {
        "title": "Conference", "start_date": "2024-06-10T14:00:00",
        "end_date": "2024-06-11T09:00:00", "all_day": True,
    }))

    assert event.start_date == "2024-06-10T00:00:00"
    assert event.end_date == "2024-06-11T23:59:59"


def test_new_habit_starts_empty(store, session):
    habit = asyncio.run(HabitService(store).create(session, {"name": "Stretch", "streak": 12,
                                                             "completedDates": ["2024-01-01"]}))

    assert habit.streak == 0
    assert habit.completed_dates == []


def test_habit_toggle_persists_full_record(store, session):
    service = HabitService(store)
    habit = asyncio.run(service.create(session, {"name": "Stretch"}))

    toggled = asyncio.run(service.toggle_day(habit, "2024-01-03"))

    stored = store.data["habits"][habit.id]
    assert toggled.streak == 1
    assert stored["completedDates"] == ["2024-01-03"]
    assert stored["streak"] == 1
    assert stored["name"] == "Stretch"


def test_mood_upsert_keeps_one_entry_per_day(store, session):
    service = MoodService(store)

    first = asyncio.run(service.log_mood(session, "sad", "  ", now=datetime(2024, 6, 6, 8, 0)))
    second = asyncio.run(service.log_mood(session, "happy", "better", now=datetime(2024, 6, 6, 20, 0)))
    asyncio.run(service.log_mood(session, "neutral", now=datetime(2024, 6, 7, 9, 0)))

    assert second.id == first.id
    assert len(store.data["mood-entries"]) == 2
    assert store.data["mood-entries"][first.id]["mood"] == "happy"
    assert store.data["mood-entries"][first.id]["notes"] == "better"
    assert "notes" not in store.data["mood-entries"]["-key2"]


def test_unknown_mood_rejected(store, session):
    with pytest.raises(RecordValidationError):
        asyncio.run(MoodService(store).log_mood(session, "ecstatic"))

    assert store.writes() == []
