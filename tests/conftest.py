import copy
from typing import Any, Dict, Optional

import pytest

from daybook.models.event import Event
from daybook.models.goal import Goal
from daybook.models.habit import Habit
from daybook.models.journal import JournalEntry
from daybook.models.mood import MoodEntry
from daybook.models.task import Task
from daybook.models.user import Session


class MemoryStore:
    """In-memory stand-in for StoreClient with the same call contract"""

    def __init__(self, data: Optional[Dict[str, Dict[str, Any]]] = None):
        self.data = copy.deepcopy(data or {})
        self.fail = False
        self.calls = []
        self._counter = 0

    def is_configured(self) -> bool:
        return True

    async def get(self, path):
        self.calls.append(("get", path))
        if self.fail:
            return None
        collection, _, record_id = path.partition("/")
        records = self.data.get(collection)
        if not records:
            return None
        if record_id:
            return copy.deepcopy(records.get(record_id))
        return copy.deepcopy(records)

    async def post(self, path, record):
        self.calls.append(("post", path))
        if self.fail:
            return None
        self._counter += 1
        new_id = f"-key{self._counter}"
        self.data.setdefault(path, {})[new_id] = copy.deepcopy(record)
        return new_id

    async def put(self, path, record):
        self.calls.append(("put", path))
        if self.fail:
            return None
        collection, _, record_id = path.partition("/")
        self.data.setdefault(collection, {})[record_id] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def delete(self, path):
        self.calls.append(("delete", path))
        if self.fail:
            return False
        collection, _, record_id = path.partition("/")
        self.data.get(collection, {}).pop(record_id, None)
        return True

    def writes(self):
        return [call for call in self.calls if call[0] != "get"]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session():
    return Session(user_id="u1", name="Ada", email="ada@example.com")


STAMP = "2024-06-01T08:00:00"


def make_task(**fields) -> Task:
    data = {"id": "t", "user_id": "u1", "title": "Task", "priority": "medium",
            "category": "work", "created_at": STAMP, "updated_at": STAMP}
    data.update(fields)
    return Task(**data)


def make_goal(**fields) -> Goal:
    data = {"id": "g", "user_id": "u1", "title": "Goal", "target_value": 10,
            "unit": "km", "category": "health", "created_at": STAMP, "updated_at": STAMP}
    data.update(fields)
    return Goal(**data)


def make_entry(**fields) -> JournalEntry:
    data = {"id": "j", "user_id": "u1", "title": "Entry", "content": "Body",
            "date": "2024-06-01", "created_at": STAMP, "updated_at": STAMP}
    data.update(fields)
    return JournalEntry(**data)


def make_event(**fields) -> Event:
    data = {"id": "e", "user_id": "u1", "title": "Event", "start_date": "2024-06-10",
            "end_date": "2024-06-10", "created_at": STAMP, "updated_at": STAMP}
    data.update(fields)
    return Event(**data)


def make_habit(**fields) -> Habit:
    data = {"id": "h", "user_id": "u1", "name": "Read", "created_at": STAMP, "updated_at": STAMP}
    data.update(fields)
    return Habit(**data)


def make_mood(**fields) -> MoodEntry:
    data = {"id": "m", "user_id": "u1", "mood": "neutral", "date": "2024-06-01T09:00:00",
            "created_at": STAMP}
    data.update(fields)
    return MoodEntry(**data)
