"""
Shared fixtures - in-memory persistence service and store factory
"""
import copy
import itertools
from typing import Any, Dict, List, Optional

import pytest

from habit_sync.core.constants import DEFAULT_HABITS
from habit_sync.services.habits import HabitStore

UNSET = object()


class FakePersistence:
    """
    In-memory stand-in for the persistence service.

    Records every call in `calls`. `errors[method]` makes that method raise;
    `responses[method]` replaces the body it returns (the server-side change
    still happens).
    """

    def __init__(self, habits: Optional[List[Dict[str, Any]]] = None):
        self.habits: List[Dict[str, Any]] = [dict({"completed": []}, **copy.deepcopy(h)) for h in habits or []]
        self.calls: List[tuple] = []
        self.errors: Dict[str, Exception] = {}
        self.responses: Dict[str, Any] = {}
        self._ids = itertools.count(1)
        self._clock = itertools.count(1700000000)
        self.closed = False

    def _reply(self, method: str):
        if method in self.errors:
            raise self.errors[method]
        body = self.responses.get(method, UNSET)
        if body is not UNSET:
            return copy.deepcopy(body)
        return {"habits": copy.deepcopy(self.habits)}

    async def get_habits(self):
        self.calls.append(("get_habits",))
        return self._reply("get_habits")

    async def create_habit(self, name, habit_id=None):
        self.calls.append(("create_habit", name, habit_id))
        if "create_habit" not in self.errors:
            habit_id = habit_id or f"custom_{next(self._ids)}"
            if not any(h["id"] == habit_id for h in self.habits):
                self.habits.append({"id": habit_id, "name": name, "completed": [], "created": next(self._clock)})
        return self._reply("create_habit")

    async def rename_habit(self, habit_id, name):
        self.calls.append(("rename_habit", habit_id, name))
        if "rename_habit" not in self.errors:
            for habit in self.habits:
                if habit["id"] == habit_id:
                    habit["name"] = name
        return self._reply("rename_habit")

    async def delete_habit(self, habit_id):
        self.calls.append(("delete_habit", habit_id))
        if "delete_habit" not in self.errors:
            self.habits = [h for h in self.habits if h["id"] != habit_id]
        return self._reply("delete_habit")

    def close(self):
        self.closed = True

    def calls_to(self, method: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == method]


class CountingIdGenerator:
    """Id generator that returns a fixed id and counts how often it is called"""

    def __init__(self, value: str = "SESSIONID0000001"):
        self.value = value
        self.calls = 0

    def __call__(self, length: int) -> str:
        self.calls += 1
        return self.value[:length]


@pytest.fixture
def persistence():
    return FakePersistence()


@pytest.fixture
def id_generator():
    return CountingIdGenerator()


@pytest.fixture
def store(persistence, id_generator):
    return HabitStore(persistence, id_generator=id_generator)


@pytest.fixture
def all_defaults():
    return [dict(entry) for entry in DEFAULT_HABITS]
