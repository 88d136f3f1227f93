import pytest

from habit_tracker.models import Category, Habit
from habit_tracker.storage import MemoryStorage

TODAY = "2026-10-19"


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def make_habit():
    def _make(habit_id, name="Habit", category=Category.HEALTH, days=(), created_at=TODAY):
        return Habit(
            id=habit_id,
            name=name,
            category=category,
            created_at=created_at,
            history={day: True for day in days},
        )

    return _make
