from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from habit_tracker.dates import is_day_key
from habit_tracker.errors import InvalidCategoryError


class Category(Enum):
    HEALTH = "Health"
    WORK = "Work"
    LEARNING = "Learning"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryError(f"Unknown category: {value!r}") from None


CATEGORIES = tuple(Category)

CATEGORY_COLORS = {
    Category.HEALTH: "#34d399",
    Category.WORK: "#3b82f6",
    Category.LEARNING: "#facc15",
}


@dataclass(frozen=True)
class Habit:
    id: str
    name: str
    category: Category
    created_at: str = ""
    # day key -> True; a missing key means "not done that day"
    history: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "history", MappingProxyType(dict(self.history)))

    def is_done(self, day: str) -> bool:
        return bool(self.history.get(day))

    def with_day_toggled(self, day: str) -> "Habit":
        history = dict(self.history)
        if history.get(day):
            del history[day]
        else:
            history[day] = True
        return replace(self, history=history)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "createdAt": self.created_at,
            "history": {day: True for day in sorted(self.history)},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Habit":
        """Build a Habit from its persisted form.

        Raises ValueError (or a subclass) when a required field is missing
        or unusable. Optional fields are defaulted and stray history entries
        are dropped.
        """
        if not isinstance(data, dict):
            raise ValueError("habit record is not an object")

        habit_id = data.get("id")
        if not isinstance(habit_id, str) or not habit_id:
            raise ValueError("habit record has no id")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"habit {habit_id} has no name")

        category = Category.parse(data.get("category"))

        created_at = data.get("createdAt")
        if not isinstance(created_at, str):
            created_at = ""

        raw_history = data.get("history")
        if not isinstance(raw_history, dict):
            raw_history = {}
        history = {day: True for day, done in raw_history.items() if done and is_day_key(day)}

        return cls(id=habit_id, name=name, category=category, created_at=created_at, history=history)
