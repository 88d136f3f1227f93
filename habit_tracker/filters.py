from enum import Enum

from habit_tracker.errors import InvalidCategoryError, InvalidFilterError
from habit_tracker.models import Category

ALL = "all"


class StatusFilter(Enum):
    ALL = "all"
    ACTIVE = "active"
    DONE = "done"


def parse_status(value):
    if isinstance(value, StatusFilter):
        return value
    try:
        return StatusFilter(value)
    except ValueError:
        raise InvalidFilterError(f"Unknown status filter: {value!r}") from None


def parse_category_filter(value):
    """Return None for "all", otherwise the Category to keep."""
    if value is None or value == ALL:
        return None
    try:
        return Category.parse(value)
    except InvalidCategoryError:
        raise InvalidFilterError(f"Unknown category filter: {value!r}") from None


def apply_filters(habits, status, category, today):
    status = parse_status(status)
    category = parse_category_filter(category)

    def keep(habit):
        if status is StatusFilter.ACTIVE and habit.is_done(today):
            return False
        if status is StatusFilter.DONE and not habit.is_done(today):
            return False
        return category is None or habit.category is category

    return [habit for habit in habits if keep(habit)]
