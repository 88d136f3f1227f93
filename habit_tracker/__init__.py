from habit_tracker.models import Category, CATEGORIES, Habit
from habit_tracker.store import HabitStore

__version__ = "1.0.0"

__all__ = ["Category", "CATEGORIES", "Habit", "HabitStore"]
