import logging
import threading
import uuid

from habit_tracker.dates import parse_day_key, today_key
from habit_tracker.models import Category, Habit

logger = logging.getLogger(__name__)


def new_habit_id():
    return str(uuid.uuid4())


def load(storage):
    """Read the persisted habit list, returning [] on missing or corrupt data."""
    try:
        records = storage.load()
    except (OSError, ValueError) as e:
        logger.warning("Discarding unreadable habit data: %s", e)
        return []

    if records is None:
        return []
    if not isinstance(records, list):
        logger.warning("Discarding habit data: expected a list, got %s", type(records).__name__)
        return []

    habits = []
    seen_ids = set()
    for index, record in enumerate(records):
        try:
            habit = Habit.from_dict(record)
        except ValueError as e:
            logger.warning("Skipping habit record #%d: %s", index, e)
            continue
        if habit.id in seen_ids:
            logger.warning("Skipping habit record #%d: duplicate id %s", index, habit.id)
            continue
        seen_ids.add(habit.id)
        habits.append(habit)
    return habits


def save(storage, habits):
    storage.save([habit.to_dict() for habit in habits])


def add_habit(habits, name, category, today=None, id_factory=new_habit_id):
    if name is not None and not isinstance(name, str):
        raise TypeError(f"Habit name must be a string, got {type(name).__name__}")
    name = (name or "").strip()
    if not name:
        logger.debug("Ignoring habit with a blank name")
        return habits

    category = Category.parse(category)
    existing_ids = {habit.id for habit in habits}
    habit_id = id_factory()
    while habit_id in existing_ids:
        habit_id = id_factory()

    habit = Habit(
        id=habit_id,
        name=name,
        category=category,
        created_at=today or today_key(),
        history={},
    )
    return [habit] + list(habits)


def remove_habit(habits, habit_id):
    return [habit for habit in habits if habit.id != habit_id]


def toggle_day(habits, habit_id, day):
    parse_day_key(day)
    return [habit.with_day_toggled(day) if habit.id == habit_id else habit for habit in habits]


def toggle_today(habits, habit_id, tz=None):
    return toggle_day(habits, habit_id, today_key(tz))


class HabitStore:
    """Owns the current habit list and mirrors it into a storage slot.

    Every mutation goes through one of the pure functions above and is
    persisted before the new list becomes visible. If saving fails the
    previous list is kept and the StorageWriteError propagates. Mutations
    are serialized so concurrent requests cannot overwrite each other.
    """

    def __init__(self, storage, tz=None):
        self.storage = storage
        self.tz = tz
        self._lock = threading.RLock()
        self._habits = load(storage)
        logger.info("Loaded %d habits", len(self._habits))

    @property
    def habits(self):
        return tuple(self._habits)

    def get(self, habit_id):
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def _commit(self, habits):
        if habits is self._habits or habits == self._habits:
            return False
        save(self.storage, habits)
        self._habits = habits
        return True

    def add(self, name, category):
        with self._lock:
            habits = add_habit(self._habits, name, category, today=today_key(self.tz))
            if not self._commit(habits):
                return None
        logger.info("Added habit %s (%s)", habits[0].id, habits[0].name)
        return habits[0]

    def remove(self, habit_id):
        with self._lock:
            removed = self._commit(remove_habit(self._habits, habit_id))
        if removed:
            logger.info("Removed habit %s", habit_id)
        return removed

    def toggle_day(self, habit_id, day):
        with self._lock:
            return self._commit(toggle_day(self._habits, habit_id, day))

    def toggle_today(self, habit_id):
        return self.toggle_day(habit_id, today_key(self.tz))
