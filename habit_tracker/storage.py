import json
import logging
import os
import tempfile

from habit_tracker.errors import StorageWriteError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "habits_v1"


class JsonFileStorage:
    """One JSON file holding ``{key: [habit records]}``."""

    def __init__(self, path, key=DEFAULT_STORAGE_KEY):
        self.path = str(path)
        self.key = key

    def _read_document(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(document, dict):
            logger.warning("Ignoring %s: top level is not an object", self.path)
            return {}
        return document

    def load(self):
        return self._read_document().get(self.key)

    def save(self, records):
        document = self._read_document()
        document[self.key] = records

        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".habits-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise StorageWriteError(f"Could not write {self.path}: {e}") from e


class MemoryStorage:
    """Dict-backed storage slot, for tests and throwaway sessions."""

    def __init__(self, key=DEFAULT_STORAGE_KEY, initial=None):
        self.key = key
        self.slots = dict(initial or {})
        self.writes = 0

    def load(self):
        raw = self.slots.get(self.key)
        if raw is None:
            return None
        # stored as text to mirror a string-valued key/value slot
        return json.loads(raw)

    def save(self, records):
        self.slots[self.key] = json.dumps(records)
        self.writes += 1
