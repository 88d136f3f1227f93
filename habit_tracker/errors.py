class HabitTrackerError(Exception):
    """Base class for every error raised by the habit tracker."""


class ConfigError(HabitTrackerError):
    pass


class StorageError(HabitTrackerError):
    pass


class StorageWriteError(StorageError):
    """Persisting the habit list failed (disk full, permissions, ...)."""


class InvalidDayKeyError(HabitTrackerError, ValueError):
    pass


class InvalidCategoryError(HabitTrackerError, ValueError):
    pass


class InvalidFilterError(HabitTrackerError, ValueError):
    pass
