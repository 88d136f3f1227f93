import logging
import os
from dataclasses import dataclass
from pathlib import Path

import pytz

from habit_tracker.errors import ConfigError
from habit_tracker.storage import DEFAULT_STORAGE_KEY

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StorageConfig:
    path: Path
    key: str = DEFAULT_STORAGE_KEY


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    debug_mode: bool = False


@dataclass
class LogConfig:
    file: Path
    level: str = "INFO"
    max_bytes: int = 10_000_000
    backup_count: int = 5


class AppConfig:
    """Settings for the habit tracker, read from environment variables."""

    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ
        self._load_config()
        self._validate_config()

    def _get_int(self, name, default):
        raw = self.environ.get(name)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"{name} must be an integer, got {raw!r}") from None

    def _get_bool(self, name, default):
        raw = self.environ.get(name)
        if raw is None or raw == "":
            return default
        return raw.lower() in ("1", "true", "yes", "on")

    def _load_config(self):
        # relative to the working directory
        self.data_dir = Path(self.environ.get("DATA_DIR") or "data")
        self.log_dir = Path(self.environ.get("LOG_DIR") or "logs")

        self.storage = StorageConfig(
            path=Path(self.environ.get("HABITS_DB_PATH") or self.data_dir / "habits.json"),
            key=self.environ.get("HABITS_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
        )
        self.timezone_name = self.environ.get("HABITS_TIMEZONE") or "UTC"
        self.history_days = self._get_int("HISTORY_DAYS", 10)

        self.server = ServerConfig(
            host=self.environ.get("HOST") or "127.0.0.1",
            port=self._get_int("PORT", 5000),
            debug_mode=self._get_bool("DEBUG_MODE", False),
        )

        self.log = LogConfig(
            file=Path(self.environ.get("LOG_FILE") or self.log_dir / "habit_tracker.log"),
            level=(self.environ.get("LOG_LEVEL") or "INFO").upper(),
        )

    def _validate_config(self):
        try:
            self.timezone = pytz.timezone(self.timezone_name)
        except pytz.UnknownTimeZoneError:
            raise ConfigError(f"Unknown timezone: {self.timezone_name!r}") from None

        if self.history_days < 1:
            raise ConfigError("HISTORY_DAYS must be at least 1")
        if not 0 < self.server.port < 65536:
            raise ConfigError(f"PORT out of range: {self.server.port}")
        if self.log.level not in LOG_LEVELS:
            raise ConfigError(f"Unknown LOG_LEVEL: {self.log.level!r}")

    @property
    def log_level(self):
        return getattr(logging, self.log.level)
