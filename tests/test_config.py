import logging
from pathlib import Path

import pytest

from habit_tracker.config import AppConfig
from habit_tracker.errors import ConfigError
from habit_tracker.logger import setup_logger


def test_defaults():
    config = AppConfig(environ={})
    assert config.storage.key == "habits_v1"
    assert config.storage.path.name == "habits.json"
    assert config.timezone_name == "UTC"
    assert config.history_days == 10
    assert config.server.port == 5000
    assert config.server.debug_mode is False
    assert config.log_level == logging.INFO


def test_environment_overrides(tmp_path):
    config = AppConfig(environ={
        "HABITS_DB_PATH": str(tmp_path / "db.json"),
        "HABITS_STORAGE_KEY": "habits_v2",
        "HABITS_TIMEZONE": "Europe/Berlin",
        "HISTORY_DAYS": "30",
        "PORT": "8080",
        "DEBUG_MODE": "true",
        "LOG_LEVEL": "debug",
    })
    assert config.storage.path == Path(tmp_path / "db.json")
    assert config.storage.key == "habits_v2"
    assert config.timezone.zone == "Europe/Berlin"
    assert config.history_days == 30
    assert config.server.port == 8080
    assert config.server.debug_mode is True
    assert config.log_level == logging.DEBUG


@pytest.mark.parametrize("environ", [
    {"HABITS_TIMEZONE": "Mars/Olympus"},
    {"PORT": "eighty"},
    {"PORT": "70000"},
    {"HISTORY_DAYS": "0"},
    {"LOG_LEVEL": "LOUD"},
])
def test_invalid_values(environ):
    with pytest.raises(ConfigError):
        AppConfig(environ=environ)


def test_setup_logger_is_idempotent(tmp_path):
    log_file = tmp_path / "logs" / "habits.log"
    setup_logger(str(log_file))
    logger = setup_logger(str(log_file), level=logging.DEBUG)
    try:
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
        logger.info("hello")
        assert log_file.exists()
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_default_paths_are_relative_to_working_directory():
    config = AppConfig(environ={})
    assert config.storage.path == Path("data") / "habits.json"
    assert config.log.file == Path("logs") / "habit_tracker.log"

    config = AppConfig(environ={"DATA_DIR": "/srv/habits", "LOG_DIR": "/var/log/habits"})
    assert config.storage.path == Path("/srv/habits/habits.json")
    assert config.log.file == Path("/var/log/habits/habit_tracker.log")
