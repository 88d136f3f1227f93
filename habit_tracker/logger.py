import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(log_file="logs/habit_tracker.log", level=logging.INFO, max_bytes=10_000_000, backup_count=5):
    Path(log_file).parent.mkdir(exist_ok=True, parents=True)
    logger = logging.getLogger("habit_tracker")
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    # calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger
