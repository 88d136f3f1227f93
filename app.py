from habit_tracker.config import AppConfig
from habit_tracker.logger import setup_logger
from habit_tracker.web import create_app

config = AppConfig()
setup_logger(
    str(config.log.file),
    level=config.log_level,
    max_bytes=config.log.max_bytes,
    backup_count=config.log.backup_count,
)
app = create_app(config)

if __name__ == '__main__':
    app.run(host=config.server.host, port=config.server.port, debug=config.server.debug_mode)
