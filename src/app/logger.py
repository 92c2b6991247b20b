import logging
import os
from logging.handlers import TimedRotatingFileHandler
from .config import get_config

DEFAULT_LOG_FILE = "logs/app.log"

# One handler per log file, shared by every logger writing to it, so only
# one handler ever rotates a given file.
_handlers = {}

def _get_handler(log_file: str, retention_days: int, log_level: int) -> logging.Handler:
    handler = _handlers.get(log_file)
    if handler is not None:
        return handler

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    # Rotate the log file every day at midnight and keep N backups.
    handler = TimedRotatingFileHandler(
        log_file,
        when="midnight",
        interval=1,
        backupCount=retention_days
    )
    handler.setLevel(log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    _handlers[log_file] = handler
    return handler

def get_logger(name: str) -> logging.Logger:
    """
    Configures and returns a logger instance.
    This logger uses a TimedRotatingFileHandler to automatically rotate logs.
    Configuring a package logger such as "src.app" also captures the records
    of every module logger below it.
    """
    # Get configuration from environment
    log_level_str = get_config("AC_LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    retention_days = int(get_config("AC_LOG_RETENTION_DAYS", "7"))
    log_file = get_config("AC_LOG_FILE", DEFAULT_LOG_FILE)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Prevent duplicate handlers if the logger is already configured
    if logger.hasHandlers():
        return logger

    logger.addHandler(_get_handler(log_file, retention_days, log_level))

    return logger
