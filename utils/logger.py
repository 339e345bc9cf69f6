"""
Logging utilities for SnapCook application.

Every module logs under the "snapcook" namespace. The console shows the
photo-by-photo pipeline (detections in, pantry labels out); the rotating
log file keeps the full record at the configured level.
"""

import logging
import logging.handlers
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .config import get_config

LOGGER_NAMESPACE = "snapcook"

CONSOLE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s [%(module)s:%(lineno)d] %(message)s'

# Streamlit and its file watcher are chatty at INFO
NOISY_LOGGERS = ("streamlit", "watchdog", "tornado")

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None,
                  debug: Optional[bool] = None) -> logging.Logger:
    """
    Configure the snapcook logger with console and rotating file output.

    Args:
        log_level: File log level (DEBUG, INFO, WARNING, ERROR). Uses config if not provided.
        log_file: Log file path. Uses config if not provided.
        debug: Show DEBUG on the console (per-label discards). Uses config.debug_mode if not provided.

    Returns:
        The "snapcook" namespace logger
    """
    config = get_config()
    log_level = (log_level or config.log_level).upper()
    log_file = log_file or config.log_file
    debug = config.debug_mode if debug is None else debug

    file_level = getattr(logging, log_level)
    console_level = logging.DEBUG if debug else logging.INFO

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(min(file_level, console_level))
    logger.propagate = False

    # Streamlit reruns the script; drop handlers from the previous run
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding='utf-8'
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    file_handler.setLevel(file_level)
    logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging to {log_file} at {log_level} (console {logging.getLevelName(console_level)})")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, nested under the snapcook namespace"""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def log_image_result(logger: logging.Logger, image_ref: str, raw_count: int, labels: Sequence[str]):
    """One line per photo: how many classifier candidates became pantry labels"""
    if labels:
        logger.info(f"{image_ref}: {raw_count} detections -> {', '.join(labels)}")
    else:
        logger.info(f"{image_ref}: {raw_count} detections -> no food labels")


class OperationTimer:
    """Context manager that logs start, finish and elapsed time of a pipeline step"""

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.elapsed: Optional[float] = None
        self._start: Optional[float] = None

    def __enter__(self):
        self._start = time.perf_counter()
        self.logger.log(self.level, f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._start
        if exc_type is None:
            self.logger.log(self.level, f"Completed: {self.operation} in {self.elapsed * 1000:.1f} ms")
        else:
            self.logger.error(f"Failed: {self.operation} after {self.elapsed * 1000:.1f} ms - {exc_val}")

    def info(self, message: str):
        self.logger.log(self.level, f"[{self.operation}] {message}")


def log_operation(logger: logging.Logger, operation: str, level: int = logging.INFO) -> OperationTimer:
    """Time a pipeline step such as ranking the catalog"""
    return OperationTimer(logger, operation, level)
