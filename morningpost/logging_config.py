"""
Logging setup for morningpost.

Logs always go to stderr (plus an optional file) so they never mix with
the summaries written to stdout.
"""

import logging
import sys
import time
from functools import wraps
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
QUIET_LOGGERS = ("requests", "urllib3")


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name, case-insensitive. Unknown names mean WARNING.
        log_file: Optional file to log to in addition to stderr.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=handlers,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Time each call of the decorated function.

    Completion is logged at INFO. A failure is logged at DEBUG and
    re-raised; whoever handles the exception reports it.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            logger.debug(f"Starting {operation}")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.debug(f"Failed {operation} after {time.perf_counter() - start:.2f}s: {e}")
                raise
            logger.info(f"Completed {operation} in {time.perf_counter() - start:.2f}s")
            return result
        return wrapper
    return decorator
