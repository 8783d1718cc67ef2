# src/jalali_calendars/shared/logging_conf.py
"""
Logging Configuration - Handlers for Hosts Embedding the Calendar

The package itself only creates module loggers. A host that wants the
calendar's records on stdout or in a rotating log file calls setup_logging()
(or app.configure_logging(), which reads the LOG_* settings).

Files that USE this module:
- jalali_calendars.app (configure_logging applies settings through setup_logging)
- tests.test_logging_conf (handler selection tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "jalali_calendars.log"

PathLike = Union[str, Path]


def resolve_log_path(log_file: Optional[PathLike], log_dir: Optional[PathLike]) -> Optional[Path]:
    """
    Pick the log file path; log_dir wins over log_file.

    Returns:
        <log_dir>/jalali_calendars.log, the log_file path, or None for no file logging
    """
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    if log_file:
        return Path(log_file)
    return None


def build_handlers(
    log_path: Optional[Path],
    log_to_stdout: bool,
    max_bytes: int,
    backup_count: int,
) -> List[logging.Handler]:
    """Create the stdout and rotating file handlers; stdout is used when nothing else is."""
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []
    if log_to_stdout or log_path is None:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level=logging.INFO,
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    log_to_stdout: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """
    Configure root logging for the calendar.

    Args:
        level: Root logging level
        log_file: Log file path (ignored when log_dir is given)
        log_dir: Directory receiving jalali_calendars.log
        log_to_stdout: Also log to stdout when a file is configured
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep
    """
    log_path = resolve_log_path(log_file, log_dir)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=build_handlers(log_path, log_to_stdout, max_bytes, backup_count),
    )
    logging.getLogger(__name__).info(
        "Logging configured: %s, level=%s", log_path or "stdout", logging.getLevelName(level)
    )
