"""
Logging setup for the engine and the flexy command line tool.

Library modules only create loggers. Handlers are installed by setup_logging,
which the command line tool calls once at startup.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from datetime import date
from typing import Dict, Iterator, Optional, TextIO

ROOT_LOGGER_NAME = "flexy_engine"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

DEFAULT_LOG_DIR = os.path.join(os.path.expanduser("~"), ".flexy", "logs")

CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(module)s:%(lineno)d] %(message)s"

# Marks the handlers installed by setup_logging so a second call replaces them
_HANDLER_MARK = "_flexy_handler"


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name from the config or the command line to a logging level."""
    if not name:
        return default
    return LOG_LEVELS.get(name.upper(), default)


class LevelColorFormatter(logging.Formatter):
    """Console formatter that colors whole lines by level on terminals."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;31m'
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str = CONSOLE_FORMAT, use_color: bool = False):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_color else None
        if color is None:
            return text
        return f"{color}{text}{self.RESET}"


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty()) and sys.platform != 'win32'


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Install console (and optionally file) handlers on the package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        log_file: Path of a log file, or None to log to the console only
        console_level: Level name for the console handler
        file_level: Level name for the file handler
        stream: Console stream (standard error by default)

    Returns:
        logging.Logger: The ``flexy_engine`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    stream = stream if stream is not None else sys.stderr
    console = level_from_name(console_level)
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(console)
    console_handler.setFormatter(LevelColorFormatter(use_color=_is_terminal(stream)))
    setattr(console_handler, _HANDLER_MARK, True)
    logger.addHandler(console_handler)
    logger.setLevel(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level_from_name(file_level, logging.DEBUG))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        setattr(file_handler, _HANDLER_MARK, True)
        logger.addHandler(file_handler)
        logger.setLevel(min(console, file_handler.level))

    return logger


def default_log_file(day: Optional[date] = None) -> str:
    """
    Get the log file used by ``flexy --log-file``.

    Args:
        day: Date to name the file after (today by default)

    Returns:
        str: ``~/.flexy/logs/flexy_YYYY-MM-DD.log``
    """
    day = day or date.today()
    return os.path.join(DEFAULT_LOG_DIR, f"flexy_{day.isoformat()}.log")


def log_exception(logger: logging.Logger, exception: BaseException,
                  message: str = "Operation failed") -> None:
    """
    Log a failure as a one-line error, with the traceback at debug level.

    Args:
        logger: Logger to use
        exception: The failure
        message: What was being attempted
    """
    logger.error(f"{message}: {exception}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Traceback for '{message}'",
                     exc_info=(type(exception), exception, exception.__traceback__))


class PhaseTimer:
    """Measures the phases (build, solve, render) of one layout pass."""

    def __init__(self, logger: logging.Logger, label: str):
        self.logger = logger
        self.label = label
        self.durations: Dict[str, float] = {}

    @contextmanager
    def phase(self, name: str) -> Iterator[None]:
        """Time the enclosed block and log its duration at debug level."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.durations[name] = elapsed
            self.logger.debug(f"{self.label}: {name} took {elapsed * 1000:.2f} ms")

    def total(self) -> float:
        return sum(self.durations.values())
