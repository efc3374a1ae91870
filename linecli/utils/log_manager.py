"""Logging utility for linecli"""

import json
import logging
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .console import get_console
from .paths import LOGS_DIR

# Attributes present on every LogRecord; anything else was passed via `extra`.
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _get_log_dir(log_dir: Optional[Path] = None) -> Path:
    """Get log directory, creating it on first access."""

    from .errors import FileSystemError

    log_dir = log_dir or LOGS_DIR
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except Exception as e:
        raise FileSystemError(f"Failed to create log directory: {log_dir}") from e

    return log_dir


def _parse_level(level: str) -> int:
    """Translate a level name such as "INFO" into its numeric value."""

    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Invalid logging level: {level}")
    return value


## Custom JSON Formatter


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        if context:
            log_entry["context"] = context

        return json.dumps(log_entry, default=str)


## Main Log Manager


class LogManager:
    """Manages logging configuration and provides logger instances."""

    def __init__(
        self,
        log_level: str = "INFO",
        console_level: str = "WARNING",
        log_dir: Optional[Path] = None,
        max_file_size: int = 5_242_880,
        backup_count: int = 5,
    ):
        self.log_level = _parse_level(log_level)
        self.console_level = _parse_level(console_level)
        self.log_dir = log_dir
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.root_logger = logging.getLogger("linecli")
        self.root_logger.setLevel(logging.DEBUG)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup the stderr console handler and the JSON file handlers."""

        from .errors import FileSystemError, LineCliError

        try:
            for handler in list(self.root_logger.handlers):
                self.root_logger.removeHandler(handler)
                handler.close()

            # stdout carries the command protocol, so console logs go to stderr
            console_handler = RichHandler(
                console=get_console(),
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            console_handler.setLevel(self.console_level)
            console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

            log_dir = _get_log_dir(self.log_dir)

            try:
                app_handler = RotatingFileHandler(
                    log_dir / "app.log",
                    maxBytes=self.max_file_size,
                    backupCount=self.backup_count,
                    encoding="utf-8",
                )

            except OSError as e:
                raise FileSystemError(
                    f"Failed to create app.log handler: {str(e)}"
                ) from e

            app_handler.setLevel(self.log_level)
            app_handler.setFormatter(JSONFormatter())

            try:
                event_handler = RotatingFileHandler(
                    log_dir / "events.log",
                    maxBytes=self.max_file_size,
                    backupCount=self.backup_count,
                    encoding="utf-8",
                )

            except OSError as e:
                raise FileSystemError(
                    f"Failed to create events.log handler: {str(e)}"
                ) from e

            event_handler.setLevel(logging.INFO)
            event_handler.setFormatter(JSONFormatter())
            event_handler.addFilter(lambda record: hasattr(record, "event_type"))

            self.root_logger.addHandler(console_handler)
            self.root_logger.addHandler(app_handler)
            self.root_logger.addHandler(event_handler)

        except LineCliError:
            raise

        except Exception as e:
            raise FileSystemError(f"Failed to setup logging handlers: {str(e)}") from e

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Get a logger under the linecli namespace."""

        if not name:
            return self.root_logger
        if name == "linecli" or name.startswith("linecli."):
            return logging.getLogger(name)
        return logging.getLogger(f"linecli.{name}")

    def set_level(self, level: str):
        """Set the file logging level at runtime."""

        self.log_level = _parse_level(level)

        # events.log is the filtered file handler and keeps its own level
        for handler in self.root_logger.handlers:
            if isinstance(handler, RotatingFileHandler) and not handler.filters:
                handler.setLevel(self.log_level)

    def log_event(self, event_type: str, message: str, level: str = "INFO", **extra):
        """Log an event with specific type and extra context."""

        extra_dict = {"event_type": event_type}
        extra_dict.update(extra)

        self.root_logger.log(_parse_level(level), message, extra=extra_dict)


## Decorators for Logging


def log_call(func):
    """Decorator to log function calls and their duration."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger("linecli")
        func_name = f"{func.__module__}.{func.__qualname__}"
        logger.debug(f"-> Entering {func_name}")
        start_time = datetime.now()

        try:
            result = func(*args, **kwargs)
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Exiting {func_name} (Duration: {duration:.3f}s)")
            return result

        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Error in {func_name} after {duration:.3f}s: {e}")
            raise

    return wrapper


## Module-level LogManager Instance and Helper Functions

_log_manager: Optional[LogManager] = None


def init_logging(log_level: str = "INFO", **options) -> LogManager:
    """Initialize logging system and return LogManager instance.

    Calling this again after the first time returns the existing manager with
    its file level updated; pass ``force=True`` to rebuild the handlers.
    """

    global _log_manager

    force = options.pop("force", False)
    if _log_manager is None or force:
        _log_manager = LogManager(log_level, **options)
    else:
        _log_manager.set_level(log_level)

    return _log_manager


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance, initialising logging on first use."""

    global _log_manager
    if _log_manager is None:
        _log_manager = init_logging()

    return _log_manager.get_logger(name)


def log_event(event_type: str, message, **extra):
    """Log an event with specific type and extra context (module-level wrapper)."""

    global _log_manager
    if _log_manager is None:
        _log_manager = init_logging()

    if isinstance(message, dict):
        extra.update(message)
        message = f"Event: {event_type}"

    return _log_manager.log_event(event_type, message, **extra)
