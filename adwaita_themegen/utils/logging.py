"""
Logging configuration for the Adwaita theme generator.

Console output goes through Rich on stderr so generated sources and reports on
stdout stay clean. With a log file, every record is also written as one JSON
object per line, carrying the generation stage it belongs to.
"""

import functools
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

from adwaita_themegen.config import get_settings

# Attributes every LogRecord has; anything else came from extra= or a context
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message"}


class StructuredFormatter(logging.Formatter):
    """Format records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ContextFilter(logging.Filter):
    """Copy the active generation context onto each record."""

    def __init__(self) -> None:
        super().__init__()
        self.context: dict[str, Any] = {}

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


# Shared by every handler installed by setup_logging
context_filter = ContextFilter()


def setup_logging(
    log_level: Optional[str] = None,
    log_file_path: Optional[Path] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level (defaults to settings)
        log_file_path: JSON log file (defaults to settings, none if unset)
    """
    settings = get_settings()

    log_level = log_level or settings.log_level
    log_file_path = log_file_path or settings.get_log_file_path()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.dev_mode,
    )
    console_handler.addFilter(context_filter)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file_path:
        log_file_path = Path(log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.addFilter(context_filter)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    # aiohttp logs every connection at debug level
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={"log_level": log_level, "log_file": str(log_file_path) if log_file_path else None},
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class LogContext:
    """Context manager adding fields to every record logged inside it."""

    def __init__(self, **kwargs: Any) -> None:
        self.context = kwargs
        self.previous: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self.previous = {
            key: context_filter.context[key] for key in self.context if key in context_filter.context
        }
        context_filter.context.update(self.context)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        for key in self.context:
            context_filter.context.pop(key, None)
        context_filter.context.update(self.previous)


def log_stage(stage: str):
    """
    Run a generation coroutine inside a logging stage and time it.

    Every record logged by the coroutine carries ``stage`` and ``function``.
    The final record also carries ``duration_seconds``, and ``error`` when it
    failed.

    Usage:
        @log_stage("icons")
        async def generate_icons(self) -> GenerationResult:
            ...
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            start_time = time.perf_counter()

            with LogContext(stage=stage, function=func.__name__):
                logger.debug(f"Starting {stage} stage")
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    logger.error(
                        f"{stage.capitalize()} stage failed",
                        extra={"duration_seconds": time.perf_counter() - start_time, "error": str(e)},
                    )
                    raise

                duration = time.perf_counter() - start_time
                logger.info(
                    f"{stage.capitalize()} stage done in {duration:.2f}s",
                    extra={"duration_seconds": duration},
                )
                return result

        return wrapper

    return decorator
