"""
tagparse Logger
===============

Small structured logger for the command-line tools.

A record is a level, a message and key=value context. Records below the
logger's level are dropped; the rest are formatted as text or JSON and
written to a stream (stderr unless one is given).

Example:
    logger = configure_logging("info", format="json")
    logger.with_context(command="parse").info("Parsed tag", name="div")
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Optional, TextIO, Union


class LogLevel(IntEnum):
    """Severity levels, numbered like the stdlib ``logging`` ones."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_name(cls, name: Union[str, "LogLevel"]) -> "LogLevel":
        """
        Resolve a level name such as ``"debug"``.

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(name, LogLevel):
            return name
        try:
            return cls[name.upper()]
        except KeyError:
            known = ", ".join(level.name.lower() for level in cls)
            raise ValueError(
                f"Unknown log level {name!r} (expected one of: {known})"
            ) from None


@dataclass
class LogRecord:
    level: LogLevel
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


class TextFormatter:
    """
    One line per record.

    Example output:
        2024-01-15 10:30:45 [INFO] Parsed tag command=parse name=div
    """

    COLORS = {
        LogLevel.DEBUG: "\033[36m",
        LogLevel.INFO: "\033[32m",
        LogLevel.WARNING: "\033[33m",
        LogLevel.ERROR: "\033[31m",
    }

    def __init__(self, colors: bool = False) -> None:
        self.colors = colors

    def format(self, record: LogRecord) -> str:
        level = record.level.name
        if self.colors:
            level = f"{self.COLORS[record.level]}{level}\033[0m"

        parts = [
            record.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            f"[{level}]",
            record.message,
        ]
        parts.extend(f"{key}={value}" for key, value in record.context.items())
        return " ".join(parts)


class JsonFormatter:
    """One JSON object per record."""

    def format(self, record: LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": record.timestamp.isoformat(),
            "level": record.level.name,
            "message": record.message,
        }
        if record.context:
            data["context"] = record.context
        return json.dumps(data, default=str)


Formatter = Union[TextFormatter, JsonFormatter]


class StreamHandler:
    """Writes formatted records to a stream."""

    def __init__(self, formatter: Formatter, stream: Optional[TextIO] = None) -> None:
        self.formatter = formatter
        self.stream = stream

    def emit(self, record: LogRecord) -> None:
        # Looked up per record so a replaced sys.stderr is honoured
        stream = self.stream or sys.stderr
        stream.write(self.formatter.format(record) + "\n")
        stream.flush()


class Logger:
    """
    Level-filtered logger carrying key=value context.

    ``with_context`` returns a child that shares the level and handler and
    adds its context to every record.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.WARNING,
        handler: Optional[StreamHandler] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.level = level
        self.handler = handler or StreamHandler(TextFormatter())
        self.context = dict(context or {})

    def with_context(self, **context: Any) -> "Logger":
        return Logger(self.level, self.handler, {**self.context, **context})

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        if level < self.level:
            return
        record = LogRecord(level, message, {**self.context, **context})
        self.handler.emit(record)

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)


_default: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the process-wide logger, creating a quiet one if needed."""
    global _default
    if _default is None:
        _default = Logger()
    return _default


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.WARNING,
    format: str = "text",
    colors: bool = True,
    stream: Optional[TextIO] = None,
) -> Logger:
    """
    Replace the process-wide logger.

    Args:
        level: Level or level name
        format: "text" or "json"
        colors: Color level names when writing text to a terminal
        stream: Output stream (stderr by default)

    Raises:
        ValueError: For an unknown level or format
    """
    global _default

    if format == "json":
        formatter: Formatter = JsonFormatter()
    elif format == "text":
        target = stream or sys.stderr
        formatter = TextFormatter(colors=colors and target.isatty())
    else:
        raise ValueError(f"Unknown log format {format!r} (expected text or json)")

    _default = Logger(LogLevel.from_name(level), StreamHandler(formatter, stream))
    return _default
