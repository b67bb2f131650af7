"""
tagparse Utils Package
======================

Logging utilities.
"""

from __future__ import annotations

from tagparse.utils.logger import (
    JsonFormatter,
    Logger,
    LogLevel,
    StreamHandler,
    TextFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "Logger",
    "LogLevel",
    "StreamHandler",
    "TextFormatter",
    "configure_logging",
    "get_logger",
]
