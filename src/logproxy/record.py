"""Immutable log record passed from loggers to appenders."""

from dataclasses import dataclass
from typing import Any, Tuple

from .levels import Level


@dataclass(frozen=True)
class LogRecord:
    """A single log event.

    Attributes:
        category: Category of the logger that produced the record
        timestamp: Milliseconds since the epoch
        level: Severity of the record
        message: Log message
        args: Extra positional values passed to the log call
        data: Optional structured payload
    """
    category: str
    timestamp: int
    level: Level
    message: str
    args: Tuple[Any, ...] = ()
    data: Any = None
