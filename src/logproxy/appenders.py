"""
Appender contract and the default console appender.

An appender receives every record routed to it by the LoggingManager and
produces a side effect (printing, writing, forwarding). Appenders may be
stateful and may raise; the manager isolates each append call so one
failing appender never stops the others.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, Protocol, TextIO, runtime_checkable

from .formatters import Formatter, console_formatter
from .levels import Level, rank_of
from .record import LogRecord


@runtime_checkable
class Appender(Protocol):
    """Anything with an append(record) method."""

    def append(self, record: LogRecord) -> None:
        ...


@dataclass
class ConsoleAppenderConfig:
    """Configuration for ConsoleAppender.

    Attributes:
        formatter: Renders a record to a string or a sequence of values
        file: Destination stream. None routes warn and above to stderr
            and everything else to stdout.
    """
    formatter: Formatter = field(default=console_formatter)
    file: Optional[TextIO] = None


class ConsoleAppender:
    """The default appender, used when no appenders are configured.

    Usage::

        manager.set_appenders(ConsoleAppender(file=sys.stderr))
    """

    def __init__(self, formatter: Formatter = None, file: TextIO = None):
        self.config = ConsoleAppenderConfig(
            formatter=formatter if formatter is not None else console_formatter,
            file=file,
        )

    def append(self, record: LogRecord) -> None:
        output = self.config.formatter(record, None)
        if output is None:
            return
        if isinstance(output, str):
            text = output
        else:
            text = ' '.join(str(part) for part in output)
        print(text, file=self._stream_for(record.level))

    def _stream_for(self, level: Level) -> TextIO:
        if self.config.file is not None:
            return self.config.file
        # Looked up per call so redirected sys streams are honored
        if rank_of(level) >= Level.WARN.rank:
            return sys.stderr
        return sys.stdout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file={self.config.file!r})"
