"""
Logger — the per-category façade.

A Logger decides locally whether a level is enabled and, if so, builds a
LogRecord and hands it to its LoggingManager. The effective threshold is
the most verbose of:

    - the manager's root threshold
    - the manager's override for this category (active contexts and the
      global override table)
    - this logger's own override level

so an override can only make a category louder, never quieter.
"""

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from .levels import Level, LEVEL_NAMES, LEVEL_THRESHOLDS, rank_of, to_level
from .record import LogRecord

if TYPE_CHECKING:
    from .manager import LoggingManager

CategoryInterpolator = Callable[[str], str]


def identity_interpolator(category: str) -> str:
    """Default interpolator: the identifier is the category."""
    return category


@dataclass
class LoggerOptions:
    """Options for LoggingManager.get_logger().

    Only used when the logger is first created; later requests for the
    same category get the cached logger unchanged.

    Attributes:
        category_interpolator: Maps the requested identifier to a category
        override_level: Initial per-logger override level
    """
    category_interpolator: CategoryInterpolator = identity_interpolator
    override_level: Optional[Union[Level, str]] = None


class Logger:
    """Leveled logging for one category.

    Usage::

        log = get_logger('svc:payments')
        if log.is_debug_enabled():
            log.debug("cart %s", expensive_dump(cart))
        log.info("charged", order_id)
    """

    def __init__(self, manager: 'LoggingManager', category: str,
                 options: LoggerOptions = None):
        self.manager = manager
        self.category = category
        self.options = options if options is not None else LoggerOptions()
        self._override_level: Optional[Level] = None
        if self.options.override_level is not None:
            self.set_override_level(self.options.override_level)

    # -------------------------------------------------------------------------
    # Override level
    # -------------------------------------------------------------------------

    @property
    def override_level(self) -> Optional[Level]:
        return self._override_level

    @property
    def override_threshold(self) -> Optional[int]:
        if self._override_level is None:
            return None
        return LEVEL_THRESHOLDS[self._override_level]

    def set_override_level(self, level: Optional[Union[Level, str]]) -> 'Logger':
        """Set or clear (with None) this logger's override level.

        Raises:
            ValueError: if level is not None and not a recognized level.
                The previous override is kept.
        """
        if not level:
            self._override_level = None
            return self
        normalized = to_level(level)
        if normalized is None:
            raise ValueError(
                f"Invalid override level {level!r}, must be a log level "
                f"({', '.join(LEVEL_NAMES)})"
            )
        self._override_level = normalized
        return self

    # -------------------------------------------------------------------------
    # Enablement
    # -------------------------------------------------------------------------

    def threshold(self) -> int:
        """Effective threshold rank for this category right now."""
        threshold = self.manager.root_threshold
        override = self.manager.determine_threshold_override(self.category)
        if override is not None and override < threshold:
            threshold = override
        own = self.override_threshold
        if own is not None and own < threshold:
            threshold = own
        return threshold

    def is_enabled(self, level: Union[Level, str]) -> bool:
        return rank_of(level) >= self.threshold()

    def is_trace_enabled(self) -> bool:
        return self.is_enabled(Level.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_enabled(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled(Level.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled(Level.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled(Level.ERROR)

    def is_fatal_enabled(self) -> bool:
        return self.is_enabled(Level.FATAL)

    # -------------------------------------------------------------------------
    # Emit
    # -------------------------------------------------------------------------

    def log(self, level_or_record: Union[Level, str, LogRecord],
            message: str = '', *args: Any, data: Any = None) -> None:
        """Forward a record to the manager without checking thresholds.

        Accepts either a ready LogRecord, or a level followed by the
        message and args. Callers that already checked is_enabled() use
        this to skip a second check.
        """
        if isinstance(level_or_record, LogRecord):
            record = level_or_record
        else:
            record = self._to_record(level_or_record, message, args, data)
        self.manager.fire(record)

    def trace(self, message: str, *args: Any) -> None:
        self._log_if_enabled(Level.TRACE, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._log_if_enabled(Level.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log_if_enabled(Level.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._log_if_enabled(Level.WARN, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._log_if_enabled(Level.ERROR, message, args)

    def fatal(self, message: str, *args: Any) -> None:
        self._log_if_enabled(Level.FATAL, message, args)

    def _log_if_enabled(self, level: Level, message: str, args: tuple) -> None:
        if self.is_enabled(level):
            self.manager.fire(self._to_record(level, message, args, None))

    def _to_record(self, level, message, args, data) -> LogRecord:
        normalized = to_level(level)
        if normalized is None:
            raise ValueError(f"Invalid level {level!r}")
        return LogRecord(
            category=self.category,
            timestamp=time.time_ns() // 1_000_000,
            level=normalized,
            message=message,
            args=tuple(args),
            data=data,
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(category={self.category!r}, "
                f"override_level={self._override_level!r})")
