"""
LoggingManager — the process-wide coordinator.

Owns the root level, the global appenders, the global threshold override
table and the logger cache. Loggers ask it for the threshold that applies
to their category and hand it the records they emit.

Threshold resolution for a category:
    root threshold
    min(active context thresholds, first matching global override)
    logger override
    ── effective threshold = minimum of whichever are present

Record routing:
    global appenders, then the appenders of every active context whose
    pattern matches the record's category (outermost context first)

Configuration writes swap immutable tuples under a lock; the hot path
(enabled checks and fire) only reads them.
"""

import sys
import threading
from typing import Any, Dict, Iterable, List, Optional, TextIO, Tuple, Union

from .appenders import Appender, ConsoleAppender
from .context import container
from .context.log_context import LogContext
from .levels import Level, LEVEL_NAMES, LEVEL_THRESHOLDS, to_level
from .logger import Logger, LoggerOptions
from .overrides import ThresholdOverride
from .record import LogRecord


def _flatten(items: Iterable[Any]) -> List[Any]:
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


class LoggingManager:
    """Central coordinator for loggers, appenders and thresholds.

    Appender failures never reach the log call site; they are reported to
    the diagnostic stream (default: stderr).

    Usage::

        manager = LoggingManager()
        manager.set_root_level('warn').add_threshold_overrides(
            (re.compile('svc:'), 'debug'))
        log = manager.get_logger('svc:payments')
        log.debug("visible, svc:* is pinned to debug")
    """

    def __init__(self, file: TextIO = None):
        self.file = file
        self._lock = threading.Lock()
        self._root_level: Level = Level.INFO
        self._appenders: Tuple[Appender, ...] = ()
        self._threshold_overrides: Tuple[ThresholdOverride, ...] = ()
        self._loggers: Dict[str, Logger] = {}

    # -------------------------------------------------------------------------
    # Root level
    # -------------------------------------------------------------------------

    @property
    def root_level(self) -> Level:
        return self._root_level

    @root_level.setter
    def root_level(self, level: Union[Level, str]) -> None:
        self.set_root_level(level)

    @property
    def root_threshold(self) -> int:
        return LEVEL_THRESHOLDS[self._root_level]

    def set_root_level(self, level: Union[Level, str]) -> 'LoggingManager':
        """Set the root logging level.

        Raises:
            ValueError: if level is not a recognized level
        """
        normalized = to_level(level)
        if normalized is None:
            raise ValueError(
                f"Invalid root level {level!r}, must be one of: {', '.join(LEVEL_NAMES)}"
            )
        self._root_level = normalized
        return self

    # -------------------------------------------------------------------------
    # Appenders
    # -------------------------------------------------------------------------

    @property
    def appenders(self) -> Tuple[Appender, ...]:
        """Global appenders. Falls back to one ConsoleAppender when empty."""
        appenders = self._appenders
        if appenders:
            return appenders
        with self._lock:
            if not self._appenders:
                self._appenders = (ConsoleAppender(),)
            return self._appenders

    def set_appenders(self, *appenders: Union[Appender, Iterable[Appender]]
                      ) -> 'LoggingManager':
        """Replace the global appenders. Lists and tuples are flattened."""
        new = tuple(_flatten(appenders))
        with self._lock:
            self._appenders = new
        return self

    def add_appenders(self, *appenders: Union[Appender, Iterable[Appender]]
                      ) -> 'LoggingManager':
        """Append to the global appenders."""
        new = tuple(_flatten(appenders))
        with self._lock:
            self._appenders = self._appenders + new
        return self

    # -------------------------------------------------------------------------
    # Threshold overrides
    # -------------------------------------------------------------------------

    @property
    def threshold_overrides(self) -> Tuple[ThresholdOverride, ...]:
        return self._threshold_overrides

    @threshold_overrides.setter
    def threshold_overrides(self, overrides: Iterable[Any]) -> None:
        self.set_threshold_overrides(*overrides)

    def set_threshold_overrides(self, *overrides: Any) -> 'LoggingManager':
        """Replace the override table.

        Each override is a ThresholdOverride or a (match, level) pair.
        Nothing changes if any entry is invalid.
        """
        new = tuple(ThresholdOverride.coerce(o) for o in overrides)
        with self._lock:
            self._threshold_overrides = new
        return self

    def add_threshold_overrides(self, *overrides: Any) -> 'LoggingManager':
        """Append to the override table (first match wins on lookup)."""
        new = tuple(ThresholdOverride.coerce(o) for o in overrides)
        with self._lock:
            self._threshold_overrides = self._threshold_overrides + new
        return self

    def clear_threshold_overrides(self) -> 'LoggingManager':
        with self._lock:
            self._threshold_overrides = ()
        return self

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def get_applicable_contexts(self, category: str) -> List[LogContext]:
        """Active contexts (outermost first) that apply to category."""
        return [ctx for ctx in container.current_context()
                if ctx.applies_to(category)]

    def determine_threshold_override(self, category: str) -> Optional[int]:
        """Most verbose override rank for category, or None.

        Candidates are the threshold levels of applicable active contexts
        and the first entry of the global table that matches category.
        """
        candidates = [LEVEL_THRESHOLDS[ctx.threshold_level]
                      for ctx in self.get_applicable_contexts(category)
                      if ctx.threshold_level is not None]
        for override in self._threshold_overrides:
            if override.matches(category):
                candidates.append(LEVEL_THRESHOLDS[override.level])
                break
        return min(candidates) if candidates else None

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def fire(self, record: LogRecord) -> None:
        """Deliver record to global and applicable context appenders.

        Every appender is called even if an earlier one raises.
        """
        appenders = list(self.appenders)
        for ctx in self.get_applicable_contexts(record.category):
            appenders.extend(ctx.appenders)
        for appender in appenders:
            try:
                appender.append(record)
            except Exception as e:
                self._report_failure(appender, e)

    def _report_failure(self, appender: Appender, error: Exception) -> None:
        message = (f"logproxy: appender {appender!r} failed: "
                   f"{type(error).__name__}: {error}")
        try:
            print(message, file=self.file if self.file is not None else sys.stderr)
        except Exception:
            # Diagnostic stream is gone (closed, detached); last resort
            print(message, file=sys.__stderr__)

    # -------------------------------------------------------------------------
    # Loggers
    # -------------------------------------------------------------------------

    def get_logger(self, category: str, options: LoggerOptions = None,
                   **kwargs: Any) -> Logger:
        """Get the cached logger for a category, creating it if needed.

        Options (or the equivalent keyword arguments) only apply when the
        logger is created. Exceptions from the category interpolator
        propagate to the caller.
        """
        if options is None:
            options = LoggerOptions(**kwargs)
        resolved = options.category_interpolator(category)

        logger = self._loggers.get(resolved)
        if logger is not None:
            return logger
        with self._lock:
            logger = self._loggers.get(resolved)
            if logger is None:
                logger = Logger(self, resolved, options)
                self._loggers[resolved] = logger
            return logger

    @property
    def loggers(self) -> Dict[str, Logger]:
        """Snapshot of the logger cache."""
        return dict(self._loggers)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(self, root_level: Union[Level, str] = None,
                  appenders: Iterable[Appender] = None,
                  threshold_overrides: Iterable[Any] = None,
                  ) -> 'LoggingManager':
        """Apply a partial configuration.

        Additive: only the given fields change. An unrecognized
        root_level is ignored; appenders replace the global set;
        threshold_overrides are appended to the table.
        """
        if root_level is not None and to_level(root_level) is not None:
            self.set_root_level(root_level)
        if appenders is not None:
            self.set_appenders(*appenders)
        if threshold_overrides is not None:
            self.add_threshold_overrides(*threshold_overrides)
        return self

    @classmethod
    def get(cls, **options: Any) -> 'LoggingManager':
        """The process-wide manager; see get_logging_manager()."""
        return get_logging_manager(**options)


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[LoggingManager] = None
_manager_lock = threading.Lock()


def get_logging_manager(**options: Any) -> LoggingManager:
    """Get the module-level LoggingManager, creating it if needed.

    Keyword options are passed to configure() on every call that
    provides them.

    Args:
        **options: root_level, appenders, threshold_overrides

    Returns:
        The process-wide LoggingManager
    """
    global _manager
    manager = _manager
    if manager is None:
        with _manager_lock:
            if _manager is None:
                _manager = LoggingManager()
            manager = _manager
    if options:
        manager.configure(**options)
    return manager


def get_logger(category: str, options: LoggerOptions = None,
               **kwargs: Any) -> Logger:
    """Get a logger from the process-wide manager."""
    return get_logging_manager().get_logger(category, options, **kwargs)
