"""
logproxy — leveled logging façade with scoped log contexts.

Loggers are obtained per category from a process-wide LoggingManager,
which routes records to pluggable appenders. Verbosity can be raised
globally (root level), by category (threshold overrides), per logger
(override level), or for the extent of an async operation (LogContext).

Public API:
    get_logger            — logger for a category from the global manager
    get_logging_manager   — access the LoggingManager singleton
    LoggingManager        — central coordinator
    Logger                — per-category façade
    LoggerOptions         — options for get_logger
    Level                 — trace < debug < info < warn < error < fatal
    LogRecord             — immutable record handed to appenders
    Appender              — appender protocol
    ConsoleAppender       — default appender
    console_formatter / json_formatter — record formatters
    ThresholdOverride     — one global override entry
    parse_threshold_overrides — parse "pattern[=level],..." specs
    LogContext            — scoped appenders / threshold overlay
    install_contextvar_provider — enable context propagation
    trace                 — function tracing decorator
"""

from ._version import __version__, __app_name__
from .levels import (
    Level, LEVEL_NAMES, LEVEL_THRESHOLDS, rank_of, is_valid_level, to_level,
)
from .record import LogRecord
from .formatters import Formatter, console_formatter, json_formatter
from .appenders import Appender, ConsoleAppender, ConsoleAppenderConfig
from .overrides import ThresholdOverride, parse_threshold_overrides
from .context import (
    LogContext, LogContextProvider, NoopContextProvider, ContextVarProvider,
    set_provider, get_provider, current_context, install_contextvar_provider,
)
from .logger import Logger, LoggerOptions, identity_interpolator
from .manager import LoggingManager, get_logging_manager, get_logger
from .config import parse_config, load_config, configure_from_file
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'Level', 'LEVEL_NAMES', 'LEVEL_THRESHOLDS', 'rank_of', 'is_valid_level', 'to_level',
    'LogRecord',
    'Formatter', 'console_formatter', 'json_formatter',
    'Appender', 'ConsoleAppender', 'ConsoleAppenderConfig',
    'ThresholdOverride', 'parse_threshold_overrides',
    'LogContext', 'LogContextProvider', 'NoopContextProvider', 'ContextVarProvider',
    'set_provider', 'get_provider', 'current_context', 'install_contextvar_provider',
    'Logger', 'LoggerOptions', 'identity_interpolator',
    'LoggingManager', 'get_logging_manager', 'get_logger',
    'parse_config', 'load_config', 'configure_from_file',
    'trace',
]
