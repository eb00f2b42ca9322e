"""
Severity levels and their ranks.

Levels are a closed, ordered set. Each level's rank is its position in
declaration order, and the emit rule compares ranks:

    rank(record.level) >= threshold  ->  record is emitted

Level ranks:
    <── louder ────────── default ────────── quieter ──>
     0      1      2     3      4      5
    trace  debug  info  warn  error  fatal
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Level(str, Enum):
    """Log severities, most verbose first."""
    TRACE = 'trace'
    DEBUG = 'debug'
    INFO = 'info'
    WARN = 'warn'
    ERROR = 'error'
    FATAL = 'fatal'

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return LEVEL_THRESHOLDS[self]


LEVEL_NAMES: Tuple[str, ...] = tuple(level.value for level in Level)

LEVEL_THRESHOLDS: Dict[Level, int] = {level: i for i, level in enumerate(Level)}

_BY_NAME: Dict[str, Level] = {level.value: level for level in Level}


def to_level(candidate: Any) -> Optional[Level]:
    """Normalize a level name or member, or return None if unrecognized.

    Names are matched case-insensitively ('DEBUG', 'Debug' and 'debug'
    are all Level.DEBUG).
    """
    if isinstance(candidate, Level):
        return candidate
    if not isinstance(candidate, str):
        return None
    return _BY_NAME.get(candidate.lower())


def is_valid_level(candidate: Any) -> bool:
    """True if candidate names one of the fixed levels."""
    return to_level(candidate) is not None


def rank_of(level: Any) -> int:
    """Return the integer rank of a level.

    Raises:
        ValueError: if level is not a recognized level
    """
    normalized = to_level(level)
    if normalized is None:
        raise ValueError(
            f"Invalid level {level!r}, must be one of: {', '.join(LEVEL_NAMES)}"
        )
    return LEVEL_THRESHOLDS[normalized]
