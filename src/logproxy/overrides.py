"""
Global threshold overrides.

An override pins a verbosity threshold for matching categories without
lowering the root level for the whole process. Matchers are either an
exact category string or a compiled regular expression (searched, so
'svc:' matches 'svc:payments').

Override spec syntax (compact, comma separated):
    PATTERN[=LEVEL],PATTERN[=LEVEL],...

    Examples:
        svc:.*                  # svc:* categories at the default level (debug)
        svc:.*=trace,db=info    # per-item levels
"""

import re
from dataclasses import dataclass
from typing import Any, List, Pattern, Union

from .levels import Level, to_level, LEVEL_NAMES

CategoryMatch = Union[str, Pattern]


@dataclass(frozen=True)
class ThresholdOverride:
    """One entry of the global override table.

    Attributes:
        match: Exact category string, or a compiled pattern
        level: Threshold applied to matching categories
    """
    match: CategoryMatch
    level: Level

    def matches(self, category: str) -> bool:
        if isinstance(self.match, str):
            return self.match == category
        return self.match.search(category) is not None

    @classmethod
    def coerce(cls, value: Any) -> 'ThresholdOverride':
        """Build an override from an instance or a (match, level) pair.

        Raises:
            ValueError: if the level is not a recognized level
            TypeError: if the value or its matcher has the wrong shape
        """
        if isinstance(value, ThresholdOverride):
            return value
        try:
            match, level_name = value
        except (TypeError, ValueError):
            raise TypeError(
                f"Threshold override must be a (match, level) pair, got {value!r}"
            ) from None
        if not isinstance(match, (str, re.Pattern)):
            raise TypeError(
                f"Override matcher must be a string or compiled pattern, got {match!r}"
            )
        level = to_level(level_name)
        if level is None:
            raise ValueError(
                f"Invalid override level {level_name!r}, "
                f"must be one of: {', '.join(LEVEL_NAMES)}"
            )
        return cls(match=match, level=level)


def parse_threshold_overrides(spec: str,
                              level: Union[Level, str] = Level.DEBUG
                              ) -> List[ThresholdOverride]:
    """Parse a comma-separated override spec into pattern overrides.

    Every item is compiled as a regular expression. Items without an
    explicit '=LEVEL' use `level`. Empty items are skipped.

    Args:
        spec: Override spec string like "svc:.*,db=info"
        level: Default level for items without one

    Returns:
        List of ThresholdOverride in spec order

    Raises:
        re.error: if an item is not a valid regular expression
        ValueError: if a level is not recognized
    """
    overrides = []
    for item in spec.split(','):
        item = item.strip()
        if not item:
            continue
        pattern, sep, item_level = item.rpartition('=')
        # A non-alphabetic suffix belongs to the pattern itself
        if not sep or not item_level.isalpha():
            pattern, item_level = item, level
        overrides.append(ThresholdOverride.coerce((re.compile(pattern), item_level)))
    return overrides
