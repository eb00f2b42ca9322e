"""LogContext — a dynamically scoped overlay of appenders and threshold."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Tuple, Union

from ..appenders import Appender
from ..levels import Level, LEVEL_NAMES, to_level
from . import container
from .provider import Operation, T


@dataclass(frozen=True, eq=False)
class LogContext:
    """Extra appenders and/or a lowered threshold for a scoped operation.

    Contexts are immutable and compared by identity. One only takes effect
    while an operation passed to use() is running, and only when a
    propagating provider is installed (see install_contextvar_provider).

    Attributes:
        appenders: Appenders that receive records fired inside the scope,
            in addition to the global appenders
        threshold_level: If set, the threshold applied to matching
            categories while the context is active
        pattern: If set, only categories matching it use this context
        exclusive: Reserved flag; global appenders are always included
    """
    appenders: Tuple[Appender, ...] = ()
    threshold_level: Optional[Level] = None
    pattern: Optional[Pattern] = None
    exclusive: bool = False

    @classmethod
    def with_appenders(cls, appenders: Iterable[Appender] = (), *,
                       pattern: Union[str, Pattern, None] = None,
                       exclusive: bool = False,
                       threshold_level: Union[Level, str, None] = None,
                       ) -> 'LogContext':
        """Create a new context.

        Args:
            appenders: Additional appenders for the context
            pattern: Restrict the context to matching categories. Strings
                are compiled as regular expressions.
            exclusive: Stored on the context, not acted upon
            threshold_level: Threshold for matching categories

        Raises:
            ValueError: if threshold_level is not a recognized level
            re.error: if pattern is not a valid regular expression
        """
        level = None
        if threshold_level is not None:
            level = to_level(threshold_level)
            if level is None:
                raise ValueError(
                    f"Invalid context threshold level {threshold_level!r}, "
                    f"must be one of: {', '.join(LEVEL_NAMES)}"
                )
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        return cls(appenders=tuple(appenders), threshold_level=level,
                   pattern=pattern, exclusive=bool(exclusive))

    def applies_to(self, category: str) -> bool:
        return self.pattern is None or self.pattern.search(category) is not None

    async def use(self, operation: Operation) -> T:
        """Await operation with this context active for its whole extent.

        Everything the operation awaits, including tasks it creates,
        sees this context. When it finishes, successfully or not, the
        previous stack is restored.
        """
        return await container.run_in_context(self, operation)
