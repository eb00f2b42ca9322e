"""
Context propagation providers.

A provider tracks the stack of active LogContexts for the current logical
flow and runs an operation with one more context pushed onto it. The
LoggingManager only ever calls current_context(); which provider is
installed is invisible to it.
"""

import warnings
from typing import TYPE_CHECKING, Awaitable, Callable, Protocol, Tuple, TypeVar

if TYPE_CHECKING:
    from .log_context import LogContext

T = TypeVar('T')

Operation = Callable[[], Awaitable[T]]


class LogContextProvider(Protocol):
    """Tracks the active context stack per logical flow."""

    def current_context(self) -> Tuple['LogContext', ...]:
        """Return the active stack, oldest (outermost) first."""
        ...

    async def run_in_context(self, context: 'LogContext',
                             operation: Operation) -> T:
        """Await operation with context pushed for its whole extent."""
        ...


class NoopContextProvider:
    """Default provider: no stack at all, contexts are inert.

    run_in_context() still awaits the operation, so code written against
    LogContext.use() works unchanged; it just gets no extra appenders or
    thresholds. A RuntimeWarning flags the missing provider.
    """

    def current_context(self) -> Tuple['LogContext', ...]:
        return ()

    async def run_in_context(self, context: 'LogContext',
                             operation: Operation) -> T:
        warnings.warn(
            "Attempting to use LogContext without any installed provider",
            RuntimeWarning,
            stacklevel=4,
        )
        return await operation()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_PROVIDER = NoopContextProvider()
