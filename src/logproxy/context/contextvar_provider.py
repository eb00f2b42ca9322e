"""
ContextVar-backed context provider.

The active stack is a tuple held in a ContextVar, so it follows the
logical flow rather than the OS thread:

- asyncio copies the current context when a task is created, so tasks
  spawned inside a use() block see the stack that was active there
- a push inside one task is never visible to its siblings
- the variable is reset in a finally block, so the prior stack comes
  back even when the operation raises or is cancelled

Usage::

    from logproxy import LogContext, install_contextvar_provider

    install_contextvar_provider()
    await LogContext.with_appenders([audit], threshold_level='trace').use(job)
"""

from contextvars import ContextVar
from typing import TYPE_CHECKING, Tuple

from .provider import Operation, T

if TYPE_CHECKING:
    from .log_context import LogContext

_STACK: ContextVar[Tuple['LogContext', ...]] = ContextVar(
    'logproxy_context_stack', default=()
)


class ContextVarProvider:
    """Tracks the context stack per logical flow using contextvars."""

    def current_context(self) -> Tuple['LogContext', ...]:
        return _STACK.get()

    async def run_in_context(self, context: 'LogContext',
                             operation: Operation) -> T:
        stack = _STACK.get()
        # Re-entering an active context doesn't stack it twice
        if context not in stack:
            stack = stack + (context,)
        token = _STACK.set(stack)
        try:
            return await operation()
        finally:
            _STACK.reset(token)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
