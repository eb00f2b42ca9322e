"""
Process-wide slot holding the installed context provider.

Call set_provider() (or install_contextvar_provider()) once at startup.
Until then the no-op provider is used and contexts have no effect.
"""

from typing import Optional, Tuple

from .provider import DEFAULT_PROVIDER, LogContextProvider, Operation, T

_provider: LogContextProvider = DEFAULT_PROVIDER


def set_provider(provider: Optional[LogContextProvider]) -> None:
    """Install a provider. None restores the no-op default."""
    global _provider
    _provider = provider if provider is not None else DEFAULT_PROVIDER


def get_provider() -> LogContextProvider:
    """Get the installed provider."""
    return _provider


def current_context() -> Tuple:
    """Active context stack for the current flow, outermost first."""
    return tuple(_provider.current_context() or ())


async def run_in_context(context, operation: Operation) -> T:
    """Run operation with context active, via the installed provider."""
    return await _provider.run_in_context(context, operation)


def install_contextvar_provider():
    """Install a ContextVarProvider and return it."""
    from .contextvar_provider import ContextVarProvider

    provider = ContextVarProvider()
    set_provider(provider)
    return provider
