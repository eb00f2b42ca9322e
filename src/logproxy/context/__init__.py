"""
Log contexts and their propagation providers.

Public API:
    LogContext                   — scoped appenders / threshold overlay
    LogContextProvider           — provider protocol
    NoopContextProvider          — default provider, contexts are inert
    ContextVarProvider           — contextvars-backed provider
    set_provider / get_provider  — install or read the active provider
    current_context              — active stack for the current flow
    install_contextvar_provider  — install a ContextVarProvider
"""

from .log_context import LogContext
from .provider import LogContextProvider, NoopContextProvider
from .contextvar_provider import ContextVarProvider
from .container import (
    set_provider, get_provider, current_context, run_in_context,
    install_contextvar_provider,
)

__all__ = [
    'LogContext',
    'LogContextProvider', 'NoopContextProvider', 'ContextVarProvider',
    'set_provider', 'get_provider', 'current_context', 'run_in_context',
    'install_contextvar_provider',
]
