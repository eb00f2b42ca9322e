"""
Function tracing decorator.

Logs calls at trace level on the logger named after the function's
module, so tracing for a module is switched on the same way as any other
verbosity: root level, a threshold override, or an active LogContext.
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _format_args(func, args, kwargs):
    args_repr = []

    # Methods show 'self' instead of the instance
    remaining_args = args
    if args and '.' in func.__qualname__ and func.__name__ != '__init__':
        params = list(inspect.signature(func).parameters)
        if params and params[0] in ('self', 'cls'):
            args_repr.append(params[0])
            remaining_args = args[1:]

    args_repr.extend(_short_repr(arg) for arg in remaining_args)
    args_repr.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())
    return ', '.join(args_repr)


def trace(func):
    """Decorator to trace function calls via the module's logger.

    Shows function entry/exit with arguments and return values when
    trace is enabled for the module's category. Arguments are only
    rendered when tracing is on. Works on coroutine functions too.
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    func_name = func.__name__

    def _logger():
        # Lazy import to avoid circular dependency
        from .manager import get_logging_manager
        return get_logging_manager().get_logger(module_name)

    def _enter(log, args, kwargs):
        log.log('trace', ">> {mod}.{fn}({args})".format(
            mod=module_name, fn=func_name, args=_format_args(func, args, kwargs)))

    def _exit(log, result):
        if result is not None:
            log.log('trace', "<< {mod}.{fn} returned: {val}".format(
                mod=module_name, fn=func_name, val=_short_repr(result)))

    def _raised(log, e):
        log.log('trace', "!! {mod}.{fn} raised: {exc}: {msg}".format(
            mod=module_name, fn=func_name, exc=type(e).__name__, msg=str(e)))

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = _logger()
            if not log.is_trace_enabled():
                return await func(*args, **kwargs)
            _enter(log, args, kwargs)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _raised(log, e)
                raise
            _exit(log, result)
            return result

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        log = _logger()
        if not log.is_trace_enabled():
            return func(*args, **kwargs)
        _enter(log, args, kwargs)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _raised(log, e)
            raise
        _exit(log, result)
        return result

    return wrapper
