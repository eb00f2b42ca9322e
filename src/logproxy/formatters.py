"""
Record formatters.

A formatter turns a LogRecord into something an appender can write:
either a string or a sequence of values. Formatters are pure and are
called synchronously by the appender that owns them.
"""

import json
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .record import LogRecord

Formatter = Callable[[LogRecord, Optional[Mapping[str, Any]]],
                     Union[str, Sequence[Any]]]


def console_formatter(record: LogRecord,
                      options: Optional[Mapping[str, Any]] = None) -> List[Any]:
    """Default console layout: '[category]  (level)  message' then the args."""
    return [f"[{record.category}]  ({record.level})  {record.message}",
            *record.args]


def json_formatter(record: LogRecord,
                   options: Optional[Mapping[str, Any]] = None) -> str:
    """Render the record as one JSON document.

    Values that JSON can't encode (in args or data) fall back to repr().

    Args:
        record: Record to render
        options: {'pretty': True} indents the document by 2 spaces
    """
    pretty = bool(options and options.get('pretty'))
    doc = {
        'category': record.category,
        'timestamp': record.timestamp,
        'level': str(record.level),
        'message': record.message,
        'args': list(record.args),
        'data': record.data,
    }
    return json.dumps(doc, indent=2 if pretty else None, default=repr)
