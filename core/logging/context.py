from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


class context(object):
    """Bind key/values to every record logged inside the ``with`` block.

    Bindings are per asyncio task, so a poll cycle's ``player=...`` never
    leaks into a concurrent request handler's records.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token = None

    def __enter__(self):
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _context.reset(self._token)
        return False


class ContextFilter(logging.Filter):
    """Copy the bound context onto the record before it crosses a queue."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "log_context"):
            record.log_context = get_context()
        return True
