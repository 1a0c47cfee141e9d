from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context


def _context_of(record: logging.LogRecord) -> Dict[str, Any]:
    ctx = getattr(record, "log_context", None)
    return ctx if ctx is not None else get_context()


_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
        "task": getattr(record, "taskName", None),
    }


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        try:
            md = _record_metadata(record)
            ctx = _context_of(record)
            lvl = record.levelname
            parts = [
                md["timestamp"],
                f"{lvl:<7}",
                md["service"] or "-",
                f"{md['logger']}:{md['line_number']}",
                record.getMessage(),
            ]
            if ctx:
                parts.append(" ".join(f"{k}={v}" for k, v in ctx.items()))
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            line = " | ".join(parts)
            if not self._color:
                return line
            return f"{_LEVEL_COLORS.get(lvl, '')}{line}{_RESET}"
        except Exception:
            return record.getMessage()


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            payload: Dict[str, Any] = _record_metadata(record)
            payload["message"] = record.getMessage()
            ctx = _context_of(record)
            if ctx:
                payload["context"] = ctx
            if record.exc_info:
                payload["exception"] = self.formatException(record.exc_info)
            return json.dumps(payload, default=str, separators=(",", ":"))
        except Exception:
            return json.dumps({"message": "log format error"}, separators=(",", ":"))
