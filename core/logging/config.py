from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .context import ContextFilter
from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None

# Loggers that configure their own handlers unless told otherwise.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self._service
        return True


def bootstrap_logging(
    *,
    service: str = "tracker",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "tracker.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger: colored console plus a rotating JSON-lines file.

    The file handler sits behind a queue so request handlers and the poll
    loop never block on disk I/O.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    filters = [ContextFilter(), _ServiceFilter(service)]

    enable_console = os.getenv("LOG_CONSOLE", "true").strip().lower() == "true"
    if enable_console:
        console = logging.StreamHandler()
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        for f in filters:
            console.addFilter(f)
        root.addHandler(console)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        except OSError as exc:
            root.warning(f"File logging disabled ({log_dir}): {exc}")
        else:
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            qh = QueueHandler(q)
            for f in filters:
                qh.addFilter(f)
            root.addHandler(qh)
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
