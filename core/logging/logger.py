from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from .levels import LogLevel


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


class StructuredLogger:
    """Thin wrapper adding SUCCESS/TRACE, lazy messages and a service tag."""

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    def _log(self, level: int, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        message = msg() if callable(msg) else msg
        extra = kwargs.pop("extra", None) or {}
        if self._service and "service" not in extra:
            extra["service"] = self._service
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, str(message), *args, extra=extra, **kwargs)

    def trace(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.TRACE), msg, *args, **kwargs)

    def debug(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def success(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, *args, **kwargs)

    def warning(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: SupportsStr | Callable[[], SupportsStr], *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    logger = logging.getLogger(name)
    return StructuredLogger(logger, service=service)
