"""Errors raised by the Riot API client."""
from __future__ import annotations

import errno
from typing import Optional


class RiotAPIError(Exception):
    """A Riot API call that did not produce a usable response.

    ``status_code`` is set when the server answered with a non-2xx status,
    ``transport_code`` when there was no answer (timeout, DNS, refused...).
    A 2xx answer missing required data carries only ``reason``.
    """

    def __init__(
        self,
        *,
        url: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        transport_code: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.transport_code = transport_code
        super().__init__(f"{self.short_message} ({url})")

    @property
    def is_transport_error(self) -> bool:
        return self.transport_code is not None

    @property
    def short_message(self) -> str:
        """Compact description stored on the snapshot."""
        if self.status_code is not None:
            return f"{self.status_code} {self.reason}".strip() if self.reason else str(self.status_code)
        if self.transport_code is not None:
            return f"network error: {self.transport_code}"
        return self.reason or "unknown error"


def transport_code(exc: BaseException) -> str:
    """Name the underlying OS error (``ECONNREFUSED``...) or fall back to the exception class."""
    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        err_no = getattr(current, "errno", None)
        if isinstance(err_no, int) and err_no in errno.errorcode:
            return errno.errorcode[err_no]
        current = current.__cause__ or current.__context__
    return type(exc).__name__
