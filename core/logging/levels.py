from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_CUSTOM = (LogLevel.TRACE, LogLevel.SUCCESS)


def register_levels() -> None:
    for lvl in _CUSTOM:
        if logging.getLevelName(int(lvl)) == f"Level {int(lvl)}":
            logging.addLevelName(int(lvl), lvl.name)


def to_level(value: int | str) -> int:
    """Accept ``"info"``, ``"TRACE"``, ``25``...; unknown names map to INFO."""
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO
