"""Load the static roster of players to poll."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from core.logging.logger import get_logger
from domain.entities import PlayerRef
from domain.enums import Region

_log = get_logger(__name__, service="roster")

PLACEHOLDER_ROSTER: List[PlayerRef] = [
    PlayerRef(region=Region.NA1, game_name="ElielaNoix", tag_line="NA1"),
]


def _field(entry: dict, *names: str) -> str:
    for name in names:
        value = entry.get(name)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def parse_roster(raw: Any) -> List[PlayerRef]:
    """Turn decoded JSON into roster entries.

    Accepts ``gameName``/``tagLine`` or ``game_name``/``tag_line``. Invalid
    entries are skipped; duplicate keys keep the first occurrence.
    """
    if not isinstance(raw, list):
        raise ValueError("roster must be a JSON array")

    roster: List[PlayerRef] = []
    seen: set[str] = set()
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict):
            _log.warning(f"roster[{idx}] is not an object, skipped")
            continue
        region = Region.from_code(_field(entry, "region", "platform"))
        game_name = _field(entry, "gameName", "game_name")
        tag_line = _field(entry, "tagLine", "tag_line").lstrip("#")
        if region is None or not game_name or not tag_line:
            _log.warning(f"roster[{idx}] incomplete or unknown region, skipped: {entry!r}")
            continue
        ref = PlayerRef(region=region, game_name=game_name, tag_line=tag_line)
        if ref.key in seen:
            _log.warning(f"roster[{idx}] duplicates {ref.key}, skipped")
            continue
        seen.add(ref.key)
        roster.append(ref)
    return roster


def load_roster(path: Path) -> List[PlayerRef]:
    """Read the roster file once; fall back to a placeholder entry on any problem."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        roster = parse_roster(raw)
    except FileNotFoundError:
        _log.warning(f"Roster file {path} not found, using placeholder")
        return list(PLACEHOLDER_ROSTER)
    except (OSError, ValueError) as exc:
        _log.warning(f"Roster file {path} unreadable ({exc}), using placeholder")
        return list(PLACEHOLDER_ROSTER)

    if not roster:
        _log.warning(f"Roster file {path} has no usable entries, using placeholder")
        return list(PLACEHOLDER_ROSTER)

    _log.info(f"Loaded {len(roster)} roster entries from {path}")
    return roster
