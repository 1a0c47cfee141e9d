"""In-memory store of the latest snapshot per roster entry."""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from domain.entities import PlayerRef, Snapshot


class SnapshotCache:
    """Process-lifetime mapping of ``region:gameName#tagLine`` to Snapshot.

    Written only by the poll use case, read by the web handlers. Both run
    on one event loop and mutations contain no awaits, so readers never see
    a half-applied update.
    """

    def __init__(self) -> None:
        self._items: Dict[str, Snapshot] = {}

    def get(self, key: str) -> Optional[Snapshot]:
        return self._items.get(key)

    def get_or_create(self, ref: PlayerRef) -> Snapshot:
        snap = self._items.get(ref.key)
        if snap is None:
            snap = Snapshot.for_player(ref)
            self._items[ref.key] = snap
        return snap

    def snapshots(self) -> List[Snapshot]:
        """All snapshots in first-polled order."""
        return list(self._items.values())

    def to_records(self) -> List[dict]:
        return [s.to_dict() for s in self._items.values()]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots())
