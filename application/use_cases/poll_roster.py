"""Use case for one poll cycle over the roster."""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from application.services.snapshot_cache import SnapshotCache
from core.logging.context import context
from core.logging.logger import get_logger
from domain.entities import PlayerRef
from domain.interfaces import IPlayerRepository
from infrastructure.api import RiotAPIError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class PollOutcome:
    """Result of polling one roster entry."""
    key: str
    ok: bool
    error: Optional[str] = None


@dataclass(slots=True)
class CycleReport:
    """Aggregated outcome of a full pass over the roster."""
    started_at: datetime
    finished_at: Optional[datetime] = None
    outcomes: List[PollOutcome] = field(default_factory=list)

    @property
    def failures(self) -> List[PollOutcome]:
        return [o for o in self.outcomes if not o.ok]


class PollRosterUseCase:
    """
    Polls every roster entry in order: resolve identity (once), fetch Solo/Duo
    standing, probe live status, then write the snapshot.

    Each entry is isolated: a failure is recorded on that entry's snapshot
    and returned as a PollOutcome, never raised past the loop.
    """

    def __init__(
        self,
        repository: IPlayerRepository,
        cache: SnapshotCache,
        roster: Sequence[PlayerRef],
        pacing_seconds: float = 0.25,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        self.cache = cache
        self.roster = list(roster)
        self.pacing_seconds = pacing_seconds
        self._clock = clock
        self._log = get_logger(__name__, service="poller")

    async def poll_player(self, ref: PlayerRef) -> PollOutcome:
        snap = self.cache.get_or_create(ref)
        with context(player=ref.key):
            try:
                identity = snap.identity
                if identity is None:
                    identity = await self.repository.resolve_identity(ref)
                    snap.set_identity(identity)
                    self._log.info(lambda: f"resolved {ref.riot_id}")

                standing = await self.repository.get_solo_standing(ref.region, identity)
                live = await self.repository.is_in_game(ref.region, identity)
            except RiotAPIError as exc:
                snap.apply_failure(exc.short_message, self._clock())
                self._log.warning(lambda: f"poll failed: {exc.short_message}")
                return PollOutcome(key=ref.key, ok=False, error=snap.error)
            except Exception as exc:
                message = f"unexpected error: {type(exc).__name__}"
                snap.apply_failure(message, self._clock())
                self._log.exception(lambda: "poll failed unexpectedly")
                return PollOutcome(key=ref.key, ok=False, error=message)

            snap.apply_success(standing, live, self._clock())
            self._log.debug(
                lambda: f"tier={snap.tier} division={snap.division} lp={snap.league_points} live={snap.live}"
            )
            return PollOutcome(key=ref.key, ok=True)

    async def execute(self) -> CycleReport:
        """Run one full cycle; entries are processed strictly in roster order."""
        report = CycleReport(started_at=self._clock())
        t0 = time.perf_counter()
        for ref in self.roster:
            report.outcomes.append(await self.poll_player(ref))
            if self.pacing_seconds > 0:
                await asyncio.sleep(self.pacing_seconds)
        report.finished_at = self._clock()

        failed = len(report.failures)
        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        if failed:
            self._log.warning(lambda: f"cycle done: {len(report.outcomes) - failed} ok, {failed} failed in {elapsed_ms}ms")
        else:
            self._log.success(lambda: f"cycle done: {len(report.outcomes)} ok in {elapsed_ms}ms")
        return report
