"""Snapshot entity: last known state of one roster entry."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..enums import Region
from .identity import ResolvedIdentity
from .player_ref import PlayerRef
from .ranked_standing import RankedStanding


def format_timestamp(ts: Optional[datetime]) -> Optional[str]:
    """ISO-8601 UTC with a ``Z`` suffix, or None."""
    if ts is None:
        return None
    return ts.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class Snapshot:
    """Cached state for a player.

    Field policy:
      - ``puuid``/``summoner_id`` are set once and never cleared.
      - A successful poll overwrites rank, live flag and ``updated_at``
        and clears ``error``.
      - A failed poll touches only ``error`` and ``last_attempt_at``.
    """

    region: Region
    game_name: str
    tag_line: str

    # Identity
    puuid: Optional[str] = None
    summoner_id: Optional[str] = None

    # Ranked info (Solo/Duo)
    tier: Optional[str] = None
    division: Optional[str] = None
    league_points: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None

    live: bool = False

    updated_at: Optional[datetime] = None
    last_attempt_at: Optional[datetime] = None
    error: Optional[str] = None

    @classmethod
    def for_player(cls, ref: PlayerRef) -> 'Snapshot':
        return cls(region=ref.region, game_name=ref.game_name, tag_line=ref.tag_line)

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"

    @property
    def key(self) -> str:
        return f"{self.region.value}:{self.riot_id}"

    @property
    def is_resolved(self) -> bool:
        return bool(self.puuid and self.summoner_id)

    @property
    def identity(self) -> Optional[ResolvedIdentity]:
        if not self.is_resolved:
            return None
        return ResolvedIdentity(puuid=self.puuid, summoner_id=self.summoner_id)

    def set_identity(self, identity: ResolvedIdentity) -> None:
        """Store resolved identifiers; an existing identity is kept."""
        if self.is_resolved:
            return
        self.puuid = identity.puuid
        self.summoner_id = identity.summoner_id

    def apply_success(
        self,
        standing: Optional[RankedStanding],
        live: bool,
        now: datetime,
    ) -> None:
        """Overwrite rank/live fields from a completed poll."""
        if standing is None:
            self.tier = None
            self.division = None
            self.league_points = None
            self.wins = None
            self.losses = None
        else:
            self.tier = standing.tier
            self.division = standing.division
            self.league_points = standing.league_points
            self.wins = standing.wins
            self.losses = standing.losses
        self.live = live
        self.updated_at = now
        self.last_attempt_at = now
        self.error = None

    def apply_failure(self, message: str, now: datetime) -> None:
        """Record a failed poll without disturbing previously observed values."""
        self.error = message or "unknown error"
        self.last_attempt_at = now

    def to_dict(self) -> dict:
        """Flat record served by ``/api/players``."""
        return {
            'region': self.region.value,
            'game_name': self.game_name,
            'tag_line': self.tag_line,
            'riotId': self.riot_id,
            'tier': self.tier,
            'division': self.division,
            'lp': self.league_points,
            'wins': self.wins,
            'losses': self.losses,
            'live': self.live,
            'updated_at': format_timestamp(self.updated_at),
            'last_attempt_at': format_timestamp(self.last_attempt_at),
            'error': self.error,
        }
