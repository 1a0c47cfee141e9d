"""Ranked standing for a single queue."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RankedStanding:
    """Tier, division and record in one ranked queue."""

    tier: str
    division: Optional[str]
    league_points: int
    wins: int
    losses: int

    @classmethod
    def from_entry(cls, entry: dict) -> 'RankedStanding':
        """Build from a league-v4 ``LeagueEntryDTO`` payload."""
        return cls(
            tier=entry['tier'],
            division=entry.get('rank'),
            league_points=int(entry.get('leaguePoints', 0)),
            wins=int(entry.get('wins', 0)),
            losses=int(entry.get('losses', 0)),
        )
