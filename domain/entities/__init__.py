"""Domain entities."""
from .identity import ResolvedIdentity
from .player_ref import PlayerRef
from .ranked_standing import RankedStanding
from .snapshot import Snapshot, format_timestamp

__all__ = [
    'ResolvedIdentity',
    'PlayerRef',
    'RankedStanding',
    'Snapshot',
    'format_timestamp',
]
