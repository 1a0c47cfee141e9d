"""Domain layer - Business entities, enums, and interfaces."""
from .entities import PlayerRef, RankedStanding, ResolvedIdentity, Snapshot
from .enums import Region, QueueType
from .interfaces import IPlayerRepository

__all__ = [
    # Entities
    'PlayerRef',
    'RankedStanding',
    'ResolvedIdentity',
    'Snapshot',
    # Enums
    'Region',
    'QueueType',
    # Interfaces
    'IPlayerRepository',
]
