"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import Optional
from ..entities import PlayerRef, RankedStanding, ResolvedIdentity
from ..enums import Region


class IPlayerRepository(ABC):
    """Interface for the player statistics source.

    Implementations raise on transport or HTTP failure; "no ranked standing"
    and "not in a game" are ordinary return values.
    """

    @abstractmethod
    async def resolve_identity(self, ref: PlayerRef) -> ResolvedIdentity:
        """Map a Riot ID to stable identifiers."""
        pass

    @abstractmethod
    async def get_solo_standing(
        self,
        region: Region,
        identity: ResolvedIdentity
    ) -> Optional[RankedStanding]:
        """Get the Solo/Duo standing, or None when unranked."""
        pass

    @abstractmethod
    async def is_in_game(self, region: Region, identity: ResolvedIdentity) -> bool:
        """Check whether the player is currently in a match."""
        pass
