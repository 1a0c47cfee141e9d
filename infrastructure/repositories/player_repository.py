"""Player repository implementation."""
import logging
from typing import Optional

from domain.entities import PlayerRef, RankedStanding, ResolvedIdentity
from domain.enums import Region, QueueType
from domain.interfaces import IPlayerRepository
from infrastructure.api import RiotAPIClient, RiotAPIError

logger = logging.getLogger(__name__)


class PlayerRepository(IPlayerRepository):
    """Repository for player identity, rank and live status using Riot API."""

    def __init__(self, api_client: RiotAPIClient, queue: QueueType = QueueType.RANKED_SOLO_5x5):
        """
        Initialize player repository.

        Args:
            api_client: Riot API client instance (already entered)
            queue: Ranked queue whose standing is reported
        """
        self.api_client = api_client
        self.queue = queue

    async def resolve_identity(self, ref: PlayerRef) -> ResolvedIdentity:
        """
        Resolve a Riot ID to PUUID and summoner id.

        Args:
            ref: Roster entry

        Returns:
            ResolvedIdentity

        Raises:
            RiotAPIError: on any transport or HTTP failure
        """
        account = await self.api_client.get_account_by_riot_id(
            ref.region, ref.game_name, ref.tag_line
        )
        puuid = (account or {}).get('puuid')
        if not puuid:
            raise RiotAPIError(url="account/by-riot-id", reason="account lookup returned no puuid")

        summoner = await self.api_client.get_summoner_by_puuid(ref.region, puuid)
        summoner_id = (summoner or {}).get('id') or puuid
        logger.debug(f"Resolved {ref.key} -> {puuid[:8]}…")
        return ResolvedIdentity(puuid=puuid, summoner_id=summoner_id)

    async def get_solo_standing(
        self,
        region: Region,
        identity: ResolvedIdentity
    ) -> Optional[RankedStanding]:
        """
        Get the standing in the configured queue.

        The first entry with a matching ``queueType`` wins; no entry means
        the player is unranked this season.
        """
        entries = await self.api_client.get_league_entries_by_puuid(region, identity.puuid)
        for entry in entries:
            if entry.get('queueType') == self.queue.api_queue_name:
                return RankedStanding.from_entry(entry)
        return None

    async def is_in_game(self, region: Region, identity: ResolvedIdentity) -> bool:
        game = await self.api_client.get_active_game_by_puuid(region, identity.puuid)
        return game is not None
