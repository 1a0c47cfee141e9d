"""Roster entry: one statically configured player identity."""
from dataclasses import dataclass

from ..enums import Region


@dataclass(frozen=True)
class PlayerRef:
    """A player to poll, identified by platform and Riot ID."""

    region: Region
    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        """Riot ID as shown in the client, ``gameName#tagLine``."""
        return f"{self.game_name}#{self.tag_line}"

    @property
    def key(self) -> str:
        """Cache key, ``region:gameName#tagLine``."""
        return f"{self.region.value}:{self.riot_id}"
