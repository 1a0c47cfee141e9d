"""Region enumeration for League of Legends servers."""
from enum import Enum
from typing import Optional


_ACCOUNT_CLUSTERS = {
    "americas": ("na1", "br1", "la1", "la2", "oc1"),
    "europe": ("euw1", "eun1", "tr1", "ru", "me1"),
    "asia": ("kr", "jp1", "ph2", "sg2", "th2", "tw2", "vn2"),
}


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host for summoner/league/spectator calls (e.g., euw1)
    - account_route: routing cluster for account-v1 lookups (americas/europe/asia)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    # Other
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def account_route(self) -> str:
        """Get the routing cluster serving account-v1 for this platform.

        Account data only lives on three clusters, so SEA/OCE platforms
        resolve through ``asia`` or ``americas``.
        """
        for cluster, platforms in _ACCOUNT_CLUSTERS.items():
            if self.value in platforms:
                return cluster
        return "americas"

    @classmethod
    def from_code(cls, code: str) -> Optional['Region']:
        """Look up a platform code (``"NA1"``, ``"euw1"``); None if unknown."""
        try:
            return cls((code or "").strip().lower())
        except ValueError:
            return None
