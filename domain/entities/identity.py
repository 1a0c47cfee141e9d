"""Resolved Riot identifiers for a roster entry."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedIdentity:
    """Stable identifiers obtained from account-v1 and summoner-v4.

    ``puuid`` is the account id. ``summoner_id`` is the platform player id;
    when the platform no longer reports one, the PUUID stands in for it.
    """

    puuid: str
    summoner_id: str
