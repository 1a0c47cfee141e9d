"""Tests for domain entities and enums."""

from __future__ import annotations

from datetime import datetime, timezone

from domain.entities import PlayerRef, RankedStanding, ResolvedIdentity, Snapshot, format_timestamp
from domain.enums import QueueType, Region

NOW = datetime(2025, 11, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestRegion:
    def test_account_routes_cover_three_clusters(self) -> None:
        assert {r.account_route for r in Region} == {"americas", "europe", "asia"}

    def test_account_route_examples(self) -> None:
        assert Region.NA1.account_route == "americas"
        assert Region.EUN1.account_route == "europe"
        assert Region.KR.account_route == "asia"
        assert Region.VN2.account_route == "asia"
        assert Region.OC1.account_route == "americas"

    def test_from_code(self) -> None:
        assert Region.from_code(" NA1 ") is Region.NA1
        assert Region.from_code("atlantis") is None
        assert Region.from_code("") is None


def test_solo_queue_api_name() -> None:
    assert QueueType.RANKED_SOLO_5x5.api_queue_name == "RANKED_SOLO_5x5"
    assert QueueType.RANKED_FLEX_SR.api_queue_name == "RANKED_FLEX_SR"


class TestSnapshot:
    ref = PlayerRef(region=Region.NA1, game_name="ElielaNoix", tag_line="NA1")

    def test_key_matches_player_ref(self) -> None:
        snap = Snapshot.for_player(self.ref)
        assert snap.key == self.ref.key == "na1:ElielaNoix#NA1"
        assert snap.riot_id == "ElielaNoix#NA1"
        assert snap.identity is None

    def test_identity_is_never_replaced(self) -> None:
        snap = Snapshot.for_player(self.ref)
        snap.set_identity(ResolvedIdentity(puuid="p1", summoner_id="s1"))
        snap.set_identity(ResolvedIdentity(puuid="p2", summoner_id="s2"))
        assert snap.identity == ResolvedIdentity(puuid="p1", summoner_id="s1")

    def test_failure_only_touches_error_and_attempt(self) -> None:
        snap = Snapshot.for_player(self.ref)
        snap.apply_success(RankedStanding("GOLD", "IV", 72, 70, 65), True, NOW)
        before = snap.to_dict()
        later = datetime(2025, 11, 1, 12, 0, 15, tzinfo=timezone.utc)
        snap.apply_failure("", later)

        after = snap.to_dict()
        assert after["error"] == "unknown error"
        assert after["last_attempt_at"] == "2025-11-01T12:00:15Z"
        for key in before:
            if key not in ("error", "last_attempt_at"):
                assert after[key] == before[key]

    def test_standing_from_entry_defaults(self) -> None:
        standing = RankedStanding.from_entry({"tier": "MASTER", "rank": "I"})
        assert standing == RankedStanding("MASTER", "I", 0, 0, 0)


def test_format_timestamp() -> None:
    assert format_timestamp(NOW) == "2025-11-01T12:00:00Z"
    assert format_timestamp(None) is None
