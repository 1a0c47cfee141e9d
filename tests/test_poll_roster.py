"""Tests for one poll cycle over the roster."""

from __future__ import annotations

import pytest

from application.services import SnapshotCache
from application.use_cases import PollRosterUseCase
from domain.entities import RankedStanding
from infrastructure.api import RiotAPIError

from fakes import COSMIC, ELIELA


def make_use_case(repo, clock, roster=(COSMIC, ELIELA)):
    cache = SnapshotCache()
    return PollRosterUseCase(repo, cache, roster, pacing_seconds=0, clock=clock), cache


class TestSuccessfulCycle:
    @pytest.mark.asyncio
    async def test_one_record_per_roster_entry(self, repo, clock) -> None:
        use_case, cache = make_use_case(repo, clock)
        await use_case.execute()
        await use_case.execute()
        assert len(cache) == 2
        assert [s.key for s in cache.snapshots()] == [COSMIC.key, ELIELA.key]

    @pytest.mark.asyncio
    async def test_fields_populated(self, repo, clock) -> None:
        use_case, cache = make_use_case(repo, clock)
        report = await use_case.execute()
        assert all(o.ok for o in report.outcomes)

        snap = cache.get(ELIELA.key)
        assert snap.puuid == "puuid-eliela"
        assert snap.summoner_id == "sid-eliela"
        assert (snap.tier, snap.division, snap.league_points) == ("GOLD", "IV", 72)
        assert (snap.wins, snap.losses) == (70, 65)
        assert snap.live is True
        assert snap.error is None
        assert snap.updated_at == clock.now
        assert snap.last_attempt_at == clock.now

    @pytest.mark.asyncio
    async def test_identity_resolved_only_once(self, repo, clock) -> None:
        use_case, _ = make_use_case(repo, clock)
        await use_case.execute()
        await use_case.execute()
        resolves = [c for c in repo.calls if c[0] == "resolve"]
        assert len(resolves) == 2  # one per player, not per cycle

    @pytest.mark.asyncio
    async def test_entries_polled_in_roster_order(self, repo, clock) -> None:
        use_case, _ = make_use_case(repo, clock, roster=(ELIELA, COSMIC))
        await use_case.execute()
        assert [c for c in repo.calls if c[0] == "rank"] == [("rank", ELIELA.key), ("rank", COSMIC.key)]

    @pytest.mark.asyncio
    async def test_unranked_is_not_an_error(self, repo, clock) -> None:
        use_case, cache = make_use_case(repo, clock)
        await use_case.execute()
        repo.standings[COSMIC.key] = None
        clock.advance()
        await use_case.execute()

        snap = cache.get(COSMIC.key)
        assert snap.error is None
        assert snap.tier is None
        assert snap.division is None
        assert snap.league_points is None
        assert snap.wins is None
        assert snap.losses is None
        assert snap.updated_at == clock.now


class TestFailures:
    @pytest.mark.asyncio
    async def test_failure_keeps_previous_values(self, repo, clock) -> None:
        use_case, cache = make_use_case(repo, clock)
        await use_case.execute()
        first_update = clock.now
        before = cache.get(ELIELA.key).to_dict()

        repo.standings[ELIELA.key] = RiotAPIError(url="x", status_code=503, reason="Service Unavailable")
        clock.advance()
        report = await use_case.execute()

        snap = cache.get(ELIELA.key)
        assert snap.error == "503 Service Unavailable"
        assert snap.updated_at == first_update
        assert snap.last_attempt_at == clock.now
        after = snap.to_dict()
        for field in ("tier", "division", "lp", "wins", "losses", "live", "updated_at"):
            assert after[field] == before[field]
        assert [o.ok for o in report.outcomes] == [True, False]

    @pytest.mark.asyncio
    async def test_live_probe_failure_skips_rank_overwrite(self, repo, clock) -> None:
        use_case, cache = make_use_case(repo, clock)
        await use_case.execute()

        repo.standings[ELIELA.key] = RankedStanding(tier="PLATINUM", division="I", league_points=5, wins=80, losses=70)
        repo.live[ELIELA.key] = RiotAPIError(url="x", status_code=500, reason="Internal Server Error")
        await use_case.execute()

        snap = cache.get(ELIELA.key)
        assert snap.tier == "GOLD"
        assert snap.league_points == 72
        assert snap.error == "500 Internal Server Error"

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_others(self, repo, clock) -> None:
        repo.identities[COSMIC.key] = RiotAPIError(url="x", transport_code="ECONNREFUSED")
        use_case, cache = make_use_case(repo, clock)
        report = await use_case.execute()

        assert cache.get(COSMIC.key).error == "network error: ECONNREFUSED"
        assert cache.get(COSMIC.key).puuid is None
        assert cache.get(ELIELA.key).error is None
        assert cache.get(ELIELA.key).league_points == 72
        assert [o.key for o in report.failures] == [COSMIC.key]

    @pytest.mark.asyncio
    async def test_resolution_retried_next_cycle(self, repo, clock) -> None:
        identity = repo.identities[COSMIC.key]
        repo.identities[COSMIC.key] = RiotAPIError(url="x", status_code=404, reason="Not Found")
        use_case, cache = make_use_case(repo, clock, roster=(COSMIC,))
        await use_case.execute()
        assert cache.get(COSMIC.key).error == "404 Not Found"

        repo.identities[COSMIC.key] = identity
        await use_case.execute()
        snap = cache.get(COSMIC.key)
        assert snap.error is None
        assert snap.puuid == "puuid-cosmic"

    @pytest.mark.asyncio
    async def test_identifiers_survive_failures(self, repo, clock) -> None:
        use_case, cache = make_use_case(repo, clock)
        await use_case.execute()
        repo.standings[COSMIC.key] = RiotAPIError(url="x", status_code=429, reason="Too Many Requests")
        await use_case.execute()
        snap = cache.get(COSMIC.key)
        assert snap.puuid == "puuid-cosmic"
        assert snap.summoner_id == "sid-cosmic"

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_recorded(self, repo, clock) -> None:
        repo.standings[COSMIC.key] = KeyError("leaguePoints")
        use_case, cache = make_use_case(repo, clock)
        report = await use_case.execute()
        assert cache.get(COSMIC.key).error == "unexpected error: KeyError"
        assert report.outcomes[1].ok

    @pytest.mark.asyncio
    async def test_success_clears_previous_error(self, repo, clock) -> None:
        repo.live[COSMIC.key] = RiotAPIError(url="x", status_code=403, reason="Forbidden")
        use_case, cache = make_use_case(repo, clock)
        await use_case.execute()
        assert cache.get(COSMIC.key).error == "403 Forbidden"

        repo.live[COSMIC.key] = False
        await use_case.execute()
        assert cache.get(COSMIC.key).error is None
