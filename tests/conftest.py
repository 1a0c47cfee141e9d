"""Shared fixtures."""
from __future__ import annotations

import pytest

from domain.entities import RankedStanding, ResolvedIdentity

from fakes import COSMIC, ELIELA, FakeRepository, ManualClock


@pytest.fixture
def repo() -> FakeRepository:
    r = FakeRepository()
    r.identities[COSMIC.key] = ResolvedIdentity(puuid="puuid-cosmic", summoner_id="sid-cosmic")
    r.identities[ELIELA.key] = ResolvedIdentity(puuid="puuid-eliela", summoner_id="sid-eliela")
    r.standings[COSMIC.key] = RankedStanding(tier="EMERALD", division="IV", league_points=34, wins=117, losses=94)
    r.standings[ELIELA.key] = RankedStanding(tier="GOLD", division="IV", league_points=72, wins=70, losses=65)
    r.live[ELIELA.key] = True
    return r


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
