"""Riot Games API client."""
import logging
from typing import Optional, Dict, Any, List
from urllib.parse import quote
import httpx

from config import settings
from domain.enums import Region
from .errors import RiotAPIError, transport_code

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """Asynchronous Riot API client.

    Every call either returns decoded JSON or raises ``RiotAPIError``.
    There is no retry: a failed call is simply retried on the next poll.
    """

    def __init__(
        self,
        api_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key  = api_key
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout  = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _get_platform_url(self, region: Region) -> str:
        return f"https://{region.platform_route}.api.riotgames.com"

    def _get_account_url(self, region: Region) -> str:
        return f"https://{region.account_route}.api.riotgames.com"

    async def _make_request(
        self,
        url: str,
        endpoint_type: str = "default",
        not_found_ok: bool = False,
    ) -> Optional[Any]:
        if self.session is None:
            raise RuntimeError("RiotAPIClient used outside 'async with'")

        try:
            response = await self.session.get(url)
        except httpx.HTTPError as exc:
            code = transport_code(exc)
            logger.warning(f"Network error on {endpoint_type}: {code}")
            raise RiotAPIError(url=url, transport_code=code) from exc

        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise RiotAPIError(url=url, reason="invalid JSON in response") from exc

        if response.status_code == 404 and not_found_ok:
            return None

        if response.status_code in (401, 403):
            logger.error(f"{response.status_code} on {endpoint_type}: check RIOT_API_KEY")
        elif response.status_code == 429:
            logger.warning(f"429 rate-limited on {endpoint_type}")
        else:
            logger.warning(f"HTTP {response.status_code} for {url}")

        raise RiotAPIError(
            url=url,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(
        self, region: Region, game_name: str, tag_line: str
    ) -> Dict:
        base = self._get_account_url(region)
        path = f"/riot/account/v1/accounts/by-riot-id/{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        return await self._make_request(f"{base}{path}", "account")

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_puuid(self, region: Region, puuid: str) -> Dict:
        base = self._get_platform_url(region)
        return await self._make_request(
            f"{base}/lol/summoner/v4/summoners/by-puuid/{quote(puuid, safe='')}", "summoner"
        )

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_puuid(self, region: Region, puuid: str) -> List[Dict]:
        base = self._get_platform_url(region)
        result = await self._make_request(
            f"{base}/lol/league/v4/entries/by-puuid/{quote(puuid, safe='')}", "league"
        )
        return result if isinstance(result, list) else []

    # ── Spectator API ──────────────────────────────────────────────────

    async def get_active_game_by_puuid(self, region: Region, puuid: str) -> Optional[Dict]:
        """Current game info, or None when the player is not in a game (404)."""
        base = self._get_platform_url(region)
        return await self._make_request(
            f"{base}/lol/spectator/v5/active-games/by-summoner/{quote(puuid, safe='')}",
            "spectator",
            not_found_ok=True,
        )
