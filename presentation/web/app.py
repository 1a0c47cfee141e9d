"""FastAPI application exposing the snapshot cache."""
from __future__ import annotations

from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from application.services import PollScheduler, SnapshotCache
from domain.entities import format_timestamp
from infrastructure.api import RiotAPIClient
from core.logging.logger import get_logger
from .board import render_board

LIVENESS_TEXT = (
    "Hello. This website is actively in construction, due to finish by the start of December. Thanks!"
)

_log = get_logger(__name__, service="web")


def create_app(
    cache: SnapshotCache,
    scheduler: Optional[PollScheduler] = None,
    *,
    api_client: Optional[RiotAPIClient] = None,
    board_refresh_ms: int = 15_000,
) -> FastAPI:
    """Build the app around an explicit cache (and optional scheduler).

    The API client session and the scheduler, when given, are opened and
    started with the app lifespan so polling shares the server's event loop.
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            if api_client is not None:
                await stack.enter_async_context(api_client)
            if scheduler is not None:
                scheduler.start()
                stack.push_async_callback(scheduler.stop)
            _log.info("web app started")
            yield
        _log.info("web app stopped")

    app = FastAPI(title="League Live Tracker", lifespan=lifespan)
    app.state.cache = cache
    app.state.scheduler = scheduler

    @app.get("/", response_class=PlainTextResponse)
    async def liveness() -> str:
        return LIVENESS_TEXT

    @app.get("/api/players")
    async def players(request: Request) -> list[dict]:
        return request.app.state.cache.to_records()

    @app.get("/board", response_class=HTMLResponse)
    async def board(request: Request) -> str:
        return render_board(request.app.state.cache.to_records(), refresh_ms=board_refresh_ms)

    @app.get("/api/status")
    async def status(request: Request) -> dict:
        sched: Optional[PollScheduler] = request.app.state.scheduler
        payload = {
            "running": False,
            "interval_seconds": None,
            "cycles_completed": 0,
            "ticks_skipped": 0,
            "last_cycle_started_at": None,
            "last_cycle_finished_at": None,
            "players": len(request.app.state.cache),
        }
        if sched is not None:
            st = sched.status()
            payload.update(
                running=st.running,
                interval_seconds=st.interval_seconds,
                cycles_completed=st.cycles_completed,
                ticks_skipped=st.ticks_skipped,
                last_cycle_started_at=format_timestamp(st.last_cycle_started_at),
                last_cycle_finished_at=format_timestamp(st.last_cycle_finished_at),
            )
        return payload

    return app
