"""Entry-point: poll the roster and serve the board."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from core.logging.config import bootstrap_logging, shutdown_logging
from core.logging.logger import get_logger
from application import PollRosterUseCase, PollScheduler, SnapshotCache, load_roster
from config import Settings, settings
from infrastructure import PlayerRepository, RiotAPIClient
from presentation.web import create_app

_log = get_logger(__name__, service="tracker")


def build_app(cfg: Settings) -> FastAPI:
    """Wire cache, client, repository, use case and scheduler into the web app."""
    cfg.validate()
    roster = load_roster(cfg.ROSTER_FILE)
    cache = SnapshotCache()
    api = RiotAPIClient(cfg.RIOT_API_KEY, timeout=cfg.REQUEST_TIMEOUT)
    use_case = PollRosterUseCase(
        PlayerRepository(api),
        cache,
        roster,
        pacing_seconds=cfg.POLL_PACING_SECONDS,
    )
    scheduler = PollScheduler(use_case.execute, interval_seconds=cfg.POLL_SECONDS)
    return create_app(cache, scheduler, api_client=api, board_refresh_ms=cfg.BOARD_REFRESH_MS)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="League of Legends live rank tracker")
    parser.add_argument("--host", default=None, help="bind address (env HOST)")
    parser.add_argument("--port", type=int, default=None, help="listening port (env PORT)")
    parser.add_argument("--roster", type=Path, default=None, help="roster JSON file (env ROSTER_FILE)")
    parser.add_argument("--interval", type=float, default=None, help="poll interval seconds (env POLL_SECONDS)")
    return parser.parse_args(argv)


def apply_args(cfg: Settings, args: argparse.Namespace) -> None:
    """Let command-line flags override the environment."""
    if args.host:
        cfg.HOST = args.host
    if args.port:
        cfg.PORT = args.port
    if args.roster:
        cfg.ROSTER_FILE = args.roster
    if args.interval is not None:
        if args.interval > 0:
            cfg.POLL_SECONDS = args.interval
        else:
            _log.warning(f"Ignoring --interval {args.interval}: must be positive, using {cfg.POLL_SECONDS}")


def main(argv: list[str]) -> int:
    args = _parse_args(argv)
    bootstrap_logging(
        service="tracker",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="tracker.jsonl",
    )
    try:
        apply_args(settings, args)
        app = build_app(settings)
        _log.info(f"Server up on http://localhost:{settings.PORT}")
        uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
        return 0
    finally:
        shutdown_logging()


def _entry() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
