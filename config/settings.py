"""Application settings and configuration."""
import logging
import math
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, '')
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default


def _env_float(name: str, default: float, minimum: Optional[float] = None, strict: bool = False) -> float:
    """Read a float; values below ``minimum`` (or equal to it when ``strict``) fall back to ``default``."""
    raw = os.getenv(name, '')
    if not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default
    if not math.isfinite(value) or minimum is not None and (value < minimum or (strict and value == minimum)):
        logger.warning(f"Out of range {name}={raw!r}, using {default}")
        return default
    return value


class Settings:
    """
    Values are read from the environment (optionally ``config/.env``) once,
    when the class body executes. Tests build their own instances with
    ``Settings.from_env()`` after patching the environment.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Server ─────────────────────────────────────────────────────────────
    HOST: str = os.getenv('HOST', '0.0.0.0')
    PORT: int = _env_int('PORT', 3000)

    # ── Polling ────────────────────────────────────────────────────────────
    POLL_SECONDS:         float = _env_float('POLL_SECONDS', 15.0, minimum=0, strict=True)
    # Pause after each roster entry so a cycle never bursts the API.
    POLL_PACING_SECONDS:  float = _env_float('POLL_PACING_SECONDS', 0.25, minimum=0)

    # Client-side refresh of the /board page, milliseconds
    BOARD_REFRESH_MS: int = 15_000

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:    Path = Path(__file__).resolve().parent.parent
    DATA_DIR:    Path = BASE_DIR / 'data'
    LOG_DIR:     Path = Path(os.getenv('LOG_DIR', '') or (DATA_DIR / 'logs'))
    ROSTER_FILE: Path = Path(os.getenv('ROSTER_FILE', '') or (BASE_DIR / 'players.json'))

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = _env_float('REQUEST_TIMEOUT', 10.0, minimum=0, strict=True)

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    def validate(self) -> bool:
        """Warn about missing credentials; startup continues regardless."""
        if not self.RIOT_API_KEY:
            logger.warning("RIOT_API_KEY is not set (config/.env); every poll will fail with 401")
            return False
        return True

    @classmethod
    def from_env(cls) -> 'Settings':
        """Re-read the environment into a fresh instance."""
        s = cls()
        s.RIOT_API_KEY = os.getenv('RIOT_API_KEY', '')
        s.HOST = os.getenv('HOST', '0.0.0.0')
        s.PORT = _env_int('PORT', 3000)
        s.POLL_SECONDS = _env_float('POLL_SECONDS', 15.0, minimum=0, strict=True)
        s.POLL_PACING_SECONDS = _env_float('POLL_PACING_SECONDS', 0.25, minimum=0)
        s.LOG_DIR = Path(os.getenv('LOG_DIR', '') or (cls.DATA_DIR / 'logs'))
        s.ROSTER_FILE = Path(os.getenv('ROSTER_FILE', '') or (cls.BASE_DIR / 'players.json'))
        s.REQUEST_TIMEOUT = _env_float('REQUEST_TIMEOUT', 10.0, minimum=0, strict=True)
        s.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
        return s


settings = Settings()
