"""Runtime settings read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"

# Levels both logging and uvicorn understand.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(v.strip() for v in value.split(",") if v.strip())


def load_cors_origins() -> tuple[str, ...]:
    """Allowed CORS origins; the only setting the app itself needs."""
    load_dotenv(ENV_FILE)
    return _split_csv(os.environ.get("ITEMCOUNTER_CORS_ORIGINS", "")) or Settings.cors_origins


def load_settings() -> Settings:
    """Build Settings from ITEMCOUNTER_* variables.

    Raises ValueError on a bad port or an unknown log level.
    """
    load_dotenv(ENV_FILE)
    defaults = Settings()

    raw_port = os.environ.get("ITEMCOUNTER_PORT", str(defaults.port))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"ITEMCOUNTER_PORT must be an integer, got {raw_port!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"ITEMCOUNTER_PORT out of range: {port}")

    log_level = os.environ.get("ITEMCOUNTER_LOG_LEVEL", defaults.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"ITEMCOUNTER_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        host=os.environ.get("ITEMCOUNTER_HOST", defaults.host),
        port=port,
        cors_origins=load_cors_origins(),
        log_level=log_level,
    )
