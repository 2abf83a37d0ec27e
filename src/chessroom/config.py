"""Service settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_ENV_PREFIX = "CHESSROOM_"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER = logging.StreamHandler()
_HANDLER.setFormatter(logging.Formatter(_LOG_FORMAT))


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{_ENV_PREFIX}{name} must be positive, got {value}")
    return value


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(_ENV_PREFIX + name)
    return raw.strip() if raw and raw.strip() else default


@dataclass
class Settings:
    """All deployment-tunable settings."""

    # Sessions
    max_sessions: int = 1024
    key_bytes: int = 16  # entropy of each player key

    # Logging
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Defaults overridden by ``CHESSROOM_*`` environment variables."""
    defaults = Settings()
    return Settings(
        max_sessions=_env_int("MAX_SESSIONS", defaults.max_sessions),
        key_bytes=_env_int("KEY_BYTES", defaults.key_bytes),
        log_level=_env_str("LOG_LEVEL", defaults.log_level).upper(),
    )


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the ``chessroom`` logger at the set level."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")

    logger = logging.getLogger("chessroom")
    logger.setLevel(level)
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)
    return logger
