"""Runtime configuration for the HTTP service, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

__all__ = ["APISettings", "get_settings", "settings"]

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return tuple()
    origins: list[str] = []
    for item in raw.split(","):
        origin = item.strip()
        if origin and origin not in origins:
            origins.append(origin)
    return tuple(origins)


@dataclass(slots=True)
class APISettings:
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    log_level: str = "info"
    cors_origins: tuple[str, ...] = tuple()

    @classmethod
    def from_env(cls) -> "APISettings":
        try:
            port = int(os.getenv("PORUTHAM_API_PORT", "8000"))
        except ValueError:
            port = 8000
        return cls(
            host=os.getenv("PORUTHAM_API_HOST", "127.0.0.1"),
            port=port,
            reload=_env_bool("PORUTHAM_API_RELOAD"),
            log_level=os.getenv("PORUTHAM_API_LOG_LEVEL", "info"),
            cors_origins=_env_origins(os.getenv("PORUTHAM_API_CORS_ORIGINS")),
        )


@lru_cache(maxsize=1)
def get_settings() -> APISettings:
    return APISettings.from_env()


settings = get_settings()
