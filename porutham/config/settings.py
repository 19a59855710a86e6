"""Configuration models and YAML persistence for porutham settings."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "MatchingCfg",
    "Settings",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "read_settings",
    "save_settings",
]

CURRENT_SETTINGS_SCHEMA_VERSION = 1
CONFIG_FILENAME = "config.yaml"


class MatchingCfg(BaseModel):
    """How star names supplied by callers are resolved."""

    unknown_star_policy: Literal["fallback", "strict"] = Field(
        default="fallback",
        description=(
            "'fallback' substitutes the first nakshatra for unknown names; "
            "'strict' rejects them."
        ),
    )
    normalize_names: bool = Field(
        default=False,
        description="Ignore case and surrounding whitespace when matching names.",
    )

    @field_validator("unknown_star_policy", mode="before")
    @classmethod
    def _lower_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def strict(self) -> bool:
        return self.unknown_star_policy == "strict"


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    matching: MatchingCfg = Field(default_factory=MatchingCfg)


# -------------------- I/O Helpers --------------------


def get_config_home() -> Path:
    """Return the directory where settings are stored."""

    return Path(os.environ.get("PORUTHAM_HOME", str(Path.home() / ".porutham")))


def config_path() -> Path:
    """Return the configuration file path, creating its directory if needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` to ``path`` (or :func:`config_path`) as YAML."""

    target = Path(path) if path else config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(settings.model_dump(), handle, sort_keys=False, allow_unicode=True)
    return target


def _upgrade_payload(data: dict[str, object]) -> tuple[dict[str, object], bool]:
    upgraded = deepcopy(data)
    try:
        version = int(upgraded.get("schema_version", 0))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        version = 0
    if version == CURRENT_SETTINGS_SCHEMA_VERSION:
        return upgraded, False
    upgraded["schema_version"] = CURRENT_SETTINGS_SCHEMA_VERSION
    return upgraded, True


def _read_settings_file(source: Path) -> tuple[Settings, bool]:
    with source.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    data, upgraded = _upgrade_payload(raw)
    return Settings(**data), upgraded


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, writing defaults when the file is missing.

    Malformed YAML raises :class:`yaml.YAMLError`; invalid values raise
    :class:`pydantic.ValidationError`.
    """

    source = Path(path) if path else config_path()
    if not source.exists():
        settings = default_settings()
        save_settings(settings, source)
        return settings
    settings, upgraded = _read_settings_file(source)
    if upgraded:
        save_settings(settings, source)
    return settings


def read_settings(path: Optional[Path] = None) -> Settings:
    """Like :func:`load_settings` but never writes to disk.

    A missing file yields :func:`default_settings`; legacy payloads are
    upgraded in memory only.
    """

    source = Path(path) if path else get_config_home() / CONFIG_FILENAME
    if not source.exists():
        return default_settings()
    settings, _ = _read_settings_file(source)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target
