"""Configuration helpers exposed at :mod:`porutham.config`."""

from __future__ import annotations

from .settings import (
    CONFIG_FILENAME,
    MatchingCfg,
    Settings,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    read_settings,
    save_settings,
)

__all__ = [
    "CONFIG_FILENAME",
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
