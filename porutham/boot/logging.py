"""Logging setup shared by the porutham CLI and HTTP service."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["LEVEL_ENV_VARS", "configure_logging", "resolve_level"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Checked in order; the first variable that is set wins.
LEVEL_ENV_VARS: tuple[str, ...] = ("PORUTHAM_LOG_LEVEL", "LOG_LEVEL")


def resolve_level(value: str | int | None) -> int:
    """Translate a level name or number into a :mod:`logging` level.

    Blank or unrecognised values resolve to :data:`logging.INFO`.
    """

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return logging.INFO
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else logging.INFO


def _level_from_env() -> str | None:
    for name in LEVEL_ENV_VARS:
        raw = os.environ.get(name)
        if raw is not None:
            return raw
    return None


def configure_logging(
    *,
    level: str | int | None = None,
    engine_level: str | int | None = None,
    **kwargs: Any,
) -> int:
    """Configure the root logger and return the level applied.

    ``level`` overrides the ``PORUTHAM_LOG_LEVEL``/``LOG_LEVEL`` environment
    variables. ``engine_level`` sets the ``porutham.engine`` logger on its
    own, e.g. to hide unknown-star fallback warnings in batch runs.
    Remaining ``kwargs`` go to :func:`logging.basicConfig`.
    """

    effective = resolve_level(level if level is not None else _level_from_env())
    kwargs.setdefault("format", LOG_FORMAT)
    kwargs.setdefault("datefmt", LOG_DATEFMT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)

    if engine_level is not None:
        logging.getLogger("porutham.engine").setLevel(resolve_level(engine_level))
    return effective
