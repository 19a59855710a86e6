"""HTTP service exposing the porutham engine."""

from __future__ import annotations

from .app import app, create_app, get_app

__all__ = ["app", "create_app", "get_app"]
