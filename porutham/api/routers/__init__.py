"""HTTP routers mounted by :mod:`porutham.api.app`."""

from __future__ import annotations

from . import health, porutham

__all__ = ["health", "porutham"]
