"""Nakshatra porutham compatibility engine.

The public entry point is :func:`calculate_compatibility`, which scores a
groom's and a bride's birth star against the ten classical poruthams and
returns a :class:`MatchReport`.
"""

from __future__ import annotations

from .engine import (
    MatchReport,
    NakshatraRecord,
    PoruthamResult,
    UnknownStarError,
    all_stars,
    calculate_compatibility,
    find_by_name,
    rasi_from_star,
)

__version__ = "0.1.0"

__all__ = [
    "MatchReport",
    "NakshatraRecord",
    "PoruthamResult",
    "UnknownStarError",
    "__version__",
    "all_stars",
    "calculate_compatibility",
    "find_by_name",
    "rasi_from_star",
]
