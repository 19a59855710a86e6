"""Nakshatra porutham (birth-star compatibility) engine."""

from __future__ import annotations

from .distance import count_from_bride_to_groom
from .nakshatra import (
    NAKSHATRA_COUNT,
    NakshatraRecord,
    UnknownStarError,
    all_stars,
    default_star,
    find_by_name,
    get_by_id,
    is_known_star,
    rasi_from_star,
    star_names,
)
from .report import MatchReport, calculate_compatibility
from .rules import RULE_NAMES, RULES, PoruthamResult, evaluate_all
from .verdict import (
    EXCELLENT,
    GOOD,
    NOT_RECOMMENDED,
    RAJJU_MISMATCH,
    aggregate,
    derive_verdict,
    score_band,
)

__all__ = [
    "EXCELLENT",
    "GOOD",
    "NAKSHATRA_COUNT",
    "NOT_RECOMMENDED",
    "RAJJU_MISMATCH",
    "RULES",
    "RULE_NAMES",
    "MatchReport",
    "NakshatraRecord",
    "PoruthamResult",
    "UnknownStarError",
    "aggregate",
    "all_stars",
    "calculate_compatibility",
    "count_from_bride_to_groom",
    "default_star",
    "derive_verdict",
    "evaluate_all",
    "find_by_name",
    "get_by_id",
    "is_known_star",
    "rasi_from_star",
    "score_band",
    "star_names",
]
