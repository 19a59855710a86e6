"""Compose porutham match reports for a groom and bride star pair."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .distance import count_from_bride_to_groom
from .nakshatra import NakshatraRecord, find_by_name, is_known_star
from .rules import RULES, PoruthamResult, evaluate_all
from .verdict import aggregate, score_band

__all__ = ["MatchReport", "calculate_compatibility"]

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchReport:
    """Result of a ten-porutham compatibility check."""

    total_score: float
    results: tuple[PoruthamResult, ...]
    verdict: str
    groom_star: NakshatraRecord
    bride_star: NakshatraRecord
    count: int
    total_possible: float = float(len(RULES))
    fallbacks: tuple[str, ...] = field(default_factory=tuple)

    @property
    def band(self) -> str:
        return score_band(self.total_score)

    def result(self, name: str) -> PoruthamResult:
        """Return the result of the porutham called ``name``."""

        for item in self.results:
            if item.name == name:
                return item
        raise KeyError(name)

    def to_dict(self) -> dict[str, object]:
        return {
            "totalScore": self.total_score,
            "totalPossible": self.total_possible,
            "results": [item.to_dict() for item in self.results],
            "verdict": self.verdict,
            "groomStar": self.groom_star.to_dict(),
            "brideStar": self.bride_star.to_dict(),
            "count": self.count,
            "band": self.band,
            "fallbacks": list(self.fallbacks),
        }


def calculate_compatibility(
    groom_star_name: str,
    bride_star_name: str,
    *,
    strict: bool = False,
    normalize: bool = False,
) -> MatchReport:
    """Evaluate the ten poruthams for ``groom_star_name`` and ``bride_star_name``.

    Unknown names are replaced by the registry's default star unless
    ``strict`` is set, in which case
    :class:`~porutham.engine.nakshatra.UnknownStarError` propagates.
    """

    groom = find_by_name(groom_star_name, strict=strict, normalize=normalize)
    bride = find_by_name(bride_star_name, strict=strict, normalize=normalize)
    fallbacks = tuple(
        role
        for role, name in (("groom", groom_star_name), ("bride", bride_star_name))
        if not is_known_star(name, normalize=normalize)
    )

    count = count_from_bride_to_groom(bride, groom)
    results = tuple(evaluate_all(groom, bride, count))
    total, verdict = aggregate(results)
    LOG.debug(
        "Porutham %s x %s: count=%d total=%.1f verdict=%s",
        groom.name,
        bride.name,
        count,
        total,
        verdict,
    )
    return MatchReport(
        total_score=total,
        results=results,
        verdict=verdict,
        groom_star=groom,
        bride_star=bride,
        count=count,
        fallbacks=fallbacks,
    )
