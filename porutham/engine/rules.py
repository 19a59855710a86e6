"""The ten porutham rules evaluated between a groom's and a bride's star.

Every evaluator is a pure function ``(groom, bride, count) -> PoruthamResult``
where ``count`` is :func:`~porutham.engine.distance.count_from_bride_to_groom`.
Statuses are assigned by each rule's own thresholds rather than a shared
score mapping.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from .nakshatra import NakshatraRecord

__all__ = [
    "DINA_COUNTS",
    "MAHENDRA_COUNTS",
    "RULES",
    "RULE_NAMES",
    "PoruthamResult",
    "RuleEvaluator",
    "Status",
    "dina",
    "evaluate_all",
    "gana",
    "mahendra",
    "rajju",
    "rasi",
    "rasi_adhipathi",
    "sthree_deergam",
    "vasiya",
    "vedhai",
    "yoni",
]

Status = Literal["Uthamam", "Mathiyamam", "Athamam"]

UTHAMAM: Status = "Uthamam"
MATHIYAMAM: Status = "Mathiyamam"
ATHAMAM: Status = "Athamam"

DINA_COUNTS = frozenset({2, 4, 6, 8, 9, 11, 13, 15, 18, 20, 24, 26})
MAHENDRA_COUNTS = frozenset({4, 7, 10, 13, 16, 19, 22, 25})


@dataclass(frozen=True)
class PoruthamResult:
    """Outcome of a single porutham rule."""

    name: str
    score: float
    status: Status
    description: str
    max_score: float = 1.0

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "score": self.score,
            "maxScore": self.max_score,
            "status": self.status,
            "description": self.description,
        }


RuleEvaluator = Callable[[NakshatraRecord, NakshatraRecord, int], PoruthamResult]


def _match_or_medium(name: str, description: str, same: bool) -> PoruthamResult:
    # Yoni, Rasi and Rasi Adhipathi never score below Mathiyamam.
    if same:
        return PoruthamResult(name, 1.0, UTHAMAM, description)
    return PoruthamResult(name, 0.5, MATHIYAMAM, description)


def dina(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    if count in DINA_COUNTS:
        return PoruthamResult("Dina", 1.0, UTHAMAM, "Health & Prosperity")
    return PoruthamResult("Dina", 0.0, ATHAMAM, "Health & Prosperity")


def gana(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    """Temperament match.

    Only a Rakshasa groom with a non-Rakshasa bride scores zero; the reverse
    pairing falls through to the medium outcome.
    """

    description = "Temperament Match"
    if groom.gana == bride.gana:
        return PoruthamResult("Gana", 1.0, UTHAMAM, description)
    if {groom.gana, bride.gana} == {"Deva", "Manusha"}:
        return PoruthamResult("Gana", 0.5, MATHIYAMAM, description)
    if groom.gana == "Rakshasa" and bride.gana != "Rakshasa":
        return PoruthamResult("Gana", 0.0, ATHAMAM, description)
    return PoruthamResult("Gana", 0.5, MATHIYAMAM, description)


def mahendra(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    if count in MAHENDRA_COUNTS:
        return PoruthamResult("Mahendra", 1.0, UTHAMAM, "Progeny & Wealth")
    return PoruthamResult("Mahendra", 0.0, ATHAMAM, "Progeny & Wealth")


def sthree_deergam(
    groom: NakshatraRecord, bride: NakshatraRecord, count: int
) -> PoruthamResult:
    description = "Wellbeing of Bride"
    if count >= 13:
        return PoruthamResult("Sthree Deergam", 1.0, UTHAMAM, description)
    if count >= 7:
        return PoruthamResult("Sthree Deergam", 0.5, MATHIYAMAM, description)
    return PoruthamResult("Sthree Deergam", 0.0, ATHAMAM, description)


def yoni(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    # Animal enmity pairs are not modelled; any mismatch is medium.
    return _match_or_medium("Yoni", "Intimacy Compatibility", groom.yoni == bride.yoni)


def rasi(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    return _match_or_medium("Rasi", "Family Unity", groom.rashi == bride.rashi)


def rasi_adhipathi(
    groom: NakshatraRecord, bride: NakshatraRecord, count: int
) -> PoruthamResult:
    # TODO: score via the planetary friend/neutral/enemy table instead of identity.
    return _match_or_medium("Rasi Adhipathi", "Lordship Friendship", groom.lord == bride.lord)


def vasiya(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    # Constant until rashi-pair attraction tables are available.
    return PoruthamResult("Vasiya", 0.5, MATHIYAMAM, "Mutual Attraction")


def rajju(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    if groom.rajju != bride.rajju:
        return PoruthamResult("Rajju", 1.0, UTHAMAM, "Mangalya Bala (Vital)")
    return PoruthamResult("Rajju", 0.0, ATHAMAM, "Mangalya Bala (Vital)")


def vedhai(groom: NakshatraRecord, bride: NakshatraRecord, count: int) -> PoruthamResult:
    if groom.afflicts(bride) or bride.afflicts(groom):
        return PoruthamResult("Vedhai", 0.0, ATHAMAM, "Affliction Check")
    return PoruthamResult("Vedhai", 1.0, UTHAMAM, "Affliction Check")


RULES: Sequence[tuple[str, RuleEvaluator]] = (
    ("Dina", dina),
    ("Gana", gana),
    ("Mahendra", mahendra),
    ("Sthree Deergam", sthree_deergam),
    ("Yoni", yoni),
    ("Rasi", rasi),
    ("Rasi Adhipathi", rasi_adhipathi),
    ("Vasiya", vasiya),
    ("Rajju", rajju),
    ("Vedhai", vedhai),
)

RULE_NAMES: tuple[str, ...] = tuple(name for name, _ in RULES)


def evaluate_all(
    groom: NakshatraRecord, bride: NakshatraRecord, count: int
) -> list[PoruthamResult]:
    """Run every rule in :data:`RULES` order."""

    return [evaluator(groom, bride, count) for _, evaluator in RULES]
