"""Aggregate porutham results into a total score and verdict."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from .rules import PoruthamResult

__all__ = [
    "EXCELLENT",
    "GOOD",
    "NOT_RECOMMENDED",
    "RAJJU_MISMATCH",
    "ScoreBand",
    "aggregate",
    "derive_verdict",
    "rajju_score",
    "score_band",
    "total_score",
]

EXCELLENT = "Excellent Match (Uthamam)"
GOOD = "Good Match (Mathiyamam)"
RAJJU_MISMATCH = "Rajju Mismatch (Athamam)"
NOT_RECOMMENDED = "Not Recommended"

ScoreBand = Literal["high", "medium", "low"]


def total_score(results: Sequence[PoruthamResult]) -> float:
    return float(sum(result.score for result in results))


def rajju_score(results: Sequence[PoruthamResult]) -> float:
    """Return the Rajju score from ``results``.

    Raises :class:`ValueError` when the Rajju rule was not evaluated.
    """

    for result in results:
        if result.name == "Rajju":
            return result.score
    raise ValueError("results do not include the Rajju porutham")


def derive_verdict(total: float, rajju: float) -> str:
    """Return the verdict for ``total`` given the Rajju score.

    Branches are checked in order and the first match wins, so a failed
    Rajju overrides any total.
    """

    if total >= 7 and rajju == 1:
        return EXCELLENT
    if total >= 5 and rajju == 1:
        return GOOD
    if rajju == 0:
        return RAJJU_MISMATCH
    return NOT_RECOMMENDED


def aggregate(results: Sequence[PoruthamResult]) -> tuple[float, str]:
    """Return ``(total_score, verdict)`` for a full set of rule results."""

    total = total_score(results)
    return total, derive_verdict(total, rajju_score(results))


def score_band(total: float) -> ScoreBand:
    """Colour band used when rendering a total: above 6 high, above 4 medium."""

    if total > 6:
        return "high"
    if total > 4:
        return "medium"
    return "low"
