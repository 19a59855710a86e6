"""Positional distance between two nakshatras on the 27-star wheel."""

from __future__ import annotations

from .nakshatra import NAKSHATRA_COUNT, NakshatraRecord

__all__ = ["count_from_bride_to_groom"]


def count_from_bride_to_groom(bride: NakshatraRecord, groom: NakshatraRecord) -> int:
    """Return the groom's star position counted forward from the bride's star.

    The bride's own star counts as 1, so the result lies in ``[1, 27]`` and
    identical stars yield 1.
    """

    count = (groom.index - bride.index) + 1
    if count <= 0:
        count += NAKSHATRA_COUNT
    return count
