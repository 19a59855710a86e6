"""Reference table of the 27 nakshatras used for porutham matching.

Each row carries the attributes consulted by the ten porutham rules: the
rashi the star falls under, its gana (temperament), yoni (animal
archetype), rajju (body region) and vedhai (afflicting stars), plus the
ruling planet. Wheel order starts at Aswini and ``id`` values are
one-based, so ``id - 1`` is the zero-based wheel index.

Vedhai pairs are declared from one side in several traditions, so callers
must test the relation in both directions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

__all__ = [
    "DEFAULT_RASI",
    "GANAS",
    "NAKSHATRA_COUNT",
    "NAKSHATRA_TABLE",
    "RAJJUS",
    "Gana",
    "NakshatraRecord",
    "Rajju",
    "UnknownStarError",
    "all_stars",
    "default_star",
    "find_by_name",
    "get_by_id",
    "is_known_star",
    "rasi_from_star",
    "star_names",
]

LOG = logging.getLogger(__name__)

Gana = Literal["Deva", "Manusha", "Rakshasa"]
Rajju = Literal["Siro", "Kanta", "Udar", "Kati", "Pada"]

GANAS: tuple[str, ...] = ("Deva", "Manusha", "Rakshasa")
RAJJUS: tuple[str, ...] = ("Siro", "Kanta", "Udar", "Kati", "Pada")

NAKSHATRA_COUNT = 27
DEFAULT_RASI = "Mesha"


class UnknownStarError(KeyError):
    """Raised when a nakshatra name or id is not present in the registry."""

    def __init__(self, name: object) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown nakshatra: {self.name!r}"


@dataclass(frozen=True)
class NakshatraRecord:
    """Attributes of a single nakshatra on the 27-star wheel."""

    id: int
    name: str
    rashi: str
    gana: Gana
    yoni: str
    rajju: Rajju
    vedhai: tuple[str, ...]
    lord: str

    @property
    def index(self) -> int:
        """Zero-based position on the wheel."""

        return self.id - 1

    def afflicts(self, other: NakshatraRecord) -> bool:
        """Return ``True`` when ``other`` is listed in this star's vedhai."""

        return other.name in self.vedhai

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "rashi": self.rashi,
            "gana": self.gana,
            "yoni": self.yoni,
            "rajju": self.rajju,
            "vedhai": list(self.vedhai),
            "lord": self.lord,
        }


# (name, rashi, gana, yoni, rajju, vedhai, lord) in wheel order.
NAKSHATRA_TABLE: Sequence[tuple[str, str, str, str, str, tuple[str, ...], str]] = (
    ("Aswini", "Mesha", "Deva", "Horse", "Pada", ("Jyeshta",), "Ketu"),
    ("Bharani", "Mesha", "Manusha", "Elephant", "Kati", ("Anuradha",), "Venus"),
    ("Krittika", "Mesha", "Rakshasa", "Goat", "Udar", ("Vishaka",), "Sun"),
    ("Rohini", "Vrishabha", "Manusha", "Serpent", "Kanta", ("Swati",), "Moon"),
    ("Mrigasira", "Vrishabha", "Deva", "Serpent", "Siro", ("Dhanishta",), "Mars"),
    ("Arudra", "Mithuna", "Manusha", "Dog", "Siro", ("Shravana",), "Rahu"),
    ("Punarvasu", "Mithuna", "Deva", "Cat", "Kanta", ("Uttarashada",), "Jupiter"),
    ("Pushya", "Kataka", "Deva", "Goat", "Udar", ("Purvashada",), "Saturn"),
    ("Ashlesha", "Kataka", "Rakshasa", "Cat", "Kati", ("Moola",), "Mercury"),
    ("Magha", "Simha", "Rakshasa", "Rat", "Pada", ("Revathi",), "Ketu"),
    ("Purva Phalguni", "Simha", "Manusha", "Rat", "Kati", ("Uttarabhadra",), "Venus"),
    ("Uttara Phalguni", "Simha", "Manusha", "Cow", "Udar", ("Purvabhadra",), "Sun"),
    ("Hasta", "Kanya", "Deva", "Buffalo", "Kanta", ("Shatabhisha",), "Moon"),
    ("Chitra", "Kanya", "Rakshasa", "Tiger", "Siro", ("Mrigasira",), "Mars"),
    ("Swati", "Tula", "Deva", "Buffalo", "Siro", ("Rohini",), "Rahu"),
    ("Vishaka", "Tula", "Rakshasa", "Tiger", "Kanta", ("Krittika",), "Jupiter"),
    ("Anuradha", "Vrishchika", "Deva", "Deer", "Udar", ("Bharani",), "Saturn"),
    ("Jyeshta", "Vrishchika", "Rakshasa", "Deer", "Kati", ("Aswini",), "Mercury"),
    ("Moola", "Dhanusu", "Rakshasa", "Dog", "Pada", ("Ashlesha",), "Ketu"),
    ("Purvashada", "Dhanusu", "Manusha", "Monkey", "Kati", ("Pushya",), "Venus"),
    ("Uttarashada", "Dhanusu", "Manusha", "Mongoose", "Udar", ("Punarvasu",), "Sun"),
    ("Shravana", "Makara", "Deva", "Monkey", "Kanta", ("Arudra",), "Moon"),
    ("Dhanishta", "Makara", "Rakshasa", "Lion", "Siro", ("Mrigasira",), "Mars"),
    ("Shatabhisha", "Kumbha", "Rakshasa", "Horse", "Siro", ("Hasta",), "Rahu"),
    ("Purvabhadra", "Kumbha", "Manusha", "Lion", "Kanta", ("Uttara Phalguni",), "Jupiter"),
    ("Uttarabhadra", "Meena", "Manusha", "Cow", "Udar", ("Purva Phalguni",), "Saturn"),
    ("Revathi", "Meena", "Deva", "Elephant", "Pada", ("Magha",), "Mercury"),
)


_STARS: tuple[NakshatraRecord, ...] = tuple(
    NakshatraRecord(
        id=idx + 1,
        name=name,
        rashi=rashi,
        gana=gana,  # type: ignore[arg-type]
        yoni=yoni,
        rajju=rajju,  # type: ignore[arg-type]
        vedhai=vedhai,
        lord=lord,
    )
    for idx, (name, rashi, gana, yoni, rajju, vedhai, lord) in enumerate(NAKSHATRA_TABLE)
)

_BY_NAME: Mapping[str, NakshatraRecord] = {star.name: star for star in _STARS}
_BY_FOLDED_NAME: Mapping[str, NakshatraRecord] = {
    star.name.casefold(): star for star in _STARS
}


def _lookup(name: str, *, normalize: bool) -> NakshatraRecord | None:
    star = _BY_NAME.get(name)
    if star is not None or not normalize:
        return star
    return _BY_FOLDED_NAME.get(str(name).strip().casefold())


def all_stars() -> tuple[NakshatraRecord, ...]:
    """Return every nakshatra in wheel order."""

    return _STARS


def star_names() -> list[str]:
    return [star.name for star in _STARS]


def default_star() -> NakshatraRecord:
    """Return the record substituted for unrecognised names."""

    return _STARS[0]


def is_known_star(name: str, *, normalize: bool = False) -> bool:
    return _lookup(name, normalize=normalize) is not None


def get_by_id(star_id: int) -> NakshatraRecord:
    """Return the nakshatra whose one-based ``id`` is ``star_id``."""

    if not 1 <= int(star_id) <= NAKSHATRA_COUNT:
        raise UnknownStarError(star_id)
    return _STARS[int(star_id) - 1]


def find_by_name(
    name: str, *, strict: bool = False, normalize: bool = False
) -> NakshatraRecord:
    """Resolve ``name`` to its :class:`NakshatraRecord`.

    Unknown names resolve to :func:`default_star` unless ``strict`` is set,
    in which case :class:`UnknownStarError` is raised. ``normalize`` allows
    surrounding whitespace and case differences in ``name``.
    """

    star = _lookup(name, normalize=normalize)
    if star is not None:
        return star
    if strict:
        raise UnknownStarError(name)
    fallback = default_star()
    LOG.warning("Unknown nakshatra %r; substituting %s", name, fallback.name)
    return fallback


def rasi_from_star(name: str) -> str:
    """Return the rashi of ``name`` or :data:`DEFAULT_RASI` when unknown."""

    star = _BY_NAME.get(name)
    return star.rashi if star is not None else DEFAULT_RASI
