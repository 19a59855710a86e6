import logging

import pytest

from porutham.engine import (
    NAKSHATRA_COUNT,
    UnknownStarError,
    all_stars,
    default_star,
    find_by_name,
    get_by_id,
    is_known_star,
    rasi_from_star,
    star_names,
)
from porutham.engine.nakshatra import GANAS, RAJJUS


def test_registry_has_27_contiguous_ids():
    stars = all_stars()
    assert len(stars) == NAKSHATRA_COUNT == 27
    assert [star.id for star in stars] == list(range(1, 28))
    assert [star.index for star in stars] == list(range(27))


def test_names_are_unique():
    names = star_names()
    assert len(set(names)) == len(names)


def test_vedhai_entries_reference_known_stars():
    names = set(star_names())
    for star in all_stars():
        assert star.vedhai
        for partner in star.vedhai:
            assert partner in names, f"{star.name} lists unknown vedhai {partner}"


def test_categorical_attributes_use_fixed_vocabulary():
    for star in all_stars():
        assert star.gana in GANAS
        assert star.rajju in RAJJUS
    assert len({star.rashi for star in all_stars()}) == 12
    assert len({star.lord for star in all_stars()}) == 9


def test_first_star_attributes():
    star = find_by_name("Aswini")
    assert star.id == 1
    assert star.rashi == "Mesha"
    assert star.gana == "Deva"
    assert star.yoni == "Horse"
    assert star.rajju == "Pada"
    assert star.vedhai == ("Jyeshta",)
    assert star.lord == "Ketu"


def test_multi_word_names_resolve():
    assert find_by_name("Purva Phalguni").id == 11
    assert find_by_name("Uttara Phalguni").rashi == "Simha"


def test_unknown_name_falls_back_to_first_star(caplog):
    with caplog.at_level(logging.WARNING, logger="porutham.engine.nakshatra"):
        star = find_by_name("NotAStar")
    assert star is default_star()
    assert star.name == "Aswini"
    assert "NotAStar" in caplog.text


def test_unknown_name_raises_in_strict_mode():
    with pytest.raises(UnknownStarError) as excinfo:
        find_by_name("NotAStar", strict=True)
    assert excinfo.value.name == "NotAStar"
    assert isinstance(excinfo.value, KeyError)
    assert "NotAStar" in str(excinfo.value)


def test_lookup_is_exact_by_default():
    assert not is_known_star("rohini")
    assert find_by_name(" rohini ").name == "Aswini"


def test_normalized_lookup_ignores_case_and_whitespace():
    assert is_known_star("  rOHINI ", normalize=True)
    assert find_by_name("  rOHINI ", normalize=True).name == "Rohini"
    assert find_by_name("purva phalguni", strict=True, normalize=True).id == 11


def test_get_by_id_bounds():
    assert get_by_id(27).name == "Revathi"
    with pytest.raises(UnknownStarError):
        get_by_id(0)
    with pytest.raises(UnknownStarError):
        get_by_id(28)


def test_rasi_from_star():
    assert rasi_from_star("Hasta") == "Kanya"
    assert rasi_from_star("Revathi") == "Meena"
    assert rasi_from_star("Unknown") == "Mesha"


def test_records_are_immutable():
    star = find_by_name("Magha")
    with pytest.raises(AttributeError):
        star.name = "Other"  # type: ignore[misc]
