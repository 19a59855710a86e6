from __future__ import annotations

import pytest

from porutham.engine import (
    RAJJU_MISMATCH,
    calculate_compatibility,
    find_by_name,
    star_names,
)

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

NAMES = st.sampled_from(star_names())


@settings(deadline=None)
@given(groom=NAMES, bride=NAMES)
def test_total_is_bounded_in_half_steps(groom: str, bride: str) -> None:
    report = calculate_compatibility(groom, bride)
    assert 0 <= report.total_score <= 10
    assert (report.total_score * 2).is_integer()
    assert 1 <= report.count <= 27


@settings(deadline=None)
@given(name=NAMES)
def test_identity_pairing(name: str) -> None:
    report = calculate_compatibility(name, name)
    assert report.count == 1
    assert report.result("Dina").score == 0
    assert report.result("Rajju").score == 0
    assert report.result("Vedhai").score == 1
    for rule in ("Gana", "Yoni", "Rasi", "Rasi Adhipathi"):
        assert report.result(rule).score == 1


@settings(deadline=None)
@given(groom=NAMES, bride=NAMES)
def test_rajju_veto(groom: str, bride: str) -> None:
    report = calculate_compatibility(groom, bride)
    if find_by_name(groom).rajju == find_by_name(bride).rajju:
        assert report.verdict == RAJJU_MISMATCH
    else:
        assert report.verdict != RAJJU_MISMATCH


@settings(deadline=None)
@given(groom=NAMES, bride=NAMES)
def test_vedhai_symmetry(groom: str, bride: str) -> None:
    a, b = find_by_name(groom), find_by_name(bride)
    afflicted = b.name in a.vedhai or a.name in b.vedhai
    forward = calculate_compatibility(groom, bride).result("Vedhai").score
    backward = calculate_compatibility(bride, groom).result("Vedhai").score
    assert forward == backward == (0 if afflicted else 1)


@settings(deadline=None)
@given(junk=st.text(max_size=20).filter(lambda text: text not in set(star_names())), bride=NAMES)
def test_unknown_names_never_raise(junk: str, bride: str) -> None:
    report = calculate_compatibility(junk, bride)
    assert report.groom_star.name == "Aswini"
    assert report.fallbacks == ("groom",)
