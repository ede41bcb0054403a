import math
from datetime import date

import pytest

from jyotish_engine.core.aspects import (
    angular_separation, aspect_between, find_aspects, find_transits,
)
from jyotish_engine.core.ephemeris import J2000, SIGNS, julian_day, sign_index
from jyotish_engine.core.houses import (
    absolute_house, approximate_lst, build_houses, compute_ascendant, house_from_ascendant,
)
from jyotish_engine.core.models import PlanetPosition, PlanetStatus


def _pos(name, lon):
    idx = sign_index(lon)
    return PlanetPosition(name=name, symbol="", longitude=lon, sign=SIGNS[idx],
                          degree=lon % 30, house=idx + 1, house_from_ascendant=1,
                          status=PlanetStatus.NEUTRAL)


# ---------------------------------------------------------------------------
# Houses
# ---------------------------------------------------------------------------

def test_absolute_house_is_sign_number():
    assert absolute_house(0.0) == 1
    assert absolute_house(45.0) == 2
    assert absolute_house(359.0) == 12


@pytest.mark.parametrize("sign_idx,asc_idx,expected", [
    (0, 0, 1), (11, 0, 12), (0, 3, 10), (3, 3, 1), (2, 3, 12),
])
def test_house_from_ascendant(sign_idx, asc_idx, expected):
    assert house_from_ascendant(sign_idx, asc_idx) == expected


def test_build_houses_starts_at_ascendant_sign():
    houses = build_houses(95.0, [_pos("Sun", 70.0), _pos("Moon", 100.0)])
    assert len(houses) == 12
    assert (houses[0].number, houses[0].sign) == (1, "Cancer")
    assert (houses[11].number, houses[11].sign) == (12, "Gemini")
    assert houses[0].planets == ("Moon",)
    assert houses[11].planets == ("Sun",)
    assert all(h.planets == () for h in houses[1:11])


@pytest.mark.parametrize("lat,lon", [(28.6139, 77.2090), (-33.87, 151.21), (69.65, 18.96), (0.0, 0.0)])
def test_ascendant_in_range(lat, lon):
    for offset in (0.0, 0.25, 0.5, 0.75):
        assert 0.0 <= compute_ascendant(J2000 + offset, lat, lon) < 360.0


def test_delhi_1990_ascendant_vector():
    # 1990-06-15 08:30 at Delhi, local clock read as the reference meridian
    asc = compute_ascendant(julian_day(date(1990, 6, 15), 8.5), 28.6139, 77.2090)
    assert asc == pytest.approx(265.471, abs=0.01)
    assert SIGNS[sign_index(asc)] == "Sagittarius"


@pytest.mark.parametrize("lat,lon", [(28.6139, 77.2090), (-33.87, 151.21), (51.5, -0.13)])
def test_ascendant_uses_latitude_for_both_terms(lat, lon):
    # With δ = φ the denominator collapses to sin φ · (cos RA − 1)
    for offset in (0.0, 0.3, 0.6, 0.9):
        jd = J2000 + offset
        ra = math.radians(approximate_lst(jd, lon))
        expected = math.degrees(math.atan2(math.sin(ra),
                                           math.sin(math.radians(lat)) * (math.cos(ra) - 1.0)))
        assert angular_separation(compute_ascendant(jd, lat, lon), expected % 360.0) < 1e-9


# ---------------------------------------------------------------------------
# Aspects
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("a,b,expected", [(350.0, 10.0, 20.0), (0.0, 180.0, 180.0), (10.0, 200.0, 170.0)])
def test_angular_separation_is_circular(a, b, expected):
    assert angular_separation(a, b) == pytest.approx(expected)
    assert angular_separation(b, a) == pytest.approx(expected)


def test_aspect_between():
    assert aspect_between(0.0, 120.0) == "trine"
    assert aspect_between(0.0, 121.0) is None
    assert aspect_between(0.0, 121.0, orb=1.0) == "trine"
    assert aspect_between(350.0, 110.0) == "trine"
    assert aspect_between(10.0, 100.0) == "square"


def test_find_aspects_names_both_planets():
    planets = [_pos("Sun", 10.0), _pos("Moon", 190.0)]
    assert find_aspects(planets) == ["Sun opposite Moon"]
    assert find_aspects([_pos("Sun", 10.0), _pos("Moon", 191.0)]) == []


def test_find_transits_within_orb():
    natal = [_pos("Sun", 100.0), _pos("Moon", 355.0)]
    current = [_pos("Sun", 250.0), _pos("Moon", 105.0), _pos("Moon", 4.0)]
    assert find_transits(natal, current) == [
        "Moon transiting Sun in Cancer",
        "Moon transiting Moon in Pisces",
    ]
    assert find_transits(natal, current, orb=4.0) == []
