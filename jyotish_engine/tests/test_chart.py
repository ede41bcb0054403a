"""
test_chart.py
=============
Birth chart generation, end to end.

Test vectors:
  - Standard Indian birth, Delhi, Vedic and Western
  - Leap day birth, Mumbai
  - Southern hemisphere, Sydney
"""

from datetime import date, datetime, timedelta

import pytest

from jyotish_engine import (
    AstrologySystem, BirthDetails, InvalidBirthDetailsError, UnsupportedPlanetError,
    calculate_astrology_chart,
)
from jyotish_engine.core.dasha import TOTAL_YEARS, add_years
from jyotish_engine.core.ephemeris import AYANAMSA, SIGNS, normalize, sign_index

NOW = datetime(2024, 1, 1, 12, 0)

DELHI_1990 = BirthDetails.parse("1990-06-15", "08:30", "28.6139", "77.2090", "Asia/Kolkata")

TEST_VECTORS = [
    DELHI_1990,
    BirthDetails.parse("2000-02-29", "12:00", 19.0760, 72.8777),     # Mumbai, leap day
    BirthDetails.parse("1975-12-01", "23:45:10", -33.8688, 151.2093),  # Sydney
]


def _chart(birth=DELHI_1990, system=AstrologySystem.VEDIC, **kwargs):
    kwargs.setdefault("now", NOW)
    return calculate_astrology_chart(birth, system, **kwargs)


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("args", [
    ("1990-13-01", "08:30", 28.6, 77.2),
    ("1990-06-15", "25:00", 28.6, 77.2),
    ("1990-06-15", "08:30", 91.0, 77.2),
    ("1990-06-15", "08:30", 28.6, -180.5),
    ("1990-06-15", "08:30", "north", 77.2),
    ("1990-06-15", "08:30", float("nan"), 77.2),
])
def test_birth_details_rejects_bad_input(args):
    with pytest.raises(InvalidBirthDetailsError):
        BirthDetails.parse(*args)


def test_birth_details_parses_strings():
    assert DELHI_1990.date == date(1990, 6, 15)
    assert DELHI_1990.latitude == pytest.approx(28.6139)
    assert DELHI_1990.timezone == "Asia/Kolkata"


@pytest.mark.parametrize("planet", ["Mars", "Saturn", "Pluto"])
def test_unsupported_planet_raises(planet):
    with pytest.raises(UnsupportedPlanetError):
        _chart(planets=["Sun", "Moon", planet])


# ---------------------------------------------------------------------------
# Known vector
# ---------------------------------------------------------------------------

def test_delhi_1990_vedic_sun_sign():
    chart = _chart()
    assert chart.sun_sign in {"Gemini", "Cancer"}
    assert chart.sun_sign == chart.planet("Sun").sign


def test_vedic_and_western_differ_by_ayanamsa_for_planets_only():
    vedic = _chart(system=AstrologySystem.VEDIC)
    western = _chart(system="western")
    for name in ("Sun", "Moon"):
        diff = normalize(western.planet(name).longitude - vedic.planet(name).longitude)
        assert diff == pytest.approx(AYANAMSA)
    # The ascendant stays tropical in both systems
    assert western.ascendant_degree == vedic.ascendant_degree
    assert western.ascendant == vedic.ascendant == "Sagittarius"
    assert [h.sign for h in western.houses] == [h.sign for h in vedic.houses]


def test_chart_is_deterministic_for_fixed_now():
    assert _chart() == _chart()


# ---------------------------------------------------------------------------
# Structural invariants
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("birth", TEST_VECTORS)
@pytest.mark.parametrize("system", list(AstrologySystem))
def test_chart_invariants(birth, system):
    chart = _chart(birth, system)

    assert 0.0 <= chart.ascendant_degree < 360.0
    assert chart.ascendant == SIGNS[sign_index(chart.ascendant_degree)]
    assert chart.ascendant_analysis.startswith(f"Your Ascendant is in {chart.ascendant} at ")

    for p in chart.planets:
        assert 0.0 <= p.longitude < 360.0
        assert 0.0 <= p.degree < 30.0
        assert p.house == sign_index(p.longitude) + 1
        assert p.sign == SIGNS[p.house - 1]

    # Houses run 1–12 starting from the ascendant's sign
    assert [h.number for h in chart.houses] == list(range(1, 13))
    assert chart.houses[0].sign == chart.ascendant
    for p in chart.planets:
        holding = [h for h in chart.houses if p.name in h.planets]
        assert len(holding) == 1
        assert holding[0].sign == p.sign
        assert holding[0].number == p.house_from_ascendant

    assert set(chart.elements) == {"fire", "earth", "air", "water"}
    assert all(0 <= v <= 100 for v in chart.elements.values())
    assert abs(sum(chart.elements.values()) - 100) <= 3

    assert len(chart.compatibility) == 12
    assert all(0 <= v <= 100 for v in chart.compatibility.values())
    assert chart.compatibility[chart.sun_sign] == 100.0

    assert set(chart.life_areas) == {"career", "relationships", "health", "finance"}
    assert all(0 <= a.score <= 100 for a in chart.life_areas.values())
    assert len(chart.traits) == len(set(chart.traits))


# ---------------------------------------------------------------------------
# Aspects and transits
# ---------------------------------------------------------------------------

def test_wide_aspect_orb_reports_the_pair():
    chart = _chart(aspect_orb=180.0)
    assert chart.aspects == ("Sun conjunct Moon",)


def test_transits_at_birth_moment_include_each_planet_over_itself():
    birth_moment = datetime.combine(DELHI_1990.date, DELHI_1990.time)
    chart = _chart(system=AstrologySystem.WESTERN, now=birth_moment)
    for p in chart.planets:
        assert f"{p.name} transiting {p.name} in {p.sign}" in chart.transits


def test_zero_transit_orb_at_other_time_is_empty():
    assert _chart(transit_orb=0.0).transits == ()


# ---------------------------------------------------------------------------
# Period timeline
# ---------------------------------------------------------------------------

def test_vimshottari_timeline():
    chart = _chart()
    periods = chart.dasha_periods
    assert chart.period_label == "Vimshottari Dasha"
    assert [p.planet for p in periods] == [
        "Ketu", "Venus", "Sun", "Moon", "Mars", "Rahu", "Jupiter", "Saturn", "Mercury"]
    assert periods[0].start_date == NOW.date()
    for earlier, later in zip(periods, periods[1:]):
        assert earlier.end_date == later.start_date
    assert sum(int(p.duration.split()[0]) for p in periods) == TOTAL_YEARS
    assert periods[-1].end_date == add_years(NOW.date(), TOTAL_YEARS)
    assert periods[0].prediction.startswith("Spiritual transformation")


def test_western_timeline():
    chart = _chart(system=AstrologySystem.WESTERN)
    assert chart.period_label == "Planetary Period"
    assert [p.planet for p in chart.dasha_periods] == ["Sun", "Moon"]
    for period in chart.dasha_periods:
        assert period.start_date == NOW.date()
        assert period.end_date == NOW.date() + timedelta(days=365)
        assert period.duration == "1 year"
        assert period.sub_periods == ()
