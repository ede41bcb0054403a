"""
panchang.py
===========
Panchang (Hindu almanac) elements derived from solar and lunar longitudes.

  1. Vara      — Day of week
  2. Tithi     — Lunar day (1–30), 12° of Moon−Sun elongation each
  3. Nakshatra — Lunar mansion (27 × 13°20')
  4. Yoga      — (Sun + Moon) in 27 equal parts
  5. Karana    — Half-tithi, 6° each

Karana is reduced to the repeating 10-name cycle; the fixed karanas at the
month boundaries are not special-cased.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from .ephemeris import (
    NAKSHATRAS, lunar_position, normalize, panchang_julian_day, solar_position,
)
from .formatting import decimal_to_time
from .models import NakshatraInfo

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

TITHI_NAMES = [
    "Pratipada", "Dwitiya", "Tritiya", "Chaturthi", "Panchami",
    "Shashthi", "Saptami", "Ashtami", "Navami", "Dashami",
    "Ekadashi", "Dwadashi", "Trayodashi", "Chaturdashi", "Purnima/Amavasya",
]

PAKSHAS = ("Shukla", "Krishna")

YOGAS = [
    "Vishkumbha", "Priti", "Ayushman", "Saubhagya", "Shobhana",
    "Atiganda", "Sukarma", "Dhriti", "Shula", "Ganda",
    "Vriddhi", "Dhruva", "Vyaghata", "Harshana", "Vajra",
    "Siddhi", "Vyatipata", "Variyan", "Parigha", "Shiva",
    "Siddha", "Sadhya", "Shubha", "Shukla", "Brahma",
    "Indra", "Vaidhriti"
]

KARANAS = [
    "Bava", "Balava", "Kaulava", "Taitila", "Garija",
    "Vanija", "Vishti", "Shakuni", "Chatushpada", "Naga"
]

VARA = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

TITHI_SPAN     = 12.0
KARANA_SPAN    = 6.0
NAKSHATRA_SPAN = 360.0 / 27.0

TITHI_START_FALLBACK = "00:00"
TITHI_END_FALLBACK   = "23:59"


def weekday_index(day: date) -> int:
    """0=Sunday … 6=Saturday."""
    return (day.weekday() + 1) % 7


# ---------------------------------------------------------------------------
# Tithi
# ---------------------------------------------------------------------------

def tithi_angle(sun_lon: float, moon_lon: float) -> float:
    return normalize(moon_lon - sun_lon)


def compute_tithi_number(angle: float) -> int:
    """1-based tithi (1–30) for a Moon−Sun elongation."""
    return min(int(normalize(angle) // TITHI_SPAN), 29) + 1


def paksha_for(tithi_number: int) -> str:
    return PAKSHAS[0] if tithi_number <= 15 else PAKSHAS[1]


def tithi_name(tithi_number: int) -> str:
    return TITHI_NAMES[(tithi_number - 1) % 15]


def _elongation_at(jd: float) -> float:
    return tithi_angle(solar_position(jd).longitude, lunar_position(jd).longitude)


def find_tithi_boundaries(day: date, tithi_number: int) -> Tuple[str, str]:
    """
    Hourly search from local midnight for when the tithi band begins and ends.

    Samples 24 whole hours. The start is the first sample at or past the
    band's lower bound, the end the first at or past its upper bound. Angles
    are taken relative to the band start so the 360°→0° wrap never counts as
    having reached it. Missing boundaries fall back to 00:00 / 23:59.
    """
    band_start = (tithi_number - 1) * TITHI_SPAN
    midnight = datetime(day.year, day.month, day.day)

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    for hour in range(24):
        angle = _elongation_at(panchang_julian_day(midnight + timedelta(hours=hour)))
        # elongation relative to band start, in [-180, 180)
        relative = (angle - band_start + 180.0) % 360.0 - 180.0
        if start_time is None and relative >= 0.0:
            start_time = decimal_to_time(hour)
        if end_time is None and relative >= TITHI_SPAN:
            end_time = decimal_to_time(hour)
            break

    if start_time is None or end_time is None:
        logger.debug("Tithi %d boundary not found on %s; using fallback", tithi_number, day)
    return start_time or TITHI_START_FALLBACK, end_time or TITHI_END_FALLBACK


# ---------------------------------------------------------------------------
# Nakshatra, Yoga, Karana
# ---------------------------------------------------------------------------

def compute_nakshatra(moon_sidereal: float) -> NakshatraInfo:
    """
    Nakshatra of the Moon. Each nakshatra = 360/27 = 13°20' arc.
    """
    lon = normalize(moon_sidereal)
    index = int(lon // NAKSHATRA_SPAN)
    if index >= 27:
        # float edge at exactly 360°
        index = 0
    position = lon - index * NAKSHATRA_SPAN
    pada = min(int(position // (NAKSHATRA_SPAN / 4)), 3) + 1
    return NakshatraInfo(index=index, name=NAKSHATRAS[index], pada=pada)


def compute_yoga(sun_sidereal: float, moon_sidereal: float) -> str:
    total = normalize(sun_sidereal + moon_sidereal)
    index = min(int(total * 27 // 360), 26)
    return YOGAS[index]


def compute_karana(sun_sidereal: float, moon_sidereal: float) -> str:
    angle = normalize(moon_sidereal - sun_sidereal + 360.0)
    return KARANAS[int(angle // KARANA_SPAN) % 10]
