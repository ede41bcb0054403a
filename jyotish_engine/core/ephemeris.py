"""
ephemeris.py  —  Julian Day, Sun and Moon positions
====================================================
Simplified mean-element formulas after Jean Meeus, "Astronomical Algorithms"
2nd ed. (Ch. 7, 25, 47).

Accuracy is consumer-display grade: the Sun to a few arc-minutes, the Moon to
roughly a degree (only the three largest lunar perturbation terms are used).
That is enough to resolve tithi, nakshatra and sign at day level, which is all
the callers need.

Two solar call sites coexist and give slightly different results:
  - solar_position()         3-term equation of centre, used by the Panchang
  - chart_solar_longitude()  1-term equation of centre, used by birth charts

Only the Sun and Moon have longitude formulas. The other classical bodies are
named in the Planet enum but planet_longitude() refuses them.
"""

import math
from datetime import date, datetime, time
from typing import Union

from .errors import UnsupportedPlanetError
from .models import (
    AstrologySystem, LunarPosition, Planet, SolarPosition, SUPPORTED_PLANETS,
)

# ── Constants ──────────────────────────────────────────────────
J2000            = 2451545.0
DEG_TO_RAD       = math.pi / 180.0
RAD_TO_DEG       = 180.0 / math.pi
AYANAMSA         = 23.15          # fixed Lahiri value
OBLIQUITY        = 23.43929111    # mean obliquity of the ecliptic, J2000
IST_OFFSET_HOURS = 5.5

SIGNS = ["Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
         "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces"]

NAKSHATRAS = [
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishta",
    "Shatabhisha", "Purva Bhadrapada", "Uttara Bhadrapada", "Revati"
]


def normalize(x: float) -> float:
    """Normalize angle to [0, 360)."""
    x = x % 360.0
    # -1e-18 % 360 rounds up to exactly 360.0
    return 0.0 if x >= 360.0 else x


def _r(x):
    return x * DEG_TO_RAD


def _d(x):
    return x * RAD_TO_DEG


# ── Julian Day ─────────────────────────────────────────────────

def julian_day(day: date, hours: float = 0.0) -> float:
    """Meeus Ch. 7. `hours` is the fractional part of the day (0–24, UT)."""
    year, month = day.year, day.month
    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    return (math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1))
            + day.day + b - 1524.5 + hours / 24.0)


def birth_julian_day(day: date, clock: time) -> float:
    """
    Birth-chart Julian Day from a validated date and local clock time.

    The clock time is used as if it were the reference meridian; callers
    that need timezone correctness must shift the time first.
    """
    return julian_day(day, clock.hour + clock.minute / 60.0 + clock.second / 3600.0)


def panchang_julian_day(moment: Union[date, datetime]) -> float:
    """Julian Day for a Panchang moment given in Indian Standard Time."""
    if isinstance(moment, datetime):
        hours = moment.hour + moment.minute / 60.0 + moment.second / 3600.0
        day = moment.date()
    else:
        hours = 0.0
        day = moment
    return julian_day(day, hours - IST_OFFSET_HOURS)


def julian_centuries(jd: float) -> float:
    return (jd - J2000) / 36525.0


# ── Sun (Meeus Ch. 25, reduced) ────────────────────────────────

def _sun_mean_elements(T: float):
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T * T
    M  = 357.52911 + 35999.05029 * T - 0.0001537 * T * T
    return L0, M


def solar_declination(longitude: float) -> float:
    return _d(math.asin(math.sin(_r(OBLIQUITY)) * math.sin(_r(longitude))))


def solar_right_ascension(longitude: float) -> float:
    ra = _d(math.atan2(math.cos(_r(OBLIQUITY)) * math.sin(_r(longitude)),
                       math.cos(_r(longitude))))
    return normalize(ra)


def solar_position(jd: float) -> SolarPosition:
    """Tropical solar longitude with a 3-term equation of centre."""
    T = julian_centuries(jd)
    L0, M = _sun_mean_elements(T)
    M_r = _r(M)
    C = ((1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_r)
         + (0.019993 - 0.000101 * T) * math.sin(2 * M_r)
         + 0.000289 * math.sin(3 * M_r))
    lon = normalize(L0 + C)
    return SolarPosition(
        longitude=lon,
        right_ascension=solar_right_ascension(lon),
        declination=solar_declination(lon),
    )


def chart_solar_longitude(jd: float) -> float:
    """Tropical solar longitude with a 1-term equation of centre."""
    T = julian_centuries(jd)
    L0, M = _sun_mean_elements(T)
    C = (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(_r(M))
    return normalize(L0 + C)


# ── Moon (Meeus Ch. 47, three leading terms) ───────────────────

def lunar_position(jd: float) -> LunarPosition:
    """Tropical lunar longitude and illuminated phase (0 = new, 1 = full)."""
    T = julian_centuries(jd)
    Lp = 218.3164477 + 481267.88123421 * T - 0.0015786 * T * T
    D  = 297.8501921 + 445267.1114034 * T  - 0.0018819 * T * T
    Mp = 134.9633964 + 477198.8675055 * T  + 0.0087414 * T * T

    dL = (6.288774 * math.sin(_r(Mp))
          + 1.274027 * math.sin(_r(2 * D - Mp))
          + 0.658314 * math.sin(_r(2 * D)))

    lon = normalize(Lp + dL)
    sun_lon = solar_position(jd).longitude
    phase = (1.0 - math.cos(_r(lon - sun_lon))) / 2.0
    return LunarPosition(longitude=lon, phase=phase)


# ── Sidereal correction ────────────────────────────────────────

def to_sidereal(lon: float) -> float:
    return normalize(lon - AYANAMSA)


def longitude_for_system(lon: float, system: AstrologySystem) -> float:
    if system == AstrologySystem.VEDIC:
        return to_sidereal(lon)
    return normalize(lon)


def planet_longitude(planet: Planet, jd: float) -> float:
    """Tropical longitude of a supported body on the birth-chart path."""
    planet = Planet(planet)
    if planet not in SUPPORTED_PLANETS:
        raise UnsupportedPlanetError(planet.value)
    if planet == Planet.SUN:
        return chart_solar_longitude(jd)
    return lunar_position(jd).longitude


def sign_index(lon: float) -> int:
    return int(normalize(lon) // 30) % 12


def sign_name(lon: float) -> str:
    return SIGNS[sign_index(lon)]
