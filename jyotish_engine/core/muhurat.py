"""
muhurat.py
==========
Sunrise/sunset and the named day windows built on them.

All windows are computed for a single reference location (Delhi) whatever
the query location is. Pass `location` to override it.

  - Rahu Kaal       — one daylight-eighth, chosen by weekday
  - Brahma Muhurat  — 1h36m to 24m before sunrise
  - Abhijit Muhurat — one hour centred on solar noon
  - Amrit Kaal      — 48 minutes starting at an offset driven by the tithi angle
"""

import math
from typing import Dict

from .ephemeris import DEG_TO_RAD, RAD_TO_DEG
from .formatting import decimal_to_time
from .models import GeoLocation, MuhuratWindow, SunTimes, TimeWindow

REFERENCE_LOCATION = GeoLocation("Delhi", 28.6139, 77.2090)

# Longitude of the IST standard meridian
IST_MERIDIAN = 82.5

# Weekday (0=Sunday) → which daylight eighth is Rahu Kaal
RAHU_KAAL_PORTION: Dict[int, int] = {
    0: 8,   # Sunday
    1: 2,   # Monday
    2: 7,   # Tuesday
    3: 5,   # Wednesday
    4: 6,   # Thursday
    5: 4,   # Friday
    6: 3,   # Saturday
}

BRAHMA_START_BEFORE_SUNRISE = 1.6
BRAHMA_END_BEFORE_SUNRISE   = 0.4
ABHIJIT_HALF_WIDTH          = 0.5
AMRIT_KAAL_DURATION         = 0.8


def sun_times(declination: float, location: GeoLocation = REFERENCE_LOCATION,
              meridian_correction: bool = False) -> SunTimes:
    """
    Sunrise and sunset from the hour angle H = acos(−tan φ · tan δ).

    Day length is 2H/15 hours. Polar day and night clamp to 24h and 0h.
    Solar noon is 12:00 unless `meridian_correction` shifts it by the
    location's offset from the IST meridian.
    """
    cos_h = -math.tan(location.latitude * DEG_TO_RAD) * math.tan(declination * DEG_TO_RAD)
    hour_angle = math.acos(max(-1.0, min(1.0, cos_h))) * RAD_TO_DEG

    day_length = hour_angle / 7.5
    solar_noon = 12.0
    if meridian_correction:
        solar_noon += (IST_MERIDIAN - location.longitude) / 15.0
    return SunTimes(
        sunrise=solar_noon - day_length / 2,
        sunset=solar_noon + day_length / 2,
        solar_noon=solar_noon,
        day_length=day_length,
    )


def rahu_kaal(times: SunTimes, weekday: int) -> TimeWindow:
    """weekday: 0=Sunday … 6=Saturday."""
    portion = RAHU_KAAL_PORTION[weekday % 7]
    eighth = times.day_length / 8
    start = times.sunrise + (portion - 1) * eighth
    return TimeWindow(start=decimal_to_time(start), end=decimal_to_time(start + eighth))


def brahma_muhurat(times: SunTimes) -> MuhuratWindow:
    return MuhuratWindow(
        name="Brahma Muhurat",
        start_time=decimal_to_time(times.sunrise - BRAHMA_START_BEFORE_SUNRISE),
        end_time=decimal_to_time(times.sunrise - BRAHMA_END_BEFORE_SUNRISE),
        significance="Most auspicious time for spiritual practices",
    )


def abhijit_muhurat(times: SunTimes) -> MuhuratWindow:
    return MuhuratWindow(
        name="Abhijit Muhurat",
        start_time=decimal_to_time(times.solar_noon - ABHIJIT_HALF_WIDTH),
        end_time=decimal_to_time(times.solar_noon + ABHIJIT_HALF_WIDTH),
        significance="Victory muhurat, auspicious for new beginnings",
    )


def amrit_kaal(times: SunTimes, tithi_degrees: float) -> MuhuratWindow:
    # Approximate: not the classical nakshatra-based Amrit Kaal
    strength = abs(math.sin(tithi_degrees * DEG_TO_RAD))
    start = times.sunrise + strength * times.day_length
    return MuhuratWindow(
        name="Amrit Kaal",
        start_time=decimal_to_time(start),
        end_time=decimal_to_time(start + AMRIT_KAAL_DURATION),
        significance="Most auspicious period of tithi",
    )
