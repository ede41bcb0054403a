"""
panchang.py
===========
Daily Panchang entry points.

Every function takes a `date` (read as local midnight) or a `datetime`, both
in Indian Standard Time, and works for the reference location unless another
GeoLocation is passed.

Usage:
    from datetime import date
    from jyotish_engine.tools.panchang import calculate_panchang

    record = calculate_panchang(date(2024, 1, 14))
"""

from datetime import date, datetime
from typing import Optional, Union

from ..core.ephemeris import lunar_position, panchang_julian_day, solar_position, to_sidereal
from ..core.formatting import decimal_to_time, is_within_muhurat, time_ranges_overlap
from ..core.models import (
    AuspiciousTimings, GeoLocation, PanchangRecord, SunTimes, TithiInfo, TimeWindow,
)
from ..core.muhurat import (
    REFERENCE_LOCATION, abhijit_muhurat, amrit_kaal, brahma_muhurat, rahu_kaal, sun_times,
)
from ..core.panchang import (
    VARA, compute_karana, compute_nakshatra, compute_tithi_number, compute_yoga,
    find_tithi_boundaries, paksha_for, tithi_angle, tithi_name, weekday_index,
)

__all__ = [
    "calculate_tithi", "calculate_nakshatra", "calculate_yoga", "calculate_karana",
    "calculate_sun_times", "calculate_rahu_kaal", "calculate_auspicious_times",
    "calculate_panchang", "is_within_muhurat",
]

Moment = Union[date, datetime]


def _day(when: Moment) -> date:
    return when.date() if isinstance(when, datetime) else when


def _sidereal_pair(when: Moment):
    jd = panchang_julian_day(when)
    sun = to_sidereal(solar_position(jd).longitude)
    moon = to_sidereal(lunar_position(jd).longitude)
    return sun, moon


# ---------------------------------------------------------------------------
# Five limbs
# ---------------------------------------------------------------------------

def calculate_tithi(when: Moment) -> TithiInfo:
    jd = panchang_julian_day(when)
    angle = tithi_angle(solar_position(jd).longitude, lunar_position(jd).longitude)
    number = compute_tithi_number(angle)
    start, end = find_tithi_boundaries(_day(when), number)
    return TithiInfo(
        name=tithi_name(number),
        paksha=paksha_for(number),
        number=number,
        start_time=start,
        end_time=end,
        degrees=angle,
    )


def calculate_nakshatra(when: Moment) -> str:
    _, moon = _sidereal_pair(when)
    return compute_nakshatra(moon).name


def calculate_yoga(when: Moment) -> str:
    return compute_yoga(*_sidereal_pair(when))


def calculate_karana(when: Moment) -> str:
    return compute_karana(*_sidereal_pair(when))


# ---------------------------------------------------------------------------
# Day windows
# ---------------------------------------------------------------------------

def calculate_sun_times(when: Moment, location: GeoLocation = REFERENCE_LOCATION) -> SunTimes:
    return sun_times(solar_position(panchang_julian_day(when)).declination, location)


def calculate_rahu_kaal(when: Moment, location: GeoLocation = REFERENCE_LOCATION) -> TimeWindow:
    return rahu_kaal(calculate_sun_times(when, location), weekday_index(_day(when)))


def calculate_auspicious_times(when: Moment, tithi: Optional[TithiInfo] = None,
                               location: GeoLocation = REFERENCE_LOCATION) -> AuspiciousTimings:
    if tithi is None:
        tithi = calculate_tithi(when)
    times = calculate_sun_times(when, location)
    return AuspiciousTimings(
        brahma_muhurat=brahma_muhurat(times),
        abhijit_muhurat=abhijit_muhurat(times),
        amrit_kaal=amrit_kaal(times, tithi.degrees),
    )


# ---------------------------------------------------------------------------
# Full record
# ---------------------------------------------------------------------------

def calculate_panchang(when: Moment, location: GeoLocation = REFERENCE_LOCATION) -> PanchangRecord:
    """All five limbs plus sunrise, sunset and the named windows for one day."""
    day = _day(when)
    sun, moon = _sidereal_pair(when)
    nakshatra = compute_nakshatra(moon)
    tithi = calculate_tithi(when)
    times = calculate_sun_times(when, location)
    rahu = rahu_kaal(times, weekday_index(day))
    auspicious = calculate_auspicious_times(when, tithi, location)
    abhijit = auspicious.abhijit_muhurat

    return PanchangRecord(
        date=day,
        vara=VARA[weekday_index(day)],
        tithi=tithi,
        nakshatra=nakshatra.name,
        nakshatra_pada=nakshatra.pada,
        yoga=compute_yoga(sun, moon),
        karana=compute_karana(sun, moon),
        sunrise=decimal_to_time(times.sunrise),
        sunset=decimal_to_time(times.sunset),
        rahu_kaal=rahu,
        auspicious_times=auspicious,
        abhijit_overlaps_rahu_kaal=time_ranges_overlap(
            abhijit.start_time, abhijit.end_time, rahu.start, rahu.end),
    )
