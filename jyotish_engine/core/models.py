"""
models.py
=========
Immutable records passed between the calculation modules and their callers.

Every calculation allocates fresh records; nothing here is cached or mutated
after construction.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .errors import InvalidBirthDetailsError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AstrologySystem(str, Enum):
    VEDIC = "vedic"
    WESTERN = "western"


class PlanetStatus(str, Enum):
    EXALTED = "exalted"
    DEBILITATED = "debilitated"
    NEUTRAL = "neutral"


_PLANET_SYMBOLS = {
    "Sun": "☉", "Moon": "☽", "Mars": "♂", "Mercury": "☿", "Jupiter": "♃",
    "Venus": "♀", "Saturn": "♄", "Rahu": "☊", "Ketu": "☋",
}


class Planet(str, Enum):
    SUN = "Sun"
    MOON = "Moon"
    MARS = "Mars"
    MERCURY = "Mercury"
    JUPITER = "Jupiter"
    VENUS = "Venus"
    SATURN = "Saturn"
    RAHU = "Rahu"
    KETU = "Ketu"

    @property
    def symbol(self) -> str:
        return _PLANET_SYMBOLS[self.value]


# Bodies with an implemented longitude formula
SUPPORTED_PLANETS: Tuple[Planet, ...] = (Planet.SUN, Planet.MOON)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

def _parse_coordinate(value: Union[str, float, int], label: str, limit: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidBirthDetailsError(f"Invalid {label}: {value!r}") from None
    if not math.isfinite(number) or abs(number) > limit:
        raise InvalidBirthDetailsError(f"{label.capitalize()} out of range: {value!r}")
    return number


@dataclass(frozen=True)
class BirthDetails:
    """
    Birth moment and place.

    The clock time is taken as-is; no timezone normalization is applied to
    chart calculations. `timezone` is carried as a label only.
    """
    date: date
    time: time
    latitude: float
    longitude: float
    timezone: str = ""

    @classmethod
    def parse(cls, date_str: str, time_str: str,
              latitude: Union[str, float], longitude: Union[str, float],
              timezone: str = "") -> "BirthDetails":
        """Build from form-style strings, failing eagerly on bad input."""
        try:
            birth_date = datetime.strptime(str(date_str).strip(), "%Y-%m-%d").date()
        except ValueError:
            raise InvalidBirthDetailsError(f"Invalid birth date: {date_str!r}") from None

        raw_time = str(time_str).strip()
        fmt = "%H:%M:%S" if raw_time.count(":") == 2 else "%H:%M"
        try:
            birth_time = datetime.strptime(raw_time, fmt).time()
        except ValueError:
            raise InvalidBirthDetailsError(f"Invalid birth time: {time_str!r}") from None

        return cls(
            date=birth_date,
            time=birth_time,
            latitude=_parse_coordinate(latitude, "latitude", 90.0),
            longitude=_parse_coordinate(longitude, "longitude", 180.0),
            timezone=timezone or "",
        )


@dataclass(frozen=True)
class GeoLocation:
    name: str
    latitude: float
    longitude: float


# ---------------------------------------------------------------------------
# Ephemeris
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SolarPosition:
    longitude: float
    right_ascension: float
    declination: float


@dataclass(frozen=True)
class LunarPosition:
    longitude: float
    phase: float


# ---------------------------------------------------------------------------
# Birth chart
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PlanetPosition:
    name: str
    symbol: str
    longitude: float
    sign: str
    degree: float
    house: int                  # absolute: sign index + 1
    house_from_ascendant: int   # whole-sign house counted from the ascendant
    status: PlanetStatus


@dataclass(frozen=True)
class House:
    number: int
    sign: str
    planets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LifeArea:
    score: int
    prediction: str


@dataclass(frozen=True)
class SubPeriod:
    planet: str
    start_date: date
    end_date: date


@dataclass(frozen=True)
class DashaPeriod:
    planet: str
    start_date: date
    end_date: date
    duration: str
    prediction: str
    sub_periods: Tuple[SubPeriod, ...] = ()


@dataclass(frozen=True)
class AstrologyChart:
    system: AstrologySystem
    julian_day: float
    ascendant: str
    ascendant_degree: float
    ascendant_analysis: str
    sun_sign: str
    sun_sign_analysis: str
    moon_sign: str
    houses: Tuple[House, ...]
    planets: Tuple[PlanetPosition, ...]
    aspects: Tuple[str, ...]
    transits: Tuple[str, ...]
    elements: Dict[str, int]
    traits: Tuple[str, ...]
    compatibility: Dict[str, float]
    life_areas: Dict[str, LifeArea]
    period_label: str
    dasha_periods: Tuple[DashaPeriod, ...]

    def planet(self, name: str) -> Optional[PlanetPosition]:
        for position in self.planets:
            if position.name == name:
                return position
        return None


# ---------------------------------------------------------------------------
# Panchang
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TithiInfo:
    name: str
    paksha: str
    number: int
    start_time: str
    end_time: str
    degrees: float


@dataclass(frozen=True)
class NakshatraInfo:
    index: int
    name: str
    pada: int


@dataclass(frozen=True)
class TimeWindow:
    start: str
    end: str


@dataclass(frozen=True)
class MuhuratWindow:
    name: str
    start_time: str
    end_time: str
    significance: str


@dataclass(frozen=True)
class AuspiciousTimings:
    brahma_muhurat: MuhuratWindow
    abhijit_muhurat: MuhuratWindow
    amrit_kaal: MuhuratWindow


@dataclass(frozen=True)
class SunTimes:
    """Decimal local hours."""
    sunrise: float
    sunset: float
    solar_noon: float
    day_length: float


@dataclass(frozen=True)
class PanchangRecord:
    date: date
    vara: str
    tithi: TithiInfo
    nakshatra: str
    nakshatra_pada: int
    yoga: str
    karana: str
    sunrise: str
    sunset: str
    rahu_kaal: TimeWindow
    auspicious_times: AuspiciousTimings
    abhijit_overlaps_rahu_kaal: bool = False


@dataclass(frozen=True)
class Festival:
    name: str
    description: str
    date: date
    kind: str
    duration_days: int = field(default=1)
