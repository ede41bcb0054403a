"""
houses.py
=========
Ascendant (Lagna) and house assignment.

Two house conventions coexist and must not be mixed:
  - absolute house      floor(longitude / 30) + 1, i.e. the sign number
  - ascendant house     whole-sign count from the ascendant's sign (1–12)

The ascendant itself is an approximation: local sidereal time is taken from
the Sun's mean longitude and the geographic latitude stands in for the
declination term. Output parity with existing charts depends on it, so it is
not replaced with a RAMC-based calculation here. The result is tropical in
both systems; no ayanamsa is applied to it.
"""

import math
from typing import List, Sequence, Tuple

from .ephemeris import (
    DEG_TO_RAD, RAD_TO_DEG, SIGNS,
    chart_solar_longitude, normalize, sign_index,
)
from .models import House, PlanetPosition


# ---------------------------------------------------------------------------
# Ascendant
# ---------------------------------------------------------------------------

def approximate_lst(jd: float, longitude_deg: float) -> float:
    """
    Local sidereal time (degrees) from mean solar longitude + 180° + east longitude.
    """
    return normalize(chart_solar_longitude(jd) + 180.0 + longitude_deg)


def compute_ascendant(jd: float, latitude_deg: float, longitude_deg: float) -> float:
    """
    Tropical ascendant degree in [0, 360).

    H = atan2(sin RA, cos RA · sin δ − tan φ · cos δ), with RA the local
    sidereal time and the latitude φ also used as δ.
    """
    ra = approximate_lst(jd, longitude_deg) * DEG_TO_RAD
    phi = latitude_deg * DEG_TO_RAD
    dec = phi

    h = math.atan2(math.sin(ra),
                   math.cos(ra) * math.sin(dec) - math.tan(phi) * math.cos(dec))
    return normalize(h * RAD_TO_DEG)


# ---------------------------------------------------------------------------
# House numbering
# ---------------------------------------------------------------------------

def absolute_house(longitude: float) -> int:
    return sign_index(longitude) + 1


def house_from_ascendant(sign_idx: int, ascendant_sign_idx: int) -> int:
    return ((sign_idx - ascendant_sign_idx + 12) % 12) + 1


def build_houses(ascendant: float, planets: Sequence[PlanetPosition]) -> Tuple[House, ...]:
    """
    Twelve whole-sign houses ordered 1–12 from the ascendant's sign.
    """
    asc_idx = sign_index(ascendant)
    houses: List[House] = []
    for offset in range(12):
        idx = (asc_idx + offset) % 12
        occupants = tuple(p.name for p in planets if sign_index(p.longitude) == idx)
        houses.append(House(
            number=house_from_ascendant(idx, asc_idx),
            sign=SIGNS[idx],
            planets=occupants,
        ))
    return tuple(houses)
