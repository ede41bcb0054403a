"""
aspects.py
==========
Major aspects between natal planets, and transits of current positions over them.

Separation is measured the short way round the circle, so 350° and 10° are
20° apart. With orb 0 only exact separations count.
"""

from itertools import combinations
from typing import Dict, List, Sequence

from .models import PlanetPosition

ASPECTS: Dict[int, str] = {
    0:   "conjunct",
    60:  "sextile",
    90:  "square",
    120: "trine",
    180: "opposite",
}

DEFAULT_TRANSIT_ORB = 10.0


def angular_separation(a: float, b: float) -> float:
    """Smallest angle between two longitudes, in [0, 180]."""
    diff = abs(a - b) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def aspect_between(a: float, b: float, orb: float = 0.0):
    """Aspect name for two longitudes, or None."""
    separation = angular_separation(a, b)
    for angle, name in ASPECTS.items():
        if abs(separation - angle) <= orb:
            return name
    return None


def find_aspects(planets: Sequence[PlanetPosition], orb: float = 0.0) -> List[str]:
    aspects = []
    for first, second in combinations(planets, 2):
        name = aspect_between(first.longitude, second.longitude, orb)
        if name:
            aspects.append(f"{first.name} {name} {second.name}")
    return aspects


def find_transits(birth_planets: Sequence[PlanetPosition],
                  current_planets: Sequence[PlanetPosition],
                  orb: float = DEFAULT_TRANSIT_ORB) -> List[str]:
    """
    Every (birth, current) pair within `orb` degrees.

    The result depends on when `current_planets` was computed and must not be
    stored as part of a birth-invariant chart.
    """
    transits = []
    for natal in birth_planets:
        for moving in current_planets:
            if angular_separation(moving.longitude, natal.longitude) <= orb:
                transits.append(f"{moving.name} transiting {natal.name} in {natal.sign}")
    return transits
