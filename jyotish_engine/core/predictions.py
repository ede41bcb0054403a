"""
predictions.py  --  Chart interpretation layer
==============================================
Turns a planet table into the descriptive parts of a chart:
  1. Dignity (exalted / debilitated / neutral) by sign
  2. Elemental balance
  3. Personality traits from the ascendant and exalted planets
  4. Sun-sign compatibility with each of the twelve signs
  5. Life-area scores: career, relationships, health, finance
  6. Ascendant and Sun-sign narratives

Everything here is deterministic: the same planet table always yields the
same text and scores.
"""

import math
from typing import Dict, List, Optional, Sequence

from .ephemeris import SIGNS, normalize, sign_index
from .models import LifeArea, PlanetPosition, PlanetStatus

# Exaltation sign index per planet; debilitation is the opposite sign
EXALTATION_SIGN_INDEX = {
    "Sun": 0, "Moon": 1, "Mars": 9, "Mercury": 5,
    "Jupiter": 3, "Venus": 11, "Saturn": 6,
}

SIGN_ELEMENTS = {
    "Aries": "fire", "Leo": "fire", "Sagittarius": "fire",
    "Taurus": "earth", "Virgo": "earth", "Capricorn": "earth",
    "Gemini": "air", "Libra": "air", "Aquarius": "air",
    "Cancer": "water", "Scorpio": "water", "Pisces": "water",
}
ELEMENTS = ("fire", "earth", "air", "water")

ASCENDANT_TRAITS = {
    "Aries":       ("Confident", "Leadership", "Initiative"),
    "Taurus":      ("Reliable", "Patient", "Practical"),
    "Gemini":      ("Curious", "Adaptable", "Communicative"),
    "Cancer":      ("Nurturing", "Intuitive", "Protective"),
    "Leo":         ("Generous", "Expressive", "Proud"),
    "Virgo":       ("Analytical", "Meticulous", "Helpful"),
    "Libra":       ("Diplomatic", "Fair-minded", "Sociable"),
    "Scorpio":     ("Intense", "Determined", "Perceptive"),
    "Sagittarius": ("Optimistic", "Adventurous", "Philosophical"),
    "Capricorn":   ("Disciplined", "Ambitious", "Responsible"),
    "Aquarius":    ("Independent", "Inventive", "Humanitarian"),
    "Pisces":      ("Compassionate", "Imaginative", "Sensitive"),
}

# Compatibility bands keyed on raw sign-index distance: (floor, members)
COMPATIBILITY_BANDS = (
    (90.0, {0, 4, 8}),
    (70.0, {2, 6, 10}),
)
COMPATIBILITY_BASE_FLOOR = 50.0
COMPATIBILITY_BAND_WIDTH = 10.0

LIFE_AREA_HOUSES = {
    "career":        10,
    "relationships": 7,
    "health":        6,
    "finance":       2,
}
LIFE_AREA_BASE_SCORE = 60
LIFE_AREA_STEP       = 10

# (no planet in house, planet(s) in house)
LIFE_AREA_TEXT = {
    "career": ("Focus on building professional relationships and reputation.",
               "Favorable period for career advancement and recognition."),
    "relationships": ("Period of self-discovery in relationships.",
                      "Important developments in partnerships and relationships."),
    "health": ("Maintain regular health routines and stress management.",
               "Focus on health improvements and wellness practices."),
    "finance": ("Focus on building stable financial foundations.",
                "Opportunities for financial growth and stability."),
}


# ---------------------------------------------------------------------------
# Dignity
# ---------------------------------------------------------------------------

def planet_status(planet: str, longitude: float) -> PlanetStatus:
    exalt = EXALTATION_SIGN_INDEX.get(planet)
    if exalt is None:
        return PlanetStatus.NEUTRAL
    idx = sign_index(longitude)
    if idx == exalt:
        return PlanetStatus.EXALTED
    if idx == (exalt + 6) % 12:
        return PlanetStatus.DEBILITATED
    return PlanetStatus.NEUTRAL


# ---------------------------------------------------------------------------
# Elements and traits
# ---------------------------------------------------------------------------

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def calculate_elements(planets: Sequence[PlanetPosition]) -> Dict[str, int]:
    """
    Percentage of planets in each element, each rounded on its own.
    The four values may not sum to exactly 100.
    """
    counts = {element: 0 for element in ELEMENTS}
    for planet in planets:
        element = SIGN_ELEMENTS.get(planet.sign)
        if element:
            counts[element] += 1
    total = sum(counts.values())
    if total == 0:
        return counts
    return {k: _round_half_up(v * 100 / total) for k, v in counts.items()}


def generate_traits(planets: Sequence[PlanetPosition], ascendant: float) -> List[str]:
    traits: List[str] = []
    candidates = list(ASCENDANT_TRAITS.get(SIGNS[sign_index(ascendant)], ()))
    candidates += [f"Strong {p.name} energy" for p in planets
                   if p.status == PlanetStatus.EXALTED]
    for trait in candidates:
        if trait not in traits:
            traits.append(trait)
    return traits


# ---------------------------------------------------------------------------
# Compatibility
# ---------------------------------------------------------------------------

def _band_floor(raw_distance: int) -> float:
    for floor, members in COMPATIBILITY_BANDS:
        if raw_distance in members:
            return floor
    return COMPATIBILITY_BASE_FLOOR


def generate_compatibility(sun_sign: Optional[str]) -> Dict[str, float]:
    """
    Score every sign against the Sun sign.

    The band comes from the raw index distance; within the band, closer signs
    (by circular distance) score higher.
    """
    if sun_sign not in SIGNS:
        return {}
    sun_idx = SIGNS.index(sun_sign)
    scores = {}
    for idx, sign in enumerate(SIGNS):
        raw = abs(idx - sun_idx)
        circular = min(raw, 12 - raw)
        score = _band_floor(raw) + COMPATIBILITY_BAND_WIDTH * (6 - circular) / 6
        scores[sign] = round(score, 1)
    return scores


# ---------------------------------------------------------------------------
# Life areas
# ---------------------------------------------------------------------------

def area_score(planets: Sequence[PlanetPosition], house: int) -> int:
    score = LIFE_AREA_BASE_SCORE
    for planet in planets:
        if planet.house != house:
            continue
        if planet.status == PlanetStatus.EXALTED:
            score += LIFE_AREA_STEP
        elif planet.status == PlanetStatus.DEBILITATED:
            score -= LIFE_AREA_STEP
    return max(0, min(100, score))


def generate_life_areas(planets: Sequence[PlanetPosition]) -> Dict[str, LifeArea]:
    """Scores and narratives use the absolute house (sign number) of each planet."""
    areas = {}
    for area, house in LIFE_AREA_HOUSES.items():
        empty_text, occupied_text = LIFE_AREA_TEXT[area]
        occupied = any(p.house == house for p in planets)
        areas[area] = LifeArea(
            score=area_score(planets, house),
            prediction=occupied_text if occupied else empty_text,
        )
    return areas


# ---------------------------------------------------------------------------
# Narratives
# ---------------------------------------------------------------------------

def ascendant_analysis(ascendant: float) -> str:
    lon = normalize(ascendant)
    sign = SIGNS[sign_index(lon)]
    degree = int(math.floor(lon % 30))
    return (f"Your Ascendant is in {sign} at {degree}°. This represents your "
            f"outer personality and the way others perceive you.")


def sun_sign_analysis(planets: Sequence[PlanetPosition]) -> str:
    sun = next((p for p in planets if p.name == "Sun"), None)
    if sun is None:
        return ""
    return (f"Your Sun is in {sun.sign} at {int(math.floor(sun.degree))}°. "
            f"This represents your core identity and life purpose.")
