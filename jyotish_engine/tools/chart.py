"""
chart.py
========
Birth chart generator.

Orchestrates ephemeris, house, aspect, dasha and prediction modules to
produce a complete AstrologyChart.

Usage:
    from jyotish_engine.core.models import AstrologySystem, BirthDetails
    from jyotish_engine.tools.chart import calculate_astrology_chart

    birth = BirthDetails.parse("1990-06-15", "08:30", 28.6139, 77.2090)
    chart = calculate_astrology_chart(birth, AstrologySystem.VEDIC)

The transit list and the period timeline depend on `now` (default: wall
clock). Two calls for the same birth at different times can differ in those
fields only.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Union

from ..config import get_settings
from ..core.aspects import find_aspects, find_transits
from ..core.dasha import (
    VEDIC_PERIOD_LABEL, WESTERN_PERIOD_LABEL,
    compute_vimshottari_periods, compute_western_periods,
)
from ..core.ephemeris import (
    SIGNS, birth_julian_day, longitude_for_system, planet_longitude, sign_index,
)
from ..core.errors import UnsupportedPlanetError
from ..core.houses import absolute_house, build_houses, compute_ascendant, house_from_ascendant
from ..core.models import (
    AstrologyChart, AstrologySystem, BirthDetails, Planet, PlanetPosition, SUPPORTED_PLANETS,
)
from ..core.predictions import (
    ascendant_analysis, calculate_elements, generate_compatibility,
    generate_life_areas, generate_traits, planet_status, sun_sign_analysis,
)

logger = logging.getLogger(__name__)


def _resolve_planets(planets: Iterable[Union[Planet, str]]) -> List[Planet]:
    resolved = []
    for name in planets:
        try:
            planet = Planet(name)
        except ValueError:
            logger.warning("Unknown planet requested: %r", name)
            raise UnsupportedPlanetError(name) from None
        if planet not in SUPPORTED_PLANETS:
            logger.warning("Unsupported planet requested: %s", planet.value)
            raise UnsupportedPlanetError(planet.value)
        resolved.append(planet)
    return resolved


def planet_table(jd: float, planets: Iterable[Planet], system: AstrologySystem,
                 ascendant_sign_idx: int) -> List[PlanetPosition]:
    """Positions of `planets` at `jd`, in the longitude frame of `system`."""
    table = []
    for planet in planets:
        lon = longitude_for_system(planet_longitude(planet, jd), system)
        idx = sign_index(lon)
        table.append(PlanetPosition(
            name=planet.value,
            symbol=planet.symbol,
            longitude=lon,
            sign=SIGNS[idx],
            degree=lon % 30,
            house=absolute_house(lon),
            house_from_ascendant=house_from_ascendant(idx, ascendant_sign_idx),
            status=planet_status(planet.value, lon),
        ))
    return table


def calculate_astrology_chart(
    birth: BirthDetails,
    system: Union[AstrologySystem, str] = AstrologySystem.VEDIC,
    *,
    planets: Iterable[Union[Planet, str]] = SUPPORTED_PLANETS,
    now: Optional[datetime] = None,
    aspect_orb: Optional[float] = None,
    transit_orb: Optional[float] = None,
) -> AstrologyChart:
    """
    Generate a complete birth chart.

    Args:
        birth: Birth date, local clock time and coordinates
        system: 'vedic' (sidereal, Vimshottari timeline) or 'western'
        planets: Bodies to place; anything outside Sun/Moon raises UnsupportedPlanetError
        now: Reference moment for transits and the period timeline
        aspect_orb, transit_orb: Degrees; default to the configured values

    Returns:
        AstrologyChart with planets, houses, aspects, transits and predictions
    """
    system = AstrologySystem(system)
    bodies = _resolve_planets(planets)
    settings = get_settings()
    if aspect_orb is None:
        aspect_orb = settings.ASPECT_ORB
    if transit_orb is None:
        transit_orb = settings.TRANSIT_ORB
    if now is None:
        now = datetime.now()

    jd = birth_julian_day(birth.date, birth.time)

    # ---- Ascendant (tropical in both systems) ----
    ascendant = compute_ascendant(jd, birth.latitude, birth.longitude)
    asc_idx = sign_index(ascendant)

    # ---- Planets and houses ----
    positions = planet_table(jd, bodies, system, asc_idx)
    houses = build_houses(ascendant, positions)

    # ---- Aspects and transits (transits always tropical) ----
    aspects = find_aspects(positions, aspect_orb)
    now_jd = birth_julian_day(now.date(), now.time())
    current = planet_table(now_jd, bodies, AstrologySystem.WESTERN, asc_idx)
    transits = find_transits(positions, current, transit_orb)

    # ---- Period timeline ----
    if system == AstrologySystem.VEDIC:
        periods = compute_vimshottari_periods(now.date())
        label = VEDIC_PERIOD_LABEL
    else:
        periods = compute_western_periods([p.name for p in positions], now.date())
        label = WESTERN_PERIOD_LABEL

    sun = next((p for p in positions if p.name == Planet.SUN.value), None)
    moon = next((p for p in positions if p.name == Planet.MOON.value), None)
    sun_sign = sun.sign if sun else SIGNS[0]

    logger.debug("Chart computed: jd=%.5f system=%s ascendant=%.3f",
                 jd, system.value, ascendant)

    return AstrologyChart(
        system=system,
        julian_day=jd,
        ascendant=SIGNS[asc_idx],
        ascendant_degree=ascendant,
        ascendant_analysis=ascendant_analysis(ascendant),
        sun_sign=sun_sign,
        sun_sign_analysis=sun_sign_analysis(positions),
        moon_sign=moon.sign if moon else SIGNS[0],
        houses=houses,
        planets=tuple(positions),
        aspects=tuple(aspects),
        transits=tuple(transits),
        elements=calculate_elements(positions),
        traits=tuple(generate_traits(positions, ascendant)),
        compatibility=generate_compatibility(sun.sign if sun else None),
        life_areas=generate_life_areas(positions),
        period_label=label,
        dasha_periods=periods,
    )
