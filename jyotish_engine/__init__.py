"""
Jyotish Engine
==============
Panchang and birth-chart calculation engine.

Quick start:
    from datetime import date
    from jyotish_engine import BirthDetails, calculate_astrology_chart, calculate_panchang

    chart = calculate_astrology_chart(
        BirthDetails.parse("1990-06-15", "08:30", 28.6139, 77.2090),
        "vedic",
    )
    today = calculate_panchang(date.today())
"""

from .core.errors import (
    InvalidBirthDetailsError, InvalidTimeFormatError, JyotishError, UnsupportedPlanetError,
)
from .core.models import AstrologySystem, BirthDetails, Planet
from .tools.chart import calculate_astrology_chart
from .tools.panchang import (
    calculate_auspicious_times, calculate_karana, calculate_nakshatra, calculate_panchang,
    calculate_rahu_kaal, calculate_sun_times, calculate_tithi, calculate_yoga,
    is_within_muhurat,
)

__version__ = "1.0.0"
__all__ = [
    "calculate_astrology_chart",
    "calculate_tithi", "calculate_nakshatra", "calculate_yoga", "calculate_karana",
    "calculate_sun_times", "calculate_rahu_kaal", "calculate_auspicious_times",
    "calculate_panchang", "is_within_muhurat",
    "AstrologySystem", "BirthDetails", "Planet",
    "JyotishError", "InvalidBirthDetailsError", "InvalidTimeFormatError",
    "UnsupportedPlanetError",
]
