# Jyotish Engine - Core modules
from .ephemeris import julian_day, lunar_position, solar_position, to_sidereal
from .formatting import decimal_to_time, is_within_muhurat, time_to_decimal
from .houses import build_houses, compute_ascendant
from .dasha import compute_vimshottari_periods, current_period
from .festivals import generate_festivals, upcoming_festivals

__all__ = [
    "julian_day", "lunar_position", "solar_position", "to_sidereal",
    "decimal_to_time", "is_within_muhurat", "time_to_decimal",
    "build_houses", "compute_ascendant",
    "compute_vimshottari_periods", "current_period",
    "generate_festivals", "upcoming_festivals",
]
