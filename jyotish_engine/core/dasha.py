"""
dasha.py
========
Vimshottari Dasha and Western planetary-period timelines.

Vimshottari ("120 years") is the most widely used dasha system in Vedic astrology.

Dasha sequence: Ketu (7) → Venus (20) → Sun (6) → Moon (10) → Mars (7)
                → Rahu (18) → Jupiter (16) → Saturn (19) → Mercury (17)
Total = 120 years

The timeline here always starts from the supplied start date (normally today)
in the fixed order above. It is not anchored to the birth nakshatra.

Source: Parashara, B.V. "Brihat Parashara Hora Shastra" (classical text)
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from .models import DashaPeriod, SubPeriod

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DASHA_LORDS = ["Ketu", "Venus", "Sun", "Moon", "Mars",
               "Rahu", "Jupiter", "Saturn", "Mercury"]

DASHA_YEARS = {
    "Ketu":    7,
    "Venus":   20,
    "Sun":     6,
    "Moon":    10,
    "Mars":    7,
    "Rahu":    18,
    "Jupiter": 16,
    "Saturn":  19,
    "Mercury": 17,
}

TOTAL_YEARS = 120  # sum of all dasha periods

WESTERN_PERIOD_DAYS = 365

VEDIC_PERIOD_LABEL   = "Vimshottari Dasha"
WESTERN_PERIOD_LABEL = "Planetary Period"

PERIOD_PREDICTIONS = {
    "Sun":     "A period of recognition and authority. Focus on self-expression and leadership.",
    "Moon":    "Emotional growth and changes in personal life. Good for family matters.",
    "Mars":    "Period of energy and initiative. Success through action and courage.",
    "Mercury": "Intellectual growth and communication. Good for education and business.",
    "Jupiter": "Expansion and abundance. Spiritual growth and learning.",
    "Venus":   "Period of comfort and pleasure. Focus on relationships and creativity.",
    "Saturn":  "Time of responsibility and discipline. Long-term achievements.",
    "Rahu":    "Period of material growth and unconventional paths.",
    "Ketu":    "Spiritual transformation and detachment from material desires.",
}


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def add_years(start: date, years: int) -> date:
    """Same calendar day `years` later; 29 Feb rolls to 1 Mar."""
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        return date(start.year + years, 3, 1)


def _dasha_sequence_from(lord: str) -> List[str]:
    """Return dasha sequence starting from given lord."""
    idx = DASHA_LORDS.index(lord)
    return DASHA_LORDS[idx:] + DASHA_LORDS[:idx]


def period_prediction(planet: str) -> str:
    return PERIOD_PREDICTIONS.get(planet, "")


# ---------------------------------------------------------------------------
# Vimshottari
# ---------------------------------------------------------------------------

def compute_vimshottari_periods(start: date) -> Tuple[DashaPeriod, ...]:
    """
    Nine contiguous maha dashas of whole calendar years from `start`.

    Each period ends on the day the next one begins.
    """
    periods = []
    current_start = start
    for lord in DASHA_LORDS:
        years = DASHA_YEARS[lord]
        current_end = add_years(current_start, years)
        periods.append(DashaPeriod(
            planet=lord,
            start_date=current_start,
            end_date=current_end,
            duration=f"{years} years",
            prediction=period_prediction(lord),
            sub_periods=_compute_antardasha(lord, current_start, current_end),
        ))
        current_start = current_end
    return tuple(periods)


def _compute_antardasha(maha_lord: str, start: date, end: date) -> Tuple[SubPeriod, ...]:
    """
    Antardasha (Bhukti) periods within a Maha Dasha.
    Each sub-period is proportional to the sub-lord's dasha years over 120.
    Sequence starts from the maha dasha lord itself.
    """
    total_days = (end - start).days
    sequence = _dasha_sequence_from(maha_lord)
    sub_periods = []
    elapsed = 0.0
    current_start = start
    for i, sub_lord in enumerate(sequence):
        elapsed += total_days * DASHA_YEARS[sub_lord] / TOTAL_YEARS
        if i == len(sequence) - 1:
            current_end = end
        else:
            current_end = start + timedelta(days=round(elapsed))
        sub_periods.append(SubPeriod(planet=sub_lord, start_date=current_start,
                                     end_date=current_end))
        current_start = current_end
    return tuple(sub_periods)


# ---------------------------------------------------------------------------
# Western
# ---------------------------------------------------------------------------

def compute_western_periods(planets: Iterable[str], start: date) -> Tuple[DashaPeriod, ...]:
    """One overlapping one-year period per tracked planet, all from `start`."""
    end = start + timedelta(days=WESTERN_PERIOD_DAYS)
    return tuple(
        DashaPeriod(
            planet=name,
            start_date=start,
            end_date=end,
            duration="1 year",
            prediction=period_prediction(name),
        )
        for name in planets
    )


def current_period(periods: Iterable[DashaPeriod], on: date) -> Tuple[Optional[DashaPeriod], Optional[SubPeriod]]:
    """
    Active period and sub-period for a date. Start is inclusive, end exclusive.
    """
    for period in periods:
        if period.start_date <= on < period.end_date:
            for sub in period.sub_periods:
                if sub.start_date <= on < sub.end_date:
                    return period, sub
            return period, None
    return None, None
