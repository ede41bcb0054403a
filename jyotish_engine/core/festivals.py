"""
festivals.py
============
Fixed-date festival calendar.

Dates are the same Gregorian day every year. Lunar-calendar festivals drift
against these in reality; this table is a display approximation.
"""

from datetime import date, datetime
from typing import List, Optional, Union

from .models import Festival

# (name, description, month, day, duration_days)
FESTIVAL_TABLE = [
    ("Makar Sankranti", "Marks the beginning of the sun's northward journey", 1, 14, 1),
    ("Vasant Panchami", "Celebration of Saraswati, goddess of knowledge",     2, 14, 1),
    ("Maha Shivaratri", "Night dedicated to Lord Shiva",                      3, 8,  1),
    ("Holi",            "Festival of colors and spring",                      3, 25, 2),
    ("Ram Navami",      "Birth of Lord Rama",                                 4, 17, 1),
    ("Hanuman Jayanti", "Birth of Lord Hanuman",                              4, 23, 1),
    ("Akshaya Tritiya", "Auspicious day for new beginnings",                  5, 10, 1),
    ("Buddha Purnima",  "Birth of Lord Buddha",                               5, 23, 1),
    ("Guru Purnima",    "Worship of spiritual and academic teachers",         7, 3,  1),
    ("Raksha Bandhan",  "Celebration of brother-sister bond",                 8, 30, 1),
    ("Janmashtami",     "Birth of Lord Krishna",                              9, 7,  1),
    ("Ganesh Chaturthi", "Festival honoring Lord Ganesha",                    9, 19, 10),
    ("Navaratri",       "Nine nights of worship to Divine Mother",            10, 15, 9),
    ("Dussehra",        "Victory of good over evil",                          10, 24, 1),
    ("Karwa Chauth",    "Fast observed by married women",                     11, 1,  1),
    ("Dhanteras",       "First day of Diwali celebrations",                   11, 10, 1),
    ("Diwali",          "Festival of Lights",                                 11, 12, 5),
]

UPCOMING_LIMIT = 5


def generate_festivals(year: int) -> List[Festival]:
    return [
        Festival(name=name, description=description, date=date(year, month, day),
                 kind="major", duration_days=duration)
        for name, description, month, day, duration in FESTIVAL_TABLE
    ]


def festivals_in_month(year: int, month: int) -> List[Festival]:
    return sorted((f for f in generate_festivals(year) if f.date.month == month),
                  key=lambda f: f.date)


def upcoming_festivals(now: Optional[Union[date, datetime]] = None,
                       limit: int = UPCOMING_LIMIT) -> List[Festival]:
    """Festivals in the month of `now` (default today), earliest first."""
    if now is None:
        now = date.today()
    return festivals_in_month(now.year, now.month)[:limit]
