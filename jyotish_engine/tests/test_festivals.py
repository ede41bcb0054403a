from datetime import date, datetime

from jyotish_engine.core.festivals import (
    festivals_in_month, generate_festivals, upcoming_festivals,
)


def test_calendar_has_fixed_entries():
    festivals = generate_festivals(2024)
    assert len(festivals) == 17
    assert festivals[0].name == "Makar Sankranti"
    diwali = next(f for f in festivals if f.name == "Diwali")
    assert diwali.date == date(2024, 11, 12)
    assert diwali.duration_days == 5
    assert diwali.description == "Festival of Lights"
    assert all(f.kind == "major" for f in festivals)


def test_month_listing_is_sorted():
    march = festivals_in_month(2025, 3)
    assert [f.name for f in march] == ["Maha Shivaratri", "Holi"]
    assert all(f.date.year == 2025 for f in march)


def test_upcoming_festivals_this_month():
    names = [f.name for f in upcoming_festivals(date(2024, 11, 5))]
    assert names == ["Karwa Chauth", "Dhanteras", "Diwali"]


def test_upcoming_festivals_accepts_datetime_and_limit():
    assert len(upcoming_festivals(datetime(2024, 11, 20, 9, 0), limit=2)) == 2


def test_quiet_month_has_none():
    assert upcoming_festivals(date(2024, 6, 1)) == []
