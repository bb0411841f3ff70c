"""Synthetic participants and country work-hour rows for the demo page."""

from datetime import date
from typing import Any, Dict, List

from models.entities import Holiday


def sample_participant_records() -> List[Dict[str, Any]]:
    """Participant rows as the persistence layer returns them."""
    return [
        {"id": "p_001", "name": "Rajesh Kumar", "timezone": "Asia/Kolkata", "country_code": "IN"},
        {"id": "p_002", "name": "Michael Chen", "timezone": "America/Los_Angeles", "country_code": "US"},
        {"id": "p_003", "name": "Sarah Johnson", "timezone": "America/New_York", "country_code": "US"},
        {"id": "p_004", "name": "Emma Wilson", "timezone": "Europe/London", "country_code": "GB"},
        {"id": "p_005", "name": "Yuki Tanaka", "timezone": "Asia/Tokyo", "country_code": "JP"},
        {"id": "p_006", "name": "Claire Dubois", "timezone": "Europe/Paris", "country_code": "FR"},
        {"id": "p_007", "name": "Liam Murphy", "timezone": "Australia/Sydney", "country_code": "AU"},
        {"id": "p_008", "name": "Omar Haddad", "timezone": "Asia/Dubai", "country_code": "AE"},
    ]


def sample_country_configs() -> List[Dict[str, Any]]:
    """Country work-hour rows; countries not listed use the default profile."""
    return [
        {"country_code": "JP", "work_days": [1, 2, 3, 4, 5], "green_start": "09:00", "green_end": "18:00"},
        {"country_code": "FR", "work_days": [1, 2, 3, 4, 5], "green_start": "09:00", "green_end": "18:00"},
        {"country_code": "AE", "work_days": [1, 2, 3, 4, 5], "green_start": "08:00", "green_end": "16:00"},
        {"country_code": "IN", "work_days": [1, 2, 3, 4, 5, 6], "green_start": "10:00", "green_end": "19:00"},
    ]


def sample_holidays(year: int) -> List[Holiday]:
    """A few fixed-date holidays for offline runs of the demo page."""
    return [
        Holiday(date(year, 1, 1), "New Year's Day", "New Year's Day", "US"),
        Holiday(date(year, 7, 4), "Independence Day", "Independence Day", "US"),
        Holiday(date(year, 12, 25), "Christmas Day", "Christmas Day", "GB"),
        Holiday(date(year, 7, 14), "Bastille Day", "Fête nationale", "FR"),
        Holiday(date(year, 1, 26), "Republic Day", "Republic Day", "IN"),
        Holiday(date(year, 1, 26), "Australia Day", "Australia Day", "AU"),
        Holiday(date(year, 2, 11), "Foundation Day", "建国記念の日", "JP"),
    ]
