from datetime import time

import pytest

from models.entities import InvalidWorkProfile
from services.record_mapper import RecordMapper


@pytest.fixture
def mapper():
    return RecordMapper()


def test_map_participant_snake_and_camel_case(mapper):
    snake = mapper.map_participant(
        {"id": 7, "name": "Emma Wilson", "timezone": "Europe/London", "country_code": "gb"}
    )
    camel = mapper.map_participant(
        {"participantId": "p2", "displayName": "Yuki", "timeZone": "Asia/Tokyo", "countryCode": "JP"}
    )

    assert (snake.id, snake.display_name, snake.timezone, snake.country_code) == (
        "7", "Emma Wilson", "Europe/London", "GB"
    )
    assert (camel.id, camel.display_name, camel.country_code) == ("p2", "Yuki", "JP")


def test_map_participants_skips_unusable_rows(mapper):
    participants = mapper.map_participants([
        {"id": "a", "timezone": "Asia/Dubai"},
        {"id": "b"},
        {"timezone": "Asia/Dubai"},
        {"id": "c", "timezone": "Not/AZone"},
    ])

    assert [p.id for p in participants] == ["a", "c"]
    assert participants[0].display_name == "a"
    assert participants[0].country_code is None


def test_map_work_profile_from_database_columns(mapper):
    profile = mapper.map_work_profile(
        {"country_code": "JP", "work_days": [1, 2, 3, 4, 5], "green_start": "09:00:00", "green_end": "18:00:00"}
    )

    assert profile.active_weekdays == frozenset({"Mon", "Tue", "Wed", "Thu", "Fri"})
    assert (profile.start, profile.end) == (time(9, 0), time(18, 0))


def test_map_work_profile_from_api_payload(mapper):
    profile = mapper.map_work_profile(
        {"countryCode": "AE", "activeWeekdays": "Mon,Tue,Wed,Thu,Fri", "workStart": "08:00", "workEnd": "16:00"}
    )

    assert "Sat" not in profile.active_weekdays
    assert profile.end == time(16, 0)


def test_map_work_profile_rejects_incomplete_rows(mapper):
    with pytest.raises(InvalidWorkProfile):
        mapper.map_work_profile({"country_code": "JP", "work_days": [1]})


def test_map_country_profiles_skips_invalid_rows(mapper):
    profiles = mapper.map_country_profiles([
        {"country_code": "jp", "work_days": [1, 2, 3, 4, 5], "green_start": "09:00", "green_end": "18:00"},
        {"country_code": "FR", "work_days": [1, 2], "green_start": "10:00", "green_end": "10:00"},
        {"work_days": [1], "green_start": "09:00", "green_end": "17:00"},
    ])

    assert list(profiles) == ["JP"]
