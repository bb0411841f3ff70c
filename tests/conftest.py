from datetime import date

import pytest

from models.entities import Holiday, Participant, WorkProfile
from services.holiday_service_mock import HolidayServiceMock
from services.scheduling_engine import SchedulingEngine

# Wednesday, standard time in both hemispheres' northern zones
WINTER_WEDNESDAY = date(2025, 1, 15)


@pytest.fixture
def new_york():
    return Participant(id="ny", display_name="Sarah", timezone="America/New_York", country_code="US")


@pytest.fixture
def tokyo():
    return Participant(id="tk", display_name="Yuki", timezone="Asia/Tokyo", country_code="JP")


@pytest.fixture
def london():
    return Participant(id="ldn", display_name="Emma", timezone="Europe/London", country_code="GB")


@pytest.fixture
def tokyo_profile():
    return WorkProfile.from_config(["Mon", "Tue", "Wed", "Thu", "Fri"], "09:00", "18:00")


@pytest.fixture
def holiday_mock():
    return HolidayServiceMock(
        holidays=[Holiday(WINTER_WEDNESDAY, "Company Day", "Company Day", "GB")]
    )


@pytest.fixture
def engine(holiday_mock):
    return SchedulingEngine(holiday_lookup=holiday_mock.is_holiday)
