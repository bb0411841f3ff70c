from datetime import time

import pytest

from models.entities import DEFAULT_WORK_PROFILE
from services.scheduling_config import SchedulingConfig


def test_defaults():
    config = SchedulingConfig.from_env({})

    assert config.weights == {"core": 100, "extended": 50, "unreasonable": 0}
    assert config.grace_hours == 2
    assert config.anchor_hour == 12
    assert config.default_work_profile == DEFAULT_WORK_PROFILE
    assert config.holiday_api_base_url == "https://date.nager.at/api/v3"


def test_from_env_overrides():
    config = SchedulingConfig.from_env({
        "SCHEDULER_EXTENDED_WEIGHT": "40",
        "SCHEDULER_GRACE_HOURS": "1",
        "SCHEDULER_ANCHOR_HOUR": "15",
        "SCHEDULER_DEFAULT_WORK_DAYS": "Sun,Mon,Tue,Wed,Thu",
        "SCHEDULER_DEFAULT_WORK_START": "08:00",
        "SCHEDULER_DEFAULT_WORK_END": "16:30",
        "HOLIDAY_LOOKUP_TIMEOUT": "2.5",
    })

    assert config.extended_weight == 40
    assert config.grace_hours == 1
    assert config.anchor_hour == 15
    assert "Sun" in config.default_work_profile.active_weekdays
    assert "Fri" not in config.default_work_profile.active_weekdays
    assert config.default_work_profile.end == time(16, 30)
    assert config.holiday_timeout_seconds == 2.5


@pytest.mark.parametrize(
    "overrides",
    [
        {"anchor_hour": 24},
        {"core_weight": 101},
        {"grace_hours": -1},
        {"holiday_timeout_seconds": 0},
        {"default_suggestion_count": 0},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        SchedulingConfig(**overrides)
