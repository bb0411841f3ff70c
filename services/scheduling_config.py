"""Tunable constants for the scheduling engine."""

import os
from dataclasses import dataclass, field
from typing import Optional

from models.entities import DEFAULT_WORK_PROFILE, WorkProfile

# Ranges enforced by the meeting CRUD layer before the engine is called.
# The engine never re-validates them.
MIN_DURATION_MINUTES = 15
MAX_DURATION_MINUTES = 480
MAX_PARTICIPANTS = 50

DEFAULT_HOLIDAY_API_BASE_URL = "https://date.nager.at/api/v3"


@dataclass
class SchedulingConfig:
    """Weights, grace band, tie-break anchor and holiday client settings."""
    core_weight: int = 100
    extended_weight: int = 50
    unreasonable_weight: int = 0
    grace_hours: int = 2
    anchor_hour: int = 12
    default_work_profile: WorkProfile = field(default_factory=lambda: DEFAULT_WORK_PROFILE)
    holiday_api_base_url: str = DEFAULT_HOLIDAY_API_BASE_URL
    holiday_timeout_seconds: float = 3.0
    default_suggestion_count: int = 3
    log_level: str = "INFO"

    def __post_init__(self):
        for name in ("core_weight", "extended_weight", "unreasonable_weight"):
            weight = getattr(self, name)
            if not 0 <= weight <= 100:
                raise ValueError(f"{name} must be within 0-100, got {weight}")
        if self.grace_hours < 0 or self.grace_hours > 12:
            raise ValueError(f"grace_hours must be within 0-12, got {self.grace_hours}")
        if not 0 <= self.anchor_hour <= 23:
            raise ValueError(f"anchor_hour must be within 0-23, got {self.anchor_hour}")
        if self.holiday_timeout_seconds <= 0:
            raise ValueError("holiday_timeout_seconds must be positive")
        if self.default_suggestion_count < 1:
            raise ValueError("default_suggestion_count must be at least 1")

    @property
    def weights(self) -> dict[str, int]:
        return {
            "core": self.core_weight,
            "extended": self.extended_weight,
            "unreasonable": self.unreasonable_weight,
        }

    @classmethod
    def from_env(cls, env: Optional[dict] = None) -> "SchedulingConfig":
        """
        Build configuration from environment variables.

        Args:
            env: Mapping to read instead of os.environ (used by tests)

        Returns:
            SchedulingConfig with defaults for every unset variable
        """
        getenv = env.get if env is not None else os.getenv

        default_days = getenv("SCHEDULER_DEFAULT_WORK_DAYS", "Mon,Tue,Wed,Thu,Fri")
        work_profile = WorkProfile.from_config(
            [d for d in default_days.split(",") if d.strip()],
            getenv("SCHEDULER_DEFAULT_WORK_START", "09:00"),
            getenv("SCHEDULER_DEFAULT_WORK_END", "17:00")
        )

        return cls(
            core_weight=int(getenv("SCHEDULER_CORE_WEIGHT", "100")),
            extended_weight=int(getenv("SCHEDULER_EXTENDED_WEIGHT", "50")),
            unreasonable_weight=int(getenv("SCHEDULER_UNREASONABLE_WEIGHT", "0")),
            grace_hours=int(getenv("SCHEDULER_GRACE_HOURS", "2")),
            anchor_hour=int(getenv("SCHEDULER_ANCHOR_HOUR", "12")),
            default_work_profile=work_profile,
            holiday_api_base_url=getenv("HOLIDAY_API_BASE_URL", DEFAULT_HOLIDAY_API_BASE_URL),
            holiday_timeout_seconds=float(getenv("HOLIDAY_LOOKUP_TIMEOUT", "3.0")),
            default_suggestion_count=int(getenv("SCHEDULER_SUGGESTION_COUNT", "3")),
            log_level=getenv("LOG_LEVEL", "INFO")
        )
