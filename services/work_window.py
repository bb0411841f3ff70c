"""Classify a participant's local time against their work window."""

from typing import Optional

from models.entities import DEFAULT_WORK_PROFILE, Tier, Weekday, WorkProfile

MINUTES_PER_DAY = 24 * 60


class WorkWindowEvaluator:
    """
    Three-tier convenience classification.

    core:          inside [start, end) on an active weekday
    extended:      within the grace band before start or after end
    unreasonable:  anything else, including inactive weekdays
    """

    def __init__(
        self,
        default_profile: WorkProfile = DEFAULT_WORK_PROFILE,
        grace_hours: int = 2
    ):
        """Initialize with the fallback profile and grace band width."""
        self.default_profile = default_profile
        self.grace_minutes = grace_hours * 60

    def classify(
        self,
        local_hour: int,
        local_weekday: Weekday,
        work_profile: Optional[WorkProfile] = None,
        local_minute: int = 0
    ) -> Tier:
        """Return the tier for a local wall-clock time."""
        tier, _ = self.classify_with_reason(local_hour, local_weekday, work_profile, local_minute)
        return tier

    def classify_with_reason(
        self,
        local_hour: int,
        local_weekday: Weekday,
        work_profile: Optional[WorkProfile] = None,
        local_minute: int = 0
    ) -> tuple[Tier, str]:
        """
        Classify a local time and explain the result.

        Args:
            local_hour: Hour on the participant's wall clock (0-23)
            local_weekday: Weekday on the participant's wall clock
            work_profile: Participant profile; the default applies when None
            local_minute: Minute within the hour (fractional-offset zones)

        Returns:
            (tier, human-readable reason)
        """
        profile = work_profile or self.default_profile

        if local_weekday not in profile.active_weekdays:
            return "unreasonable", "Non-working day"

        minutes = local_hour * 60 + local_minute
        start = profile.start_minutes
        end = profile.end_minutes

        if profile.crosses_midnight:
            if minutes >= start or minutes < end:
                return "core", "Optimal working hours"
            if start - self.grace_minutes <= minutes < start:
                return "extended", "Acceptable (early)"
            if end <= minutes < end + self.grace_minutes:
                return "extended", "Acceptable (late)"
            return "unreasonable", "Outside working hours"

        if start <= minutes < end:
            return "core", "Optimal working hours"

        # Day-bounded windows do not wrap the grace band past midnight
        if max(0, start - self.grace_minutes) <= minutes < start:
            return "extended", "Acceptable (early)"
        if end <= minutes < min(MINUTES_PER_DAY, end + self.grace_minutes):
            return "extended", "Acceptable (late)"

        return "unreasonable", "Outside working hours"
