"""Map raw persistence records onto engine entities."""

from typing import Any, Dict, List, Optional

from models.entities import InvalidWorkProfile, Participant, WorkProfile
from services.logging_config import get_logger

logger = get_logger(__name__)


class RecordMapper:
    """
    Converts participant rows and country work-hour rows into entities.

    Rows may use snake_case column names (database) or camelCase keys
    (API payloads); both are accepted.
    """

    @staticmethod
    def _get_field(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
        """Helper to get value with multiple field name variations."""
        for key in keys:
            value = data.get(key)
            if value not in (None, ""):
                return value.strip() if isinstance(value, str) else value
        return default

    def map_participant(self, record: Dict[str, Any]) -> Optional[Participant]:
        """
        Map a participant row.

        Rows without an id or timezone are skipped. The timezone is not
        validated here; the engine excludes unknown zones per participant.
        """
        participant_id = self._get_field(record, "id", "participant_id", "participantId")
        timezone = self._get_field(record, "timezone", "tz", "time_zone", "timeZone")

        if participant_id is None or not timezone:
            logger.warning("Skipping participant record without id or timezone", record_id=participant_id)
            return None

        name = self._get_field(
            record,
            "display_name",
            "displayName",
            "name",
            "email",
            default=str(participant_id)
        )
        country_code = self._get_field(record, "country_code", "countryCode", "country")

        return Participant(
            id=str(participant_id),
            display_name=str(name),
            timezone=str(timezone),
            country_code=str(country_code).upper() if country_code else None
        )

    def map_participants(self, records: List[Dict[str, Any]]) -> List[Participant]:
        """Map participant rows, dropping the ones that cannot be used."""
        participants = []
        for record in records:
            participant = self.map_participant(record)
            if participant:
                participants.append(participant)
        return participants

    def map_work_profile(self, record: Dict[str, Any]) -> WorkProfile:
        """
        Map a work-hour row to a WorkProfile.

        Raises:
            InvalidWorkProfile: if days or hours are missing or malformed
        """
        days = self._get_field(record, "active_weekdays", "activeWeekdays", "work_days", "workDays")
        start = self._get_field(record, "work_start", "workStart", "green_start", "greenStart")
        end = self._get_field(record, "work_end", "workEnd", "green_end", "greenEnd")

        if days is None or start is None or end is None:
            raise InvalidWorkProfile(f"Incomplete work-hour configuration: {sorted(record)}")
        if isinstance(days, str):
            days = [d for d in days.split(",") if d.strip()]

        return WorkProfile.from_config(days, start, end)

    def map_country_profiles(self, records: List[Dict[str, Any]]) -> Dict[str, WorkProfile]:
        """
        Map country configuration rows to profiles keyed by upper-case country code.

        Invalid rows are logged and skipped so the country falls back to the default.
        """
        profiles = {}
        for record in records:
            code = self._get_field(record, "country_code", "countryCode")
            if not code:
                logger.warning("Skipping country configuration without country code")
                continue
            try:
                profiles[str(code).upper()] = self.map_work_profile(record)
            except InvalidWorkProfile as e:
                logger.warning("Skipping invalid country configuration", country_code=code, error=str(e))
        return profiles
