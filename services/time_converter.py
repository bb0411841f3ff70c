"""Timezone arithmetic for participants spread across IANA zones."""

from datetime import datetime, timedelta

import pytz

from models.entities import WEEKDAYS, LocalTime


class InvalidTimezone(ValueError):
    """Raised when a timezone string is not a recognized IANA zone."""

    def __init__(self, timezone: str):
        super().__init__(f"Invalid timezone: {timezone}")
        self.timezone = timezone


# Countries with more than one common zone list them all
COUNTRY_TIMEZONES: dict[str, list[dict[str, str]]] = {
    "US": [
        {"timezone": "America/New_York", "name": "Eastern Time", "abbreviation": "EST"},
        {"timezone": "America/Chicago", "name": "Central Time", "abbreviation": "CST"},
        {"timezone": "America/Denver", "name": "Mountain Time", "abbreviation": "MST"},
        {"timezone": "America/Los_Angeles", "name": "Pacific Time", "abbreviation": "PST"},
        {"timezone": "America/Anchorage", "name": "Alaska Time", "abbreviation": "AKST"},
        {"timezone": "Pacific/Honolulu", "name": "Hawaii Time", "abbreviation": "HST"},
    ],
    "GB": [{"timezone": "Europe/London", "name": "Greenwich Mean Time", "abbreviation": "GMT"}],
    "FR": [{"timezone": "Europe/Paris", "name": "Central European Time", "abbreviation": "CET"}],
    "DE": [{"timezone": "Europe/Berlin", "name": "Central European Time", "abbreviation": "CET"}],
    "ES": [
        {"timezone": "Europe/Madrid", "name": "Central European Time", "abbreviation": "CET"},
        {"timezone": "Atlantic/Canary", "name": "Canary Islands", "abbreviation": "WET"},
    ],
    "JP": [{"timezone": "Asia/Tokyo", "name": "Japan Standard Time", "abbreviation": "JST"}],
    "CN": [{"timezone": "Asia/Shanghai", "name": "China Standard Time", "abbreviation": "CST"}],
    "AU": [
        {"timezone": "Australia/Sydney", "name": "Australian Eastern Time", "abbreviation": "AEST"},
        {"timezone": "Australia/Melbourne", "name": "Australian Eastern Time", "abbreviation": "AEST"},
        {"timezone": "Australia/Perth", "name": "Australian Western Time", "abbreviation": "AWST"},
    ],
    "IN": [{"timezone": "Asia/Kolkata", "name": "India Standard Time", "abbreviation": "IST"}],
    "AE": [{"timezone": "Asia/Dubai", "name": "Gulf Standard Time", "abbreviation": "GST"}],
    "IL": [{"timezone": "Asia/Jerusalem", "name": "Israel Standard Time", "abbreviation": "IST"}],
}


def get_zone(timezone: str):
    """Resolve an IANA identifier to a pytz zone, raising InvalidTimezone."""
    if not timezone or not isinstance(timezone, str):
        raise InvalidTimezone(str(timezone))
    try:
        return pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError:
        raise InvalidTimezone(timezone)


def is_valid_timezone(timezone: str) -> bool:
    """Check whether a string names a known IANA zone."""
    try:
        get_zone(timezone)
    except InvalidTimezone:
        return False
    return True


def ensure_utc(instant: datetime) -> datetime:
    """Return the instant as an aware UTC datetime (naive input is taken as UTC)."""
    if instant.tzinfo is None:
        return pytz.UTC.localize(instant)
    return instant.astimezone(pytz.UTC)


def to_zone(instant: datetime, timezone: str) -> datetime:
    """Convert a UTC instant to an aware datetime in the target zone."""
    return ensure_utc(instant).astimezone(get_zone(timezone))


def local_hour_and_weekday(instant: datetime, timezone: str) -> LocalTime:
    """
    Convert a UTC instant to a participant's wall clock.

    Handles DST transitions and fractional offsets (UTC+5:30, UTC+8:45, ...)
    because the offset is looked up for the instant itself.

    Args:
        instant: Candidate instant (aware, or naive UTC)
        timezone: IANA timezone identifier

    Returns:
        LocalTime with hour, minute, weekday, local date and UTC offset

    Raises:
        InvalidTimezone: if the identifier is unknown
    """
    local = to_zone(instant, timezone)
    offset = local.utcoffset() or timedelta(0)
    return LocalTime(
        hour=local.hour,
        minute=local.minute,
        weekday=WEEKDAYS[local.weekday()],
        local_date=local.date(),
        utc_offset_minutes=int(offset.total_seconds() // 60)
    )


def to_utc(local_time: datetime, timezone: str) -> datetime:
    """
    Interpret a naive wall-clock datetime in a zone and return it in UTC.

    Wall times skipped or repeated by a DST change resolve to standard time.
    """
    zone = get_zone(timezone)
    if local_time.tzinfo is not None:
        return local_time.astimezone(pytz.UTC)
    return zone.localize(local_time, is_dst=False).astimezone(pytz.UTC)


def get_timezone_offset(instant: datetime, timezone: str) -> dict:
    """
    Get the UTC offset of a zone at a specific instant.

    Returns:
        dict with offset_minutes, offset_string (e.g. "+05:30") and is_dst
    """
    local = to_zone(instant, timezone)
    offset_minutes = int((local.utcoffset() or timedelta(0)).total_seconds() // 60)
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return {
        "offset_minutes": offset_minutes,
        "offset_string": f"{sign}{hours:02d}:{minutes:02d}",
        "is_dst": bool(local.dst()),
    }


def format_local_time(instant: datetime, timezone: str, fmt: str = "%H:%M") -> str:
    """Format an instant on a zone's wall clock using strftime codes."""
    return to_zone(instant, timezone).strftime(fmt)


def format_with_timezone(instant: datetime, timezone: str) -> str:
    """Format as "2:00 PM EST (America/New_York)"."""
    local = to_zone(instant, timezone)
    hour = local.hour % 12 or 12
    return f"{hour}:{local.minute:02d} {local.strftime('%p %Z')} ({timezone})"


def get_timezones_for_country(country_code: str) -> list[dict[str, str]]:
    """List the common IANA zones for an ISO 3166-1 alpha-2 country code."""
    if not country_code or len(country_code) != 2:
        raise ValueError("Valid ISO 3166-1 alpha-2 country code required")
    return list(COUNTRY_TIMEZONES.get(country_code.upper(), []))
