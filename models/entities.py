"""Domain models for the meeting equity engine."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Literal, Optional

Tier = Literal["core", "extended", "unreasonable"]
HolidayStatus = Literal["yes", "no", "unknown"]
Weekday = Literal["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Index + 1 is the ISO weekday number (Mon=1 .. Sun=7)
WEEKDAYS: tuple[Weekday, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class InvalidWorkProfile(ValueError):
    """Raised when a work profile configuration cannot be used."""


def parse_clock(value) -> time:
    """Parse "HH:MM" (or "HH:MM:SS") into a time; time objects pass through."""
    if isinstance(value, time):
        return value
    if isinstance(value, int):
        if not 0 <= value < 24:
            raise InvalidWorkProfile(f"Hour out of range: {value}")
        return time(value, 0)
    try:
        parts = [int(p) for p in str(value).strip().split(":")]
    except ValueError:
        raise InvalidWorkProfile(f"Invalid clock time: {value!r}")
    if len(parts) not in (2, 3):
        raise InvalidWorkProfile(f"Invalid clock time: {value!r}")
    hour, minute = parts[0], parts[1]
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise InvalidWorkProfile(f"Clock time out of range: {value!r}")
    return time(hour, minute)


def parse_weekday(value) -> Weekday:
    """Accept an ISO weekday number (1-7) or a name such as "Mon"/"monday"."""
    if isinstance(value, int):
        if not 1 <= value <= 7:
            raise InvalidWorkProfile(f"Weekday out of range: {value}")
        return WEEKDAYS[value - 1]
    text = str(value).strip()
    if text.isdigit():
        return parse_weekday(int(text))
    prefix = text[:3].title()
    if prefix not in WEEKDAYS:
        raise InvalidWorkProfile(f"Unknown weekday: {value!r}")
    return prefix


@dataclass(frozen=True)
class Participant:
    """A meeting participant as supplied by the caller."""
    id: str
    display_name: str
    timezone: str  # IANA identifier
    country_code: Optional[str] = None  # ISO 3166-1 alpha-2


@dataclass(frozen=True)
class WorkProfile:
    """
    Active weekdays and a [start, end) work window in local time.

    A start later than the end describes a window crossing midnight.
    """
    active_weekdays: frozenset
    start: time
    end: time

    def __post_init__(self):
        if not self.active_weekdays:
            raise InvalidWorkProfile("Work profile needs at least one active weekday")
        unknown = set(self.active_weekdays) - set(WEEKDAYS)
        if unknown:
            raise InvalidWorkProfile(f"Unknown weekdays: {sorted(unknown)}")
        if self.start == self.end:
            raise InvalidWorkProfile("Work window start and end must differ")

    @classmethod
    def from_config(cls, active_weekdays, work_start, work_end) -> "WorkProfile":
        """Build a profile from loosely typed configuration values."""
        days = frozenset(parse_weekday(d) for d in active_weekdays)
        return cls(
            active_weekdays=days,
            start=parse_clock(work_start),
            end=parse_clock(work_end)
        )

    @property
    def start_minutes(self) -> int:
        return self.start.hour * 60 + self.start.minute

    @property
    def end_minutes(self) -> int:
        return self.end.hour * 60 + self.end.minute

    @property
    def crosses_midnight(self) -> bool:
        return self.start > self.end


DEFAULT_WORK_PROFILE = WorkProfile(
    active_weekdays=frozenset(("Mon", "Tue", "Wed", "Thu", "Fri")),
    start=time(9, 0),
    end=time(17, 0)
)


@dataclass(frozen=True)
class Holiday:
    """A public holiday returned by the holiday lookup."""
    date: date
    name: str
    local_name: str
    country_code: str
    is_global: bool = True


@dataclass(frozen=True)
class LocalTime:
    """Wall-clock view of a UTC instant in one timezone."""
    hour: int
    minute: int
    weekday: Weekday
    local_date: date
    utc_offset_minutes: int


@dataclass
class ParticipantStatus:
    """Convenience of one candidate instant for one participant."""
    participant_id: str
    display_name: str
    local_hour: int
    local_minute: int
    local_weekday: Weekday
    local_date: date
    tier: Tier
    is_holiday: HolidayStatus
    reason: str


@dataclass
class EquityResult:
    """Aggregate fairness of one candidate instant."""
    score: int
    quality: str
    core_count: int
    extended_count: int
    unreasonable_count: int
    holiday_count: int
    participant_statuses: list[ParticipantStatus]
    has_unknown_holiday_data: bool = False
    excluded_participant_ids: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.participant_statuses)


@dataclass
class HeatmapEntry:
    """One UTC hour of the reference date with its equity result."""
    hour: int
    candidate_instant: datetime
    result: EquityResult

    @property
    def score(self) -> int:
        return self.result.score


@dataclass
class HeatmapResult:
    """24 hourly entries plus the data-quality signals of the run."""
    reference_date: date
    entries: list[HeatmapEntry]
    has_unknown_holiday_data: bool = False
    excluded_participant_ids: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def scores(self) -> list[int]:
        return [entry.score for entry in self.entries]


@dataclass
class Suggestion:
    """A heatmap entry promoted to a ranked candidate (rank starts at 1)."""
    rank: int
    entry: HeatmapEntry

    @property
    def hour(self) -> int:
        return self.entry.hour

    @property
    def score(self) -> int:
        return self.entry.score

    @property
    def candidate_instant(self) -> datetime:
        return self.entry.candidate_instant


@dataclass
class SchedulingReport:
    """Heatmap and suggestions produced by one engine invocation."""
    heatmap: HeatmapResult
    suggestions: list[Suggestion]

    @property
    def warnings(self) -> list[str]:
        return self.heatmap.warnings

    @property
    def has_unknown_holiday_data(self) -> bool:
        return self.heatmap.has_unknown_holiday_data
