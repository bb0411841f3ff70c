"""24-hour suitability heatmap and single-instant evaluation."""

from datetime import date, datetime, time
from typing import Iterable, Mapping, Optional

import pytz

from models.entities import (
    EquityResult,
    HeatmapEntry,
    HeatmapResult,
    Participant,
    ParticipantStatus,
    WorkProfile,
)
from services.equity_scorer import EquityScorer
from services.holiday_service import HolidayGate, HolidayLookup
from services.logging_config import get_logger
from services.time_converter import InvalidTimezone, ensure_utc, get_zone, local_hour_and_weekday
from services.work_window import WorkWindowEvaluator

logger = get_logger(__name__)

HOURS_PER_DAY = 24


class HeatmapGenerator:
    """Scores every UTC hour of a reference date across all participants."""

    def __init__(
        self,
        evaluator: Optional[WorkWindowEvaluator] = None,
        scorer: Optional[EquityScorer] = None,
        holiday_lookup: Optional[HolidayLookup] = None
    ):
        """
        Initialize the generator.

        Args:
            evaluator: Work window classifier (default profile, 2h grace)
            scorer: Equity scorer (100/50/0 weights)
            holiday_lookup: (date, country_code) -> bool; None disables holiday checks
        """
        self.evaluator = evaluator or WorkWindowEvaluator()
        self.scorer = scorer or EquityScorer()
        self.holiday_lookup = holiday_lookup

    def new_holiday_gate(self) -> HolidayGate:
        """One gate per run so lookups are shared across hours, never across runs."""
        return HolidayGate(self.holiday_lookup)

    @staticmethod
    def resolve_profile(
        participant: Participant,
        work_profiles: Optional[Mapping[str, WorkProfile]] = None,
        country_profiles: Optional[Mapping[str, WorkProfile]] = None
    ) -> Optional[WorkProfile]:
        """Participant profile, else country profile, else None (evaluator default)."""
        if work_profiles and participant.id in work_profiles:
            return work_profiles[participant.id]
        if country_profiles and participant.country_code:
            return country_profiles.get(participant.country_code.upper())
        return None

    @staticmethod
    def partition_participants(
        participants: Iterable[Participant]
    ) -> tuple[list[Participant], list[str], list[str]]:
        """
        Split participants into scorable ones and those with a bad timezone.

        Returns:
            (valid participants, excluded participant ids, warning messages)
        """
        valid = []
        excluded = []
        warnings = []
        for participant in participants:
            try:
                get_zone(participant.timezone)
            except InvalidTimezone:
                logger.warning(
                    "Participant excluded: invalid timezone",
                    participant_id=participant.id,
                    timezone=participant.timezone
                )
                excluded.append(participant.id)
                warnings.append(
                    f"Participant {participant.id} excluded: "
                    f"unrecognized timezone '{participant.timezone}'"
                )
                continue
            valid.append(participant)
        return valid, excluded, warnings

    def participant_status(
        self,
        participant: Participant,
        instant: datetime,
        work_profile: Optional[WorkProfile],
        holiday_gate: HolidayGate
    ) -> ParticipantStatus:
        """Classify one participant at one instant, including the holiday check."""
        local = local_hour_and_weekday(instant, participant.timezone)
        tier, reason = self.evaluator.classify_with_reason(
            local.hour,
            local.weekday,
            work_profile,
            local_minute=local.minute
        )
        is_holiday = holiday_gate.is_holiday(local.local_date, participant.country_code)
        if is_holiday == "yes":
            reason = "Public holiday"

        return ParticipantStatus(
            participant_id=participant.id,
            display_name=participant.display_name,
            local_hour=local.hour,
            local_minute=local.minute,
            local_weekday=local.weekday,
            local_date=local.local_date,
            tier=tier,
            is_holiday=is_holiday,
            reason=reason
        )

    def _score_instant(
        self,
        participants: list[Participant],
        instant: datetime,
        work_profiles: Optional[Mapping[str, WorkProfile]],
        country_profiles: Optional[Mapping[str, WorkProfile]],
        holiday_gate: HolidayGate
    ) -> EquityResult:
        statuses = [
            self.participant_status(
                participant,
                instant,
                self.resolve_profile(participant, work_profiles, country_profiles),
                holiday_gate
            )
            for participant in participants
        ]
        return self.scorer.score(statuses)

    def evaluate_instant(
        self,
        participants: Iterable[Participant],
        instant: datetime,
        work_profiles: Optional[Mapping[str, WorkProfile]] = None,
        country_profiles: Optional[Mapping[str, WorkProfile]] = None
    ) -> EquityResult:
        """
        Equity result for an arbitrary candidate instant.

        Participants with an unrecognized timezone are left out and listed
        in the result's excluded ids and warnings.
        """
        valid, excluded, warnings = self.partition_participants(participants)
        gate = self.new_holiday_gate()
        result = self._score_instant(
            valid, ensure_utc(instant), work_profiles, country_profiles, gate
        )
        result.has_unknown_holiday_data = result.has_unknown_holiday_data or gate.has_unknown_holiday_data
        result.excluded_participant_ids = excluded
        result.warnings = warnings + self._holiday_warnings(self._unknown_countries(result, valid))
        return result

    def build_heatmap(
        self,
        participants: Iterable[Participant],
        reference_date: date,
        work_profiles: Optional[Mapping[str, WorkProfile]] = None,
        country_profiles: Optional[Mapping[str, WorkProfile]] = None
    ) -> HeatmapResult:
        """
        Score each UTC hour 00:00-23:00 of the reference date.

        Hours are scored independently; one holiday gate is shared by all
        24 hours so each (country, local date) is looked up at most once.

        Args:
            participants: Participant snapshot (not mutated)
            reference_date: Date whose UTC hours are evaluated
            work_profiles: Profiles keyed by participant id
            country_profiles: Fallback profiles keyed by country code

        Returns:
            HeatmapResult with exactly 24 entries, hour ascending
        """
        valid, excluded, warnings = self.partition_participants(participants)
        gate = self.new_holiday_gate()

        entries = []
        for hour in range(HOURS_PER_DAY):
            instant = pytz.UTC.localize(datetime.combine(reference_date, time(hour, 0)))
            result = self._score_instant(valid, instant, work_profiles, country_profiles, gate)
            result.excluded_participant_ids = list(excluded)
            result.warnings = warnings + self._holiday_warnings(
                self._unknown_countries(result, valid)
            )
            entries.append(HeatmapEntry(hour=hour, candidate_instant=instant, result=result))

        heatmap = HeatmapResult(
            reference_date=reference_date,
            entries=entries,
            has_unknown_holiday_data=gate.has_unknown_holiday_data,
            excluded_participant_ids=excluded,
            warnings=warnings + self._holiday_warnings(gate.failed_countries)
        )

        best = max(entries, key=lambda e: e.score)
        logger.info(
            "Heatmap built",
            reference_date=reference_date.isoformat(),
            participant_count=len(valid),
            excluded_count=len(excluded),
            best_hour=best.hour,
            best_score=best.score
        )
        return heatmap

    @staticmethod
    def _unknown_countries(result: EquityResult, participants: list[Participant]) -> list[str]:
        """Countries whose holiday status is unknown in this one result."""
        countries = {p.id: p.country_code.upper() for p in participants if p.country_code}
        return sorted({
            countries[s.participant_id]
            for s in result.participant_statuses
            if s.is_holiday == "unknown" and s.participant_id in countries
        })

    @staticmethod
    def _holiday_warnings(country_codes: Iterable[str]) -> list[str]:
        return [
            f"Holiday data unavailable for {code}; holidays were not checked"
            for code in country_codes
        ]
