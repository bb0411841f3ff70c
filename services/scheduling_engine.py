"""Core scheduling pipeline: participants + date -> heatmap -> suggestions."""

from datetime import date, datetime
from typing import Iterable, Mapping, Optional

from models.entities import EquityResult, Participant, SchedulingReport, WorkProfile
from services.equity_scorer import EquityScorer
from services.heatmap import HeatmapGenerator
from services.holiday_service import HolidayLookup
from services.logging_config import get_logger
from services.optimal_time import OptimalTimeSuggester
from services.scheduling_config import SchedulingConfig
from services.work_window import WorkWindowEvaluator

logger = get_logger(__name__)


class SchedulingEngine:
    """
    Engine for finding fair meeting times across timezones.

    Stateless between calls: every invocation builds its own holiday gate
    and result objects, and nothing is cached on the engine. Memoization
    belongs to the caller.
    """

    def __init__(
        self,
        config: Optional[SchedulingConfig] = None,
        holiday_lookup: Optional[HolidayLookup] = None
    ):
        """
        Initialize the scheduling engine.

        Args:
            config: Weights, grace band, anchor hour and default profile
            holiday_lookup: (date, country_code) -> bool, e.g. NagerDateClient().is_holiday
        """
        self.config = config or SchedulingConfig()
        self.heatmap_generator = HeatmapGenerator(
            evaluator=WorkWindowEvaluator(
                default_profile=self.config.default_work_profile,
                grace_hours=self.config.grace_hours
            ),
            scorer=EquityScorer(self.config.weights),
            holiday_lookup=holiday_lookup
        )
        self.suggester = OptimalTimeSuggester(anchor_hour=self.config.anchor_hour)

    def find_meeting_times(
        self,
        participants: Iterable[Participant],
        reference_date: date,
        work_profiles: Optional[Mapping[str, WorkProfile]] = None,
        country_profiles: Optional[Mapping[str, WorkProfile]] = None,
        max_suggestions: Optional[int] = None
    ) -> SchedulingReport:
        """
        Build the heatmap for a date and rank its hours.

        Args:
            participants: Participant snapshot
            reference_date: Meeting date (UTC hours are evaluated)
            work_profiles: Profiles keyed by participant id
            country_profiles: Fallback profiles keyed by country code
            max_suggestions: Number of suggestions (config default when None)

        Returns:
            SchedulingReport with the 24-entry heatmap and ranked suggestions
        """
        count = self.config.default_suggestion_count if max_suggestions is None else max_suggestions

        heatmap = self.heatmap_generator.build_heatmap(
            list(participants),
            reference_date,
            work_profiles=work_profiles,
            country_profiles=country_profiles
        )
        suggestions = self.suggester.top_n(heatmap.entries, count)

        logger.info(
            "Meeting times ranked",
            reference_date=reference_date.isoformat(),
            suggestion_hours=[s.hour for s in suggestions],
            has_unknown_holiday_data=heatmap.has_unknown_holiday_data,
            warning_count=len(heatmap.warnings)
        )
        return SchedulingReport(heatmap=heatmap, suggestions=suggestions)

    def evaluate_time(
        self,
        participants: Iterable[Participant],
        proposed_time: datetime,
        work_profiles: Optional[Mapping[str, WorkProfile]] = None,
        country_profiles: Optional[Mapping[str, WorkProfile]] = None
    ) -> EquityResult:
        """Equity result for one proposed meeting start."""
        return self.heatmap_generator.evaluate_instant(
            list(participants),
            proposed_time,
            work_profiles=work_profiles,
            country_profiles=country_profiles
        )
