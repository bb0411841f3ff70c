"""Equity scoring: how fair one candidate time is across all participants."""

from typing import Optional, Sequence

from models.entities import EquityResult, ParticipantStatus

DEFAULT_WEIGHTS = {"core": 100, "extended": 50, "unreasonable": 0}


def get_score_quality(score: int) -> str:
    """
    Quality category for an equity score.

    excellent (71-100), good (41-70), fair (1-40), poor (0)
    """
    if score >= 71:
        return "excellent"
    if score >= 41:
        return "good"
    if score >= 1:
        return "fair"
    return "poor"


def compare_scores(score_a: int, score_b: int) -> int:
    """1 if A is better, -1 if B is better, 0 if equal."""
    if score_a > score_b:
        return 1
    if score_a < score_b:
        return -1
    return 0


class EquityScorer:
    """Folds per-participant statuses into a 0-100 score and a breakdown."""

    def __init__(self, weights: Optional[dict[str, int]] = None):
        """Initialize with tier weights (core/extended/unreasonable)."""
        self.weights = dict(DEFAULT_WEIGHTS)
        if weights:
            self.weights.update(weights)

    def participant_weight(self, status: ParticipantStatus) -> int:
        # A holiday overrides any time-of-day convenience
        if status.is_holiday == "yes":
            return 0
        return self.weights[status.tier]

    def score(
        self,
        participant_statuses: Sequence[ParticipantStatus],
        has_unknown_holiday_data: bool = False
    ) -> EquityResult:
        """
        Score one candidate instant.

        The score is the mean participant weight rounded half up, so the
        result does not depend on input order. An empty input scores 0.

        Args:
            participant_statuses: One status per scored participant
            has_unknown_holiday_data: Carry a holiday failure seen elsewhere in the run

        Returns:
            EquityResult with score, quality and tier counts
        """
        statuses = list(participant_statuses)
        unknown = has_unknown_holiday_data or any(s.is_holiday == "unknown" for s in statuses)

        if not statuses:
            return EquityResult(
                score=0,
                quality=get_score_quality(0),
                core_count=0,
                extended_count=0,
                unreasonable_count=0,
                holiday_count=0,
                participant_statuses=[],
                has_unknown_holiday_data=unknown
            )

        total = sum(self.participant_weight(s) for s in statuses)
        count = len(statuses)
        score = (2 * total + count) // (2 * count)

        return EquityResult(
            score=score,
            quality=get_score_quality(score),
            core_count=sum(1 for s in statuses if s.tier == "core"),
            extended_count=sum(1 for s in statuses if s.tier == "extended"),
            unreasonable_count=sum(1 for s in statuses if s.tier == "unreasonable"),
            holiday_count=sum(1 for s in statuses if s.is_holiday == "yes"),
            participant_statuses=statuses,
            has_unknown_holiday_data=unknown
        )
