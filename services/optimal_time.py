"""Rank heatmap hours into meeting time suggestions."""

from typing import Iterable

from models.entities import HeatmapEntry, Suggestion


class OptimalTimeSuggester:
    """
    Picks the top N hours from a heatmap.

    Ordering: higher score first, then the hour closest to the anchor hour
    on the 24-hour clock, then the lower hour. This is a total order, so
    identical input always yields identical output.
    """

    def __init__(self, anchor_hour: int = 12):
        """Initialize with the neutral preference hour (UTC, 0-23)."""
        if not 0 <= anchor_hour <= 23:
            raise ValueError(f"anchor_hour must be within 0-23, got {anchor_hour}")
        self.anchor_hour = anchor_hour

    def anchor_distance(self, hour: int) -> int:
        diff = abs(hour - self.anchor_hour) % 24
        return min(diff, 24 - diff)

    def sort_key(self, entry: HeatmapEntry) -> tuple[int, int, int]:
        return (-entry.score, self.anchor_distance(entry.hour), entry.hour)

    def top_n(self, heatmap: Iterable[HeatmapEntry], n: int) -> list[Suggestion]:
        """
        Return the best n hours as ranked suggestions.

        Args:
            heatmap: Heatmap entries (any order)
            n: Number of suggestions; n <= 0 yields an empty list

        Returns:
            Suggestions ranked from 1
        """
        if n <= 0:
            return []
        ranked = sorted(heatmap, key=self.sort_key)
        return [
            Suggestion(rank=index, entry=entry)
            for index, entry in enumerate(ranked[:n], 1)
        ]
