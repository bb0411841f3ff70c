"""Structured markdown for scheduling results."""

from typing import List, Optional

from models.entities import EquityResult, Participant, Suggestion
from services.time_converter import format_with_timezone

QUALITY_ICONS = {
    "excellent": "🟢",
    "good": "🟡",
    "fair": "🟠",
    "poor": "🔴",
}

TIER_ICONS = {
    "core": "✅",
    "extended": "⚠️",
    "unreasonable": "❌",
}


class ResponseFormatter:
    """Formats engine output consistently for the demo page."""

    @staticmethod
    def format_section(title: str, content: List[str], icon: str = "📋") -> str:
        """Format a section with title and content."""
        lines = [f"**{icon} {title}**", ""]
        lines.extend(content)
        return "\n".join(lines)

    @staticmethod
    def format_score(score: int, quality: str) -> str:
        icon = QUALITY_ICONS.get(quality, "⚪")
        return f"{icon} {score}/100 ({quality})"

    @staticmethod
    def format_equity_result(result: EquityResult) -> str:
        """Format the per-participant breakdown for one candidate time."""
        lines = [
            f"**Equity score:** {ResponseFormatter.format_score(result.score, result.quality)}",
            "",
            f"• Core: {result.core_count}  • Extended: {result.extended_count}  "
            f"• Unreasonable: {result.unreasonable_count}  • On holiday: {result.holiday_count}",
            ""
        ]

        for status in result.participant_statuses:
            icon = "🏖️" if status.is_holiday == "yes" else TIER_ICONS[status.tier]
            lines.append(
                f"{icon} **{status.display_name}** - {status.local_weekday} "
                f"{status.local_hour:02d}:{status.local_minute:02d} ({status.reason})"
            )

        if result.has_unknown_holiday_data:
            lines.append("")
            lines.append("ℹ️ Holiday data was unavailable for some participants.")

        return "\n".join(lines)

    @staticmethod
    def format_suggestions(
        suggestions: List[Suggestion],
        participants: List[Participant]
    ) -> str:
        """Format ranked suggestions with each participant's local time."""
        if not suggestions:
            return ResponseFormatter.format_error(
                "No Suggestions",
                "Add participants to see suggested meeting times.",
            )

        lines = [
            "**🎯 Suggested Meeting Times**",
            ""
        ]

        for suggestion in suggestions:
            result = suggestion.entry.result
            header = f"{suggestion.hour:02d}:00 UTC - {ResponseFormatter.format_score(result.score, result.quality)}"
            if suggestion.rank == 1:
                lines.append(f"⭐ **Option {suggestion.rank} (Best Match):** {header}")
            else:
                lines.append(f"**Option {suggestion.rank}:** {header}")

            for participant in participants:
                if participant.id in result.excluded_participant_ids:
                    continue
                local = format_with_timezone(suggestion.candidate_instant, participant.timezone)
                lines.append(f"   • {participant.display_name}: {local}")
            lines.append("")

        return "\n".join(lines)

    @staticmethod
    def format_warnings(warnings: List[str]) -> Optional[str]:
        """Format engine warnings, or None when there are none."""
        if not warnings:
            return None
        return ResponseFormatter.format_section(
            "Partial Results",
            [f"• {warning}" for warning in warnings],
            icon="⚠️"
        )

    @staticmethod
    def format_error(title: str, message: str, suggestions: Optional[List[str]] = None) -> str:
        """Format an error message."""
        lines = [
            f"**❌ {title}**",
            "",
            message
        ]

        if suggestions:
            lines.append("")
            lines.append("**Suggestions:**")
            for suggestion in suggestions:
                lines.append(f"• {suggestion}")

        return "\n".join(lines)
