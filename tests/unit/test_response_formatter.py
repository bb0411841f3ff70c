from datetime import date

from services.response_formatter import ResponseFormatter

WINTER_WEDNESDAY = date(2025, 1, 15)


def test_format_suggestions_lists_local_times(engine, new_york, london):
    report = engine.find_meeting_times([new_york], WINTER_WEDNESDAY, max_suggestions=2)

    text = ResponseFormatter.format_suggestions(report.suggestions, [new_york, london])

    assert "⭐ **Option 1 (Best Match):** 14:00 UTC" in text
    assert "Sarah: 9:00 AM EST (America/New_York)" in text
    assert "**Option 2:**" in text


def test_format_suggestions_without_results():
    assert "No Suggestions" in ResponseFormatter.format_suggestions([], [])


def test_format_equity_result_marks_holidays(engine, london):
    report = engine.find_meeting_times([london], WINTER_WEDNESDAY)

    text = ResponseFormatter.format_equity_result(report.heatmap.entries[10].result)

    assert "0/100 (poor)" in text
    assert "🏖️ **Emma**" in text
    assert "Public holiday" in text


def test_format_warnings():
    assert ResponseFormatter.format_warnings([]) is None
    assert "• Participant x excluded" in ResponseFormatter.format_warnings(["Participant x excluded"])
