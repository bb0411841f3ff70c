"""Meeting Equity Planner - Streamlit page over the scheduling engine."""

from datetime import date, datetime, time
from typing import Any, Dict, List, Tuple

import pytz
import streamlit as st
from dotenv import load_dotenv

from services.holiday_service import NagerDateClient
from services.holiday_service_mock import HolidayServiceMock
from services.logging_config import setup_logging
from services.record_mapper import RecordMapper
from services.response_formatter import ResponseFormatter
from services.sample_data import sample_country_configs, sample_holidays, sample_participant_records
from services.scheduling_config import SchedulingConfig
from services.scheduling_engine import SchedulingEngine

# ============================================================================
# CONFIGURATION
# ============================================================================

load_dotenv()

config = SchedulingConfig.from_env()
setup_logging(config.log_level)

st.set_page_config(
    page_title="Meeting Equity Planner",
    page_icon="🌍",
    layout="wide"
)

# ============================================================================
# SERVICE INITIALIZATION
# ============================================================================

@st.cache_resource
def get_holiday_client() -> NagerDateClient:
    """One API client per server process so its year cache is shared."""
    return NagerDateClient(
        base_url=config.holiday_api_base_url,
        timeout=config.holiday_timeout_seconds
    )


def get_engine(use_live_holidays: bool, year: int) -> SchedulingEngine:
    """Build an engine wired to the live holiday API or the offline table."""
    if use_live_holidays:
        lookup = get_holiday_client().is_holiday
    else:
        lookup = HolidayServiceMock(sample_holidays(year)).is_holiday
    return SchedulingEngine(config=config, holiday_lookup=lookup)


@st.cache_data(show_spinner=False)
def load_records() -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    return sample_participant_records(), sample_country_configs()


# ============================================================================
# CACHED COMPUTATION
# ============================================================================

@st.cache_data(show_spinner="Scoring 24 hours...")
def compute_report(
    participant_ids: Tuple[str, ...],
    reference_date: date,
    suggestion_count: int,
    use_live_holidays: bool
):
    """Recompute only when the participant set, date or options change."""
    participant_rows, country_rows = load_records()
    mapper = RecordMapper()
    participants = [
        p for p in mapper.map_participants(participant_rows)
        if p.id in participant_ids
    ]
    country_profiles = mapper.map_country_profiles(country_rows)

    engine = get_engine(use_live_holidays, reference_date.year)
    report = engine.find_meeting_times(
        participants,
        reference_date,
        country_profiles=country_profiles,
        max_suggestions=suggestion_count
    )
    return participants, country_profiles, report


# ============================================================================
# PAGE
# ============================================================================

participant_rows, _ = load_records()
names_by_id = {row["id"]: f"{row['name']} ({row['timezone']})" for row in participant_rows}

with st.sidebar:
    st.header("🗓️ Meeting")
    selected_ids = st.multiselect(
        "Participants",
        options=list(names_by_id),
        default=["p_003", "p_005"],
        format_func=lambda pid: names_by_id[pid]
    )
    reference_date = st.date_input("Meeting date", value=date.today())
    suggestion_count = st.slider(
        "Suggestions",
        min_value=1,
        max_value=10,
        value=config.default_suggestion_count
    )
    use_live_holidays = st.toggle("Live holiday data (Nager.Date)", value=False)

st.title("🌍 Meeting Equity Planner")

participants, country_profiles, report = compute_report(
    tuple(sorted(selected_ids)),
    reference_date,
    suggestion_count,
    use_live_holidays
)

warnings_text = ResponseFormatter.format_warnings(report.warnings)
if warnings_text:
    st.warning(warnings_text)

st.subheader("24-hour heatmap (UTC)")
st.bar_chart(
    {"score": report.heatmap.scores},
    x_label="Hour (UTC)",
    y_label="Equity score"
)

left, right = st.columns(2)

with left:
    st.markdown(ResponseFormatter.format_suggestions(report.suggestions, participants))

with right:
    st.subheader("Check a specific time")
    hour = st.selectbox("Start (UTC)", options=list(range(24)), format_func=lambda h: f"{h:02d}:00")
    proposed = pytz.UTC.localize(datetime.combine(reference_date, time(hour, 0)))
    result = get_engine(use_live_holidays, reference_date.year).evaluate_time(
        participants,
        proposed,
        country_profiles=country_profiles
    )
    st.markdown(ResponseFormatter.format_equity_result(result))
