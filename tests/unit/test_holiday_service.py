from datetime import date

import httpx
import pytest

from models.entities import Holiday
from services.holiday_service import HolidayGate, HolidayLookupFailure, NagerDateClient
from services.holiday_service_mock import HolidayServiceMock

GB_2025 = [
    {
        "date": "2025-12-25",
        "localName": "Christmas Day",
        "name": "Christmas Day",
        "countryCode": "GB",
        "fixed": False,
        "global": True,
        "counties": None,
        "types": ["Public"],
    },
    {
        "date": "2025-01-01",
        "localName": "New Year's Day",
        "name": "New Year's Day",
        "countryCode": "GB",
        "fixed": False,
        "global": True,
        "counties": None,
        "types": ["Public"],
    },
]


def make_client(handler):
    return NagerDateClient(
        base_url="https://holidays.test/api/v3",
        timeout=2.0,
        transport=httpx.MockTransport(handler),
    )


def test_fetch_holidays_maps_and_sorts_records():
    requested = []

    def handler(request):
        requested.append(request.url.path)
        return httpx.Response(200, json=GB_2025)

    client = make_client(handler)
    holidays = client.fetch_holidays("gb", 2025)

    assert requested == ["/api/v3/PublicHolidays/2025/GB"]
    assert [h.date for h in holidays] == [date(2025, 1, 1), date(2025, 12, 25)]
    assert holidays[1].local_name == "Christmas Day"
    assert holidays[1].country_code == "GB"


def test_is_holiday_uses_year_cache():
    calls = {"count": 0}

    def handler(request):
        calls["count"] += 1
        return httpx.Response(200, json=GB_2025)

    client = make_client(handler)

    assert client.is_holiday(date(2025, 12, 25), "GB") is True
    assert client.is_holiday(date(2025, 12, 24), "GB") is False
    assert client.get_holiday(date(2025, 1, 1), "GB").name == "New Year's Day"
    assert calls["count"] == 1

    client.clear_cache()
    client.is_holiday(date(2025, 12, 25), "GB")
    assert calls["count"] == 2


def test_unsupported_country_is_a_lookup_failure():
    client = make_client(lambda request: httpx.Response(404))

    with pytest.raises(HolidayLookupFailure) as exc_info:
        client.is_holiday(date(2025, 1, 1), "XK")

    assert exc_info.value.country_code == "XK"


def test_timeout_is_a_lookup_failure():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)

    with pytest.raises(HolidayLookupFailure, match="timed out"):
        client.fetch_holidays("GB", 2025)


def test_server_error_and_bad_payload_are_lookup_failures():
    with pytest.raises(HolidayLookupFailure):
        make_client(lambda request: httpx.Response(503)).fetch_holidays("GB", 2025)
    with pytest.raises(HolidayLookupFailure):
        make_client(lambda request: httpx.Response(200, text="<html>")).fetch_holidays("GB", 2025)
    with pytest.raises(HolidayLookupFailure):
        make_client(lambda request: httpx.Response(200, json={"error": 1})).fetch_holidays("GB", 2025)
    with pytest.raises(HolidayLookupFailure):
        make_client(lambda request: httpx.Response(200, json=[{"name": "x"}])).fetch_holidays("GB", 2025)


def test_invalid_arguments_fail_without_request():
    def handler(request):
        raise AssertionError("no request expected")

    client = make_client(handler)

    with pytest.raises(HolidayLookupFailure):
        client.fetch_holidays("GBR", 2025)
    with pytest.raises(HolidayLookupFailure):
        client.fetch_holidays("GB", 1999)


def test_upcoming_holidays():
    holidays = [
        Holiday(date(2025, 12, 25), "Christmas Day", "Christmas Day", "GB"),
        Holiday(date(2025, 1, 1), "New Year's Day", "New Year's Day", "GB"),
        Holiday(date(2025, 8, 25), "Summer Bank Holiday", "Summer Bank Holiday", "GB"),
    ]

    upcoming = NagerDateClient.get_upcoming_holidays(holidays, date(2025, 6, 1), count=1)

    assert [h.name for h in upcoming] == ["Summer Bank Holiday"]


def test_gate_deduplicates_by_country_and_date():
    mock = HolidayServiceMock([Holiday(date(2025, 12, 25), "Christmas Day", "Christmas Day", "GB")])
    gate = HolidayGate(mock.is_holiday)

    assert gate.is_holiday(date(2025, 12, 25), "GB") == "yes"
    assert gate.is_holiday(date(2025, 12, 25), "gb") == "yes"
    assert gate.is_holiday(date(2025, 12, 26), "GB") == "no"
    assert mock.calls == [(date(2025, 12, 25), "GB"), (date(2025, 12, 26), "GB")]
    assert gate.has_unknown_holiday_data is False


def test_gate_failure_is_sticky_and_not_retried():
    mock = HolidayServiceMock(failing_countries=["US"])
    gate = HolidayGate(mock.is_holiday)

    assert gate.is_holiday(date(2025, 7, 4), "US") == "unknown"
    assert gate.is_holiday(date(2025, 7, 5), "US") == "unknown"
    assert len(mock.calls) == 1
    assert gate.has_unknown_holiday_data is True
    assert gate.failed_countries == ["US"]


def test_gate_without_lookup_or_country():
    assert HolidayGate().is_holiday(date(2025, 12, 25), "GB") == "no"

    mock = HolidayServiceMock()
    gate = HolidayGate(mock.is_holiday)
    assert gate.is_holiday(date(2025, 12, 25), None) == "no"
    assert mock.calls == []


def test_gate_keeps_answers_given_before_a_failure():
    mock = HolidayServiceMock(
        [Holiday(date(2025, 1, 14), "Company Day", "Company Day", "US")],
        failing_dates=[date(2025, 1, 15)],
    )
    gate = HolidayGate(mock.is_holiday)

    assert gate.is_holiday(date(2025, 1, 14), "US") == "yes"
    assert gate.is_holiday(date(2025, 1, 15), "US") == "unknown"
    assert gate.is_holiday(date(2025, 1, 14), "US") == "yes"
    assert gate.is_holiday(date(2025, 1, 16), "US") == "unknown"
    assert mock.calls == [(date(2025, 1, 14), "US"), (date(2025, 1, 15), "US")]
    assert gate.failed_countries == ["US"]
