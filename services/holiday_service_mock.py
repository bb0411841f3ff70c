"""Mock holiday service backed by an in-memory holiday table."""

from datetime import date
from typing import Iterable, Optional

from models.entities import Holiday
from services.holiday_service import HolidayLookupFailure


class HolidayServiceMock:
    """Answers holiday lookups from fixed data and records every call."""

    def __init__(
        self,
        holidays: Optional[Iterable[Holiday]] = None,
        failing_countries: Optional[Iterable[str]] = None,
        failing_dates: Optional[Iterable[date]] = None
    ):
        """
        Initialize the mock.

        Args:
            holidays: Holidays to report
            failing_countries: Country codes whose lookups raise HolidayLookupFailure
            failing_dates: Dates whose lookups raise HolidayLookupFailure in any country
        """
        self._holidays: dict[tuple[str, date], Holiday] = {}
        for holiday in holidays or []:
            self.add_holiday(holiday)
        self.failing_countries = {c.upper() for c in failing_countries or []}
        self.failing_dates = set(failing_dates or [])
        self.calls: list[tuple[date, str]] = []

    def add_holiday(self, holiday: Holiday):
        self._holidays[(holiday.country_code.upper(), holiday.date)] = holiday

    def get_holiday(self, on_date: date, country_code: str) -> Optional[Holiday]:
        return self._holidays.get((country_code.upper(), on_date))

    def is_holiday(self, on_date: date, country_code: str) -> bool:
        """Holiday lookup contract used by HolidayGate."""
        self.calls.append((on_date, country_code))
        if country_code.upper() in self.failing_countries or on_date in self.failing_dates:
            raise HolidayLookupFailure(country_code, "simulated outage")
        return self.get_holiday(on_date, country_code) is not None
