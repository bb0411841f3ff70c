"""Public holiday lookup: Nager.Date API client and the per-run holiday gate."""

import os
from datetime import date
from typing import Callable, Optional, Dict, List

import httpx

from models.entities import Holiday, HolidayStatus
from services.logging_config import get_logger
from services.scheduling_config import DEFAULT_HOLIDAY_API_BASE_URL

logger = get_logger(__name__)

# (local_date, country_code) -> is holiday. Raising means "unknown". The gate
# calls it inline, so the callable must bound its own I/O time.
HolidayLookup = Callable[[date, str], bool]


class HolidayLookupFailure(Exception):
    """Raised by a holiday lookup that could not produce an answer."""

    def __init__(self, country_code: str, message: str):
        super().__init__(f"Holiday lookup failed for {country_code}: {message}")
        self.country_code = country_code


class NagerDateClient:
    """Client for the Nager.Date public holiday API."""

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the holiday API client.

        Args:
            base_url: API root (defaults to env var HOLIDAY_API_BASE_URL)
            timeout: httpx timeout in seconds for each connect, read and write
                (defaults to env var HOLIDAY_LOOKUP_TIMEOUT)
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.base_url = (base_url or os.getenv(
            "HOLIDAY_API_BASE_URL",
            DEFAULT_HOLIDAY_API_BASE_URL
        )).rstrip("/")
        self.timeout = timeout or float(os.getenv("HOLIDAY_LOOKUP_TIMEOUT", "3.0"))
        self.transport = transport

        # Year lists per (country_code, year), owned by whoever holds the client
        self._holiday_cache: Dict[tuple[str, int], List[Holiday]] = {}

    def clear_cache(self):
        """Clear cached holiday lists."""
        self._holiday_cache.clear()

    def _get_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def _map_holiday(self, data: Dict, country_code: str) -> Holiday:
        return Holiday(
            date=date.fromisoformat(data["date"]),
            name=data.get("name", ""),
            local_name=data.get("localName", "") or data.get("name", ""),
            country_code=data.get("countryCode", country_code),
            is_global=bool(data.get("global", True))
        )

    def fetch_holidays(self, country_code: str, year: int) -> List[Holiday]:
        """
        Fetch public holidays for a country and year.

        Args:
            country_code: ISO 3166-1 alpha-2 code
            year: Calendar year (2000-2100)

        Returns:
            List of holidays, sorted by date

        Raises:
            HolidayLookupFailure: on timeout, network error, unsupported
                country (404) or an unreadable response
        """
        if not country_code or len(country_code) != 2:
            raise HolidayLookupFailure(str(country_code), "ISO 3166-1 alpha-2 country code required")
        if not 2000 <= year <= 2100:
            raise HolidayLookupFailure(country_code, f"year out of range: {year}")

        code = country_code.upper()
        cache_key = (code, year)
        if cache_key in self._holiday_cache:
            logger.debug("Holiday list served from cache", country_code=code, year=year)
            return self._holiday_cache[cache_key]

        url = f"{self.base_url}/PublicHolidays/{year}/{code}"

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url, headers=self._get_headers())
                if response.status_code == 404:
                    raise HolidayLookupFailure(code, "country not supported")
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise HolidayLookupFailure(code, f"timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise HolidayLookupFailure(code, f"HTTP error: {e}") from e
        except ValueError as e:
            raise HolidayLookupFailure(code, "invalid JSON in response") from e

        if not isinstance(payload, list):
            raise HolidayLookupFailure(code, "unexpected response shape")

        try:
            holidays = sorted(
                (self._map_holiday(item, code) for item in payload),
                key=lambda h: h.date
            )
        except (KeyError, TypeError, ValueError) as e:
            raise HolidayLookupFailure(code, f"malformed holiday record: {e}") from e

        self._holiday_cache[cache_key] = holidays
        return holidays

    def get_holiday(self, on_date: date, country_code: str) -> Optional[Holiday]:
        """Return the holiday falling on a date, or None."""
        for holiday in self.fetch_holidays(country_code, on_date.year):
            if holiday.date == on_date:
                return holiday
        return None

    def is_holiday(self, on_date: date, country_code: str) -> bool:
        """Holiday lookup contract: True/False, or HolidayLookupFailure."""
        return self.get_holiday(on_date, country_code) is not None

    @staticmethod
    def get_upcoming_holidays(
        holidays: List[Holiday],
        from_date: date,
        count: int = 5
    ) -> List[Holiday]:
        """Holidays strictly after from_date, earliest first."""
        upcoming = sorted((h for h in holidays if h.date > from_date), key=lambda h: h.date)
        return upcoming[:count]


class HolidayGate:
    """
    Holiday awareness for one computation run.

    Lookups are memoized per (country_code, date), and a country whose
    lookup failed once is not asked again in the same run; answers it
    already gave for other dates stay valid. Failures resolve to "unknown"
    and are never raised.

    The gate has no clock of its own. Lookups must time out by themselves:
    NagerDateClient does so through its httpx timeout, which bounds each
    connect, read and write rather than the request as a whole.
    """

    def __init__(self, lookup: Optional[HolidayLookup] = None):
        """Initialize with a (date, country_code) -> bool callable, or None to disable."""
        self.lookup = lookup
        self._results: Dict[tuple[str, date], HolidayStatus] = {}
        self._failed_countries: set[str] = set()

    @property
    def has_unknown_holiday_data(self) -> bool:
        return bool(self._failed_countries)

    @property
    def failed_countries(self) -> list[str]:
        return sorted(self._failed_countries)

    def is_holiday(self, local_date: date, country_code: Optional[str]) -> HolidayStatus:
        """
        Check a participant's local date against their country's holidays.

        Participants without a country code, or runs without a lookup,
        are treated as not on holiday.
        """
        if self.lookup is None or not country_code:
            return "no"

        code = country_code.upper()
        key = (code, local_date)
        if key in self._results:
            return self._results[key]

        if code in self._failed_countries:
            return "unknown"

        try:
            status: HolidayStatus = "yes" if self.lookup(local_date, code) else "no"
        except Exception as e:
            logger.warning(
                "Holiday lookup failed",
                country_code=code,
                date=local_date.isoformat(),
                error=str(e)
            )
            self._failed_countries.add(code)
            return "unknown"

        self._results[key] = status
        return status
