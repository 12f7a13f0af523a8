"""Aviation Weather (aviationweather.gov) API source for the latest METAR of a station."""

import logging
import re
from datetime import datetime
from typing import Optional

import requests
from dateutil import parser as date_parser

from metar_decoder import config
from metar_decoder.exceptions import InvalidStationError, MetarFetchError
from metar_decoder.models import MetarRecord

logger = logging.getLogger(__name__)


class AvWxMetarSource:
    """
    Fetch the latest raw METAR for an airport from the aviationweather.gov API.

    Example:
        source = AvWxMetarSource()
        record = source.fetch_latest("KBOS")
        print(record.raw_text)
    """

    SOURCE = "avwx"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: int = config.REQUEST_TIMEOUT,
        base_url: str = config.API_URL,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            base_url: API root, without trailing slash.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._session.headers.setdefault("User-Agent", config.USER_AGENT)

    @staticmethod
    def normalize_station(icao: str) -> str:
        """
        Upper-case and validate a station identifier.

        Raises:
            InvalidStationError: If the identifier is not four letters
        """
        code = (icao or "").strip().upper()
        if not re.match(config.ICAO_PATTERN, code):
            raise InvalidStationError(f"Invalid ICAO code: {icao!r}")
        return code

    def fetch_latest(self, icao: str) -> MetarRecord:
        """
        Fetch the most recent METAR for a station.

        Args:
            icao: Four-letter ICAO code, any case.

        Returns:
            MetarRecord with the raw report text

        Raises:
            InvalidStationError: If the identifier is not four letters
            MetarFetchError: If the request fails or returns no report
        """
        code = self.normalize_station(icao)
        records = self._fetch_json("metar", {"ids": code, "format": "json"})
        if not records:
            logger.warning("No METAR available for %s", code)
            raise MetarFetchError(f"No METAR available for {code}")

        latest = records[0]
        raw_text = latest.get("rawOb") if isinstance(latest, dict) else None
        if not raw_text:
            logger.warning("METAR record for %s has no raw text", code)
            raise MetarFetchError(f"METAR record for {code} has no raw text")

        return MetarRecord(
            icao=latest.get("icaoId") or code,
            raw_text=raw_text.strip(),
            report_time=self._parse_time(latest.get("reportTime")),
            source=self.SOURCE,
        )

    def _fetch_json(self, endpoint: str, params: dict) -> list:
        """
        Make HTTP GET request and return the decoded JSON list.

        Handles 204 (no data) by returning an empty list.
        """
        url = f"{self._base_url}/{endpoint}"
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            if response.status_code == 204:
                return []
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("AvWx fetch failed for %s: %s", endpoint, e)
            raise MetarFetchError(f"Failed to fetch METAR: {e}") from e
        if not isinstance(data, list):
            raise MetarFetchError(f"Unexpected response from {endpoint}: {type(data).__name__}")
        return data

    @staticmethod
    def _parse_time(value) -> Optional[datetime]:
        if not value:
            return None
        try:
            return date_parser.parse(str(value))
        except (ValueError, OverflowError):
            logger.debug("Unparseable report time %r", value)
            return None
