"""WakaTime stats API client."""

from __future__ import annotations

from typing import Any

import requests

from ..base import BaseStatsSource
from ...core.enums import StatsRange
from ...core.errors import StatsFetchError
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class WakaTimeAdapter(BaseStatsSource):
    """Adapter for the WakaTime v1 stats endpoint."""

    BASE_URL = "https://wakatime.com/api/v1"

    def __init__(self, api_key: str, timeout: int = 30):
        """Initialize WakaTime adapter with API key and optional timeout.

        Args:
            api_key: WakaTime secret API key
            timeout: Request timeout in seconds (default: 30)
        """
        super().__init__(api_key)
        self.timeout = timeout

    def _redact(self, text: str) -> str:
        """Strip the API key from text that may echo the request URL."""
        if self.api_key:
            text = text.replace(self.api_key, "***REDACTED***")
        return text[:500]

    def fetch_stats(self, *, stats_range: StatsRange = StatsRange.LAST_7_DAYS) -> dict[str, Any]:
        """Fetch stats from the WakaTime API.

        See BaseStatsSource.fetch_stats for full documentation.
        """
        url = f"{self.BASE_URL}/users/current/stats/{stats_range.value}"
        params = {"api_key": self.api_key}

        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise StatsFetchError(f"WakaTime request failed: {self._redact(str(e))}") from e

        if resp.status_code != 200:
            raise StatsFetchError(
                f"WakaTime API error {resp.status_code}: {self._redact(resp.text)}"
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise StatsFetchError("WakaTime API returned invalid JSON") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise StatsFetchError("WakaTime API response has no 'data' object")

        logger.info(
            "Fetched WakaTime stats",
            extra={"range": stats_range.value, "languages": len(data.get("languages") or [])},
        )
        return data
