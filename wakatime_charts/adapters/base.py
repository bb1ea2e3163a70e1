"""Base interface for coding-stats sources."""

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..core.enums import StatsRange
from ..core.models import StatDatum


class BaseStatsSource(ABC):
    """Abstract base class for stats API clients.

    Attributes:
        BASE_URL: API root (must be set by subclass)
        api_key: Key used to authenticate requests
    """

    BASE_URL: str = ""  # Must be overridden by subclass

    def __init__(self, api_key: str):
        """Initialize source with an API key.

        Args:
            api_key: Service-specific secret API key
        """
        self.api_key = api_key
        if not self.BASE_URL:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define BASE_URL class attribute"
            )

    @abstractmethod
    def fetch_stats(self, *, stats_range: StatsRange = StatsRange.LAST_7_DAYS) -> dict[str, Any]:
        """Fetch the stats mapping for the current user.

        Returns:
            Mapping with at least a ``languages`` list of
            ``{name, total_seconds, text}`` entries, ranked by time spent

        Raises:
            StatsFetchError: On API or transport errors (no retries here)
        """
        pass


def _to_float(value: Any, default: float = 0.0) -> float:
    """Safely convert value to a finite float, returning default on failure."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def parse_stat_data(payload: Mapping[str, Any]) -> list[StatDatum]:
    """Convert a stats payload into ``StatDatum`` rows, keeping API order.

    Accepts the bare stats mapping or the ``{"data": {...}}`` response
    envelope. Entries without a name are skipped; a missing or non-finite
    duration counts as zero and a missing ``text`` as an empty label.
    """
    data = payload.get("data", payload)
    if not isinstance(data, Mapping):
        return []
    languages = data.get("languages")
    if not isinstance(languages, list):
        return []

    rows: list[StatDatum] = []
    for entry in languages:
        if not isinstance(entry, Mapping) or not entry.get("name"):
            continue
        rows.append(
            StatDatum(
                name=str(entry["name"]),
                total_seconds=_to_float(entry.get("total_seconds")),
                text=str(entry.get("text") or ""),
            )
        )
    return rows
