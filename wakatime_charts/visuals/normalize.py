"""Select the rows that make it onto the chart."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import StatDatum

# Entries under a minute are noise in a weekly summary
MIN_TOTAL_SECONDS = 60
MAX_ROWS = 5


def normalize_stats(data: Iterable[StatDatum]) -> list[StatDatum]:
    """Drop sub-minute entries and keep the first ``MAX_ROWS`` of the rest.

    Order is preserved. Input is expected to arrive ranked already (the
    stats API sorts languages by time spent); see ``rank_stats`` otherwise.
    """
    kept = [datum for datum in data if datum.total_seconds >= MIN_TOTAL_SECONDS]
    return kept[:MAX_ROWS]


def rank_stats(data: Iterable[StatDatum]) -> list[StatDatum]:
    """Return entries sorted by descending ``total_seconds`` (stable)."""
    return sorted(data, key=lambda datum: datum.total_seconds, reverse=True)
