from __future__ import annotations

from enum import Enum


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_flag(cls, is_dark: bool) -> Theme:
        return cls.DARK if is_dark else cls.LIGHT


class StatsRange(str, Enum):
    LAST_7_DAYS = "last_7_days"
    LAST_30_DAYS = "last_30_days"
    LAST_6_MONTHS = "last_6_months"
    LAST_YEAR = "last_year"
    ALL_TIME = "all_time"
