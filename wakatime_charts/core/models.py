from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from .enums import Theme
from .errors import ConfigurationError


@dataclass(frozen=True)
class StatDatum:
    """One ranked entry of the stats response.

    ``text`` is the human-readable duration as formatted by the caller
    (e.g. ``"3 hrs 12 mins"``); it is rendered verbatim.
    """

    name: str
    total_seconds: float
    text: str


# Option names used by chart config files, mapped to dataclass fields
_OPTION_ALIASES: dict[str, str] = {
    "svgWidth": "svg_width",
    "svgHeight": "svg_height",
    "margin": "margin",
    "padding": "padding",
    "namesWidth": "names_width",
    "durationsWidth": "durations_width",
}


@dataclass(frozen=True)
class Measurements:
    svg_width: float = 540
    svg_height: float = 175
    margin: float = 20
    padding: float = 10
    names_width: float = 100
    durations_width: float = 110

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> Measurements:
        """Build measurements from optional overrides.

        Accepts both ``svgWidth`` style option names and the field names.

        Raises:
            ConfigurationError: On unknown options or non-numeric or non-finite values
        """
        if not options:
            return cls()

        field_names = {f.name for f in fields(cls)}
        overrides: dict[str, float] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in field_names:
                raise ConfigurationError(f"Unknown measurement option: {key!r}")
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"Measurement {key!r} must be a number, got {value!r}"
                )
            if not math.isfinite(value):
                raise ConfigurationError(
                    f"Measurement {key!r} must be a finite number, got {value!r}"
                )
            overrides[name] = value
        return cls(**overrides)


@dataclass(frozen=True)
class RenderRequest:
    """Everything the composer needs for one theme variant.

    Attributes:
        data: Normalized entries. Must be pre-sorted by desired display rank;
            rows are drawn top to bottom in this order and never re-sorted.
        theme: Light or dark palette
        color_for_name: Resolves a bar fill color from an entry name
        header: Optional header text drawn above the stats
    """

    data: Sequence[StatDatum]
    theme: Theme
    color_for_name: Callable[[str], str]
    header: str = ""
