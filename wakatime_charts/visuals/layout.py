from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from ..core.errors import ConfigurationError
from ..core.models import Measurements


@dataclass(frozen=True)
class Geometry:
    """Column and region positions derived from ``Measurements``."""

    svg_width: float
    svg_height: float
    margin: float
    padding: float
    names_width: float
    durations_width: float
    content_width: float
    content_height: float
    names_x: float
    durations_x: float
    chart_x: float
    chart_width: float
    stats_y: float
    stats_height: float


def compute_layout(measurements: Measurements) -> Geometry:
    """Derive chart geometry.

    Columns run left to right: names, durations, bars. The bar column takes
    whatever width remains inside the margins.

    Raises:
        ConfigurationError: If any measurement is negative or not finite,
            or the derived content height or chart width would be negative
    """
    for name, value in asdict(measurements).items():
        if not math.isfinite(value):
            raise ConfigurationError(f"Measurement {name} must be finite, got {value}")
        if value < 0:
            raise ConfigurationError(f"Measurement {name} must not be negative, got {value}")

    m = measurements
    content_width = m.svg_width - 2 * m.margin
    content_height = m.svg_height - 2 * m.margin

    names_x = m.margin
    durations_x = names_x + m.padding + m.names_width
    chart_x = durations_x + m.padding + m.durations_width
    chart_width = content_width - chart_x + m.margin

    if content_height < 0:
        raise ConfigurationError(
            f"svg_height {m.svg_height} is smaller than twice the margin {m.margin}"
        )
    if chart_width < 0:
        raise ConfigurationError(
            f"Columns do not fit: chart width would be {chart_width} "
            f"(svg_width={m.svg_width}, names_width={m.names_width}, "
            f"durations_width={m.durations_width})"
        )

    # Header and stats share the same vertical origin
    stats_y = m.margin

    return Geometry(
        svg_width=m.svg_width,
        svg_height=m.svg_height,
        margin=m.margin,
        padding=m.padding,
        names_width=m.names_width,
        durations_width=m.durations_width,
        content_width=content_width,
        content_height=content_height,
        names_x=names_x,
        durations_x=durations_x,
        chart_x=chart_x,
        chart_width=chart_width,
        stats_y=stats_y,
        stats_height=content_height,
    )
