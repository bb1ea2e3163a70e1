"""Chart composition package for language stats cards.

This package turns a ranked list of languages into a self-contained SVG bar
chart. It is the computational core of wakatime-charts: everything in here is
pure and deterministic, with no network or filesystem access.

Pipeline:
    1. normalize_stats: keep entries of at least a minute, first five only
    2. compute_layout: derive column positions from Measurements
    3. resolve_palette: map the light/dark theme to concrete colors
    4. SvgComposer.compose: build the element tree (card, labels, bars, style)
    5. serialize: render the tree to markup

Usage:
    from wakatime_charts.core.enums import Theme
    from wakatime_charts.core.models import Measurements, RenderRequest
    from wakatime_charts.visuals import SvgComposer, compute_layout, normalize_stats, serialize

    request = RenderRequest(
        data=normalize_stats(stats),
        theme=Theme.DARK,
        color_for_name=colors.color_for,
    )
    markup = serialize(SvgComposer().compose(request, compute_layout(Measurements())))

Architecture Notes:
    - Bars and labels are laid out in the order given; callers rank the data
    - The style block is rendered from a Jinja2 template in ./templates
    - Identical inputs produce byte-identical markup
"""

from __future__ import annotations

from .composer import SvgComposer
from .layout import Geometry, compute_layout
from .normalize import normalize_stats, rank_stats
from .scales import BandScale, LinearScale
from .svg import Node, serialize
from .themes import Palette, resolve_palette

__all__ = [
    "BandScale",
    "Geometry",
    "LinearScale",
    "Node",
    "Palette",
    "SvgComposer",
    "compute_layout",
    "normalize_stats",
    "rank_stats",
    "resolve_palette",
    "serialize",
]
