"""Tests for the per-theme chart renderer."""
from __future__ import annotations

from pathlib import Path

import pytest

from wakatime_charts.core.colors import ColorLookup
from wakatime_charts.core.enums import Theme
from wakatime_charts.core.errors import ConfigurationError
from wakatime_charts.core.models import Measurements, StatDatum
from wakatime_charts.render.renderer import ChartRenderer, chart_filename, write_text

STATS = [
    StatDatum(name="Python", total_seconds=36000, text="10 hrs"),
    StatDatum(name="TypeScript", total_seconds=18000, text="5 hrs"),
    StatDatum(name="Markdown", total_seconds=1200, text="20 mins"),
    StatDatum(name="JSON", total_seconds=30, text="30 secs"),
    StatDatum(name="YAML", total_seconds=600, text="10 mins"),
    StatDatum(name="Bash", total_seconds=300, text="5 mins"),
    StatDatum(name="Docker", total_seconds=120, text="2 mins"),
]

COLORS = ColorLookup({"Python": {"color": "#3572A5"}})


def test_chart_filename() -> None:
    assert chart_filename("stats", Theme.LIGHT) == "stats.svg"
    assert chart_filename("stats", Theme.DARK) == "stats_dark.svg"


def test_render_svg_filters_and_truncates() -> None:
    """Only the first five entries of at least a minute are drawn."""
    markup = ChartRenderer(COLORS).render_svg(STATS, Theme.LIGHT)

    assert markup.startswith("<svg ")
    assert markup.count('class="durationBar"') == 5
    assert ">JSON<" not in markup
    assert ">Docker<" not in markup
    assert ">Bash<" in markup


def test_render_svg_is_byte_identical() -> None:
    renderer = ChartRenderer(COLORS)
    assert renderer.render_svg(STATS, Theme.DARK) == renderer.render_svg(STATS, Theme.DARK)
    assert ChartRenderer(COLORS).render_svg(STATS, Theme.DARK) == renderer.render_svg(STATS, Theme.DARK)


def test_render_svg_empty_stats() -> None:
    markup = ChartRenderer(COLORS).render_svg([], Theme.LIGHT)
    assert "durationBar\"" not in markup
    assert markup.endswith("</svg>")


def test_invalid_measurements_fail_fast() -> None:
    with pytest.raises(ConfigurationError):
        ChartRenderer(COLORS, measurements=Measurements(svg_width=100))


def test_write_variants(tmp_path: Path) -> None:
    """Both themes are written with the dark suffix on the second file."""
    out_dir = tmp_path / "generated"

    paths = ChartRenderer(COLORS).write_variants(STATS, out_dir, base_name="langs")

    assert paths == [out_dir / "langs.svg", out_dir / "langs_dark.svg"]
    light = paths[0].read_text(encoding="utf-8")
    dark = paths[1].read_text(encoding="utf-8")
    assert "#FFFFFF" in light and "#22272e" not in light
    assert "#22272e" in dark
    assert 'fill="#3572A5"' in dark


def test_write_variants_header(tmp_path: Path) -> None:
    (path,) = ChartRenderer(COLORS).write_variants(
        STATS, tmp_path, header="Last 7 days", themes=[Theme.DARK]
    )
    assert path.name == "wakatime_weekly_language_stats_dark.svg"
    assert ">Last 7 days</text>" in path.read_text(encoding="utf-8")


def test_failed_render_writes_nothing(tmp_path: Path) -> None:
    """A composer error aborts before any file for that variant exists."""

    class BrokenComposer:
        def compose(self, request, geometry):
            raise ConfigurationError("boom")

    renderer = ChartRenderer(COLORS, composer=BrokenComposer())

    with pytest.raises(ConfigurationError, match="boom"):
        renderer.write_variants(STATS, tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_write_text_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "chart.svg"
    write_text(str(target), "<svg/>")
    assert target.read_text(encoding="utf-8") == "<svg/>"
