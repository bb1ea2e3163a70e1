"""Tests for settings and chart config loading."""
from __future__ import annotations

from pathlib import Path

import pytest

from wakatime_charts.core.config import (
    DEFAULT_BASE_NAME,
    ChartConfig,
    get_settings,
    load_chart_config,
)
from wakatime_charts.core.enums import StatsRange
from wakatime_charts.core.errors import ConfigurationError

ENV_KEYS = [
    "WAKA_API_KEY",
    "INPUT_WAKATIME_API_KEY",
    "WAKATIME_API_KEY",
    "WAKA_OUTPUT_DIR",
    "WAKA_COLORS_PATH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.api_key is None
    assert settings.output_dir == "generated"
    assert settings.colors_path is None


def test_settings_fallback_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """The GitHub Actions input name is accepted as a fallback."""
    monkeypatch.setenv("INPUT_WAKATIME_API_KEY", "waka_action")
    assert get_settings().api_key == "waka_action"

    monkeypatch.setenv("WAKA_API_KEY", "waka_primary")
    assert get_settings().api_key == "waka_primary"


def test_settings_from_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# local\nWAKA_API_KEY='from_file'\nWAKA_OUTPUT_DIR=out\nnot a pair\n",
        encoding="utf-8",
    )
    settings = get_settings()
    assert settings.api_key == "from_file"
    assert settings.output_dir == "out"


def test_environment_beats_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("WAKA_API_KEY=from_file\n", encoding="utf-8")
    monkeypatch.setenv("WAKA_API_KEY", "from_env")
    assert get_settings().api_key == "from_env"


def test_default_chart_config_is_optional() -> None:
    assert load_chart_config() == ChartConfig()


def test_default_chart_config_location(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "chart.yaml").write_text("title: Weekly\n", encoding="utf-8")

    assert load_chart_config().title == "Weekly"


def test_load_chart_config(tmp_path: Path) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text(
        "title: My week\n"
        "base_name: langs\n"
        "range: last_30_days\n"
        "measurements:\n"
        "  svgWidth: 600\n"
        "  namesWidth: 120\n",
        encoding="utf-8",
    )

    cfg = load_chart_config(path)

    assert cfg.title == "My week"
    assert cfg.base_name == "langs"
    assert cfg.stats_range is StatsRange.LAST_30_DAYS
    assert cfg.measurements.svg_width == 600
    assert cfg.measurements.names_width == 120
    assert cfg.measurements.margin == 20


def test_empty_chart_config_file(tmp_path: Path) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text("", encoding="utf-8")

    cfg = load_chart_config(path)

    assert cfg.base_name == DEFAULT_BASE_NAME
    assert cfg.stats_range is StatsRange.LAST_7_DAYS


def test_explicit_missing_config_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_chart_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- a\n- b\n", "must be a mapping"),
        ("measurements: 5\n", "'measurements' must be a mapping"),
        ("range: fortnight\n", "Unknown stats range"),
        ("measurements:\n  barWidth: 3\n", "Unknown measurement option"),
        ("title: [unclosed\n", "Failed to read chart config"),
        ("measurements:\n  svgWidth: .nan\n", "must be a finite number"),
        ("measurements:\n  margin: .inf\n", "must be a finite number"),
    ],
)
def test_invalid_chart_config(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "chart.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError, match=message):
        load_chart_config(path)


def test_chart_config_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "chart.yaml"
    path.write_bytes(b"title: \xff\xfe\n")
    with pytest.raises(ConfigurationError, match="Failed to read chart config"):
        load_chart_config(path)
