from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .enums import StatsRange
from .errors import ConfigurationError
from .models import Measurements

DEFAULT_OUTPUT_DIR = "generated"
DEFAULT_BASE_NAME = "wakatime_weekly_language_stats"
DEFAULT_CHART_CONFIG = Path("configs/chart.yaml")


@dataclass
class Settings:
    api_key: str | None
    output_dir: str
    colors_path: str | None


@dataclass(frozen=True)
class ChartConfig:
    """Chart options loaded from a YAML file."""

    measurements: Measurements = field(default_factory=Measurements)
    title: str = ""
    base_name: str = DEFAULT_BASE_NAME
    stats_range: StatsRange = StatsRange.LAST_7_DAYS


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support WAKA_* keys if not in the environment.

    Existing os.environ values are never overwritten.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            env[k] = v
    except (OSError, UnicodeDecodeError):
        # Unreadable .env must not break CLI usage
        return {}
    return env


def _get_env(
    name: str,
    fallback_names: list[str] | None = None,
    env_file: dict[str, str] | None = None,
) -> str | None:
    # Priority: process env -> .env -> fallback names
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    if fallback_names:
        for fb in fallback_names:
            v = os.getenv(fb)
            if v:
                return v
            if env_file and fb in env_file:
                return env_file[fb]
    return None


def get_settings() -> Settings:
    env_file = _read_env_file()
    # INPUT_WAKATIME_API_KEY is how GitHub Actions passes action inputs
    api_key = _get_env(
        "WAKA_API_KEY", ["INPUT_WAKATIME_API_KEY", "WAKATIME_API_KEY"], env_file
    )
    output_dir = _get_env("WAKA_OUTPUT_DIR", None, env_file) or DEFAULT_OUTPUT_DIR
    colors_path = _get_env("WAKA_COLORS_PATH", None, env_file)
    return Settings(api_key=api_key, output_dir=output_dir, colors_path=colors_path)


def load_chart_config(path: Path | None = None) -> ChartConfig:
    """Load chart options from YAML.

    An explicit path must exist; the default ``configs/chart.yaml`` is optional.

    Raises:
        ConfigurationError: If the file is missing, malformed or has bad values
    """
    cfg_path = path or DEFAULT_CHART_CONFIG
    if not cfg_path.exists():
        if path is not None:
            raise ConfigurationError(f"Chart config not found: {cfg_path}")
        return ChartConfig()

    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read chart config {cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Chart config {cfg_path} must be a mapping")

    measurements = data.get("measurements") or {}
    if not isinstance(measurements, dict):
        raise ConfigurationError("'measurements' must be a mapping of options")

    range_value = data.get("range")
    try:
        stats_range = StatsRange(range_value) if range_value else StatsRange.LAST_7_DAYS
    except ValueError as e:
        raise ConfigurationError(f"Unknown stats range: {range_value!r}") from e

    return ChartConfig(
        measurements=Measurements.from_mapping(measurements),
        title=str(data.get("title") or ""),
        base_name=str(data.get("base_name") or DEFAULT_BASE_NAME),
        stats_range=stats_range,
    )
