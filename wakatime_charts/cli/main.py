from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from .. import __version__
from ..adapters.base import parse_stat_data
from ..core.colors import load_color_table
from ..core.config import ChartConfig, get_settings, load_chart_config
from ..core.enums import StatsRange
from ..core.errors import ChartError
from ..core.logging_config import get_logger, setup_logging
from ..core.models import StatDatum
from ..render.renderer import ChartRenderer
from ..visuals.normalize import rank_stats
from . import output as cli_output

app = typer.Typer(help="Render WakaTime language stats as SVG charts")

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Configure global CLI options."""
    setup_logging(json_output=json_logs, log_level=log_level)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


def _load_config(config: Path | None) -> ChartConfig:
    try:
        return load_chart_config(config)
    except ChartError as e:
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e


def _write_charts(
    stats: list[StatDatum],
    *,
    chart_config: ChartConfig,
    output_dir: Path | None,
    base_name: str | None,
    colors: Path | None,
    title: str | None,
    sort: bool,
) -> None:
    settings = get_settings()
    target_dir = output_dir or Path(settings.output_dir)
    colors_path = colors or settings.colors_path

    if sort:
        stats = rank_stats(stats)

    try:
        color_table = load_color_table(colors_path)
        renderer = ChartRenderer(color_table, measurements=chart_config.measurements)
        paths = renderer.write_variants(
            stats,
            target_dir,
            base_name=base_name or chart_config.base_name,
            header=title if title is not None else chart_config.title,
        )
    except ChartError as e:
        logger.exception("Chart generation failed", extra={"output_dir": str(target_dir)})
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    cli_output.success(f"Wrote {len(paths)} charts to {target_dir}")
    for path in paths:
        cli_output.plain(f"  {path}")


@app.command()
def generate(
    api_key: str | None = typer.Option(
        None, help="WakaTime secret API key (defaults to WAKA_API_KEY / INPUT_WAKATIME_API_KEY)"
    ),  # noqa: B008
    stats_range: StatsRange | None = typer.Option(  # noqa: B008
        None,
        "--range",
        case_sensitive=False,
        help="Stats window (overrides config file; default last_7_days)",
    ),
    output_dir: Path | None = typer.Option(None, help="Directory for generated SVG files"),  # noqa: B008
    base_name: str | None = typer.Option(None, help="Base file name for the charts"),  # noqa: B008
    colors: Path | None = typer.Option(None, help="JSON color table (name -> {color})"),  # noqa: B008
    config: Path | None = typer.Option(None, help="Chart YAML config (default configs/chart.yaml)"),  # noqa: B008
    title: str | None = typer.Option(None, help="Header text drawn above the stats"),  # noqa: B008
    sort: bool = typer.Option(
        False, "--sort/--no-sort", help="Rank languages by time spent before charting"
    ),  # noqa: B008
) -> None:
    """Fetch stats from the WakaTime API and write light and dark charts."""
    from ..adapters.wakatime.adapter import WakaTimeAdapter

    chart_config = _load_config(config)
    key = api_key or get_settings().api_key
    if not key:
        cli_output.error("No WakaTime API key provided. Set WAKA_API_KEY or pass --api-key.")
        raise typer.Exit(code=1)

    effective_range = stats_range or chart_config.stats_range
    try:
        payload = WakaTimeAdapter(key).fetch_stats(stats_range=effective_range)
    except ChartError as e:
        logger.exception("Stats fetch failed", extra={"range": effective_range.value})
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    _write_charts(
        parse_stat_data(payload),
        chart_config=chart_config,
        output_dir=output_dir,
        base_name=base_name,
        colors=colors,
        title=title,
        sort=sort,
    )


@app.command()
def render(
    input_file: Path = typer.Argument(..., help="JSON stats file (API response or its 'data' object)"),  # noqa: B008
    output_dir: Path | None = typer.Option(None, help="Directory for generated SVG files"),  # noqa: B008
    base_name: str | None = typer.Option(None, help="Base file name for the charts"),  # noqa: B008
    colors: Path | None = typer.Option(None, help="JSON color table (name -> {color})"),  # noqa: B008
    config: Path | None = typer.Option(None, help="Chart YAML config (default configs/chart.yaml)"),  # noqa: B008
    title: str | None = typer.Option(None, help="Header text drawn above the stats"),  # noqa: B008
    sort: bool = typer.Option(
        False, "--sort/--no-sort", help="Rank languages by time spent before charting"
    ),  # noqa: B008
) -> None:
    """Write light and dark charts from a saved stats file."""
    chart_config = _load_config(config)
    try:
        payload: Any = json.loads(input_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        cli_output.error(f"Failed to read stats file {input_file}: {e}")
        raise typer.Exit(code=1) from e

    if not isinstance(payload, dict):
        cli_output.error(f"Stats file {input_file} must contain a JSON object")
        raise typer.Exit(code=1)

    stats = parse_stat_data(payload)
    if not stats:
        cli_output.warning("No languages found in stats file; rendering an empty chart")

    _write_charts(
        stats,
        chart_config=chart_config,
        output_dir=output_dir,
        base_name=base_name,
        colors=colors,
        title=title,
        sort=sort,
    )


if __name__ == "__main__":
    app()
