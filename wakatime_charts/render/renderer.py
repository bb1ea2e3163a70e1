from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from ..core.colors import ColorLookup
from ..core.config import DEFAULT_BASE_NAME
from ..core.enums import Theme
from ..core.errors import ChartError
from ..core.logging_config import get_logger
from ..core.models import Measurements, RenderRequest, StatDatum
from ..visuals.composer import SvgComposer
from ..visuals.layout import Geometry, compute_layout
from ..visuals.normalize import normalize_stats
from ..visuals.svg import serialize

logger = get_logger(__name__)

THEMES: tuple[Theme, ...] = (Theme.LIGHT, Theme.DARK)


def chart_filename(base_name: str, theme: Theme) -> str:
    """File name for one theme variant, e.g. ``stats_dark.svg``."""
    suffix = "_dark" if theme is Theme.DARK else ""
    return f"{base_name}{suffix}.svg"


class ChartRenderer:
    """Runs the chart pipeline once per theme and writes the results."""

    def __init__(
        self,
        colors: ColorLookup,
        measurements: Measurements | None = None,
        composer: SvgComposer | None = None,
    ):
        """Initialize renderer.

        Args:
            colors: Read-only language color lookup, shared across variants
            measurements: Layout overrides (defaults apply when None)
            composer: Optional composer, e.g. one with custom templates

        Raises:
            ConfigurationError: If the measurements do not produce a valid layout
        """
        self.colors = colors
        self.measurements = measurements or Measurements()
        self.geometry: Geometry = compute_layout(self.measurements)
        self.composer = composer or SvgComposer()

    def render_svg(self, stats: Iterable[StatDatum], theme: Theme, header: str = "") -> str:
        """Render one theme variant to SVG markup.

        ``stats`` must already be in display order; only filtering and
        truncation are applied here.
        """
        request = RenderRequest(
            data=normalize_stats(stats),
            theme=theme,
            color_for_name=self.colors.color_for,
            header=header,
        )
        root = self.composer.compose(request, self.geometry)
        return serialize(root)

    def write_variants(
        self,
        stats: Sequence[StatDatum],
        output_dir: Path,
        base_name: str = DEFAULT_BASE_NAME,
        header: str = "",
        themes: Iterable[Theme] = THEMES,
    ) -> list[Path]:
        """Render and write each theme variant.

        Each variant is rendered fully in memory before its file is written,
        so a failing render never leaves a truncated file behind.

        Returns:
            Paths written, in theme order
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for theme in themes:
            path = output_dir / chart_filename(base_name, theme)
            try:
                markup = self.render_svg(stats, theme, header=header)
            except ChartError as e:
                logger.error(
                    "Failed to render chart", extra={"theme": theme.value, "error": str(e)}
                )
                raise
            write_text(str(path), markup)
            logger.info("Chart written", extra={"theme": theme.value, "path": str(path)})
            written.append(path)
        return written


def write_text(path: str, content: str) -> None:
    """Write text content to file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
