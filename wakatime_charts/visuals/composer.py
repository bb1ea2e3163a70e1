"""Compose the language stats chart as an SVG element tree."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..core.logging_config import get_logger
from ..core.models import RenderRequest, StatDatum
from .layout import Geometry
from .scales import BandScale, LinearScale
from .svg import SVG_NAMESPACE, XLINK_NAMESPACE, Node, format_number as _n
from .themes import Palette, resolve_palette

logger = get_logger(__name__)

GRADIENT_ID = "overflowGradient"
CARD_RADIUS = 4.5
BAND_PADDING_INNER = 0.25

# Entrance animation delays in ms; each row starts ROW_STAGGER_MS after the previous
NAME_DELAY_MS = 500
DURATION_DELAY_MS = 600
BAR_DELAY_MS = 700
ROW_STAGGER_MS = 250

FONT_FAMILY = "'Segoe UI', Ubuntu, Sans-Serif"
FONT_WEIGHT = 600
FONT_SIZE = 14
ANIMATION_DURATION = "0.5s"


def first_word(name: str) -> str:
    """Label shown in the names column: the name up to its first whitespace."""
    parts = name.split()
    return parts[0] if parts else ""


class SvgComposer:
    """Build the chart tree for one theme variant.

    Composition is pure: the same request and geometry always produce the
    same tree.
    """

    def __init__(self, templates_dir: Path | None = None):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def compose(self, request: RenderRequest, geometry: Geometry) -> Node:
        """Compose the full SVG tree.

        Args:
            request: Normalized data, theme and color lookup
            geometry: Layout derived from measurements

        Returns:
            Root ``svg`` node
        """
        palette = resolve_palette(request.theme)
        data = list(request.data)
        g = geometry

        y_scale = BandScale(
            [datum.name for datum in data],
            (0, g.stats_height),
            padding_inner=BAND_PADDING_INNER,
        )
        domain_limit = max((datum.total_seconds for datum in data), default=0)
        x_scale = LinearScale((0, domain_limit), (0, g.chart_width))

        svg = Node(
            "svg",
            {
                "version": "1.1",
                "xmlns": SVG_NAMESPACE,
                "xmlns:xlink": XLINK_NAMESPACE,
                "width": g.svg_width,
                "height": g.svg_height,
                "viewBox": f"0 0 {_n(g.svg_width)} {_n(g.svg_height)}",
            },
        )
        defs = svg.append("defs")

        self._add_card(svg, g, palette)
        svg.append(
            "text",
            {
                "transform": f"translate({_n(g.margin)} {_n(g.stats_y)})",
                "dominant-baseline": "hanging",
            },
            text=request.header,
        )
        self._add_gradient(defs, palette)

        self._add_label_column(
            svg,
            clip_id="nameClip",
            css_class="nameText",
            x=g.names_x,
            width=g.names_width,
            geometry=g,
            y_scale=y_scale,
            labels=[first_word(datum.name) for datum in data],
            base_delay=NAME_DELAY_MS,
        )
        self._add_label_column(
            svg,
            clip_id="durationClip",
            css_class="durationText",
            x=g.durations_x,
            width=g.durations_width,
            geometry=g,
            y_scale=y_scale,
            labels=[datum.text for datum in data],
            base_delay=DURATION_DELAY_MS,
        )
        self._add_bars(svg, g, data, y_scale, x_scale, request.color_for_name)

        svg.append("style", text=self._render_style(palette))

        logger.debug(
            "Composed chart",
            extra={"theme": request.theme.value, "rows": len(data), "domain_limit": domain_limit},
        )
        return svg

    def _add_card(self, svg: Node, g: Geometry, palette: Palette) -> None:
        svg.append(
            "rect",
            {
                "width": g.svg_width - 2,
                "height": g.svg_height - 2,
                "x": 1,
                "y": 1,
                "rx": CARD_RADIUS,
                "stroke": palette.background,
                "fill": palette.background,
                "stroke-opacity": 1,
            },
        )

    def _add_gradient(self, defs: Node, palette: Palette) -> None:
        gradient = defs.append("linearGradient", {"id": GRADIENT_ID})
        gradient.append("stop", {"stop-color": palette.gradient_start, "offset": "0"})
        gradient.append("stop", {"stop-color": palette.gradient_end, "offset": "1"})

    def _add_label_column(
        self,
        svg: Node,
        *,
        clip_id: str,
        css_class: str,
        x: float,
        width: float,
        geometry: Geometry,
        y_scale: BandScale,
        labels: Sequence[str],
        base_delay: int,
    ) -> None:
        """Clipped text column with a fade overlay on its trailing edge."""
        g = geometry
        clip = svg.append("clipPath", {"id": clip_id})
        clip.append("rect", {"x": 0, "y": 0, "width": width, "height": g.stats_height})

        column = svg.append(
            "g",
            {
                "transform": f"translate({_n(x)}, {_n(g.stats_y)})",
                "width": width,
                "clip-path": f"url(#{clip_id})",
            },
        )
        for i, label in enumerate(labels):
            column.append(
                "text",
                {
                    "class": css_class,
                    "y": y_scale.center(i),
                    "dominant-baseline": "middle",
                    "style": f"animation-delay: {base_delay + i * ROW_STAGGER_MS}ms",
                },
                text=label,
            )

        svg.append(
            "rect",
            {
                "transform": f"translate({_n(x + width - g.padding)}, {_n(g.stats_y)})",
                "width": g.padding,
                "height": g.stats_height,
                "fill": f"url(#{GRADIENT_ID})",
            },
        )

    def _add_bars(
        self,
        svg: Node,
        g: Geometry,
        data: Sequence[StatDatum],
        y_scale: BandScale,
        x_scale: LinearScale,
        color_for_name: Callable[[str], str],
    ) -> None:
        chart = svg.append("g", {"transform": f"translate({_n(g.chart_x)}, {_n(g.stats_y)})"})
        for i, datum in enumerate(data):
            chart.append(
                "rect",
                {
                    "class": "durationBar",
                    "y": y_scale.offset(i),
                    "height": y_scale.bandwidth,
                    "width": x_scale(datum.total_seconds),
                    "style": f"animation-delay: {BAR_DELAY_MS + i * ROW_STAGGER_MS}ms;",
                    "fill": color_for_name(datum.name),
                },
            )

    def _render_style(self, palette: Palette) -> str:
        template = self.env.get_template("chart_style.css.j2")
        return template.render(
            font_weight=FONT_WEIGHT,
            font_size=FONT_SIZE,
            font_family=FONT_FAMILY,
            text_color=palette.text,
            duration=ANIMATION_DURATION,
        ) + "\n"
