"""Sankey diagram renderer using drawsvg."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Union

import drawsvg as draw

from .colors import Color, ColorLike
from .models import Link, Node, NodeIndex
from .painters import InteractivePainter, Painter, resolve_colors
from .style import DEFAULT_STYLE, Style
from .surface import LinkCurve, SurfaceRenderer
from .text import TextMeasurer, place_label

if TYPE_CHECKING:
    from collections.abc import Iterable

LOGGER = logging.getLogger(__name__)

StyleLike = Union[Style, Mapping[str, Any], None]


def resolve_style(style: StyleLike) -> Style:
    """Accept a Style, a mapping of style options, or None for the defaults."""
    if style is None:
        return DEFAULT_STYLE
    if isinstance(style, Style):
        return style
    return Style.from_options(**style)


def find_dangling_links(nodes: Iterable[Node], links: Iterable[Link]) -> list[Link]:
    """Links whose source or target is not among ``nodes``."""
    index = NodeIndex(nodes)
    return [link for link in links if index.resolve(link) is None]


class SankeyRenderer:
    """Draws a laid-out Sankey diagram in one pass.

    Links are drawn first and nodes on top, so node rectangles and labels
    cover link ends. The renderer keeps no state between calls apart from
    the measurer's font cache.
    """

    def __init__(
        self,
        painter: Painter | None = None,
        measurer: TextMeasurer | None = None,
        surface: SurfaceRenderer | None = None,
    ):
        self.painter = painter or InteractivePainter()
        self.measurer = measurer or TextMeasurer()
        self.surface = surface or SurfaceRenderer()

    def render(
        self,
        d: draw.Drawing,
        size: tuple[float, float],
        nodes: Sequence[Node],
        links: Sequence[Link],
        colors: Mapping[str, ColorLike],
        style: StyleLike = None,
    ) -> None:
        """Render nodes and links onto ``d``, a surface of ``size`` (width, height)."""
        style = resolve_style(style)
        index = NodeIndex(nodes)
        colors = resolve_colors(colors)
        LOGGER.debug(
            "Rendering %d nodes and %d links with the %s painter",
            len(index), len(links), self.painter.name,
        )

        for link in links:
            self._render_link(d, link, index, colors, style)

        for node in nodes:
            self._render_node(d, size, node, colors, style)

    def _render_link(
        self,
        d: draw.Drawing,
        link: Link,
        index: NodeIndex,
        colors: Mapping[str, ColorLike],
        style: Style,
    ) -> None:
        endpoints = index.resolve(link)
        if endpoints is None:
            LOGGER.warning(
                "Skipping link %s -> %s: unknown node id(s) %s",
                link.source, link.target, index.missing_endpoints(link),
            )
            return

        source, target = endpoints
        paint = self.painter.link_paint(link, source, target, colors, style)
        self.surface.draw_link(d, LinkCurve.between(link, source, target), paint)

    def _render_node(
        self,
        d: draw.Drawing,
        size: tuple[float, float],
        node: Node,
        colors: Mapping[str, ColorLike],
        style: Style,
    ) -> None:
        paint = self.painter.node_paint(node, colors, style)
        self.surface.draw_node(d, node, paint)

        if not style.show_labels or not node.label:
            return

        # Labels are single line
        text = " ".join(node.label.splitlines())
        metrics = self.measurer.measure(text, style.font_family, style.font_size, style.font_weight)
        placement = place_label(node, metrics, size[0], style.label_margin)
        self.surface.draw_label(d, text, placement, paint, style)


def render(
    surface: draw.Drawing,
    size: tuple[float, float],
    nodes: Sequence[Node],
    links: Sequence[Link],
    colors: Mapping[str, ColorLike],
    style: StyleLike = None,
    *,
    painter: Painter | None = None,
    measurer: TextMeasurer | None = None,
) -> None:
    """Draw a Sankey diagram onto an existing drawsvg surface.

    Args:
        surface: Drawing to paint onto
        size: (width, height) of the surface; labels avoid the right edge
        nodes: Laid-out nodes
        links: Laid-out links referencing nodes by id
        colors: Label text to color; unmapped labels use style.node_color
        style: Style, mapping of style options, or None for defaults
        painter: Visual variant, InteractivePainter by default
        measurer: Text measurer, a fresh TextMeasurer by default
    """
    SankeyRenderer(painter=painter, measurer=measurer).render(
        surface, size, nodes, links, colors, style
    )


def render_to_svg(
    size: tuple[float, float],
    nodes: Sequence[Node],
    links: Sequence[Link],
    colors: Mapping[str, ColorLike],
    style: StyleLike = None,
    filename: str | None = None,
    background: ColorLike | None = None,
    *,
    painter: Painter | None = None,
    measurer: TextMeasurer | None = None,
) -> str:
    """Render a Sankey diagram to SVG.

    Args:
        size: (width, height) of the drawing
        nodes: Laid-out nodes
        links: Laid-out links referencing nodes by id
        colors: Label text to color
        style: Style, mapping of style options, or None for defaults
        filename: Optional filename to save to (without extension)
        background: Optional background fill

    Returns:
        SVG content as string
    """
    width, height = size
    d = draw.Drawing(width, height)

    if background is not None:
        SurfaceRenderer().draw_background(d, size, Color.parse(background))

    render(d, size, nodes, links, colors, style, painter=painter, measurer=measurer)

    if filename:
        d.save_svg(f"{filename}.svg")

    return d.as_svg()
