"""Visual decisions for links and nodes.

A painter turns a node or link plus the style into paint descriptions;
the surface renderer turns those into SVG. Hosts pick a painter:

- PlainPainter: flat links in the style's link color, no selection feedback.
- InteractivePainter: blended or gradient links, selection highlighting
  and a border around the selected node.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .colors import Color, ColorLike, blend, luminance

if TYPE_CHECKING:
    from .models import Link, Node
    from .style import Style


@dataclass(frozen=True)
class Gradient:
    """Horizontal linear gradient in surface coordinates."""

    x1: float
    x2: float
    y: float
    start: Color
    end: Color


@dataclass(frozen=True)
class LinkPaint:
    """Stroke for one link. Exactly one of ``color`` and ``gradient`` is set."""

    stroke_width: float
    color: Color | None = None
    opacity: float = 1.0
    gradient: Gradient | None = None


@dataclass(frozen=True)
class NodePaint:
    fill: Color
    label_fill: Color
    label_outline: Color
    border: Color | None = None
    border_width: float = 0


def node_color(node: Node, colors: Mapping[str, ColorLike], style: Style) -> Color:
    """The mapped color for a node's label, or the style's fallback node color."""
    if node.label is not None and node.label in colors:
        return Color.parse(colors[node.label])
    return style.node_color


def resolve_colors(colors: Mapping[str, ColorLike]) -> dict[str, Color]:
    """Parse every color map entry up front so bad values fail before drawing."""
    return {label: Color.parse(value) for label, value in colors.items()}


def label_colors(fill: Color, style: Style) -> tuple[Color, Color]:
    """Return (text, outline) colors for a label drawn next to ``fill``.

    Near-black fills get dark_color text; everything else gets light_color
    text. The outline always uses the other color.
    """
    if luminance(fill) < style.dark_luminance_threshold:
        return style.dark_color, style.light_color
    return style.light_color, style.dark_color


class Painter:
    """Decides how links and nodes look."""

    name = "painter"

    def link_paint(
        self,
        link: Link,
        source: Node,
        target: Node,
        colors: Mapping[str, ColorLike],
        style: Style,
    ) -> LinkPaint:
        raise NotImplementedError

    def node_paint(
        self,
        node: Node,
        colors: Mapping[str, ColorLike],
        style: Style,
    ) -> NodePaint:
        raise NotImplementedError


class PlainPainter(Painter):
    """Base Sankey look: uniform links, mapped node colors, no selection."""

    name = "plain"

    def link_paint(self, link, source, target, colors, style):
        return LinkPaint(
            stroke_width=link.width,
            color=style.link_color,
            opacity=style.idle_opacity,
        )

    def node_paint(self, node, colors, style):
        fill = node_color(node, colors, style)
        return NodePaint(fill=fill, label_fill=style.light_color, label_outline=style.dark_color)


class InteractivePainter(Painter):
    """Blended link colors with selection highlighting."""

    name = "interactive"

    def link_paint(self, link, source, target, colors, style):
        source_color = node_color(source, colors, style)
        target_color = node_color(target, colors, style)

        if style.gradient_links:
            # Gradient stops keep a fixed alpha; selection does not change them
            return LinkPaint(
                stroke_width=link.width,
                gradient=Gradient(
                    x1=source.x1,
                    x2=target.x0,
                    y=(link.y0 + link.y1) / 2,
                    start=source_color.with_alpha(style.gradient_alpha),
                    end=target_color.with_alpha(style.gradient_alpha),
                ),
            )

        is_connected = style.is_selected(source.id) or style.is_selected(target.id)
        opacity = style.connected_opacity if is_connected else style.idle_opacity
        return LinkPaint(
            stroke_width=link.width,
            color=blend(source_color, target_color),
            opacity=opacity,
        )

    def node_paint(self, node, colors, style):
        fill = node_color(node, colors, style)
        text, outline = label_colors(fill, style)
        if style.is_selected(node.id):
            return NodePaint(
                fill=fill,
                label_fill=text,
                label_outline=outline,
                border=style.selection_color,
                border_width=style.selection_width,
            )
        return NodePaint(fill=fill, label_fill=text, label_outline=outline)
