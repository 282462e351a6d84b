"""drawsvg primitives: link curves, node rectangles and outlined labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import drawsvg as draw

if TYPE_CHECKING:
    from .colors import Color
    from .models import Link, Node
    from .painters import LinkPaint, NodePaint
    from .style import Style
    from .text import LabelPlacement


@dataclass(frozen=True)
class LinkCurve:
    """Cubic Bézier from the source's right edge to the target's left edge."""

    start: tuple[float, float]
    control1: tuple[float, float]
    control2: tuple[float, float]
    end: tuple[float, float]

    @classmethod
    def between(cls, link: Link, source: Node, target: Node) -> LinkCurve:
        # Both control points share the horizontal midpoint, giving an S-shape
        x_mid = (source.x1 + target.x0) / 2
        return cls(
            start=(source.x1, link.y0),
            control1=(x_mid, link.y0),
            control2=(x_mid, link.y1),
            end=(target.x0, link.y1),
        )

    def point_at(self, t: float) -> tuple[float, float]:
        """Point on the curve for t in [0, 1]."""
        (x0, y0), (x1, y1), (x2, y2), (x3, y3) = (
            self.start, self.control1, self.control2, self.end,
        )
        u = 1 - t
        x = u**3 * x0 + 3 * u**2 * t * x1 + 3 * u * t**2 * x2 + t**3 * x3
        y = u**3 * y0 + 3 * u**2 * t * y1 + 3 * u * t**2 * y2 + t**3 * y3
        return x, y


def _paint_args(prefix: str, color: Color) -> dict[str, Any]:
    args: dict[str, Any] = {prefix: color.hex}
    if color.alpha < 255:
        args[f"{prefix}_opacity"] = round(color.opacity, 4)
    return args


class SurfaceRenderer:
    """Draws painted links, nodes and labels onto a drawsvg Drawing."""

    def draw_background(self, d: draw.Drawing, size: tuple[float, float], color: Color) -> None:
        d.append(draw.Rectangle(0, 0, size[0], size[1], **_paint_args("fill", color)))

    def draw_link(self, d: draw.Drawing, curve: LinkCurve, paint: LinkPaint) -> None:
        if paint.gradient is not None:
            gradient = draw.LinearGradient(
                paint.gradient.x1, paint.gradient.y,
                paint.gradient.x2, paint.gradient.y,
            )
            gradient.add_stop(0, paint.gradient.start.hex, round(paint.gradient.start.opacity, 4))
            gradient.add_stop(1, paint.gradient.end.hex, round(paint.gradient.end.opacity, 4))
            stroke: dict[str, Any] = {"stroke": gradient}
        else:
            stroke = {
                "stroke": paint.color.hex,
                "stroke_opacity": paint.opacity,
            }

        path = draw.Path(
            stroke_width=paint.stroke_width,
            fill="none",
            **stroke,
        )
        path.M(*curve.start)
        path.C(*curve.control1, *curve.control2, *curve.end)
        d.append(path)

    def draw_node(self, d: draw.Drawing, node: Node, paint: NodePaint) -> None:
        d.append(
            draw.Rectangle(
                node.x0, node.y0, node.width, node.height,
                **_paint_args("fill", paint.fill),
            )
        )

        if paint.border is not None:
            d.append(
                draw.Rectangle(
                    node.x0, node.y0, node.width, node.height,
                    fill="none",
                    stroke_width=paint.border_width,
                    **_paint_args("stroke", paint.border),
                )
            )

    def draw_label(
        self,
        d: draw.Drawing,
        text: str,
        placement: LabelPlacement,
        paint: NodePaint,
        style: Style,
    ) -> None:
        """Draw the label twice: the outline halo first, then the fill on top."""
        font = {
            "font_family": style.font_family,
            "font_weight": style.font_weight,
        }

        d.append(
            draw.Text(
                text,
                style.font_size,
                placement.x, placement.baseline,
                fill="none",
                stroke_width=style.label_stroke_width,
                stroke_linejoin="round",
                **_paint_args("stroke", paint.label_outline),
                **font,
            )
        )
        d.append(
            draw.Text(
                text,
                style.font_size,
                placement.x, placement.baseline,
                **_paint_args("fill", paint.label_fill),
                **font,
            )
        )
