"""End-to-end rendering tests against the generated SVG."""

import logging

import drawsvg as draw
import pytest

from conftest import elements, parse_svg, path_numbers
from sankeyplot import (
    DuplicateNodeError,
    InvalidColorError,
    Link,
    Node,
    PlainPainter,
    SankeyRenderer,
    Style,
    find_dangling_links,
    render,
    render_to_svg,
)
from sankeyplot.surface import LinkCurve

SIZE = (200, 50)


def svg_for(nodes, links, colors, style=None, measurer=None, **kwargs):
    return parse_svg(render_to_svg(SIZE, nodes, links, colors, style, measurer=measurer, **kwargs))


def link_paths(root):
    return [p for p in elements(root, "path") if p.get("fill") == "none"]


def borders(root):
    return [r for r in elements(root, "rect") if r.get("fill") == "none"]


class TestLinkRendering:

    def test_blended_link_at_half_opacity(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(red_blue_nodes, red_blue_links, red_blue_colors, measurer=measurer)
        (path,) = link_paths(root)
        assert path.get("stroke") == "#7f007f"
        assert float(path.get("stroke-opacity")) == pytest.approx(0.5)
        assert float(path.get("stroke-width")) == 4
        assert borders(root) == []

    def test_selected_source_highlights_link_and_node(
        self, red_blue_nodes, red_blue_links, red_blue_colors, measurer
    ):
        root = svg_for(
            red_blue_nodes, red_blue_links, red_blue_colors,
            style={"selected_node_id": 1}, measurer=measurer,
        )
        (path,) = link_paths(root)
        assert float(path.get("stroke-opacity")) == pytest.approx(0.9)

        (border,) = borders(root)
        assert border.get("stroke") == "#ffeb3b"
        assert float(border.get("stroke-width")) == 4
        assert float(border.get("x")) == 0
        assert float(border.get("width")) == 10

    def test_s_curve_geometry(self, measurer):
        nodes = [Node(1, 0, 0, 10, 40), Node(2, 90, 60, 100, 100)]
        links = [Link(source=1, target=2, y0=20, y1=80, width=6)]
        root = svg_for(nodes, links, {}, measurer=measurer)
        (path,) = link_paths(root)
        assert path_numbers(path) == [10, 20, 50, 20, 50, 80, 90, 80]

    def test_curve_is_point_symmetric(self):
        curve = LinkCurve.between(
            Link(source=1, target=2, y0=20, y1=80, width=6),
            Node(1, 0, 0, 10, 40),
            Node(2, 90, 60, 100, 100),
        )
        assert curve.point_at(0) == (10, 20)
        assert curve.point_at(1) == (90, 80)
        assert curve.point_at(0.5) == pytest.approx((50, 50))

    def test_gradient_links(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(
            red_blue_nodes, red_blue_links, red_blue_colors,
            style={"gradient_links": True, "selected_node_id": 1}, measurer=measurer,
        )
        (path,) = link_paths(root)
        assert path.get("stroke").startswith("url(#")
        assert path.get("stroke-opacity") is None

        (gradient,) = elements(root, "linearGradient")
        assert float(gradient.get("x1")) == 10
        assert float(gradient.get("x2")) == 100
        stops = elements(gradient, "stop")
        assert [s.get("stop-color") for s in stops] == ["#ff0000", "#0000ff"]
        for stop in stops:
            assert float(stop.get("stop-opacity")) == pytest.approx(128 / 255, abs=1e-3)

    def test_unmapped_labels_use_default_color(self, red_blue_nodes, red_blue_links, measurer):
        root = svg_for(red_blue_nodes, red_blue_links, {}, measurer=measurer)
        (path,) = link_paths(root)
        assert path.get("stroke") == "#2196f3"


class TestNodeRendering:

    def test_node_rectangles(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(red_blue_nodes, red_blue_links, red_blue_colors, measurer=measurer)
        fills = [r.get("fill") for r in elements(root, "rect")]
        assert fills == ["#ff0000", "#0000ff"]

    def test_label_outline_then_fill(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(red_blue_nodes, red_blue_links, red_blue_colors, measurer=measurer)
        texts = elements(root, "text")
        assert [t.text for t in texts] == ["X", "X", "Y", "Y"]

        outline, fill = texts[0], texts[1]
        assert outline.get("fill") == "none"
        assert outline.get("stroke") == "#ffffff"
        assert float(outline.get("stroke-width")) == 1.5
        assert outline.get("stroke-linejoin") == "round"
        assert fill.get("fill") == "#000000"
        assert outline.get("x") == fill.get("x")
        assert outline.get("y") == fill.get("y")
        assert fill.get("font-weight") == "bold"
        assert float(fill.get("font-size")) == 10

    def test_label_right_of_node(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(red_blue_nodes, red_blue_links, red_blue_colors, measurer=measurer)
        texts = elements(root, "text")
        assert float(texts[1].get("x")) == 16
        # Centered: top = (10 - 12) / 2, baseline = top + ascent
        assert float(texts[1].get("y")) == pytest.approx(-1 + 10)

    def test_label_moves_left_near_right_edge(self, measurer):
        nodes = [Node(1, 180, 0, 190, 40, label="Wide label")]
        root = svg_for(nodes, [], {}, measurer=measurer)
        text = elements(root, "text")[1]
        assert float(text.get("x")) == 180 - 6 - 60

    def test_label_overflows_right_when_nothing_fits(self, measurer):
        nodes = [Node(1, 20, 0, 30, 40, label="x" * 30)]
        root = svg_for(nodes, [], {}, measurer=measurer)
        text = elements(root, "text")[1]
        assert float(text.get("x")) == 36

    def test_labels_hidden(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(
            red_blue_nodes, red_blue_links, red_blue_colors,
            style={"show_labels": False}, measurer=measurer,
        )
        assert elements(root, "text") == []
        assert len(elements(root, "rect")) == 2
        assert measurer.calls == []

    def test_nodes_without_label(self, measurer):
        nodes = [Node(1, 0, 0, 10, 10), Node(2, 50, 0, 60, 10, label="")]
        root = svg_for(nodes, [], {}, measurer=measurer)
        assert elements(root, "text") == []

    def test_multiline_label_drawn_on_one_line(self, measurer):
        nodes = [Node(1, 0, 0, 10, 10, label="two\nlines")]
        root = svg_for(nodes, [], {}, measurer=measurer)
        assert elements(root, "text")[1].text == "two lines"

    def test_font_settings_reach_measurer(self, red_blue_nodes, measurer):
        svg_for(
            red_blue_nodes, [], {},
            style=Style.from_options(font_family="serif", font_size=14, font_weight="normal"),
            measurer=measurer,
        )
        assert measurer.calls[0] == ("X", "serif", 14, "normal")


class TestRender:

    def test_links_drawn_before_nodes(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        root = svg_for(red_blue_nodes, red_blue_links, red_blue_colors, measurer=measurer)
        tags = [el.tag.split("}")[1] for el in root if el.tag.split("}")[1] in ("path", "rect", "text")]
        assert tags[0] == "path"
        assert "path" not in tags[1:]

    def test_dangling_link_is_skipped(self, red_blue_nodes, red_blue_colors, measurer, caplog):
        links = [
            Link(source=1, target=99, y0=5, y1=5, width=4),
            Link(source=1, target=2, y0=5, y1=5, width=2),
        ]
        with caplog.at_level(logging.WARNING, logger="sankeyplot.renderer"):
            root = svg_for(red_blue_nodes, links, red_blue_colors, measurer=measurer)

        (path,) = link_paths(root)
        assert float(path.get("stroke-width")) == 2
        assert "unknown node id(s) [99]" in caplog.text
        assert len(elements(root, "rect")) == 2

    def test_find_dangling_links(self, red_blue_nodes):
        bad = Link(source=7, target=2, y0=0, y1=0, width=1)
        good = Link(source=1, target=2, y0=0, y1=0, width=1)
        assert find_dangling_links(red_blue_nodes, [good, bad]) == [bad]

    def test_duplicate_node_ids(self, measurer):
        nodes = [Node(1, 0, 0, 10, 10), Node(1, 20, 0, 30, 10)]
        with pytest.raises(DuplicateNodeError):
            svg_for(nodes, [], {}, measurer=measurer)

    def test_idempotent(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        style = {"selected_node_id": 2}
        first = render_to_svg(SIZE, red_blue_nodes, red_blue_links, red_blue_colors, style, measurer=measurer)
        second = render_to_svg(SIZE, red_blue_nodes, red_blue_links, red_blue_colors, style, measurer=measurer)
        assert first == second

    def test_inputs_are_not_mutated(self, red_blue_nodes, red_blue_links, measurer):
        colors = {"X": "red", "Y": "blue"}
        nodes, links = list(red_blue_nodes), list(red_blue_links)
        render_to_svg(SIZE, nodes, links, colors, {"selected_node_id": 1}, measurer=measurer)
        assert nodes == red_blue_nodes
        assert links == red_blue_links
        assert colors == {"X": "red", "Y": "blue"}

    def test_render_onto_existing_drawing(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        d = draw.Drawing(*SIZE)
        assert render(d, SIZE, red_blue_nodes, red_blue_links, red_blue_colors, measurer=measurer) is None
        root = parse_svg(d.as_svg())
        assert len(link_paths(root)) == 1

    def test_plain_painter(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer):
        renderer = SankeyRenderer(painter=PlainPainter(), measurer=measurer)
        d = draw.Drawing(*SIZE)
        renderer.render(d, SIZE, red_blue_nodes, red_blue_links, red_blue_colors, Style(selected_node_id=1))
        root = parse_svg(d.as_svg())
        (path,) = link_paths(root)
        assert path.get("stroke") == "#9e9e9e"
        assert borders(root) == []

    def test_background_and_file_output(self, red_blue_nodes, red_blue_links, red_blue_colors, measurer, tmp_path):
        target = tmp_path / "diagram"
        svg = render_to_svg(
            SIZE, red_blue_nodes, red_blue_links, red_blue_colors,
            filename=str(target), background="white", measurer=measurer,
        )
        assert (tmp_path / "diagram.svg").read_text().strip() == svg.strip()
        first_rect = elements(parse_svg(svg), "rect")[0]
        assert first_rect.get("fill") == "#ffffff"
        assert float(first_rect.get("width")) == 200

    def test_invalid_color_leaves_drawing_untouched(self, measurer):
        nodes = [
            Node(1, 0, 0, 10, 10, label="X"),
            Node(2, 100, 0, 110, 10, label="Y"),
            Node(3, 100, 20, 110, 30, label="Z"),
        ]
        links = [Link(source=1, target=2, y0=5, y1=5, width=4)]
        d = draw.Drawing(*SIZE)
        before = d.as_svg()
        with pytest.raises(InvalidColorError):
            render(d, SIZE, nodes, links, {"X": "red", "Y": "blue", "Z": "#zz"}, measurer=measurer)
        assert d.as_svg() == before

    def test_translucent_background(self, red_blue_nodes, measurer):
        svg = render_to_svg(SIZE, red_blue_nodes, [], {}, background="#ff000080", measurer=measurer)
        first_rect = elements(parse_svg(svg), "rect")[0]
        assert first_rect.get("fill") == "#ff0000"
        assert float(first_rect.get("fill-opacity")) == pytest.approx(128 / 255, abs=1e-3)
