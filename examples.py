"""Example Sankey diagrams rendered to SVG."""

from pathlib import Path

from sankeyplot import Link, Node, PlainPainter, render_to_svg

OUTPUT_DIR = Path("output")

# Pre-computed layout: three columns, one pixel per unit of flow
NODES = [
    Node(0, 20, 10, 35, 110, label="Coal"),
    Node(1, 20, 125, 35, 185, label="Gas"),
    Node(2, 20, 200, 35, 240, label="Solar"),
    Node(3, 280, 20, 295, 220, label="Power"),
    Node(4, 540, 10, 555, 90, label="Homes"),
    Node(5, 540, 105, 555, 195, label="Industry"),
    Node(6, 540, 210, 555, 240, label="Losses"),
]

LINKS = [
    Link(source=0, target=3, y0=60, y1=70, width=100),
    Link(source=1, target=3, y0=155, y1=150, width=60),
    Link(source=2, target=3, y0=220, y1=200, width=40),
    Link(source=3, target=4, y0=60, y1=50, width=80),
    Link(source=3, target=5, y0=145, y1=150, width=90),
    Link(source=3, target=6, y0=205, y1=225, width=30),
]

COLORS = {
    "Coal": "#000000",
    "Gas": "#ff7043",
    "Solar": "#fdd835",
    "Power": "#5c6bc0",
    "Homes": "#66bb6a",
    "Industry": "#8d6e63",
    # Losses has no entry and falls back to the default node color
}

SIZE = (600, 250)


def energy_example():
    """Solid blended links with the power plant selected."""
    render_to_svg(
        SIZE, NODES, LINKS, COLORS,
        style={"selected_node_id": 3},
        filename=str(OUTPUT_DIR / "energy"),
        background="white",
    )
    print("Energy diagram saved to output/energy.svg")


def gradient_example():
    """Gradient links running from source color to target color."""
    render_to_svg(
        SIZE, NODES, LINKS, COLORS,
        style={"gradient_links": True, "font_size": 12, "font_family": "serif"},
        filename=str(OUTPUT_DIR / "energy_gradient"),
        background="#fafafa",
    )
    print("Gradient diagram saved to output/energy_gradient.svg")


def plain_example():
    """The plain painter: grey links, no selection feedback."""
    render_to_svg(
        SIZE, NODES, LINKS, COLORS,
        style={"link_color": "#90a4ae", "selected_node_id": 3},
        filename=str(OUTPUT_DIR / "energy_plain"),
        background="white",
        painter=PlainPainter(),
    )
    print("Plain diagram saved to output/energy_plain.svg")


if __name__ == "__main__":
    OUTPUT_DIR.mkdir(exist_ok=True)
    energy_example()
    gradient_example()
    plain_example()
