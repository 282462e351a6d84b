"""sankeyplot - Sankey diagram rendering with drawsvg.

Node rectangles and link spans come from a layout step; sankeyplot draws
them with blended link colors, selection highlighting and readable labels.

Example usage:
    from sankeyplot import Link, Node, render_to_svg

    nodes = [
        Node(0, 10, 20, 25, 120, label="Coal"),
        Node(1, 300, 40, 315, 140, label="Power"),
    ]
    links = [Link(source=0, target=1, y0=70, y1=90, width=100)]

    svg = render_to_svg(
        (400, 200), nodes, links,
        {"Coal": "#424242", "Power": "#ffb300"},
        style={"selected_node_id": 0, "gradient_links": True},
        filename="energy",
    )
"""

from .colors import (
    BLACK,
    BLUE,
    GREY,
    WHITE,
    YELLOW,
    Color,
    blend,
    lerp,
    luminance,
)
from .errors import (
    DuplicateNodeError,
    InvalidColorError,
    SankeyError,
    StyleError,
)
from .models import (
    Link,
    Node,
    NodeIndex,
)
from .painters import (
    InteractivePainter,
    Painter,
    PlainPainter,
)
from .renderer import (
    SankeyRenderer,
    find_dangling_links,
    render,
    render_to_svg,
)
from .style import (
    DEFAULT_STYLE,
    Style,
)
from .text import (
    TextMeasurer,
    TextMetrics,
    place_label,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Node",
    "Link",
    "NodeIndex",
    # Colors
    "Color",
    "blend",
    "lerp",
    "luminance",
    "BLACK",
    "BLUE",
    "GREY",
    "WHITE",
    "YELLOW",
    # Style
    "Style",
    "DEFAULT_STYLE",
    # Text
    "TextMeasurer",
    "TextMetrics",
    "place_label",
    # Rendering
    "render",
    "render_to_svg",
    "find_dangling_links",
    "SankeyRenderer",
    "Painter",
    "PlainPainter",
    "InteractivePainter",
    # Errors
    "SankeyError",
    "InvalidColorError",
    "StyleError",
    "DuplicateNodeError",
    # Version
    "__version__",
]
