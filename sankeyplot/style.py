"""Rendering style options with resolved defaults."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from .colors import BLACK, BLUE, GREY, WHITE, YELLOW, Color
from .errors import StyleError

DEFAULT_FONT_FAMILY = "sans-serif"

_COLOR_FIELDS = (
    "link_color",
    "node_color",
    "dark_color",
    "light_color",
    "selection_color",
)


@dataclass(frozen=True)
class Style:
    """Everything that controls how a diagram is drawn.

    Built once before a render; every field carries its default so the
    drawing code never has to fall back on missing values.
    """

    show_labels: bool = True
    link_color: Color = GREY
    node_color: Color = BLUE  # Used when a label has no entry in the color map
    selected_node_id: int | None = None

    # Label text is dark_color on dark fills and light_color otherwise;
    # the outline takes the other one.
    dark_color: Color = WHITE
    light_color: Color = BLACK

    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = 10
    font_weight: str = "bold"
    label_margin: float = 6
    label_stroke_width: float = 1.5

    gradient_links: bool = False
    gradient_alpha: int = 128
    connected_opacity: float = 0.9
    idle_opacity: float = 0.5

    selection_color: Color = YELLOW
    selection_width: float = 4

    dark_luminance_threshold: float = 0.05

    def __post_init__(self) -> None:
        for name in ("font_size", "label_margin", "label_stroke_width", "selection_width"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or value < 0:
                raise StyleError(f"{name} must be a non-negative number, got {value!r}")
        for name in ("connected_opacity", "idle_opacity", "dark_luminance_threshold"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not 0 <= value <= 1:
                raise StyleError(f"{name} must be between 0 and 1, got {value!r}")
        if not 0 <= self.gradient_alpha <= 255:
            raise StyleError(f"gradient_alpha must be between 0 and 255, got {self.gradient_alpha!r}")
        for name in _COLOR_FIELDS:
            if not isinstance(getattr(self, name), Color):
                raise StyleError(f"{name} must be a Color, use Style.from_options for strings")

    @classmethod
    def from_options(cls, **options: Any) -> Style:
        """Build a style from optional settings.

        ``None`` values are dropped so the default applies, and color
        strings are parsed. Unknown option names raise TypeError.

        Example:
            Style.from_options(selected_node_id=3, dark_color="#eeeeee", font_family=None)
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"Unknown style option(s): {', '.join(unknown)}")

        resolved: dict[str, Any] = {}
        for name, value in options.items():
            if value is None:
                continue
            if name in _COLOR_FIELDS:
                value = Color.parse(value)
            resolved[name] = value
        return cls(**resolved)

    def replace(self, **changes: Any) -> Style:
        return replace(self, **changes)

    def is_selected(self, node_id: int) -> bool:
        return self.selected_node_id is not None and node_id == self.selected_node_id


DEFAULT_STYLE = Style()
