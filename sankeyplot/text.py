"""Label measurement with Pillow and edge-aware label placement."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from PIL import ImageFont

from .style import DEFAULT_FONT_FAMILY

if TYPE_CHECKING:
    from .models import Node

LOGGER = logging.getLogger(__name__)

GENERIC_FONT_FALLBACKS = {
    "sans-serif": ["Helvetica", "Arial", "Liberation Sans", "DejaVu Sans"],
    "serif": ["Times New Roman", "Times", "Liberation Serif", "DejaVu Serif"],
    "monospace": ["Courier New", "Courier", "Liberation Mono", "DejaVu Sans Mono"],
}

BOLD_WEIGHTS = {"bold", "bolder", "600", "700", "800", "900"}


@dataclass(frozen=True)
class TextMetrics:
    """Size of a single line of text. ``ascent`` is the baseline offset from the top."""

    width: float
    height: float
    ascent: float


@dataclass(frozen=True)
class LabelPlacement:
    x: float
    top: float
    baseline: float
    side: Literal["right", "left"]


class TextMeasurer:
    """Caches Pillow fonts and measures single-line labels."""

    FONT_DIRS = [
        Path("/System/Library/Fonts"),
        Path("/System/Library/Fonts/Supplemental"),
        Path("/Library/Fonts"),
        Path("~/Library/Fonts").expanduser(),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        Path("C:/Windows/Fonts"),
    ]

    def __init__(self) -> None:
        self._font_cache: dict[tuple[str, int, bool], ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}
        self._font_paths: dict[tuple[str, bool], str | None] = {}

    def font(
        self, family: str | None, size: float, weight: str = "normal"
    ) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        key_size = max(1, int(round(size)))
        family = family or DEFAULT_FONT_FAMILY
        bold = str(weight).lower() in BOLD_WEIGHTS
        cache_key = (family.lower(), key_size, bold)
        if cache_key in self._font_cache:
            return self._font_cache[cache_key]

        candidates = []
        for name in GENERIC_FONT_FALLBACKS.get(family.lower(), [family]):
            path = self._locate_font(name, bold)
            if path:
                candidates.append(path)
        candidates.append("DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf")

        font = None
        for candidate in candidates:
            try:
                font = ImageFont.truetype(candidate, key_size)
                break
            except OSError:
                continue
        if font is None:
            LOGGER.debug("No TrueType font for %r, using Pillow default font", family)
            font = ImageFont.load_default(size=key_size)

        self._font_cache[cache_key] = font
        return font

    def measure(
        self, text: str, family: str | None, size: float, weight: str = "normal"
    ) -> TextMetrics:
        font = self.font(family, size, weight)
        width = float(font.getlength(text))
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent, descent = font.getmetrics()
        else:
            # Bitmap fonts have no metrics; the baseline is the bottom of the box
            ascent, descent = font.getbbox(text or " ")[3], 0
        return TextMetrics(width=width, height=float(ascent + descent), ascent=float(ascent))

    def _locate_font(self, family: str, bold: bool) -> str | None:
        key = (family.lower(), bold)
        if key in self._font_paths:
            return self._font_paths[key]

        normalized = re.sub(r"[^a-z0-9]+", "", family.lower())
        wanted = {normalized + "bold", normalized + "bd", normalized + "b"} if bold else {normalized}
        found = None
        for directory in self.FONT_DIRS:
            if found or not directory.exists():
                continue
            for pattern in ("*.ttf", "*.ttc"):
                for path in directory.rglob(pattern):
                    stem = re.sub(r"[^a-z0-9]+", "", path.stem.lower())
                    if stem in wanted:
                        found = str(path)
                        break
                if found:
                    break

        self._font_paths[key] = found
        return found


def place_label(
    node: Node,
    metrics: TextMetrics,
    surface_width: float,
    margin: float,
) -> LabelPlacement:
    """Pick a side for a node's label.

    The label is vertically centered on the node and sits ``margin`` away
    from it. The right side wins when the label fits inside the surface,
    then the left side; when neither fits the label overflows on the right.
    """
    # Single line laid out no wider than the surface
    width = min(metrics.width, surface_width)
    top = node.y0 + (node.height - metrics.height) / 2
    baseline = top + metrics.ascent

    right_x = node.x1 + margin
    left_x = node.x0 - margin - width

    if right_x + width <= surface_width:
        return LabelPlacement(right_x, top, baseline, "right")
    if left_x >= 0:
        return LabelPlacement(left_x, top, baseline, "left")
    return LabelPlacement(right_x, top, baseline, "right")
