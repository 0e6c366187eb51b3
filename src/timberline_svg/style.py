"""Translate theme.py constants into SVG presentation attributes."""

from __future__ import annotations

from typing import Any

from matplotlib.colors import to_hex

from .theme import COLORS, FONTS, LAYOUT

# Root <svg> style attribute
FONT_STYLE = f"font-family: {', '.join(FONTS['sans'])};"

# Attribute dicts, merged into generated element descriptions
AXIS_LINE: dict = {
    "stroke": COLORS["axis"],
    "stroke-width": 1,
}

TICK_LINE: dict = {
    "stroke": COLORS["axis"],
}

# Grid: subtle, drawn under the data
GRID_LINE: dict = {
    "stroke": COLORS["grid"],
    "stroke-width": 1,
}

TICK_LABEL: dict = {
    "font-size": LAYOUT["tick_size"],
    "fill": COLORS["muted"],
}

AXIS_LABEL: dict = {
    "text-anchor": "middle",
    "font-size": LAYOUT["label_size"],
    "fill": COLORS["text"],
}

TITLE: dict = {
    "text-anchor": "middle",
    "font-size": LAYOUT["title_size"],
    "font-weight": "bold",
    "fill": COLORS["text"],
}


def to_svg_color(color: Any) -> Any:
    """Convert an RGB(A) tuple to a hex string.

    Strings pass through untouched, so anything SVG understands
    (``hsl(...)``, ``url(#id)``, named colors) keeps working.
    """
    if color is None or isinstance(color, str):
        return color
    rgba = tuple(color)
    return to_hex(rgba, keep_alpha=len(rgba) == 4)
