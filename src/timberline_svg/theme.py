"""Pure data: colors, fonts, and layout constants for generated charts.

No library imports. This module defines the visual identity as plain
Python dicts and lists so any consumer (the chart builder, a template, a
stylesheet) can use it.
"""

# Chart palette
COLORS = {
    "series": "steelblue",
    "text": "#333",
    "muted": "#666",
    "axis": "#333",
    "grid": "#e0e0e0",
}

FONTS = {
    "sans": ["system-ui", "sans-serif"],
}

# Chart layout constants, in SVG user units
LAYOUT = {
    "width": 680,             # matches the blog content width
    "height": 400,
    "margin_top": 20,
    "margin_top_titled": 40,
    "margin_right": 20,
    "margin_bottom": 35,
    "margin_bottom_labeled": 50,
    "margin_left": 45,
    "margin_left_labeled": 60,
    "title_size": 16,
    "title_baseline": 24,
    "label_size": 12,
    "tick_size": 11,
    "tick_length": 5,
    "ticks": 5,
    "line_width": 2,
    "radius": 4,
    "dot_radius": 3,
    "area_opacity": 0.3,
    "bar_fill": 0.8,          # share of each slot a bar occupies
    "bar_corner": 2,
}
