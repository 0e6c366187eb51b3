"""timberline-svg: data-driven SVG documents and charts for howinator.io."""

from .charts import Axis, Margin, area, bar, default_format, line, plot, save, scatter
from .context import Context, evaluate
from .render import RenderOptions, render, svg
from .scale import (
    LinearScale,
    NiceRange,
    create_linear_scale,
    extent,
    generate_ticks,
    nice_number,
    nice_scale,
)
from .theme import COLORS, FONTS, LAYOUT

__all__ = [
    "Axis",
    "Context",
    "LinearScale",
    "Margin",
    "NiceRange",
    "RenderOptions",
    "area",
    "bar",
    "create_linear_scale",
    "default_format",
    "evaluate",
    "extent",
    "generate_ticks",
    "line",
    "nice_number",
    "nice_scale",
    "plot",
    "render",
    "save",
    "scatter",
    "svg",
    "COLORS",
    "FONTS",
    "LAYOUT",
]
