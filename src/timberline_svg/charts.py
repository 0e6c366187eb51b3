"""Chart functions: plot(), plus scatter(), line(), area(), bar(), and save()."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Literal, Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike

from .escape import stringify
from .render import svg
from .scale import create_linear_scale, extent, nice_scale
from .style import (
    AXIS_LABEL,
    AXIS_LINE,
    FONT_STYLE,
    GRID_LINE,
    TICK_LABEL,
    TICK_LINE,
    TITLE,
    to_svg_color,
)
from .theme import COLORS, LAYOUT

# Default output directory (relative to the working directory)
_CHARTS_DIR = Path("static") / "img" / "charts"

ChartKind = Literal["scatter", "line", "area", "bar"]
KINDS = ("scatter", "line", "area", "bar")

Accessor = Callable[[Any, int], Any]


@dataclass
class Axis:
    """Axis settings. Pass ``False`` instead of an Axis to hide the axis."""

    label: str | None = None
    ticks: int = LAYOUT["ticks"]
    format: Callable[[float], str] | None = None
    grid: bool | None = None


@dataclass
class Margin:
    top: float
    right: float
    bottom: float
    left: float


def default_format(value: float) -> str:
    """Tick label: 1.2M, 3.5K, 40, or 0.5."""
    if abs(value) >= 1e6:
        return f"{value / 1e6:.1f}M"
    if abs(value) >= 1e3:
        return f"{value / 1e3:.1f}K"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def _axis(config: Axis | Mapping[str, Any] | Literal[False] | None) -> Axis | None:
    if config is False:
        return None
    if config is None:
        return Axis()
    if isinstance(config, Axis):
        return config
    return Axis(**config)


def _margin(
    config: Margin | Mapping[str, float] | None,
    title: str | None,
    x_axis: Axis | None,
    y_axis: Axis | None,
) -> Margin:
    margin = Margin(
        top=LAYOUT["margin_top_titled"] if title else LAYOUT["margin_top"],
        right=LAYOUT["margin_right"],
        bottom=(
            LAYOUT["margin_bottom_labeled"]
            if x_axis is not None and x_axis.label
            else LAYOUT["margin_bottom"]
        ),
        left=(
            LAYOUT["margin_left_labeled"]
            if y_axis is not None and y_axis.label
            else LAYOUT["margin_left"]
        ),
    )
    if isinstance(config, Margin):
        return config
    if config:
        names = {f.name for f in fields(Margin)}
        for name, value in config.items():
            if name not in names:
                raise ValueError(f"unknown margin side: {name!r}")
            setattr(margin, name, value)
    return margin


def _to_number(value: Any) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def _values(data: Sequence[Any], accessor: Accessor, axis: str) -> np.ndarray:
    values = np.array(
        [_to_number(accessor(d, i)) for i, d in enumerate(data)],
        dtype=float,
    )
    if not np.isfinite(values).all():
        raise ValueError(f"{axis} values must be finite")
    return values


def plot(
    data: Sequence[Any],
    x: Accessor,
    y: Accessor,
    *,
    width: float = LAYOUT["width"],
    height: float = LAYOUT["height"],
    kind: ChartKind = "scatter",
    color: Any = COLORS["series"],
    radius: float | Callable[[Any, int], float] = LAYOUT["radius"],
    margin: Margin | Mapping[str, float] | None = None,
    x_axis: Axis | Mapping[str, Any] | Literal[False] | None = None,
    y_axis: Axis | Mapping[str, Any] | Literal[False] | None = None,
    background: str | None = None,
    title: str | None = None,
    pretty: bool = False,
) -> str:
    """Render ``data`` as an SVG chart with nice axes.

    ``x`` and ``y`` are called as ``accessor(datum, index)``. ``color`` and
    ``radius`` may be static or per-datum callables with the same signature.
    """
    if kind not in KINDS:
        raise ValueError(f"unknown chart kind {kind!r}; expected one of {KINDS}")
    data = list(data)
    if not data:
        raise ValueError("plot() needs at least one data point")

    x_cfg = _axis(x_axis)
    y_cfg = _axis(y_axis)
    m = _margin(margin, title, x_cfg, y_cfg)

    plot_width = width - m.left - m.right
    plot_height = height - m.top - m.bottom

    xs = _values(data, x, "x")
    ys = _values(data, y, "y")

    x_min, x_max = extent(xs)
    y_min, y_max = extent(ys)
    if kind == "bar":
        # bars grow from zero
        y_min = min(0.0, y_min)

    x_nice = nice_scale(x_min, x_max, x_cfg.ticks if x_cfg else LAYOUT["ticks"])
    y_nice = nice_scale(y_min, y_max, y_cfg.ticks if y_cfg else LAYOUT["ticks"])

    x_scale = create_linear_scale((x_nice.min, x_nice.max), (0, plot_width))
    y_scale = create_linear_scale((y_nice.min, y_nice.max), (plot_height, 0))

    x_ticks = x_nice.ticks()
    y_ticks = y_nice.ticks()

    if callable(color):
        def get_color(c):
            return to_svg_color(color(c.d, c.i))

        series_color = COLORS["series"]
    else:
        get_color = series_color = to_svg_color(color)

    get_radius = (lambda c: radius(c.d, c.i)) if callable(radius) else radius

    elements: dict[str, Any] = {}

    if background:
        elements["rect"] = {"width": width, "height": height, "fill": to_svg_color(background)}

    if title:
        elements["text"] = {
            "x": width / 2,
            "y": LAYOUT["title_baseline"],
            **TITLE,
            "$text": title,
        }

    group: dict[str, Any] = {"transform": f"translate({stringify(m.left)}, {stringify(m.top)})"}
    groups: list[dict] = []

    if y_cfg is not None and y_cfg.grid is not False:
        groups.append({
            "line": {
                "$each": y_ticks,
                "x1": 0,
                "y1": lambda c: y_scale(c.d),
                "x2": plot_width,
                "y2": lambda c: y_scale(c.d),
                **GRID_LINE,
            },
        })

    if x_cfg is not None and x_cfg.grid:
        groups.append({
            "line": {
                "$each": x_ticks,
                "x1": lambda c: x_scale(c.d),
                "y1": 0,
                "x2": lambda c: x_scale(c.d),
                "y2": plot_height,
                **GRID_LINE,
            },
        })

    if groups:
        group["g"] = groups

    if kind == "scatter":
        group["circle"] = {
            "$each": data,
            "cx": lambda c: x_scale(xs[c.i]),
            "cy": lambda c: y_scale(ys[c.i]),
            "r": get_radius,
            "fill": get_color,
        }
    elif kind in ("line", "area"):
        points = [(x_scale(px), y_scale(py)) for px, py in zip(xs, ys)]
        line_path = " ".join(
            f"{'M' if i == 0 else 'L'} {stringify(px)} {stringify(py)}"
            for i, (px, py) in enumerate(points)
        )
        stroke = {
            "d": line_path,
            "fill": "none",
            "stroke": series_color,
            "stroke-width": LAYOUT["line_width"],
        }
        if kind == "area":
            baseline = stringify(plot_height)
            area_path = (
                f"{line_path} L {stringify(points[-1][0])} {baseline}"
                f" L {stringify(points[0][0])} {baseline} Z"
            )
            group["path"] = [
                {"d": area_path, "fill": series_color, "opacity": LAYOUT["area_opacity"]},
                stroke,
            ]
        else:
            group["path"] = {**stroke, "stroke-linecap": "round", "stroke-linejoin": "round"}

        group["circle"] = {
            "$each": data,
            "cx": lambda c: x_scale(xs[c.i]),
            "cy": lambda c: y_scale(ys[c.i]),
            "r": LAYOUT["dot_radius"],
            "fill": series_color,
        }
    else:
        bar_width = max(1.0, plot_width / len(data) * LAYOUT["bar_fill"])
        zero = y_scale(0)
        group["rect"] = {
            "$each": data,
            "x": lambda c: x_scale(xs[c.i]) - bar_width / 2,
            "y": lambda c: min(y_scale(ys[c.i]), zero),
            "width": bar_width,
            "height": lambda c: abs(y_scale(ys[c.i]) - zero),
            "fill": get_color,
            "rx": LAYOUT["bar_corner"],
        }

    tick = LAYOUT["tick_length"]

    if x_cfg is not None:
        x_format = x_cfg.format or default_format
        x_group: dict[str, Any] = {
            "transform": f"translate(0, {stringify(plot_height)})",
            "line": {"x1": 0, "y1": 0, "x2": plot_width, "y2": 0, **AXIS_LINE},
            "g": {
                "$each": x_ticks,
                "transform": lambda c: f"translate({stringify(x_scale(c.d))}, 0)",
                "line": {"x1": 0, "y1": 0, "x2": 0, "y2": tick, **TICK_LINE},
                "text": {
                    "x": 0,
                    "y": 18,
                    "text-anchor": "middle",
                    **TICK_LABEL,
                    "$text": lambda c: x_format(c.d),
                },
            },
        }
        if x_cfg.label:
            x_group["text"] = {"x": plot_width / 2, "y": 38, **AXIS_LABEL, "$text": x_cfg.label}
        group.setdefault("g", groups).append(x_group)

    if y_cfg is not None:
        y_format = y_cfg.format or default_format
        y_group: dict[str, Any] = {
            "line": {"x1": 0, "y1": 0, "x2": 0, "y2": plot_height, **AXIS_LINE},
            "g": {
                "$each": y_ticks,
                "transform": lambda c: f"translate(0, {stringify(y_scale(c.d))})",
                "line": {"x1": -tick, "y1": 0, "x2": 0, "y2": 0, **TICK_LINE},
                "text": {
                    "x": -8,
                    "y": 4,
                    "text-anchor": "end",
                    **TICK_LABEL,
                    "$text": lambda c: y_format(c.d),
                },
            },
        }
        if y_cfg.label:
            y_group["text"] = {
                "x": 0,
                "y": 0,
                "transform": f"translate(-40, {stringify(plot_height / 2)}) rotate(-90)",
                **AXIS_LABEL,
                "$text": y_cfg.label,
            }
        group.setdefault("g", groups).append(y_group)

    elements["g"] = group

    return svg(
        {"width": width, "height": height, "style": FONT_STYLE, **elements},
        pretty=pretty,
    )


def save(
    markup: str,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Write SVG markup to static/img/charts/ (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _CHARTS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    path.write_text(markup, encoding="utf-8")
    return path


def _series(
    kind: ChartKind,
    x: ArrayLike,
    y: ArrayLike,
    title: str | None,
    xlabel: str | None,
    ylabel: str | None,
    filename: str | None,
    output_dir: str | Path | None,
    kwargs: dict[str, Any],
) -> str:
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.shape != y_arr.shape:
        raise ValueError(f"x and y differ in shape: {x_arr.shape} vs {y_arr.shape}")

    kwargs.setdefault("x_axis", Axis(label=xlabel))
    kwargs.setdefault("y_axis", Axis(label=ylabel))
    markup = plot(
        list(zip(x_arr.tolist(), y_arr.tolist())),
        x=lambda d, i: d[0],
        y=lambda d, i: d[1],
        kind=kind,
        title=title,
        **kwargs,
    )

    if filename:
        save(markup, filename, output_dir)

    return markup


def scatter(
    x: ArrayLike,
    y: ArrayLike,
    *,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    **kwargs: Any,
) -> str:
    """Scatter plot of paired x/y values."""
    return _series("scatter", x, y, title, xlabel, ylabel, filename, output_dir, kwargs)


def line(
    x: ArrayLike,
    y: ArrayLike,
    *,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    **kwargs: Any,
) -> str:
    """Line chart with a dot on each point."""
    return _series("line", x, y, title, xlabel, ylabel, filename, output_dir, kwargs)


def area(
    x: ArrayLike,
    y: ArrayLike,
    *,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    **kwargs: Any,
) -> str:
    """Line chart with the area under the line filled in."""
    return _series("area", x, y, title, xlabel, ylabel, filename, output_dir, kwargs)


def bar(
    x: ArrayLike,
    y: ArrayLike,
    *,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    **kwargs: Any,
) -> str:
    """Bar chart; bars are centred on their x value and grow from zero."""
    return _series("bar", x, y, title, xlabel, ylabel, filename, output_dir, kwargs)
