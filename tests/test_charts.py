"""Tests for chart assembly."""

import re
from datetime import datetime, timedelta

import numpy as np
import pytest

import timberline_svg as ts
from timberline_svg.charts import Axis, Margin, default_format, plot, save
from timberline_svg.style import to_svg_color

SAMPLE = [
    {"x": 0, "y": 10},
    {"x": 10, "y": 20},
    {"x": 20, "y": 15},
    {"x": 30, "y": 25},
]


def chart(**kwargs):
    kwargs.setdefault("width", 400)
    kwargs.setdefault("height", 300)
    return plot(
        kwargs.pop("data", SAMPLE),
        x=lambda d, i: d["x"],
        y=lambda d, i: d["y"],
        **kwargs,
    )


def count(markup, pattern):
    return len(re.findall(pattern, markup))


class TestBasics:
    def test_dimensions(self):
        result = chart()
        assert result.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="400" height="300"')
        assert result.endswith("</svg>")

    def test_theme_defaults(self):
        result = plot(SAMPLE, x=lambda d, i: d["x"], y=lambda d, i: d["y"])
        assert 'width="680" height="400"' in result
        assert 'style="font-family: system-ui, sans-serif;"' in result

    def test_pretty(self):
        assert "\n  <g" in chart(pretty=True)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="unknown chart kind"):
            chart(kind="pie")

    def test_empty_data(self):
        with pytest.raises(ValueError):
            chart(data=[])

    def test_non_finite_values(self):
        with pytest.raises(ValueError, match="finite"):
            chart(data=[{"x": 0, "y": float("nan")}])

    def test_single_point(self):
        result = chart(data=[{"x": 1, "y": 1}])
        assert count(result, "<circle") == 1

    def test_extent_near_float_limit(self):
        result = chart(data=[{"x": 0, "y": -1e308}, {"x": 1, "y": 1e308}])
        assert count(result, "<circle") == 2
        assert re.search(r"\b(inf|nan)\b", result) is None

    def test_datetime_x(self):
        start = datetime(2024, 1, 1)
        days = [{"t": start + timedelta(days=n), "v": n * n} for n in range(5)]
        result = plot(days, x=lambda d, i: d["t"], y=lambda d, i: d["v"])
        assert count(result, "<circle") == 5


class TestKinds:
    def test_scatter(self):
        result = chart(kind="scatter")
        assert count(result, "<circle") == len(SAMPLE)
        assert 'fill="steelblue"' in result

    def test_line(self):
        result = chart(kind="line")
        assert count(result, "<path") == 1
        assert 'd="M 0 ' in result
        assert 'stroke-linejoin="round"' in result
        assert count(result, "<circle") == len(SAMPLE)

    def test_area(self):
        result = chart(kind="area")
        assert count(result, "<path") == 2
        assert 'opacity="0.3"' in result
        assert " Z\"" in result

    def test_bar(self):
        result = chart(kind="bar")
        assert count(result, "<rect") == len(SAMPLE)
        assert 'rx="2"' in result

    def test_bar_starts_at_zero(self):
        zero_tick = 'text-anchor="end" font-size="11" fill="#666">0</text>'
        assert zero_tick in chart(kind="bar")
        assert zero_tick not in chart(kind="scatter")


class TestAxes:
    def test_ticks_use_nice_values(self):
        result = chart()
        for label in ("0", "10", "20", "30"):
            assert f">{label}</text>" in result
        assert ">25</text>" in result

    def test_y_axis_ticks(self):
        assert 'x1="-5"' in chart()

    def test_y_grid_on_by_default(self):
        assert 'stroke="#e0e0e0"' in chart()

    def test_grids_off(self):
        result = chart(y_axis={"grid": False})
        assert 'stroke="#e0e0e0"' not in result

    def test_x_grid_opt_in(self):
        without = count(chart(), 'stroke="#e0e0e0"')
        with_x = count(chart(x_axis=Axis(grid=True)), 'stroke="#e0e0e0"')
        assert with_x > without

    def test_hide_x_axis(self):
        shown = count(chart(x_axis={}), 'text-anchor="middle"')
        hidden = count(chart(x_axis=False), 'text-anchor="middle"')
        assert hidden < shown

    def test_hide_both_axes(self):
        result = chart(x_axis=False, y_axis=False)
        assert "<text" not in result
        assert "<line" not in result

    def test_labels(self):
        result = chart(x_axis={"label": "X Label"}, y_axis=Axis(label="Y Label"))
        assert "X Label" in result
        assert "Y Label" in result
        assert "rotate(-90)" in result

    def test_custom_format(self):
        result = chart(y_axis={"format": lambda v: f"${v:g}"})
        assert ">$25</text>" in result

    def test_tick_count(self):
        few = count(chart(y_axis={"ticks": 2}), 'text-anchor="end"')
        many = count(chart(y_axis={"ticks": 10}), 'text-anchor="end"')
        assert few < many


class TestStyling:
    def test_static_color(self):
        assert 'fill="red"' in chart(color="red")

    def test_color_function(self):
        result = chart(color=lambda d, i: "red" if i % 2 == 0 else "blue")
        assert 'fill="red"' in result
        assert 'fill="blue"' in result

    def test_rgb_tuple_color(self):
        assert 'fill="#ff0000"' in chart(color=(1.0, 0.0, 0.0))

    def test_static_radius(self):
        assert 'r="10"' in chart(radius=10)

    def test_radius_function(self):
        result = chart(
            data=[{"x": 0, "y": 10, "size": 5}, {"x": 10, "y": 20, "size": 15}],
            radius=lambda d, i: d["size"],
        )
        assert 'r="5"' in result
        assert 'r="15"' in result

    def test_title(self):
        result = chart(title="My Chart")
        assert ">My Chart</text>" in result
        assert 'font-weight="bold"' in result
        assert "translate(45, 40)" in result

    def test_background(self):
        assert '<rect width="400" height="300" fill="#f0f0f0"/>' in chart(background="#f0f0f0")

    def test_margin_mapping(self):
        assert "translate(50, 50)" in chart(margin={"top": 50, "right": 50, "bottom": 50, "left": 50})

    def test_partial_margin(self):
        assert "translate(70, 20)" in chart(margin={"left": 70})

    def test_margin_object(self):
        assert "translate(5, 6)" in chart(margin=Margin(top=6, right=5, bottom=5, left=5))

    def test_unknown_margin_side(self):
        with pytest.raises(ValueError, match="margin"):
            chart(margin={"middle": 3})

    def test_to_svg_color(self):
        assert to_svg_color("hsl(10, 50%, 50%)") == "hsl(10, 50%, 50%)"
        assert to_svg_color(None) is None
        assert to_svg_color((0, 0, 1, 0.5)) == "#0000ff80"


class TestDefaultFormat:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1_500_000, "1.5M"), (2500, "2.5K"), (-1200, "-1.2K"), (40.0, "40"), (0.5, "0.5"), (0, "0")],
    )
    def test_format(self, value, expected):
        assert default_format(value) == expected


class TestConvenience:
    def test_line(self):
        epochs = np.arange(1, 11)
        result = ts.line(epochs, 1 / epochs, title="Training Loss", xlabel="Epoch", ylabel="Loss")
        assert "Training Loss" in result
        assert ">Epoch</text>" in result
        assert count(result, "<path") == 1

    def test_scatter(self):
        assert count(ts.scatter([1, 2, 3], [3, 1, 2]), "<circle") == 3

    def test_area(self):
        assert count(ts.area([1, 2, 3], [3, 1, 2]), "<path") == 2

    def test_bar_saves_file(self, tmp_path):
        result = ts.bar([1, 2, 3], [4, 5, 6], filename="bars.svg", output_dir=tmp_path)
        saved = tmp_path / "bars.svg"
        assert saved.read_text(encoding="utf-8") == result
        assert count(result, "<rect") == 3

    def test_axis_override(self):
        result = ts.line([0, 1], [0, 1], xlabel="ignored", x_axis=False)
        assert "ignored" not in result

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="shape"):
            ts.line([1, 2, 3], [1, 2])


class TestSave:
    def test_creates_directory(self, tmp_path):
        dest = tmp_path / "nested" / "charts"
        path = save("<svg/>", "empty.svg", dest)
        assert path == dest / "empty.svg"
        assert path.read_text(encoding="utf-8") == "<svg/>"
