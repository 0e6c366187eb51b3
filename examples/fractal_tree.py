"""Example: recursive fractal tree with a gradient definition and leaves."""

import math

import timberline_svg as ts

MAX_DEPTH = 10


def grow(x, y, length, angle, depth, branches):
    if depth > MAX_DEPTH:
        return branches
    x2 = x + length * math.sin(angle)
    y2 = y - length * math.cos(angle)
    branches.append({"x1": x, "y1": y, "x2": x2, "y2": y2, "depth": depth})

    spread = math.pi / 5
    grow(x2, y2, length * 0.72, angle - spread, depth + 1, branches)
    grow(x2, y2, length * 0.72, angle + spread, depth + 1, branches)
    return branches


def branch_color(c):
    t = c.d["depth"] / MAX_DEPTH
    if t < 0.3:
        return "#8b4513"
    if t < 0.6:
        return "#228b22"
    return f"hsl({100 + t * 40:.0f}, 70%, {50 + t * 20:.0f}%)"


branches = grow(200, 380, 80, 0, 0, [])

tree = ts.svg({
    "width": 400,
    "height": 400,
    "defs": {
        "linearGradient": {
            "id": "trunk-gradient",
            "x1": "0%",
            "y1": "100%",
            "x2": "0%",
            "y2": "0%",
            "stop": [
                {"offset": "0%", "stop-color": "#8b4513"},
                {"offset": "60%", "stop-color": "#228b22"},
                {"offset": "100%", "stop-color": "#90ee90"},
            ],
        },
    },
    "line": {
        "$each": branches,
        "x1": lambda c: round(c.d["x1"], 2),
        "y1": lambda c: round(c.d["y1"], 2),
        "x2": lambda c: round(c.d["x2"], 2),
        "y2": lambda c: round(c.d["y2"], 2),
        "stroke": branch_color,
        "stroke-width": lambda c: max(1, 8 - c.d["depth"] * 0.8),
        "stroke-linecap": "round",
    },
    # Leaves at the tips
    "circle": {
        "$each": [b for b in branches if b["depth"] == MAX_DEPTH],
        "cx": lambda c: round(c.d["x2"], 2),
        "cy": lambda c: round(c.d["y2"], 2),
        "r": 3,
        "fill": "#90ee90",
        "opacity": 0.8,
    },
}, pretty=True)

ts.save(tree, "fractal-tree.svg")
