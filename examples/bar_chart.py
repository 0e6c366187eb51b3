"""Example: bar chart built directly from a description."""

import timberline_svg as ts

data = [
    {"label": "Jan", "value": 30},
    {"label": "Feb", "value": 45},
    {"label": "Mar", "value": 28},
    {"label": "Apr", "value": 55},
    {"label": "May", "value": 42},
]

chart = ts.svg({
    "width": 400,
    "height": 250,
    "style": "font-family: system-ui, sans-serif;",

    "rect": {"width": 400, "height": 250, "fill": "#f8f9fa"},

    "g": [
        # Bars
        {
            "transform": "translate(50, 20)",
            "rect": {
                "$each": data,
                "x": lambda c: c.i * 65,
                "y": lambda c: 180 - c.d["value"] * 3,
                "width": 50,
                "height": lambda c: c.d["value"] * 3,
                "fill": "steelblue",
                "rx": 4,
            },
        },
        # Month labels
        {
            "transform": "translate(50, 220)",
            "text": {
                "$each": data,
                "x": lambda c: c.i * 65 + 25,
                "y": 0,
                "text-anchor": "middle",
                "font-size": 12,
                "fill": "#666",
                "$text": lambda c: c.d["label"],
            },
        },
        # Value axis
        {
            "transform": "translate(40, 20)",
            "text": {
                "$each": [0, 20, 40, 60],
                "x": 0,
                "y": lambda c: 180 - c.d * 3,
                "text-anchor": "end",
                "font-size": 10,
                "fill": "#999",
                "$text": lambda c: c.d,
            },
        },
    ],
}, pretty=True)

ts.save(chart, "bar-chart.svg")
