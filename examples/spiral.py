"""Example: Fibonacci spiral of dots placed at the golden angle."""

import numpy as np

import timberline_svg as ts

count = 200
golden_angle = np.pi * (3 - np.sqrt(5))

i = np.arange(count)
radius = np.sqrt(i) * 8
points = [
    {"x": 200 + r * np.cos(a), "y": 200 + r * np.sin(a), "size": 2 + n / count * 4, "hue": n / count * 360}
    for n, (r, a) in enumerate(zip(radius, i * golden_angle))
]

spiral = ts.svg({
    "width": 400,
    "height": 400,
    "style": "background: #1a1a2e;",
    "circle": {
        "$each": points,
        "cx": lambda c: round(c.d["x"], 2),
        "cy": lambda c: round(c.d["y"], 2),
        "r": lambda c: c.d["size"],
        "fill": lambda c: f"hsl({c.d['hue']:.0f}, 80%, 60%)",
        "opacity": lambda c: 0.5 + c.i / count * 0.5,
    },
}, pretty=True)

ts.save(spiral, "spiral.svg")
