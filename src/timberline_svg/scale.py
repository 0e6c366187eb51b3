"""Scale utilities: extent, nice axis bounds, ticks, and linear scales."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable

# Tick values are rounded to this many decimals to hide float artifacts
TICK_PRECISION = 10

# Wider extents are scaled in half units so nice bounds stay finite
HALVING_SPAN = sys.float_info.max / 4


@dataclass(frozen=True)
class NiceRange:
    """Round-number axis bounds and the step between ticks."""

    min: float
    max: float
    step: float

    def ticks(self) -> list[float]:
        return generate_ticks(self.min, self.max, self.step)


@dataclass(frozen=True)
class LinearScale:
    """Affine map from ``domain`` (data space) to ``range`` (pixel space)."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        # halves keep huge domains finite; a zero-width domain divides by one
        return r0 + (value / 2 - d0 / 2) / ((d1 / 2 - d0 / 2) or 0.5) * (r1 - r0)


def extent(values: Iterable[float]) -> tuple[float, float]:
    """Smallest and largest value, or ``(inf, -inf)`` for no values."""
    lo, hi = math.inf, -math.inf
    for v in values:
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    return lo, hi


def nice_number(span: float, rounding: bool) -> float:
    """Snap ``span`` to 1, 2, 5 or 10 times a power of ten.

    With ``rounding`` the nearest nice value is picked (used for steps),
    otherwise the smallest nice value >= ``span`` (used for overall spans).
    """
    if not math.isfinite(span) or span <= 0:
        raise ValueError(f"nice_number() needs a positive, finite span, got {span!r}")

    exponent = math.floor(math.log10(span))
    fraction = span / 10.0 ** exponent

    if rounding:
        if fraction < 1.5:
            nice = 1
        elif fraction < 3:
            nice = 2
        elif fraction < 7:
            nice = 5
        else:
            nice = 10
    else:
        if fraction <= 1:
            nice = 1
        elif fraction <= 2:
            nice = 2
        elif fraction <= 5:
            nice = 5
        else:
            nice = 10

    return nice * 10.0 ** exponent


def nice_scale(lo: float, hi: float, max_ticks: int = 5) -> NiceRange:
    """Widen ``[lo, hi]`` to round bounds with about ``max_ticks`` ticks."""
    if max_ticks < 2:
        raise ValueError(f"max_ticks must be at least 2, got {max_ticks}")
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError(f"extent must be finite, got {lo!r}..{hi!r}")
    if hi < lo:
        raise ValueError(f"empty extent: max {hi!r} < min {lo!r}")
    if hi == lo:
        lo, hi = lo - 0.5, hi + 0.5

    if hi - lo > HALVING_SPAN:
        # doubling back is exact
        half = nice_scale(lo / 2, hi / 2, max_ticks)
        nice_min, nice_max, step = half.min * 2, half.max * 2, half.step * 2
    else:
        span = nice_number(hi - lo, False)
        step = nice_number(span / (max_ticks - 1), True)
        nice_min = math.floor(lo / step) * step
        nice_max = math.ceil(hi / step) * step
        # floor/ceil times step can land an ulp inside the extent
        if nice_min > lo:
            nice_min -= step
        if nice_max < hi:
            nice_max += step

    if math.isinf(nice_min) or math.isinf(nice_max):
        raise ValueError(f"nice bounds of {lo!r}..{hi!r} overflow a float")
    return NiceRange(min=nice_min, max=nice_max, step=step)


def generate_ticks(lo: float, hi: float, step: float) -> list[float]:
    """Evenly spaced ticks from ``lo`` through ``hi`` inclusive."""
    if not step > 0:
        raise ValueError(f"step must be positive, got {step!r}")
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError(f"tick bounds must be finite, got {lo!r}..{hi!r}")

    # walk in half units so ticks next to the float limit stay finite;
    # a quarter step of slack keeps the final tick despite rounding error
    last = hi / 2 + step / 4
    ticks = []
    k = 0
    v = lo / 2
    while v <= last:
        ticks.append(round(v * 2, TICK_PRECISION))
        k += 1
        v = lo / 2 + k * (step / 2)
    return ticks


def create_linear_scale(
    domain: tuple[float, float],
    range_: tuple[float, float],
) -> LinearScale:
    """Scale mapping ``domain`` onto ``range_``."""
    return LinearScale(tuple(domain), tuple(range_))
