"""Adaptive subdivision of quadratic Bézier curves."""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[float, float]


def evaluate_quadratic(curve: Sequence[Point], t: float) -> Point:
    """Return the point at parameter ``t`` of the curve (start, control, end)."""
    (x0, y0), (x1, y1), (x2, y2) = curve
    u = 1.0 - t
    a = u * u
    b = 2.0 * u * t
    c = t * t
    return (a * x0 + b * x1 + c * x2, a * y0 + b * y1 + c * y2)


def _needs_split(point: Point, neighbour: Point) -> bool:
    return (
        math.dist(point, neighbour) >= 1.0
        and point[0] != neighbour[0]
        and point[1] != neighbour[1]
    )


def subdivide_quadratic_bezier(curve: Sequence[Point]) -> list[float]:
    """Return sorted parameters that split the curve into segments without visible loss.

    Subdivision around a parameter stops once its neighbours are less than one
    unit away or share an x or y coordinate with it. The result always holds
    0.0, 0.5 and 1.0.
    """
    if len(curve) != 3:
        raise ValueError("a quadratic Bézier curve needs exactly three points")

    parameters = {0.0, 1.0}
    pending = [(0.5, 0.5)]
    while pending:
        t, delta = pending.pop()
        parameters.add(t)
        point = evaluate_quadratic(curve, t)
        half = delta / 2.0
        if _needs_split(point, evaluate_quadratic(curve, t - delta)):
            pending.append((t - half, half))
        if _needs_split(point, evaluate_quadratic(curve, t + delta)):
            pending.append((t + half, half))
    return sorted(parameters)