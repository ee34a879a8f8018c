"""Bezier curves over plane points."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import repeat

from .geometry import Curve2, Point2


def binomial(n: int, k: int) -> int:
    """Binomial coefficient ``C(n, k)``; ``k`` must lie in ``[0, n]``."""
    if k < 0 or k > n:
        raise ValueError("k must be in range [0, n]")
    return math.comb(n, k)


def int_power(x: float, n: int) -> float:
    """``x`` raised to a non-negative integer power by repeated multiplication."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return float(math.prod(repeat(x, n), start=1.0))


class BezierCurve2(Curve2):
    """A Bezier curve defined by its control points.

    The curve passes through the last control point at ``t = 0`` and
    through the first one at ``t = 1``.
    """

    def __init__(self, points: Iterable[Point2] = ()) -> None:
        super().__init__()
        self.points: tuple[Point2, ...] = tuple(points)

    def __call__(self, t: float) -> Point2:
        if not self.points:
            raise ValueError("a Bezier curve needs at least one control point")
        n = len(self.points) - 1
        total = Point2()
        for k, point in enumerate(self.points):
            total += point * float(binomial(n, k)) * int_power(t, n - k) * int_power(1 - t, k)
        return total

    def __repr__(self) -> str:
        return f"BezierCurve2({list(self.points)!r})"