"""Plane points and the abstract parametric curve."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2:
    """A point (or vector) in the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance2(self, other: Point2 | None = None) -> float:
        """Squared distance to ``other`` (the origin by default)."""
        other = other if other is not None else Point2()
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def distance(self, other: Point2 | None = None) -> float:
        """Euclidean distance to ``other`` (the origin by default)."""
        return math.sqrt(self.distance2(other))

    def __neg__(self) -> Point2:
        return Point2(-self.x, -self.y)

    def __add__(self, other: Point2) -> Point2:
        if not isinstance(other, Point2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2) -> Point2:
        if not isinstance(other, Point2):
            return NotImplemented
        return Point2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point2:
        if isinstance(k, Point2):
            return NotImplemented
        return Point2(self.x * k, self.y * k)

    def __rmul__(self, k: float) -> Point2:
        return self.__mul__(k)

    def __truediv__(self, k: float) -> Point2:
        if isinstance(k, Point2):
            return NotImplemented
        return Point2(self.x / k, self.y / k)

    def __str__(self) -> str:
        return f" {{x: {self.x:g}, y: {self.y:g}}}"


@dataclass
class CurveMetainfo:
    """Bookkeeping attached to a curve.

    ``quarter`` holds bit flags: the low two bits for x (below / above the
    middle), the next two for y.
    """

    quarter: int = 0b0000


class Curve2(ABC):
    """A parametric plane curve evaluated by calling it with ``t``."""

    def __init__(self) -> None:
        self.meta = CurveMetainfo()

    @abstractmethod
    def __call__(self, t: float) -> Point2:
        """Return the point of the curve at parameter ``t``."""