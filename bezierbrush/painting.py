"""Repaint an image with randomly generated Bezier brush strokes.

Images are ``numpy`` arrays of shape ``(height, width, channels)`` holding
``uint8`` samples; only 3 (RGB) and 4 (RGBA) channels can be painted.
Positions come in two systems: ``xy`` in pixels and ``uv`` normalised to
the image size.
"""

from __future__ import annotations

import math
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from .bezier import BezierCurve2
from .geometry import Curve2, Point2

_SUPPORTED_CHANNELS = (3, 4)
_default_rng = random.Random()


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components normalised to ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def from_pixel(cls, pixel) -> Color:
        """Build a colour from 3 or 4 byte samples; RGB pixels are opaque."""
        values = [float(v) / 255.0 for v in pixel]
        if len(values) == 3:
            values.append(1.0)
        if len(values) != 4:
            raise ValueError(f"cannot take color from pixel with {len(values)} channels")
        return cls(*values)

    def to_pixel(self, channels: int = 4) -> tuple[int, ...]:
        """Byte samples of this colour, clamped to ``[0, 255]``."""
        if channels not in _SUPPORTED_CHANNELS:
            raise ValueError(f"cannot convert color to pixel with {channels} channels")
        components = (self.r, self.g, self.b, self.a)[:channels]
        return tuple(int(min(255, max(0, round(c * 255.0)))) for c in components)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, k: float) -> Color:
        if isinstance(k, Color):
            return NotImplemented
        return Color(self.r * k, self.g * k, self.b * k, self.a * k)

    def __rmul__(self, k: float) -> Color:
        return self.__mul__(k)

    def __truediv__(self, k: float) -> Color:
        if isinstance(k, Color):
            return NotImplemented
        return Color(self.r / k, self.g / k, self.b / k, self.a / k)


def _dimensions(img: np.ndarray) -> tuple[int, int, int]:
    if img.ndim != 3:
        raise ValueError("image must be an array of shape (height, width, channels)")
    height, width, channels = img.shape
    return width, height, channels


def _check_channels(channels: int, action: str) -> None:
    if channels not in _SUPPORTED_CHANNELS:
        raise ValueError(f"Cannot {action} image with number of channels: {channels}")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def xy_to_uv(img: np.ndarray, xy: Point2) -> Point2:
    """Pixel coordinates to coordinates normalised by the image size."""
    width, height, _ = _dimensions(img)
    return Point2(xy.x / width, xy.y / height)


def uv_to_xy(img: np.ndarray, uv: Point2) -> Point2:
    """Normalised coordinates to pixel coordinates."""
    width, height, _ = _dimensions(img)
    return Point2(uv.x * width, uv.y * height)


def xy_to_int(img: np.ndarray, xy: Point2) -> tuple[int, int]:
    """Nearest pixel index to ``xy``, clamped to the image."""
    width, height, _ = _dimensions(img)
    ix = min(max(_round_half_away(xy.x), 0), width - 1)
    iy = min(max(_round_half_away(xy.y), 0), height - 1)
    return ix, iy


def int_to_xy(img: np.ndarray, ixy: tuple[int, int]) -> Point2:
    """Pixel index to pixel coordinates."""
    ix, iy = ixy
    return Point2(float(ix), float(iy))


def random_uniform(rng: random.Random | None = None) -> float:
    """A uniform random number in ``[0, 1)``."""
    return (rng or _default_rng).random()


def random_color(rng: random.Random | None = None) -> Color:
    """A colour with every component uniform in ``[0, 1)``."""
    rng = rng or _default_rng
    return Color(rng.random(), rng.random(), rng.random(), rng.random())


def random_point(rng: random.Random | None = None) -> Point2:
    """A point with both coordinates uniform in ``[0, 1)``."""
    rng = rng or _default_rng
    return Point2(rng.random(), rng.random())


def get_color_at_uv(img: np.ndarray, uv: Point2) -> Color:
    """Colour of the pixel nearest to normalised position ``uv``."""
    _, _, channels = _dimensions(img)
    _check_channels(channels, "take color from")
    x, y = xy_to_int(img, uv_to_xy(img, uv))
    return Color.from_pixel(img[y, x])


def set_color_at_uv(img: np.ndarray, uv: Point2, color: Color) -> None:
    """Overwrite the pixel nearest to normalised position ``uv``."""
    _, _, channels = _dimensions(img)
    _check_channels(channels, "write color to")
    x, y = xy_to_int(img, uv_to_xy(img, uv))
    img[y, x] = color.to_pixel(channels)


def generate_curve(
    p_count: int,
    middle_deviation: float,
    end_deviation: float,
    rng: random.Random | None = None,
) -> BezierCurve2:
    """A random curve of ``p_count`` control points in normalised space.

    The middle points wander from a random start by steps of up to
    ``middle_deviation``; the end point lies within ``end_deviation`` of
    the start.
    """
    start = random_point(rng)
    points = [start]
    current = start
    for _ in range(p_count - 2):
        current = current + random_point(rng) * middle_deviation
        points.append(current)
    points.append(start + random_point(rng) * end_deviation)
    return BezierCurve2(points)


def generate_curves(
    curve_count: int,
    p_count: int,
    middle_deviation: float,
    end_deviation: float,
    rng: random.Random | None = None,
) -> list[BezierCurve2]:
    """``curve_count`` random curves made by :func:`generate_curve`."""
    return [
        generate_curve(p_count, middle_deviation, end_deviation, rng)
        for _ in range(curve_count)
    ]


def get_color_from_curve(img: np.ndarray, curve: Curve2, samples: int = 100) -> Color:
    """Colour collected along ``curve``.

    ``samples + 1`` evenly spaced points are summed and the sum is divided
    by ``samples``.
    """
    if samples <= 0:
        raise ValueError("samples must be positive")
    total = Color()
    for i in range(samples + 1):
        total = total + get_color_at_uv(img, curve(i / samples))
    return total / samples


def draw_line(
    img: np.ndarray,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    color: Color,
    width: float,
    strength: float,
) -> None:
    """Blend a thick line segment into ``img`` in place.

    Every pixel whose centre lies within ``width / 2`` of the segment
    becomes ``strength * color + (1 - strength) * pixel``.
    """
    img_width, img_height, channels = _dimensions(img)
    _check_channels(channels, "write color to")
    radius = width / 2.0

    xmin = max(math.floor(min(x0, x1) - radius), 0)
    xmax = min(math.ceil(max(x0, x1) + radius), img_width - 1)
    ymin = max(math.floor(min(y0, y1) - radius), 0)
    ymax = min(math.ceil(max(y0, y1) + radius), img_height - 1)
    if xmin > xmax or ymin > ymax:
        return

    ys, xs = np.mgrid[ymin : ymax + 1, xmin : xmax + 1].astype(float)
    dx, dy = x1 - x0, y1 - y0
    length2 = dx * dx + dy * dy
    if length2 == 0:
        t = np.zeros_like(xs)
    else:
        t = np.clip(((xs - x0) * dx + (ys - y0) * dy) / length2, 0.0, 1.0)
    dist2 = (xs - (x0 + t * dx)) ** 2 + (ys - (y0 + t * dy)) ** 2
    mask = dist2 <= radius * radius
    if not mask.any():
        return

    region = img[ymin : ymax + 1, xmin : xmax + 1].astype(float)
    target = np.array(color.to_pixel(channels), dtype=float)
    region[mask] = strength * target + (1.0 - strength) * region[mask]
    img[ymin : ymax + 1, xmin : xmax + 1] = np.clip(np.rint(region), 0, 255).astype(img.dtype)


def draw_curve(
    img: np.ndarray,
    curve: Curve2,
    base_color: Color,
    width: float,
    color_merge: float,
    color_deviation: float,
    color_strength: float,
    samples: int = 100,
    rng: random.Random | None = None,
) -> None:
    """Paint ``curve`` into ``img`` as ``samples`` connected line segments.

    Each segment's colour mixes the colour already under it (weight
    ``color_merge``) with ``base_color`` and adds a random shift scaled by
    ``color_deviation``; ``color_strength`` is how strongly it covers.
    """
    _, _, channels = _dimensions(img)
    _check_channels(channels, "write color to")
    if samples <= 0:
        raise ValueError("samples must be positive")
    prev_uv = curve(0.0)
    for i in range(1, samples + 1):
        uv = curve(i / samples)
        current = get_color_at_uv(img, uv)
        color = (color_merge * current + (1 - color_merge) * base_color) + color_deviation * random_color(rng)
        prev_xy = uv_to_xy(img, prev_uv)
        xy = uv_to_xy(img, uv)
        draw_line(img, prev_xy.x, prev_xy.y, xy.x, xy.y, color, width, color_strength)
        prev_uv = uv


def paint(
    original: np.ndarray,
    verbose: bool,
    threads: int,
    curves_per_100px: int,
    p_count: int,
    middle_deviation: float,
    end_deviation: float,
    color_merge: float,
    color_deviation: float,
    color_strength: float,
    base_width: float,
    width_deviation: float,
    collect_samples: int = 100,
    draw_samples: int = 50,
    rng: random.Random | None = None,
) -> np.ndarray:
    """Return a new image painted with strokes whose colours come from ``original``.

    ``curves_per_100px`` strokes are drawn for every 10x10 pixels, onto a
    blank image of the same shape. Colours are collected in ``threads``
    worker threads; drawing runs in one.
    """
    width, height, channels = _dimensions(original)
    if threads < 1:
        raise ValueError("threads must be at least 1")
    modified = np.zeros_like(original)
    curve_count = width * height * curves_per_100px // (10 * 10)

    if verbose:
        print(f"GENERATING IN {threads} THREADS...")
    curves = generate_curves(curve_count, p_count, middle_deviation, end_deviation, rng)
    if verbose:
        print(f"GENERATED {curve_count} CURVES")

    if verbose:
        print(f"COLLECTING IN {threads} THREADS...")
    with ThreadPoolExecutor(max_workers=threads) as pool:
        colors = list(
            pool.map(lambda curve: get_color_from_curve(original, curve, collect_samples), curves)
        )
    if verbose:
        print("COLLECTED")

    if verbose:
        print("DRAWING IN 1 THREAD...")
    for i, (curve, color) in enumerate(zip(curves, colors)):
        if verbose and i % 10000 == 0:
            print(f"\t{i}/{curve_count}")
        stroke_width = base_width + random_uniform(rng) * width_deviation
        draw_curve(
            modified, curve, color, stroke_width,
            color_merge, color_deviation, color_strength, draw_samples, rng,
        )
    if verbose:
        print("DRAWN")
    return modified