import random

import numpy as np
import pytest

from bezierbrush.bezier import BezierCurve2
from bezierbrush.geometry import Point2
from bezierbrush.painting import (
    Color,
    draw_curve,
    draw_line,
    generate_curve,
    generate_curves,
    get_color_at_uv,
    get_color_from_curve,
    int_to_xy,
    paint,
    random_color,
    random_point,
    random_uniform,
    set_color_at_uv,
    uv_to_xy,
    xy_to_int,
    xy_to_uv,
)


def solid(width, height, pixel):
    img = np.zeros((height, width, len(pixel)), dtype=np.uint8)
    img[:, :] = pixel
    return img


def test_uv_xy_round_trip():
    img = solid(20, 10, (0, 0, 0))
    xy = Point2(5.0, 2.5)
    assert uv_to_xy(img, xy_to_uv(img, xy)) == xy
    assert xy_to_uv(img, Point2(20.0, 10.0)) == Point2(1.0, 1.0)


def test_xy_to_int_clamps_to_image():
    img = solid(20, 10, (0, 0, 0))
    assert xy_to_int(img, Point2(-3.0, 50.0)) == (0, 9)
    assert xy_to_int(img, Point2(25.0, -1.0)) == (19, 0)


def test_xy_to_int_rounds_half_away_from_zero():
    img = solid(20, 10, (0, 0, 0))
    assert xy_to_int(img, Point2(2.5, 3.4)) == (3, 3)


def test_int_to_xy_inverts_xy_to_int():
    img = solid(20, 10, (0, 0, 0))
    assert xy_to_int(img, int_to_xy(img, (7, 4))) == (7, 4)


def test_randoms_are_in_unit_range():
    rng = random.Random(3)
    for _ in range(50):
        assert 0.0 <= random_uniform(rng) < 1.0
        p = random_point(rng)
        assert 0.0 <= p.x < 1.0 and 0.0 <= p.y < 1.0
        c = random_color(rng)
        assert all(0.0 <= v < 1.0 for v in (c.r, c.g, c.b, c.a))


def test_color_pixel_round_trip_and_clamp():
    assert Color.from_pixel((10, 20, 30)).to_pixel(3) == (10, 20, 30)
    assert Color.from_pixel((10, 20, 30)).a == 1.0
    assert Color(2.0, -1.0, 0.5, 1.0).to_pixel(4)[:2] == (255, 0)


def test_color_arithmetic():
    c = Color(0.2, 0.4, 0.6, 0.8)
    assert (c + c) / 2 == c
    assert 0.5 * c == c * 0.5


def test_get_color_at_uv_reads_pixel():
    img = solid(4, 4, (0, 0, 0))
    img[1, 2] = (255, 0, 255)
    assert get_color_at_uv(img, Point2(0.5, 0.25)).to_pixel(3) == (255, 0, 255)


def test_set_then_get_round_trip_rgba():
    img = solid(6, 6, (0, 0, 0, 0))
    color = Color.from_pixel((12, 34, 56, 78))
    set_color_at_uv(img, Point2(0.3, 0.7), color)
    assert get_color_at_uv(img, Point2(0.3, 0.7)) == color


@pytest.mark.parametrize("func", [get_color_at_uv, lambda img, uv: set_color_at_uv(img, uv, Color())])
def test_unsupported_channels_raise(func):
    img = np.zeros((4, 4, 2), dtype=np.uint8)
    with pytest.raises(ValueError):
        func(img, Point2(0.5, 0.5))


def test_generate_curve_shape():
    rng = random.Random(1)
    curve = generate_curve(5, 0.05, 0.025, rng)
    assert len(curve.points) == 5
    start, end = curve.points[0], curve.points[-1]
    assert 0.0 <= start.x < 1.0 and 0.0 <= start.y < 1.0
    assert 0.0 <= end.x - start.x < 0.025
    assert 0.0 <= end.y - start.y < 0.025


def test_generate_curves_count_and_determinism():
    first = generate_curves(6, 4, 0.05, 0.025, random.Random(9))
    second = generate_curves(6, 4, 0.05, 0.025, random.Random(9))
    assert len(first) == 6
    assert [c.points for c in first] == [c.points for c in second]


def test_color_from_curve_on_solid_image_sums_extra_sample():
    img = solid(10, 10, (255, 255, 255))
    curve = generate_curve(4, 0.05, 0.025, random.Random(2))
    color = get_color_from_curve(img, curve, 4)
    assert color.r == pytest.approx(5 / 4)
    assert color.r == color.g == color.b == color.a


def test_draw_line_solid_strength_paints_segment_only():
    img = solid(20, 20, (0, 0, 0))
    draw_line(img, 2.0, 10.0, 17.0, 10.0, Color(1.0, 0.0, 0.0, 1.0), 3.0, 1.0)
    assert tuple(img[10, 2]) == (255, 0, 0)
    assert tuple(img[10, 17]) == (255, 0, 0)
    assert tuple(img[0, 0]) == (0, 0, 0)
    assert tuple(img[18, 10]) == (0, 0, 0)


def test_draw_line_zero_strength_changes_nothing():
    img = solid(10, 10, (40, 50, 60))
    before = img.copy()
    draw_line(img, 0.0, 0.0, 9.0, 9.0, Color(1.0, 1.0, 1.0, 1.0), 4.0, 0.0)
    assert np.array_equal(img, before)


def test_draw_curve_with_base_color_only():
    img = solid(20, 20, (0, 0, 0))
    curve = BezierCurve2([Point2(0.2, 0.5), Point2(0.5, 0.5), Point2(0.8, 0.5)])
    base = Color.from_pixel((0, 255, 0))
    draw_curve(img, curve, base, 2.0, 0.0, 0.0, 1.0, 10, random.Random(0))
    assert tuple(img[10, 10]) == (0, 255, 0)
    assert tuple(img[0, 0]) == (0, 0, 0)


def test_paint_keeps_shape_and_is_deterministic():
    original = solid(10, 10, (200, 100, 50))
    a = paint(original, False, 2, 16, 4, 0.05, 0.025, 0.1, 0.1, 0.9, 2, 1, 10, 5, random.Random(5))
    b = paint(original, False, 2, 16, 4, 0.05, 0.025, 0.1, 0.1, 0.9, 2, 1, 10, 5, random.Random(5))
    assert a.shape == original.shape
    assert np.array_equal(a, b)
    assert a.any()


def test_paint_reports_curve_count(capsys):
    original = solid(10, 10, (10, 10, 10))
    paint(original, True, 1, 16, 3, 0.05, 0.025, 0.1, 0.1, 0.9, 1, 1, 5, 5, random.Random(1))
    assert "GENERATED 16 CURVES" in capsys.readouterr().out


def test_paint_rejects_zero_threads():
    with pytest.raises(ValueError):
        paint(solid(10, 10, (0, 0, 0)), False, 0, 16, 4, 0.05, 0.025, 0.1, 0.1, 0.9, 7, 6)