# bezierbrush

bezierbrush repaints a picture so that it looks covered in thousands of short
brush strokes. Each stroke is a random Bezier curve. Its colour is collected
from the pixels the curve passes over in the input image. The strokes are then
drawn onto a blank canvas of the same size. Each stroke's colour is mixed with
what has already been painted under it, and a little random jitter is added.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
bezierbrush [INPUT] [OUTPUT] [--seed N]
```

- `INPUT` is the image to read. It defaults to `img.jpg` and is converted to RGB.
- `OUTPUT` is the JPEG file to write. It defaults to `modified.jpg`.
- `--seed N` seeds the random strokes, so the same seed gives the same picture.

The command prints the image size. It then reports progress through three
stages: generating curves, collecting their colours, and drawing them. It exits
with status 1 if the input cannot be read or the output cannot be written.

The painting settings are fixed on the command line:

| Setting | Value |
| --- | --- |
| Strokes per 10×10 pixels | 16 |
| Control points | 4 |
| Deviations | 0.05 / 0.025 |
| Colour merge / jitter / strength | 0.1 / 0.1 / 0.9 |
| Width | 7 plus up to 6 |
| Samples | 50 for collecting, 25 for drawing |

To use other values, call `paint` from Python.

## Library

- `bezierbrush.geometry`
  - `Point2` is an immutable 2-D point. It supports arithmetic, `distance` and
    `distance2`.
  - `Curve2` is the abstract base for curves that are called with a parameter
    `t`.
- `bezierbrush.bezier`
  - `BezierCurve2` is a Bezier curve built from its control points.
  - `binomial` and `int_power` are the helpers it uses.
- `bezierbrush.painting`
  - `paint` runs the whole process on a `numpy` array of shape
    `(height, width, channels)` with 3 or 4 `uint8` channels. It returns a new
    array.
  - `generate_curve` and `generate_curves` make random strokes.
  - `get_color_from_curve` samples colour along a stroke.
  - `draw_curve` and `draw_line` blend a stroke into an image in place.
  - `Color` is an RGBA colour with components in `[0, 1]`.
  - `get_color_at_uv` and `set_color_at_uv` read and write a single pixel.
  - Coordinate helpers: `xy_to_uv`, `uv_to_xy`, `xy_to_int` and `int_to_xy`.

```python
from bezierbrush.geometry import Point2
from bezierbrush.bezier import binomial

a = Point2(0.0, 0.0)
b = Point2(3.0, 4.0)
print(a.distance(b))   # 5.0
print(binomial(4, 2))  # 6
```

Curves live in normalised `(u, v)` coordinates, with both values running from 0
to 1. When pixels are read or written, positions are rounded to the nearest
pixel and clamped to the image.

### Tuning `paint`

- **Stroke density**: `curves_per_100px`, the number of strokes for every 10×10
  pixels.
- **Stroke shape**:
  - `p_count` is the number of control points.
  - `middle_deviation` is the largest step between successive middle points.
  - `end_deviation` is how far the last point may lie from the first.
- **Colour**:
  - `color_merge` is the weight of the canvas colour under the stroke.
  - `color_deviation` scales the random colour jitter.
  - `color_strength` is how opaquely the stroke covers. At 1 it paints solid
    colour; at 0 it paints nothing.
- **Stroke width**: `base_width` plus a random extra of up to `width_deviation`.
- **Sampling**: `collect_samples` and `draw_samples`, the number of steps along
  each curve when reading colour and when drawing.
- **Threads**: `threads` worker threads collect the colours. Drawing always runs
  in one thread.
- **Reporting**: `verbose` prints progress.

Pass your own `random.Random` as `rng` for reproducible results.