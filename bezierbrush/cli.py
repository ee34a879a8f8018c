"""Command line entry point: repaint an image with brush strokes."""

from __future__ import annotations

import argparse
import random
import sys

import numpy as np
from PIL import Image

from .painting import paint


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bezierbrush",
        description="Repaint an image with random Bezier brush strokes.",
    )
    parser.add_argument("input", nargs="?", default="img.jpg", help="image to read")
    parser.add_argument("output", nargs="?", default="modified.jpg", help="JPEG file to write")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random strokes")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load an image, paint it and save the result as JPEG."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)

    try:
        with Image.open(args.input) as source:
            img = np.asarray(source.convert("RGB"), dtype=np.uint8).copy()
    except OSError as exc:
        print(f"cannot load {args.input}: {exc}", file=sys.stderr)
        return 1

    height, width, channels = img.shape
    print(f"Image loaded: {width} x {height} x {channels} channels")

    modified = paint(
        img, True,
        4,
        16, 4,
        0.05, 0.025,
        0.1, 0.1, 0.9,
        7, 6,
        50, 25,
        rng,
    )

    try:
        Image.fromarray(modified).save(args.output, format="JPEG")
    except OSError as exc:
        print(f"cannot save {args.output}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())