"""Repaint images with randomly generated Bezier brush strokes."""

__version__ = "0.1.0"
__all__ = ["bezier", "cli", "geometry", "painting"]