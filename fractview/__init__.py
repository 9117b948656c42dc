"""Interactive Mandelbrot and Julia set viewer, with an XPM image reader."""

__version__ = "0.1.0"

__all__ = ["app", "colornames", "fractal", "hooks", "numparse", "xpm"]