"""Keyboard and mouse handling for the fractal window."""

from __future__ import annotations

from dataclasses import dataclass

from fractview.fractal import WINDOW_SIZE, FractalKind, FractalView, PixelImage

ESCAPE_KEYCODE = 53
SCROLL_IN_BUTTON = 4
SCROLL_OUT_BUTTON = 5
ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.25
MANDELBROT_DRIFT = 80


def is_escape(keycode: int) -> bool:
    """Return True if ``keycode`` is the key that closes the window."""
    return keycode == ESCAPE_KEYCODE


@dataclass
class ZoomController:
    """Tracks the zoom level of a view and redraws it on scroll events."""

    view: FractalView
    size: int = WINDOW_SIZE
    level: int = 0

    @property
    def modifier(self) -> float:
        """Scale factor of the current zoom level."""
        factor = ZOOM_IN_FACTOR if self.level > 0 else ZOOM_OUT_FACTOR
        modifier = 1.0
        for _ in range(abs(self.level)):
            modifier *= factor
        return modifier

    @property
    def offset(self) -> int:
        """Horizontal pixel drift applied when zooming into a Mandelbrot set."""
        if self.level > 0 and self.view.kind is FractalKind.MANDELBROT:
            return MANDELBROT_DRIFT - self.level
        return 0

    def on_scroll(self, button: int, x: int, y: int) -> PixelImage:
        """Apply a mouse button event at (x, y) and return the redrawn image."""
        if button == SCROLL_IN_BUTTON and x and y:
            self.level += 1
        elif button == SCROLL_OUT_BUTTON:
            self.level -= 1
        return self.view.render(self.modifier, self.offset, self.size)