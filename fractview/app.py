"""Command line entry point that shows a fractal in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from fractview.fractal import WINDOW_SIZE, FractalKind, FractalView, PixelImage
from fractview.hooks import ZoomController
from fractview.numparse import parse_c

WINDOW_TITLE = "fract-ol"


@dataclass(frozen=True)
class FractalSpec:
    """The fractal requested on the command line."""

    kind: FractalKind
    c: complex = 0j


def usage() -> str:
    """Return the message shown for invalid arguments."""
    return (
        "\ninvalid parameters\n\n"
        "valid parameters include:\n"
        "'mandelbrot': display the mandelbrot set\n"
        "'julia' 'a' 'b': display the julia set for the point a + bi\n\n"
    )


def parse_arguments(argv: Sequence[str]) -> FractalSpec:
    """Turn command line arguments into a fractal spec.

    The fractal name may be abbreviated to any prefix. Raises ValueError when
    the arguments match neither form.
    """
    if len(argv) == 1 and "mandelbrot".startswith(argv[0]):
        return FractalSpec(FractalKind.MANDELBROT, 0j)
    if len(argv) == 3 and "julia".startswith(argv[0]):
        return FractalSpec(FractalKind.JULIA, complex(parse_c(argv[1]), parse_c(argv[2])))
    raise ValueError(f"invalid parameters: {list(argv)!r}")


def _to_rgb(image: PixelImage) -> bytes:
    data = image.to_bytes()
    rgb = bytearray(len(data) // 4 * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def _blit(pygame, screen, image: PixelImage) -> None:
    # Pixels are stored column-major relative to the window: x is the column.
    surface = pygame.image.frombuffer(_to_rgb(image), (image.width, image.height), "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def show_fractal(kind: FractalKind, c: complex) -> None:
    """Open a window showing the fractal and run until it is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        view = FractalView(kind, c)
        zoom = ZoomController(view)
        _blit(pygame, screen, view.render(1.0, 0, WINDOW_SIZE))
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return
            if event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                _blit(pygame, screen, zoom.on_scroll(event.button, x, y))
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer with the given arguments; print usage if they are invalid."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        spec = parse_arguments(args)
    except ValueError:
        print(usage(), end="")
        return 0
    show_fractal(spec.kind, spec.c)
    return 0