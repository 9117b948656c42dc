"""Escape-time fractals and the pixel image they are drawn into."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

MAX_ITERATIONS = 200
ESCAPE_BOUND = 2.0
WINDOW_SIZE = 1000
VIEW_WIDTH = 4.0
BASE_COLOUR = 16711600
COLOUR_STEP = 83558

_PIXEL = struct.Struct("<I")


class FractalKind(enum.IntEnum):
    """The family of fractal a view draws."""

    JULIA = 0
    MANDELBROT = 1


def _escape_count(z: complex, c: complex) -> int:
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    count = 0
    bound = ESCAPE_BOUND
    while count < MAX_ITERATIONS and -bound < zr < bound and -bound < zi < bound:
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        count += 1
    return count


def mandelbrot_stability_check(point: complex) -> int:
    """Count iterations of z -> z*z + point, from z = 0, before z leaves the box."""
    return _escape_count(0j, point)


def julia_stability_check(point: complex, c: complex) -> int:
    """Count iterations of z -> z*z + c, from z = point, before z leaves the box."""
    return _escape_count(point, c)


@dataclass
class PixelImage:
    """A width x height image of 32-bit pixels stored as little-endian words."""

    width: int
    height: int
    _data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        self._data = bytearray(self.width * self.height * _PIXEL.size)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y * self.width + x) * _PIXEL.size

    def put_pixel(self, x: int, y: int, colour: int) -> None:
        """Store ``colour`` (0x00RRGGBB) at column ``x``, row ``y``."""
        _PIXEL.pack_into(self._data, self._offset(x, y), colour & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at column ``x``, row ``y``."""
        return _PIXEL.unpack_from(self._data, self._offset(x, y))[0]

    def to_bytes(self) -> bytes:
        """Return the pixel data row by row."""
        return bytes(self._data)


@dataclass(frozen=True)
class FractalView:
    """A fractal of a given kind, with the constant used by Julia sets."""

    kind: FractalKind
    c: complex = 0j

    def colour(self, point: complex) -> int:
        """Return the colour of the pixel showing ``point``."""
        if self.kind is FractalKind.MANDELBROT:
            count = mandelbrot_stability_check(point)
        else:
            count = julia_stability_check(point, self.c)
        return BASE_COLOUR - count * COLOUR_STEP

    def point_at(self, x: int, y: int, modifier: float, offset: int) -> complex:
        """Return the complex point shown at pixel (x, y) of the window."""
        return self._map_point(x, y, modifier, offset, WINDOW_SIZE)

    @staticmethod
    def _map_point(x: int, y: int, modifier: float, offset: int, size: int) -> complex:
        half = size / 2
        scale = VIEW_WIDTH / size
        real = (float(x) - half + offset / modifier) * scale * modifier
        imaginary = (float(y) - half) * scale * modifier
        return complex(real, imaginary)

    def render(
        self, modifier: float = 1.0, offset: int = 0, size: int = WINDOW_SIZE
    ) -> PixelImage:
        """Draw the fractal into a new square image of ``size`` pixels."""
        if size <= 0:
            raise ValueError(f"image size must be positive, not {size}")
        image = PixelImage(size, size)
        for x in range(size):
            for y in range(size):
                point = self._map_point(x, y, modifier, offset, size)
                image.put_pixel(x, y, self.colour(point))
        return image