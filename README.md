# fractview

A small interactive viewer for the Mandelbrot set and Julia sets. It opens a
1000×1000 window titled `fract-ol`, colours every pixel by how many
iterations the point takes to leave the square |re| < 2, |im| < 2 (up to
200), and lets you zoom with the mouse wheel.

## Installation

```
pip install .
```

pygame is used for the window and event handling. For the tests:

```
pip install ".[test]"
pytest
```

## Usage

Show the Mandelbrot set:

```
fractview mandelbrot
```

Show the Julia set for the constant `a + bi`:

```
fractview julia -0.8 0.156
```

The first argument may be abbreviated: any prefix of `mandelbrot` or
`julia` is accepted. Any other arguments print a short usage message and
the command exits without opening a window.

The numbers are read as a whole part and a fractional part, each as a plain
integer; exponents such as `1e-3` are not understood.

### Controls

- Scroll up (mouse button 4): zoom in, each step scaling the view by 0.8.
  The step is ignored when the pointer is on the top row or left column.
- Scroll down (mouse button 5): zoom out, each step scaling the view by 1.25.
- Any other mouse button redraws the view unchanged.
- Escape or closing the window: quit.

Zooming is always around the centre of the window, not the pointer. While
zoomed into the Mandelbrot set, the view is also shifted horizontally by
`80 - level` pixels, where `level` is the number of zoom-in steps.

## Library use

The pieces behind the viewer can be used without opening a window:

```python
from fractview.fractal import FractalKind, FractalView, mandelbrot_stability_check

mandelbrot_stability_check(complex(0, 0))   # 200: the point never escapes

view = FractalView(FractalKind.MANDELBROT)
image = view.render(1.0, 0, 200)            # a PixelImage, 200×200
image.get_pixel(100, 100)                   # the pixel's 32-bit colour value
```

- `fractview.fractal`: `mandelbrot_stability_check`, `julia_stability_check`,
  `FractalView` (`colour`, `point_at`, `render`) and `PixelImage`
  (`put_pixel`, `get_pixel`, `to_bytes`).
- `fractview.hooks`: `ZoomController`, whose `on_scroll(button, x, y)`
  updates the zoom level and returns the redrawn image, and `is_escape`.
- `fractview.numparse`: `atoi` and `parse_c`, which turn the command-line
  numbers into values.
- `fractview.xpm`: `xpm_file_to_image` and `xpm_to_image` decode XPM images
  into an `XpmImage` holding `width`, `height` and a `PixelImage`. Pixels
  whose colour is `None` are stored as `0xFF000000`. Malformed data raises
  `XpmError`.
- `fractview.colornames`: `lookup_color` resolves X11 colour names,
  ignoring case, and raises `KeyError` for unknown names.
- `fractview.app`: `parse_arguments`, `usage`, `show_fractal` and `main`.

## What it does not do

The viewer has no colour-scheme options, no way to change the iteration
limit or window size from the command line, and no saving of images to
files. The XPM reader is not used by the viewer itself.