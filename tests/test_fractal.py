import pytest

from fractview.fractal import (
    BASE_COLOUR,
    COLOUR_STEP,
    MAX_ITERATIONS,
    FractalKind,
    FractalView,
    PixelImage,
    julia_stability_check,
    mandelbrot_stability_check,
)


def test_mandelbrot_origin_is_stable():
    assert mandelbrot_stability_check(0j) == MAX_ITERATIONS


def test_mandelbrot_far_point_escapes_after_one_step():
    assert mandelbrot_stability_check(complex(2, 0)) == 1


def test_julia_outside_start_escapes_immediately():
    assert julia_stability_check(complex(3, 0), 0j) == 0
    assert julia_stability_check(complex(0, -2), 0j) == 0


def test_julia_inside_unit_disc_with_zero_c_is_stable():
    assert julia_stability_check(complex(0.5, 0.25), 0j) == MAX_ITERATIONS


@pytest.mark.parametrize("point", [complex(-0.75, 0.1), complex(0.3, 0.6), complex(1.5, -1.5)])
def test_counts_are_within_range(point):
    assert 0 <= mandelbrot_stability_check(point) <= MAX_ITERATIONS
    assert 0 <= julia_stability_check(point, complex(-0.8, 0.156)) <= MAX_ITERATIONS


def test_colour_of_stable_point_is_black():
    view = FractalView(FractalKind.MANDELBROT)
    assert view.colour(0j) == 0


def test_colour_of_escaped_julia_point_is_base():
    view = FractalView(FractalKind.JULIA, complex(0.1, 0.1))
    assert view.colour(complex(3, 3)) == BASE_COLOUR


def test_julia_colour_uses_constant():
    point = complex(0.3, 0.2)
    c = complex(-0.4, 0.6)
    view = FractalView(FractalKind.JULIA, c)
    assert view.colour(point) == BASE_COLOUR - julia_stability_check(point, c) * COLOUR_STEP


def test_pixel_round_trip():
    image = PixelImage(4, 3)
    image.put_pixel(3, 2, 0xABCDEF)
    assert image.get_pixel(3, 2) == 0xABCDEF
    assert image.get_pixel(0, 0) == 0


def test_pixel_bytes_are_little_endian_rows():
    image = PixelImage(2, 2)
    image.put_pixel(1, 0, 0x00112233)
    data = image.to_bytes()
    assert len(data) == 16
    assert data[4:8] == b"\x33\x22\x11\x00"


def test_pixel_out_of_bounds():
    image = PixelImage(2, 2)
    with pytest.raises(IndexError):
        image.put_pixel(2, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_pixel_image_rejects_empty_size():
    with pytest.raises(ValueError):
        PixelImage(0, 5)


def test_point_at_window_centre_is_origin():
    view = FractalView(FractalKind.MANDELBROT)
    assert view.point_at(500, 500, 1.0, 0) == 0j


def test_point_at_left_edge():
    view = FractalView(FractalKind.MANDELBROT)
    assert view.point_at(0, 500, 1.0, 0).real == pytest.approx(-2.0)


def test_point_at_scales_with_modifier():
    view = FractalView(FractalKind.JULIA)
    base = view.point_at(120, 870, 1.0, 0)
    zoomed = view.point_at(120, 870, 0.5, 0)
    assert zoomed.real == pytest.approx(base.real * 0.5)
    assert zoomed.imag == pytest.approx(base.imag * 0.5)


def test_point_at_offset_moves_only_real_part():
    view = FractalView(FractalKind.MANDELBROT)
    plain = view.point_at(300, 400, 0.8, 0)
    shifted = view.point_at(300, 400, 0.8, 79)
    assert shifted.imag == plain.imag
    assert shifted.real > plain.real


def test_render_centre_pixel_of_mandelbrot():
    image = FractalView(FractalKind.MANDELBROT).render(1.0, 0, 10)
    assert (image.width, image.height) == (10, 10)
    assert image.get_pixel(5, 5) == 0


def test_render_pixels_are_palette_colours():
    palette = {BASE_COLOUR - n * COLOUR_STEP for n in range(MAX_ITERATIONS + 1)}
    image = FractalView(FractalKind.JULIA, complex(-0.8, 0.156)).render(1.0, 0, 6)
    for x in range(6):
        for y in range(6):
            assert image.get_pixel(x, y) in palette


def test_render_rejects_non_positive_size():
    with pytest.raises(ValueError):
        FractalView(FractalKind.MANDELBROT).render(1.0, 0, 0)