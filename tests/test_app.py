import pytest

from fractview.app import FractalSpec, main, parse_arguments, usage
from fractview.fractal import FractalKind
from fractview.numparse import parse_c


def test_mandelbrot():
    assert parse_arguments(["mandelbrot"]) == FractalSpec(FractalKind.MANDELBROT, 0j)


@pytest.mark.parametrize("name", ["m", "mand", ""])
def test_mandelbrot_prefixes(name):
    assert parse_arguments([name]).kind is FractalKind.MANDELBROT


def test_julia():
    spec = parse_arguments(["julia", "-0.8", "0.156"])
    assert spec.kind is FractalKind.JULIA
    assert spec.c.real == pytest.approx(-0.8)
    assert spec.c.imag == pytest.approx(0.156)


def test_julia_matches_parse_c():
    spec = parse_arguments(["j", "1", "-0.5"])
    assert spec.c == complex(parse_c("1"), parse_c("-0.5"))


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["mandelbrots"],
        ["julia"],
        ["julia", "1"],
        ["mandelbrot", "1", "2"],
        ["mandelbrot", "extra"],
        ["juliaset", "1", "2"],
    ],
)
def test_invalid_arguments(argv):
    with pytest.raises(ValueError):
        parse_arguments(argv)


def test_usage_text():
    text = usage()
    assert "invalid parameters" in text
    assert "'mandelbrot': display the mandelbrot set" in text
    assert "'julia' 'a' 'b': display the julia set for the point a + bi" in text


def test_main_prints_usage(capsys):
    assert main(["nope"]) == 0
    assert capsys.readouterr().out == usage()