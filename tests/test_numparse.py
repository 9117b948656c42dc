import pytest

from fractview.numparse import atoi, parse_c


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("   -17", -17),
        ("\t\n+5abc", 5),
        ("abc", 0),
        ("", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_reads_leading_integer(text, expected):
    assert atoi(text) == expected


def test_atoi_overflow_returns_minus_one():
    assert atoi("99999999999") == -1
    assert atoi("-99999999999") == -1


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_stops_at_inner_whitespace():
    assert atoi("12 34") == 12


def test_parse_c_integer():
    assert parse_c("3") == 3.0
    assert parse_c("-7") == -7.0


def test_parse_c_negative_fraction_with_zero_whole():
    assert parse_c("-0.5") == -0.5


def test_parse_c_mixed():
    assert parse_c("-1.25") == -1.25
    assert parse_c("2.5") == 2.5


def test_parse_c_small_fraction():
    assert parse_c("0.285") == pytest.approx(0.285)
    assert parse_c("0.01") == pytest.approx(0.01)


def test_parse_c_empty_fraction():
    assert parse_c("1.") == 1.0


def test_parse_c_sign_symmetry():
    for text in ("0.4", "1.75", "3.125"):
        assert parse_c("-" + text) == pytest.approx(-parse_c(text))