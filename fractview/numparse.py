"""Parsing of the integer and decimal numbers given on the command line."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"
_INT_MIN = -(2**31)


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Read a leading signed integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted and digits are
    read until the first non-digit. The value behaves like a 32-bit integer;
    when it overflows, -1 is returned, except for the value that wraps
    exactly to the smallest 32-bit integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-") and stripped:
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    total = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        digit = ord(char) - ord("0")
        shifted = _wrap32(total * 10)
        candidate = _wrap32(shifted + digit)
        overflowed = total > shifted or total > candidate
        if overflowed and _wrap32(-candidate) != _INT_MIN:
            return -1
        total = candidate
    return _wrap32(total * sign)


def parse_c(text: str) -> float:
    """Parse a decimal number such as ``-0.75`` into a float.

    The whole part and the fractional part are read separately as integers;
    the sign of the whole number is applied to the fractional part.
    """
    whole_text, dot, fraction_text = text.partition(".")
    if not dot:
        return float(atoi(text))
    sign = -1 if text.startswith("-") else 1
    whole = float(atoi(whole_text))
    fraction = float(atoi(fraction_text))
    for _ in fraction_text:
        fraction /= 10
    return whole + fraction * sign