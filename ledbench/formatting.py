"""Compact text rendering of readings with two truncated decimal places."""

from __future__ import annotations

import math
import struct

_U16_LIMIT = 0x10000


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _reverse_digits(number: int) -> int:
    """Reverse the decimal digits of ``number``, wrapping at 16 bits."""
    reversed_number = 0
    while number > 0:
        reversed_number = (reversed_number * 10 + number % 10) & 0xFFFF
        number //= 10
    return reversed_number


def _emit(reversed_number: int) -> str:
    """Digits produced by peeling the reversed number from its low end."""
    return str(reversed_number)[::-1] if reversed_number else ""


def format_two_places(value: float) -> str:
    """Render ``value`` with its fractional part truncated to two places.

    Arithmetic is done in single precision.  Digits are produced by reversing
    the integer and fractional parts, so zeros lost in the reversal are not
    restored beyond a single trailing zero of the integer part.
    """
    data = _f32(value)
    if math.isnan(data) or abs(data) >= _U16_LIMIT:
        raise ValueError(f"{value!r} cannot be formatted")

    sign = ""
    if data < 0:
        sign = "-"
        data = -data

    int_part = int(data)
    whole = _emit(_reverse_digits(int_part))
    if int_part % 10 == 0:
        whole += "0"

    frac_part = int(_f32(_f32(data - int_part) * 100))
    fraction = _emit(_reverse_digits(frac_part)) or "0"

    return f"{sign}{whole}.{fraction}"