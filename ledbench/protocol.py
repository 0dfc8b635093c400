"""Serial console messages: time setting, averaging window and temperature."""

from __future__ import annotations

import re
from enum import Enum

from .rtc import ST_BIT, RtcTime

WINDOW_LIMIT = 16

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class MessageId(str, Enum):
    """First character of a serial message."""

    TIME = "t"
    WINDOW = "w"
    TEMP = "c"
    ERROR = "!"


class _Tokens:
    """Successive tokens of a string, each call with its own delimiter set."""

    def __init__(self, text: str) -> None:
        self._rest = text.split("\0", 1)[0]

    def next(self, delimiters: str) -> str:
        rest = self._rest.lstrip(delimiters)
        if not rest:
            self._rest = ""
            raise ValueError("message ends before all fields were read")
        for position, char in enumerate(rest):
            if char in delimiters:
                self._rest = rest[position + 1:]
                return rest[:position]
        self._rest = ""
        return rest


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _byte_field(tokens: _Tokens, delimiters: str) -> int:
    return _atoi(tokens.next(delimiters)) & 0xFF


def _payload(message: str) -> str:
    if len(message) < 2:
        raise ValueError("message has no payload")
    return message[2:]


def bcd_to_dec(value: int) -> int:
    """Convert a packed BCD byte to its decimal value."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} is not a byte")
    return ((value >> 4) * 10 + (value & 0x0F)) & 0xFF


def dec_to_bcd(value: int) -> int:
    """Convert a byte-sized decimal number to packed BCD."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} is not a byte")
    return (((value // 10) << 4) | (value % 10)) & 0xFF


def parse_message_id(message: str) -> MessageId:
    """Identify a received message; anything unknown is an error."""
    if message[:1] == MessageId.TIME.value:
        return MessageId.TIME
    if message[:1] == MessageId.WINDOW.value:
        return MessageId.WINDOW
    return MessageId.ERROR


def parse_time_message(message: str) -> RtcTime:
    """Parse ``"t HH:MM:SS MM/DD/YY"`` into BCD clock registers.

    The oscillator-start bit is set in the seconds; the weekday is not part
    of the message and stays at zero.
    """
    tokens = _Tokens(_payload(message))
    hours = dec_to_bcd(_byte_field(tokens, ":"))
    minutes = dec_to_bcd(_byte_field(tokens, ":"))
    seconds = dec_to_bcd(_byte_field(tokens, " ")) | ST_BIT
    month = dec_to_bcd(_byte_field(tokens, "/"))
    date = dec_to_bcd(_byte_field(tokens, "/"))
    year = dec_to_bcd(_byte_field(tokens, "\r"))
    return RtcTime(
        seconds=seconds, minutes=minutes, hours=hours, date=date, month=month, year=year
    )


def parse_window_message(message: str) -> int:
    """Parse ``"w N"`` into an averaging window of at most 16 samples."""
    window = _byte_field(_Tokens(_payload(message)), "\r")
    return min(window, WINDOW_LIMIT)


def pack_time_message(rtc_time: RtcTime) -> str:
    """Render the clock as ``"t HH:MM:SS MM/DD/YY\\r\\n"``, dropping control bits."""

    def digits(value: int, high_mask: int) -> str:
        return chr(((value & high_mask) >> 4) + ord("0")) + chr((value & 0x0F) + ord("0"))

    return (
        f"{MessageId.TIME.value} "
        f"{digits(rtc_time.hours, 0x30)}:"
        f"{digits(rtc_time.minutes, 0xF0)}:"
        f"{digits(rtc_time.seconds, 0x70)} "
        f"{digits(rtc_time.month, 0x10)}/"
        f"{digits(rtc_time.date, 0x30)}/"
        f"{digits(rtc_time.year, 0xF0)}\r\n"
    )


def pack_temp_message(temp_text: str) -> str:
    """Render a temperature reading as ``"c <text>\\r\\n"``."""
    return f"{MessageId.TEMP.value} {temp_text.split(chr(0), 1)[0]}\r\n"