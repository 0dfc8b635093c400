"""Three-segment, two-colour LED bar driven one segment at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

SEGMENT_COUNT = 3
LED_BAR_RED_PINS = 0xF0
LED_BAR_GRN_PINS = 0xF0

_TIME_FIELDS = ("seconds", "minutes", "hours", "date", "month", "year")


class AnodeOutputs(NamedTuple):
    """Levels driven onto the upper nibble of the red and green anode ports."""

    red: int
    green: int


@dataclass
class LedTime:
    """Time registers in BCD and the register currently shown on the bar."""

    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    date: int = 0
    month: int = 0
    year: int = 0
    reg_num: int = 0

    def next_register(self) -> None:
        """Select the following register, wrapping after the year."""
        self.reg_num = 0 if self.reg_num >= len(_TIME_FIELDS) - 1 else self.reg_num + 1

    def selected_value(self) -> int:
        """Value of the selected register, or 0 if none is selected."""
        if 0 <= self.reg_num < len(_TIME_FIELDS):
            return getattr(self, _TIME_FIELDS[self.reg_num])
        return 0


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"segment data {value} does not fit in a byte")
    return value


@dataclass
class LedBar:
    """Colour, per-segment data and active segment of the LED bar."""

    red: bool = True
    green: bool = False
    seg_data: list[int] = field(default_factory=lambda: [0] * SEGMENT_COUNT)
    seg_ptr: int = 0

    def __post_init__(self) -> None:
        if len(self.seg_data) != SEGMENT_COUNT:
            raise ValueError(f"expected {SEGMENT_COUNT} segments, got {len(self.seg_data)}")
        self.seg_data = [_check_byte(value) for value in self.seg_data]

    def update_segments(self, seg0: int, seg1: int, seg2: int) -> None:
        """Replace the data of all three segments."""
        self.seg_data = [_check_byte(seg0), _check_byte(seg1), _check_byte(seg2)]

    def change_color(self) -> None:
        """Cycle red, yellow, green and back to red."""
        if self.red and not self.green:
            self.green = True
        elif self.red and self.green:
            self.red = False
        else:
            self.red = True
            self.green = False

    def anode_outputs(self) -> AnodeOutputs:
        """Anode levels for the active segment, its low nibble on the upper pins."""
        level = (self.seg_data[self.seg_ptr] << 4) & LED_BAR_RED_PINS
        return AnodeOutputs(
            red=level if self.red else 0,
            green=level if self.green else 0,
        )

    def cathode_outputs(self) -> tuple[bool, ...]:
        """Cathode levels per segment; only the active one is pulled low."""
        if not 0 <= self.seg_ptr < SEGMENT_COUNT:
            raise ValueError(f"segment {self.seg_ptr} does not exist")
        return tuple(index != self.seg_ptr for index in range(SEGMENT_COUNT))

    def advance_segment(self) -> None:
        """Make the next segment active, wrapping after the last one."""
        self.seg_ptr = self.seg_ptr + 1 if self.seg_ptr <= SEGMENT_COUNT - 2 else 0

    def show_pattern(self, pattern: int) -> None:
        """Spread a 12-bit pattern over the segments, most significant first."""
        self.update_segments((pattern >> 8) & 0xFF, (pattern >> 4) & 0xFF, pattern & 0xFF)

    def show_time_register(self, led_time: LedTime) -> None:
        """Show the selected BCD register: tens on segment 1, units on segment 2."""
        value = led_time.selected_value()
        self.update_segments(0, (value & 0xF0) >> 4, value & 0x0F)