"""Animated 12-bit patterns shown on the segmented LED bar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

PATTERN_COUNT = 6
LAST_PATTERN = PATTERN_COUNT - 1

_U16_MASK = 0xFFFF

TOGGLE_START = 0x0AAA
TOGGLE_MASK = 0x0FFF

COUNTER_MIN = 0x0000
COUNTER_MAX = 0x0FFF

MOVE_EDGES = 0x0801
MOVE_MIDDLE = 0x0060
MOVE_LEFT_MASK = 0x0FC0
MOVE_RIGHT_MASK = 0x003F

ROTATE_RIGHT = 0x0001
ROTATE_LEFT = 0x0800

FILL_START = 0x0800
FILL_END = 0x0FFF


class Direction(IntEnum):
    """Travel direction of the in/out pattern."""

    OUT = 0
    IN = 1


@dataclass
class LedPattern:
    """Current pattern number, its direction and its 16 bits of state."""

    pattern_num: int = 0
    pattern_dir: int = Direction.OUT
    pattern: int = TOGGLE_START

    def __post_init__(self) -> None:
        if not 0 <= self.pattern_num <= 0xFF:
            raise ValueError(f"pattern number {self.pattern_num} does not fit in a byte")
        if not 0 <= self.pattern <= _U16_MASK:
            raise ValueError(f"pattern {self.pattern:#x} does not fit in 16 bits")

    def step(self) -> None:
        """Advance the state of the running pattern by one tick."""
        bits = self.pattern
        if self.pattern_num == 0:
            bits ^= TOGGLE_MASK
        elif self.pattern_num == 1:
            bits = COUNTER_MIN if bits >= COUNTER_MAX else bits + 1
        elif self.pattern_num == 2:
            bits = self._move_in_out(bits)
        elif self.pattern_num == 3:
            bits = COUNTER_MAX if bits <= COUNTER_MIN else bits - 1
        elif self.pattern_num == 4:
            bits = ROTATE_RIGHT if bits >= ROTATE_LEFT else bits << 1
        elif self.pattern_num == 5:
            bits = FILL_START if bits >= FILL_END else (bits >> 1) | FILL_START
        self.pattern = bits & _U16_MASK

    def _move_in_out(self, bits: int) -> int:
        if bits == MOVE_EDGES:
            self.pattern_dir = Direction.IN
        elif bits == MOVE_MIDDLE:
            self.pattern_dir = Direction.OUT

        left = bits & MOVE_LEFT_MASK
        right = bits & MOVE_RIGHT_MASK
        if self.pattern_dir == Direction.OUT:
            left <<= 1
            right >>= 1
        elif self.pattern_dir == Direction.IN:
            left >>= 1
            right <<= 1
        return left | right

    def next_pattern(self) -> None:
        """Switch to the following pattern, wrapping after the last one."""
        self.pattern_num = 0 if self.pattern_num >= LAST_PATTERN else self.pattern_num + 1
        if self.pattern_num == 0:
            self.pattern = TOGGLE_START
        elif self.pattern_num == 1:
            self.pattern = COUNTER_MIN
        elif self.pattern_num == 2:
            self.pattern = MOVE_MIDDLE
            self.pattern_dir = Direction.OUT
        elif self.pattern_num == 3:
            self.pattern = COUNTER_MAX
        elif self.pattern_num == 4:
            self.pattern = ROTATE_RIGHT
        elif self.pattern_num == 5:
            self.pattern = FILL_START