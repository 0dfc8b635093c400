"""Fixed-size ring buffer of 16-bit samples with a trailing-window average."""

from __future__ import annotations

from dataclasses import dataclass, field

RING_BUF_SIZE = 16
_MAX_SIZE = 254
_U16_MASK = 0xFFFF


@dataclass
class RingBuffer:
    """Ring of unsigned 16-bit values; ``head`` indexes the newest sample."""

    size: int = RING_BUF_SIZE
    data: list[int] = field(init=False, repr=False)
    head: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not 1 <= self.size <= _MAX_SIZE:
            raise ValueError(f"ring size must be between 1 and {_MAX_SIZE}, got {self.size}")
        self.data = [0] * self.size

    def push(self, value: int) -> None:
        """Advance the head and store ``value`` there, wrapping at the end."""
        if not 0 <= value <= _U16_MASK:
            raise ValueError(f"value {value} does not fit in 16 bits")
        self.head = (self.head + 1) % self.size
        self.data[self.head] = value

    def average(self, window: int) -> float:
        """Average of the newest ``window`` samples, counting back from the head.

        At most ``size`` samples are summed, yet the sum is always divided by
        the requested window.  The running sum wraps at 16 bits.
        """
        if not 1 <= window <= 0xFF:
            raise ValueError(f"window must be between 1 and 255, got {window}")
        count = min(window, self.size)
        total = sum(self.data[(self.head - back) % self.size] for back in range(count))
        return (total & _U16_MASK) / window