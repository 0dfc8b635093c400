"""WS2812B LED stick: pixel colours and the SPI byte stream that sets them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .stick_levels import level_pattern

PIX_NUMBER = 10

HIGH_TIDE = 0b11000000
LOW_TIDE = 0b10000000

COLOR_LEVEL = 55
GRADIENT_START = 255

# (green, red, blue) for each step of the colour cycles: red, green, blue, white.
_CYCLE_COLOURS: tuple[tuple[int, int, int], ...] = (
    (0, COLOR_LEVEL, 0),
    (COLOR_LEVEL, 0, 0),
    (0, 0, COLOR_LEVEL),
    (COLOR_LEVEL, COLOR_LEVEL, COLOR_LEVEL),
)


def _check_channel(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} level {value} does not fit in a byte")
    return value


@dataclass(frozen=True)
class Pixel:
    """Colour of one pixel, stored in the stick's green, red, blue order."""

    green: int = 0
    red: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        _check_channel("green", self.green)
        _check_channel("red", self.red)
        _check_channel("blue", self.blue)


def _encode_byte(value: int) -> bytes:
    """One SPI byte per bit, most significant bit first."""
    return bytes(HIGH_TIDE if value & (0x80 >> bit) else LOW_TIDE for bit in range(8))


@dataclass
class LedStick:
    """Pixel colours of the stick and the state of its colour cycles.

    Operations that transmit on the device return the encoded frame.
    """

    size: int = PIX_NUMBER
    pixels: list[Pixel] = field(init=False)
    single_state: int = field(default=0, init=False)
    whole_state: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"stick must have at least one pixel, got {self.size}")
        self.pixels = [Pixel() for _ in range(self.size)]

    def set_color(self, index: int, green: int, red: int, blue: int) -> None:
        """Set the colour of one pixel without transmitting."""
        if not 0 <= index < self.size:
            raise IndexError(f"pixel {index} does not exist")
        self.pixels[index] = Pixel(green, red, blue)

    def fill(self, green: int, red: int, blue: int) -> bytes:
        """Give every pixel the same colour and transmit."""
        colour = Pixel(green, red, blue)
        self.pixels = [colour] * self.size
        return self.encode()

    def clear(self) -> bytes:
        """Turn every pixel off and transmit."""
        return self.fill(0, 0, 0)

    def encode(self) -> bytes:
        """SPI stream for the whole stick: green, red, blue of each pixel."""
        return b"".join(
            _encode_byte(channel)
            for pixel in self.pixels
            for channel in (pixel.green, pixel.red, pixel.blue)
        )

    def cycle_single_color(self) -> bytes:
        """Step the first pixel through red, green, blue, white and transmit."""
        self.single_state += 1
        if 1 <= self.single_state <= len(_CYCLE_COLOURS):
            self.set_color(0, *_CYCLE_COLOURS[self.single_state - 1])
        if self.single_state >= len(_CYCLE_COLOURS):
            self.single_state = 0
        return self.encode()

    def cycle_whole_color(self) -> bytes:
        """Step the whole stick through red, green, blue, white and transmit."""
        self.whole_state += 1
        if 1 <= self.whole_state <= len(_CYCLE_COLOURS):
            self.fill(*_CYCLE_COLOURS[self.whole_state - 1])
        if self.whole_state >= len(_CYCLE_COLOURS):
            self.whole_state = 0
        return self.encode()

    def gradient(self, green: int, red: int, blue: int) -> list[bytes]:
        """Fade the first pixel down from full level, one frame per step.

        Only a colour with exactly one non-zero channel fades; the level is
        always written to the first pixel's green channel.  Any other colour
        produces no frames.
        """
        for name, value in (("green", green), ("red", red), ("blue", blue)):
            _check_channel(name, value)
        if sum(1 for channel in (green, red, blue) if channel) != 1:
            return []
        frames = []
        for level in range(GRADIENT_START, 0, -1):
            self.set_color(0, level, 0, 0)
            frames.append(self.encode())
        return frames

    def show_level(self, reading: int) -> bytes:
        """Show a potentiometer reading as a bar graph and transmit.

        Readings above the last band leave the pixels unchanged.
        """
        pattern = level_pattern(reading)
        if pattern is not None:
            for index, colour in enumerate(pattern):
                self.set_color(index, *colour)
        return self.encode()