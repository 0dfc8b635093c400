# ledbench

Plain-Python models of the logic behind a small microcontroller board with an
LED bar, a WS2812 LED stick, a real-time clock, a potentiometer and a
temperature sensor. Everything runs on a desktop with no hardware attached, so
the board's behaviour can be checked in ordinary tests.

## Install

```
pip install .
pip install .[test]   # with pytest
```

## Modules

- `ledbench.ring_buffer.RingBuffer(size=16)`: a ring of unsigned 16-bit
  readings. `push(value)` advances the head and stores the reading;
  `average(window)` sums at most `size` of the newest readings, counting back
  from the head, and divides by the requested `window` (1 to 255). The sum
  wraps at 16 bits.
- `ledbench.formatting.format_two_places(value)`: renders a number in single
  precision with its fractional part truncated to two places, e.g. `21.0` gives
  `"21.0"`. Digits are produced by reversing the integer and fractional parts,
  so some zeros are lost the same way the board loses them. Raises
  `ValueError` for NaN or magnitudes of 65536 and above.
- `ledbench.temperature.adc_to_celsius(adc_value)`: whole degrees Celsius
  (10 to 25) from the sensor lookup table `TEMPERATURE_TABLE`. Counts below
  the table's minimum raise `ValueError`.
- `ledbench.rtc.RtcTime`: the clock's seven BCD time registers.
  `write_register(index)` and `write_bytes()` give the bytes of a write
  transaction (register pointer first, oscillator-start and battery-enable bits
  set); `read_register(index, value)` and `RtcTime.from_registers(registers)`
  fill the time in from a read.
- `ledbench.protocol`: the serial console messages. `MessageId`,
  `parse_message_id(message)`, `parse_time_message(message)` for
  `"t HH:MM:SS MM/DD/YY"`, `parse_window_message(message)` for `"w N"`
  (capped at 16), `pack_time_message(rtc_time)`, `pack_temp_message(temp_text)`,
  `bcd_to_dec(value)` and `dec_to_bcd(value)`.
- `ledbench.led_pattern.LedPattern`: the six 12-bit LED bar animations
  (toggle, up counter, move in/out, down counter, rotate, fill). `step()`
  advances one frame; `next_pattern()` switches to the next animation,
  wrapping after the sixth.
- `ledbench.led_bar.LedBar` and `LedTime`: the bar's three multiplexed
  segments. `LedBar` has `update_segments`, `change_color` (red, yellow,
  green), `anode_outputs`, `cathode_outputs`, `advance_segment`,
  `show_pattern(pattern)` and `show_time_register(led_time)`. `LedTime` has
  `next_register()` and `selected_value()`.
- `ledbench.potentiometer.period_for_reading(reading)`: the pattern timer
  compare value for a potentiometer reading, from 32768 down to 3277 for
  readings above 4096.
- `ledbench.stick_levels.level_pattern(reading)`: the (green, red, blue)
  colours of the first nine stick pixels for a reading, or `None` above 4100.
- `ledbench.led_stick.LedStick(size=10)` and `Pixel`: the WS2812 stick.
  `set_color`, `fill`, `clear`, `encode`, `cycle_single_color`,
  `cycle_whole_color`, `gradient` and `show_level`. Operations that would
  transmit return the SPI byte stream (one byte per colour bit, `0xC0` for a
  one and `0x80` for a zero); `gradient` returns one frame per step.

## Example

```python
from ledbench.ring_buffer import RingBuffer
from ledbench.formatting import format_two_places
from ledbench.protocol import pack_temp_message

buf = RingBuffer()
for reading in (20, 21, 22):
    buf.push(reading)
print(repr(pack_temp_message(format_two_places(buf.average(3)))))
# 'c 21.0\r\n'
```

## What it does not do

The package only models state and produces the bytes and values the board
would use. It does not open serial ports, drive SPI or I2C buses, read ADCs or
run timers, and it has no command-line program; connecting these models to
real hardware is left to the caller.

## Tests

```
pytest
```