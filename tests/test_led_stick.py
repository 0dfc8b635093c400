import pytest

from ledbench.led_stick import HIGH_TIDE, LOW_TIDE, PIX_NUMBER, LedStick, Pixel


def _pixel_bytes(frame, index):
    return frame[index * 24:(index + 1) * 24]


def test_clear_sends_all_zero_bits():
    stick = LedStick()
    frame = stick.clear()
    assert frame == bytes([LOW_TIDE]) * (PIX_NUMBER * 24)
    assert all(pixel == Pixel(0, 0, 0) for pixel in stick.pixels)


def test_encode_green_first_msb_first():
    stick = LedStick()
    stick.set_color(0, 0x80, 0x01, 0xFF)
    frame = stick.encode()
    first = _pixel_bytes(frame, 0)
    assert first[:8] == bytes([HIGH_TIDE] + [LOW_TIDE] * 7)
    assert first[8:16] == bytes([LOW_TIDE] * 7 + [HIGH_TIDE])
    assert first[16:24] == bytes([HIGH_TIDE] * 8)
    assert _pixel_bytes(frame, 1) == bytes([LOW_TIDE]) * 24


def test_fill_sets_every_pixel():
    stick = LedStick()
    stick.fill(1, 2, 3)
    assert stick.pixels == [Pixel(1, 2, 3)] * PIX_NUMBER


def test_set_color_rejects_bad_index_and_value():
    stick = LedStick()
    with pytest.raises(IndexError):
        stick.set_color(PIX_NUMBER, 0, 0, 0)
    with pytest.raises(ValueError):
        stick.set_color(0, 256, 0, 0)


def test_single_color_cycle():
    stick = LedStick()
    seen = []
    for _ in range(5):
        stick.cycle_single_color()
        seen.append(stick.pixels[0])
    assert seen == [
        Pixel(0, 55, 0),
        Pixel(55, 0, 0),
        Pixel(0, 0, 55),
        Pixel(55, 55, 55),
        Pixel(0, 55, 0),
    ]
    assert stick.pixels[1] == Pixel(0, 0, 0)


def test_whole_color_cycle():
    stick = LedStick()
    stick.cycle_whole_color()
    assert stick.pixels == [Pixel(0, 55, 0)] * PIX_NUMBER
    stick.cycle_whole_color()
    stick.cycle_whole_color()
    stick.cycle_whole_color()
    assert stick.pixels == [Pixel(55, 55, 55)] * PIX_NUMBER
    assert stick.whole_state == 0


def test_gradient_fades_first_pixel_green_channel():
    stick = LedStick()
    frames = stick.gradient(0, 10, 0)
    assert len(frames) == 255
    assert stick.pixels[0] == Pixel(1, 0, 0)
    assert _pixel_bytes(frames[0], 0)[:8] == bytes([HIGH_TIDE]) * 8


def test_gradient_mixed_colour_does_nothing():
    stick = LedStick()
    assert stick.gradient(5, 5, 0) == []
    assert stick.pixels[0] == Pixel(0, 0, 0)


def test_show_level_lowest_band():
    stick = LedStick()
    stick.clear()
    stick.show_level(0)
    assert stick.pixels[0] == Pixel(25, 25, 0)
    assert stick.pixels[1:9] == [Pixel(0, 0, 0)] * 8


def test_show_level_full_band():
    stick = LedStick()
    stick.show_level(4100)
    assert stick.pixels[8] == Pixel(0, 250, 0)
    assert stick.pixels[2] == Pixel(132, 250, 0)


def test_show_level_out_of_range_keeps_pixels():
    stick = LedStick()
    stick.fill(7, 8, 9)
    stick.show_level(5000)
    assert stick.pixels == [Pixel(7, 8, 9)] * PIX_NUMBER


def test_show_level_untouched_tenth_pixel():
    stick = LedStick()
    stick.set_color(9, 3, 3, 3)
    stick.show_level(1000)
    assert stick.pixels[9] == Pixel(3, 3, 3)
    assert stick.pixels[2] == Pixel(24, 50, 0)