"""Map potentiometer ADC readings to the pattern timer period."""

from __future__ import annotations

from bisect import bisect_left

DEFAULT_PERIOD = 32768
FASTEST_PERIOD = 3277

# (highest reading in the band, timer compare value)
PERIOD_BANDS: tuple[tuple[int, int], ...] = (
    (256, 32768),
    (512, 30933),
    (768, 29163),
    (1024, 27197),
    (1280, 25559),
    (1536, 23593),
    (1792, 21627),
    (2048, 19988),
    (2304, 18022),
    (2560, 16384),
    (2816, 14418),
    (3072, 12452),
    (3328, 10813),
    (3584, 8847),
    (3840, 7209),
    (4096, 5243),
)

_UPPER_BOUNDS = [upper for upper, _ in PERIOD_BANDS]


def period_for_reading(reading: int) -> int:
    """Timer compare value for an ADC reading; higher readings run faster."""
    if reading < 0:
        raise ValueError(f"ADC reading {reading} is negative")
    band = bisect_left(_UPPER_BOUNDS, reading)
    if band < len(PERIOD_BANDS):
        return PERIOD_BANDS[band][1]
    return FASTEST_PERIOD