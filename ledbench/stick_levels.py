"""Bar-graph colours for the LED stick driven by a potentiometer reading."""

from __future__ import annotations

from bisect import bisect_left

LIT_PIXELS = 9
BAND_WIDTH = 50
MAX_READING = 4100

Colour = tuple[int, int, int]

_FULL = (250, 250)
_P1 = (_FULL,)
_P2 = _P1 + (_FULL,)
_P3 = _P2 + ((132, 250),)
_P4 = _P3 + ((120, 250),)
_P5 = _P4 + ((165, 250),)
_P6 = _P5 + ((165, 250),)
_P7 = _P6 + ((165, 250),)
_P8 = _P7 + ((0, 250),)

# (highest reading in the band, (green, red) of each lit pixel from pixel 0)
_BANDS: tuple[tuple[int, tuple[tuple[int, int], ...]], ...] = (
    (50, ((25, 25),)),
    (100, ((50, 50),)),
    (150, ((75, 75),)),
    (200, ((100, 100),)),
    (250, ((125, 125),)),
    (300, ((150, 150),)),
    (350, ((175, 175),)),
    (400, ((200, 200),)),
    (450, ((225, 225),)),
    (500, _P1 + ((25, 25),)),
    (550, _P1 + ((50, 50),)),
    (600, _P1 + ((75, 75),)),
    (650, _P1 + ((100, 100),)),
    (700, _P1 + ((125, 125),)),
    (750, _P1 + ((150, 150),)),
    (800, _P1 + ((175, 175),)),
    (850, _P1 + ((200, 200),)),
    (900, _P1 + ((225, 225),)),
    (950, _P2 + ((12, 25),)),
    (1000, _P2 + ((24, 50),)),
    (1050, _P2 + ((36, 75),)),
    (1100, _P2 + ((48, 100),)),
    (1150, _P2 + ((60, 125),)),
    (1200, _P2 + ((72, 150),)),
    (1250, _P2 + ((84, 175),)),
    (1300, _P2 + ((96, 200),)),
    (1350, _P2 + ((108, 225),)),
    (1400, _P2 + ((120, 250),)),
    (1450, _P2 + ((120, 250), (12, 25))),
    (1500, _P3 + ((24, 50),)),
    (1550, _P3 + ((36, 75),)),
    (1600, _P3 + ((48, 100),)),
    (1650, _P3 + ((60, 125),)),
    (1700, _P3 + ((72, 150),)),
    (1750, _P3 + ((84, 175),)),
    (1800, _P3 + ((96, 200),)),
    (1850, _P3 + ((108, 225),)),
    (1900, _P4),
    (1950, _P4 + ((10, 25),)),
    (2000, _P4 + ((20, 50),)),
    (2050, _P4 + ((20, 75),)),
    (2100, _P4 + ((20, 100),)),
    (2150, _P4 + ((20, 125),)),
    (2200, _P4 + ((20, 150),)),
    (2250, _P4 + ((20, 175),)),
    (2300, _P4 + ((40, 200),)),
    (2350, _P4 + ((100, 225),)),
    (2400, _P5),
    (2450, _P5 + ((10, 25),)),
    (2500, _P5 + ((20, 50),)),
    (2550, _P5 + ((20, 75),)),
    (2600, _P5 + ((20, 100),)),
    (2650, _P5 + ((20, 125),)),
    (2700, _P5 + ((20, 150),)),
    (2750, _P5 + ((20, 175),)),
    (2800, _P5 + ((40, 200),)),
    (2850, _P5 + ((100, 225),)),
    (2900, _P6),
    (2950, _P6 + ((10, 25),)),
    (3000, _P6 + ((20, 50),)),
    (3050, _P6 + ((20, 75),)),
    (3100, _P6 + ((20, 100),)),
    (3150, _P6 + ((20, 125),)),
    (3200, _P6 + ((20, 150),)),
    (3250, _P6 + ((20, 175),)),
    (3300, _P6 + ((40, 200),)),
    (3350, _P6 + ((100, 225),)),
    (3400, _P7),
    (3450, _P7 + ((0, 25),)),
    (3500, _P7 + ((0, 50),)),
    (3550, _P7 + ((0, 75),)),
    (3600, _P7 + ((0, 100),)),
    (3650, _P7 + ((0, 125),)),
    (3700, _P7 + ((0, 150),)),
    (3750, _P7 + ((0, 175),)),
    (3800, _P7 + ((0, 200),)),
    (3850, _P7 + ((0, 225),)),
    (3900, _P8),
    (3950, _P8 + ((0, 100),)),
    (4000, _P8 + ((0, 150),)),
    (4050, _P8 + ((0, 200),)),
    (4100, _P8 + ((0, 250),)),
)


def _expand(lit: tuple[tuple[int, int], ...]) -> tuple[Colour, ...]:
    colours = [(green, red, 0) for green, red in lit]
    colours.extend([(0, 0, 0)] * (LIT_PIXELS - len(colours)))
    return tuple(colours)


LEVEL_BANDS: tuple[tuple[int, tuple[Colour, ...]], ...] = tuple(
    (upper, _expand(lit)) for upper, lit in _BANDS
)

_UPPER_BOUNDS = [upper for upper, _ in LEVEL_BANDS]


def level_pattern(reading: int) -> tuple[Colour, ...] | None:
    """(green, red, blue) of the first nine pixels for an ADC reading.

    Returns None for readings above the last band, which leave the stick
    as it was.
    """
    if reading < 0:
        raise ValueError(f"ADC reading {reading} is negative")
    band = bisect_left(_UPPER_BOUNDS, reading)
    if band >= len(LEVEL_BANDS):
        return None
    return LEVEL_BANDS[band][1]