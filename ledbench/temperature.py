"""ADC-count to temperature lookup for an LMT87 analog sensor."""

from __future__ import annotations

# (degrees Celsius, minimum ADC count), with counts falling as temperature rises.
TEMPERATURE_TABLE: tuple[tuple[int, int], ...] = (
    (10, 3102),
    (11, 3085),
    (12, 3069),
    (13, 3051),
    (14, 3035),
    (15, 3019),
    (16, 3002),
    (17, 2986),
    (18, 2968),
    (19, 2952),
    (20, 2935),
    (21, 2919),
    (22, 2901),
    (23, 2885),
    (24, 2868),
    (25, 2852),
)


def adc_to_celsius(adc_value: int) -> int:
    """Temperature of the first table entry whose count ``adc_value`` reaches."""
    for celsius, threshold in TEMPERATURE_TABLE:
        if adc_value >= threshold:
            return celsius
    raise ValueError(
        f"ADC count {adc_value} is below the table minimum {TEMPERATURE_TABLE[-1][1]}"
    )