"""Register image of the MCP7940N real-time clock, all fields in BCD."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MCP7940N_I2C_ADDR = 0x6F

RTC_NUM_TIME_REGS = 0x07
RTC_SEC_REG = 0x00
RTC_MIN_REG = 0x01
RTC_HR_REG = 0x02
RTC_WKDAY_REG = 0x03
RTC_DATE_REG = 0x04
RTC_MTH_REG = 0x05
RTC_YR_REG = 0x06
CONTROL_REG = 0x07

ST_BIT = 0x80
VBATEN_BIT = 0x08

_FIELDS = ("seconds", "minutes", "hours", "weekday", "date", "month", "year")
_SET_BITS = {RTC_SEC_REG: ST_BIT, RTC_WKDAY_REG: VBATEN_BIT}


@dataclass
class RtcTime:
    """Timekeeping registers of the clock, each holding a BCD byte."""

    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    weekday: int = 0
    date: int = 0
    month: int = 0
    year: int = 0

    def write_register(self, index: int) -> int:
        """Byte sent at position ``index`` of a write transaction.

        Position 0 is the register pointer; positions 1 to 7 carry the time
        registers, with the oscillator-start and battery-enable bits set.
        """
        if index == 0:
            return RTC_SEC_REG
        if not 1 <= index <= RTC_NUM_TIME_REGS:
            raise ValueError(f"write position {index} is out of range")
        register = index - 1
        return getattr(self, _FIELDS[register]) | _SET_BITS.get(register, 0)

    def write_bytes(self) -> bytes:
        """Whole write transaction: register pointer followed by the time."""
        return bytes(self.write_register(index) for index in range(RTC_NUM_TIME_REGS + 1))

    def read_register(self, index: int, value: int) -> None:
        """Store the byte read from time register ``index``."""
        if not 0 <= index < RTC_NUM_TIME_REGS:
            raise ValueError(f"register {index} is not a time register")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"register value {value} does not fit in a byte")
        setattr(self, _FIELDS[index], value)

    @classmethod
    def from_registers(cls, registers: Iterable[int]) -> RtcTime:
        """Build a time from the seven bytes of a read transaction."""
        values = list(registers)
        if len(values) != RTC_NUM_TIME_REGS:
            raise ValueError(f"expected {RTC_NUM_TIME_REGS} registers, got {len(values)}")
        rtc_time = cls()
        for index, value in enumerate(values):
            rtc_time.read_register(index, value)
        return rtc_time