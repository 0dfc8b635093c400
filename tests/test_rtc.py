import pytest

from ledbench.rtc import RTC_NUM_TIME_REGS, ST_BIT, VBATEN_BIT, RtcTime


def initial_time():
    return RtcTime(0, 0, 0x10, 0x05, 0x20, 0x05, 0x26)


def test_write_transaction_for_initial_time():
    assert initial_time().write_bytes() == bytes(
        [0x00, 0x80, 0x00, 0x10, 0x0D, 0x20, 0x05, 0x26]
    )


def test_write_sequence_matches_per_register_calls():
    rtc_time = initial_time()
    sent = [rtc_time.write_register(index) for index in range(RTC_NUM_TIME_REGS + 1)]
    assert bytes(sent) == rtc_time.write_bytes()
    assert len(sent) == RTC_NUM_TIME_REGS + 1


def test_pointer_byte_is_seconds_register():
    assert initial_time().write_register(0) == 0x00


def test_control_bits_added_on_write():
    rtc_time = initial_time()
    assert rtc_time.write_register(1) & ST_BIT
    assert rtc_time.write_register(4) & VBATEN_BIT
    assert rtc_time.weekday == 0x05


@pytest.mark.parametrize("index", [-1, 8])
def test_write_position_out_of_range(index):
    with pytest.raises(ValueError):
        initial_time().write_register(index)


def test_read_sequence_fills_fields():
    rtc_time = RtcTime()
    for index, value in enumerate([0x30, 0x59, 0x23, 0x02, 0x15, 0x08, 0x26]):
        rtc_time.read_register(index, value)
    assert rtc_time == RtcTime(0x30, 0x59, 0x23, 0x02, 0x15, 0x08, 0x26)


def test_from_registers_after_write_keeps_control_bits():
    written = initial_time().write_bytes()
    read_back = RtcTime.from_registers(written[1:])
    assert read_back.seconds == 0x80
    assert read_back.weekday == 0x0D
    assert read_back.hours == 0x10
    assert read_back.year == 0x26


def test_from_registers_wrong_count():
    with pytest.raises(ValueError):
        RtcTime.from_registers([0, 0, 0])


@pytest.mark.parametrize("index, value", [(7, 0), (-1, 0), (0, 256)])
def test_read_register_rejects_bad_input(index, value):
    with pytest.raises(ValueError):
        RtcTime().read_register(index, value)