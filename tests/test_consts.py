import pytest

from xbusparse.consts import DataId, Event, HeaderByte


def test_from_bytes_temperature():
    assert DataId.from_bytes(0x08, 0x13) is DataId.TEMPERATURE_DOUBLE


def test_from_bytes_gnss():
    assert DataId.from_bytes(0x70, 0x10) is DataId.GNSS_PVTDATA_ENU


@pytest.mark.parametrize("member", list(DataId))
def test_from_bytes_round_trip(member):
    assert DataId.from_bytes(member >> 8, member & 0xFF) is member


def test_from_bytes_unknown_id():
    with pytest.raises(ValueError):
        DataId.from_bytes(0x00, 0x00)


@pytest.mark.parametrize("high, low", [(256, 0), (0, -1)])
def test_from_bytes_out_of_range(high, low):
    with pytest.raises(ValueError):
        DataId.from_bytes(high, low)


def test_header_bytes_lookup_by_value():
    assert HeaderByte(0xFA) is HeaderByte.PREAMBLE
    assert HeaderByte(0x36) is HeaderByte.MID


def test_event_lookup_by_value():
    assert Event(1) is Event.WAIT_PACKETS