from xbusparse.gnss import PvtData


def _payload(**parts):
    buf = bytearray(PvtData.SIZE)
    for offset, chunk in parts.values():
        buf[offset : offset + len(chunk)] = chunk
    return bytes(buf)


def test_record_size_matches_packed_layout():
    assert PvtData.SIZE == 94
    payload = bytes(92) + (0x1234).to_bytes(2, "big")
    pvt = PvtData.from_payload(payload)
    assert pvt.e_dop == 0x1234
    assert pvt.n_dop == 0


def test_date_and_time_fields():
    payload = _payload(
        year=(4, (2023).to_bytes(2, "big")),
        date=(6, bytes([1, 7, 12, 34, 56])),
    )
    pvt = PvtData.from_payload(payload)
    assert (pvt.year, pvt.month, pvt.day) == (2023, 1, 7)
    assert (pvt.hour, pvt.minute, pvt.second) == (12, 34, 56)


def test_position_fields_are_signed():
    payload = _payload(
        lon=(24, (1215000000).to_bytes(4, "big", signed=True)),
        lat=(28, (-250000000).to_bytes(4, "big", signed=True)),
        height=(32, (-1500).to_bytes(4, "big", signed=True)),
    )
    pvt = PvtData.from_payload(payload)
    assert pvt.lon == 1215000000
    assert pvt.lat == -250000000
    assert pvt.height == -1500


def test_trailing_dop_field():
    payload = _payload(e_dop=(92, (321).to_bytes(2, "big")))
    assert PvtData.from_payload(payload).e_dop == 321


def test_empty_payload_gives_zero_record():
    assert PvtData.from_payload(b"") == PvtData()


def test_short_payload_is_zero_filled():
    payload = (7).to_bytes(4, "big") + (2024).to_bytes(2, "big")
    pvt = PvtData.from_payload(payload)
    assert pvt.itow == 7
    assert pvt.year == 2024
    assert pvt.lon == 0


def test_extra_bytes_ignored():
    payload = _payload(year=(4, (2022).to_bytes(2, "big")))
    assert PvtData.from_payload(payload + b"\xff" * 4) == PvtData.from_payload(payload)