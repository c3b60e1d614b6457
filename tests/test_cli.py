import io
import struct

import pytest

from xbusparse.cli import Mti1Data, format_line, main, stream


def _message(*packets):
    body = b"".join(
        bytes([data_id >> 8, data_id & 0xFF, len(payload)]) + payload
        for data_id, payload in packets
    )
    head = bytes([0xFF, 0x36, len(body)])
    checksum = (-sum(head + body)) & 0xFF
    return b"\xFA" + head + body + bytes([checksum])


ACCEL = (1.5, -2.25, 9.75)
GYRO = (0.5, 0.25, -0.125)
MAG = (0.75, -1.5, 2.5)
TEMP = 23.5


def _full_message():
    return _message(
        (0x4040, struct.pack(">3f", *ACCEL)),
        (0x8040, struct.pack(">3f", *GYRO)),
        (0xC023, struct.pack(">3d", *MAG)),
        (0x0813, struct.pack(">d", TEMP)),
    )


def _readings(line):
    tokens = line.split(" ")
    return tokens, [float(t) for t in tokens[1:4]], [float(t) for t in tokens[5:8]], \
        [float(t) for t in tokens[8:11]], float(tokens[11])


def test_format_line_layout():
    data = Mti1Data(accelerometer=ACCEL, gyroscope=GYRO, magnetometer=MAG, temperature=TEMP)
    tokens, accel, gyro, mag, temp = _readings(format_line(data, 1000, 1002))
    assert len(tokens) == 12
    assert tokens[0] == "1000"
    assert tokens[4] == "1002"
    assert accel == pytest.approx(ACCEL, abs=0.005)
    assert gyro == pytest.approx(GYRO, abs=0.005)
    assert mag == pytest.approx(MAG, abs=0.005)
    assert temp == TEMP


def test_format_line_uses_two_decimals():
    data = Mti1Data(temperature=1.0 / 3.0)
    assert format_line(data, 0, 0).endswith(" 0.33")


@pytest.mark.parametrize("chunk_size", [1, 7, 256])
def test_stream_writes_a_line_per_message(chunk_size):
    source = io.BytesIO(_full_message() * 2)
    out = io.StringIO()
    assert stream(source, out, chunk_size) == 2
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    for line in lines:
        tokens, accel, gyro, mag, temp = _readings(line)
        assert len(tokens) == 12
        assert accel == pytest.approx(ACCEL, abs=0.005)
        assert gyro == pytest.approx(GYRO, abs=0.005)
        assert mag == pytest.approx(MAG, abs=0.005)
        assert temp == TEMP


def test_stream_skips_noise_before_message():
    source = io.BytesIO(b"\x00\x12\xFA\x01\x02\x03" + _full_message())
    out = io.StringIO()
    assert stream(source, out) == 1
    assert len(out.getvalue().splitlines()) == 1


def test_stream_drops_bad_checksum():
    broken = bytearray(_full_message())
    broken[-1] ^= 0xFF
    out = io.StringIO()
    assert stream(io.BytesIO(bytes(broken) + _full_message()), out) == 1
    assert len(out.getvalue().splitlines()) == 1


def test_stream_empty_source():
    out = io.StringIO()
    assert stream(io.BytesIO(b""), out) == 0
    assert out.getvalue() == ""


def test_stream_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        stream(io.BytesIO(_full_message()), io.StringIO(), 0)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "capture.bin"
    path.write_bytes(_full_message() * 3)
    assert main(["--file", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert float(lines[0].split(" ")[-1]) == TEMP


def test_main_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "absent.bin")]) == 1
    assert "error" in capsys.readouterr().err