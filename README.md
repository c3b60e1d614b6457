# xbusparse

A streaming parser for the Xbus `MTData2` messages (bus id `0xFF`, message id
`0x36`) sent by Xsens MTi motion trackers. Bytes go in as they arrive from a
serial port or a capture file. Decoded values come out: orientation, inertial,
magnetic, barometric, position, velocity and GNSS PVT.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Parsing a byte stream

```python
from xbusparse.parser import Xbus, ParseStatus

xbus = Xbus()
xbus.feed(chunk)            # bytes from a serial port or a file
if xbus.read() == ParseStatus.OK:
    quat = xbus.quat        # latest quaternion (w, x, y, z)
    mag = xbus.get_mag()    # new double-precision magnetic field, else None
    pvt = xbus.get_gnss()   # new GNSS PVT record, else None
```

`Xbus.feed()` appends bytes to an input buffer, and `Xbus.available()` tells
how many are waiting. `Xbus.read()` consumes what a message needs and returns a
`ParseStatus`:

- `WAIT_BEGIN_BYTE`: the parser is looking for the start of a message.
- `WAIT_PACKET_BYTE`: a header was found and the rest of the message has not
  arrived yet.
- `FAIL`: a whole message was read but its checksum did not match.
- `OK`: a whole message was read and its checksum matched.

A packet with an unknown data id is logged as a warning, and the parser goes
back to looking for the start of a message.

Decoded values are kept in the attributes `quat`, `euler`, `gyro`, `accel`,
`free_accel`, `accel_hr`, `gyro_hr`, `mag`, `delta_v`, `latlon`, `velocity`
(tuples of floats), `altitude`, `temperature` (floats), `baro` (an integer)
and `gnss` (a `PvtData`).

The methods `get_gnss()`, `get_gyro_hr()`, `get_free_accel()` and `get_mag()`
return a value once after it is updated, and `None` until another update
arrives. `get_accel_hr()` does not clear its flag: once a high-rate
accelerometer packet has arrived, every call returns the latest reading.

## Motion data and angles

`xbusparse.motion.collect_motion_data(xbus)` takes a snapshot of the parser
into a `MotionData` record, with Euler angles computed from the quaternion.
`quat_to_euler` and `euler_to_quat` convert between a `(w, x, y, z)`
quaternion and 3-2-1 Euler angles `(roll, pitch, yaw)` in radians.

`format_quaternion`, `format_free_accel`, `format_magnetic_field`,
`format_temperature`, `format_baro`, `format_accel_hr`,
`format_rate_of_turn_hr`, `format_ins` and `format_gnss` each turn a
`MotionData` into one line of text, with floats shown to two decimals.

## Lower-level pieces

- `xbusparse.swap`: big-endian decoding (`swap_uint16`, `swap_uint32`,
  `swap_uint64`, `decode_float32`, `decode_float64`, `decode_floats`).
- `xbusparse.gnss.PvtData`: the GNSS PVT record, decoded by
  `PvtData.from_payload()`.
- `xbusparse.consts`: the `HeaderByte`, `DataId` and `Event` enumerations.
- `xbusparse.timer.SimpleTimer`: a microsecond stopwatch that wraps at 2**32.

## Command line

The `xbusparse` command reads an Xbus stream and prints one line for each
message that passes its checksum:

```
xbusparse /dev/ttyUSB0 --baud 2000000
xbusparse --file capture.bin
xbusparse --help
```

Each line holds these space-separated fields, in this order:

- the microseconds between the last two high-rate accelerometer updates
- the three accelerometer values
- the microseconds between the last two high-rate gyroscope updates
- the three gyroscope values
- the three magnetic field values
- the temperature

`--chunk-size` sets how many bytes are read at a time (256 by default). The
exit status is 1 when the port or file cannot be opened, and 2 for a chunk
size that is not positive.

## What it does not do

The package only reads. It does not send commands to the device, so it cannot
configure outputs, rates or baud rates. The device must already be set up to
stream `MTData2` messages. Other Xbus message types are skipped while the
parser looks for the start of a message.