"""Stream high-rate accelerometer, gyroscope and magnetometer data as text lines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import BinaryIO, Sequence, TextIO

from .parser import ParseStatus, Xbus
from .timer import SimpleTimer

DEFAULT_BAUD_RATE = 2_000_000
DEFAULT_CHUNK_SIZE = 256


@dataclass
class Mti1Data:
    """Latest readings of an MTi-1 class device."""

    accelerometer: tuple[float, ...] = (0.0, 0.0, 0.0)
    gyroscope: tuple[float, ...] = (0.0, 0.0, 0.0)
    magnetometer: tuple[float, ...] = (0.0, 0.0, 0.0)
    temperature: float = 0.0


def format_line(data: Mti1Data, accel_duration: int, gyro_duration: int) -> str:
    """One space-separated line: durations in microseconds, then the readings."""
    parts = [str(accel_duration)]
    parts += (f"{v:.2f}" for v in data.accelerometer)
    parts.append(str(gyro_duration))
    parts += (f"{v:.2f}" for v in data.gyroscope)
    parts += (f"{v:.2f}" for v in data.magnetometer)
    parts.append(f"{data.temperature:.2f}")
    return " ".join(parts)


def stream(source: BinaryIO, out: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Parse every message read from source and write a line for each good one.

    Returns the number of messages that passed their checksum.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk size must be positive, got {chunk_size!r}")
    xbus = Xbus()
    data = Mti1Data()
    accel_timer = SimpleTimer()
    gyro_timer = SimpleTimer()
    count = 0

    while chunk := source.read(chunk_size):
        xbus.feed(chunk)
        while True:
            before = xbus.available()
            if xbus.read() == ParseStatus.OK:
                count += 1
                accel = xbus.get_accel_hr()
                if accel is not None:
                    data.accelerometer = accel
                    accel_timer.elapsed()
                    accel_timer.begin()
                gyro = xbus.get_gyro_hr()
                if gyro is not None:
                    data.gyroscope = gyro
                    gyro_timer.elapsed()
                    gyro_timer.begin()
                data.magnetometer = tuple(xbus.mag)
                data.temperature = xbus.temperature
                out.write(format_line(data, accel_timer.duration, gyro_timer.duration) + "\n")
            if xbus.available() == before:
                break
    out.flush()
    return count


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xbusparse", description="Print readings from an Xbus data stream."
    )
    parser.add_argument("source", help="serial port, or a file with --file")
    parser.add_argument("--file", action="store_true", help="read a recorded byte stream")
    parser.add_argument("--baud", type=int, default=DEFAULT_BAUD_RATE, help="serial baud rate")
    parser.add_argument(
        "--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE, help="bytes read at a time"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool; returns the exit status."""
    args = _parse_args(argv)
    try:
        if args.file:
            try:
                with open(args.source, "rb") as source:
                    stream(source, sys.stdout, args.chunk_size)
            except OSError as exc:
                print(f"error: {exc}", file=sys.stderr)
                return 1
        else:
            import serial

            try:
                with serial.Serial(args.source, args.baud, timeout=None) as line:
                    stream(line, sys.stdout, args.chunk_size)
            except serial.SerialException as exc:
                print(f"error: {exc}", file=sys.stderr)
                return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())