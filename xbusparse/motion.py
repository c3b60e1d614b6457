"""Motion data snapshot gathered from an Xbus parser, and its text forms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from .parser import Xbus


@dataclass
class MotionData:
    """The values an MTi-600 class device reports, in double precision."""

    quat: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)
    euler: tuple[float, ...] = (0.0, 0.0, 0.0)
    mag: tuple[float, ...] = (0.0, 0.0, 0.0)
    temperature: float = 0.0
    baro: int = 0
    accel_hr: tuple[float, ...] = (0.0, 0.0, 0.0)
    gyro_hr: tuple[float, ...] = (0.0, 0.0, 0.0)
    free_accel: tuple[float, ...] = (0.0, 0.0, 0.0)
    latlon: tuple[float, ...] = (0.0, 0.0)
    altitude: float = 0.0
    velocity: tuple[float, ...] = (0.0, 0.0, 0.0)
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    lon: int = 0
    lat: int = 0
    height: int = 0


def quat_to_euler(quat: Sequence[float]) -> tuple[float, float, float]:
    """Return the 3-2-1 Euler angles (roll, pitch, yaw) of a (w, x, y, z) quaternion.

    The pitch is NaN when the quaternion is far enough from unit length that
    its sine falls outside [-1, 1].
    """
    q0, q1, q2, q3 = quat
    roll = math.atan2(2.0 * (q0 * q1 + q2 * q3), 1.0 - 2.0 * (q1 * q1 + q2 * q2))
    sine = 2.0 * (q0 * q2 - q1 * q3)
    pitch = math.asin(sine) if -1.0 <= sine <= 1.0 else math.nan
    yaw = math.atan2(2.0 * (q0 * q3 + q1 * q2), 1.0 - 2.0 * (q2 * q2 + q3 * q3))
    return roll, pitch, yaw


def euler_to_quat(euler: Sequence[float]) -> tuple[float, float, float, float]:
    """Return the (w, x, y, z) quaternion of 3-2-1 Euler angles (roll, pitch, yaw)."""
    phi, theta, psi = euler
    cphi, sphi = math.cos(phi / 2.0), math.sin(phi / 2.0)
    ctheta, stheta = math.cos(theta / 2.0), math.sin(theta / 2.0)
    cpsi, spsi = math.cos(psi / 2.0), math.sin(psi / 2.0)
    return (
        cphi * ctheta * cpsi + sphi * stheta * spsi,
        sphi * ctheta * cpsi - cphi * stheta * spsi,
        cphi * stheta * cpsi + sphi * ctheta * spsi,
        cphi * ctheta * spsi - sphi * stheta * cpsi,
    )


def collect_motion_data(xbus: Xbus) -> MotionData:
    """Take a snapshot of the values the parser holds."""
    quat = tuple(xbus.quat)
    gnss = xbus.gnss
    return MotionData(
        quat=quat,
        euler=quat_to_euler(quat),
        mag=tuple(xbus.mag),
        temperature=xbus.temperature,
        baro=xbus.baro,
        accel_hr=tuple(xbus.accel_hr),
        gyro_hr=tuple(xbus.gyro_hr),
        free_accel=tuple(xbus.free_accel),
        latlon=tuple(xbus.latlon),
        altitude=xbus.altitude,
        velocity=tuple(xbus.velocity),
        year=gnss.year,
        month=gnss.month,
        day=gnss.day,
        hour=gnss.hour,
        minute=gnss.minute,
        second=gnss.second,
        lon=gnss.lon,
        lat=gnss.lat,
        height=gnss.height,
    )


def _num(value: float) -> str:
    return f"{value:.2f}"


def _vector(values: Iterable[float]) -> str:
    return ", ".join(_num(v) for v in values)


def format_quaternion(data: MotionData) -> str:
    """One line with the orientation quaternion."""
    return f"Quaternion (w,x,y,z): ({_vector(data.quat)})"


def format_free_accel(data: MotionData) -> str:
    """One line with the free acceleration."""
    return f"Free Accel (m/ss): ({_vector(data.free_accel)})"


def format_magnetic_field(data: MotionData) -> str:
    """One line with the magnetic field."""
    return f"Mag: ({_vector(data.mag)})"


def format_temperature(data: MotionData) -> str:
    """One line with the temperature."""
    return f"Temperature (C): {_num(data.temperature)}"


def format_baro(data: MotionData) -> str:
    """One line with the barometric pressure."""
    return f"Barometric Pressure (Pa): {data.baro}"


def format_accel_hr(data: MotionData) -> str:
    """One line with the high-rate acceleration."""
    return f"Accel (HR)(m/ss): ({_vector(data.accel_hr)})"


def format_rate_of_turn_hr(data: MotionData) -> str:
    """One line with the high-rate rate of turn."""
    return f"Rate of Turn (HR)(m/ss): ({_vector(data.gyro_hr)})"


def format_ins(data: MotionData) -> str:
    """One line with position and velocity."""
    v0, v1, v2 = (_num(v) for v in data.velocity)
    return (
        f"INS Data | LLH: ({_vector(data.latlon)}, {_num(data.altitude)}) "
        f"| VelXYZ: ({v0},{v1}, {v2})"
    )


def format_gnss(data: MotionData) -> str:
    """One line with the GNSS date, time and position."""
    return (
        f"Pvt Data | {data.year}-{data.month}-{data.day} "
        f"| {data.hour}:{data.minute}:{data.second} "
        f"| LLH: ({data.lat}, {data.lon}, {data.height})"
    )