"""Orientation stored as a quaternion, with Euler-angle conversion."""

from __future__ import annotations

import math

# Quaternions are (w, x, y, z) tuples; Euler angles are (pitch, yaw, roll) in radians.
Quat = tuple[float, float, float, float]
Vec3 = tuple[float, float, float]

IDENTITY: Quat = (1.0, 0.0, 0.0, 0.0)
_EPSILON = 1.1920929e-07


def quat_from_eulers(eulers: Vec3) -> Quat:
    """Build a quaternion from pitch, yaw and roll angles."""
    cx, cy, cz = (math.cos(a * 0.5) for a in eulers)
    sx, sy, sz = (math.sin(a * 0.5) for a in eulers)
    return (
        cx * cy * cz + sx * sy * sz,
        sx * cy * cz - cx * sy * sz,
        cx * sy * cz + sx * cy * sz,
        cx * cy * sz - sx * sy * cz,
    )


def eulers_from_quat(orientation: Quat) -> Vec3:
    """Return the pitch, yaw and roll angles of ``orientation``."""
    w, x, y, z = orientation

    py = 2.0 * (y * z + w * x)
    px = w * w - x * x - y * y + z * z
    if abs(px) < _EPSILON and abs(py) < _EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(py, px)

    yaw = math.asin(max(-1.0, min(1.0, -2.0 * (x * z - w * y))))

    ry = 2.0 * (x * y + w * z)
    rx = w * w + x * x - y * y - z * z
    if abs(rx) < _EPSILON and abs(ry) < _EPSILON:
        roll = 0.0
    else:
        roll = math.atan2(ry, rx)
    return (pitch, yaw, roll)


class Quaternion:
    """An orientation that can be set from a quaternion or from Euler angles."""

    def __init__(self, orientation: Quat | None = None, *, eulers: Vec3 | None = None) -> None:
        if orientation is not None and eulers is not None:
            raise ValueError("give either an orientation or Euler angles, not both")
        self._orientation: Quat = IDENTITY
        if orientation is not None:
            self.set_orientation(orientation)
        elif eulers is not None:
            self.set_eulers(eulers)

    @property
    def orientation(self) -> Quat:
        return self._orientation

    @property
    def eulers(self) -> Vec3:
        return eulers_from_quat(self._orientation)

    def set_orientation(self, orientation: Quat) -> None:
        self._orientation = tuple(float(c) for c in orientation)  # type: ignore[assignment]

    def set_eulers(self, eulers: Vec3) -> None:
        self._orientation = quat_from_eulers(eulers)

    def __repr__(self) -> str:
        return f"Quaternion({self._orientation!r})"